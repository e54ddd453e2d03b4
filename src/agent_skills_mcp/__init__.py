"""Agent skills: discover skill directories and expose them to MCP servers."""

from agent_skills_mcp.file_store import PhysicalSkillFileStore, SkillFileStore
from agent_skills_mcp.frontmatter import parse_frontmatter
from agent_skills_mcp.parser import SUPPORTED_SKILL_FILE_NAMES, parse_skill_file
from agent_skills_mcp.prompts import SkillPromptProvider
from agent_skills_mcp.resources import SkillResourceProvider
from agent_skills_mcp.types import (
    ParsedSkill,
    SkillFileEntry,
    SkillPrompt,
    SkillResource,
)
from agent_skills_mcp.yaml_parser import parse_skill_yaml

__all__ = [
    "SUPPORTED_SKILL_FILE_NAMES",
    "ParsedSkill",
    "PhysicalSkillFileStore",
    "SkillFileEntry",
    "SkillFileStore",
    "SkillPrompt",
    "SkillPromptProvider",
    "SkillResource",
    "SkillResourceProvider",
    "parse_frontmatter",
    "parse_skill_file",
    "parse_skill_yaml",
]
