"""Pick the right parser for a skill definition file."""

from agent_skills_mcp.frontmatter import parse_frontmatter
from agent_skills_mcp.types import ParsedSkill
from agent_skills_mcp.yaml_parser import parse_skill_yaml

# Lookup priority: the first of these found in a skill directory wins.
SUPPORTED_SKILL_FILE_NAMES: tuple[str, ...] = (
    "SKILL.md",
    "SKILL.yaml",
    "SKILL.yml",
)

MARKDOWN_MIME_TYPE = "text/markdown"
YAML_MIME_TYPE = "text/yaml"
PLAIN_TEXT_MIME_TYPE = "text/plain"

_MARKDOWN_SUFFIXES = (".md",)
_YAML_SUFFIXES = (".yaml", ".yml")


def is_markdown_file(file_name: str) -> bool:
    return file_name.lower().endswith(_MARKDOWN_SUFFIXES)


def is_yaml_file(file_name: str) -> bool:
    return file_name.lower().endswith(_YAML_SUFFIXES)


def is_supported_skill_file(file_name: str) -> bool:
    return is_markdown_file(file_name) or is_yaml_file(file_name)


def parse_skill_file(file_name: str | None, content: str | None) -> ParsedSkill | None:
    """Parse a skill file, choosing the format from its suffix.

    ``.md`` files are read as front matter plus body, ``.yaml``/``.yml`` as a
    YAML document. Any other suffix, or a blank name or content, returns
    ``None`` without attempting a parse.
    """
    if not file_name or not file_name.strip():
        return None
    if not content or not content.strip():
        return None

    if is_markdown_file(file_name):
        return parse_frontmatter(content)
    if is_yaml_file(file_name):
        return parse_skill_yaml(content)
    return None


def get_mime_type(file_name: str) -> str:
    if is_markdown_file(file_name):
        return MARKDOWN_MIME_TYPE
    if is_yaml_file(file_name):
        return YAML_MIME_TYPE
    return PLAIN_TEXT_MIME_TYPE
