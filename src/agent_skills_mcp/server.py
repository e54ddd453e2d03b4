"""Register discovered skills with an MCP server."""

import logging

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.prompts import Prompt
from mcp.server.fastmcp.resources import TextResource

from agent_skills_mcp.config_models import SkillsConfig
from agent_skills_mcp.file_store import PhysicalSkillFileStore
from agent_skills_mcp.prompts import SkillPromptProvider
from agent_skills_mcp.resources import SkillResourceProvider
from agent_skills_mcp.types import SkillPrompt, SkillResource

logger = logging.getLogger(__name__)


def build_providers(
    config: SkillsConfig,
) -> tuple[SkillPromptProvider, SkillResourceProvider]:
    """Create the file store and both providers for ``config``.

    Nothing is read from disk until the providers are first queried.
    """
    file_store = PhysicalSkillFileStore(config.skills_path)
    prompt_provider = SkillPromptProvider(
        file_store, skill_file_names=config.skill_file_names
    )
    resource_provider = SkillResourceProvider(
        file_store,
        companion_dir=config.effective_companion_dir,
        companion_description=config.companion_description,
        skill_file_names=config.skill_file_names,
    )
    return prompt_provider, resource_provider


def _to_mcp_prompt(prompt: SkillPrompt) -> Prompt:
    def render() -> str:
        return prompt.render()

    return Prompt.from_function(
        render, name=prompt.name, description=prompt.description
    )


def _to_mcp_resource(resource: SkillResource) -> TextResource:
    return TextResource(
        uri=resource.uri,
        name=resource.name,
        description=resource.description,
        mime_type=resource.mime_type,
        text=resource.read(),
    )


async def register_skills(
    server: FastMCP,
    prompt_provider: SkillPromptProvider,
    resource_provider: SkillResourceProvider,
) -> tuple[int, int]:
    """Load skills from both providers and add them to ``server``.

    Individual prompts or resources that the server rejects (for example a
    skill name that does not form a valid URI) are logged and skipped.

    Returns:
        The number of prompts and resources registered.
    """
    if server is None:
        raise TypeError("server must not be None")

    prompt_count = 0
    for prompt in await prompt_provider.get_prompts():
        try:
            server.add_prompt(_to_mcp_prompt(prompt))
        except ValueError as e:
            logger.warning("Could not register prompt '%s': %s", prompt.name, e)
            continue
        prompt_count += 1

    resource_count = 0
    for resource in await resource_provider.get_resources():
        try:
            server.add_resource(_to_mcp_resource(resource))
        except ValueError as e:
            logger.warning("Could not register resource '%s': %s", resource.uri, e)
            continue
        resource_count += 1

    logger.info(
        "Registered %d prompt(s) and %d resource(s) with MCP server '%s'",
        prompt_count,
        resource_count,
        server.name,
    )
    return prompt_count, resource_count


async def create_server(config: SkillsConfig) -> FastMCP:
    """Build a FastMCP server exposing the skills described by ``config``."""
    prompt_provider, resource_provider = build_providers(config)
    server = FastMCP(config.server_name)
    await register_skills(server, prompt_provider, resource_provider)
    return server
