import argparse
import asyncio
import logging
import sys
from pathlib import Path

from agent_skills_mcp.config_loader import load_config
from agent_skills_mcp.config_models import PROFILE_COMPANIONS, SkillsConfig
from agent_skills_mcp.mount import mount_skills
from agent_skills_mcp.server import build_providers, create_server

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="agent-skills-mcp",
        description="Serve agent skills as MCP prompts and resources over stdio.",
    )
    parser.add_argument("--config", help="YAML configuration file")
    parser.add_argument(
        "--skills-path",
        help="Skills directory (default: .agents/skills beside the entry script)",
    )
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILE_COMPANIONS),
        help="Companion directory layout (references/ or examples/)",
    )
    parser.add_argument(
        "--mount",
        metavar="SOURCE",
        help="Copy bundled skills from SOURCE into the project before serving",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print discovered prompts and resources, then exit",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def apply_cli_overrides(config: SkillsConfig, args: argparse.Namespace) -> SkillsConfig:
    updates: dict[str, str] = {}
    if args.skills_path:
        updates["path"] = args.skills_path
    if args.profile:
        updates["profile"] = args.profile
    return config.model_copy(update=updates) if updates else config


async def list_skills(config: SkillsConfig) -> None:
    prompt_provider, resource_provider = build_providers(config)
    prompts = await prompt_provider.get_prompts()
    resources = await resource_provider.get_resources()

    print(f"Skills directory: {config.skills_path}")
    print(f"Prompts ({len(prompts)}):")
    for prompt in prompts:
        print(f"  {prompt.name}: {prompt.description}")
    print(f"Resources ({len(resources)}):")
    for resource in resources:
        print(f"  {resource.uri} [{resource.mime_type}]")


async def serve(config: SkillsConfig) -> None:
    server = await create_server(config)
    await server.run_stdio_async()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    # stdout carries the MCP stdio transport, so logs go to stderr.
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
    )

    config = apply_cli_overrides(load_config(args.config), args)

    if args.mount:
        mounted = mount_skills(Path(args.mount))
        if mounted is not None:
            config = config.model_copy(update={"path": str(mounted)})

    if args.list:
        asyncio.run(list_skills(config))
        return 0

    logger.info("Serving skills from %s", config.skills_path)
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
