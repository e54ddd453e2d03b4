"""Configuration loading with a clear priority hierarchy.

Configuration is loaded in the following priority order (lowest to highest):
1. Pydantic model defaults (defined in config_models.py)
2. The YAML config file, if one is given
3. Environment variables, optionally seeded from a ``.env`` file
4. CLI arguments (applied after load_config returns)
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from agent_skills_mcp.config_models import SkillsConfig, yaml_config_files

if TYPE_CHECKING:
    import pathlib

logger = logging.getLogger(__name__)


def load_config(
    config_file_path: str | pathlib.Path | None = None,
    *,
    load_dotenv_file: bool = True,
) -> SkillsConfig:
    """Load the skills configuration.

    Args:
        config_file_path: Optional YAML file with ``SkillsConfig`` keys
        load_dotenv_file: Whether to load a ``.env`` file into the environment
            first (existing environment variables win)

    Returns:
        A validated SkillsConfig

    Raises:
        ValidationError: If the configuration contains unknown keys or
            invalid values
    """
    if load_dotenv_file:
        load_dotenv()

    yaml_files = []
    if config_file_path is not None:
        if os.path.exists(config_file_path):
            yaml_files.append(config_file_path)
        else:
            logger.info("%s not found. Using defaults.", config_file_path)

    token = yaml_config_files.set(tuple(yaml_files))
    try:
        config = SkillsConfig()
    finally:
        yaml_config_files.reset(token)

    logger.info(
        "Loaded skills config: path=%s profile=%s companion_dir=%s",
        config.skills_path,
        config.profile,
        config.effective_companion_dir,
    )
    return config
