"""Pydantic settings for skill discovery.

Configuration priority (lowest to highest):
1. Code defaults (defined in model Field defaults)
2. YAML config file
3. Environment variables (``AGENT_SKILLS_*``)
4. Keyword arguments / CLI overrides
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from agent_skills_mcp.config_sources import YamlConfigSource
from agent_skills_mcp.parser import SUPPORTED_SKILL_FILE_NAMES, is_supported_skill_file
from agent_skills_mcp.paths import get_default_skills_dir

if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource

# YAML files consulted by SkillsConfig(); set by config_loader.load_config.
yaml_config_files: ContextVar[tuple[str | Path, ...]] = ContextVar(
    "yaml_config_files", default=()
)

SkillsProfile = Literal["references", "examples"]

# Companion directory name and resource description per profile.
PROFILE_COMPANIONS: dict[str, tuple[str, str]] = {
    "references": ("references", "Reference for {skill}"),
    "examples": ("examples", "Example for {skill}"),
}


class SkillsConfig(BaseSettings):
    """Where skills are loaded from and how their directories are laid out."""

    model_config = SettingsConfigDict(env_prefix="AGENT_SKILLS_", extra="forbid")

    path: str | None = None  # None means <cwd>/.agents/skills
    profile: SkillsProfile = "references"
    companion_dir: str | None = None  # Overrides the profile's directory name
    skill_file_names: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(SUPPORTED_SKILL_FILE_NAMES)
    )
    server_name: str = "agent-skills"

    @field_validator("skill_file_names", mode="before")
    @classmethod
    def _split_file_names(cls, value: object) -> object:
        if isinstance(value, str):
            return [name.strip() for name in value.split(",") if name.strip()]
        return value

    @field_validator("skill_file_names")
    @classmethod
    def _check_file_names(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one skill file name is required")
        unsupported = [name for name in value if not is_supported_skill_file(name)]
        if unsupported:
            raise ValueError(
                f"unsupported skill file names (need .md, .yaml or .yml): {unsupported}"
            )
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSource(settings_cls, list(yaml_config_files.get())),
        )

    @property
    def skills_path(self) -> Path:
        if self.path:
            return Path(self.path).expanduser().absolute()
        return get_default_skills_dir()

    @property
    def effective_companion_dir(self) -> str:
        if self.companion_dir:
            return self.companion_dir
        return PROFILE_COMPANIONS[self.profile][0]

    @property
    def companion_description(self) -> str:
        # A companion_dir naming another profile's directory takes its wording.
        for directory, description in PROFILE_COMPANIONS.values():
            if directory == self.effective_companion_dir:
                return description
        return PROFILE_COMPANIONS[self.profile][1]
