"""Expose skills as prompts."""

import asyncio
import logging
from collections.abc import Sequence

from agent_skills_mcp.file_store import SkillFileStore, join_path, read_text
from agent_skills_mcp.parser import SUPPORTED_SKILL_FILE_NAMES, parse_skill_file
from agent_skills_mcp.types import SkillPrompt

logger = logging.getLogger(__name__)


class SkillPromptProvider:
    """Builds one prompt per skill directory from its skill file body.

    Discovery runs once, on the first call to :meth:`get_prompts`; the
    result is cached for the lifetime of the provider and never refreshed.
    """

    def __init__(
        self,
        file_store: SkillFileStore,
        *,
        skill_file_names: Sequence[str] = SUPPORTED_SKILL_FILE_NAMES,
    ) -> None:
        if file_store is None:
            raise TypeError("file_store must not be None")
        self._file_store = file_store
        self._skill_file_names = tuple(skill_file_names)
        self._prompts: tuple[SkillPrompt, ...] | None = None
        self._lock = asyncio.Lock()

    async def get_prompts(self) -> tuple[SkillPrompt, ...]:
        """Return the prompts for every valid skill, loading them on first use."""
        if self._prompts is not None:
            return self._prompts

        async with self._lock:
            if self._prompts is None:
                self._prompts = await self._discover()
        return self._prompts

    async def _discover(self) -> tuple[SkillPrompt, ...]:
        prompts: list[SkillPrompt] = []

        async for skill_dir in self._file_store.iter_directory(None):
            if not skill_dir.is_directory:
                continue

            skill_dir_name = skill_dir.name
            skill_file_name, content = await self._read_skill_file(skill_dir_name)
            if skill_file_name is None or content is None:
                logger.debug(
                    "No skill file found for skill '%s', skipping", skill_dir_name
                )
                continue

            if not content.strip():
                logger.warning(
                    "Skill file for skill '%s' is empty, skipping", skill_dir_name
                )
                continue

            parsed = parse_skill_file(skill_file_name, content)
            if parsed is None:
                logger.warning(
                    "Skill file '%s' for skill '%s' has invalid or missing required "
                    "fields (name and description are required), skipping",
                    skill_file_name,
                    skill_dir_name,
                )
                continue

            if not parsed.body.strip():
                logger.warning(
                    "Skill file for skill '%s' has no body content, skipping",
                    skill_dir_name,
                )
                continue

            prompts.append(
                SkillPrompt(
                    name=parsed.name,
                    description=parsed.description,
                    body=parsed.body,
                )
            )

        logger.info("Loaded %d prompt(s) from agent skills", len(prompts))
        return tuple(prompts)

    async def _read_skill_file(
        self, skill_dir_name: str
    ) -> tuple[str | None, str | None]:
        """Read the first readable skill file in priority order."""
        for candidate in self._skill_file_names:
            skill_path = join_path(skill_dir_name, candidate)
            if await self._file_store.get_file_info(skill_path) is None:
                continue

            try:
                return candidate, await read_text(self._file_store, skill_path)
            except OSError as e:
                logger.warning(
                    "Failed to read '%s' for skill '%s': %s",
                    candidate,
                    skill_dir_name,
                    e,
                )

        return None, None
