"""Expose skill files and their companion documents as resources."""

import asyncio
import logging
from collections.abc import Sequence

from agent_skills_mcp.file_store import SkillFileStore, join_path, read_text
from agent_skills_mcp.parser import (
    MARKDOWN_MIME_TYPE,
    SUPPORTED_SKILL_FILE_NAMES,
    get_mime_type,
    is_markdown_file,
    parse_skill_file,
)
from agent_skills_mcp.types import SkillResource

logger = logging.getLogger(__name__)

RESOURCE_URI_SCHEME = "skills"
DEFAULT_COMPANION_DIR = "references"
DEFAULT_COMPANION_DESCRIPTION = "Reference for {skill}"


def skill_uri(*parts: str) -> str:
    return f"{RESOURCE_URI_SCHEME}://" + "/".join(parts)


class SkillResourceProvider:
    """Builds resources for each skill directory.

    Every skill contributes its parsed skill file, plus one resource per
    markdown file directly inside its companion directory (``references/``
    by default). Discovery runs once and the result is cached for the
    lifetime of the provider.
    """

    def __init__(
        self,
        file_store: SkillFileStore,
        *,
        companion_dir: str = DEFAULT_COMPANION_DIR,
        companion_description: str = DEFAULT_COMPANION_DESCRIPTION,
        skill_file_names: Sequence[str] = SUPPORTED_SKILL_FILE_NAMES,
    ) -> None:
        if file_store is None:
            raise TypeError("file_store must not be None")
        if not companion_dir or not companion_dir.strip():
            raise ValueError("companion_dir must not be blank")
        self._file_store = file_store
        self._companion_dir = companion_dir.strip()
        self._companion_description = companion_description
        self._skill_file_names = tuple(skill_file_names)
        self._resources: tuple[SkillResource, ...] | None = None
        self._lock = asyncio.Lock()

    @property
    def companion_dir(self) -> str:
        return self._companion_dir

    async def get_resources(self) -> tuple[SkillResource, ...]:
        """Return every skill resource, loading them on first use."""
        if self._resources is not None:
            return self._resources

        async with self._lock:
            if self._resources is None:
                self._resources = await self._discover()
        return self._resources

    async def _discover(self) -> tuple[SkillResource, ...]:
        resources: list[SkillResource] = []

        async for skill_dir in self._file_store.iter_directory(None):
            if not skill_dir.is_directory:
                continue

            skill_resource = await self._load_skill_file(skill_dir.name)
            if skill_resource is not None:
                resources.append(skill_resource)
            else:
                logger.debug("No valid skill file found for skill '%s'", skill_dir.name)

            resources.extend(await self._load_companion_files(skill_dir.name))

        logger.info("Loaded %d resource(s) from agent skills", len(resources))
        return tuple(resources)

    async def _load_skill_file(self, skill_dir_name: str) -> SkillResource | None:
        """Return a resource for the first skill file that parses."""
        for candidate in self._skill_file_names:
            skill_path = join_path(skill_dir_name, candidate)
            if await self._file_store.get_file_info(skill_path) is None:
                continue

            try:
                content = await read_text(self._file_store, skill_path)
            except OSError as e:
                logger.warning(
                    "Failed to read '%s' for skill '%s': %s",
                    candidate,
                    skill_dir_name,
                    e,
                )
                continue

            if not content.strip():
                logger.warning(
                    "Skill file '%s' for skill '%s' is empty, skipping",
                    candidate,
                    skill_dir_name,
                )
                continue

            parsed = parse_skill_file(candidate, content)
            if parsed is None:
                logger.warning(
                    "Skill file '%s' for skill '%s' has invalid or missing required "
                    "fields (name and description are required), skipping",
                    candidate,
                    skill_dir_name,
                )
                continue

            return SkillResource(
                name=f"{parsed.name}/{candidate}",
                uri=skill_uri(parsed.name, candidate),
                description=parsed.description,
                mime_type=get_mime_type(candidate),
                content=content,
            )

        return None

    async def _load_companion_files(self, skill_dir_name: str) -> list[SkillResource]:
        companion_path = join_path(skill_dir_name, self._companion_dir)
        if await self._file_store.get_directory_info(companion_path) is None:
            return []

        resources: list[SkillResource] = []
        async for entry in self._file_store.iter_directory(companion_path):
            if entry.is_directory or not is_markdown_file(entry.name):
                continue

            try:
                content = await read_text(self._file_store, entry.path)
            except OSError as e:
                logger.warning(
                    "Failed to read %s file '%s' for skill '%s': %s",
                    self._companion_dir,
                    entry.name,
                    skill_dir_name,
                    e,
                )
                continue

            if not content.strip():
                logger.debug(
                    "%s file '%s' for skill '%s' is empty, skipping",
                    self._companion_dir,
                    entry.name,
                    skill_dir_name,
                )
                continue

            resources.append(
                SkillResource(
                    name=f"{skill_dir_name}/{self._companion_dir}/{entry.name}",
                    uri=skill_uri(skill_dir_name, self._companion_dir, entry.name),
                    description=self._companion_description.format(
                        skill=skill_dir_name
                    ),
                    mime_type=MARKDOWN_MIME_TYPE,
                    content=content,
                )
            )

        return resources
