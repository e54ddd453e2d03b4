"""Storage access for skill files.

Providers only talk to a :class:`SkillFileStore`, so skills can be served
from any backend that can list directories and open files.
:class:`PhysicalSkillFileStore` is the local filesystem implementation.

All paths passed to and returned from a store are relative to the store root
and use ``/`` as the separator, whatever the host platform.
"""

from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import AbstractAsyncContextManager
from pathlib import Path
from typing import Any, Protocol

import aiofiles
import aiofiles.os

from agent_skills_mcp.types import SkillFileEntry

logger = logging.getLogger(__name__)


def normalize_path(path: str) -> str:
    return path.replace("\\", "/")


def join_path(*parts: str) -> str:
    return normalize_path("/".join(parts))


class SkillFileStore(Protocol):
    """Read-only access to a tree of skill directories."""

    def iter_directory(
        self, sub_path: str | None = None, *, recursive: bool = False
    ) -> AsyncIterator[SkillFileEntry]:
        """Yield the entries under ``sub_path`` (the root when ``None``).

        With ``recursive`` the whole subtree is yielded, otherwise only the
        immediate children. Order is not guaranteed. A missing directory
        yields nothing.
        """
        ...

    async def get_file_info(self, sub_path: str) -> SkillFileEntry | None:
        """Return the entry for ``sub_path`` if it is an existing file."""
        ...

    def open_file(self, sub_path: str) -> AbstractAsyncContextManager[Any]:
        """Open ``sub_path`` for binary reading.

        Raises:
            OSError: If the file is missing or cannot be read.
        """
        ...

    async def get_directory_info(self, sub_path: str) -> SkillFileEntry | None:
        """Return the entry for ``sub_path`` if it is an existing directory."""
        ...


async def read_text(store: SkillFileStore, sub_path: str) -> str:
    """Read a whole file from ``store`` as UTF-8 text.

    A leading BOM is dropped and invalid byte sequences are replaced with
    U+FFFD.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    async with store.open_file(sub_path) as f:
        data = await f.read()
    return data.decode("utf-8-sig", errors="replace")


class PhysicalSkillFileStore:
    """A :class:`SkillFileStore` rooted at a directory on the local filesystem.

    Paths that would escape the base directory (``../``) are treated as
    missing.
    """

    def __init__(self, base_path: str | os.PathLike[str]) -> None:
        if base_path is None:
            raise TypeError("base_path must not be None")
        if not str(base_path).strip():
            raise ValueError("base_path must not be blank")
        self._base_path = Path(os.path.abspath(base_path))

    @property
    def base_path(self) -> Path:
        return self._base_path

    def __repr__(self) -> str:
        return f"PhysicalSkillFileStore({str(self._base_path)!r})"

    async def iter_directory(
        self, sub_path: str | None = None, *, recursive: bool = False
    ) -> AsyncIterator[SkillFileEntry]:
        full_path = self._resolve(sub_path)
        if full_path is None or not await aiofiles.os.path.isdir(full_path):
            return

        directories, files = await self._scan(full_path)
        if recursive:
            pending = list(directories)
            while pending:
                child_dirs, child_files = await self._scan(pending.pop(0))
                directories.extend(child_dirs)
                files.extend(child_files)
                pending.extend(child_dirs)

        for path in directories:
            yield self._entry(path, is_directory=True)
        for path in files:
            yield self._entry(path, is_directory=False)

    async def get_file_info(self, sub_path: str) -> SkillFileEntry | None:
        full_path = self._resolve(sub_path)
        if full_path is None or not await aiofiles.os.path.isfile(full_path):
            return None
        return SkillFileEntry(
            name=full_path.name,
            path=normalize_path(sub_path),
            is_directory=False,
        )

    def open_file(self, sub_path: str) -> AbstractAsyncContextManager[Any]:
        full_path = self._resolve(sub_path)
        if full_path is None:
            raise PermissionError(f"Path escapes the skills directory: {sub_path}")
        return aiofiles.open(full_path, "rb")

    async def get_directory_info(self, sub_path: str) -> SkillFileEntry | None:
        full_path = self._resolve(sub_path)
        if full_path is None or not await aiofiles.os.path.isdir(full_path):
            return None
        return SkillFileEntry(
            name=full_path.name,
            path=normalize_path(sub_path),
            is_directory=True,
        )

    def _resolve(self, sub_path: str | None) -> Path | None:
        if not sub_path:
            return self._base_path

        parts = [part for part in normalize_path(sub_path).split("/") if part]
        full_path = Path(os.path.normpath(self._base_path.joinpath(*parts)))
        if full_path != self._base_path and self._base_path not in full_path.parents:
            logger.warning("Ignoring path outside the skills directory: %s", sub_path)
            return None
        return full_path

    def _entry(self, full_path: Path, *, is_directory: bool) -> SkillFileEntry:
        return SkillFileEntry(
            name=full_path.name,
            path=full_path.relative_to(self._base_path).as_posix(),
            is_directory=is_directory,
        )

    @staticmethod
    async def _scan(directory: Path) -> tuple[list[Path], list[Path]]:
        directories: list[Path] = []
        files: list[Path] = []
        try:
            with await aiofiles.os.scandir(directory) as entries:
                for entry in entries:
                    if entry.is_dir():
                        directories.append(Path(entry.path))
                    elif entry.is_file():
                        files.append(Path(entry.path))
        except OSError as e:
            logger.warning("Failed to list directory %s: %s", directory, e)
        return directories, files
