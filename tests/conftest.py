import logging
from pathlib import Path

import pytest

from tests.helpers import WriteSkillFile

# Configure logging for tests (optional, but can be helpful)
logging.basicConfig(level=logging.INFO)


@pytest.fixture
def skills_root(tmp_path: Path) -> Path:
    """An empty skills directory."""
    root = tmp_path / "skills"
    root.mkdir()
    return root


@pytest.fixture
def write_skill_file(skills_root: Path) -> WriteSkillFile:
    """Write ``content`` to a ``/``-separated path under ``skills_root``."""

    def _write(relative_path: str, content: str) -> Path:
        path = skills_root.joinpath(*relative_path.split("/"))
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
