"""Default locations for skill directories."""

import logging
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

# Skills live under this directory, relative to the application directory
# (when served) or the project root (when mounted).
DEFAULT_SKILLS_RELATIVE_PATH = Path(".agents") / "skills"

# Any of these marks the top of a project checkout.
PROJECT_ROOT_MARKERS: tuple[str, ...] = (".git", "pyproject.toml")


def get_app_base_dir() -> Path:
    """Return the directory of the running entry script.

    Falls back to the current working directory when there is no script
    file, e.g. in an interactive interpreter or an embedded host.
    """
    main_module = sys.modules.get("__main__")
    main_file = getattr(main_module, "__file__", None)
    if main_file:
        return Path(main_file).resolve().parent

    logger.debug("No entry script found, using the working directory")
    return Path.cwd()


def get_default_skills_dir(base_dir: Path | None = None) -> Path:
    """Return ``<base_dir>/.agents/skills``.

    ``base_dir`` defaults to :func:`get_app_base_dir`.
    """
    base = base_dir if base_dir is not None else get_app_base_dir()
    return (base / DEFAULT_SKILLS_RELATIVE_PATH).absolute()


def find_project_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` to the nearest directory with a project marker.

    Falls back to ``start`` itself (default: the current working directory)
    when no marker is found before the filesystem root.
    """
    start_dir = (start if start is not None else Path.cwd()).absolute()
    for candidate in (start_dir, *start_dir.parents):
        if any((candidate / marker).exists() for marker in PROJECT_ROOT_MARKERS):
            return candidate

    logger.debug("No project root marker found above %s", start_dir)
    return start_dir
