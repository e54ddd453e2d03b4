"""Copy bundled skills into a project's ``.agents/skills`` directory."""

import logging
import shutil
from pathlib import Path

from agent_skills_mcp.paths import DEFAULT_SKILLS_RELATIVE_PATH, find_project_root

logger = logging.getLogger(__name__)


def mount_skills(source_dir: Path, target_root: Path | None = None) -> Path | None:
    """Copy every file under ``source_dir`` to ``<target_root>/.agents/skills``.

    ``target_root`` defaults to the enclosing project root. Existing files
    are overwritten, so the bundled copy stays authoritative and repeated
    calls are harmless.

    Returns:
        The skills directory that was populated, or ``None`` if the source is
        missing or the copy failed. Filesystem errors are logged rather than
        raised so read-only deployments keep running without mounted skills.
    """
    source = Path(source_dir)
    if not source.is_dir():
        logger.debug("No bundled skills found at %s", source)
        return None

    root = target_root if target_root is not None else find_project_root()
    target = root / DEFAULT_SKILLS_RELATIVE_PATH

    try:
        shutil.copytree(source, target, dirs_exist_ok=True)
    except OSError as e:
        logger.warning("Failed to mount skills from %s into %s: %s", source, target, e)
        return None

    logger.info("Mounted skills from %s into %s", source, target)
    return target
