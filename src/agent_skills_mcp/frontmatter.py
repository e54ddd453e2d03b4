"""Parse the front-matter header of a ``SKILL.md`` file."""

import logging

from agent_skills_mcp.types import ParsedSkill

logger = logging.getLogger(__name__)

_DELIMITER = "---"


def parse_frontmatter(content: str | None) -> ParsedSkill | None:
    """Parse a markdown skill file with a ``---`` delimited header.

    The header is read line by line as ``key: value`` pairs rather than as
    full YAML. Only ``name`` and ``description`` are recognised (keys are
    case-insensitive); anything else in the header is ignored. Everything
    after the closing delimiter is the body.

    Returns:
        The parsed skill, or ``None`` if the delimiters are missing or either
        required field is empty.
    """
    if not content or not content.strip():
        return None

    stripped = content.lstrip()
    if not stripped.startswith(_DELIMITER):
        return None

    first_newline = stripped.find("\n")
    if first_newline == -1:
        return None

    header_start = first_newline + 1
    close_idx = stripped.find(f"\n{_DELIMITER}", header_start)
    if close_idx == -1:
        return None

    header = stripped[header_start:close_idx]

    body_start = close_idx + 1 + len(_DELIMITER)
    if stripped[body_start : body_start + 1] == "\r":
        body_start += 1
    if stripped[body_start : body_start + 1] == "\n":
        body_start += 1
    body = stripped[body_start:]

    name = ""
    description = ""
    for line in header.split("\n"):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        colon_idx = line.find(":")
        if colon_idx <= 0:
            continue

        key = line[:colon_idx].strip().lower()
        value = line[colon_idx + 1 :].strip()
        if key == "name":
            name = value
        elif key == "description":
            description = value

    if not name or not description:
        logger.debug("Front matter is missing a name or description")
        return None

    return ParsedSkill(name=name, description=description, body=body)
