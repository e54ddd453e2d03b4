"""Parse ``SKILL.yaml`` / ``SKILL.yml`` skill definitions."""

import logging

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from agent_skills_mcp.types import ParsedSkill

logger = logging.getLogger(__name__)


class SkillDocument(BaseModel):
    """Shape of a YAML skill definition.

    Unknown keys (``license``, ``author``, ...) are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    description: str | None = None
    body: str | None = None


def parse_skill_yaml(content: str | None) -> ParsedSkill | None:
    """Parse a whole-document YAML skill definition.

    ``name`` and ``description`` are required; ``body`` is optional and
    defaults to an empty string. Scalars are kept exactly as written
    (``yes``, ``1.10`` and dates stay strings). Malformed YAML is reported as
    ``None`` rather than raised.
    """
    if not content or not content.strip():
        return None

    try:
        document = SkillDocument.model_validate(
            yaml.load(content, Loader=yaml.BaseLoader)
        )
    except yaml.YAMLError as e:
        logger.debug("Failed to parse skill YAML: %s", e)
        return None
    except ValidationError as e:
        logger.debug("Skill YAML has an unexpected shape: %s", e)
        return None

    if not document.name or not document.name.strip():
        return None
    if not document.description or not document.description.strip():
        return None

    return ParsedSkill(
        name=document.name.strip(),
        description=document.description.strip(),
        body=document.body.strip() if document.body is not None else "",
    )
