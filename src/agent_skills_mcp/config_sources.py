"""YAML loading for layered config.

Kept apart from config_models.py so the settings model can import the
source without a circular import through config_loader.py.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import yaml
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

if TYPE_CHECKING:
    import pathlib

    from pydantic.fields import FieldInfo

logger = logging.getLogger(__name__)


def load_yaml_file(
    file_path: str | pathlib.Path,
) -> dict[str, Any]:
    """Load a YAML file, returning an empty dict if not found.

    Args:
        file_path: Path to the YAML file

    Returns:
        The loaded YAML content as a dictionary, or empty dict if the file is
        missing, malformed, or not a mapping
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        logger.info("%s not found. Using defaults.", file_path)
        return {}
    except yaml.YAMLError as e:
        logger.error("Error parsing %s: %s. Using defaults.", file_path, e)
        return {}

    if content is None:
        return {}
    if not isinstance(content, dict):
        logger.warning("%s is not a valid dictionary. Ignoring.", file_path)
        return {}
    return content


class YamlConfigSource(PydanticBaseSettingsSource):
    """Reads settings from YAML files; later files override earlier ones."""

    def __init__(
        self, settings_cls: type[BaseSettings], yaml_files: list[str | pathlib.Path]
    ) -> None:
        super().__init__(settings_cls)
        self.yaml_files = yaml_files

    def get_field_value(
        self,
        field: FieldInfo,
        field_name: str,
    ) -> tuple[Any, str, bool]:
        """Required by PydanticBaseSettingsSource. Not used since __call__ provides all values."""
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        merged: dict[str, Any] = {}
        for path in self.yaml_files:
            merged.update(load_yaml_file(path))
        return merged
