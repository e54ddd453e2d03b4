"""Tests for the configuration loading module.

These tests verify the configuration loading hierarchy:
1. Pydantic model field defaults (lowest priority)
2. YAML config file
3. Environment variables
4. CLI arguments (highest priority - tested in test_main.py)
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest import mock

import pytest
import yaml
from pydantic import ValidationError

from agent_skills_mcp.config_loader import load_config
from agent_skills_mcp.config_models import SkillsConfig
from agent_skills_mcp.config_sources import YamlConfigSource, load_yaml_file


def _clean_env() -> dict[str, str]:
    return {k: v for k, v in os.environ.items() if not k.startswith("AGENT_SKILLS_")}


class TestLoadYamlFile:
    """Tests for load_yaml_file function."""

    def test_loads_mapping(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"profile": "examples"}))
        assert load_yaml_file(config_file) == {"profile": "examples"}

    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_yaml_file(tmp_path / "missing.yaml") == {}

    def test_empty_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert load_yaml_file(config_file) == {}

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "broken.yaml"
        config_file.write_text("path: [unclosed")
        assert load_yaml_file(config_file) == {}

    def test_non_mapping(self, tmp_path: Path) -> None:
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")
        assert load_yaml_file(config_file) == {}


class TestYamlConfigSource:
    def test_later_files_override_earlier(self, tmp_path: Path) -> None:
        first = tmp_path / "first.yaml"
        first.write_text(yaml.dump({"profile": "examples", "server_name": "first"}))
        second = tmp_path / "second.yaml"
        second.write_text(yaml.dump({"server_name": "second"}))

        source = YamlConfigSource(SkillsConfig, [first, second])

        assert source() == {"profile": "examples", "server_name": "second"}


class TestLoadConfig:
    """Integration tests for the complete load_config function."""

    def test_loads_field_defaults_only(self, tmp_path: Path) -> None:
        with (
            mock.patch.dict(os.environ, _clean_env(), clear=True),
            mock.patch(
                "agent_skills_mcp.paths.get_app_base_dir", return_value=tmp_path
            ),
        ):
            config = load_config(load_dotenv_file=False)
            skills_path = config.skills_path

        assert config.path is None
        assert config.profile == "references"
        assert config.companion_dir is None
        assert config.skill_file_names == ["SKILL.md", "SKILL.yaml", "SKILL.yml"]
        assert config.server_name == "agent-skills"
        assert config.effective_companion_dir == "references"
        assert config.companion_description == "Reference for {skill}"
        assert skills_path == tmp_path / ".agents" / "skills"

    def test_missing_config_file_uses_defaults(self, tmp_path: Path) -> None:
        with mock.patch.dict(os.environ, _clean_env(), clear=True):
            config = load_config(tmp_path / "missing.yaml", load_dotenv_file=False)

        assert config.profile == "references"

    def test_yaml_overrides_field_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            yaml.dump({
                "path": str(tmp_path / "skills"),
                "profile": "examples",
                "skill_file_names": ["SKILL.yaml"],
            })
        )

        with mock.patch.dict(os.environ, _clean_env(), clear=True):
            config = load_config(str(config_file), load_dotenv_file=False)

        assert config.skills_path == tmp_path / "skills"
        assert config.profile == "examples"
        assert config.skill_file_names == ["SKILL.yaml"]
        assert config.effective_companion_dir == "examples"
        assert config.companion_description == "Example for {skill}"

    def test_env_overrides_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            yaml.dump({"profile": "examples", "server_name": "from-yaml"})
        )
        env = _clean_env()
        env["AGENT_SKILLS_SERVER_NAME"] = "from-env"

        with mock.patch.dict(os.environ, env, clear=True):
            config = load_config(config_file, load_dotenv_file=False)

        assert config.profile == "examples"
        assert config.server_name == "from-env"

    def test_env_file_names_are_comma_separated(self) -> None:
        env = _clean_env()
        env["AGENT_SKILLS_SKILL_FILE_NAMES"] = "SKILL.yml, SKILL.md"

        with mock.patch.dict(os.environ, env, clear=True):
            config = load_config(load_dotenv_file=False)

        assert config.skill_file_names == ["SKILL.yml", "SKILL.md"]

    def test_companion_dir_overrides_profile(self) -> None:
        env = _clean_env()
        env["AGENT_SKILLS_PROFILE"] = "examples"
        env["AGENT_SKILLS_COMPANION_DIR"] = "docs"

        with mock.patch.dict(os.environ, env, clear=True):
            config = load_config(load_dotenv_file=False)

        assert config.effective_companion_dir == "docs"
        assert config.companion_description == "Example for {skill}"

    def test_companion_dir_naming_a_profile_directory_uses_its_description(
        self,
    ) -> None:
        env = _clean_env()
        env["AGENT_SKILLS_COMPANION_DIR"] = "examples"

        with mock.patch.dict(os.environ, env, clear=True):
            config = load_config(load_dotenv_file=False)

        assert config.profile == "references"
        assert config.effective_companion_dir == "examples"
        assert config.companion_description == "Example for {skill}"

    def test_invalid_profile(self) -> None:
        env = _clean_env()
        env["AGENT_SKILLS_PROFILE"] = "tutorials"

        with (
            mock.patch.dict(os.environ, env, clear=True),
            pytest.raises(ValidationError),
        ):
            load_config(load_dotenv_file=False)

    def test_unsupported_skill_file_name(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"skill_file_names": ["SKILL.txt"]}))

        with (
            mock.patch.dict(os.environ, _clean_env(), clear=True),
            pytest.raises(ValidationError),
        ):
            load_config(config_file, load_dotenv_file=False)

    def test_empty_skill_file_names(self) -> None:
        env = _clean_env()
        env["AGENT_SKILLS_SKILL_FILE_NAMES"] = " , "

        with (
            mock.patch.dict(os.environ, env, clear=True),
            pytest.raises(ValidationError),
        ):
            load_config(load_dotenv_file=False)

    def test_unknown_yaml_key_rejected(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"skills_dir": "/tmp/skills"}))

        with (
            mock.patch.dict(os.environ, _clean_env(), clear=True),
            pytest.raises(ValidationError),
        ):
            load_config(config_file, load_dotenv_file=False)

    def test_dotenv_skipped_when_disabled(self) -> None:
        with (
            mock.patch.dict(os.environ, _clean_env(), clear=True),
            mock.patch("agent_skills_mcp.config_loader.load_dotenv") as dotenv,
        ):
            load_config(load_dotenv_file=False)

        dotenv.assert_not_called()

    def test_dotenv_loaded_by_default(self) -> None:
        with (
            mock.patch.dict(os.environ, _clean_env(), clear=True),
            mock.patch("agent_skills_mcp.config_loader.load_dotenv") as dotenv,
        ):
            load_config()

        dotenv.assert_called_once_with()

    def test_yaml_files_not_leaked_to_later_instances(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text(yaml.dump({"server_name": "from-yaml"}))

        with mock.patch.dict(os.environ, _clean_env(), clear=True):
            load_config(config_file, load_dotenv_file=False)
            later = SkillsConfig()

        assert later.server_name == "agent-skills"
