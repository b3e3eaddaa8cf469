"""Tests for effort scoring configuration management."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from effort.core.settings import (
    DEFAULT_METHOD_NAME,
    EffortSettings,
    LoggingSettings,
    ScoringSettings,
    _find_config_file,
    _load_yaml_config,
    get_cached_settings,
    get_settings,
)


class TestEffortSettings:
    """Tests for EffortSettings."""

    def test_default_values(self) -> None:
        settings = EffortSettings(_skip_file_loading=True)
        assert settings.logging.level == "INFO"
        assert settings.logging.json_output is False
        assert settings.scoring.providers == ["classification", "hint"]
        assert settings.scoring.method_name == DEFAULT_METHOD_NAME

    def test_nested_override(self) -> None:
        settings = EffortSettings(
            _skip_file_loading=True, scoring={"providers": ["hint"]}
        )
        assert settings.scoring.providers == ["hint"]

    def test_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EFFORT_LOGGING__LEVEL", "debug")
        monkeypatch.setenv("EFFORT_SCORING__METHOD_NAME", "effortFor")
        settings = EffortSettings(_skip_file_loading=True)
        assert settings.logging.level == "DEBUG"
        assert settings.scoring.method_name == "effortFor"

    def test_to_dict(self) -> None:
        data = EffortSettings(_skip_file_loading=True).to_dict()
        assert data["scoring"]["providers"] == ["classification", "hint"]
        assert data["logging"]["level"] == "INFO"


class TestValidation:
    """Tests for settings validation."""

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError, match="Invalid log level"):
            LoggingSettings(level="LOUD")

    def test_invalid_module_level(self) -> None:
        with pytest.raises(ValidationError, match="Invalid log level"):
            LoggingSettings(module_levels={"effort": "LOUD"})

    def test_empty_providers(self) -> None:
        with pytest.raises(ValidationError, match="At least one score provider"):
            ScoringSettings(providers=[])

    def test_duplicate_providers(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate"):
            ScoringSettings(providers=["hint", "hint"])


class TestConfigFile:
    """Tests for YAML config file loading."""

    def test_find_config_file_in_parent(self, tmp_path: Path) -> None:
        (tmp_path / "effort.config.yaml").write_text("logging:\n  level: ERROR\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert _find_config_file(nested) == tmp_path / "effort.config.yaml"

    def test_load_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("logging: [unclosed\n")
        assert _load_yaml_config(path) == {}

    def test_load_non_mapping(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        assert _load_yaml_config(path) == {}

    def test_discovered_file_merges_with_overrides(self, tmp_path: Path) -> None:
        (tmp_path / "effort.config.yaml").write_text(
            "logging:\n  level: ERROR\n  json_output: true\n"
            "scoring:\n  providers: [classification]\n"
        )
        settings = EffortSettings(logging={"level": "DEBUG"})
        assert settings.logging.level == "DEBUG"
        assert settings.logging.json_output is True
        assert settings.scoring.providers == ["classification"]

    def test_get_settings_explicit_file(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.yaml"
        path.write_text("scoring:\n  method_name: effortPoints\n")
        settings = get_settings(config_file=path)
        assert settings.scoring.method_name == "effortPoints"

    def test_cached_settings(self) -> None:
        assert get_cached_settings() is get_cached_settings()
