"""Tests for settings and the conditions file."""

from pathlib import Path

import pytest

from gender_condition.config import Settings, load_conditions, save_conditions
from gender_condition.errors import InvalidStoredConditionError


class TestSettings:
    """Tests for application settings."""

    def test_defaults(self) -> None:
        """Test default locale and file names."""
        settings = Settings(_env_file=None)
        assert settings.locale == "en_US"
        assert settings.conditions_file == "conditions.yaml"
        assert settings.translations_dir is None

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Test that GENDER_CONDITION_* variables are read."""
        monkeypatch.setenv("GENDER_CONDITION_LOCALE", "fr_FR")
        monkeypatch.setenv("GENDER_CONDITION_CONFIG_DIR", str(tmp_path))

        settings = Settings(_env_file=None)
        assert settings.locale == "fr_FR"
        assert settings.conditions_path == tmp_path / "conditions.yaml"

    def test_ensure_config_dir(self, tmp_path: Path) -> None:
        """Test that the config directory is created."""
        settings = Settings(_env_file=None, config_dir=tmp_path / "nested" / "dir")
        settings.ensure_config_dir()
        assert settings.config_dir.is_dir()


class TestConditionsFile:
    """Tests for reading and writing stored conditions."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file gives no conditions."""
        assert load_conditions(tmp_path / "missing.yaml") == []

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file gives no conditions."""
        path = tmp_path / "conditions.yaml"
        path.write_text("")
        assert load_conditions(path) == []

    def test_save_then_load(self, tmp_path: Path) -> None:
        """Test that saved conditions are read back."""
        conditions = [
            {
                "condition_service_id": "thelia.condition.match_for_gender",
                "operators": {"gender": "=="},
                "values": {"gender": "man"},
            }
        ]
        path = tmp_path / "sub" / "conditions.yaml"
        save_conditions(path, conditions)

        assert load_conditions(path) == conditions

    @pytest.mark.parametrize(
        "content",
        [
            "- condition_service_id: thelia.condition.match_for_gender\n",
            "conditions: thelia.condition.match_for_gender\n",
            "conditions: [unclosed\n",
        ],
    )
    def test_malformed_file(self, tmp_path: Path, content: str) -> None:
        """Test that a file without a conditions list raises a condition error."""
        path = tmp_path / "conditions.yaml"
        path.write_text(content)

        with pytest.raises(InvalidStoredConditionError) as exc_info:
            load_conditions(path)
        assert exc_info.value.source == str(path)
