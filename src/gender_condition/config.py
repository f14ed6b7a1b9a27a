"""Application configuration management."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from gender_condition.errors import InvalidStoredConditionError


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="GENDER_CONDITION_",
        env_file=[
            ".env",  # Project-level defaults (lower priority)
            Path.home() / ".config" / "gender-condition" / ".env",  # User config (higher priority)
        ],
        env_file_encoding="utf-8",
    )

    # Translation settings
    locale: str = Field(default="en_US", description="Locale of back-office labels")
    translations_dir: Path | None = Field(
        default=None, description="Directory of <locale>.yaml catalogs (default: bundled)"
    )

    # Paths
    config_dir: Path = Field(
        default=Path.home() / ".config" / "gender-condition",
        description="Configuration directory",
    )
    conditions_file: str = Field(
        default="conditions.yaml", description="Configured conditions filename"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_dir: Path = Field(
        default=Path.home() / ".local" / "state" / "gender-condition",
        description="Directory for log files",
    )
    log_rotation_size_mb: int = Field(
        default=5, ge=1, description="Max size per log file in MB before rotation"
    )
    log_backup_count: int = Field(
        default=3, ge=0, description="Number of rotated log files to keep"
    )

    @property
    def conditions_path(self) -> Path:
        """Full path to conditions file."""
        return self.config_dir / self.conditions_file

    def ensure_config_dir(self) -> None:
        """Create config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)


def load_conditions(path: Path) -> list[dict[str, Any]]:
    """
    Load serialized conditions from a YAML file.

    Raises:
        InvalidStoredConditionError: The file is not YAML of the form ``conditions: [...]``.
    """
    if not path.exists():
        return []

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise InvalidStoredConditionError(f"not valid YAML ({e})", source=str(path)) from e

    if not isinstance(data, dict):
        raise InvalidStoredConditionError(
            "top level must be a mapping with a 'conditions' key", source=str(path)
        )

    conditions = data.get("conditions") or []
    if not isinstance(conditions, list):
        raise InvalidStoredConditionError("'conditions' must be a list", source=str(path))

    return conditions


def save_conditions(path: Path, conditions: list[dict[str, Any]]) -> None:
    """Save serialized conditions to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.dump({"conditions": conditions}, f, default_flow_style=False, sort_keys=False)
