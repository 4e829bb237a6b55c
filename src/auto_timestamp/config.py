"""Configuration management for auto-timestamp."""

import json
from pathlib import Path
from typing import List, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

STATE_DIR_NAME = ".auto-timestamp"
SETTINGS_FILE_NAME = "settings.json"
STATUS_FILE_NAME = "watch-status.json"
LOG_FILE_NAME = "auto-timestamp.log"

DEFAULT_DATE_FORMAT = "yyyy-MM-ddTHH:mm:ss"
DEFAULT_CREATED_KEY = "created"
DEFAULT_MODIFIED_KEY = "modified"

# what an emptied date format falls back to when edited from the CLI
FALLBACK_DATE_FORMAT = "yyyyMMddHHmmss"


class SettingsError(Exception):
    """Raised when the settings file cannot be read."""

    pass


class ProjectConfig(BaseSettings):
    """Process configuration for a watched vault."""

    # Default to the current directory but allow override with env var
    home: Path = Field(
        default_factory=Path.cwd,
        description="Vault directory containing the notes",
    )

    create_delay: float = Field(
        default=0.1,
        description="Seconds to wait after a create event before reading the new file",
        ge=0,
    )

    sync_delay: int = Field(
        default=500,
        description="Milliseconds to debounce file system events",
        gt=0,
    )

    note_extensions: List[str] = Field(
        default_factory=lambda: [".md"],
        description="File extensions treated as notes",
    )

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="AUTO_TIMESTAMP_",
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @property
    def state_dir(self) -> Path:
        """Directory holding settings, status and logs."""
        return self.home / STATE_DIR_NAME

    @property
    def settings_path(self) -> Path:
        return self.state_dir / SETTINGS_FILE_NAME

    @property
    def status_path(self) -> Path:
        return self.state_dir / STATUS_FILE_NAME

    @property
    def log_path(self) -> Path:
        return self.state_dir / LOG_FILE_NAME

    @field_validator("home")
    @classmethod
    def ensure_path_exists(cls, v: Path) -> Path:
        """Ensure vault path exists."""
        v = v.expanduser().resolve()
        if not v.exists():
            v.mkdir(parents=True)
        return v

    @field_validator("note_extensions")
    @classmethod
    def normalize_extensions(cls, v: List[str]) -> List[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in v]


class TimestampSettings(BaseModel):
    """User settings, persisted with the same keys the Obsidian plugin uses."""

    date_format: str = Field(default=DEFAULT_DATE_FORMAT, alias="dateFormat")
    created_key: str = Field(default=DEFAULT_CREATED_KEY, alias="createdKey")
    modified_key: str = Field(default=DEFAULT_MODIFIED_KEY, alias="modifiedKey")
    ignore_patterns: List[str] = Field(default_factory=list, alias="ignorePatterns")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SettingsManager:
    """Loads and persists TimestampSettings for a vault."""

    def __init__(self, settings_path: Path):
        self.settings_path = settings_path
        self._settings: Optional[TimestampSettings] = None

    @property
    def settings(self) -> TimestampSettings:
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    def load(self) -> TimestampSettings:
        """Load saved settings, with defaults for missing keys.

        Raises:
            SettingsError: If the file exists but is not a valid settings blob
        """
        if not self.settings_path.exists():
            logger.debug(f"No settings file at {self.settings_path}, using defaults")
            return TimestampSettings()

        try:
            data = json.loads(self.settings_path.read_text(encoding="utf-8"))
            settings = TimestampSettings.model_validate(data or {})
        except (json.JSONDecodeError, ValidationError) as e:
            logger.error(f"Failed to load settings from {self.settings_path}: {e}")
            raise SettingsError(f"Invalid settings file {self.settings_path}: {e}") from e

        logger.debug(f"Loaded settings from {self.settings_path}")
        return settings

    def save(self, settings: TimestampSettings) -> None:
        """Save settings to file."""
        self.settings_path.parent.mkdir(parents=True, exist_ok=True)
        self.settings_path.write_text(
            settings.model_dump_json(by_alias=True, indent=2), encoding="utf-8"
        )
        self._settings = settings
        logger.debug(f"Saved settings to {self.settings_path}")

    def update(self, **changes) -> TimestampSettings:
        """Apply changes to the current settings and persist them."""
        settings = self.settings.model_copy(update=changes)
        self.save(settings)
        return settings

    def reset(self) -> TimestampSettings:
        settings = TimestampSettings()
        self.save(settings)
        return settings


def get_project_config(home: Optional[Path] = None) -> ProjectConfig:
    """Build the project config, letting an explicit home override the environment."""
    if home is not None:
        return ProjectConfig(home=home)
    return ProjectConfig()
