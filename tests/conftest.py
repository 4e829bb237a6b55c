"""Common test fixtures."""

from datetime import datetime
from pathlib import Path

import pytest

from auto_timestamp.config import ProjectConfig, SettingsManager, TimestampSettings
from auto_timestamp.services.file_service import FileService
from auto_timestamp.services.timestamp_service import TimestampService
from auto_timestamp.sync.watch_service import WatchService

FIXED_NOW = datetime(2024, 12, 29, 14, 30, 52)


@pytest.fixture
def config_home(tmp_path, monkeypatch) -> Path:
    home = tmp_path / "vault"
    home.mkdir()
    monkeypatch.setenv("AUTO_TIMESTAMP_HOME", str(home))
    return home


@pytest.fixture
def project_config(config_home) -> ProjectConfig:
    """Create test project configuration."""
    return ProjectConfig(home=config_home, create_delay=0)


@pytest.fixture
def settings_manager(project_config) -> SettingsManager:
    return SettingsManager(project_config.settings_path)


@pytest.fixture
def settings() -> TimestampSettings:
    return TimestampSettings()


@pytest.fixture
def file_service(project_config) -> FileService:
    return FileService(project_config.home, project_config.note_extensions)


@pytest.fixture
def timestamp_service(file_service, settings, project_config) -> TimestampService:
    return TimestampService(
        file_service=file_service,
        settings=settings,
        create_delay=project_config.create_delay,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def watch_service(timestamp_service, file_service, project_config) -> WatchService:
    return WatchService(
        timestamp_service=timestamp_service,
        file_service=file_service,
        config=project_config,
    )


@pytest.fixture
def write_note(config_home):
    """Write a note into the test vault and return its path."""

    def _write(relative: str, content: str) -> Path:
        path = config_home / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write
