from pathlib import Path

import pytest

from clisettings.output.protocols import MockOutput
from clisettings.settings.commands import SettingsCommands
from clisettings.settings.store import SettingsStore


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "config.json"


@pytest.fixture
def store(config_path: Path) -> SettingsStore:
    return SettingsStore(config_path)


@pytest.fixture
def output() -> MockOutput:
    return MockOutput()


@pytest.fixture
def commands(store: SettingsStore, output: MockOutput) -> SettingsCommands:
    return SettingsCommands(store, output)


@pytest.fixture
def cli_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the CLI's default store at a temporary file."""
    path = tmp_path / "home" / "config.json"
    monkeypatch.setenv("CLISETTINGS_CONFIG", str(path))
    return path
