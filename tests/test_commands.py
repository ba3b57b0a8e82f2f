from pathlib import Path
from unittest.mock import patch

import pytest

from clisettings.errors import ConfigReadError, ConfigWriteError, InvalidSettingValueError
from clisettings.output.context import OutputContext
from clisettings.output.protocols import MockOutput
from clisettings.settings.commands import SettingsCommands
from clisettings.settings.store import SettingsStore


def test_list_empty_human(commands: SettingsCommands, output: MockOutput) -> None:
    assert commands.list() == {}
    assert output.messages_at("info") == ["Getting config settings", "No config settings found"]
    assert output.tables == []
    assert output.structured_calls == []


def test_list_empty_json(store: SettingsStore) -> None:
    output = MockOutput(OutputContext(json_output=True))
    SettingsCommands(store, output).list()
    assert output.structured_calls == [{}]
    assert "No config settings found" not in output.messages_at("info")
    assert output.tables == []


def test_list_rows_in_stored_order(
    commands: SettingsCommands, store: SettingsStore, output: MockOutput
) -> None:
    store.write({"region": "west", "endpoint": "https://example.com"})
    commands.list()
    commands.list()
    assert len(output.tables) == 2
    assert output.tables[0]["headers"] == ("Setting", "Value")
    assert output.tables[0]["rows"] == [("region", "west"), ("endpoint", "https://example.com")]
    assert output.tables[0]["rows"] == output.tables[1]["rows"]


def test_list_corrupt_file_raises(commands: SettingsCommands, config_path: Path) -> None:
    config_path.write_text("[1, 2]")
    with pytest.raises(ConfigReadError):
        commands.list()


def test_set_then_read(commands: SettingsCommands, store: SettingsStore, output: MockOutput) -> None:
    assert commands.set("region", "west") == "west"
    assert store.read() == {"region": "west"}
    assert output.messages_at("info") == ['Setting "region" to value "west"', "Changes saved"]


def test_set_overwrites(commands: SettingsCommands, store: SettingsStore) -> None:
    commands.set("region", "west")
    commands.set("region", "east")
    assert store.read() == {"region": "east"}


def test_set_endpoint_normalizes(
    commands: SettingsCommands, store: SettingsStore, output: MockOutput
) -> None:
    assert commands.set("endpoint", "https://Example.com/") == "https://example.com"
    assert store.read() == {"endpoint": "https://example.com"}
    assert 'Setting "endpoint" to value "https://example.com"' in output.messages_at("info")


def test_invalid_endpoint_not_written(
    commands: SettingsCommands, store: SettingsStore, config_path: Path, output: MockOutput
) -> None:
    with pytest.raises(InvalidSettingValueError):
        commands.set("endpoint", "not-a-url")
    assert not config_path.exists()
    assert store.read() == {}
    assert output.messages == []


def test_invalid_endpoint_keeps_prior_value(
    commands: SettingsCommands, store: SettingsStore, config_path: Path
) -> None:
    commands.set("endpoint", "https://example.com")
    before = config_path.read_bytes()
    with patch.object(store, "write", wraps=store.write) as write:
        with pytest.raises(InvalidSettingValueError):
            commands.set("endpoint", "ftp://example.com")
        write.assert_not_called()
    assert config_path.read_bytes() == before
    assert store.read() == {"endpoint": "https://example.com"}


def test_set_write_failure_propagates(commands: SettingsCommands, store: SettingsStore) -> None:
    error = ConfigWriteError(store.path, "disk full")
    with patch.object(store, "write", side_effect=error):
        with pytest.raises(ConfigWriteError):
            commands.set("region", "west")
    assert store.read() == {}


def test_delete_existing(commands: SettingsCommands, store: SettingsStore, output: MockOutput) -> None:
    store.write({"region": "west", "logo": "off"})
    assert commands.delete("region") is True
    assert store.read() == {"logo": "off"}
    assert output.messages_at("info") == ['Deleting "region"', "Changes saved"]


def test_delete_missing_warns_without_writing(
    commands: SettingsCommands, store: SettingsStore, config_path: Path, output: MockOutput
) -> None:
    store.write({"logo": "off"})
    before = config_path.read_bytes()
    with patch.object(store, "write", wraps=store.write) as write:
        assert commands.delete("region") is False
        write.assert_not_called()
    assert config_path.read_bytes() == before
    assert output.messages_at("warn") == ['Setting "region" does not exist']
    assert output.messages_at("info") == []


def test_delete_missing_on_empty_store(commands: SettingsCommands, config_path: Path) -> None:
    assert commands.delete("region") is False
    assert not config_path.exists()


def test_set_delete_inverse(commands: SettingsCommands, store: SettingsStore) -> None:
    original = {"a": "1", "b": "2"}
    store.write(original)
    commands.set("k", "v")
    commands.delete("k")
    assert store.read() == original


def test_end_to_end(commands: SettingsCommands, store: SettingsStore, output: MockOutput) -> None:
    assert store.read() == {}

    commands.set("region", "west")
    assert store.read() == {"region": "west"}

    output.reset_call_history()
    commands.list()
    assert output.tables == [{"rows": [("region", "west")], "headers": ("Setting", "Value")}]

    output.reset_call_history()
    commands.delete("region")
    assert store.read() == {}
    assert "Changes saved" in output.messages_at("info")

    output.reset_call_history()
    commands.delete("region")
    assert output.messages_at("warn") == ['Setting "region" does not exist']
    assert store.read() == {}
