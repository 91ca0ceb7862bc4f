from pathlib import Path

import pytest

from state_emitter import (
    ConfigError,
    InvalidChannelSetError,
    StateEmitter,
    Token,
    load_config,
)


def write(tmp_path, text):
    path = tmp_path / "states.toml"
    path.write_text(text)
    return path


def test_load_strings(tmp_path):
    config = load_config(write(tmp_path, 'states = ["idle", "running", "done"]\n'))
    assert config.channels() == ["idle", "running", "done"]


def test_load_tokens(tmp_path):
    config = load_config(write(tmp_path, 'states = ["idle", { token = "shutdown" }]\n'))
    channels = config.channels()
    assert channels[0] == "idle"
    assert isinstance(channels[1], Token)
    assert channels[1].label == "shutdown"


def test_from_config(tmp_path):
    emitter = StateEmitter.from_config(write(tmp_path, 'states = ["idle", "done"]\n'))
    assert emitter.normalize(1) == "done"


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="file not found"):
        load_config(tmp_path / "nope.toml")


def test_invalid_toml(tmp_path):
    with pytest.raises(ConfigError):
        load_config(write(tmp_path, "states = [\n"))


def test_schema_errors(tmp_path):
    with pytest.raises(ConfigError):
        load_config(write(tmp_path, "states = [1, 2]\n"))
    with pytest.raises(ConfigError):
        load_config(write(tmp_path, 'states = ["idle"]\nextra = true\n'))
    with pytest.raises(ConfigError):
        load_config(write(tmp_path, 'states = [{ label = "idle" }]\n'))


def test_empty_states_rejected_by_emitter(tmp_path):
    with pytest.raises(InvalidChannelSetError):
        StateEmitter.from_config(write(tmp_path, "states = []\n"))


def test_example_config_loads():
    path = Path(__file__).parent.parent / "examples" / "states.toml"
    emitter = StateEmitter.from_config(path)
    assert emitter.states[:3] == ("queued", "running", "done")
    assert str(emitter.normalize(3)) == "cancelled"


def test_undecodable_file(tmp_path):
    path = tmp_path / "states.toml"
    path.write_bytes(b'states = ["\xff\xfe"]\n')
    with pytest.raises(ConfigError) as info:
        load_config(path)
    assert isinstance(info.value.__cause__, UnicodeDecodeError)


def test_unreadable_file(tmp_path, monkeypatch):
    path = write(tmp_path, 'states = ["idle"]\n')

    def deny(*args, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr("state_emitter.config.open", deny, raising=False)
    with pytest.raises(ConfigError, match="denied"):
        load_config(path)
