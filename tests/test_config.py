from __future__ import annotations

import pytest

from omxcontrol.config import Settings, default_address_file

ENV_NAMES = [
    "OMXCONTROL_BUS_NAME",
    "OMXCONTROL_OBJECT_PATH",
    "OMXCONTROL_ADDRESS_FILE",
    "OMXCONTROL_PROCESS_NAME",
    "OMXCONTROL_POLL_INTERVAL",
    "OMXCONTROL_CALL_TIMEOUT",
    "OMXCONTROL_LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    # set-then-delete so monkeypatch also removes anything load_dotenv adds
    for name in ENV_NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.setenv("USER", "pi")


def test_defaults(clean_env, tmp_path):
    settings = Settings.from_env(str(tmp_path / "missing.env"))

    assert settings.bus_name == "org.mpris.MediaPlayer2.omxplayer"
    assert settings.object_path == "/org/mpris/MediaPlayer2"
    assert settings.address_file == "/tmp/omxplayerdbus.pi"
    assert settings.process_name == "omxplayer"
    assert settings.poll_interval == 0.05
    assert settings.call_timeout is None
    assert settings.log_level == "info"


def test_environment_overrides(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("OMXCONTROL_BUS_NAME", "org.mpris.MediaPlayer2.omxplayer1")
    monkeypatch.setenv("OMXCONTROL_CALL_TIMEOUT", "3")
    monkeypatch.setenv("OMXCONTROL_POLL_INTERVAL", "0.2")

    settings = Settings.from_env(str(tmp_path / "missing.env"))

    assert settings.bus_name == "org.mpris.MediaPlayer2.omxplayer1"
    assert settings.call_timeout == 3.0
    assert settings.poll_interval == 0.2


def test_dotenv_file_is_loaded(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "OMXCONTROL_ADDRESS_FILE=/run/omx/address\n"
        "OMXCONTROL_LOG_LEVEL=debug\n"
    )

    settings = Settings.from_env(str(env_file))

    assert settings.address_file == "/run/omx/address"
    assert settings.log_level == "debug"


def test_environment_wins_over_dotenv(clean_env, monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("OMXCONTROL_PROCESS_NAME=from-file\n")
    monkeypatch.setenv("OMXCONTROL_PROCESS_NAME", "from-env")

    assert Settings.from_env(str(env_file)).process_name == "from-env"


def test_invalid_number_names_the_variable(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("OMXCONTROL_CALL_TIMEOUT", "soon")

    with pytest.raises(ValueError, match="OMXCONTROL_CALL_TIMEOUT"):
        Settings.from_env(str(tmp_path / "missing.env"))


def test_default_address_file_uses_user(monkeypatch):
    monkeypatch.setenv("USER", "osmc")

    assert default_address_file() == "/tmp/omxplayerdbus.osmc"


def test_invalid_poll_interval_names_the_variable(clean_env, monkeypatch, tmp_path):
    monkeypatch.setenv("OMXCONTROL_POLL_INTERVAL", "fast")

    with pytest.raises(ValueError, match="OMXCONTROL_POLL_INTERVAL"):
        Settings.from_env(str(tmp_path / "missing.env"))
