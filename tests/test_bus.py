from __future__ import annotations

import threading
from pathlib import Path

import dbus.bus
import pytest

from omxcontrol import bus
from omxcontrol.config import Settings
from omxcontrol.control.errors import BusAddressError, PlayerError

ADDRESS = "unix:abstract=/tmp/dbus-Xy12,guid=0123456789abcdef"


class FakeConnection:
    instances: list["FakeConnection"] = []

    def __init__(self, address):
        self.address = address
        self.objects = []
        FakeConnection.instances.append(self)

    def get_object(self, bus_name, object_path, introspect=True):
        self.objects.append((bus_name, object_path, introspect))
        return f"proxy:{bus_name}{object_path}"


@pytest.fixture
def fake_connection(monkeypatch):
    FakeConnection.instances = []
    monkeypatch.setattr(dbus.bus, "BusConnection", FakeConnection)
    return FakeConnection


@pytest.fixture
def settings(tmp_path):
    return Settings(address_file=str(tmp_path / "omxplayerdbus.pi"), poll_interval=0.01, call_timeout=4.0)


def test_read_bus_address_strips_whitespace(tmp_path):
    path = tmp_path / "omxplayerdbus.pi"
    path.write_text(ADDRESS + "\n")

    assert bus.read_bus_address(str(path), timeout=0) == ADDRESS


def test_read_bus_address_missing_file_times_out(tmp_path):
    with pytest.raises(BusAddressError, match="omxplayer"):
        bus.read_bus_address(str(tmp_path / "nothing"), timeout=0)


def test_read_bus_address_empty_file_times_out(tmp_path):
    path = tmp_path / "omxplayerdbus.pi"
    path.write_text("\n")

    with pytest.raises(BusAddressError):
        bus.read_bus_address(str(path), timeout=0.03, interval=0.01)


def test_read_bus_address_waits_for_file(tmp_path):
    path = tmp_path / "omxplayerdbus.pi"
    timer = threading.Timer(0.05, path.write_text, args=(ADDRESS,))
    timer.start()
    try:
        assert bus.read_bus_address(str(path), timeout=5, interval=0.01) == ADDRESS
    finally:
        timer.cancel()


def test_connect_opens_private_bus_without_introspection(fake_connection, settings):
    Path(settings.address_file).write_text(ADDRESS)

    connection, remote = bus.connect(settings, timeout=0)

    assert connection.address == ADDRESS
    assert connection.objects == [("org.mpris.MediaPlayer2.omxplayer", "/org/mpris/MediaPlayer2", False)]
    assert remote == "proxy:org.mpris.MediaPlayer2.omxplayer/org/mpris/MediaPlayer2"


def test_open_player_finds_pid_by_name(fake_connection, settings, monkeypatch):
    Path(settings.address_file).write_text(ADDRESS)
    monkeypatch.setattr(bus, "find_player_pid", lambda name: 1234 if name == "omxplayer" else None)

    player = bus.open_player(settings=settings, timeout=0)

    assert player.pid == 1234
    assert player.connection is fake_connection.instances[0]
    assert player._call_timeout == 4.0


def test_open_player_uses_given_pid(fake_connection, settings, monkeypatch):
    Path(settings.address_file).write_text(ADDRESS)
    monkeypatch.setattr(bus, "find_player_pid", lambda name: pytest.fail("should not look up pid"))

    assert bus.open_player(77, settings, timeout=0).pid == 77


def test_open_player_without_process(fake_connection, settings, monkeypatch):
    monkeypatch.setattr(bus, "find_player_pid", lambda name: None)

    with pytest.raises(PlayerError, match="No running process"):
        bus.open_player(settings=settings, timeout=0)


def test_unreadable_address_file_raises_bus_address_error(tmp_path, monkeypatch):
    path = tmp_path / "omxplayerdbus.pi"
    path.write_text(ADDRESS)

    def denied(*args, **kwargs):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(bus, "open", denied, raising=False)

    with pytest.raises(BusAddressError, match="Cannot read") as excinfo:
        bus.read_bus_address(str(path), timeout=5)

    assert isinstance(excinfo.value.__cause__, PermissionError)
