# omxcontrol/bus.py

import logging
import os
import time
from typing import Any

import dbus.bus

from .config import Settings
from .control.errors import BusAddressError, PlayerError
from .control.player import READY_POLL_INTERVAL, Player
from .process import find_player_pid


def read_bus_address(path: str, timeout: float | None = None, interval: float = READY_POLL_INTERVAL) -> str:
    """Waits for omxplayer to write its bus address to `path` and returns it.

    omxplayer creates the file shortly after start-up, so a missing or empty
    file is polled for until `timeout` seconds have passed (forever if None).
    """
    deadline = None if timeout is None else time.monotonic() + timeout
    while True:
        if os.path.isfile(path):
            try:
                with open(path) as f:
                    address = f.read().strip()
            except OSError as e:
                raise BusAddressError(f"Cannot read D-Bus address from {path}: {e}") from e
            if address:
                logging.debug(f"omxplayer bus address from {path}: {address}")
                return address
        if deadline is not None and time.monotonic() >= deadline:
            raise BusAddressError(f"No D-Bus address in {path} after {timeout}s. Is omxplayer running?")
        time.sleep(interval)


def connect(settings: Settings, timeout: float | None = None) -> tuple[Any, Any]:
    """Opens a private connection to omxplayer's bus. Returns (connection, proxy object)."""
    address = read_bus_address(settings.address_file, timeout=timeout, interval=settings.poll_interval)
    connection = dbus.bus.BusConnection(address)
    # omxplayer does not implement Introspect
    remote = connection.get_object(settings.bus_name, settings.object_path, introspect=False)
    logging.info(f"Connected to {settings.bus_name} at {address}")
    return connection, remote


def open_player(pid: int | None = None, settings: Settings | None = None, timeout: float | None = None) -> Player:
    """Builds a Player for a running omxplayer, finding its pid by name if not given."""
    settings = settings or Settings.from_env()
    if pid is None:
        pid = find_player_pid(settings.process_name)
        if pid is None:
            raise PlayerError(f"No running process named '{settings.process_name}'")
        logging.debug(f"Found {settings.process_name} with pid {pid}")

    connection, remote = connect(settings, timeout=timeout)
    return Player(
        pid,
        connection,
        remote,
        call_timeout=settings.call_timeout,
        poll_interval=settings.poll_interval,
    )
