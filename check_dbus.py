#!/usr/bin/env python3
"""Quick omxplayer D-Bus diagnostic tool"""

import os

from dbus.exceptions import DBusException

from omxcontrol.bus import connect
from omxcontrol.config import Settings
from omxcontrol.control.errors import BusAddressError
from omxcontrol.control.player import Player
from omxcontrol.process import find_player_pid

def main():
    print("=== omxplayer D-Bus Diagnostic ===\n")
    settings = Settings.from_env()

    pid = find_player_pid(settings.process_name)
    if pid is None:
        print(f"✗ No running process named '{settings.process_name}'")
    else:
        print(f"✓ {settings.process_name} running with pid {pid}")

    print(f"\nAddress file: {settings.address_file}")
    if not os.path.isfile(settings.address_file):
        print("✗ Address file does not exist")

    try:
        connection, remote = connect(settings, timeout=0)
    except (BusAddressError, DBusException) as e:
        print(f"✗ Could not connect: {e}")
        print("\nPossible issues:")
        print("- omxplayer not started, or started by a different user")
        print("- Stale address file left behind by a previous omxplayer")
        return

    print(f"✓ Connected to {settings.bus_name}")
    player = Player(pid or 0, connection, remote)
    try:
        print(f"  Identity: {player.identity()}")
        print(f"  Status:   {player.playback_status()}")
        print(f"  Audio:    {player.list_audio()}")
    except DBusException as e:
        print(f"✗ Player did not answer: {e}")

if __name__ == "__main__":
    main()
