# omxcontrol/process.py

import logging

import psutil

PLAYER_BINARY = "omxplayer.bin"


def is_process_alive(pid: int) -> bool:
    """True if `pid` is in the process table and has not exited (zombies count as exited)."""
    try:
        process = psutil.Process(pid)
        return process.is_running() and process.status() != psutil.STATUS_ZOMBIE
    except psutil.NoSuchProcess:
        return False
    except psutil.Error as e:
        logging.debug(f"Error inspecting process {pid}: {e}")
        return False


def find_player_pid(name: str = "omxplayer") -> int | None:
    """Finds a running process whose name contains `name`.

    omxplayer is usually started through a launcher shell script of the same
    name that execs omxplayer.bin; the binary is preferred when both show up.
    """
    match: int | None = None
    try:
        for process in psutil.process_iter(['name']):
            process_name = process.info['name'] or ""
            if name.lower() not in process_name.lower():
                continue
            if process_name == PLAYER_BINARY:
                return process.pid
            if match is None:
                match = process.pid
    except psutil.Error as e:
        logging.debug(f"Error accessing process list for '{name}': {e}")
    return match
