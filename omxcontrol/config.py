# omxcontrol/config.py

import getpass
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .control.names import BUS_NAME, OBJECT_PATH
from .control.player import READY_POLL_INTERVAL


def default_address_file() -> str:
    """Path omxplayer writes its private bus address to: /tmp/omxplayerdbus.<user>."""
    user = os.environ.get("USER") or getpass.getuser()
    return f"/tmp/omxplayerdbus.{user}"


def _optional_float_env(name: str) -> float | None:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got '{raw}'") from None


def _float_env(name: str, default: float) -> float:
    value = _optional_float_env(name)
    return default if value is None else value


@dataclass
class Settings:
    bus_name: str = BUS_NAME
    object_path: str = OBJECT_PATH
    address_file: str = field(default_factory=default_address_file)
    process_name: str = "omxplayer"
    poll_interval: float = READY_POLL_INTERVAL
    call_timeout: float | None = None
    log_level: str = "info"

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "Settings":
        """Reads settings from OMXCONTROL_* environment variables, after loading a .env file."""
        _ = load_dotenv(dotenv_path)

        return cls(
            bus_name=os.environ.get("OMXCONTROL_BUS_NAME", BUS_NAME),
            object_path=os.environ.get("OMXCONTROL_OBJECT_PATH", OBJECT_PATH),
            address_file=os.environ.get("OMXCONTROL_ADDRESS_FILE") or default_address_file(),
            process_name=os.environ.get("OMXCONTROL_PROCESS_NAME", "omxplayer"),
            poll_interval=_float_env("OMXCONTROL_POLL_INTERVAL", READY_POLL_INTERVAL),
            call_timeout=_optional_float_env("OMXCONTROL_CALL_TIMEOUT"),
            log_level=os.environ.get("OMXCONTROL_LOG_LEVEL", "info"),
        )
