# omxcontrol/control/errors.py

import enum

from dbus.exceptions import DBusException


class PlayerError(Exception):
    """Base class for errors raised by omxcontrol itself."""


class UnexpectedReplyError(PlayerError, TypeError):
    """The player answered, but not with a value of the expected type."""

    def __init__(self, member: str, expected: str, value: object):
        self.member = member
        self.expected = expected
        self.value = value
        super().__init__(f"{member}: expected {expected} reply, got {type(value).__name__} {value!r}")


class PlayerNotReadyError(PlayerError, TimeoutError):
    """wait_for_ready gave up before the player answered its readiness probe."""


class BusAddressError(PlayerError):
    """omxplayer's bus address file never appeared or is empty."""


class ErrorKind(enum.Enum):
    TRANSPORT = "transport"
    REMOTE_FAULT = "remote_fault"


_DBUS_ERROR_PREFIX = "org.freedesktop.DBus.Error."

# D-Bus error names that mean the call never reached a live player.
TRANSPORT_ERROR_NAMES = frozenset(
    _DBUS_ERROR_PREFIX + name
    for name in (
        "ServiceUnknown",
        "NameHasNoOwner",
        "NoReply",
        "Disconnected",
        "NoServer",
        "Timeout",
        "TimedOut",
        "UnknownObject",
        "UnknownMethod",
        "UnknownInterface",
        # raised by libdbus while opening the connection
        "FileNotFound",
        "BadAddress",
        "AuthFailed",
        "IOError",
        "NoNetwork",
        "AccessDenied",
        "LimitsExceeded",
    )
)


def classify_error(exc: BaseException) -> ErrorKind:
    """Sorts an exception raised by a Player call into transport or remote fault.

    This does not wrap or alter the exception; callers that want to react
    differently to a dead connection and a rejected command can branch on it.
    """
    if isinstance(exc, UnexpectedReplyError):
        return ErrorKind.TRANSPORT
    if isinstance(exc, DBusException):
        name = exc.get_dbus_name()
        if name is None or name in TRANSPORT_ERROR_NAMES:
            return ErrorKind.TRANSPORT
        return ErrorKind.REMOTE_FAULT
    raise TypeError(f"Not a player call error: {type(exc).__name__}")


def is_transport_error(exc: BaseException) -> bool:
    return classify_error(exc) is ErrorKind.TRANSPORT
