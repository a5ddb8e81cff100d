# omxcontrol/control/replies.py

# Decoders for single-value D-Bus replies. dbus-python hands back its own
# wrapper types (dbus.Boolean, dbus.Int64, dbus.Double, dbus.String,
# dbus.Array); these turn them into plain Python values.

import dbus

from .errors import UnexpectedReplyError


def as_bool(member: str, value: object) -> bool:
    # dbus.Boolean subclasses int, not bool
    if isinstance(value, (bool, dbus.Boolean)):
        return bool(value)
    raise UnexpectedReplyError(member, "boolean", value)


def as_int64(member: str, value: object) -> int:
    if isinstance(value, int) and not isinstance(value, (bool, dbus.Boolean)):
        return int(value)
    raise UnexpectedReplyError(member, "int64", value)


def as_float64(member: str, value: object) -> float:
    if isinstance(value, float):
        return float(value)
    raise UnexpectedReplyError(member, "double", value)


def as_string(member: str, value: object) -> str:
    if isinstance(value, str):
        return str(value)
    raise UnexpectedReplyError(member, "string", value)


def as_string_list(member: str, value: object) -> list[str]:
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return [str(item) for item in value]
    raise UnexpectedReplyError(member, "string array", value)
