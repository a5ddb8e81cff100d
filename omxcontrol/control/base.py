from typing import Any, Callable, Protocol


class RemoteObject(Protocol):
    """The part of a dbus-python proxy object the Player relies on.

    ``dbus.proxies.ProxyObject`` satisfies this; tests use a scripted stand-in.
    """

    def get_dbus_method(self, member: str, dbus_interface: str | None = None) -> Callable[..., Any]:
        """Returns a callable that invokes `member` on `dbus_interface` and returns the reply."""
        ...
