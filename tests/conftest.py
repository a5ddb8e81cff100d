from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import pytest

from omxcontrol.control.player import Player


@dataclass
class RecordedCall:
    interface: str | None
    member: str
    args: tuple[Any, ...]
    kwargs: dict[str, Any]

    @property
    def qualified(self) -> str:
        return f"{self.interface}.{self.member}"


@dataclass
class FakeRemote:
    """Scripted stand-in for a dbus-python proxy object.

    Outcomes are queued per fully-qualified member name; each call consumes
    one, and the last one repeats. An exception outcome is raised.
    """

    calls: list[RecordedCall] = field(default_factory=list)
    outcomes: dict[str, list[Any]] = field(default_factory=dict)

    def reply(self, qualified: str, *outcomes: Any) -> "FakeRemote":
        self.outcomes[qualified] = list(outcomes)
        return self

    def get_dbus_method(self, member: str, dbus_interface: str | None = None):
        def method(*args: Any, **kwargs: Any) -> Any:
            call = RecordedCall(dbus_interface, member, args, kwargs)
            self.calls.append(call)
            queue = self.outcomes.get(call.qualified)
            if not queue:
                raise AssertionError(f"Unexpected call to {call.qualified}")
            outcome = queue.pop(0) if len(queue) > 1 else queue[0]
            if isinstance(outcome, BaseException):
                raise outcome
            return outcome

        return method

    def calls_to(self, qualified: str) -> list[RecordedCall]:
        return [call for call in self.calls if call.qualified == qualified]


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote()


@pytest.fixture
def player(remote: FakeRemote) -> Player:
    return Player(4242, object(), remote, poll_interval=0)
