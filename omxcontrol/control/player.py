# omxcontrol/control/player.py

import enum
import logging
import threading
import time
from typing import Any

import dbus
from dbus.exceptions import DBusException

from ..process import is_process_alive
from . import replies
from .actions import Action
from .base import RemoteObject
from .errors import PlayerNotReadyError, UnexpectedReplyError
from .names import REMOTE_NAMES, split_name

READY_POLL_INTERVAL = 0.05  # seconds between readiness probes


class ReadyState(enum.Enum):
    UNKNOWN = "unknown"
    READY = "ready"
    UNREACHABLE = "unreachable"


class Player:
    """Drives a running omxplayer over its D-Bus interface.

    Every method is one blocking round trip to the player. Errors from the bus
    (`dbus.exceptions.DBusException`) propagate unchanged; a reply of the wrong
    type raises `UnexpectedReplyError`. Method names and argument types follow
    https://github.com/popcornmix/omxplayer#dbus-control.

    Thread safety of concurrent calls is whatever the dbus-python connection
    provides; only the readiness state is guarded here.
    """

    def __init__(
        self,
        pid: int,
        connection: Any,
        remote: RemoteObject,
        call_timeout: float | None = None,
        poll_interval: float = READY_POLL_INTERVAL,
    ):
        self._pid = pid
        self._connection = connection
        self._remote = remote
        self._call_timeout = call_timeout
        self._poll_interval = poll_interval
        self._state = ReadyState.UNKNOWN
        self._state_lock = threading.Lock()

    @property
    def pid(self) -> int:
        return self._pid

    @property
    def connection(self) -> Any:
        return self._connection

    @property
    def ready_state(self) -> ReadyState:
        return self._state

    def _call(self, operation: str, *args: Any) -> Any:
        qualified = REMOTE_NAMES[operation]
        interface, member = split_name(qualified)
        logging.debug(f"omxplayer: dbus call path={qualified} params={list(args)}")
        method = self._remote.get_dbus_method(member, dbus_interface=interface)
        if self._call_timeout is not None:
            return method(*args, timeout=self._call_timeout)
        return method(*args)

    def _get_bool(self, operation: str) -> bool:
        return replies.as_bool(REMOTE_NAMES[operation], self._call(operation))

    def _get_int64(self, operation: str) -> int:
        return replies.as_int64(REMOTE_NAMES[operation], self._call(operation))

    def _get_float64(self, operation: str) -> float:
        return replies.as_float64(REMOTE_NAMES[operation], self._call(operation))

    def _get_string(self, operation: str) -> str:
        return replies.as_string(REMOTE_NAMES[operation], self._call(operation))

    def _get_string_list(self, operation: str) -> list[str]:
        return replies.as_string_list(REMOTE_NAMES[operation], self._call(operation))

    # Lifecycle and readiness

    def is_running(self) -> bool:
        """True if the omxplayer process is still alive."""
        return is_process_alive(self._pid)

    def is_ready(self) -> bool:
        """True once the player has answered a CanQuit probe.

        The first successful probe latches; later calls return True without
        touching the bus.
        """
        if self._state is ReadyState.READY:
            return True

        try:
            self.can_quit()
        except (DBusException, UnexpectedReplyError) as e:
            logging.debug(f"omxplayer: readiness probe failed: {e}")
            with self._state_lock:
                if self._state is not ReadyState.READY:
                    self._state = ReadyState.UNREACHABLE
            return False

        with self._state_lock:
            if self._state is not ReadyState.READY:
                self._state = ReadyState.READY
                logging.info(f"omxplayer (pid {self._pid}) is ready for D-Bus commands.")
        return True

    def wait_for_ready(
        self,
        timeout: float | None = None,
        interval: float | None = None,
        cancel: threading.Event | None = None,
    ) -> None:
        """Blocks until is_ready() reports True.

        Args:
            timeout: Seconds to wait before giving up. None waits forever.
            interval: Seconds between probes; defaults to the poll interval
                the player was built with.
            cancel: Event that ends the wait early when set.

        Raises:
            PlayerNotReadyError: The timeout elapsed or `cancel` was set first.
        """
        interval = self._poll_interval if interval is None else interval
        deadline = None if timeout is None else time.monotonic() + timeout

        while not self.is_ready():
            if cancel is not None and cancel.is_set():
                raise PlayerNotReadyError(f"Wait for omxplayer (pid {self._pid}) was cancelled")
            if deadline is not None and time.monotonic() >= deadline:
                raise PlayerNotReadyError(f"omxplayer (pid {self._pid}) not ready after {timeout}s")
            if cancel is not None:
                cancel.wait(interval)
            else:
                time.sleep(interval)

    # Root interface

    def quit(self) -> None:
        """Stops playback and terminates the omxplayer process."""
        self._call("quit")

    def can_quit(self) -> bool:
        return self._get_bool("can_quit")

    def fullscreen(self) -> bool:
        return self._get_bool("fullscreen")

    def can_set_fullscreen(self) -> bool:
        return self._get_bool("can_set_fullscreen")

    def can_raise(self) -> bool:
        """True if the player can be brought to the front."""
        return self._get_bool("can_raise")

    def has_track_list(self) -> bool:
        return self._get_bool("has_track_list")

    def identity(self) -> str:
        """Name of the player instance."""
        return self._get_string("identity")

    def supported_uri_schemes(self) -> list[str]:
        return self._get_string_list("supported_uri_schemes")

    def supported_mime_types(self) -> list[str]:
        return self._get_string_list("supported_mime_types")

    # Player capabilities

    def can_go_next(self) -> bool:
        return self._get_bool("can_go_next")

    def can_go_previous(self) -> bool:
        return self._get_bool("can_go_previous")

    def can_seek(self) -> bool:
        return self._get_bool("can_seek")

    def can_control(self) -> bool:
        return self._get_bool("can_control")

    def can_play(self) -> bool:
        return self._get_bool("can_play")

    def can_pause(self) -> bool:
        return self._get_bool("can_pause")

    # Transport

    def next(self) -> None:
        """Skips to the next chapter."""
        self._call("next")

    def previous(self) -> None:
        """Skips to the previous chapter."""
        self._call("previous")

    def pause(self) -> None:
        """Pauses if playing, resumes otherwise (omxplayer treats Pause as a toggle)."""
        self._call("pause")

    def play_pause(self) -> None:
        self._call("play_pause")

    def stop(self) -> None:
        self._call("stop")

    def seek(self, amount: int) -> int:
        """Relative seek by `amount` microseconds. Returns the new position."""
        reply = self._call("seek", dbus.Int64(amount))
        return replies.as_int64(REMOTE_NAMES["seek"], reply)

    def set_position(self, path: str, position: int) -> int:
        """Absolute seek to `position` microseconds. Returns the new position.

        omxplayer ignores `path`, but it must be a valid object path.
        """
        reply = self._call("set_position", dbus.ObjectPath(path), dbus.Int64(position))
        return replies.as_int64(REMOTE_NAMES["set_position"], reply)

    def playback_status(self) -> str:
        """'Playing' or 'Paused'."""
        return self._get_string("playback_status")

    # Audio

    def get_volume(self) -> float:
        """Current volume as a linear multiplier (1.0 is unchanged)."""
        return self._get_float64("volume")

    def set_volume(self, volume: float) -> float:
        """Sets the volume and returns the value the player applied."""
        reply = self._call("volume", dbus.Double(volume))
        return replies.as_float64(REMOTE_NAMES["volume"], reply)

    def mute(self) -> None:
        self._call("mute")

    def unmute(self) -> None:
        self._call("unmute")

    # Stream information

    def position(self) -> int:
        """Current position in microseconds."""
        return self._get_int64("position")

    def aspect(self) -> float:
        return self._get_float64("aspect")

    def video_stream_count(self) -> int:
        return self._get_int64("video_stream_count")

    def res_width(self) -> int:
        return self._get_int64("res_width")

    def res_height(self) -> int:
        return self._get_int64("res_height")

    def duration(self) -> int:
        """Total length in microseconds."""
        return self._get_int64("duration")

    def minimum_rate(self) -> float:
        return self._get_float64("minimum_rate")

    def maximum_rate(self) -> float:
        return self._get_float64("maximum_rate")

    # Tracks and display

    def list_subtitles(self) -> list[str]:
        """Subtitle tracks as omxplayer describes them, e.g. '0:eng:English:ass:active'."""
        return self._get_string_list("list_subtitles")

    def list_audio(self) -> list[str]:
        return self._get_string_list("list_audio")

    def list_video(self) -> list[str]:
        return self._get_string_list("list_video")

    def select_subtitle(self, index: int) -> bool:
        """Switches to subtitle track `index`. False if the player refused the index."""
        reply = self._call("select_subtitle", dbus.Int32(index))
        return replies.as_bool(REMOTE_NAMES["select_subtitle"], reply)

    def select_audio(self, index: int) -> bool:
        """Switches to audio track `index`. False if the player refused the index."""
        reply = self._call("select_audio", dbus.Int32(index))
        return replies.as_bool(REMOTE_NAMES["select_audio"], reply)

    def show_subtitles(self) -> None:
        self._call("show_subtitles")

    def hide_subtitles(self) -> None:
        self._call("hide_subtitles")

    def hide_video(self) -> None:
        self._call("hide_video")

    def unhide_video(self) -> None:
        self._call("unhide_video")

    def action(self, code: int | Action) -> None:
        """Runs a keyboard action (see Action) as if its key had been pressed."""
        self._call("action", dbus.Int32(int(code)))
