import getopt
import logging
import sys
import time
from typing import Any, Callable

from dbus.exceptions import DBusException

from .bus import open_player
from .config import Settings
from .control.errors import (
    ErrorKind,
    PlayerError,
    PlayerNotReadyError,
    UnexpectedReplyError,
    classify_error,
)
from .control.player import Player

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_TRANSPORT = 2
EXIT_REMOTE_FAULT = 3
EXIT_NOT_READY = 4

USAGE = """Usage: omxcontrol [--pid=PID] [--log-level=LEVEL] [--timeout=SECONDS]
                  [--call-timeout=SECONDS] COMMAND [ARG...]

Commands:
  status                       identity, playback status, position, duration, volume
  volume [VALUE]               get, or set to VALUE
  seek MICROSECONDS            relative seek
  set-position PATH MICROSECONDS
  select-audio INDEX | select-subtitle INDEX | action CODE

--timeout bounds the whole wait: bus address file plus readiness.
  """


def setup_logging(level='info'):
    level_dict = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warning': logging.WARNING,
        'error': logging.ERROR,
        'critical': logging.CRITICAL
    }
    numeric_level = level_dict.get(level.lower(), logging.INFO)  # Default to INFO if level is not recognized
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def _status(player: Player) -> list[Any]:
    return [
        f"identity: {player.identity()}",
        f"status: {player.playback_status()}",
        f"position: {player.position()}",
        f"duration: {player.duration()}",
        f"volume: {player.get_volume()}",
    ]


def _volume(player: Player, *args: str) -> float:
    if not args:
        return player.get_volume()
    return player.set_volume(float(args[0]))


# command name -> (handler, converters for its positional arguments)
COMMANDS: dict[str, tuple[Callable[..., Any], tuple[Callable[[str], Any], ...]]] = {
    "status": (_status, ()),
    "quit": (Player.quit, ()),
    "next": (Player.next, ()),
    "previous": (Player.previous, ()),
    "pause": (Player.pause, ()),
    "play-pause": (Player.play_pause, ()),
    "stop": (Player.stop, ()),
    "mute": (Player.mute, ()),
    "unmute": (Player.unmute, ()),
    "hide-video": (Player.hide_video, ()),
    "unhide-video": (Player.unhide_video, ()),
    "show-subtitles": (Player.show_subtitles, ()),
    "hide-subtitles": (Player.hide_subtitles, ()),
    "can-quit": (Player.can_quit, ()),
    "fullscreen": (Player.fullscreen, ()),
    "can-set-fullscreen": (Player.can_set_fullscreen, ()),
    "can-raise": (Player.can_raise, ()),
    "has-track-list": (Player.has_track_list, ()),
    "identity": (Player.identity, ()),
    "supported-uri-schemes": (Player.supported_uri_schemes, ()),
    "supported-mime-types": (Player.supported_mime_types, ()),
    "can-go-next": (Player.can_go_next, ()),
    "can-go-previous": (Player.can_go_previous, ()),
    "can-seek": (Player.can_seek, ()),
    "can-control": (Player.can_control, ()),
    "can-play": (Player.can_play, ()),
    "can-pause": (Player.can_pause, ()),
    "playback-status": (Player.playback_status, ()),
    "position": (Player.position, ()),
    "aspect": (Player.aspect, ()),
    "video-stream-count": (Player.video_stream_count, ()),
    "res-width": (Player.res_width, ()),
    "res-height": (Player.res_height, ()),
    "duration": (Player.duration, ()),
    "minimum-rate": (Player.minimum_rate, ()),
    "maximum-rate": (Player.maximum_rate, ()),
    "list-subtitles": (Player.list_subtitles, ()),
    "list-audio": (Player.list_audio, ()),
    "list-video": (Player.list_video, ()),
    "seek": (Player.seek, (int,)),
    "set-position": (Player.set_position, (str, int)),
    "select-subtitle": (Player.select_subtitle, (int,)),
    "select-audio": (Player.select_audio, (int,)),
    "action": (Player.action, (int,)),
}


def parse_command(words: list[str]) -> tuple[Callable[..., Any], list[Any]]:
    """Resolves `words` (command name and its arguments) to a handler and converted arguments."""
    if not words:
        raise ValueError("Missing command")
    name, raw_args = words[0], words[1:]
    if name == "volume":
        if len(raw_args) > 1:
            raise ValueError("volume takes at most one argument")
        if raw_args:
            float(raw_args[0])
        return _volume, list(raw_args)
    if name not in COMMANDS:
        raise ValueError(f"Unknown command '{name}'")
    handler, converters = COMMANDS[name]
    if len(raw_args) != len(converters):
        raise ValueError(f"{name} takes {len(converters)} argument(s), got {len(raw_args)}")
    return handler, [convert(arg) for convert, arg in zip(converters, raw_args)]


def print_result(result: Any) -> None:
    if result is None:
        return
    if isinstance(result, list):
        for item in result:
            print(item)
    else:
        print(result)


def process_command_line_args(argv: list[str]) -> tuple[dict[str, str], list[str]]:
    options, words = getopt.getopt(
        argv,
        '',
        ["pid=", "log-level=", "timeout=", "call-timeout=", "help"]
    )
    return dict(options), words


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        options, words = process_command_line_args(argv)
    except getopt.GetoptError as e:
        print(f"Command line error: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return EXIT_USAGE

    if "--help" in options:
        print(USAGE)
        return EXIT_OK

    try:
        settings = Settings.from_env()
        setup_logging(options.get("--log-level", settings.log_level))
        if "--call-timeout" in options:
            settings.call_timeout = float(options["--call-timeout"])
        ready_timeout = float(options["--timeout"]) if "--timeout" in options else None
        pid = int(options["--pid"]) if "--pid" in options else None
        handler, args = parse_command(words)
    except ValueError as e:
        logging.error(f"Command line error: {e}")
        print(USAGE, file=sys.stderr)
        return EXIT_USAGE

    deadline = None if ready_timeout is None else time.monotonic() + ready_timeout
    try:
        player = open_player(pid, settings, timeout=ready_timeout)
    except DBusException as e:
        logging.error(f"Could not connect to omxplayer: {e}")
        return EXIT_TRANSPORT
    except PlayerError as e:
        logging.error(f"{e}")
        return EXIT_TRANSPORT

    try:
        remaining = None if deadline is None else max(0.0, deadline - time.monotonic())
        player.wait_for_ready(timeout=remaining)
        print_result(handler(player, *args))
    except PlayerNotReadyError as e:
        logging.error(f"{e}")
        return EXIT_NOT_READY
    except (DBusException, UnexpectedReplyError) as e:
        if classify_error(e) is ErrorKind.REMOTE_FAULT:
            logging.error(f"omxplayer rejected the command: {e}")
            return EXIT_REMOTE_FAULT
        logging.error(f"Could not reach omxplayer: {e}")
        return EXIT_TRANSPORT
    except PlayerError as e:
        logging.error(f"{e}")
        return EXIT_TRANSPORT
    return EXIT_OK
