# omxcontrol/control/names.py

# Fully-qualified D-Bus member names understood by omxplayer. These strings
# must match the player byte for byte.

IFACE_PROPS = "org.freedesktop.DBus.Properties"
IFACE_MPRIS = "org.mpris.MediaPlayer2"
IFACE_OMX_ROOT = IFACE_MPRIS
IFACE_OMX_PLAYER = IFACE_OMX_ROOT + ".Player"

BUS_NAME = "org.mpris.MediaPlayer2.omxplayer"
OBJECT_PATH = "/org/mpris/MediaPlayer2"

# omxplayer answers its properties as plain methods on the Properties
# interface, named after the property.
REMOTE_NAMES: dict[str, str] = {
    "quit": IFACE_OMX_ROOT + ".Quit",
    "can_quit": IFACE_PROPS + ".CanQuit",
    "fullscreen": IFACE_PROPS + ".Fullscreen",
    "can_set_fullscreen": IFACE_PROPS + ".CanSetFullscreen",
    "can_raise": IFACE_PROPS + ".CanRaise",
    "has_track_list": IFACE_PROPS + ".HasTrackList",
    "identity": IFACE_PROPS + ".Identity",
    "supported_uri_schemes": IFACE_PROPS + ".SupportedUriSchemes",
    "supported_mime_types": IFACE_PROPS + ".SupportedMimeTypes",
    "can_go_next": IFACE_PROPS + ".CanGoNext",
    "can_go_previous": IFACE_PROPS + ".CanGoPrevious",
    "can_seek": IFACE_PROPS + ".CanSeek",
    "can_control": IFACE_PROPS + ".CanControl",
    "can_play": IFACE_PROPS + ".CanPlay",
    "can_pause": IFACE_PROPS + ".CanPause",
    "next": IFACE_OMX_PLAYER + ".Next",
    "previous": IFACE_OMX_PLAYER + ".Previous",
    "pause": IFACE_OMX_PLAYER + ".Pause",
    "play_pause": IFACE_OMX_PLAYER + ".PlayPause",
    "stop": IFACE_OMX_PLAYER + ".Stop",
    "seek": IFACE_OMX_PLAYER + ".Seek",
    "set_position": IFACE_OMX_PLAYER + ".SetPosition",
    "playback_status": IFACE_PROPS + ".PlaybackStatus",
    "volume": IFACE_PROPS + ".Volume",
    "mute": IFACE_PROPS + ".Mute",
    "unmute": IFACE_PROPS + ".Unmute",
    "position": IFACE_PROPS + ".Position",
    "aspect": IFACE_PROPS + ".Aspect",
    "video_stream_count": IFACE_PROPS + ".VideoStreamCount",
    "res_width": IFACE_PROPS + ".ResWidth",
    "res_height": IFACE_PROPS + ".ResHeight",
    "duration": IFACE_PROPS + ".Duration",
    "minimum_rate": IFACE_PROPS + ".MinimumRate",
    "maximum_rate": IFACE_PROPS + ".MaximumRate",
    "list_subtitles": IFACE_OMX_PLAYER + ".ListSubtitles",
    "hide_video": IFACE_OMX_PLAYER + ".HideVideo",
    "unhide_video": IFACE_OMX_PLAYER + ".UnHideVideo",
    "list_audio": IFACE_OMX_PLAYER + ".ListAudio",
    "list_video": IFACE_OMX_PLAYER + ".ListVideo",
    "select_subtitle": IFACE_OMX_PLAYER + ".SelectSubtitle",
    "select_audio": IFACE_OMX_PLAYER + ".SelectAudio",
    "show_subtitles": IFACE_OMX_PLAYER + ".ShowSubtitles",
    "hide_subtitles": IFACE_OMX_PLAYER + ".HideSubtitles",
    "action": IFACE_OMX_PLAYER + ".Action",
}


def split_name(qualified: str) -> tuple[str, str]:
    """Splits 'interface.Member' into (interface, member) at the last dot."""
    interface, _, member = qualified.rpartition(".")
    if not interface or not member:
        raise ValueError(f"Not a qualified D-Bus member name: '{qualified}'")
    return interface, member
