# omxcontrol/control/actions.py

import enum


class Action(enum.IntEnum):
    """omxplayer keyboard action codes, usable with Player.action()."""

    DECREASE_SPEED = 1
    INCREASE_SPEED = 2
    REWIND = 3
    FAST_FORWARD = 4
    SHOW_INFO = 5
    PREVIOUS_AUDIO = 6
    NEXT_AUDIO = 7
    PREVIOUS_CHAPTER = 8
    NEXT_CHAPTER = 9
    PREVIOUS_SUBTITLE = 10
    NEXT_SUBTITLE = 11
    TOGGLE_SUBTITLE = 12
    DECREASE_SUBTITLE_DELAY = 13
    INCREASE_SUBTITLE_DELAY = 14
    EXIT = 15
    PLAY_PAUSE = 16
    DECREASE_VOLUME = 17
    INCREASE_VOLUME = 18
    SEEK_BACK_SMALL = 19
    SEEK_FORWARD_SMALL = 20
    SEEK_BACK_LARGE = 21
    SEEK_FORWARD_LARGE = 22
