"""Key bindings and remote-control requests mapped to player and view actions.

Keys are strings. A printable key is its single character (space is ``" "``).
Other keys use the names in this module: ``ESC``, ``ENTER``, ``BACKSPACE``,
``DELETE``, ``UP``, ``DOWN``, ``LEFT`` and ``RIGHT``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

ESC = "Esc"
ENTER = "Enter"
BACKSPACE = "Backspace"
DELETE = "Delete"
UP = "Up"
DOWN = "Down"
LEFT = "Left"
RIGHT = "Right"

SEEK_STEP_SECS = 5.0


class CommandKind(enum.Enum):
    """The kinds of command the player accepts."""

    PLAY_PAUSE = "play_pause"
    STOP = "stop"
    QUIT = "quit"
    NEXT_TRACK = "next_track"
    PREV_TRACK = "prev_track"
    SEEK_FORWARD = "seek_forward"
    SEEK_BACKWARD = "seek_backward"
    VOLUME_UP = "volume_up"
    VOLUME_DOWN = "volume_down"
    SET_VOLUME = "set_volume"
    SET_DEVICE = "set_device"
    CYCLE_EQ_PRESET = "cycle_eq_preset"
    EQ_BAND_LEFT = "eq_band_left"
    EQ_BAND_RIGHT = "eq_band_right"
    EQ_BAND_UP = "eq_band_up"
    EQ_BAND_DOWN = "eq_band_down"
    TOGGLE_FAVORITE = "toggle_favorite"
    TOGGLE_SHUFFLE = "toggle_shuffle"
    CYCLE_REPEAT = "cycle_repeat"
    CYCLE_SLEEP_TIMER = "cycle_sleep_timer"
    SPEED_UP = "speed_up"
    SPEED_DOWN = "speed_down"
    NEXT_CHAPTER = "next_chapter"
    PREV_CHAPTER = "prev_chapter"


_NUMERIC_KINDS = frozenset(
    {CommandKind.SEEK_FORWARD, CommandKind.SEEK_BACKWARD, CommandKind.SET_VOLUME}
)
_TEXT_KINDS = frozenset({CommandKind.SET_DEVICE})


@dataclass(frozen=True)
class PlayerCommand:
    """A command for the player, with its argument where the kind takes one.

    Seeks take a number of seconds, a volume change a level in dB and a
    device change a device name; other kinds take no argument.
    """

    kind: CommandKind
    argument: float | str | None = None

    def __post_init__(self) -> None:
        if self.kind in _NUMERIC_KINDS:
            if isinstance(self.argument, bool) or not isinstance(
                self.argument, (int, float)
            ):
                raise TypeError(f"{self.kind.value} needs a number")
        elif self.kind in _TEXT_KINDS:
            if not isinstance(self.argument, str):
                raise TypeError(f"{self.kind.value} needs a name")
        elif self.argument is not None:
            raise TypeError(f"{self.kind.value} takes no argument")


class ViewAction(enum.Enum):
    """Actions on the interface itself rather than on the player."""

    SHOW_EQ = "show_eq"
    CLOSE_EQ = "close_eq"
    CYCLE_THEME = "cycle_theme"
    CYCLE_DEVICE = "cycle_device"
    OPEN_BROWSER = "open_browser"
    OPEN_PODCASTS = "open_podcasts"
    TOGGLE_VISUALIZER = "toggle_visualizer"
    TOGGLE_FULLSCREEN = "toggle_fullscreen"
    TOGGLE_LYRICS = "toggle_lyrics"
    CLOSE = "close"
    SELECT_UP = "select_up"
    SELECT_DOWN = "select_down"
    ENTER = "enter"
    PARENT = "parent"
    BACK = "back"
    ADD_FEED = "add_feed"
    REMOVE_FEED = "remove_feed"
    REFRESH = "refresh"
    DOWNLOAD = "download"
    CLEANUP = "cleanup"
    QUIT = "quit"
    CANCEL_INPUT = "cancel_input"
    SUBMIT_INPUT = "submit_input"
    INPUT_BACKSPACE = "input_backspace"
    INPUT_CHAR = "input_char"


def _cmd(kind: CommandKind, argument: float | str | None = None) -> PlayerCommand:
    return PlayerCommand(kind, argument)


_PLAYBACK_KEYS: dict[str, PlayerCommand] = {
    " ": _cmd(CommandKind.PLAY_PAUSE),
    "n": _cmd(CommandKind.NEXT_TRACK),
    "p": _cmd(CommandKind.PREV_TRACK),
    "+": _cmd(CommandKind.VOLUME_UP),
    "=": _cmd(CommandKind.VOLUME_UP),
    "-": _cmd(CommandKind.VOLUME_DOWN),
    "q": _cmd(CommandKind.QUIT),
}

_MAIN_KEYS: dict[str, PlayerCommand | ViewAction] = {
    **_PLAYBACK_KEYS,
    "s": _cmd(CommandKind.STOP),
    RIGHT: _cmd(CommandKind.SEEK_FORWARD, SEEK_STEP_SECS),
    LEFT: _cmd(CommandKind.SEEK_BACKWARD, SEEK_STEP_SECS),
    "e": ViewAction.SHOW_EQ,
    "t": ViewAction.CYCLE_THEME,
    "d": ViewAction.CYCLE_DEVICE,
    "o": ViewAction.OPEN_BROWSER,
    "P": ViewAction.OPEN_PODCASTS,
    "f": _cmd(CommandKind.TOGGLE_FAVORITE),
    "z": _cmd(CommandKind.TOGGLE_SHUFFLE),
    "r": _cmd(CommandKind.CYCLE_REPEAT),
    "S": _cmd(CommandKind.CYCLE_SLEEP_TIMER),
    "]": _cmd(CommandKind.SPEED_UP),
    "[": _cmd(CommandKind.SPEED_DOWN),
    "v": ViewAction.TOGGLE_VISUALIZER,
    "V": ViewAction.TOGGLE_FULLSCREEN,
    "y": ViewAction.TOGGLE_LYRICS,
    ".": _cmd(CommandKind.NEXT_CHAPTER),
    ",": _cmd(CommandKind.PREV_CHAPTER),
}

_EQ_KEYS: dict[str, PlayerCommand | ViewAction] = {
    **_PLAYBACK_KEYS,
    ESC: ViewAction.CLOSE_EQ,
    "e": _cmd(CommandKind.CYCLE_EQ_PRESET),
    "h": _cmd(CommandKind.EQ_BAND_LEFT),
    LEFT: _cmd(CommandKind.EQ_BAND_LEFT),
    "l": _cmd(CommandKind.EQ_BAND_RIGHT),
    RIGHT: _cmd(CommandKind.EQ_BAND_RIGHT),
    "k": _cmd(CommandKind.EQ_BAND_UP),
    UP: _cmd(CommandKind.EQ_BAND_UP),
    "j": _cmd(CommandKind.EQ_BAND_DOWN),
    DOWN: _cmd(CommandKind.EQ_BAND_DOWN),
}

_BROWSER_KEYS: dict[str, ViewAction] = {
    ESC: ViewAction.CLOSE,
    "j": ViewAction.SELECT_DOWN,
    DOWN: ViewAction.SELECT_DOWN,
    "k": ViewAction.SELECT_UP,
    UP: ViewAction.SELECT_UP,
    ENTER: ViewAction.ENTER,
    BACKSPACE: ViewAction.PARENT,
    "h": ViewAction.PARENT,
}

_PODCAST_KEYS: dict[str, ViewAction] = {
    ESC: ViewAction.BACK,
    BACKSPACE: ViewAction.BACK,
    "j": ViewAction.SELECT_DOWN,
    DOWN: ViewAction.SELECT_DOWN,
    "k": ViewAction.SELECT_UP,
    UP: ViewAction.SELECT_UP,
    ENTER: ViewAction.ENTER,
    "a": ViewAction.ADD_FEED,
    "x": ViewAction.REMOVE_FEED,
    DELETE: ViewAction.REMOVE_FEED,
    "R": ViewAction.REFRESH,
    "D": ViewAction.DOWNLOAD,
    "C": ViewAction.CLEANUP,
    "q": ViewAction.QUIT,
}

_PODCAST_INPUT_KEYS: dict[str, ViewAction] = {
    ESC: ViewAction.CANCEL_INPUT,
    ENTER: ViewAction.SUBMIT_INPUT,
    BACKSPACE: ViewAction.INPUT_BACKSPACE,
}


def _check_key(key: str) -> None:
    if not key:
        raise ValueError("key cannot be empty")


def map_main_key(key: str) -> PlayerCommand | ViewAction | None:
    """What a key does in the main view, or None if it is unbound."""
    _check_key(key)
    return _MAIN_KEYS.get(key)


def map_eq_key(key: str) -> PlayerCommand | ViewAction | None:
    """What a key does while the equalizer is open, or None if it is unbound."""
    _check_key(key)
    return _EQ_KEYS.get(key)


def map_browser_key(key: str) -> ViewAction | None:
    """What a key does in the file browser, or None if it is unbound."""
    _check_key(key)
    return _BROWSER_KEYS.get(key)


def map_podcast_key(key: str, adding_feed: bool) -> ViewAction | None:
    """What a key does in the podcast view, or None if it is unbound.

    While a feed URL is being typed every printable key yields
    ``INPUT_CHAR``: the key itself is the character to append. Removing a
    feed applies in the feed list, downloading and cleaning up in the
    episode list; the caller checks the mode.
    """
    _check_key(key)
    if adding_feed:
        action = _PODCAST_INPUT_KEYS.get(key)
        if action is None and len(key) == 1:
            return ViewAction.INPUT_CHAR
        return action
    return _PODCAST_KEYS.get(key)


_SIMPLE_REQUESTS: dict[str, CommandKind] = {
    "toggle": CommandKind.PLAY_PAUSE,
    "stop": CommandKind.STOP,
    "next": CommandKind.NEXT_TRACK,
    "prev": CommandKind.PREV_TRACK,
}


def ipc_command(
    request: str | tuple[str, float], playing: bool
) -> PlayerCommand | None:
    """The player command for a remote-control request.

    A request is its name (``status``, ``play``, ``pause``, ``toggle``,
    ``stop``, ``next``, ``prev``) or ``("volume", db)``. Returns None when
    no command is needed: for ``status``, for ``play`` while playing and for
    ``pause`` while not playing.
    """
    if isinstance(request, tuple):
        if len(request) != 2 or request[0] != "volume":
            raise ValueError(f"unknown request: {request!r}")
        return PlayerCommand(CommandKind.SET_VOLUME, request[1])
    if request == "status":
        return None
    if request == "play":
        return None if playing else PlayerCommand(CommandKind.PLAY_PAUSE)
    if request == "pause":
        return PlayerCommand(CommandKind.PLAY_PAUSE) if playing else None
    if request == "volume":
        raise ValueError("volume request needs a level in dB")
    kind = _SIMPLE_REQUESTS.get(request)
    if kind is None:
        raise ValueError(f"unknown request: {request!r}")
    return PlayerCommand(kind)