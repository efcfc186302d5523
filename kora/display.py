"""Display helpers: time labels, spectrum bars, lyric windows and cycling."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence

BAR_CHARS = ("▁", "▂", "▃", "▄", "▅", "▆", "▇", "█")
FULL_BLOCK = "█"
EMPTY_CELL = " "

_EQ_RANGE_DB = 12.0

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_fold(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class VisualizerMode(enum.Enum):
    """How the spectrum visualizer is shown."""

    OFF = "off"
    NORMAL = "normal"
    FULLSCREEN = "fullscreen"

    def toggled(self) -> VisualizerMode:
        """The mode after switching the visualizer on or off."""
        if self is VisualizerMode.OFF:
            return VisualizerMode.NORMAL
        return VisualizerMode.OFF

    def fullscreen_toggled(self) -> VisualizerMode:
        """The mode after switching fullscreen on or off."""
        if self is VisualizerMode.FULLSCREEN:
            return VisualizerMode.NORMAL
        return VisualizerMode.FULLSCREEN


def format_duration(seconds: float) -> str:
    """Format a duration as minutes and two-digit seconds, dropping fractions."""
    if seconds < 0:
        raise ValueError(f"duration cannot be negative: {seconds}")
    total = int(seconds)
    minutes, secs = divmod(total, 60)
    return f"{minutes}:{secs:02d}"


def sleep_label(remaining_secs: float, fading: bool) -> str:
    """Status-bar text for a running sleep timer."""
    if fading:
        return " | Sleep: fading..."
    return f" | Sleep: {format_duration(remaining_secs)}"


def spectrum_column(magnitude: float, height: int) -> list[str]:
    """Characters for one spectrum bar, bottom row first.

    The magnitude (0.0 to 1.0) is mapped to eighths of a row so the top of the
    bar can be drawn with a partial block.
    """
    if height < 0:
        raise ValueError(f"height cannot be negative: {height}")
    total_eighths = max(0, _round_half_away(magnitude * height * 8.0))
    full_rows, remainder = divmod(total_eighths, 8)
    column = []
    for row in range(height):
        if row < full_rows:
            column.append(FULL_BLOCK)
        elif row == full_rows and remainder > 0:
            column.append(BAR_CHARS[remainder - 1])
        else:
            column.append(EMPTY_CELL)
    return column


def lyrics_window(total: int, current: int | None, visible: int) -> tuple[int, int]:
    """The (start, end) slice of lyric lines to show, centred on the current one."""
    if visible <= 0 or total <= 0:
        return (0, 0)
    center = current if current is not None else 0
    half = visible // 2
    start = max(center - half, 0)
    end = min(start + visible, total)
    if end == total:
        start = max(total - visible, 0)
    return (start, end)


def eq_bar_rows(gain: float, half: int) -> int:
    """Rows an EQ band bar spans from the zero line.

    Positive results extend upwards, negative downwards. The ±12 dB range
    fills ``half`` rows; larger gains are clamped.
    """
    if half < 0:
        raise ValueError(f"half height cannot be negative: {half}")
    db_per_row = _EQ_RANGE_DB / half if half > 0 else 1.0
    rows = min(_round_half_away(abs(gain) / db_per_row), half)
    return rows if gain >= 0.0 else -rows


def next_device_index(names: Sequence[str], current: str | None) -> int | None:
    """Index of the device after the current one, wrapping around.

    The current device is matched ignoring ASCII case; if it is not found the
    first device is chosen. Returns None when there are no devices.
    """
    if not names:
        return None
    wanted = _ascii_fold(current or "")
    position = next(
        (i for i, name in enumerate(names) if _ascii_fold(name) == wanted),
        len(names),
    )
    return (position + 1) % len(names)


def next_theme_index(index: int, count: int) -> int:
    """Index of the next theme in cycle order."""
    if count <= 0:
        raise ValueError("there are no themes to cycle through")
    return (index + 1) % count


def progress_ratio(position: float, duration: float) -> float:
    """Fraction of the track played, capped at 1.0; 0.0 for unknown length."""
    if duration > 0.0:
        return min(position / duration, 1.0)
    return 0.0