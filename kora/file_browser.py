"""A navigable file browser for picking audio files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

AUDIO_EXTENSIONS = frozenset(
    {"mp3", "flac", "ogg", "wav", "opus", "aac", "m4a", "wma", "aiff"}
)

_DEFAULT_VISIBLE_HEIGHT = 20


@dataclass(frozen=True)
class DirEntry:
    """One entry shown in the file browser."""

    name: str
    path: Path
    is_dir: bool
    is_audio: bool


def is_audio_extension(ext: str) -> bool:
    """Whether a file extension (without the dot) names a supported audio format."""
    return ext.lower() in AUDIO_EXTENSIONS


def _extension(path: Path) -> str | None:
    suffix = path.suffix
    return suffix[1:] if suffix else None


def read_directory(path: str | os.PathLike[str]) -> list[DirEntry]:
    """List a directory: subdirectories first, then audio files.

    Hidden entries and non-audio files are left out; each group is sorted by
    name, ignoring case. An unreadable directory yields an empty list.
    """
    try:
        scanned = list(os.scandir(path))
    except OSError:
        return []

    dirs: list[DirEntry] = []
    files: list[DirEntry] = []
    for item in scanned:
        name = item.name
        if name.startswith("."):
            continue
        entry_path = Path(item.path)
        is_dir = entry_path.is_dir()
        ext = None if is_dir else _extension(entry_path)
        is_audio = ext is not None and is_audio_extension(ext)
        if is_dir:
            dirs.append(DirEntry(name, entry_path, True, False))
        elif is_audio:
            files.append(DirEntry(name, entry_path, False, True))

    dirs.sort(key=lambda e: e.name.lower())
    files.sort(key=lambda e: e.name.lower())
    return dirs + files


class FileBrowser:
    """Browse directories and select an audio file."""

    def __init__(self, start_dir: str | os.PathLike[str]) -> None:
        self._current_dir = Path(start_dir)
        self._entries: list[DirEntry] = []
        self._selected = 0
        self._scroll_offset = 0
        self._visible_height = _DEFAULT_VISIBLE_HEIGHT
        self.refresh()

    @property
    def current_dir(self) -> Path:
        """The directory being shown."""
        return self._current_dir

    @property
    def entries(self) -> tuple[DirEntry, ...]:
        """The entries of the current directory, in display order."""
        return tuple(self._entries)

    @property
    def selected_index(self) -> int:
        """Index of the highlighted entry."""
        return self._selected

    @property
    def scroll_offset(self) -> int:
        """Index of the first entry in view."""
        return self._scroll_offset

    @property
    def visible_height(self) -> int:
        """Number of rows in view."""
        return self._visible_height

    def refresh(self) -> None:
        """Re-read the current directory and reset the selection."""
        self._entries = read_directory(self._current_dir)
        self._selected = 0
        self._scroll_offset = 0

    def navigate_up(self) -> None:
        """Go to the parent directory, if there is one."""
        parent = self._current_dir.parent
        if parent != self._current_dir:
            self._current_dir = parent
            self.refresh()

    def navigate_down(self) -> None:
        """Move the selection down one entry."""
        if self._selected + 1 < len(self._entries):
            self._selected += 1
            self._adjust_scroll()

    def select_previous(self) -> None:
        """Move the selection up one entry."""
        if self._selected > 0:
            self._selected -= 1
            self._adjust_scroll()

    def navigate_into(self) -> Path | None:
        """Enter the selected directory, or return the selected audio file."""
        entry = self.selected_entry()
        if entry is None:
            return None
        if entry.is_dir:
            self._current_dir = entry.path
            self.refresh()
            return None
        if entry.is_audio:
            return entry.path
        return None

    def selected_entry(self) -> DirEntry | None:
        """The highlighted entry, or None when the directory is empty."""
        if self._selected < len(self._entries):
            return self._entries[self._selected]
        return None

    def set_visible_height(self, height: int) -> None:
        """Set how many rows are in view and keep the selection visible."""
        self._visible_height = height
        self._adjust_scroll()

    def _adjust_scroll(self) -> None:
        if self._visible_height == 0:
            return
        if self._selected < self._scroll_offset:
            self._scroll_offset = self._selected
        elif self._selected >= self._scroll_offset + self._visible_height:
            self._scroll_offset = self._selected - self._visible_height + 1