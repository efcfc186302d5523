# kora

The interface logic of a terminal audio player: a file browser, a podcast
browser, display helpers and key bindings. It is a plain Python library with
no third-party dependencies.

## Modules

- `kora.file_browser`: `FileBrowser` lists a directory with subdirectories
  first and audio files after them. Each group is sorted by name, ignoring
  case, and hidden entries and non-audio files are left out. Move the
  selection with `navigate_down()` and `select_previous()`. `navigate_into()`
  enters the selected directory, or returns the path of the selected audio
  file. `navigate_up()` goes to the parent directory. `set_visible_height()`
  keeps the selection in view. The `entries`, `current_dir`, `selected_index`
  and `scroll_offset` properties expose what should be shown.
  `read_directory()` and `is_audio_extension()` are available on their own.
- `kora.podcast_view`: `PodcastView` is the podcast browser. It switches
  between a feed list and an episode list (`PodcastViewMode`) and takes typed
  feed URLs (`InputMode`). It can refresh, add and remove feeds, and it can
  download and clean up episodes. It reports progress and errors in
  `status_message`. Fetching, saving, downloading and turning episodes into
  playable tracks all go through a `PodcastBackend` that you supply. Without a
  backend, those operations set an error status message.
- `kora.display`: helpers that produce displayed values.
  - `format_duration` and `sleep_label` for time labels.
  - `spectrum_column` for spectrum bars drawn in eighth-row blocks.
  - `lyrics_window` for the lyric lines in view.
  - `eq_bar_rows` for equalizer bar heights.
  - `next_device_index` and `next_theme_index` for cycling.
  - `progress_ratio` for the progress bar.
  - `VisualizerMode` and its `toggled()` and `fullscreen_toggled()` methods.
- `kora.keymap`: maps key presses to `PlayerCommand` values (a `CommandKind`
  plus its argument) or `ViewAction` values. There is one function per view:
  `map_main_key`, `map_eq_key`, `map_browser_key` and `map_podcast_key`.
  `ipc_command` turns remote-control requests such as `"toggle"`, `"next"` or
  `("volume", -6.0)` into commands.

## Example

```python
from kora.display import format_duration, spectrum_column
from kora.file_browser import FileBrowser
from kora.keymap import CommandKind, ipc_command, map_main_key

print(format_duration(125))          # 2:05
print(spectrum_column(0.5, 2))       # ['█', ' ']

print(map_main_key(" ").kind is CommandKind.PLAY_PAUSE)   # True
print(ipc_command("pause", playing=False))                # None

browser = FileBrowser("/home/me/Music")
for entry in browser.entries:
    print("dir " if entry.is_dir else "file", entry.name)
```

## What it does not do

This package does not play or decode audio, and it does not draw to the
terminal. It has no colour themes, no screen layout and no command to run.
It does not fetch or store podcast feeds itself; that is left to the
`PodcastBackend` you pass to `PodcastView`. It decides what should happen and
what should be shown, and a program built on it does the rest.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```