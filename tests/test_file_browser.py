from pathlib import Path

import pytest

from kora.file_browser import (
    DirEntry,
    FileBrowser,
    is_audio_extension,
    read_directory,
)


@pytest.fixture
def music_dir(tmp_path: Path) -> Path:
    (tmp_path / "Albums").mkdir()
    (tmp_path / "Playlists").mkdir()
    (tmp_path / "song1.mp3").write_bytes(b"fake mp3")
    (tmp_path / "song2.flac").write_bytes(b"fake flac")
    (tmp_path / "track.ogg").write_bytes(b"fake ogg")
    (tmp_path / "audio.wav").write_bytes(b"fake wav")
    (tmp_path / "readme.txt").write_bytes(b"text file")
    (tmp_path / "cover.jpg").write_bytes(b"image file")
    (tmp_path / ".hidden").write_bytes(b"hidden")
    (tmp_path / "Albums" / "album_track.mp3").write_bytes(b"fake")
    return tmp_path


def test_entries_listing(music_dir):
    browser = FileBrowser(music_dir)
    assert len(browser.entries) == 6
    names = [e.name for e in browser.entries]
    assert "readme.txt" not in names
    assert "cover.jpg" not in names
    assert ".hidden" not in names


def test_directory_first_sorting(music_dir):
    entries = FileBrowser(music_dir).entries
    assert entries[0].is_dir
    assert entries[1].is_dir
    assert entries[2].is_audio
    assert not entries[2].is_dir
    assert entries[0].name == "Albums"
    assert entries[1].name == "Playlists"


def test_full_order(music_dir):
    names = [e.name for e in read_directory(music_dir)]
    assert names == [
        "Albums",
        "Playlists",
        "audio.wav",
        "song1.mp3",
        "song2.flac",
        "track.ogg",
    ]


def test_audio_file_filtering(music_dir):
    audio = [e for e in FileBrowser(music_dir).entries if e.is_audio]
    assert len(audio) == 4
    names = {e.name for e in audio}
    assert names == {"song1.mp3", "song2.flac", "track.ogg", "audio.wav"}


def test_navigation_down_up(music_dir):
    browser = FileBrowser(music_dir)
    assert browser.selected_index == 0
    browser.navigate_down()
    assert browser.selected_index == 1
    browser.navigate_down()
    assert browser.selected_index == 2
    browser.select_previous()
    assert browser.selected_index == 1
    browser.select_previous()
    browser.select_previous()
    assert browser.selected_index == 0


def test_navigate_down_stops_at_end(music_dir):
    browser = FileBrowser(music_dir)
    for _ in range(20):
        browser.navigate_down()
    assert browser.selected_index == 5


def test_navigate_into_directory(music_dir):
    browser = FileBrowser(music_dir)
    assert browser.entries[0].name == "Albums"
    assert browser.navigate_into() is None
    assert browser.current_dir.name == "Albums"
    assert len(browser.entries) == 1
    assert browser.entries[0].name == "album_track.mp3"


def test_navigate_back_to_parent(music_dir):
    browser = FileBrowser(music_dir / "Albums")
    assert browser.current_dir.name == "Albums"
    browser.navigate_up()
    assert browser.current_dir == music_dir
    assert len(browser.entries) == 6


def test_navigate_up_resets_selection(music_dir):
    browser = FileBrowser(music_dir)
    browser.navigate_down()
    browser.navigate_up()
    assert browser.selected_index == 0
    assert browser.current_dir == music_dir.parent


def test_navigate_into_audio_file(music_dir):
    browser = FileBrowser(music_dir)
    browser.navigate_down()
    browser.navigate_down()
    entry = browser.selected_entry()
    assert entry is not None and entry.is_audio
    result = browser.navigate_into()
    assert result == music_dir / "audio.wav"
    assert browser.current_dir == music_dir


def test_empty_directory(tmp_path):
    browser = FileBrowser(tmp_path)
    assert browser.entries == ()
    assert browser.selected_entry() is None
    assert browser.navigate_into() is None


def test_missing_directory_yields_no_entries(tmp_path):
    assert read_directory(tmp_path / "does-not-exist") == []


def test_scroll_adjustment(tmp_path):
    for i in range(30):
        (tmp_path / f"track_{i:02}.mp3").write_bytes(b"fake")
    browser = FileBrowser(tmp_path)
    browser.set_visible_height(5)
    assert browser.scroll_offset == 0
    for _ in range(10):
        browser.navigate_down()
    assert browser.scroll_offset > 0
    assert browser.selected_index < browser.scroll_offset + 5
    assert browser.selected_index == 10
    assert browser.scroll_offset == 6


def test_scroll_follows_selection_upwards(tmp_path):
    for i in range(30):
        (tmp_path / f"track_{i:02}.mp3").write_bytes(b"fake")
    browser = FileBrowser(tmp_path)
    browser.set_visible_height(5)
    for _ in range(10):
        browser.navigate_down()
    for _ in range(8):
        browser.select_previous()
    assert browser.selected_index == 2
    assert browser.scroll_offset == 2


def test_zero_visible_height_leaves_scroll(tmp_path):
    for i in range(10):
        (tmp_path / f"t{i}.mp3").write_bytes(b"fake")
    browser = FileBrowser(tmp_path)
    browser.set_visible_height(0)
    for _ in range(5):
        browser.navigate_down()
    assert browser.selected_index == 5
    assert browser.scroll_offset == 0


def test_case_insensitive_sort_and_extension(tmp_path):
    (tmp_path / "b.MP3").write_bytes(b"x")
    (tmp_path / "A.flac").write_bytes(b"x")
    (tmp_path / "c.Opus").write_bytes(b"x")
    names = [e.name for e in read_directory(tmp_path)]
    assert names == ["A.flac", "b.MP3", "c.Opus"]


def test_directory_entry_fields(music_dir):
    entry = read_directory(music_dir)[0]
    assert entry == DirEntry("Albums", music_dir / "Albums", True, False)


@pytest.mark.parametrize(
    "ext, expected",
    [
        ("mp3", True),
        ("MP3", True),
        ("flac", True),
        ("aiff", True),
        ("m4a", True),
        ("txt", False),
        ("jpg", False),
        ("", False),
    ],
)
def test_is_audio_extension(ext, expected):
    assert is_audio_extension(ext) is expected