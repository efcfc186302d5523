"""Terminal audio player interface logic: file and podcast browsers, display helpers, key bindings."""

__version__ = "0.3.0"

__all__ = ["display", "file_browser", "keymap", "podcast_view"]