"""Podcast browser: subscribed feeds, their episodes, and a feed-URL prompt."""

from __future__ import annotations

import copy
import enum
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

log = logging.getLogger(__name__)

_DEFAULT_VISIBLE_HEIGHT = 20
_NO_BACKEND = "no podcast backend configured"


@dataclass
class PodcastFeed:
    """A subscribed feed."""

    url: str
    title: str = ""
    description: str = ""


@dataclass
class PodcastEpisode:
    """One episode of a feed."""

    title: str
    audio_url: str
    duration_secs: int | None = None
    published: str | None = None
    played: bool = False
    position_ms: int = 0
    downloaded_path: str | None = None
    chapters: list[Any] = field(default_factory=list)


@dataclass
class PodcastState:
    """Persisted podcast subscriptions and playback positions."""

    feeds: list[PodcastFeed] = field(default_factory=list)
    episode_positions: dict[str, int] = field(default_factory=dict)


class PodcastBackend(Protocol):
    """Fetching, persistence and download services used by the view."""

    def fetch_feed(self, url: str) -> tuple[PodcastFeed, list[PodcastEpisode]]:
        """Fetch and parse the feed at a URL."""
        ...

    def save_state(self, state: PodcastState) -> None:
        """Persist the podcast state."""
        ...

    def default_download_dir(self) -> Path:
        """Directory episodes are downloaded to unless another is given."""
        ...

    def download_episode(
        self, audio_url: str, feed_title: str, episode_title: str, download_dir: Path
    ) -> Path:
        """Download an episode and return where it was saved."""
        ...

    def cleanup_played(self, state: PodcastState, download_dir: Path) -> int:
        """Delete downloads of played episodes and return how many went."""
        ...

    def is_downloaded(
        self, audio_url: str, download_dir: Path, feed_title: str, episode_title: str
    ) -> Path | None:
        """Where an episode was downloaded to, if it was."""
        ...

    def episode_to_track(self, episode: PodcastEpisode) -> Any:
        """Turn an episode into something the player can play."""
        ...


@dataclass
class PodcastFeedWithEpisodes:
    """A feed together with its fetched episodes."""

    feed: PodcastFeed
    episodes: list[PodcastEpisode] = field(default_factory=list)
    episode_count: int = 0


class PodcastViewMode(enum.Enum):
    """What the podcast view is listing."""

    FEED_LIST = "feed_list"
    EPISODE_LIST = "episode_list"


class InputMode(enum.Enum):
    """Whether the view is taking text input."""

    NORMAL = "normal"
    ADDING_FEED = "adding_feed"


class PodcastView:
    """Browse subscribed feeds and pick an episode to play."""

    def __init__(
        self,
        state: PodcastState,
        download_dir: str | Path | None = None,
        backend: PodcastBackend | None = None,
    ) -> None:
        self._state = copy.deepcopy(state)
        self._feeds = [
            PodcastFeedWithEpisodes(feed=copy.deepcopy(f)) for f in self._state.feeds
        ]
        self._backend = backend
        if download_dir is not None:
            self._download_dir: Path | None = Path(download_dir)
        elif backend is not None:
            self._download_dir = Path(backend.default_download_dir())
        else:
            self._download_dir = None
        self._selected_feed = 0
        self._selected_episode = 0
        self._mode = PodcastViewMode.FEED_LIST
        self._status_message: str | None = None
        self._input_mode = InputMode.NORMAL
        self._input_buffer = ""
        self._scroll_offset = 0
        self._visible_height = _DEFAULT_VISIBLE_HEIGHT
        self._refreshed = False

    # -- read-only views -------------------------------------------------

    @property
    def feeds(self) -> tuple[PodcastFeedWithEpisodes, ...]:
        """Subscribed feeds with whatever episodes have been fetched."""
        return tuple(self._feeds)

    @property
    def state(self) -> PodcastState:
        """The state that is persisted."""
        return self._state

    @property
    def download_dir(self) -> Path | None:
        """Where episodes are downloaded to."""
        return self._download_dir

    @property
    def selected_feed_index(self) -> int:
        return self._selected_feed

    @property
    def selected_episode_index(self) -> int:
        return self._selected_episode

    @property
    def mode(self) -> PodcastViewMode:
        return self._mode

    @property
    def status_message(self) -> str | None:
        return self._status_message

    @property
    def input_mode(self) -> InputMode:
        return self._input_mode

    @property
    def input_buffer(self) -> str:
        return self._input_buffer

    @property
    def scroll_offset(self) -> int:
        return self._scroll_offset

    # -- feeds -------------------------------------------------------------

    def ensure_refreshed(self) -> None:
        """Refresh every feed the first time this is called."""
        if not self._refreshed:
            self._refreshed = True
            self.refresh_all()

    def refresh_feed(self, index: int) -> None:
        """Re-fetch the feed at an index, restoring saved positions."""
        if not 0 <= index < len(self._feeds):
            return
        entry = self._feeds[index]
        if self._backend is None:
            self._status_message = f"Error: {_NO_BACKEND}"
            return
        try:
            feed, episodes = self._backend.fetch_feed(entry.feed.url)
        except Exception as exc:  # backend failures are reported, not fatal
            self._status_message = f"Error: {exc}"
            return

        entry.episode_count = len(episodes)
        entry.episodes = list(episodes)
        entry.feed.title = feed.title
        entry.feed.description = feed.description
        for episode in entry.episodes:
            pos = self._state.episode_positions.get(episode.audio_url)
            if pos is not None:
                episode.position_ms = pos
                if pos > 0:
                    episode.played = True
        self._status_message = f"Refreshed: {entry.feed.title}"
        if index < len(self._state.feeds):
            saved = self._state.feeds[index]
            saved.title = entry.feed.title
            saved.description = entry.feed.description

    def refresh_all(self) -> None:
        """Refresh every subscribed feed."""
        count = len(self._feeds)
        if count == 0:
            self._status_message = "No feeds to refresh"
            return
        self._status_message = "Refreshing all feeds..."
        for index in range(count):
            self.refresh_feed(index)
        self._status_message = f"Refreshed {count} feed(s)"

    def add_feed(self, url: str) -> None:
        """Subscribe to a feed: fetch it, add it and save the state."""
        if any(f.feed.url == url for f in self._feeds):
            self._status_message = "Feed already subscribed"
            return
        self._status_message = "Fetching feed..."
        if self._backend is None:
            self._status_message = f"Error: {_NO_BACKEND}"
            return
        try:
            feed, episodes = self._backend.fetch_feed(url)
        except Exception as exc:
            self._status_message = f"Error: {exc}"
            return
        self._feeds.append(
            PodcastFeedWithEpisodes(
                feed=copy.deepcopy(feed),
                episodes=list(episodes),
                episode_count=len(episodes),
            )
        )
        self._state.feeds.append(feed)
        self._save()
        self._status_message = f"Added: {feed.title}"

    def remove_feed(self, index: int) -> None:
        """Unsubscribe from the feed at an index."""
        if not 0 <= index < len(self._feeds):
            return
        title = self._feeds.pop(index).feed.title
        if index < len(self._state.feeds):
            del self._state.feeds[index]
        self._save()
        if self._feeds and self._selected_feed >= len(self._feeds):
            self._selected_feed = len(self._feeds) - 1
        self._status_message = f"Removed: {title}"

    # -- downloads ---------------------------------------------------------

    def download_selected_episode(self) -> None:
        """Download the highlighted episode."""
        if self._mode is not PodcastViewMode.EPISODE_LIST:
            return
        episode = self._selected_episode_entry()
        if episode is None:
            return
        feed_title = self._feeds[self._selected_feed].feed.title
        self._status_message = f"Downloading: {episode.title}..."
        try:
            if self._backend is None or self._download_dir is None:
                raise RuntimeError(_NO_BACKEND)
            path = self._backend.download_episode(
                episode.audio_url, feed_title, episode.title, self._download_dir
            )
        except Exception as exc:
            self._status_message = f"Download failed: {exc}"
            return
        episode.downloaded_path = str(path)
        self._save()
        self._status_message = f"Downloaded: {episode.title}"

    def cleanup_played_episodes(self) -> None:
        """Delete downloaded files of played episodes."""
        try:
            if self._backend is None or self._download_dir is None:
                raise RuntimeError(_NO_BACKEND)
            count = self._backend.cleanup_played(self._state, self._download_dir)
        except Exception as exc:
            self._status_message = f"Cleanup failed: {exc}"
            return
        for entry in self._feeds:
            for episode in entry.episodes:
                if episode.played:
                    episode.downloaded_path = None
        self._status_message = f"Cleaned up {count} played episode(s)"

    def is_episode_downloaded(self, feed_idx: int, ep_idx: int) -> bool:
        """Whether the episode at the given indices has been downloaded."""
        if not 0 <= feed_idx < len(self._feeds):
            return False
        entry = self._feeds[feed_idx]
        if not 0 <= ep_idx < len(entry.episodes):
            return False
        episode = entry.episodes[ep_idx]
        if episode.downloaded_path and Path(episode.downloaded_path).exists():
            return True
        if self._backend is None or self._download_dir is None:
            return False
        return (
            self._backend.is_downloaded(
                episode.audio_url, self._download_dir, entry.feed.title, episode.title
            )
            is not None
        )

    # -- selection ---------------------------------------------------------

    def selected_episode_track(self) -> Any | None:
        """The highlighted episode as a playable track, in the episode list."""
        if self._mode is not PodcastViewMode.EPISODE_LIST or self._backend is None:
            return None
        episode = self._selected_episode_entry()
        if episode is None:
            return None
        return self._backend.episode_to_track(episode)

    def selected_episode_chapters(self) -> list[Any]:
        """Chapters of the highlighted episode, in the episode list."""
        if self._mode is not PodcastViewMode.EPISODE_LIST:
            return []
        episode = self._selected_episode_entry()
        return list(episode.chapters) if episode is not None else []

    def select_up(self) -> None:
        """Move the highlight up."""
        if self._mode is PodcastViewMode.FEED_LIST:
            if self._selected_feed > 0:
                self._selected_feed -= 1
                self._adjust_scroll()
        elif self._selected_episode > 0:
            self._selected_episode -= 1
            self._adjust_scroll()

    def select_down(self) -> None:
        """Move the highlight down."""
        if self._mode is PodcastViewMode.FEED_LIST:
            if self._selected_feed + 1 < len(self._feeds):
                self._selected_feed += 1
                self._adjust_scroll()
        elif self._selected_feed < len(self._feeds):
            episodes = self._feeds[self._selected_feed].episodes
            if self._selected_episode + 1 < len(episodes):
                self._selected_episode += 1
                self._adjust_scroll()

    def enter(self) -> bool:
        """Open the highlighted feed, or report that an episode was chosen.

        Returns True when an episode should be played.
        """
        if self._mode is PodcastViewMode.FEED_LIST:
            if self._feeds:
                self._mode = PodcastViewMode.EPISODE_LIST
                self._selected_episode = 0
                self._scroll_offset = 0
            return False
        return self.selected_episode_track() is not None

    def back(self) -> bool:
        """Return to the feed list; True when the view should close."""
        if self._mode is PodcastViewMode.EPISODE_LIST:
            self._mode = PodcastViewMode.FEED_LIST
            self._scroll_offset = 0
            return False
        return True

    # -- text input --------------------------------------------------------

    def start_add_feed(self) -> None:
        """Start typing a feed URL."""
        self._input_mode = InputMode.ADDING_FEED
        self._input_buffer = ""

    def cancel_input(self) -> None:
        """Abandon the typed URL."""
        self._input_mode = InputMode.NORMAL
        self._input_buffer = ""

    def submit_input(self) -> None:
        """Subscribe to the typed URL, if any."""
        url = self._input_buffer
        adding = self._input_mode is InputMode.ADDING_FEED
        self._input_mode = InputMode.NORMAL
        self._input_buffer = ""
        if adding and url:
            self.add_feed(url)

    def input_char(self, c: str) -> None:
        """Append a character to the typed URL."""
        self._input_buffer += c

    def input_backspace(self) -> None:
        """Remove the last character of the typed URL."""
        self._input_buffer = self._input_buffer[:-1]

    def set_visible_height(self, height: int) -> None:
        """Set how many rows are in view."""
        self._visible_height = height

    # -- helpers -----------------------------------------------------------

    def _selected_episode_entry(self) -> PodcastEpisode | None:
        if not 0 <= self._selected_feed < len(self._feeds):
            return None
        episodes = self._feeds[self._selected_feed].episodes
        if 0 <= self._selected_episode < len(episodes):
            return episodes[self._selected_episode]
        return None

    def _save(self) -> None:
        if self._backend is None:
            return
        try:
            self._backend.save_state(self._state)
        except Exception as exc:
            log.warning("Failed to save podcast state: %s", exc)

    def _selected_index(self) -> int:
        if self._mode is PodcastViewMode.FEED_LIST:
            return self._selected_feed
        return self._selected_episode

    def _adjust_scroll(self) -> None:
        if self._visible_height == 0:
            return
        selected = self._selected_index()
        if selected < self._scroll_offset:
            self._scroll_offset = selected
        elif selected >= self._scroll_offset + self._visible_height:
            self._scroll_offset = selected - self._visible_height + 1