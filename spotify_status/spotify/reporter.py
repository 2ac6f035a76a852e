"""
Status reporting for the playing item

``StatusReporter`` turns successive playback snapshots into display
messages. Player-level fields (play/pause, position, repeat, shuffle) are
sent on every report; item metadata is sent, and the canvas and lyrics
fetches are started, only when the playing item changes.

Payload encoding:
    IS_PLAYING / SHUFFLE   "true" or "false"
    PROGRESS / DURATION    milliseconds as decimal text
    REPEAT_STATE           "track", "context" or "off"
    RESOURCE / GROUPING    "name|url" ("" when unknown)
    CREATORS               resources joined with ";"
    COVER                  image URL ("" when unknown)

The fetches are fire-and-forget and may finish in any order, including
after a later item has been reported; their messages are not tagged.
"""

from typing import Any, Optional, Tuple

import aiohttp

from ..canvas.downloader import spawn_canvas
from ..config.settings import get_settings
from ..lyrics.provider import spawn_lyrics
from ..utils.logger import get_logger
from .info import InfoKind, MessageCallback
from .models import PlaybackState
from .projection import (
    get_cover,
    get_creators,
    get_duration,
    get_grouping,
    get_id,
    get_resource,
)

logger = get_logger(__name__)

def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _item_key(item: Any) -> Tuple[Optional[str], Optional[str]]:
    # Local files have no id, so the resource name disambiguates them
    resource = get_resource(item)
    return get_id(item), str(resource) if resource else None


class StatusReporter:
    """
    Converts playback snapshots into messages for one display sink

    Args:
        send_message: Display sink receiving ``(InfoKind, payload)``
        session: HTTP session for the fetches, defaults to the shared one
        fetch_canvas: Start a canvas lookup on item change (default from settings)
        fetch_lyrics: Start a lyrics lookup on item change (default from settings)

    Note:
        ``report`` must run inside an event loop whenever a fetch is enabled,
        because the fetches are scheduled on the running loop.
    """

    def __init__(
        self,
        send_message: MessageCallback,
        session: Optional[aiohttp.ClientSession] = None,
        fetch_canvas: Optional[bool] = None,
        fetch_lyrics: Optional[bool] = None
    ):
        settings = get_settings()
        self.send_message = send_message
        self.session = session
        self.fetch_canvas = settings.status.fetch_canvas if fetch_canvas is None else fetch_canvas
        self.fetch_lyrics = settings.status.fetch_lyrics if fetch_lyrics is None else fetch_lyrics
        # None until an item has been shown; CLEAR is only sent after one
        self._current_key: Any = None

    def report(self, playback: Optional[PlaybackState]) -> None:
        """
        Send the messages for one playback snapshot

        Args:
            playback: Current snapshot, or None when nothing is playing
        """
        if playback is None or playback.item is None:
            if self._current_key is not None:
                logger.debug("Playback stopped, clearing display")
                self.send_message(InfoKind.CLEAR, "")
                self._current_key = None
            return

        self.send_message(InfoKind.IS_PLAYING, _bool_text(playback.is_playing))
        self.send_message(InfoKind.PROGRESS, str(playback.progress_ms))
        self.send_message(InfoKind.REPEAT_STATE, playback.repeat_state.api_name)
        self.send_message(InfoKind.SHUFFLE, _bool_text(playback.shuffle_state))

        key = _item_key(playback.item)
        if key != self._current_key:
            self._current_key = key
            self._report_item(playback.item)

    def _report_item(self, item: Any) -> None:
        resource = get_resource(item)
        grouping = get_grouping(item)
        logger.info(f"Now playing: {resource.name if resource else 'unknown item'}")

        self.send_message(InfoKind.RESOURCE, str(resource) if resource else "")
        self.send_message(InfoKind.CREATORS, ";".join(str(creator) for creator in get_creators(item)))
        self.send_message(InfoKind.GROUPING, str(grouping) if grouping else "")
        self.send_message(InfoKind.COVER, get_cover(item) or "")
        self.send_message(InfoKind.DURATION, str(get_duration(item)))

        if self.fetch_canvas:
            spawn_canvas(item, self.send_message, self.session)
        if self.fetch_lyrics:
            spawn_lyrics(item, self.send_message, self.session)
