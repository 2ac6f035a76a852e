"""
Synchronized lyrics from the spotify-lyrics-api service

The service mirrors Spotify's own lyrics for a track id and answers with
JSON of the shape::

    {
        "error": false,
        "syncType": "LINE_SYNCED",
        "lines": [
            {"startTimeMs": "960", "words": "First line", "syllables": [], "endTimeMs": "0"},
            ...
        ]
    }

or ``{"error": true, "message": "..."}`` when Spotify has no lyrics.

Message protocol (``send_lyrics``):
    1. ``(CLEAR_LYRICS, "")`` is always sent first so the display can drop
       stale lines before anything else arrives.
    2. Nothing more for items without an id, failed requests, undecodable or
       error-flagged payloads (all logged).
    3. Otherwise one ``(LYRICS_LINE, text)`` per line, in source order.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import aiohttp

from ..config.settings import get_settings
from ..core.exceptions import LyricsError
from ..spotify.info import InfoKind, MessageCallback
from ..spotify.projection import get_id
from ..utils.http import get_http_session
from ..utils.logger import get_logger
from ..utils.tasks import spawn

logger = get_logger(__name__)


def _to_int(value: Any) -> int:
    # The API sends timestamps as strings
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


@dataclass(frozen=True)
class LyricsLine:
    """
    One timed lyric line

    Attributes:
        start_time_ms: When the line starts, relative to the track start
        end_time_ms: When the line ends (0 when the service does not know)
        words: Line text; rendered as-is by ``str()``
    """
    start_time_ms: int
    end_time_ms: int
    words: str

    @classmethod
    def from_api_data(cls, data: Dict[str, Any]) -> 'LyricsLine':
        words = data.get('words')
        if words is None:
            words = data.get('text', '')
        return cls(
            start_time_ms=_to_int(data.get('startTimeMs')),
            end_time_ms=_to_int(data.get('endTimeMs')),
            words=words
        )

    def __str__(self) -> str:
        return self.words


@dataclass
class LyricsResult:
    """
    Decoded lyrics payload

    Attributes:
        error: True when the service reports it has no lyrics for the track
        sync_type: ``LINE_SYNCED`` or ``UNSYNCED`` when given
        lines: Lyric lines in display order
    """
    error: bool = False
    sync_type: Optional[str] = None
    lines: List[LyricsLine] = field(default_factory=list)

    @classmethod
    def from_api_data(cls, data: Any) -> Optional['LyricsResult']:
        """
        Build a result from decoded JSON

        Returns:
            LyricsResult, or None when the payload is not a JSON object
        """
        if not isinstance(data, dict):
            return None
        return cls(
            error=bool(data.get('error', False)),
            sync_type=data.get('syncType'),
            lines=[LyricsLine.from_api_data(line) for line in data.get('lines') or [] if isinstance(line, dict)]
        )


def build_lyrics_url(track_id: str) -> str:
    return get_settings().endpoints.lyrics_url_template.format(track_id=track_id)


async def fetch_lyrics(
    track_id: str,
    session: Optional[aiohttp.ClientSession] = None
) -> Optional[LyricsResult]:
    """
    Query the lyrics service for a track

    Args:
        track_id: Spotify track id
        session: HTTP session to use, defaults to the shared one

    Returns:
        Decoded result, or None when the body is JSON but not an object

    Raises:
        LyricsError: On transport failures, non-success status or invalid JSON
    """
    session = session or get_http_session()
    url = build_lyrics_url(track_id)

    try:
        async with session.get(url) as response:
            response.raise_for_status()
            # The service does not always label its body as JSON
            data = await response.json(content_type=None)
    except aiohttp.ClientResponseError as e:
        raise LyricsError(
            f"Lyrics API returned HTTP {e.status}",
            details={'track_id': track_id, 'url': url, 'status_code': e.status}
        ) from e
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise LyricsError(
            f"Lyrics API request failed: {e}",
            details={'track_id': track_id, 'url': url}
        ) from e
    except ValueError as e:
        raise LyricsError(
            f"Lyrics API sent invalid JSON: {e}",
            details={'track_id': track_id, 'url': url}
        ) from e

    return LyricsResult.from_api_data(data)


async def send_lyrics(
    item: Any,
    send_message: MessageCallback,
    session: Optional[aiohttp.ClientSession] = None
) -> None:
    """
    Clear the lyrics display, then stream the item's lyric lines

    Never raises; see the module docstring for the message sequence.

    Args:
        item: Playable item
        send_message: Receives CLEAR_LYRICS then LYRICS_LINE messages
        session: HTTP session to use, defaults to the shared one
    """
    try:
        send_message(InfoKind.CLEAR_LYRICS, "")

        track_id = get_id(item)
        if not track_id:
            return

        lyrics = await fetch_lyrics(track_id, session)

        if lyrics is None or lyrics.error:
            logger.info(f"No lyrics for playable {track_id}")
            return

        for line in lyrics.lines:
            send_message(InfoKind.LYRICS_LINE, str(line))
    except Exception as e:
        logger.error(f"Error while getting lyrics: {e}")
        logger.debug("Lyrics failure details", exc_info=True)


def spawn_lyrics(
    item: Any,
    send_message: MessageCallback,
    session: Optional[aiohttp.ClientSession] = None
) -> None:
    """
    Fire-and-forget ``send_lyrics`` on the running loop

    There is no handle to await or cancel; results arrive only through
    ``send_message``.
    """
    spawn(send_lyrics(item, send_message, session), name=f"lyrics:{get_id(item)}")
