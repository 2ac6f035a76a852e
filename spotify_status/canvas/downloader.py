"""
Canvas lookup for Spotify tracks

A canvas is the short looping video Spotify shows behind some tracks. There
is no public API for it, so the URL is scraped from canvasdownloader.com: the
page for a track carries a download button whose ``onclick`` opens the video.

FRAGILE WARNING:
    The scrape depends on the third-party page keeping the exact button
    markup matched by ``CANVAS_BUTTON_PATTERN``. Treat canvases as best
    effort: any failure ends in "no canvas" and never reaches the caller.

Message protocol (``send_canvas``):
    - item without id: nothing is sent
    - request failed / non-success status: logged, nothing is sent
    - page has no download button: logged, nothing is sent
    - button found with an empty URL: ``(CANVAS, "")``, meaning "no canvas"
    - button found: ``(CANVAS, url)``
"""

import asyncio
import re
from typing import Any, Optional

import aiohttp

from ..config.settings import get_settings
from ..core.exceptions import CanvasError
from ..spotify.info import InfoKind, MessageCallback
from ..spotify.projection import get_id
from ..utils.http import get_http_session
from ..utils.logger import get_logger
from ..utils.tasks import spawn

logger = get_logger(__name__)

CANVAS_BUTTON_PATTERN = re.compile(
    r'''download-button' onclick="window\.open\('(.*?)', '_blank'\)"'''
)


def extract_canvas_url(html: str) -> Optional[str]:
    """
    Pull the canvas video URL out of a canvasdownloader page

    Args:
        html: Page body

    Returns:
        The URL inside the download button's ``window.open`` call (possibly
        empty), or None when the button is not on the page
    """
    match = CANVAS_BUTTON_PATTERN.search(html)
    if not match:
        return None
    return match.group(1)


def build_canvas_page_url(track_id: str) -> str:
    return get_settings().endpoints.canvas_url_template.format(track_id=track_id)


async def fetch_canvas_url(
    track_id: str,
    session: Optional[aiohttp.ClientSession] = None
) -> Optional[str]:
    """
    Download the canvas page for a track and extract the video URL

    Args:
        track_id: Spotify track id
        session: HTTP session to use, defaults to the shared one

    Returns:
        Extracted URL, or None when the page has no download button

    Raises:
        CanvasError: On transport failures or non-success HTTP status
    """
    session = session or get_http_session()
    url = build_canvas_page_url(track_id)

    try:
        async with session.get(url) as response:
            response.raise_for_status()
            html = await response.text()
    except aiohttp.ClientResponseError as e:
        raise CanvasError(
            f"Canvas page returned HTTP {e.status}",
            details={'track_id': track_id, 'url': url, 'status_code': e.status}
        ) from e
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise CanvasError(
            f"Canvas page request failed: {e}",
            details={'track_id': track_id, 'url': url}
        ) from e

    canvas_url = extract_canvas_url(html)
    if canvas_url is None:
        logger.debug(f"Download button not found in canvas page for {track_id}")
    return canvas_url


async def send_canvas(
    item: Any,
    send_message: MessageCallback,
    session: Optional[aiohttp.ClientSession] = None
) -> None:
    """
    Look up the canvas of the playing item and report it

    Never raises; see the module docstring for which messages are sent.

    Args:
        item: Playable item (anything without an id is ignored)
        send_message: Receives ``(InfoKind.CANVAS, url)``
        session: HTTP session to use, defaults to the shared one
    """
    track_id = get_id(item)
    if not track_id:
        return

    try:
        canvas_url = await fetch_canvas_url(track_id, session)

        if canvas_url is None:
            logger.info(f"No canvas button found for {track_id}")
            return

        if not canvas_url.strip():
            logger.info(f"No canvas for playable {track_id}")
            send_message(InfoKind.CANVAS, "")
            return

        send_message(InfoKind.CANVAS, canvas_url)
    except Exception as e:
        logger.error(f"Error while getting canvas url for {track_id}: {e}")
        logger.debug("Canvas failure details", exc_info=True)


def spawn_canvas(
    item: Any,
    send_message: MessageCallback,
    session: Optional[aiohttp.ClientSession] = None
) -> None:
    """
    Fire-and-forget ``send_canvas`` on the running loop

    There is no handle to await or cancel; results arrive only through
    ``send_message``.
    """
    spawn(send_canvas(item, send_message, session), name=f"canvas:{get_id(item)}")
