"""
Canvas (looping background video) lookup

Usage:
    spawn_canvas(item, send_message)          # fire-and-forget
    await send_canvas(item, send_message)     # awaitable variant
    url = extract_canvas_url(html)            # scraping step only
"""

from .downloader import (
    CANVAS_BUTTON_PATTERN,
    extract_canvas_url,
    fetch_canvas_url,
    send_canvas,
    spawn_canvas,
)

__all__ = [
    'CANVAS_BUTTON_PATTERN',
    'extract_canvas_url',
    'fetch_canvas_url',
    'send_canvas',
    'spawn_canvas',
]
