# spotify_status/lyrics/__init__.py
"""
Synchronized lyrics retrieval

Usage:
    spawn_lyrics(item, send_message)          # fire-and-forget
    await send_lyrics(item, send_message)     # awaitable variant
    result = await fetch_lyrics(track_id)     # raw lookup
"""

from .provider import (
    LyricsLine,
    LyricsResult,
    fetch_lyrics,
    send_lyrics,
    spawn_lyrics,
)

__all__ = [
    'LyricsLine',
    'LyricsResult',
    'fetch_lyrics',
    'send_lyrics',
    'spawn_lyrics',
]
