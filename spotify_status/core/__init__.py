"""
Core module for spotify-status.

Provides the exception hierarchy shared by every other package.

Usage:
    from spotify_status.core import SpotifyStatusError, SpotifyError
"""

from spotify_status.core.exceptions import (
    CanvasError,
    ConfigError,
    LyricsError,
    SpotifyError,
    SpotifyStatusError,
)

__all__ = [
    "SpotifyStatusError",
    "ConfigError",
    "SpotifyError",
    "CanvasError",
    "LyricsError",
]
