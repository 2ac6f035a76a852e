"""
spotify-status: live status of the Spotify player

Enriches the playing track or podcast episode with display metadata, then
fetches two auxiliary assets in the background and streams everything to a
``(InfoKind, str)`` message callback:

- a canvas looping-video URL, scraped from canvasdownloader.com
- synchronized lyrics, from the spotify-lyrics-api JSON service

## Packages

**Configuration (`spotify_status/config/`)**
- YAML + environment variable settings
- Spotify OAuth2 via spotipy

**Spotify (`spotify_status/spotify/`)**
- Player models (Track / Episode union, PlaybackState)
- Display projections (cover, creators, duration, grouping, id, resource)
- Repeat mode and update-channel codecs
- Player client and the status reporter

**Canvas (`spotify_status/canvas/`)** and **Lyrics (`spotify_status/lyrics/`)**
- Best-effort asset lookups; failures are logged, never raised

**Utilities (`spotify_status/utils/`)**
- Logging, the shared aiohttp session, background task tracking

## Usage

    spotify-status now-playing
    spotify-status watch
    spotify-status repeat
"""

__version__ = "1.0.0"
__author__ = "spotify-status contributors"
__license__ = "MIT"
