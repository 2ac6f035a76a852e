"""
Spotify integration package

Models for the player state, the display projections of the playing item,
and the small codecs for repeat modes and update channels.

Modules:
- models.py: Resource, SpotifyTrack, SpotifyEpisode, PlaybackState
- projection.py: get_cover / get_creators / get_duration / get_grouping / get_id / get_resource
- repeat.py: RepeatState, get_state, next_state
- info.py: InfoKind, to_update_int
- client.py: SpotifyClient (spotipy player wrapper), imported directly
- reporter.py: StatusReporter, imported directly

``client`` and ``reporter`` are not re-exported here because the reporter
depends on the canvas and lyrics packages, which themselves import this one.
"""

from .models import (
    Resource,
    SpotifyArtist,
    SpotifyAlbum,
    SpotifyShow,
    SpotifyTrack,
    SpotifyEpisode,
    PlayableItem,
    PlaybackState,
    playable_from_spotify_data,
)
from .projection import (
    UNKNOWN_DURATION_MS,
    get_cover,
    get_creators,
    get_duration,
    get_grouping,
    get_id,
    get_resource,
)
from .repeat import RepeatState, get_state, next_state
from .info import InfoKind, MessageCallback, to_update_int

__all__ = [
    # Models
    'Resource',
    'SpotifyArtist',
    'SpotifyAlbum',
    'SpotifyShow',
    'SpotifyTrack',
    'SpotifyEpisode',
    'PlayableItem',
    'PlaybackState',
    'playable_from_spotify_data',

    # Projections
    'UNKNOWN_DURATION_MS',
    'get_cover',
    'get_creators',
    'get_duration',
    'get_grouping',
    'get_id',
    'get_resource',

    # Codecs
    'RepeatState',
    'get_state',
    'next_state',
    'InfoKind',
    'MessageCallback',
    'to_update_int',
]
