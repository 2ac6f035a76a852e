"""
Data models for the Spotify player state

This module defines the data structures built from Spotify Web API payloads
returned by the player endpoints. They are transient values: built for one
poll, handed to the projections and message callback, then discarded.

Model Overview:

1. **Resource**: immutable (name, url) pair for anything the UI renders as a
   clickable reference (artist, album, show, or the playing item itself).

2. **Playable items**: the closed union ``PlayableItem`` of
   - SpotifyTrack: music track with album and artists
   - SpotifyEpisode: podcast episode with its show and own artwork

3. **PlaybackState**: one snapshot of ``/me/player`` (item, progress, modes).

Construction:
    All models expose ``from_spotify_data()`` factories that tolerate missing
    optional fields. ``playable_from_spotify_data()`` picks the right variant
    from the payload's ``type`` field and returns None for anything else
    (ads, unknown or local content without an id).
"""

from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Union

from .repeat import RepeatState, get_state


SPOTIFY_URL_KEY = 'spotify'


@dataclass(frozen=True)
class Resource:
    """
    A named, URL-linked entity suitable for display as a clickable reference

    Attributes:
        name: Display name
        url: External (open.spotify.com) URL; may be empty for local content
    """
    name: str
    url: str

    def __str__(self) -> str:
        return f"{self.name}|{self.url}"


@dataclass
class SpotifyArtist:
    """
    Simplified artist reference as embedded in track payloads

    Attributes:
        id: Spotify artist id (None for local files)
        name: Artist display name
        external_urls: Links keyed by platform, ``spotify`` being the one used
    """
    id: Optional[str]
    name: str
    external_urls: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_spotify_data(cls, data: Dict[str, Any]) -> 'SpotifyArtist':
        return cls(
            id=data.get('id'),
            name=data.get('name', ''),
            external_urls=data.get('external_urls') or {}
        )

    @property
    def url(self) -> str:
        return self.external_urls.get(SPOTIFY_URL_KEY, '')


@dataclass
class SpotifyAlbum:
    """
    Album context of a track

    Images are kept as the API returns them (list of dicts with ``url``,
    ``width`` and ``height``), largest first.
    """
    id: Optional[str]
    name: str
    external_urls: Dict[str, str] = field(default_factory=dict)
    images: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_spotify_data(cls, data: Dict[str, Any]) -> 'SpotifyAlbum':
        return cls(
            id=data.get('id'),
            name=data.get('name', ''),
            external_urls=data.get('external_urls') or {},
            images=data.get('images') or []
        )

    @property
    def url(self) -> str:
        return self.external_urls.get(SPOTIFY_URL_KEY, '')


@dataclass
class SpotifyShow:
    """Podcast show an episode belongs to"""
    id: Optional[str]
    name: str
    publisher: str = ''
    external_urls: Dict[str, str] = field(default_factory=dict)
    images: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_spotify_data(cls, data: Dict[str, Any]) -> 'SpotifyShow':
        return cls(
            id=data.get('id'),
            name=data.get('name', ''),
            publisher=data.get('publisher', ''),
            external_urls=data.get('external_urls') or {},
            images=data.get('images') or []
        )

    @property
    def url(self) -> str:
        return self.external_urls.get(SPOTIFY_URL_KEY, '')


@dataclass
class SpotifyTrack:
    """
    Music track as reported by the player

    Attributes:
        id: Spotify track id, used for the canvas and lyrics lookups
        name: Track title
        artists: Contributing artists in Spotify's attribution order
        album: Album context with artwork
        duration_ms: Track length in milliseconds
        external_urls: Links to the track on external platforms
        uri: Spotify URI (spotify:track:id)
        is_local: True for user-uploaded local files (no id, no artwork)
    """
    id: Optional[str]
    name: str
    artists: List[SpotifyArtist]
    album: SpotifyAlbum
    duration_ms: int
    external_urls: Dict[str, str] = field(default_factory=dict)
    uri: Optional[str] = None
    is_local: bool = False

    @classmethod
    def from_spotify_data(cls, data: Dict[str, Any]) -> 'SpotifyTrack':
        """
        Factory method for constructing SpotifyTrack from a track object

        Args:
            data: Raw track object (``item`` of the playback payload)

        Returns:
            SpotifyTrack with nested artist and album objects
        """
        artists = [SpotifyArtist.from_spotify_data(artist) for artist in data.get('artists') or []]
        album = SpotifyAlbum.from_spotify_data(data.get('album') or {})

        return cls(
            id=data.get('id'),
            name=data.get('name', ''),
            artists=artists,
            album=album,
            duration_ms=data.get('duration_ms', 0),
            external_urls=data.get('external_urls') or {},
            uri=data.get('uri'),
            is_local=data.get('is_local', False)
        )

    @property
    def url(self) -> str:
        return self.external_urls.get(SPOTIFY_URL_KEY, '')


@dataclass
class SpotifyEpisode:
    """
    Podcast episode as reported by the player

    Unlike tracks, episodes carry their own artwork and have no artist list;
    the show stands in as the creator.
    """
    id: Optional[str]
    name: str
    show: SpotifyShow
    duration_ms: int
    images: List[Dict[str, Any]] = field(default_factory=list)
    external_urls: Dict[str, str] = field(default_factory=dict)
    uri: Optional[str] = None

    @classmethod
    def from_spotify_data(cls, data: Dict[str, Any]) -> 'SpotifyEpisode':
        return cls(
            id=data.get('id'),
            name=data.get('name', ''),
            show=SpotifyShow.from_spotify_data(data.get('show') or {}),
            duration_ms=data.get('duration_ms', 0),
            images=data.get('images') or [],
            external_urls=data.get('external_urls') or {},
            uri=data.get('uri')
        )

    @property
    def url(self) -> str:
        return self.external_urls.get(SPOTIFY_URL_KEY, '')


PlayableItem = Union[SpotifyTrack, SpotifyEpisode]


def playable_from_spotify_data(data: Optional[Dict[str, Any]]) -> Optional[PlayableItem]:
    """
    Build the matching playable variant from a player ``item`` payload

    Args:
        data: Track or episode object, or None when nothing is loaded

    Returns:
        SpotifyTrack for ``type == "track"``, SpotifyEpisode for
        ``type == "episode"``, None otherwise
    """
    if not data:
        return None

    item_type = data.get('type')
    if item_type == 'track':
        return SpotifyTrack.from_spotify_data(data)
    if item_type == 'episode':
        return SpotifyEpisode.from_spotify_data(data)
    return None


@dataclass
class PlaybackState:
    """
    Snapshot of the user's player

    Attributes:
        item: Playing track or episode; None for ads or unknown content
        is_playing: Whether playback is running (False when paused)
        progress_ms: Position within the item
        repeat_state: Current repeat mode
        shuffle_state: Whether shuffle is on
        currently_playing_type: Raw type reported by Spotify (track, episode, ad, unknown)
        device_name: Name of the active device, if reported
    """
    item: Optional[PlayableItem]
    is_playing: bool = False
    progress_ms: int = 0
    repeat_state: RepeatState = RepeatState.OFF
    shuffle_state: bool = False
    currently_playing_type: str = 'unknown'
    device_name: Optional[str] = None

    @classmethod
    def from_spotify_data(cls, data: Optional[Dict[str, Any]]) -> Optional['PlaybackState']:
        """
        Factory method for the ``current_playback()`` payload

        Args:
            data: Playback payload, or None when no device is active (HTTP 204)

        Returns:
            PlaybackState, or None when nothing is playing anywhere

        Raises:
            KeyError: If Spotify reports a repeat mode other than track/context/off
        """
        if not data:
            return None

        device = data.get('device') or {}
        return cls(
            item=playable_from_spotify_data(data.get('item')),
            is_playing=bool(data.get('is_playing', False)),
            progress_ms=data.get('progress_ms') or 0,
            repeat_state=get_state(data.get('repeat_state', 'off')),
            shuffle_state=bool(data.get('shuffle_state', False)),
            currently_playing_type=data.get('currently_playing_type', 'unknown'),
            device_name=device.get('name')
        )
