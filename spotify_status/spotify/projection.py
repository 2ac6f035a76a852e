"""
Display projections of the playing item

Pure functions mapping a playable item to the fields the status display
shows. Each one matches on the two known variants and falls back to a fixed
default for anything else, so callers can pass whatever the player reported
(including None) without checking first.
"""

from typing import Any, List, Optional

from .models import Resource, SpotifyEpisode, SpotifyTrack

# Placeholder length for unknown items; not a real duration
UNKNOWN_DURATION_MS = 100


def _first_image_url(images) -> Optional[str]:
    if not images:
        return None
    return images[0].get('url')


def get_cover(item: Any) -> Optional[str]:
    """First artwork URL of the track's album or of the episode itself"""
    if isinstance(item, SpotifyTrack):
        return _first_image_url(item.album.images)
    if isinstance(item, SpotifyEpisode):
        return _first_image_url(item.images)
    return None


def get_creators(item: Any) -> List[Resource]:
    """
    Who made the item

    Returns:
        One Resource per artist in source order for a track, the show for an
        episode, an empty list otherwise
    """
    if isinstance(item, SpotifyTrack):
        return [Resource(artist.name, artist.url) for artist in item.artists]
    if isinstance(item, SpotifyEpisode):
        return [Resource(item.show.name, item.show.url)]
    return []


def get_duration(item: Any) -> int:
    """Duration in milliseconds, or UNKNOWN_DURATION_MS for unknown items"""
    if isinstance(item, (SpotifyTrack, SpotifyEpisode)):
        return item.duration_ms
    return UNKNOWN_DURATION_MS


def get_grouping(item: Any) -> Optional[Resource]:
    """The containing album (track) or show (episode)"""
    if isinstance(item, SpotifyTrack):
        return Resource(item.album.name, item.album.url)
    if isinstance(item, SpotifyEpisode):
        return Resource(item.show.name, item.show.url)
    return None


def get_id(item: Any) -> Optional[str]:
    if isinstance(item, (SpotifyTrack, SpotifyEpisode)):
        return item.id
    return None


def get_resource(item: Any) -> Optional[Resource]:
    """The item itself as a Resource"""
    if isinstance(item, (SpotifyTrack, SpotifyEpisode)):
        return Resource(item.name, item.url)
    return None
