"""Test configuration and fixtures"""

import json
from typing import Any, List, Optional, Tuple
from unittest.mock import Mock

import aiohttp
import pytest

from spotify_status.spotify.info import InfoKind
from spotify_status.spotify.models import SpotifyEpisode, SpotifyTrack


class FakeResponse:
    """Stand-in for aiohttp's response context manager"""

    def __init__(self, status: int = 200, body: str = ""):
        self.status = status
        self.body = body

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    def raise_for_status(self):
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                request_info=Mock(real_url="https://example.invalid"),
                history=(),
                status=self.status,
                message="error"
            )

    async def text(self):
        return self.body

    async def json(self, content_type: Optional[str] = 'application/json'):
        return json.loads(self.body)


class FakeSession:
    """Records requested URLs and hands back a canned response or error"""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response or FakeResponse()
        self.error = error
        self.requested_urls: List[str] = []

    def get(self, url: str):
        self.requested_urls.append(url)
        if self.error:
            raise self.error
        return self.response


class MessageRecorder:
    """Message callback collecting (kind, payload) pairs"""

    def __init__(self):
        self.messages: List[Tuple[InfoKind, str]] = []

    def __call__(self, kind: InfoKind, payload: str) -> None:
        self.messages.append((kind, payload))

    def kinds(self) -> List[InfoKind]:
        return [kind for kind, _ in self.messages]

    def payloads(self, kind: InfoKind) -> List[str]:
        return [payload for k, payload in self.messages if k == kind]


@pytest.fixture
def make_session():
    """Factory for fake HTTP sessions"""
    def factory(status: int = 200, body: Any = "", error: Optional[Exception] = None) -> FakeSession:
        if not isinstance(body, str):
            body = json.dumps(body)
        return FakeSession(FakeResponse(status, body), error)
    return factory


@pytest.fixture
def recorder():
    return MessageRecorder()


@pytest.fixture
def sample_track_data():
    """Track object as found in the ``item`` of a playback payload"""
    return {
        'type': 'track',
        'id': '4uLU6hMCjMI75M1A2tKUQC',
        'name': 'Test Song',
        'uri': 'spotify:track:4uLU6hMCjMI75M1A2tKUQC',
        'duration_ms': 210000,
        'external_urls': {'spotify': 'https://open.spotify.com/track/4uLU6hMCjMI75M1A2tKUQC'},
        'artists': [
            {'id': 'artist_1', 'name': 'First Artist',
             'external_urls': {'spotify': 'https://open.spotify.com/artist/artist_1'}},
            {'id': 'artist_2', 'name': 'Second Artist',
             'external_urls': {'spotify': 'https://open.spotify.com/artist/artist_2'}},
        ],
        'album': {
            'id': 'album_1',
            'name': 'Test Album',
            'external_urls': {'spotify': 'https://open.spotify.com/album/album_1'},
            'images': [
                {'url': 'https://i.scdn.co/image/large', 'width': 640, 'height': 640},
                {'url': 'https://i.scdn.co/image/small', 'width': 64, 'height': 64},
            ],
        },
    }


@pytest.fixture
def sample_episode_data():
    """Episode object as found in the ``item`` of a playback payload"""
    return {
        'type': 'episode',
        'id': 'episode_1',
        'name': 'Test Episode',
        'duration_ms': 3600000,
        'external_urls': {'spotify': 'https://open.spotify.com/episode/episode_1'},
        'images': [{'url': 'https://i.scdn.co/image/episode', 'width': 640, 'height': 640}],
        'show': {
            'id': 'show_1',
            'name': 'Test Show',
            'publisher': 'Test Publisher',
            'external_urls': {'spotify': 'https://open.spotify.com/show/show_1'},
        },
    }


@pytest.fixture
def sample_playback_data(sample_track_data):
    """``current_playback()`` payload with a track playing"""
    return {
        'device': {'id': 'device_1', 'name': 'Desktop'},
        'repeat_state': 'context',
        'shuffle_state': True,
        'progress_ms': 42000,
        'is_playing': True,
        'currently_playing_type': 'track',
        'item': sample_track_data,
    }


@pytest.fixture
def track(sample_track_data):
    return SpotifyTrack.from_spotify_data(sample_track_data)


@pytest.fixture
def episode(sample_episode_data):
    return SpotifyEpisode.from_spotify_data(sample_episode_data)
