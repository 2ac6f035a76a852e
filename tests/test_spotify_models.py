"""Test Spotify data models"""

from dataclasses import FrozenInstanceError

import pytest

from spotify_status.spotify.models import (
    PlaybackState,
    Resource,
    SpotifyArtist,
    SpotifyEpisode,
    SpotifyTrack,
    playable_from_spotify_data,
)
from spotify_status.spotify.repeat import RepeatState


class TestSpotifyModels:
    """Test Spotify data models"""

    def test_spotify_artist_creation(self):
        """Test SpotifyArtist creation from data"""
        data = {
            'id': 'artist123',
            'name': 'Test Artist',
            'external_urls': {'spotify': 'https://open.spotify.com/artist/artist123'}
        }
        artist = SpotifyArtist.from_spotify_data(data)

        assert artist.id == 'artist123'
        assert artist.name == 'Test Artist'
        assert artist.url == 'https://open.spotify.com/artist/artist123'

    def test_artist_without_urls(self):
        """Local-file artists have no id and no links"""
        artist = SpotifyArtist.from_spotify_data({'name': 'Local Artist', 'external_urls': None})

        assert artist.id is None
        assert artist.url == ''

    def test_track_from_data(self, sample_track_data):
        """Test track from data"""
        track = SpotifyTrack.from_spotify_data(sample_track_data)

        assert track.id == '4uLU6hMCjMI75M1A2tKUQC'
        assert track.duration_ms == 210000
        assert [artist.name for artist in track.artists] == ['First Artist', 'Second Artist']
        assert track.album.name == 'Test Album'
        assert track.url == 'https://open.spotify.com/track/4uLU6hMCjMI75M1A2tKUQC'

    def test_episode_from_data(self, sample_episode_data):
        """Test episode from data"""
        episode = SpotifyEpisode.from_spotify_data(sample_episode_data)

        assert episode.id == 'episode_1'
        assert episode.show.name == 'Test Show'
        assert episode.images[0]['url'] == 'https://i.scdn.co/image/episode'

    def test_resource_is_immutable(self):
        """Test resource is immutable"""
        resource = Resource('Name', 'https://example.com')

        with pytest.raises(FrozenInstanceError):
            resource.name = 'Other'
        assert str(resource) == 'Name|https://example.com'


class TestPlayableDispatch:
    """Test variant selection from the payload type"""

    def test_track_type(self, sample_track_data):
        """Test track type"""
        assert isinstance(playable_from_spotify_data(sample_track_data), SpotifyTrack)

    def test_episode_type(self, sample_episode_data):
        """Test episode type"""
        assert isinstance(playable_from_spotify_data(sample_episode_data), SpotifyEpisode)

    @pytest.mark.parametrize('data', [None, {}, {'type': 'ad', 'id': 'x'}, {'id': 'no-type'}])
    def test_unknown_payloads(self, data):
        """Test unknown payloads"""
        assert playable_from_spotify_data(data) is None


class TestPlaybackState:
    """Test playback snapshot parsing"""

    def test_from_playback_payload(self, sample_playback_data):
        """Test from playback payload"""
        playback = PlaybackState.from_spotify_data(sample_playback_data)

        assert isinstance(playback.item, SpotifyTrack)
        assert playback.is_playing is True
        assert playback.progress_ms == 42000
        assert playback.repeat_state == RepeatState.CONTEXT
        assert playback.shuffle_state is True
        assert playback.device_name == 'Desktop'

    def test_nothing_playing(self):
        """Test nothing playing"""
        assert PlaybackState.from_spotify_data(None) is None

    def test_ad_playing(self, sample_playback_data):
        """Test ad playing"""
        sample_playback_data['item'] = None
        sample_playback_data['currently_playing_type'] = 'ad'

        playback = PlaybackState.from_spotify_data(sample_playback_data)

        assert playback.item is None
        assert playback.currently_playing_type == 'ad'
