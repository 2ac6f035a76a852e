"""Test status reporting"""

from unittest.mock import patch

import pytest

from spotify_status.spotify.info import InfoKind
from spotify_status.spotify.models import PlaybackState
from spotify_status.spotify.repeat import RepeatState
from spotify_status.spotify.reporter import StatusReporter


@pytest.fixture
def spawned():
    """Patch the background fetch launchers"""
    with patch('spotify_status.spotify.reporter.spawn_canvas') as canvas, \
            patch('spotify_status.spotify.reporter.spawn_lyrics') as lyrics:
        yield canvas, lyrics


@pytest.fixture
def playback(sample_playback_data):
    return PlaybackState.from_spotify_data(sample_playback_data)


class TestStatusReporter:
    """Test snapshot to message conversion"""

    def test_first_report_sends_player_and_item(self, playback, recorder, spawned):
        """Test first report sends player and item"""
        reporter = StatusReporter(recorder, fetch_canvas=True, fetch_lyrics=True)

        reporter.report(playback)

        assert recorder.kinds() == [
            InfoKind.IS_PLAYING,
            InfoKind.PROGRESS,
            InfoKind.REPEAT_STATE,
            InfoKind.SHUFFLE,
            InfoKind.RESOURCE,
            InfoKind.CREATORS,
            InfoKind.GROUPING,
            InfoKind.COVER,
            InfoKind.DURATION,
        ]
        assert recorder.payloads(InfoKind.IS_PLAYING) == ['true']
        assert recorder.payloads(InfoKind.PROGRESS) == ['42000']
        assert recorder.payloads(InfoKind.REPEAT_STATE) == ['context']
        assert recorder.payloads(InfoKind.SHUFFLE) == ['true']
        assert recorder.payloads(InfoKind.RESOURCE) == [
            'Test Song|https://open.spotify.com/track/4uLU6hMCjMI75M1A2tKUQC'
        ]
        assert recorder.payloads(InfoKind.CREATORS) == [
            'First Artist|https://open.spotify.com/artist/artist_1;'
            'Second Artist|https://open.spotify.com/artist/artist_2'
        ]
        assert recorder.payloads(InfoKind.GROUPING) == ['Test Album|https://open.spotify.com/album/album_1']
        assert recorder.payloads(InfoKind.COVER) == ['https://i.scdn.co/image/large']
        assert recorder.payloads(InfoKind.DURATION) == ['210000']

        canvas, lyrics = spawned
        canvas.assert_called_once_with(playback.item, recorder, None)
        lyrics.assert_called_once_with(playback.item, recorder, None)

    def test_same_item_only_updates_player_fields(self, playback, recorder, spawned):
        """Test same item only updates player fields"""
        reporter = StatusReporter(recorder, fetch_canvas=True, fetch_lyrics=True)
        reporter.report(playback)
        recorder.messages.clear()

        playback.progress_ms = 43000
        playback.is_playing = False
        reporter.report(playback)

        assert recorder.messages == [
            (InfoKind.IS_PLAYING, 'false'),
            (InfoKind.PROGRESS, '43000'),
            (InfoKind.REPEAT_STATE, 'context'),
            (InfoKind.SHUFFLE, 'true'),
        ]
        canvas, lyrics = spawned
        assert canvas.call_count == 1
        assert lyrics.call_count == 1

    def test_item_change_resends_metadata(self, playback, sample_playback_data,
                                          sample_episode_data, recorder, spawned):
        """Test item change resends metadata"""
        reporter = StatusReporter(recorder, fetch_canvas=True, fetch_lyrics=True)
        reporter.report(playback)

        sample_playback_data['item'] = sample_episode_data
        reporter.report(PlaybackState.from_spotify_data(sample_playback_data))

        assert recorder.payloads(InfoKind.GROUPING)[-1] == 'Test Show|https://open.spotify.com/show/show_1'
        assert recorder.payloads(InfoKind.DURATION)[-1] == '3600000'
        canvas, lyrics = spawned
        assert canvas.call_count == 2
        assert lyrics.call_count == 2

    def test_nothing_playing_clears_once(self, playback, recorder, spawned):
        """Test nothing playing clears once"""
        reporter = StatusReporter(recorder, fetch_canvas=False, fetch_lyrics=False)
        reporter.report(playback)
        recorder.messages.clear()

        reporter.report(None)
        reporter.report(None)
        reporter.report(PlaybackState(item=None, currently_playing_type='ad'))

        assert recorder.messages == [(InfoKind.CLEAR, '')]

    def test_item_reported_again_after_clear(self, playback, recorder, spawned):
        """Test item reported again after clear"""
        reporter = StatusReporter(recorder, fetch_canvas=False, fetch_lyrics=False)
        reporter.report(playback)
        reporter.report(None)
        recorder.messages.clear()

        reporter.report(playback)

        assert InfoKind.RESOURCE in recorder.kinds()

    def test_fetches_disabled(self, playback, recorder, spawned):
        """Test fetches disabled"""
        StatusReporter(recorder, fetch_canvas=False, fetch_lyrics=False).report(playback)

        canvas, lyrics = spawned
        canvas.assert_not_called()
        lyrics.assert_not_called()

    def test_repeat_and_shuffle_encoding(self, playback, recorder, spawned):
        """Test repeat and shuffle encoding"""
        playback.repeat_state = RepeatState.TRACK
        playback.shuffle_state = False

        StatusReporter(recorder, fetch_canvas=False, fetch_lyrics=False).report(playback)

        assert recorder.payloads(InfoKind.REPEAT_STATE) == ['track']
        assert recorder.payloads(InfoKind.SHUFFLE) == ['false']

    def test_idle_start_sends_nothing(self, recorder, spawned):
        """Test no CLEAR is sent when nothing was playing to begin with"""
        reporter = StatusReporter(recorder, fetch_canvas=False, fetch_lyrics=False)

        reporter.report(None)
        reporter.report(PlaybackState(item=None, currently_playing_type='ad'))

        assert recorder.messages == []
