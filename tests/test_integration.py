"""Integration tests for the command line interface"""

from unittest.mock import Mock, patch

import pytest
import requests
from click.testing import CliRunner
from spotipy.exceptions import SpotifyException

from spotify_status import __version__
from spotify_status.core.exceptions import SpotifyError
from spotify_status.main import cli
from spotify_status.spotify.info import InfoKind
from spotify_status.spotify.client import SpotifyClient
from spotify_status.spotify.models import PlaybackState
from spotify_status.spotify.repeat import RepeatState


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from replacing pytest's log handlers"""
    with patch('spotify_status.main.configure_from_settings'):
        yield


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_client():
    client = Mock()
    with patch('spotify_status.main.get_spotify_client', return_value=client):
        yield client


class TestIntegration:
    """Test command wiring"""

    def test_version(self, runner):
        """Test --version output"""
        result = runner.invoke(cli, ['--version'])

        assert result.exit_code == 0
        assert f"spotify-status v{__version__}" in result.output

    def test_repeat_explicit_state(self, runner, mock_client):
        """Test repeat explicit state"""
        result = runner.invoke(cli, ['repeat', 'context'])

        assert result.exit_code == 0
        mock_client.set_repeat.assert_called_once_with(RepeatState.CONTEXT)
        assert 'Repeat: context' in result.output

    def test_repeat_cycles_without_state(self, runner, mock_client):
        """Test repeat cycles without state"""
        mock_client.cycle_repeat.return_value = RepeatState.TRACK

        result = runner.invoke(cli, ['repeat'])

        assert result.exit_code == 0
        mock_client.cycle_repeat.assert_called_once_with()
        assert 'Repeat: track' in result.output

    def test_repeat_rejects_unknown_state(self, runner, mock_client):
        """Test repeat rejects unknown state"""
        result = runner.invoke(cli, ['repeat', 'all'])

        assert result.exit_code == 2
        mock_client.set_repeat.assert_not_called()

    def test_spotify_error_exits_with_message(self, runner, mock_client):
        """Test spotify error exits with message"""
        mock_client.cycle_repeat.side_effect = SpotifyError("No active Spotify device found")

        result = runner.invoke(cli, ['repeat'])

        assert result.exit_code == 1
        assert 'No active Spotify device found' in result.output

    def test_now_playing(self, runner, mock_client, sample_playback_data):
        """Test now playing"""
        mock_client.get_playback.return_value = PlaybackState.from_spotify_data(sample_playback_data)

        result = runner.invoke(cli, ['now-playing'])

        assert result.exit_code == 0
        assert 'Test Song' in result.output
        assert 'First Artist, Second Artist' in result.output
        assert 'Test Album' in result.output
        assert '0:42 / 3:30' in result.output
        assert 'repeat context' in result.output

    def test_now_playing_idle(self, runner, mock_client):
        """Test now playing idle"""
        mock_client.get_playback.return_value = None

        result = runner.invoke(cli, ['now-playing'])

        assert result.exit_code == 0
        assert 'Nothing is playing' in result.output

    def test_canvas_command(self, runner):
        """Test canvas command"""
        seen = []

        async def fake_send_canvas(item, send_message):
            seen.append(item.id)
            send_message(InfoKind.CANVAS, 'https://canvaz.scdn.co/upload/video.mp4')

        with patch('spotify_status.main.send_canvas', fake_send_canvas):
            result = runner.invoke(cli, ['canvas', 'abc123'])

        assert result.exit_code == 0
        assert seen == ['abc123']
        assert '[CANVAS:10] https://canvaz.scdn.co/upload/video.mp4' in result.output

    def test_lyrics_command(self, runner):
        """Test lyrics command"""
        async def fake_send_lyrics(item, send_message):
            send_message(InfoKind.CLEAR_LYRICS, '')
            send_message(InfoKind.LYRICS_LINE, 'First line')

        with patch('spotify_status.main.send_lyrics', fake_send_lyrics):
            result = runner.invoke(cli, ['lyrics', 'abc123'])

        assert result.exit_code == 0
        assert result.output.splitlines() == ['[CLEAR_LYRICS:11] ', '[LYRICS_LINE:12] First line']

    def test_watch_stops_on_auth_error(self, runner, mock_client):
        """Test watch stops on auth error"""
        mock_client.get_playback.side_effect = SpotifyError("Spotify rejected the access token", is_auth_error=True)

        result = runner.invoke(cli, ['watch', '--interval', '0.01'])

        assert result.exit_code == 1
        assert 'Spotify rejected the access token' in result.output

    def test_config_save(self, runner, tmp_path):
        """Test config save writes the file"""
        target = tmp_path / 'config.yaml'

        result = runner.invoke(cli, ['config', 'save', '--path', str(target)])

        assert result.exit_code == 0
        assert target.exists()

    def test_watch_survives_network_error(self, runner):
        """Test watch keeps polling after a transport failure"""
        spotify = Mock()
        spotify.current_playback.side_effect = [
            requests.exceptions.ConnectionError("network blip"),
            None,
            SpotifyException(401, -1, "The access token expired"),
        ]

        with patch('spotify_status.main.get_spotify_client', return_value=SpotifyClient(spotify)):
            result = runner.invoke(cli, ['watch', '--interval', '0.01'])

        assert spotify.current_playback.call_count == 3
        assert result.exit_code == 1
        assert 'Spotify rejected the access token' in result.output

    def test_config_show_reports_log_file(self, runner, tmp_path):
        """Test config show prints the active log file"""
        log_file = tmp_path / 'spotify-status.log'

        with patch('spotify_status.main.get_current_log_file', return_value=log_file):
            result = runner.invoke(cli, ['config', 'show'])

        assert result.exit_code == 0
        assert f"Log file:         {log_file}" in result.output

    def test_config_show_without_log_file(self, runner):
        """Test config show marks a missing log file"""
        with patch('spotify_status.main.get_current_log_file', return_value=None):
            result = runner.invoke(cli, ['config', 'show'])

        assert result.exit_code == 0
        assert "Log file:         -" in result.output
