"""
Spotify player client

Thin wrapper over ``spotipy.Spotify`` for the two player operations the
status display needs: reading the current playback and changing the repeat
mode. Payloads are turned into ``PlaybackState`` models and spotipy errors
into ``SpotifyError`` so callers deal with one exception type.

Error mapping:
- 401: token rejected; the cached spotipy client is dropped so the next call
  re-authenticates
- 403: player control needs Spotify Premium
- 404: no active device
- anything else: propagated as SpotifyError with the HTTP status in details
- transport failures (connection, DNS, timeout): SpotifyError without a status
"""

import logging
from typing import Any, Optional

import requests
import spotipy
from spotipy.exceptions import SpotifyException

from ..config.auth import get_auth
from ..core.exceptions import SpotifyError
from ..utils.logger import get_logger
from .models import PlaybackState
from .repeat import RepeatState, next_state

# Suppress Spotipy's verbose logging
logging.getLogger('spotipy.client').setLevel(logging.ERROR)


class SpotifyClient:
    """
    Spotify Web API client for the user's player

    The authenticated ``spotipy.Spotify`` instance is created lazily on first
    use, so constructing the client never opens a browser.
    """

    def __init__(self, spotify: Optional[spotipy.Spotify] = None):
        """
        Args:
            spotify: Pre-built spotipy client; when omitted one is obtained
                     from the global auth manager on first use
        """
        self.logger = get_logger(__name__)
        self._client: Optional[spotipy.Spotify] = spotify

    @property
    def client(self) -> spotipy.Spotify:
        if not self._client:
            self._client = get_auth().get_spotify_client()
        return self._client

    def _make_request(self, func_name: str, *args, **kwargs) -> Any:
        """
        Call a spotipy method, translating its errors

        Args:
            func_name: Name of the ``spotipy.Spotify`` method
            *args: Positional arguments for the method
            **kwargs: Keyword arguments for the method

        Raises:
            SpotifyError: For any Web API failure
        """
        try:
            return getattr(self.client, func_name)(*args, **kwargs)
        except SpotifyException as e:
            details = {'status_code': e.http_status, 'endpoint': func_name}
            if e.http_status == 401:
                self.logger.debug("Spotify token rejected, dropping cached client")
                self._client = None
                raise SpotifyError("Spotify rejected the access token", details, is_auth_error=True) from e
            if e.http_status == 403:
                raise SpotifyError("Player control requires Spotify Premium", details) from e
            if e.http_status == 404:
                raise SpotifyError("No active Spotify device found", details) from e
            raise SpotifyError(f"Spotify API error: {e.msg}", details) from e
        except requests.exceptions.RequestException as e:
            # spotipy lets connection failures and timeouts through unwrapped
            raise SpotifyError(f"Spotify request failed: {e}", {'endpoint': func_name}) from e

    def get_playback(self) -> Optional[PlaybackState]:
        """
        Read the user's current playback

        Returns:
            PlaybackState, or None when no device is playing anything
        """
        data = self._make_request('current_playback', additional_types='episode')
        playback = PlaybackState.from_spotify_data(data)
        if playback is None:
            self.logger.debug("No active playback")
        return playback

    def set_repeat(self, state: RepeatState) -> None:
        """Set the repeat mode on the active device"""
        self._make_request('repeat', state.api_name)
        self.logger.info(f"Repeat mode set to {state.api_name}")

    def cycle_repeat(self) -> RepeatState:
        """
        Advance the repeat mode one step (track -> context -> off -> track)

        Returns:
            The state that was set

        Raises:
            SpotifyError: If nothing is playing or the request fails
        """
        playback = self.get_playback()
        if playback is None:
            raise SpotifyError("No active Spotify device found")

        new_state = next_state(playback.repeat_state)
        self.set_repeat(new_state)
        return new_state


# Global client instance for singleton pattern implementation
_client_instance: Optional[SpotifyClient] = None


def get_spotify_client() -> SpotifyClient:
    """
    Factory function to retrieve the global Spotify client instance

    Returns:
        Global SpotifyClient instance
    """
    global _client_instance
    if not _client_instance:
        _client_instance = SpotifyClient()
    return _client_instance


def reset_spotify_client() -> None:
    """Reset the global Spotify client instance (tests, credential changes)"""
    global _client_instance
    _client_instance = None
