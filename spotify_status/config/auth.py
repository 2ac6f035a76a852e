"""
OAuth2 authentication for the Spotify Web API

The player endpoints (current playback, repeat mode) need a user token, so
this module wraps spotipy's authorization code flow (``SpotifyOAuth``). The
token is cached on disk at the configured cache path and refreshed by spotipy
when it expires; the first run opens a browser for user consent.
"""

from typing import Optional

import spotipy
from spotipy.oauth2 import SpotifyOAuth

from .settings import get_settings
from ..core.exceptions import SpotifyError


class SpotifyAuth:
    """
    Spotify OAuth2 authentication manager

    Builds and caches one authenticated ``spotipy.Spotify`` instance from the
    application settings.

    Attributes:
        settings: Application settings instance
        client_id: Spotify application client ID
        client_secret: Spotify application client secret
        redirect_uri: OAuth2 callback URL registered with the Spotify app
        scope: Permission scopes requested from the user
        cache_path: File where spotipy keeps the token between runs
    """

    def __init__(self):
        self.settings = get_settings()

        self.client_id = self.settings.spotify.client_id
        self.client_secret = self.settings.spotify.client_secret
        self.redirect_uri = self.settings.spotify.redirect_url
        self.scope = self.settings.spotify.scope
        self.cache_path = self.settings.get_token_cache_path()

        self._auth_manager: Optional[SpotifyOAuth] = None
        self._spotify_client: Optional[spotipy.Spotify] = None

    def _get_auth_manager(self) -> SpotifyOAuth:
        """
        Create the OAuth manager on first use

        Raises:
            SpotifyError: If client credentials are not configured
        """
        if not self.client_id or not self.client_secret:
            raise SpotifyError(
                "Spotify client_id and client_secret are required "
                "(set SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET)",
                is_auth_error=True
            )

        if not self._auth_manager:
            self.cache_path.parent.mkdir(parents=True, exist_ok=True)
            self._auth_manager = SpotifyOAuth(
                client_id=self.client_id,
                client_secret=self.client_secret,
                redirect_uri=self.redirect_uri,
                scope=self.scope,
                cache_path=str(self.cache_path),
                open_browser=True
            )
        return self._auth_manager

    def get_spotify_client(self) -> spotipy.Spotify:
        """
        Get authenticated Spotify API client instance

        Returns:
            Cached ``spotipy.Spotify`` bound to the OAuth manager

        Raises:
            SpotifyError: If credentials are missing
        """
        if not self._spotify_client:
            self._spotify_client = spotipy.Spotify(auth_manager=self._get_auth_manager())
        return self._spotify_client

    def is_authenticated(self) -> bool:
        """
        Check whether a usable token is cached

        Does not start the browser flow; only inspects the token cache.
        """
        try:
            manager = self._get_auth_manager()
            token_info = manager.cache_handler.get_cached_token()
            return bool(token_info) and bool(manager.validate_token(token_info))
        except Exception:
            return False

    def revoke_token(self) -> None:
        """
        Delete the cached token and forget the client

        Tokens remain valid on Spotify's side until they expire.
        """
        if self.cache_path.exists():
            try:
                self.cache_path.unlink()
                print("Token revoked successfully")
            except Exception as e:
                print(f"Warning: Failed to delete token file: {e}")

        self._auth_manager = None
        self._spotify_client = None


# Singleton pattern ensures consistent authentication state across the application
_auth_instance: Optional[SpotifyAuth] = None


def get_auth() -> SpotifyAuth:
    """
    Get the global authentication instance (singleton pattern)

    Returns:
        Global SpotifyAuth instance
    """
    global _auth_instance
    if not _auth_instance:
        _auth_instance = SpotifyAuth()
    return _auth_instance


def reset_auth() -> None:
    """
    Reset the global authentication instance

    Only clears the in-memory instance. Use ``SpotifyAuth.revoke_token()``
    to delete the cached token.
    """
    global _auth_instance
    _auth_instance = None
