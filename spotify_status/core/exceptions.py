"""
Exception classes for spotify-status.

This module defines the custom exceptions used throughout the application.
Each exception carries a human-readable message plus an optional ``details``
dictionary for logging.

Exception Hierarchy:
    SpotifyStatusError (base)
        ConfigError - Configuration file issues
        SpotifyError - Spotify Web API / authentication issues
        CanvasError - Canvas page download or scraping issues
        LyricsError - Lyrics API download or decoding issues

Canvas and lyrics errors are NON-CRITICAL: they are raised by the fetch
helpers and always caught (and logged) by the senders, so they never reach
the code that scheduled the fetch.
"""

from typing import Any, Dict, Optional


class SpotifyStatusError(Exception):
    """
    Base exception for all spotify-status errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context (e.g., track id, URL).

    Example:
        try:
            client.cycle_repeat()
        except SpotifyStatusError as e:
            logger.error(f"Operation failed: {e.message}")
            if e.details:
                logger.debug(f"Details: {e.details}")
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error description that will be shown to the user.
            details: Optional dictionary containing additional context about the error.
                     Common keys include:
                     - 'track_id': Spotify track id involved in the error
                     - 'url': URL that caused the error
                     - 'status_code': HTTP status of a failed request
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the error message for display."""
        return self.message


class ConfigError(SpotifyStatusError):
    """
    Raised when the configuration cannot be loaded or saved.

    Common causes:
        - config.yaml has invalid YAML syntax
        - Permission denied when writing the config directory
    """
    pass


class SpotifyError(SpotifyStatusError):
    """
    Raised when there's an issue with the Spotify Web API.

    Common causes:
        - Missing or invalid client credentials
        - OAuth token could not be obtained
        - No active device (HTTP 404 from the player endpoints)
        - Premium required for player control (HTTP 403)

    Attributes:
        is_auth_error: True if this is an authentication error.
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        is_auth_error: bool = False
    ) -> None:
        super().__init__(message, details)
        self.is_auth_error = is_auth_error


class CanvasError(SpotifyStatusError):
    """
    Raised when the canvas page cannot be downloaded.

    Covers transport failures and non-success HTTP statuses. A page that
    downloads fine but has no download button is NOT an error.

    Example:
        raise CanvasError(
            "Canvas page request failed",
            details={'track_id': track_id, 'status_code': 503}
        )
    """
    pass


class LyricsError(SpotifyStatusError):
    """
    Raised when the lyrics API cannot be queried or its payload decoded.

    Note:
        An error-flagged payload (``{"error": true}``) is a valid "no lyrics"
        answer and does not raise.
    """
    pass
