"""
Configuration package

Settings loading (YAML + environment) and Spotify OAuth2 authentication.
"""

from .settings import (
    get_settings,
    reload_settings,
    Settings,
    SpotifyConfig,
    EndpointsConfig,
    NetworkConfig,
    StatusConfig,
    LoggingConfig,
    SecurityConfig,
)
from .auth import get_auth, reset_auth, SpotifyAuth

__all__ = [
    'get_settings',
    'reload_settings',
    'Settings',
    'SpotifyConfig',
    'EndpointsConfig',
    'NetworkConfig',
    'StatusConfig',
    'LoggingConfig',
    'SecurityConfig',
    'get_auth',
    'reset_auth',
    'SpotifyAuth',
]
