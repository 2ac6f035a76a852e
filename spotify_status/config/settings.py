"""
Configuration management for spotify-status

This module handles loading, validation, and management of application settings
from YAML files and environment variables.

The configuration is organized into logical sections using dataclasses:
- Spotify API settings (credentials, scopes, token cache)
- Endpoint templates for the canvas and lyrics services
- Network identification (user agent)
- Status reporting behaviour (poll interval, which assets to fetch)
- Logging and storage locations

Sensitive data (client id and secret) can be loaded from environment variables,
while non-sensitive settings can be stored in YAML files.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional
from dataclasses import dataclass, asdict
from dotenv import load_dotenv

from ..core.exceptions import ConfigError

# Load environment variables from .env file if present
load_dotenv()


CANVAS_URL_TEMPLATE = "https://www.canvasdownloader.com/canvas?link=https://open.spotify.com/track/{track_id}"
LYRICS_URL_TEMPLATE = "https://spotify-lyrics-api-umber.vercel.app/?trackid={track_id}"


@dataclass
class SpotifyConfig:
    """
    Spotify API configuration and authentication settings

    The default scope covers reading the playback state and changing the
    repeat mode. Credentials should come from environment variables.
    """
    client_id: str = ""
    client_secret: str = ""
    redirect_url: str = "http://127.0.0.1:8888/callback"
    scope: str = "user-read-playback-state user-modify-playback-state"
    cache_path: str = "~/.spotify-status/token-cache"


@dataclass
class EndpointsConfig:
    """
    URL templates for the auxiliary asset services

    Both templates are formatted with ``track_id``.
    """
    canvas_url_template: str = CANVAS_URL_TEMPLATE
    lyrics_url_template: str = LYRICS_URL_TEMPLATE


@dataclass
class NetworkConfig:
    """Outbound HTTP identification"""
    user_agent: str = "spotify-status/1.0"


@dataclass
class StatusConfig:
    """
    Status reporting behaviour

    Controls how often the player state is polled by the ``watch`` command
    and which auxiliary assets are fetched when the playing item changes.
    """
    poll_interval: float = 1.0
    fetch_canvas: bool = True
    fetch_lyrics: bool = True


@dataclass
class LoggingConfig:
    """
    Logging configuration and output settings

    Controls log level, optional rotating log file and console formatting.
    """
    level: str = "INFO"
    file: str = ""
    max_size: str = "10MB"
    backup_count: int = 3
    console_output: bool = True
    colored_output: bool = True


@dataclass
class SecurityConfig:
    """Where configuration and cached credentials live"""
    config_directory: str = "~/.spotify-status/"


class Settings:
    """
    Main settings class that manages all configuration

    Loads settings from YAML (first file found wins), then overrides with
    environment variables, then makes sure the config directory exists.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize settings from config file or environment variables

        Args:
            config_path: Path to custom config file, if None uses default locations
        """
        self.config_path = config_path
        self.config_dir = Path.home() / ".spotify-status"

        self.spotify = SpotifyConfig()
        self.endpoints = EndpointsConfig()
        self.network = NetworkConfig()
        self.status = StatusConfig()
        self.logging = LoggingConfig()
        self.security = SecurityConfig()

        # Load configuration from various sources in order of precedence
        self._load_config()
        self._load_environment_variables()
        self._create_directories()

    def _sections(self) -> Dict[str, Any]:
        return {
            'spotify': self.spotify,
            'endpoints': self.endpoints,
            'network': self.network,
            'status': self.status,
            'logging': self.logging,
            'security': self.security,
        }

    def _load_config(self) -> None:
        """
        Load configuration from YAML file

        Searches the explicit path, the user config directory and the
        working directory. The first file found is used.
        """
        config_paths = [
            self.config_path,
            self.config_dir / "config.yaml",
            Path("config/config.yaml"),
            Path("config.yaml")
        ]

        config_data = {}
        for path in config_paths:
            if path and Path(path).exists():
                try:
                    with open(path, 'r', encoding='utf-8') as f:
                        config_data = yaml.safe_load(f) or {}
                    break
                except Exception as e:
                    print(f"Warning: Failed to load config from {path}: {e}")

        self._apply_config(config_data)

    def _apply_config(self, config_data: Dict[str, Any]) -> None:
        """
        Apply configuration data to dataclass instances

        Only keys that exist on the target dataclass are applied; unknown
        sections and keys are ignored.

        Args:
            config_data: Dictionary containing configuration sections
        """
        config_mapping = self._sections()

        for section_name, section_data in config_data.items():
            if section_name in config_mapping and isinstance(section_data, dict):
                config_obj = config_mapping[section_name]
                for key, value in section_data.items():
                    if hasattr(config_obj, key):
                        setattr(config_obj, key, value)

    def _load_environment_variables(self) -> None:
        """
        Load sensitive configuration from environment variables

        Environment variables take precedence over file-based configuration.
        """
        env_mappings = {
            'SPOTIFY_CLIENT_ID': lambda v: setattr(self.spotify, 'client_id', v),
            'SPOTIFY_CLIENT_SECRET': lambda v: setattr(self.spotify, 'client_secret', v),
            'SPOTIFY_REDIRECT_URL': lambda v: setattr(self.spotify, 'redirect_url', v),
            'SPOTIFY_STATUS_LOG_LEVEL': lambda v: setattr(self.logging, 'level', v),
        }

        for env_var, setter in env_mappings.items():
            value = os.getenv(env_var)
            if value:
                setter(value)

    def _create_directories(self) -> None:
        """Create the config directory, warning instead of failing"""
        directory = self.get_config_directory()
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except Exception as e:
            print(f"Warning: Failed to create directory {directory}: {e}")

    def get_config_directory(self) -> Path:
        """
        Get the expanded config directory path

        Returns:
            Path object for the configuration directory
        """
        return Path(self.security.config_directory).expanduser()

    def get_token_cache_path(self) -> Path:
        """
        Get the expanded OAuth token cache path

        Returns:
            Path object for spotipy's token cache file
        """
        return Path(self.spotify.cache_path).expanduser()

    def save_config(self, path: Optional[str] = None) -> Path:
        """
        Save current configuration to file

        Serializes the current configuration to YAML, excluding the Spotify
        client credentials.

        Args:
            path: Custom path to save config, defaults to user config directory

        Returns:
            The path that was written

        Raises:
            ConfigError: If the configuration cannot be saved
        """
        if not path:
            target = self.get_config_directory() / "config.yaml"
        else:
            target = Path(path)

        config_data = {name: asdict(section) for name, section in self._sections().items()}

        # Never persist credentials
        config_data['spotify']['client_id'] = ""
        config_data['spotify']['client_secret'] = ""

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, 'w', encoding='utf-8') as f:
                yaml.dump(config_data, f, default_flow_style=False, indent=2)
        except Exception as e:
            raise ConfigError(f"Failed to save config to {target}: {e}", details={'path': str(target)})
        return target

    def validate(self) -> List[str]:
        """
        Validate current configuration

        Returns:
            List of human-readable problems; empty when the configuration is usable
        """
        errors = []

        if not self.spotify.client_id or not self.spotify.client_secret:
            errors.append("Spotify client_id and client_secret are required")

        for name in ('canvas_url_template', 'lyrics_url_template'):
            template = getattr(self.endpoints, name)
            if '{track_id}' not in template:
                errors.append(f"Endpoint template {name} must contain '{{track_id}}'")

        try:
            if float(self.status.poll_interval) <= 0:
                errors.append(f"Invalid poll interval: {self.status.poll_interval}")
        except (TypeError, ValueError):
            errors.append(f"Invalid poll interval: {self.status.poll_interval}")

        if self.logging.level.upper() not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
            errors.append(f"Invalid logging level: {self.logging.level}")

        return errors

    def __str__(self) -> str:
        sections = [
            f"Poll: {self.status.poll_interval}s",
            f"Canvas: {'enabled' if self.status.fetch_canvas else 'disabled'}",
            f"Lyrics: {'enabled' if self.status.fetch_lyrics else 'disabled'}",
            f"Log level: {self.logging.level}",
        ]
        return f"Settings({', '.join(sections)})"


# Global settings instance for singleton pattern
settings = Settings()


def get_settings() -> Settings:
    """
    Get the global settings instance

    Returns:
        The global Settings instance
    """
    return settings


def reload_settings(config_path: Optional[str] = None) -> Settings:
    """
    Reload settings from configuration files

    Args:
        config_path: Optional path to specific config file

    Returns:
        New Settings instance with reloaded configuration
    """
    global settings
    settings = Settings(config_path)
    return settings
