# spotify_status/utils/__init__.py
"""
Utilities package
Logging, the shared HTTP session and background task tracking
"""

from .logger import (
    get_logger,
    configure_from_settings,
    setup_logging,
    parse_size,
    get_current_log_file
)
from .http import get_http_session, close_http_session
from .tasks import spawn, drain_background_tasks, pending_task_count

__all__ = [
    # Logger exports
    'get_logger',
    'configure_from_settings',
    'setup_logging',
    'parse_size',
    'get_current_log_file',

    # Network
    'get_http_session',
    'close_http_session',

    # Background tasks
    'spawn',
    'drain_background_tasks',
    'pending_task_count',
]
