"""
Process-wide HTTP session for the auxiliary asset fetchers

One ``aiohttp.ClientSession`` is shared by every canvas and lyrics request.
It is created lazily, inside the running event loop, on first use and reused
for the life of the process. The fetchers also accept an explicit session so
tests can pass a fake one.
"""

from typing import Optional

import aiohttp

from ..config.settings import get_settings


_session: Optional[aiohttp.ClientSession] = None


def get_http_session() -> aiohttp.ClientSession:
    """
    Get the shared HTTP session, creating it on first use

    Must be called from inside a running event loop.

    Returns:
        The process-wide ``aiohttp.ClientSession``
    """
    global _session
    if _session is None or _session.closed:
        settings = get_settings()
        _session = aiohttp.ClientSession(headers={'User-Agent': settings.network.user_agent})
    return _session


async def close_http_session() -> None:
    """Close the shared session at process exit"""
    global _session
    if _session is not None and not _session.closed:
        await _session.close()
    _session = None
