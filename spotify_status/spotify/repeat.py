"""
Repeat mode codec

Spotify's player exposes three repeat modes, addressed by the lowercase names
``track``, ``context`` and ``off``. ``RepeatState`` gives them contiguous
ordinals 0, 1, 2 so the "repeat" button can cycle through them with modular
arithmetic: TRACK -> CONTEXT -> OFF -> TRACK.
"""

from enum import IntEnum
from typing import Dict


class RepeatState(IntEnum):
    """
    Player repeat mode

    The ordinals must stay contiguous from 0; ``next_state`` relies on it.
    """
    TRACK = 0
    CONTEXT = 1
    OFF = 2

    @property
    def api_name(self) -> str:
        """Lowercase name used by the Web API (``track``, ``context``, ``off``)"""
        return self.name.lower()


_STATES: Dict[str, RepeatState] = {
    "track": RepeatState.TRACK,
    "context": RepeatState.CONTEXT,
    "off": RepeatState.OFF,
}


def get_state(name: str) -> RepeatState:
    """
    Look up a repeat state by its Web API name

    Args:
        name: One of ``"track"``, ``"context"`` or ``"off"`` (case-sensitive)

    Returns:
        Matching RepeatState

    Raises:
        KeyError: For any other name; there is no fallback
    """
    return _STATES[name]


def next_state(state: RepeatState) -> RepeatState:
    """Advance to the next repeat state, wrapping after OFF"""
    return RepeatState((int(state) + 1) % len(RepeatState))
