"""
Update channels for status messages

Every message sent to the display sink is tagged with an ``InfoKind`` naming
the UI channel it updates. Kinds are single-bit flags so a consumer can keep
a mask of channels it cares about; ``CLEAR`` is the zero value and means
"reset everything".

Consumers that index channels sequentially use ``to_update_int``: CLEAR maps
to 0 and the kind with bit ``n`` set maps to ``n + 1``.
"""

import math
from enum import IntFlag
from typing import Callable


class InfoKind(IntFlag):
    CLEAR = 0
    IS_PLAYING = 1 << 0
    RESOURCE = 1 << 1
    CREATORS = 1 << 2
    GROUPING = 1 << 3
    COVER = 1 << 4
    DURATION = 1 << 5
    PROGRESS = 1 << 6
    REPEAT_STATE = 1 << 7
    SHUFFLE = 1 << 8
    CANVAS = 1 << 9
    CLEAR_LYRICS = 1 << 10
    LYRICS_LINE = 1 << 11


# Receives (channel, payload) for each update
MessageCallback = Callable[[InfoKind, str], None]


def to_update_int(kind: InfoKind) -> int:
    """
    Convert a single-bit kind to its sequential channel index

    Args:
        kind: CLEAR or exactly one flag. Combined masks are not supported and
              return an index that means nothing (the highest set bit wins).

    Returns:
        0 for CLEAR, otherwise ``log2(kind) + 1``
    """
    if kind == InfoKind.CLEAR:
        return 0
    return int(math.log2(int(kind))) + 1
