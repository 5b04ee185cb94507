"""
Entities - Domain objects returned to callers.

Entities are built by the entity mapper from wire-format responses and are
immutable once built.
"""

from .stream import Stream, StreamType
from .room import FacetedMatchCount, Room, RoomDetail, RoomSearchResults, RoomSystemInfo

__all__ = [
    "Stream",
    "StreamType",
    "Room",
    "RoomDetail",
    "RoomSystemInfo",
    "RoomSearchResults",
    "FacetedMatchCount",
]
