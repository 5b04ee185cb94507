"""
Domain Layer - Pure data and failure types.

This layer contains:
    - Entities: Stream, Room, RoomDetail, RoomSearchResults
    - Value Objects: CredentialPair, RoomSearchCriteria
    - Exceptions: the classified failure taxonomy

The domain layer has NO external dependencies - it knows nothing about
HTTP, JSON or the wire format.
"""

from .entities import (
    FacetedMatchCount,
    Room,
    RoomDetail,
    RoomSearchResults,
    RoomSystemInfo,
    Stream,
    StreamType,
)
from .exceptions import (
    ApiFailure,
    Conflict,
    FailureKind,
    Malformed,
    NotFound,
    RefreshFailed,
    Transient,
    Unauthorized,
    Unknown,
    classify,
)
from .value_objects import CredentialPair, RoomSearchCriteria

__all__ = [
    # Entities
    "Stream",
    "StreamType",
    "Room",
    "RoomDetail",
    "RoomSystemInfo",
    "RoomSearchResults",
    "FacetedMatchCount",
    # Value Objects
    "CredentialPair",
    "RoomSearchCriteria",
    # Exceptions
    "ApiFailure",
    "FailureKind",
    "Unauthorized",
    "RefreshFailed",
    "NotFound",
    "Conflict",
    "Transient",
    "Malformed",
    "Unknown",
    "classify",
]
