"""Wire-format schemas exchanged with the pod REST API."""

from .pod import (
    AuthToken,
    ConversationSpecificStreamAttributes,
    FacetedMatchCountWire,
    RoomSearchCriteriaWire,
    RoomSearchResultsWire,
    RoomSpecificStreamAttributes,
    RoomSystemInfo,
    RoomTag,
    StreamAttributes,
    StreamId,
    StreamTypeWire,
    UserRef,
    V2RoomAttributes,
    V2RoomDetail,
    WireModel,
)

__all__ = [
    "WireModel",
    "AuthToken",
    "StreamId",
    "StreamTypeWire",
    "StreamAttributes",
    "ConversationSpecificStreamAttributes",
    "RoomSpecificStreamAttributes",
    "RoomTag",
    "V2RoomAttributes",
    "RoomSystemInfo",
    "V2RoomDetail",
    "UserRef",
    "RoomSearchCriteriaWire",
    "FacetedMatchCountWire",
    "RoomSearchResultsWire",
]
