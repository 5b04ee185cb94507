"""
Wire-format models for the pod REST API.

Field names follow the pod's camelCase JSON; Python attributes are
snake_case. Unknown fields are ignored so newer pod versions keep parsing.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict:
        """Serialize to the JSON body the pod expects."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ============================================================================
# Authentication
# ============================================================================


class AuthToken(WireModel):
    name: str
    token: str


# ============================================================================
# Streams
# ============================================================================


class StreamId(WireModel):
    """Response of the IM create endpoint."""

    id: str


class StreamTypeWire(WireModel):
    type: str


class ConversationSpecificStreamAttributes(WireModel):
    members: list[int] = Field(default_factory=list)


class RoomSpecificStreamAttributes(WireModel):
    name: str | None = None


class StreamAttributes(WireModel):
    id: str
    cross_pod: bool | None = None
    active: bool | None = None
    stream_type: StreamTypeWire | None = None
    stream_attributes: ConversationSpecificStreamAttributes | None = None
    room_attributes: RoomSpecificStreamAttributes | None = None


# ============================================================================
# Rooms
# ============================================================================


class RoomTag(WireModel):
    key: str
    value: str


class V2RoomAttributes(WireModel):
    name: str | None = None
    keywords: list[RoomTag] | None = None
    description: str | None = None
    members_can_invite: bool | None = None
    discoverable: bool | None = None
    public: bool | None = None
    read_only: bool | None = None
    copy_protected: bool | None = None


class RoomSystemInfo(WireModel):
    id: str
    creation_date: int | None = None  # epoch milliseconds
    created_by_user_id: int | None = None
    active: bool | None = None


class V2RoomDetail(WireModel):
    """Room attributes plus system info; also the shape of the v1 setActive response."""

    room_attributes: V2RoomAttributes | None = None
    room_system_info: RoomSystemInfo | None = None


class UserRef(WireModel):
    id: int


class RoomSearchCriteriaWire(WireModel):
    query: str
    labels: list[str] | None = None
    active: bool | None = None
    private: bool | None = None
    owner: UserRef | None = None
    creator: UserRef | None = None
    sort_order: str | None = None


class FacetedMatchCountWire(WireModel):
    facet: str
    count: int


class RoomSearchResultsWire(WireModel):
    count: int = 0
    skip: int = 0
    limit: int = 0
    query: RoomSearchCriteriaWire | None = None
    rooms: list[V2RoomDetail] = Field(default_factory=list)
    faceted_match_count: list[FacetedMatchCountWire] = Field(default_factory=list)
