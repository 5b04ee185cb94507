"""Chat room entities."""

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True)
class Room:
    """
    Chat room attributes, plus system information once the room exists.

    Callers build a Room (without ``id``) to create a room, or take one
    returned by the API and ``replace`` attributes on it to update a room.
    Keywords are (key, value) pairs.
    """

    name: str
    keywords: tuple[tuple[str, str], ...] = ()
    description: str | None = None
    members_can_invite: bool | None = None
    discoverable: bool | None = None
    public: bool | None = None
    read_only: bool | None = None
    copy_protected: bool | None = None

    # System information, populated on rooms returned by the pod
    id: str | None = None
    active: bool | None = None
    creation_date: datetime | None = None
    created_by_user_id: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.keywords, list):
            object.__setattr__(self, "keywords", tuple(tuple(kw) for kw in self.keywords))

    def with_attributes(self, **changes: object) -> "Room":
        """Return a copy of this room with the given attributes changed."""
        return replace(self, **changes)


@dataclass(frozen=True)
class RoomSystemInfo:
    """System-managed facts about a room."""

    id: str
    active: bool
    creation_date: datetime | None = None
    created_by_user_id: int | None = None


@dataclass(frozen=True)
class RoomDetail:
    """A room's attributes together with its system information."""

    room: Room
    system_info: RoomSystemInfo

    @property
    def id(self) -> str:
        return self.system_info.id

    @property
    def active(self) -> bool:
        return self.system_info.active


@dataclass(frozen=True)
class FacetedMatchCount:
    """Number of search hits for one facet."""

    facet: str
    count: int


@dataclass(frozen=True)
class RoomSearchResults:
    """
    One page of room search results.

    Attributes:
        count: Total number of matching rooms
        skip: Number of results skipped
        limit: Page size used by the pod
        rooms: Matching rooms on this page
        faceted_match_count: Hit counts per facet
        query: The query text the pod evaluated
    """

    count: int
    skip: int
    limit: int
    rooms: tuple[RoomDetail, ...] = ()
    faceted_match_count: tuple[FacetedMatchCount, ...] = ()
    query: str | None = None

    def __len__(self) -> int:
        return len(self.rooms)
