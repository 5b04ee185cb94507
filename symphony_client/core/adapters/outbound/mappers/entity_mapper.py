"""
Entity mapper between pod wire models and domain entities.

Pure functions, one per wire/domain pair. They only restructure data
(flatten tag lists, convert epoch millis, unwrap nested objects); a
missing required field raises Malformed and nothing else can fail.

Round-trip law: for room attributes ``w``,
``room_to_wire(room_from_wire(V2RoomDetail(room_attributes=w)))`` equals
``w`` for name, keywords, description and every flag.
"""

from datetime import UTC, datetime

from ....domain.entities import (
    FacetedMatchCount,
    Room,
    RoomDetail,
    RoomSearchResults,
    RoomSystemInfo,
    Stream,
    StreamType,
)
from ....domain.exceptions import Malformed
from ....domain.value_objects import RoomSearchCriteria
from ....schemas import pod


def _from_epoch_millis(value: int | None) -> datetime | None:
    if value is None:
        return None
    return datetime.fromtimestamp(value / 1000, tz=UTC)


def keywords_from_wire(tags: list[pod.RoomTag] | None) -> tuple[tuple[str, str], ...]:
    """Flatten wire tags into (key, value) pairs, preserving order."""
    return tuple((tag.key, tag.value) for tag in tags or ())


def keywords_to_wire(keywords: tuple[tuple[str, str], ...]) -> list[pod.RoomTag]:
    return [pod.RoomTag(key=key, value=value) for key, value in keywords]


def stream_id_from_wire(stream: pod.StreamId) -> str:
    if not stream.id:
        raise Malformed("IM create response carries no stream id")
    return stream.id


def stream_from_wire(attributes: pod.StreamAttributes) -> Stream:
    """Convert stream attributes into a Stream."""
    if not attributes.id:
        raise Malformed("Stream attributes carry no id")
    members = attributes.stream_attributes.members if attributes.stream_attributes else []
    room_name = attributes.room_attributes.name if attributes.room_attributes else None
    stream_type = StreamType.parse(attributes.stream_type.type if attributes.stream_type else None)
    return Stream(
        id=attributes.id,
        active=attributes.active if attributes.active is not None else True,
        cross_pod=bool(attributes.cross_pod),
        stream_type=stream_type,
        member_user_ids=tuple(members),
        room_name=room_name,
    )


def room_from_wire(detail: pod.V2RoomDetail) -> Room:
    """Convert a room detail into a Room, carrying system info when present."""
    attributes = detail.room_attributes
    if attributes is None or attributes.name is None:
        raise Malformed("Room detail carries no room name")
    info = detail.room_system_info
    return Room(
        name=attributes.name,
        keywords=keywords_from_wire(attributes.keywords),
        description=attributes.description,
        members_can_invite=attributes.members_can_invite,
        discoverable=attributes.discoverable,
        public=attributes.public,
        read_only=attributes.read_only,
        copy_protected=attributes.copy_protected,
        id=info.id if info else None,
        active=info.active if info else None,
        creation_date=_from_epoch_millis(info.creation_date) if info else None,
        created_by_user_id=info.created_by_user_id if info else None,
    )


def room_detail_from_wire(detail: pod.V2RoomDetail) -> RoomDetail:
    info = detail.room_system_info
    if info is None:
        raise Malformed("Room detail carries no system info")
    if info.active is None:
        raise Malformed(f"Room detail for {info.id} carries no active flag")
    return RoomDetail(
        room=room_from_wire(detail),
        system_info=RoomSystemInfo(
            id=info.id,
            active=info.active,
            creation_date=_from_epoch_millis(info.creation_date),
            created_by_user_id=info.created_by_user_id,
        ),
    )


def room_to_wire(room: Room) -> pod.V2RoomAttributes:
    """Convert a Room's attributes into the body sent to create/update."""
    if not room.name:
        raise Malformed("Room name is required")
    return pod.V2RoomAttributes(
        name=room.name,
        keywords=keywords_to_wire(room.keywords),
        description=room.description,
        members_can_invite=room.members_can_invite,
        discoverable=room.discoverable,
        public=room.public,
        read_only=room.read_only,
        copy_protected=room.copy_protected,
    )


def room_search_criteria_to_wire(criteria: RoomSearchCriteria) -> pod.RoomSearchCriteriaWire:
    return pod.RoomSearchCriteriaWire(
        query=criteria.query,
        labels=list(criteria.labels) or None,
        active=criteria.active,
        private=criteria.private,
        owner=pod.UserRef(id=criteria.owner_id) if criteria.owner_id is not None else None,
        creator=pod.UserRef(id=criteria.creator_id) if criteria.creator_id is not None else None,
        sort_order=criteria.sort_order,
    )


def room_search_results_from_wire(results: pod.RoomSearchResultsWire) -> RoomSearchResults:
    return RoomSearchResults(
        count=results.count,
        skip=results.skip,
        limit=results.limit,
        rooms=tuple(room_detail_from_wire(detail) for detail in results.rooms),
        faceted_match_count=tuple(
            FacetedMatchCount(facet=fmc.facet, count=fmc.count)
            for fmc in results.faceted_match_count
        ),
        query=results.query.query if results.query else None,
    )
