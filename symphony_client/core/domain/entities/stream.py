"""Conversation stream entity."""

from dataclasses import dataclass
from enum import Enum


class StreamType(Enum):
    """Kind of conversation a stream carries."""

    IM = "IM"
    MIM = "MIM"
    ROOM = "ROOM"
    POST = "POST"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, value: str | None) -> "StreamType":
        """Parse a wire value, falling back to UNKNOWN for anything unrecognised."""
        if value is None:
            return cls.UNKNOWN
        try:
            return cls(value.upper())
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class Stream:
    """
    A conversation stream (IM, multi-party IM or chat room).

    Attributes:
        id: Stream ID
        active: Whether the stream is active
        cross_pod: Whether members span more than one pod
        stream_type: Kind of conversation
        member_user_ids: Members of an IM/MIM stream (empty for rooms)
        room_name: Room name when the stream is a chat room
    """

    id: str
    active: bool = True
    cross_pod: bool = False
    stream_type: StreamType = StreamType.UNKNOWN
    member_user_ids: tuple[int, ...] = ()
    room_name: str | None = None

    @property
    def is_room(self) -> bool:
        return self.stream_type is StreamType.ROOM
