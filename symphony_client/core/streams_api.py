"""
Streams API - conversations, instant messages and chat rooms.

StreamsApi is the caller-facing surface. Each method binds its arguments
to a pod endpoint, hands the call to an ApiExecutor (which manages the
session token and recovery), and maps the wire response to a domain
entity. Wire models never leave this class.

Example:
    from symphony_client import PodApiFactory, Room

    streams = PodApiFactory.from_env().create_streams_api()
    stream_id = streams.create_stream([101, 102])
    room = streams.create_room(Room(name="Ops", keywords=(("team", "ops"),)))
    streams.set_room_active(room.id, False)
"""

import logging
from collections.abc import Iterable

from .adapters.outbound.mappers import (
    room_detail_from_wire,
    room_from_wire,
    room_search_criteria_to_wire,
    room_search_results_from_wire,
    room_to_wire,
    stream_from_wire,
    stream_id_from_wire,
)
from .application.ports import ApiExecutor, PodGateway, RemoteCall
from .domain.entities import Room, RoomDetail, RoomSearchResults, Stream
from .domain.exceptions import Malformed
from .domain.value_objects import RoomSearchCriteria
from .infrastructure.logging import get_logger


class StreamsApi:
    """
    Create single or multi party conversations and manage chat rooms.

    Failures are ApiFailure subclasses (Unauthorized, NotFound, Conflict,
    Transient, Malformed, Unknown). Methods log them with context and
    re-raise; nothing is swallowed.
    """

    def __init__(
        self,
        pod: PodGateway,
        executor: ApiExecutor,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize the facade.

        See PodApiFactory for constructing a fully wired instance.

        Args:
            pod: Endpoint-level pod access
            executor: Execution strategy (token binding and recovery)
            logger: Logger for failure context; defaults to the module logger
        """
        self._pod = pod
        self._executor = executor
        self._log = logger or get_logger(__name__)

    def create_stream(self, user_ids: Iterable[int]) -> str:
        """
        Create a new single or multi party instant message conversation.

        The caller is implicitly a member. Duplicate user IDs are ignored.
        If an IM conversation with the same set of participants already
        exists, the ID of that stream is returned instead, which is also
        what makes the call safe to retry.

        Args:
            user_ids: User IDs of the other participants (at least one)

        Returns:
            The ID of the created (or existing) stream
        """
        try:
            user_id_list = list(dict.fromkeys(user_ids))
            if not user_id_list:
                raise Malformed("At least one user ID is required", operation="create_stream")
            stream = self._executor.execute_call(
                RemoteCall(self._pod.create_im, (user_id_list,), name="create_stream")
            )
            return stream_id_from_wire(stream)
        except Exception:
            self._log.error("An error has occurred while trying to create a stream.", exc_info=True)
            raise

    def get_stream_info(self, stream_id: str) -> Stream:
        """
        Get information about a particular stream.

        Args:
            stream_id: Stream ID

        Returns:
            The stream's attributes
        """
        try:
            attributes = self._executor.execute_call(
                RemoteCall(self._pod.get_stream_info, (stream_id,), name="get_stream_info")
            )
            return stream_from_wire(attributes)
        except Exception:
            self._log.error(
                "An error has occurred while trying to get information about stream %s.",
                stream_id,
                exc_info=True,
            )
            raise

    def create_room(self, room: Room) -> Room:
        """
        Create a new chat room.

        Attributes left as None are decided by the pod; a room with no
        attributes beyond its name is created as a private room.

        Args:
            room: Room attributes (``id`` is ignored)

        Returns:
            The created room, including its ID
        """
        try:
            attributes = room_to_wire(room)
            detail = self._executor.execute_call(
                RemoteCall(self._pod.create_room, (attributes,), name="create_room")
            )
            return room_from_wire(detail)
        except Exception:
            self._log.error("An error has occurred while trying to create a room.", exc_info=True)
            raise

    def get_room_info(self, room_id: str) -> Room:
        """
        Get information about a chat room.

        Args:
            room_id: The room ID

        Returns:
            The room, including its active flag
        """
        try:
            detail = self._executor.execute_call(
                RemoteCall(self._pod.get_room_info, (room_id,), name="get_room_info")
            )
            return room_from_wire(detail)
        except Exception:
            self._log.error(
                "An error has occurred while trying to get information about the chatroom %s.",
                room_id,
                exc_info=True,
            )
            raise

    def set_room_active(self, room_id: str, active: bool) -> RoomDetail:
        """
        Deactivate or reactivate a chat room. New rooms are active.

        Args:
            room_id: Room ID
            active: True to activate, False to deactivate

        Returns:
            The room detail after the change
        """
        try:
            detail = self._executor.execute_call(
                RemoteCall(self._pod.set_room_active, (room_id, active), name="set_room_active")
            )
            return room_detail_from_wire(detail)
        except Exception:
            self._log.error(
                "An error has occurred while trying to deactivate or reactivate the chatroom %s.",
                room_id,
                exc_info=True,
            )
            raise

    def update_room(self, room: Room) -> Room:
        """
        Update the attributes of an existing chat room.

        Args:
            room: The room (with ``id`` set) and the attributes to apply

        Returns:
            The updated room
        """
        try:
            if not room.id:
                raise Malformed("Room ID is required to update a room", operation="update_room")
            attributes = room_to_wire(room)
            detail = self._executor.execute_call(
                RemoteCall(self._pod.update_room, (room.id, attributes), name="update_room")
            )
            return room_from_wire(detail)
        except Exception:
            self._log.error(
                "An error has occurred while trying to update the chatroom %s.",
                room.id,
                exc_info=True,
            )
            raise

    def search_rooms(
        self,
        criteria: RoomSearchCriteria,
        skip: int | None = None,
        limit: int | None = None,
    ) -> RoomSearchResults:
        """
        Search for rooms matching the given criteria.

        Args:
            criteria: Search criteria
            skip: Number of results to skip
            limit: Maximum number of results

        Returns:
            The search results page
        """
        try:
            if skip is not None and skip < 0:
                raise Malformed("skip cannot be negative", operation="search_rooms")
            if limit is not None and limit <= 0:
                raise Malformed("limit must be positive", operation="search_rooms")
            wire_criteria = room_search_criteria_to_wire(criteria)
            results = self._executor.execute_call(
                RemoteCall(
                    self._pod.search_rooms, (wire_criteria, skip, limit), name="search_rooms"
                )
            )
            return room_search_results_from_wire(results)
        except Exception:
            self._log.error(
                "An error has occurred while searching rooms for %r.", criteria.query, exc_info=True
            )
            raise
