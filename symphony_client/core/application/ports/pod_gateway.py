"""PodGateway port - the pod endpoints the streams facade calls."""

from typing import Protocol, runtime_checkable

from ...schemas import pod


@runtime_checkable
class PodGateway(Protocol):
    """
    Endpoint-level access to the pod.

    Each method takes caller arguments followed by the session token and
    returns a wire model. Methods raise transport exceptions; they never
    retry or refresh credentials themselves.

    Implementations:
        - PodHttpTransport: requests over HTTPS
        - InMemoryPod: For testing
    """

    def create_im(self, user_ids: list[int], session_token: str) -> pod.StreamId: ...

    def get_stream_info(self, stream_id: str, session_token: str) -> pod.StreamAttributes: ...

    def create_room(self, attributes: pod.V2RoomAttributes, session_token: str) -> pod.V2RoomDetail: ...

    def get_room_info(self, room_id: str, session_token: str) -> pod.V2RoomDetail: ...

    def set_room_active(self, room_id: str, active: bool, session_token: str) -> pod.V2RoomDetail: ...

    def update_room(
        self, room_id: str, attributes: pod.V2RoomAttributes, session_token: str
    ) -> pod.V2RoomDetail: ...

    def search_rooms(
        self,
        criteria: pod.RoomSearchCriteriaWire,
        skip: int | None,
        limit: int | None,
        session_token: str,
    ) -> pod.RoomSearchResultsWire: ...
