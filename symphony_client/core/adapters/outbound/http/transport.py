"""requests-based transport for the pod REST API."""

import logging
from typing import Any, TypeVar
from urllib.parse import quote, urljoin

import requests
from pydantic import BaseModel

from ....schemas import pod

M = TypeVar("M", bound=BaseModel)

logger = logging.getLogger(__name__)

SESSION_TOKEN_HEADER = "sessionToken"


class PodHttpTransport:
    """
    HTTP client for the pod endpoints used by the streams facade.

    One method per endpoint. Each takes the caller arguments followed by the
    session token, sends the request, and parses the JSON response into a
    wire model. It does no recovery of its own: HTTP errors surface as
    ``requests.HTTPError``, network errors as ``requests.ConnectionError`` /
    ``requests.Timeout``, and unexpected response shapes as
    ``pydantic.ValidationError``. The executor classifies them.
    """

    def __init__(
        self,
        pod_url: str,
        session: requests.Session | None = None,
        timeout_seconds: float = 30.0,
        verify_tls: bool = True,
    ) -> None:
        """
        Initialize the transport.

        Args:
            pod_url: Base URL of the pod, e.g. "https://acme.symphony.com"
            session: Optional shared requests session
            timeout_seconds: Per-request timeout
            verify_tls: Whether to verify the pod's TLS certificate
        """
        if not pod_url:
            raise ValueError("pod_url is required")
        self.pod_url = pod_url.rstrip("/") + "/"
        self.timeout_seconds = timeout_seconds
        self._session = session or requests.Session()
        self._session.verify = verify_tls

    def _get_headers(self, session_token: str) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            SESSION_TOKEN_HEADER: session_token,
        }

    def _build_url(self, endpoint: str) -> str:
        return urljoin(self.pod_url, endpoint.lstrip("/"))

    def _request(
        self,
        method: str,
        endpoint: str,
        session_token: str,
        response_model: type[M],
        *,
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> M:
        url = self._build_url(endpoint)
        logger.debug(f"Making {method} request to {url}")
        response = self._session.request(
            method,
            url,
            headers=self._get_headers(session_token),
            params={k: v for k, v in (params or {}).items() if v is not None} or None,
            json=body,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response_model.model_validate(response.json())

    # ------------------------------------------------------------------
    # Streams / IM
    # ------------------------------------------------------------------

    def create_im(self, user_ids: list[int], session_token: str) -> pod.StreamId:
        """POST /pod/v1/im/create - returns the existing stream for a known member set."""
        return self._request("POST", "pod/v1/im/create", session_token, pod.StreamId, body=list(user_ids))

    def get_stream_info(self, stream_id: str, session_token: str) -> pod.StreamAttributes:
        """GET /pod/v1/streams/{sid}/info"""
        endpoint = f"pod/v1/streams/{quote(stream_id, safe='')}/info"
        return self._request("GET", endpoint, session_token, pod.StreamAttributes)

    # ------------------------------------------------------------------
    # Rooms
    # ------------------------------------------------------------------

    def create_room(self, attributes: pod.V2RoomAttributes, session_token: str) -> pod.V2RoomDetail:
        """POST /pod/v2/room/create"""
        return self._request(
            "POST", "pod/v2/room/create", session_token, pod.V2RoomDetail, body=attributes.to_wire()
        )

    def get_room_info(self, room_id: str, session_token: str) -> pod.V2RoomDetail:
        """GET /pod/v2/room/{id}/info"""
        endpoint = f"pod/v2/room/{quote(room_id, safe='')}/info"
        return self._request("GET", endpoint, session_token, pod.V2RoomDetail)

    def set_room_active(self, room_id: str, active: bool, session_token: str) -> pod.V2RoomDetail:
        """POST /pod/v1/room/{id}/setActive?active=..."""
        endpoint = f"pod/v1/room/{quote(room_id, safe='')}/setActive"
        return self._request(
            "POST",
            endpoint,
            session_token,
            pod.V2RoomDetail,
            params={"active": "true" if active else "false"},
        )

    def update_room(
        self, room_id: str, attributes: pod.V2RoomAttributes, session_token: str
    ) -> pod.V2RoomDetail:
        """POST /pod/v2/room/{id}/update"""
        endpoint = f"pod/v2/room/{quote(room_id, safe='')}/update"
        return self._request(
            "POST", endpoint, session_token, pod.V2RoomDetail, body=attributes.to_wire()
        )

    def search_rooms(
        self,
        criteria: pod.RoomSearchCriteriaWire,
        skip: int | None,
        limit: int | None,
        session_token: str,
    ) -> pod.RoomSearchResultsWire:
        """POST /pod/v2/room/search?skip=&limit="""
        return self._request(
            "POST",
            "pod/v2/room/search",
            session_token,
            pod.RoomSearchResultsWire,
            params={"skip": skip, "limit": limit},
            body=criteria.to_wire(),
        )

    def close(self) -> None:
        self._session.close()
