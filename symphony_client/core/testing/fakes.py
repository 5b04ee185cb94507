"""Fake implementations of ports for testing."""

import itertools
import threading
from dataclasses import dataclass, field
from typing import Any, Callable

from ..domain.exceptions import ApiFailure, failure_for_status
from ..domain.value_objects import CredentialPair
from ..schemas import pod


class FakeAuthenticator:
    """
    Fake implementation of Authenticator for testing.

    Issues ``session-N`` / ``km-N`` token pairs and counts exchanges.
    Failures can be queued, and an exchange can be held open with a gate
    to exercise concurrent refreshes.

    Example:
        fake = FakeAuthenticator()
        pair = fake.authenticate()
        assert pair.session_token == "session-1"
        assert fake.authenticate_count == 1
    """

    def __init__(self, on_issue: Callable[[CredentialPair], None] | None = None) -> None:
        self._counter = itertools.count(1)
        self._failures: list[BaseException] = []
        self._on_issue = on_issue
        self._lock = threading.Lock()
        self._gate: threading.Event | None = None
        self.entered = threading.Event()
        self.authenticate_count = 0
        self.issued: list[CredentialPair] = []

    def will_fail_with(self, error: BaseException) -> "FakeAuthenticator":
        """Make the next exchange raise ``error``."""
        self._failures.append(error)
        return self

    def hold_until(self, gate: threading.Event) -> "FakeAuthenticator":
        """Block every exchange until ``gate`` is set; ``entered`` fires on entry."""
        self._gate = gate
        return self

    def authenticate(self) -> CredentialPair:
        with self._lock:
            self.authenticate_count += 1
        self.entered.set()
        if self._gate is not None:
            self._gate.wait(timeout=5)
        with self._lock:
            if self._failures:
                raise self._failures.pop(0)
            n = next(self._counter)
            pair = CredentialPair(session_token=f"session-{n}", key_manager_token=f"km-{n}")
            self.issued.append(pair)
        if self._on_issue is not None:
            self._on_issue(pair)
        return pair


class ScriptedOperation:
    """
    A remote operation that plays back scripted outcomes.

    Each outcome is either a value to return or an exception to raise.
    The last outcome repeats once the script runs out.

    Example:
        op = ScriptedOperation(Unauthorized("expired"), "ok", name="get_thing")
        executor.execute(op, "arg")   # -> "ok" after one refresh
        assert op.tokens == ["session-1", "session-2"]
    """

    def __init__(self, *outcomes: Any, name: str = "scripted_operation") -> None:
        if not outcomes:
            raise ValueError("ScriptedOperation needs at least one outcome")
        self._outcomes = list(outcomes)
        self._lock = threading.Lock()
        self.__name__ = name
        self.__qualname__ = name
        self.calls: list[tuple[Any, ...]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def tokens(self) -> list[str]:
        """Session tokens received, in call order."""
        return [call[-1] for call in self.calls]

    def __call__(self, *args: Any) -> Any:
        with self._lock:
            self.calls.append(args)
            outcome = self._outcomes.pop(0) if len(self._outcomes) > 1 else self._outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@dataclass
class _RoomRecord:
    attributes: pod.V2RoomAttributes
    system_info: pod.RoomSystemInfo

    def detail(self) -> pod.V2RoomDetail:
        return pod.V2RoomDetail(
            room_attributes=self.attributes.model_copy(deep=True),
            room_system_info=self.system_info.model_copy(),
        )


@dataclass
class _RecordedCall:
    method: str
    args: tuple
    session_token: str
    failure: ApiFailure | None = field(default=None)


class InMemoryPod:
    """
    In-memory implementation of PodGateway for testing.

    Behaves like the pod for the endpoints the streams facade uses:
    session tokens are checked on every call (401 for unknown or revoked
    tokens), IM creation returns the existing stream for an identical
    member set, rooms keep their state across calls, and unknown IDs
    produce 404. Failures are raised as classified ApiFailures carrying
    the HTTP status.

    Thread-safe: Uses a lock for all state.

    Example:
        pod = InMemoryPod(self_user_id=1)
        auth = pod.authenticator()
        streams = PodApiFactory(config, authenticator=auth, pod=pod).create_streams_api()
    """

    def __init__(self, self_user_id: int = 1, now_millis: int = 1_700_000_000_000) -> None:
        self.self_user_id = self_user_id
        self._now_millis = now_millis
        self._lock = threading.RLock()
        self._valid_tokens: set[str] = set()
        self._ims: dict[frozenset[int], str] = {}
        self._streams: dict[str, pod.StreamAttributes] = {}
        self._rooms: dict[str, _RoomRecord] = {}
        self._ids = itertools.count(1)
        self._injected: dict[str, list[ApiFailure]] = {}
        self.calls: list[_RecordedCall] = []

    # ------------------------------------------------------------------
    # Session management
    # ------------------------------------------------------------------

    def authenticator(self) -> FakeAuthenticator:
        """A FakeAuthenticator whose tokens this pod accepts."""
        return FakeAuthenticator(on_issue=self.accept)

    def accept(self, pair: CredentialPair) -> None:
        with self._lock:
            self._valid_tokens.add(pair.session_token)

    def revoke_all_sessions(self) -> None:
        """Invalidate every issued session token."""
        with self._lock:
            self._valid_tokens.clear()

    def fail_next(self, method: str, failure: ApiFailure) -> "InMemoryPod":
        """Make the next call to ``method`` raise ``failure`` (after the token check)."""
        with self._lock:
            self._injected.setdefault(method, []).append(failure)
        return self

    def calls_to(self, method: str) -> list[_RecordedCall]:
        return [call for call in self.calls if call.method == method]

    def _enter(self, method: str, args: tuple, session_token: str) -> None:
        record = _RecordedCall(method, args, session_token)
        self.calls.append(record)
        if session_token not in self._valid_tokens:
            record.failure = failure_for_status(401, "Invalid session", operation=method)
            raise record.failure
        queued = self._injected.get(method)
        if queued:
            record.failure = queued.pop(0)
            raise record.failure

    def _next_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._ids)}"

    def _room(self, room_id: str, method: str) -> _RoomRecord:
        record = self._rooms.get(room_id)
        if record is None:
            raise failure_for_status(404, f"Room {room_id} not found", operation=method)
        return record

    # ------------------------------------------------------------------
    # Streams / IM
    # ------------------------------------------------------------------

    def create_im(self, user_ids: list[int], session_token: str) -> pod.StreamId:
        with self._lock:
            self._enter("create_im", (list(user_ids),), session_token)
            if not user_ids:
                raise failure_for_status(400, "At least one user ID is required", operation="create_im")
            members = frozenset({self.self_user_id, *user_ids})
            stream_id = self._ims.get(members)
            if stream_id is None:
                stream_id = self._next_id("im")
                self._ims[members] = stream_id
                self._streams[stream_id] = pod.StreamAttributes(
                    id=stream_id,
                    cross_pod=False,
                    active=True,
                    stream_type=pod.StreamTypeWire(type="IM" if len(members) == 2 else "MIM"),
                    stream_attributes=pod.ConversationSpecificStreamAttributes(
                        members=sorted(members)
                    ),
                )
            return pod.StreamId(id=stream_id)

    def get_stream_info(self, stream_id: str, session_token: str) -> pod.StreamAttributes:
        with self._lock:
            self._enter("get_stream_info", (stream_id,), session_token)
            attributes = self._streams.get(stream_id)
            if attributes is None:
                raise failure_for_status(404, f"Stream {stream_id} not found", operation="get_stream_info")
            return attributes.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Rooms
    # ------------------------------------------------------------------

    def create_room(self, attributes: pod.V2RoomAttributes, session_token: str) -> pod.V2RoomDetail:
        with self._lock:
            self._enter("create_room", (attributes,), session_token)
            if not attributes.name:
                raise failure_for_status(400, "Room name is required", operation="create_room")
            if any(r.attributes.name == attributes.name for r in self._rooms.values()):
                raise failure_for_status(
                    409, f"Room {attributes.name!r} already exists", operation="create_room"
                )
            room_id = self._next_id("room")
            stored = attributes.model_copy(deep=True)
            if stored.public is None:
                stored.public = False
            record = _RoomRecord(
                attributes=stored,
                system_info=pod.RoomSystemInfo(
                    id=room_id,
                    creation_date=self._now_millis,
                    created_by_user_id=self.self_user_id,
                    active=True,
                ),
            )
            self._rooms[room_id] = record
            self._streams[room_id] = pod.StreamAttributes(
                id=room_id,
                cross_pod=False,
                active=True,
                stream_type=pod.StreamTypeWire(type="ROOM"),
                room_attributes=pod.RoomSpecificStreamAttributes(name=stored.name),
            )
            return record.detail()

    def get_room_info(self, room_id: str, session_token: str) -> pod.V2RoomDetail:
        with self._lock:
            self._enter("get_room_info", (room_id,), session_token)
            return self._room(room_id, "get_room_info").detail()

    def set_room_active(self, room_id: str, active: bool, session_token: str) -> pod.V2RoomDetail:
        with self._lock:
            self._enter("set_room_active", (room_id, active), session_token)
            record = self._room(room_id, "set_room_active")
            record.system_info.active = active
            self._streams[room_id].active = active
            return record.detail()

    def update_room(
        self, room_id: str, attributes: pod.V2RoomAttributes, session_token: str
    ) -> pod.V2RoomDetail:
        with self._lock:
            self._enter("update_room", (room_id, attributes), session_token)
            record = self._room(room_id, "update_room")
            changes = attributes.model_dump(exclude_none=True)
            record.attributes = record.attributes.model_copy(update=changes, deep=True)
            if attributes.keywords is not None:
                record.attributes.keywords = [tag.model_copy() for tag in attributes.keywords]
            if attributes.name:
                self._streams[room_id].room_attributes = pod.RoomSpecificStreamAttributes(
                    name=attributes.name
                )
            return record.detail()

    def search_rooms(
        self,
        criteria: pod.RoomSearchCriteriaWire,
        skip: int | None,
        limit: int | None,
        session_token: str,
    ) -> pod.RoomSearchResultsWire:
        with self._lock:
            self._enter("search_rooms", (criteria, skip, limit), session_token)
            needle = criteria.query.lower()
            matches = []
            for record in self._rooms.values():
                attrs = record.attributes
                haystack = [attrs.name or "", attrs.description or ""]
                haystack.extend(tag.value for tag in attrs.keywords or [])
                if not any(needle in text.lower() for text in haystack):
                    continue
                if criteria.active is not None and record.system_info.active != criteria.active:
                    continue
                if criteria.labels:
                    keys = {tag.key for tag in attrs.keywords or []}
                    if not set(criteria.labels) <= keys:
                        continue
                matches.append(record.detail())
            skip = skip or 0
            limit = limit or 50
            return pod.RoomSearchResultsWire(
                count=len(matches),
                skip=skip,
                limit=limit,
                query=criteria.model_copy(),
                rooms=matches[skip : skip + limit],
            )
