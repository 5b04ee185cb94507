"""
Symphony Client Core - authenticated access to the pod REST API.

Quick Start:
    from symphony_client.core import PodApiFactory, Room

    factory = PodApiFactory.from_env()          # SYMPHONY_* variables / .env
    streams = factory.create_streams_api()

    stream_id = streams.create_stream([101, 102])
    room = streams.create_room(Room(name="Ops", keywords=(("team", "ops"),)))
    detail = streams.set_room_active(room.id, False)

Every call is bound to the current session token. When the pod rejects
that token the credentials are refreshed once (a single exchange shared by
all concurrent callers) and the call is retried once. Other failures are
raised as classified ApiFailure subclasses.

For advanced usage, see the domain, application, and adapters submodules.
"""

from .application.ports import ApiExecutor, Authenticator, PodGateway, RemoteCall
from .application.services import (
    CredentialStore,
    PlainApiExecutor,
    RetryingApiExecutor,
    TransientRetryPolicy,
)
from .domain import (
    ApiFailure,
    Conflict,
    CredentialPair,
    FacetedMatchCount,
    FailureKind,
    Malformed,
    NotFound,
    RefreshFailed,
    Room,
    RoomDetail,
    RoomSearchCriteria,
    RoomSearchResults,
    RoomSystemInfo,
    Stream,
    StreamType,
    Transient,
    Unauthorized,
    Unknown,
    classify,
)
from .factory import PodApiFactory
from .infrastructure import ClientConfig, setup_logging
from .streams_api import StreamsApi

__all__ = [
    # Facades
    "StreamsApi",
    "PodApiFactory",
    # Execution
    "ApiExecutor",
    "RetryingApiExecutor",
    "PlainApiExecutor",
    "TransientRetryPolicy",
    "RemoteCall",
    # Credentials
    "Authenticator",
    "CredentialStore",
    "CredentialPair",
    # Ports
    "PodGateway",
    # Entities
    "Stream",
    "StreamType",
    "Room",
    "RoomDetail",
    "RoomSystemInfo",
    "RoomSearchCriteria",
    "RoomSearchResults",
    "FacetedMatchCount",
    # Failures
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
    # Infrastructure
    "ClientConfig",
    "setup_logging",
]
