"""
Application Layer - Execution strategy and credential lifecycle.

This layer contains:
    - Ports: Authenticator, PodGateway, ApiExecutor, RemoteCall
    - Services: CredentialStore, RetryingApiExecutor, PlainApiExecutor
"""

from .ports import ApiExecutor, Authenticator, PodGateway, RemoteCall
from .services import (
    CredentialStore,
    PlainApiExecutor,
    RetryingApiExecutor,
    TransientRetryPolicy,
)

__all__ = [
    "ApiExecutor",
    "Authenticator",
    "PodGateway",
    "RemoteCall",
    "CredentialStore",
    "PlainApiExecutor",
    "RetryingApiExecutor",
    "TransientRetryPolicy",
]
