"""Shared pytest fixtures."""

from symphony_client.core.testing.fixtures import (  # noqa: F401
    client_config,
    credential_store,
    fake_authenticator,
    in_memory_pod,
    pod_authenticator,
    streams_api,
)
