"""pytest fixtures for Symphony client testing."""

import pytest

from ..application.services import CredentialStore, RetryingApiExecutor
from ..infrastructure.config import ClientConfig
from ..streams_api import StreamsApi
from .fakes import FakeAuthenticator, InMemoryPod


@pytest.fixture
def fake_authenticator() -> FakeAuthenticator:
    """Provide a standalone fake authenticator."""
    return FakeAuthenticator()


@pytest.fixture
def credential_store(fake_authenticator: FakeAuthenticator) -> CredentialStore:
    """Provide an empty credential store backed by the fake authenticator."""
    return CredentialStore(fake_authenticator)


@pytest.fixture
def in_memory_pod() -> InMemoryPod:
    """Provide an in-memory pod with user 1 as the caller."""
    return InMemoryPod(self_user_id=1)


@pytest.fixture
def pod_authenticator(in_memory_pod: InMemoryPod) -> FakeAuthenticator:
    """Provide an authenticator whose tokens the in-memory pod accepts."""
    return in_memory_pod.authenticator()


@pytest.fixture
def streams_api(in_memory_pod: InMemoryPod, pod_authenticator: FakeAuthenticator) -> StreamsApi:
    """Provide a StreamsApi wired to the in-memory pod."""
    store = CredentialStore(pod_authenticator)
    executor = RetryingApiExecutor(store, sleep=lambda _: None)
    return StreamsApi(in_memory_pod, executor)


@pytest.fixture
def client_config() -> ClientConfig:
    """Provide a complete configuration pointing at placeholder hosts."""
    return ClientConfig(
        pod_url="https://pod.example.com",
        session_auth_url="https://auth.example.com",
        key_auth_url="https://km.example.com",
        cert_path="/tmp/bot.pem",
    )
