"""
Testing Infrastructure - Test Support Utilities.

This module provides utilities for testing the Symphony client:
    - Fakes: Fake implementations of ports (authenticator, pod)
    - Builders: Wire model and domain object builders
    - Fixtures: pytest fixtures for common test setup
"""

from .builders import RoomDetailBuilder, a_room
from .fakes import FakeAuthenticator, InMemoryPod, ScriptedOperation

__all__ = [
    # Fakes
    "FakeAuthenticator",
    "InMemoryPod",
    "ScriptedOperation",
    # Builders
    "RoomDetailBuilder",
    "a_room",
]
