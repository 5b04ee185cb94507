"""
Value Objects - Immutable objects without identity.

Value objects are defined by their attributes, not by an identity.
Two value objects are equal if all their attributes are equal.
"""

from .credentials import CredentialPair
from .room_search_criteria import RoomSearchCriteria

__all__ = [
    "CredentialPair",
    "RoomSearchCriteria",
]
