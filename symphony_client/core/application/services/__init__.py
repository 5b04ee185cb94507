"""
Application Services - credential management and execution strategies.
"""

from .api_executor import PlainApiExecutor, RetryingApiExecutor, TransientRetryPolicy
from .credential_store import CredentialStore

__all__ = [
    "CredentialStore",
    "PlainApiExecutor",
    "RetryingApiExecutor",
    "TransientRetryPolicy",
]
