"""HTTP adapters for the pod and its authentication services."""

from .authenticator import CertificateAuthenticator
from .transport import SESSION_TOKEN_HEADER, PodHttpTransport

__all__ = [
    "CertificateAuthenticator",
    "PodHttpTransport",
    "SESSION_TOKEN_HEADER",
]
