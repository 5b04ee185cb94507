"""Authenticator port - the out-of-band credential exchange."""

from typing import Protocol, runtime_checkable

from ...domain.value_objects import CredentialPair


@runtime_checkable
class Authenticator(Protocol):
    """
    Obtains a fresh session/signing credential pair.

    Implementations perform whatever exchange the platform requires
    (certificate authentication, RSA-signed JWT, ...) using the client's
    long-lived identity material.

    Implementations:
        - CertificateAuthenticator: mutual-TLS session and key manager auth
        - FakeAuthenticator: For testing
    """

    def authenticate(self) -> CredentialPair:
        """
        Perform the exchange.

        Returns:
            A new credential pair (its generation is assigned by the store)

        Raises:
            Exception: Any failure; the credential store reports it as
                RefreshFailed
        """
        ...
