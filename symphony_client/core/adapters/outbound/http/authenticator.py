"""Certificate-based session and key manager authentication."""

import logging
from urllib.parse import urljoin

import requests

from ....domain.value_objects import CredentialPair
from ....schemas.pod import AuthToken

logger = logging.getLogger(__name__)

SESSION_AUTH_PATH = "sessionauth/v1/authenticate"
KEY_AUTH_PATH = "keyauth/v1/authenticate"


class CertificateAuthenticator:
    """
    Obtains a session token and a key manager token via mutual TLS.

    Both tokens are requested in one ``authenticate()`` call so they always
    come from the same exchange. Failures propagate as requests or pydantic
    exceptions; the credential store reports them as RefreshFailed.
    """

    def __init__(
        self,
        session_auth_url: str,
        key_auth_url: str,
        cert_path: str,
        key_path: str | None = None,
        timeout_seconds: float = 30.0,
        verify_tls: bool = True,
        session: requests.Session | None = None,
    ) -> None:
        """
        Initialize the authenticator.

        Args:
            session_auth_url: Base URL of the session auth service
            key_auth_url: Base URL of the key manager auth service
            cert_path: Client certificate (PEM)
            key_path: Private key for the certificate, if not bundled in cert_path
            timeout_seconds: Per-request timeout
            verify_tls: Whether to verify server certificates
            session: Optional shared requests session
        """
        if not session_auth_url or not key_auth_url:
            raise ValueError("Both session_auth_url and key_auth_url are required")
        if not cert_path:
            raise ValueError("cert_path is required for certificate authentication")
        self.session_auth_url = session_auth_url.rstrip("/") + "/"
        self.key_auth_url = key_auth_url.rstrip("/") + "/"
        self.timeout_seconds = timeout_seconds
        self._cert: str | tuple[str, str] = (cert_path, key_path) if key_path else cert_path
        self._verify = verify_tls
        self._session = session or requests.Session()

    def _fetch_token(self, base_url: str, path: str) -> str:
        url = urljoin(base_url, path)
        logger.debug(f"Authenticating against {url}")
        response = self._session.post(
            url,
            cert=self._cert,
            verify=self._verify,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return AuthToken.model_validate(response.json()).token

    def authenticate(self) -> CredentialPair:
        session_token = self._fetch_token(self.session_auth_url, SESSION_AUTH_PATH)
        key_manager_token = self._fetch_token(self.key_auth_url, KEY_AUTH_PATH)
        logger.info("Obtained session and key manager tokens")
        return CredentialPair(session_token=session_token, key_manager_token=key_manager_token)
