"""Wiring of configuration, credentials, executor and facades."""

import logging

import requests

from .adapters.outbound.http import CertificateAuthenticator, PodHttpTransport
from .application.ports import ApiExecutor, Authenticator, PodGateway
from .application.services import CredentialStore, RetryingApiExecutor, TransientRetryPolicy
from .infrastructure.config import ClientConfig
from .infrastructure.logging import get_logger, setup_logging
from .streams_api import StreamsApi


class PodApiFactory:
    """
    Builds pod API facades that share one credential store.

    All facades created by one factory use the same session: a refresh
    triggered by any of them is seen by all of them.

    Example:
        factory = PodApiFactory.from_env()
        streams = factory.create_streams_api()
        streams.get_room_info("room-7")

    Example - custom collaborators (tests, alternative auth):
        factory = PodApiFactory(
            config,
            authenticator=my_authenticator,
            pod=InMemoryPod(),
        )
    """

    def __init__(
        self,
        config: ClientConfig,
        authenticator: Authenticator | None = None,
        pod: PodGateway | None = None,
        executor: ApiExecutor | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config
        self._logger = logger or get_logger(__name__)
        self._http_session: requests.Session | None = None

        if authenticator is None or pod is None:
            self._http_session = requests.Session()

        self.authenticator = authenticator or self._build_authenticator()
        self.credentials = CredentialStore(self.authenticator, logger=self._logger)
        self.pod = pod or self._build_transport()
        self.executor = executor or RetryingApiExecutor(
            self.credentials,
            transient_policy=self.transient_policy(),
            logger=self._logger,
        )

    @classmethod
    def from_env(cls, prefix: str = "SYMPHONY_", configure_logging: bool = False) -> "PodApiFactory":
        """
        Build a factory from environment variables.

        Args:
            prefix: Environment variable prefix
            configure_logging: Also install a console/JSON handler per config
        """
        config = ClientConfig.from_env(prefix=prefix)
        if configure_logging:
            setup_logging(level=config.log_level, json_output=config.log_format == "json")
        return cls(config)

    def transient_policy(self) -> TransientRetryPolicy:
        return TransientRetryPolicy(
            max_retries=self.config.transient_max_retries,
            initial_backoff_seconds=self.config.transient_initial_backoff_seconds,
            multiplier=self.config.transient_backoff_multiplier,
            max_backoff_seconds=self.config.transient_max_backoff_seconds,
        )

    def create_streams_api(self) -> StreamsApi:
        return StreamsApi(self.pod, self.executor, logger=self._logger)

    def close(self) -> None:
        """Release pooled HTTP connections."""
        if self._http_session is not None:
            self._http_session.close()

    def _build_authenticator(self) -> CertificateAuthenticator:
        config = self.config
        if not (config.session_auth_url and config.key_auth_url and config.cert_path):
            raise ValueError(
                "session_auth_url, key_auth_url and cert_path are required "
                "unless an authenticator is supplied"
            )
        return CertificateAuthenticator(
            session_auth_url=config.session_auth_url,
            key_auth_url=config.key_auth_url,
            cert_path=config.cert_path,
            key_path=config.key_path,
            timeout_seconds=config.timeout_seconds,
            verify_tls=config.verify_tls,
            session=self._http_session,
        )

    def _build_transport(self) -> PodHttpTransport:
        return PodHttpTransport(
            self.config.pod_url,
            session=self._http_session,
            timeout_seconds=self.config.timeout_seconds,
            verify_tls=self.config.verify_tls,
        )
