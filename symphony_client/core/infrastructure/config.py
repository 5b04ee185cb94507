"""
Configuration management for the Symphony client.

Settings come from keyword arguments or from environment variables
(prefixed ``SYMPHONY_`` by default). A ``.env`` file is honoured when
present, without overriding variables that are already set.

Example .env file:
    SYMPHONY_POD_URL=https://acme.symphony.com
    SYMPHONY_SESSION_AUTH_URL=https://acme-api.symphony.com
    SYMPHONY_KEY_AUTH_URL=https://acme-km.symphony.com
    SYMPHONY_CERT_PATH=/etc/symphony/bot.pem
    SYMPHONY_TRANSIENT_MAX_RETRIES=2
"""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "SYMPHONY_"


# ============================================================================
# Environment Variable Names
# ============================================================================


class EnvVars:
    """Environment variable names (without prefix)."""

    POD_URL = "POD_URL"
    SESSION_AUTH_URL = "SESSION_AUTH_URL"
    KEY_AUTH_URL = "KEY_AUTH_URL"
    CERT_PATH = "CERT_PATH"
    KEY_PATH = "KEY_PATH"
    TIMEOUT_SECONDS = "TIMEOUT_SECONDS"
    VERIFY_TLS = "VERIFY_TLS"

    TRANSIENT_MAX_RETRIES = "TRANSIENT_MAX_RETRIES"
    TRANSIENT_INITIAL_BACKOFF = "TRANSIENT_INITIAL_BACKOFF_SECONDS"
    TRANSIENT_BACKOFF_MULTIPLIER = "TRANSIENT_BACKOFF_MULTIPLIER"
    TRANSIENT_MAX_BACKOFF = "TRANSIENT_MAX_BACKOFF_SECONDS"

    LOG_LEVEL = "LOG_LEVEL"
    LOG_FORMAT = "LOG_FORMAT"


def get_env(key: str, default: Any = None, cast: type = str) -> Any:
    """
    Get environment variable with type casting.

    Args:
        key: Environment variable name
        default: Default value if not set
        cast: Type to cast to (str, int, float, bool)

    Returns:
        Value from environment or default
    """
    value = os.getenv(key)

    if value is None:
        return default

    if cast is bool:
        return value.lower() in ("true", "1", "yes", "on")
    elif cast in (int, float):
        try:
            return cast(value)
        except (ValueError, TypeError):
            logger.warning(
                f"Invalid {cast.__name__} value for {key}: {value}, using default: {default}"
            )
            return default

    return value


def load_dotenv_if_present(filename: str = ".env") -> str | None:
    """
    Load variables from a .env file found from the working directory upwards.

    Existing environment variables win over the file.

    Returns:
        Path of the loaded file, or None if none was found
    """
    env_path = find_dotenv(filename, usecwd=True)
    if not env_path:
        return None
    load_dotenv(env_path, override=False)
    logger.debug(f"Loaded environment from {env_path}")
    return env_path


@dataclass
class ClientConfig:
    """
    Configuration for the Symphony client.

    Attributes:
        pod_url: Base URL of the pod REST API
        session_auth_url: Base URL of the session auth service
        key_auth_url: Base URL of the key manager auth service
        cert_path: Client certificate for authentication
        key_path: Private key for the certificate (if separate)
        timeout_seconds: Per-request timeout handed to the transport
        verify_tls: Verify server certificates
        transient_max_retries: Retries on Transient failures (0 disables)
        transient_initial_backoff_seconds: First backoff delay
        transient_backoff_multiplier: Backoff growth factor
        transient_max_backoff_seconds: Cap on a single backoff delay
        log_level: Logging level
        log_format: "console" or "json"

    Example:
        # Create with defaults
        config = ClientConfig(pod_url="https://acme.symphony.com")

        # Load from environment
        config = ClientConfig.from_env()
    """

    # Endpoints
    pod_url: str = ""
    session_auth_url: str = ""
    key_auth_url: str = ""

    # Identity material
    cert_path: str | None = None
    key_path: str | None = None

    # Transport
    timeout_seconds: float = 30.0
    verify_tls: bool = True

    # Transient retry policy (disabled by default)
    transient_max_retries: int = 0
    transient_initial_backoff_seconds: float = 0.5
    transient_backoff_multiplier: float = 2.0
    transient_max_backoff_seconds: float = 10.0

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_PREFIX, load_dotenv_file: bool = True) -> "ClientConfig":
        """
        Load configuration from environment variables.

        Args:
            prefix: Prefix for environment variables
            load_dotenv_file: Look for a .env file first

        Returns:
            ClientConfig instance with values from environment
        """
        if load_dotenv_file:
            load_dotenv_if_present()

        def env(key: str, default: Any = None, cast: type = str) -> Any:
            return get_env(f"{prefix}{key}", default, cast)

        return cls(
            pod_url=env(EnvVars.POD_URL, cls.pod_url),
            session_auth_url=env(EnvVars.SESSION_AUTH_URL, cls.session_auth_url),
            key_auth_url=env(EnvVars.KEY_AUTH_URL, cls.key_auth_url),
            cert_path=env(EnvVars.CERT_PATH),
            key_path=env(EnvVars.KEY_PATH),
            timeout_seconds=env(EnvVars.TIMEOUT_SECONDS, cls.timeout_seconds, float),
            verify_tls=env(EnvVars.VERIFY_TLS, cls.verify_tls, bool),
            transient_max_retries=env(EnvVars.TRANSIENT_MAX_RETRIES, cls.transient_max_retries, int),
            transient_initial_backoff_seconds=env(
                EnvVars.TRANSIENT_INITIAL_BACKOFF, cls.transient_initial_backoff_seconds, float
            ),
            transient_backoff_multiplier=env(
                EnvVars.TRANSIENT_BACKOFF_MULTIPLIER, cls.transient_backoff_multiplier, float
            ),
            transient_max_backoff_seconds=env(
                EnvVars.TRANSIENT_MAX_BACKOFF, cls.transient_max_backoff_seconds, float
            ),
            log_level=env(EnvVars.LOG_LEVEL, cls.log_level),
            log_format=env(EnvVars.LOG_FORMAT, cls.log_format).lower(),
        )

    def with_overrides(self, **kwargs: Any) -> "ClientConfig":
        """
        Create a new config with overrides.

        Args:
            **kwargs: Values to override

        Returns:
            New ClientConfig with overrides applied
        """
        extra = {**self.extra, **kwargs.pop("extra", {})}
        return replace(self, extra=extra, **kwargs)

    def validate(self) -> None:
        """
        Check that the settings needed to talk to a pod are present.

        Raises:
            ValueError: Listing every missing setting
        """
        missing = [
            name
            for name in ("pod_url", "session_auth_url", "key_auth_url", "cert_path")
            if not getattr(self, name)
        ]
        if missing:
            raise ValueError(f"Missing client configuration: {', '.join(missing)}")
