"""Credential store with single-flight refresh."""

import logging
import threading
from concurrent.futures import Future

from ...domain.exceptions import RefreshFailed
from ...domain.value_objects import CredentialPair
from ...infrastructure.logging import get_logger
from ..ports.authenticator import Authenticator


class CredentialStore:
    """
    Holds the current session/signing credential pair for one client session.

    Reads never block: ``current()`` returns the immutable pair that is
    installed at the moment of the call. ``refresh()`` is single-flight:
    while one exchange is in progress every other caller waits for it and
    receives the same resulting pair (or the same failure).

    Thread-safe: a lock guards the in-flight marker; the pair itself is
    swapped with a single reference assignment.

    Example:
        store = CredentialStore(CertificateAuthenticator(...))
        pair = store.refresh()          # initial login
        token = store.current().session_token
    """

    def __init__(
        self,
        authenticator: Authenticator,
        initial: CredentialPair | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._authenticator = authenticator
        self._pair: CredentialPair | None = initial
        self._lock = threading.Lock()
        self._in_flight: Future | None = None
        self._refresh_count = 0
        self._logger = logger or get_logger(__name__)

    @property
    def refresh_count(self) -> int:
        """Number of exchanges that completed successfully."""
        return self._refresh_count

    def current(self) -> CredentialPair | None:
        """Return the installed pair, or None before the first authentication."""
        return self._pair

    def refresh(self, stale_session_token: str | None = None) -> CredentialPair:
        """
        Replace the credential pair with a freshly exchanged one.

        Args:
            stale_session_token: The session token the caller saw rejected.
                If the installed pair has already moved past it, that pair
                is returned without a new exchange.

        Returns:
            The new pair, shared by every concurrent caller

        Raises:
            RefreshFailed: The exchange failed. The previous pair stays
                installed and later refreshes may try again.
        """
        with self._lock:
            pair = self._pair
            if (
                stale_session_token is not None
                and pair is not None
                and pair.session_token != stale_session_token
            ):
                self._logger.debug(
                    "Credentials already refreshed to generation %d", pair.generation
                )
                return pair

            if self._in_flight is not None:
                flight = self._in_flight
                leader = False
            else:
                flight = Future()
                self._in_flight = flight
                leader = True

        if not leader:
            self._logger.debug("Waiting for in-flight credential refresh")
            return flight.result()

        return self._lead_refresh(flight)

    def clear(self) -> None:
        """Forget the installed pair; the next execution authenticates first."""
        with self._lock:
            self._pair = None

    def _lead_refresh(self, flight: Future) -> CredentialPair:
        self._logger.info("Refreshing session credentials")
        try:
            issued = self._authenticator.authenticate()
        except Exception as e:
            failure = e if isinstance(e, RefreshFailed) else RefreshFailed(
                f"Credential refresh failed: {e}", details={"cause": repr(e)}
            )
            with self._lock:
                self._in_flight = None
            flight.set_exception(failure)
            self._logger.error("Credential refresh failed: %s", e)
            if failure is e:
                raise
            raise failure from e

        with self._lock:
            previous = self._pair
            if previous is None:
                pair = CredentialPair(issued.session_token, issued.key_manager_token, generation=1)
            else:
                pair = previous.next_generation(issued.session_token, issued.key_manager_token)
            self._pair = pair
            self._refresh_count += 1
            self._in_flight = None
        flight.set_result(pair)
        self._logger.info("Session credentials refreshed (generation %d)", pair.generation)
        return pair
