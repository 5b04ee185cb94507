"""
Execution strategies for remote pod operations.

Every facade call goes through an executor:

    facade -> executor.execute(transport.get_room_info, room_id)
                  -> operation(room_id, session_token)
                  -> on Unauthorized: store.refresh(), dispatch once more
                  -> on Transient: optional bounded backoff retries
                  -> anything else: raised unchanged

Executors hold no per-call state, so one instance can serve any number of
concurrent callers. The only shared mutable state is the CredentialStore.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from ...domain.exceptions import ApiFailure, RefreshFailed, Transient, Unauthorized, classify
from ...infrastructure.logging import OperationLoggerAdapter, get_logger
from ..ports.remote_call import RemoteCall
from .credential_store import CredentialStore

T = TypeVar("T")


@dataclass(frozen=True)
class TransientRetryPolicy:
    """
    Backoff policy for Transient failures.

    Disabled by default (``max_retries=0``): the single refresh-and-retry
    on Unauthorized is the only recovery unless this is configured.

    Attributes:
        max_retries: Additional attempts after a Transient failure
        initial_backoff_seconds: Delay before the first retry
        multiplier: Growth factor applied per retry
        max_backoff_seconds: Upper bound on any single delay
    """

    max_retries: int = 0
    initial_backoff_seconds: float = 0.5
    multiplier: float = 2.0
    max_backoff_seconds: float = 10.0

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries cannot be negative")
        if self.initial_backoff_seconds < 0 or self.max_backoff_seconds < 0:
            raise ValueError("backoff cannot be negative")
        if self.multiplier < 1.0:
            raise ValueError("multiplier must be >= 1.0")

    @property
    def enabled(self) -> bool:
        return self.max_retries > 0

    def backoff(self, retry_number: int) -> float:
        """Delay before retry ``retry_number`` (0-based)."""
        delay = self.initial_backoff_seconds * (self.multiplier**retry_number)
        return min(delay, self.max_backoff_seconds)


class PlainApiExecutor:
    """
    Executor that binds the session token and classifies failures.

    It never refreshes or retries; an Unauthorized is surfaced as-is.
    Useful when the caller manages credentials itself.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        logger: logging.Logger | None = None,
    ) -> None:
        self._credentials = credentials
        self._logger = logger or get_logger(__name__)

    def execute(self, operation: Callable[..., T], *args: Any) -> T:
        return self.execute_call(RemoteCall(operation, args))

    def execute_call(self, call: RemoteCall[T]) -> T:
        pair = self._credentials.current()
        if pair is None:
            try:
                pair = self._credentials.refresh()
            except RefreshFailed as e:
                self._logger.error("%s failed: %s", call.name, e)
                raise e.for_call(call.name) from e
        try:
            return call.invoke(pair.session_token)
        except Exception as e:
            failure = classify(e, operation=call.name)
            self._logger.error("%s failed: %s", call.name, failure)
            if failure is e:
                raise
            raise failure from e


class RetryingApiExecutor:
    """
    Executor that recovers from a rejected session exactly once.

    Algorithm for one call:
        1. Read the current pair (authenticate first if there is none).
        2. Dispatch ``operation(*args, session_token)``.
        3. Success: return the raw result.
        4. Failure: classify it.
           - Unauthorized, first time: refresh the pair and dispatch again.
             A second Unauthorized is surfaced; there is no third attempt.
           - Transient: retry per ``transient_policy`` (off by default).
           - Anything else: surface immediately.

    A failed refresh (RefreshFailed) is surfaced without further attempts.

    Example:
        executor = RetryingApiExecutor(store)
        detail = executor.execute(transport.get_room_info, "room-7")
    """

    def __init__(
        self,
        credentials: CredentialStore,
        transient_policy: TransientRetryPolicy | None = None,
        logger: logging.Logger | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._credentials = credentials
        self._transient_policy = transient_policy or TransientRetryPolicy()
        self._logger = logger or get_logger(__name__)
        self._sleep = sleep

    @property
    def transient_policy(self) -> TransientRetryPolicy:
        return self._transient_policy

    def execute(self, operation: Callable[..., T], *args: Any) -> T:
        """
        Invoke ``operation(*args, session_token)`` with auth recovery.

        Args:
            operation: The remote operation callable
            *args: Caller arguments, passed before the session token

        Returns:
            The operation's raw result

        Raises:
            ApiFailure: The classified failure of the final attempt
        """
        return self.execute_call(RemoteCall(operation, args))

    def execute_call(self, call: RemoteCall[T]) -> T:
        log = OperationLoggerAdapter(self._logger, {"operation": call.name})
        pair = self._credentials.current()
        if pair is None:
            log.debug("No session credentials yet, authenticating")
            try:
                pair = self._credentials.refresh()
            except RefreshFailed as e:
                log.error("Initial authentication failed; giving up")
                raise e.for_call(call.name) from e

        auth_retry_used = False
        transient_retries = 0

        while True:
            token = pair.session_token
            try:
                return call.invoke(token)
            except Exception as e:
                failure = classify(e, operation=call.name)
                cause = e

            if isinstance(failure, Unauthorized) and not auth_retry_used:
                auth_retry_used = True
                log.warning("Session rejected, refreshing credentials and retrying once")
                try:
                    pair = self._credentials.refresh(stale_session_token=token)
                except RefreshFailed as e:
                    log.error("Credential refresh failed; giving up")
                    raise e.for_call(call.name) from e
                continue

            if isinstance(failure, Transient) and transient_retries < self._transient_policy.max_retries:
                delay = self._transient_policy.backoff(transient_retries)
                transient_retries += 1
                log.warning(
                    "Transient failure (%s), retry %d/%d in %.2fs",
                    failure,
                    transient_retries,
                    self._transient_policy.max_retries,
                    delay,
                )
                self._sleep(delay)
                continue

            self._surface(log, failure, auth_retry_used)
            if failure is cause:
                raise failure
            raise failure from cause

    def _surface(self, log: OperationLoggerAdapter, failure: ApiFailure, auth_retry_used: bool) -> None:
        if isinstance(failure, Unauthorized) and auth_retry_used:
            log.error("Session rejected again after refresh: %s", failure)
        else:
            log.error("Failed: %s", failure)
