"""ApiExecutor port - how facades dispatch remote operations."""

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from .remote_call import RemoteCall

T = TypeVar("T")


@runtime_checkable
class ApiExecutor(Protocol):
    """
    Execution strategy for remote operations.

    An executor binds the current session token to each call and turns any
    failure into a classified ApiFailure. Implementations differ in how
    they recover.

    Implementations:
        - RetryingApiExecutor: refresh-and-retry once on Unauthorized
        - PlainApiExecutor: classify only, never retry
    """

    def execute(self, operation: Callable[..., T], *args: Any) -> T:
        """
        Invoke ``operation(*args, session_token)``.

        Returns:
            The operation's raw result

        Raises:
            ApiFailure: The classified failure
        """
        ...

    def execute_call(self, call: RemoteCall[T]) -> T:
        """Invoke a pre-bound RemoteCall."""
        ...
