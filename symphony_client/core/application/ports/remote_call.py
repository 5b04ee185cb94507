"""Remote operation references."""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Protocol, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class RemoteOperation(Protocol[T_co]):
    """
    A callable that performs one pod endpoint invocation.

    The caller-supplied arguments come first; the session token is always
    passed as the final positional argument.
    """

    def __call__(self, *args: Any) -> T_co: ...


def operation_name(operation: Callable[..., Any]) -> str:
    """Best-effort human-readable name for an operation callable."""
    name = getattr(operation, "__qualname__", None) or getattr(operation, "__name__", None)
    if name:
        return name
    return type(operation).__name__


@dataclass(frozen=True)
class RemoteCall(Generic[T]):
    """
    A bound remote operation: the callable plus its caller arguments.

    Created per call, invoked uniformly by an executor, discarded after.

    Example:
        call = RemoteCall(transport.get_room_info, ("room-7",))
        detail = call.invoke(session_token)
    """

    operation: Callable[..., T]
    args: tuple = ()
    name: str = field(default="")

    def __post_init__(self) -> None:
        if not callable(self.operation):
            raise TypeError("RemoteCall.operation must be callable")
        if not self.name:
            object.__setattr__(self, "name", operation_name(self.operation))

    def invoke(self, session_token: str) -> T:
        """Dispatch the operation with the session token as its last argument."""
        return self.operation(*self.args, session_token)
