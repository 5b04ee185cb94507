"""Classified failures surfaced by remote pod operations."""

from enum import Enum
from typing import Any


class FailureKind(Enum):
    """The stable classification every remote failure is mapped onto."""

    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    TRANSIENT = "transient"
    MALFORMED = "malformed"
    UNKNOWN = "unknown"


class ApiFailure(Exception):
    """
    Base exception for all classified remote failures.

    Attributes:
        message: Human-readable description
        operation: Name of the remote operation that failed (if known)
        status_code: HTTP status returned by the pod (if any)
        details: Extra diagnostic data (response body, etc.)
    """

    kind: FailureKind = FailureKind.UNKNOWN

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        status_code: int | None = None,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.status_code = status_code
        self.details = details or {}

    def for_operation(self, operation: str) -> "ApiFailure":
        """Stamp the operation name if the failure does not carry one yet."""
        if self.operation is None:
            self.operation = operation
        return self

    def __str__(self) -> str:
        parts = [self.message]
        if self.operation:
            parts.append(f"operation={self.operation}")
        if self.status_code is not None:
            parts.append(f"status={self.status_code}")
        if len(parts) == 1:
            return self.message
        return f"{parts[0]} ({', '.join(parts[1:])})"


class Unauthorized(ApiFailure):
    """The session credential was rejected by the pod."""

    kind = FailureKind.UNAUTHORIZED


class RefreshFailed(Unauthorized):
    """The credential exchange itself failed; never retried."""

    def __init__(
        self,
        message: str = "Credential refresh failed",
        details: dict | None = None,
        operation: str = "refresh",
    ):
        super().__init__(message, operation=operation, details=details)

    def for_call(self, operation: str) -> "RefreshFailed":
        """A copy attributed to the call that needed the refresh."""
        return RefreshFailed(self.message, details=dict(self.details), operation=operation)


class NotFound(ApiFailure):
    """The addressed stream or room does not exist."""

    kind = FailureKind.NOT_FOUND


class Conflict(ApiFailure):
    """The request conflicts with the current state of the resource."""

    kind = FailureKind.CONFLICT


class Transient(ApiFailure):
    """Network failure, timeout or 5xx response."""

    kind = FailureKind.TRANSIENT


class Malformed(ApiFailure):
    """Bad arguments or an unexpected response shape."""

    kind = FailureKind.MALFORMED


class Unknown(ApiFailure):
    """Anything that does not fit another classification."""

    kind = FailureKind.UNKNOWN


_FAILURE_TYPES: dict[FailureKind, type[ApiFailure]] = {
    FailureKind.UNAUTHORIZED: Unauthorized,
    FailureKind.NOT_FOUND: NotFound,
    FailureKind.CONFLICT: Conflict,
    FailureKind.TRANSIENT: Transient,
    FailureKind.MALFORMED: Malformed,
    FailureKind.UNKNOWN: Unknown,
}


def kind_for_status(status_code: int | None) -> FailureKind:
    """
    Map an HTTP status code onto a failure kind.

    Args:
        status_code: HTTP status, or None when no response was received

    Returns:
        The matching FailureKind
    """
    if status_code is None:
        return FailureKind.TRANSIENT
    if status_code in (401, 403):
        return FailureKind.UNAUTHORIZED
    if status_code == 404:
        return FailureKind.NOT_FOUND
    if status_code == 409:
        return FailureKind.CONFLICT
    if 500 <= status_code <= 599:
        return FailureKind.TRANSIENT
    if 400 <= status_code <= 499:
        return FailureKind.MALFORMED
    return FailureKind.UNKNOWN


def failure_for_status(
    status_code: int | None,
    message: str,
    operation: str | None = None,
    details: dict | None = None,
) -> ApiFailure:
    """Build the classified failure for an HTTP status."""
    failure_type = _FAILURE_TYPES[kind_for_status(status_code)]
    return failure_type(message, operation=operation, status_code=status_code, details=details)


def _response_body(response: Any) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def classify(exc: BaseException, operation: str | None = None) -> ApiFailure:
    """
    Translate a transport-level exception into a classified failure.

    Already-classified failures are returned as-is (with the operation
    name filled in when missing), so classification is idempotent.

    The domain layer does not import the HTTP stack, so transport errors
    are recognised structurally: anything carrying a ``response`` with a
    ``status_code`` (requests.HTTPError) is classified by status, other
    I/O errors (requests.ConnectionError, requests.Timeout) are transient,
    and ValueError-family errors (pydantic.ValidationError, bad JSON) are
    malformed.

    Args:
        exc: The exception raised by the remote operation
        operation: Name of the operation, for diagnostics

    Returns:
        An ApiFailure subclass instance
    """
    if isinstance(exc, ApiFailure):
        return exc.for_operation(operation) if operation else exc

    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return failure_for_status(
            status_code,
            f"Pod responded with HTTP {status_code}",
            operation=operation,
            details={"body": _response_body(response), "url": getattr(response, "url", None)},
        )

    # requests' JSON and URL errors are both OSError and ValueError
    if isinstance(exc, (ValueError, TypeError, KeyError)):
        return Malformed(f"Malformed request or response: {exc}", operation=operation)

    if isinstance(exc, (OSError, TimeoutError)):
        return Transient(f"Network failure: {exc}", operation=operation)

    return Unknown(f"Unexpected failure: {exc!r}", operation=operation)
