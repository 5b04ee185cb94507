"""Session and signing credential pair."""

from dataclasses import dataclass


def _mask(token: str) -> str:
    if len(token) <= 8:
        return "***"
    return f"{token[:4]}...{token[-4:]}"


@dataclass(frozen=True)
class CredentialPair:
    """
    The session token and key manager token issued by one authentication.

    Immutable value object. The two tokens always belong to the same
    credential generation; a refresh replaces the whole pair, never one
    token on its own.

    Attributes:
        session_token: Bearer token proving the caller's identity
        key_manager_token: Signing credential used for message-level signing
        generation: Incremented by every successful refresh (0 when the pair
            was supplied up front)
    """

    session_token: str
    key_manager_token: str
    generation: int = 0

    def __post_init__(self) -> None:
        if not self.session_token:
            raise ValueError("session_token cannot be empty")
        if self.generation < 0:
            raise ValueError("generation cannot be negative")

    def next_generation(self, session_token: str, key_manager_token: str) -> "CredentialPair":
        """Create the pair that supersedes this one."""
        return CredentialPair(
            session_token=session_token,
            key_manager_token=key_manager_token,
            generation=self.generation + 1,
        )

    def __repr__(self) -> str:
        return (
            f"CredentialPair(session_token={_mask(self.session_token)!r}, "
            f"key_manager_token={_mask(self.key_manager_token)!r}, "
            f"generation={self.generation})"
        )
