"""Room search query value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RoomSearchCriteria:
    """
    Criteria for a chat room search.

    Attributes:
        query: Free-text query matched against room name, description and keywords
        labels: Keyword labels the rooms must carry
        active: Restrict to active (True) or inactive (False) rooms
        private: Restrict to private (True) or public (False) rooms
        owner_id: Only rooms owned by this user
        creator_id: Only rooms created by this user
        sort_order: "BASIC" or "RELEVANCE"
    """

    query: str
    labels: tuple[str, ...] = ()
    active: bool | None = None
    private: bool | None = None
    owner_id: int | None = None
    creator_id: int | None = None
    sort_order: str | None = None

    def __post_init__(self) -> None:
        if not self.query:
            raise ValueError("RoomSearchCriteria.query cannot be empty")
        if isinstance(self.labels, list):
            object.__setattr__(self, "labels", tuple(self.labels))
        if self.sort_order is not None and self.sort_order not in ("BASIC", "RELEVANCE"):
            raise ValueError(f"Unsupported sort order: {self.sort_order}")
