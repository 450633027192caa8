"""
Review data model.

Represents one review extracted from a marketplace profile page.
"""

from dataclasses import dataclass, asdict
from typing import Dict, Tuple


@dataclass(frozen=True)
class Review:
    """
    A single review as shown on the seller's profile page.
    Output of the Review Extractor.
    """
    id: str  # "review-<position>", position among all matched elements
    user_id: int  # Author's numeric profile id
    order_id: str  # Uppercase alphanumeric order code, "" if absent
    text: str  # Review body, "" if absent
    rating: int  # Star rating, 0 when no rating class was found

    def __post_init__(self):
        # Validate author id
        if isinstance(self.user_id, bool) or not isinstance(self.user_id, int):
            raise ValueError(f"Invalid user_id: {self.user_id!r}. Must be an int")
        if self.user_id <= 0:
            raise ValueError(f"Invalid user_id: {self.user_id}. Must be positive")

    @property
    def identity_key(self) -> Tuple[int, str, int]:
        """Key used to recognise the same review across cycles."""
        return (self.user_id, self.text, self.rating)

    def to_dict(self) -> Dict:
        return asdict(self)
