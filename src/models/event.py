"""
Event data model.

Notification posted to the event bus for each newly observed review.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from src.models.review import Review


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class NewReviewEvent:
    """A review seen for the first time since the previous cycle."""
    review: Review
    detected_at: str = field(default_factory=_utc_now)  # ISO-8601, UTC
