"""
Review Change Detector.

Compares each cycle's extraction result with the previous one and reports
reviews that were not there before.
"""

import logging
from typing import List

from src.models.review import Review

logger = logging.getLogger(__name__)


class ReviewChangeDetector:
    """
    Two-state detector: uninitialized until the first cycle, steady after.

    The first cycle only records a baseline. Every later cycle returns the
    current reviews whose (user_id, text, rating) key is absent from the
    previous snapshot, then replaces the snapshot wholesale, even with an
    empty list.
    """

    def __init__(self):
        self._snapshot: List[Review] = []
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def snapshot(self) -> List[Review]:
        """Copy of the reviews retained from the last cycle."""
        return list(self._snapshot)

    def detect(self, current: List[Review]) -> List[Review]:
        """
        Diff the current reviews against the snapshot.

        Args:
            current: Reviews extracted in this cycle, in document order

        Returns:
            New reviews in the order they appear in `current`
            (always empty on the first cycle)
        """
        if not self._initialized:
            self._snapshot = list(current)
            self._initialized = True
            logger.info(f"Baseline recorded with {len(current)} reviews")
            return []

        new_reviews = [
            review for review in current
            if not any(previous.identity_key == review.identity_key for previous in self._snapshot)
        ]

        self._snapshot = list(current)

        if new_reviews:
            logger.info(f"Detected {len(new_reviews)} new reviews")
        else:
            logger.debug("No new reviews")
        return new_reviews
