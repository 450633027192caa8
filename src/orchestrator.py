"""
Review Monitor.

Runs one monitoring cycle: fetch the profile page, extract reviews,
detect the new ones and post an event for each.
"""

import asyncio
import logging
from typing import Dict, List

from src.agents.aggregation import count_ratings
from src.agents.change_detection import ReviewChangeDetector
from src.agents.extraction import ReviewExtractor
from src.agents.fetcher import ProfileFetcher
from src.models.account import Account
from src.models.event import NewReviewEvent
from src.models.review import Review
from src.utils.event_bus import EventBus
from src.utils.http_client import FetchError, FunpayHttpClient

logger = logging.getLogger(__name__)


class ReviewMonitor:
    """
    Coordinates one cycle per `tick()`:
    1. Fetch → 2. Extract → 3. Detect → 4. Post events

    Cycles never overlap; concurrent ticks wait on a lock. A failed fetch
    aborts the cycle before the detector sees anything.
    """

    def __init__(self, client: FunpayHttpClient, account: Account, event_bus: EventBus):
        """
        Initialize review monitor.

        Args:
            client: HTTP client bound to the marketplace
            account: Monitored account and its session cookies
            event_bus: Sink receiving NewReviewEvent objects
        """
        self.account = account
        self.event_bus = event_bus

        self.fetcher = ProfileFetcher(client, account)
        self.extractor = ReviewExtractor()
        self.detector = ReviewChangeDetector()

        self._lock = asyncio.Lock()

        logger.info(f"Review monitor initialized for user {account.user_id}")

    async def parse_reviews(self) -> List[Review]:
        """Fetch the profile page and extract its reviews."""
        html = await self.fetcher.fetch_profile()
        return self.extractor.parse(html)

    async def tick(self) -> List[NewReviewEvent]:
        """
        Run one monitoring cycle.

        Returns:
            Events posted during this cycle

        Raises:
            FetchError: The page could not be read; retry on the next tick
        """
        async with self._lock:
            try:
                current = await self.parse_reviews()
            except FetchError as e:
                logger.warning(f"Cycle aborted, snapshot kept: {e}")
                raise

            new_reviews = self.detector.detect(current)

            events = []
            for review in new_reviews:
                event = NewReviewEvent(review)
                self.event_bus.post(event)
                events.append(event)
                logger.info(
                    f"New review from user {review.user_id} "
                    f"(rating {review.rating}, order {review.order_id or '-'})"
                )

            return events

    async def get_review_stats(self) -> Dict[int, int]:
        """
        Rating histogram of the reviews currently on the profile page.

        Does not touch the detector snapshot.
        """
        reviews = await self.parse_reviews()
        return count_ratings(reviews)
