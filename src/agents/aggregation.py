"""
Rating Aggregation.

Histogram of star ratings over an extraction result.
"""

from collections import Counter
from typing import Dict, List

from src.models.review import Review

RATING_VALUES = range(1, 6)


def count_ratings(reviews: List[Review]) -> Dict[int, int]:
    """
    Count reviews per star rating.

    Keys 1 through 5 are always present. Unrated reviews (rating 0) are
    not counted.

    Args:
        reviews: Extraction result

    Returns:
        Mapping rating -> number of reviews
    """
    counts = Counter(review.rating for review in reviews)
    return {rating: counts.get(rating, 0) for rating in RATING_VALUES}
