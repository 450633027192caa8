"""
Unit tests for the Review Change Detector.
"""

from src.agents.change_detection import ReviewChangeDetector
from tests.builders import make_review


def test_first_cycle_records_baseline_without_reporting():
    """Test that the first cycle never reports reviews."""
    detector = ReviewChangeDetector()
    current = [make_review(1, "a", 5), make_review(2, "b", 4, index=1)]

    assert not detector.is_initialized
    assert detector.detect(current) == []
    assert detector.is_initialized
    assert detector.snapshot == current


def test_first_cycle_with_empty_result_still_initializes():
    """Test that an empty first cycle establishes an empty baseline."""
    detector = ReviewChangeDetector()

    assert detector.detect([]) == []
    assert detector.is_initialized
    assert detector.snapshot == []


def test_new_review_reported_once():
    """Test that only the unseen review is reported."""
    detector = ReviewChangeDetector()
    detector.detect([make_review(1, "a", 5)])

    new_reviews = detector.detect([make_review(1, "a", 5), make_review(2, "b", 3, index=1)])

    assert len(new_reviews) == 1
    assert new_reviews[0].identity_key == (2, "b", 3)


def test_review_not_reported_again_on_next_cycle():
    """Test that a reported review is part of the next baseline."""
    detector = ReviewChangeDetector()
    detector.detect([])
    assert len(detector.detect([make_review(1, "a", 5)])) == 1

    assert detector.detect([make_review(1, "a", 5)]) == []


def test_empty_result_clears_snapshot():
    """Test that an empty cycle replaces the snapshot and reports nothing."""
    detector = ReviewChangeDetector()
    detector.detect([make_review(1, "a", 5)])

    assert detector.detect([]) == []
    assert detector.snapshot == []


def test_review_reappearing_after_clear_is_reported():
    """Test that the snapshot only remembers the immediately preceding cycle."""
    detector = ReviewChangeDetector()
    detector.detect([make_review(1, "a", 5)])
    detector.detect([])

    assert len(detector.detect([make_review(1, "a", 5)])) == 1


def test_identity_ignores_id_and_order():
    """Test that position and order reference do not affect identity."""
    detector = ReviewChangeDetector()
    detector.detect([make_review(1, "a", 5, index=0, order_id="AAA")])

    moved = make_review(1, "a", 5, index=3, order_id="BBB")
    assert detector.detect([moved]) == []


def test_changed_text_or_rating_is_new():
    """Test that an edited review counts as a new occurrence."""
    detector = ReviewChangeDetector()
    detector.detect([make_review(1, "a", 5)])

    new_reviews = detector.detect([make_review(1, "a", 4), make_review(1, "a!", 5)])

    assert [r.identity_key for r in new_reviews] == [(1, "a", 4), (1, "a!", 5)]


def test_new_reviews_keep_current_order():
    """Test that new reviews are returned in extraction order."""
    detector = ReviewChangeDetector()
    detector.detect([make_review(5, "old", 5)])

    current = [
        make_review(9, "z", 1, index=0),
        make_review(5, "old", 5, index=1),
        make_review(3, "y", 2, index=2),
    ]

    assert [r.user_id for r in detector.detect(current)] == [9, 3]


def test_duplicate_triple_is_not_reported():
    """Test that a second review with the same key as a known one stays hidden."""
    detector = ReviewChangeDetector()
    detector.detect([make_review(1, "", 0)])

    assert detector.detect([make_review(1, "", 0), make_review(1, "", 0, index=1)]) == []


def test_snapshot_is_a_copy():
    """Test that callers cannot mutate the retained snapshot."""
    detector = ReviewChangeDetector()
    detector.detect([make_review(1, "a", 5)])

    detector.snapshot.clear()

    assert len(detector.snapshot) == 1
