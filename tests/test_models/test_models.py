"""
Unit tests for the data models.
"""

import pytest

from src.models.account import Account
from src.models.event import NewReviewEvent
from src.models.review import Review
from tests.builders import make_review


def test_review_identity_key():
    """Test that identity uses user, text and rating only."""
    review = Review(id="review-3", user_id=8, order_id="ZZ9", text="nice", rating=4)

    assert review.identity_key == (8, "nice", 4)
    assert review.to_dict() == {
        "id": "review-3",
        "user_id": 8,
        "order_id": "ZZ9",
        "text": "nice",
        "rating": 4,
    }


@pytest.mark.parametrize("user_id", [0, -1, "12", None, True])
def test_review_rejects_invalid_user_id(user_id):
    """Test that only positive ints are accepted as author ids."""
    with pytest.raises(ValueError):
        make_review(user_id, "text", 5)


def test_account_cookies():
    """Test cookie names for the session tokens."""
    account = Account(user_id=1, golden_key="gk", phpsessid="sid")

    assert account.cookies() == {"golden_key": "gk", "PHPSESSID": "sid"}
    assert "gk" not in repr(account)


@pytest.mark.parametrize("kwargs", [
    {"user_id": 0, "golden_key": "gk", "phpsessid": "sid"},
    {"user_id": 1, "golden_key": "", "phpsessid": "sid"},
    {"user_id": 1, "golden_key": "gk", "phpsessid": ""},
])
def test_account_presence_checks(kwargs):
    """Test that missing credentials are rejected."""
    with pytest.raises(ValueError):
        Account(**kwargs)


def test_account_from_env():
    """Test building an account from environment variables."""
    account = Account.from_env({
        "REVIEW_MONITOR_USER_ID": "77",
        "REVIEW_MONITOR_GOLDEN_KEY": "gk",
        "REVIEW_MONITOR_PHPSESSID": "sid",
    })

    assert account.user_id == 77
    assert account.cookies() == {"golden_key": "gk", "PHPSESSID": "sid"}


def test_account_from_env_non_numeric_user():
    """Test a clear error for a non-numeric user id."""
    with pytest.raises(ValueError, match="REVIEW_MONITOR_USER_ID"):
        Account.from_env({"REVIEW_MONITOR_USER_ID": "abc"})


def test_event_carries_review_and_timestamp():
    """Test that events wrap the review with a UTC timestamp."""
    review = make_review(1, "a", 5)
    event = NewReviewEvent(review)

    assert event.review is review
    assert event.detected_at.endswith("+00:00")
