"""
Pytest configuration and fixtures for the review monitor test suite.
"""

import pytest

from src.models.account import Account
from src.utils.event_bus import EventBus


@pytest.fixture
def account():
    """Account with dummy session tokens."""
    return Account(user_id=4242, golden_key="gk-test", phpsessid="sess-test")


@pytest.fixture
def recorded_events():
    """Event bus paired with the list of events it received."""
    event_bus = EventBus()
    received = []
    event_bus.subscribe(received.append)
    return event_bus, received
