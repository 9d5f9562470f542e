import pytest

from handlekit.debug import HandleTracker


@pytest.fixture
def tracker():
    """Returns a fresh HandleTracker instance for each test."""
    return HandleTracker()
