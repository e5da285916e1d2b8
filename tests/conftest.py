import pytest


@pytest.fixture
def fake_clock():
    """Factory for a clock that returns the given ticks in order."""

    def _make(*ticks):
        values = iter(ticks)
        return lambda: next(values)

    return _make
