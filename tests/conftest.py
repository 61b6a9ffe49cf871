"""
Pytest configuration and shared fixtures for testing
"""

import pytest
from datetime import datetime, timedelta, timezone
from typing import List

from candlesignals.models import Bar
from candlesignals.utils.config import reset_config


BASE_TIME = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


def make_bars(closes: List[float], volumes: List[float] = None) -> List[Bar]:
    """Build hourly bars from closes (and optional volumes)."""
    if volumes is None:
        volumes = [1000.0] * len(closes)
    bars = []
    for i, (close, volume) in enumerate(zip(closes, volumes)):
        bars.append(Bar(
            timestamp=BASE_TIME + timedelta(hours=i),
            open=close - 0.5,
            high=close + 1.0,
            low=close - 1.0,
            close=close,
            volume=volume,
        ))
    return bars


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate every test from indicator settings in the environment."""
    for name in ("BOLLINGER_PERIOD", "BOLLINGER_STD_MULT", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_bars() -> List[Bar]:
    """Generate 100 bars with a repeating price pattern."""
    closes = []
    volumes = []
    base_price = 100.0

    for i in range(100):
        price_change = (i % 10) * 0.5
        closes.append(base_price + price_change)
        volumes.append(1000.0 + (i * 10))

    return make_bars(closes, volumes)


@pytest.fixture
def minimal_bars() -> List[Bar]:
    """Generate minimal bar data (5 candles) for edge case testing."""
    return make_bars([100.0, 101.0, 102.0, 103.0, 104.0])


@pytest.fixture
def bar_factory():
    """Expose make_bars to tests that need specific closes/volumes."""
    return make_bars
