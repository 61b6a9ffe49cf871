"""
Bollinger Bands Indicator

The calculate function accepts a list of Bar objects and returns the full
band series (index-aligned with the input) together with a snapshot of the
final window.
"""

import math
from typing import List, Tuple

from candlesignals.models import Bar, BollingerSeries, BollingerSnapshot
from candlesignals.utils.exceptions import InvalidArgumentError


def validate_params(period: int, std_mult: float) -> None:
    """Raise InvalidArgumentError for a window or multiplier that cannot be used."""
    if isinstance(period, bool) or not isinstance(period, int):
        raise InvalidArgumentError(f"period must be an integer, got {period!r}")
    if period < 1:
        raise InvalidArgumentError(f"period must be >= 1, got {period}")
    if isinstance(std_mult, bool) or not isinstance(std_mult, (int, float)):
        raise InvalidArgumentError(f"std_mult must be a number, got {std_mult!r}")
    if math.isnan(std_mult) or std_mult < 0:
        raise InvalidArgumentError(f"std_mult must be >= 0, got {std_mult}")


def calculate(
    bars: List[Bar],
    period: int = 20,
    std_mult: float = 2.0,
) -> Tuple[BollingerSeries, BollingerSnapshot]:
    """
    Calculate Bollinger Bands for a bar sequence.

    Formula:
    - Middle = SMA(n)
    - Upper = SMA + k × std
    - Lower = SMA − k × std

    std is the population standard deviation of the window (divides by n).

    Args:
        bars: List of Bar objects ordered by timestamp
        period: SMA period (default: 20)
        std_mult: Standard deviation multiplier (default: 2.0)

    Returns:
        (series, snapshot). Series entries before index ``period - 1`` are
        0.0. When there are fewer bars than ``period`` the series is all
        zeros and the snapshot is the zero snapshot.

    Raises:
        InvalidArgumentError: If period is not an integer >= 1, or std_mult
            is not a non-negative number (NaN included)
    """
    validate_params(period, std_mult)

    if not bars:
        return BollingerSeries(), BollingerSnapshot()

    closes = [bar.close for bar in bars]
    series = BollingerSeries.zeros(len(closes))

    if len(closes) < period:
        # Not enough data for Bollinger Bands calculation
        return series, BollingerSnapshot()

    std = 0.0
    for i in range(period - 1, len(closes)):
        window = closes[i - period + 1:i + 1]

        sma = sum(window) / period
        std = math.sqrt(sum((c - sma) ** 2 for c in window) / period)

        series.middle[i] = sma
        series.upper[i] = sma + (std_mult * std)
        series.lower[i] = sma - (std_mult * std)

    # Snapshot of the final window; std still holds its deviation
    middle = series.middle[-1]
    upper = series.upper[-1]
    lower = series.lower[-1]

    bandwidth = 0.0
    if middle != 0:
        bandwidth = (upper - lower) / middle

    z_score = 0.0
    if std > 0:
        z_score = (closes[-1] - middle) / std

    snapshot = BollingerSnapshot(
        middle=middle,
        upper=upper,
        lower=lower,
        bandwidth=bandwidth,
        z_score=z_score,
    )
    return series, snapshot
