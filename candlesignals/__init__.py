"""
candlesignals - OBV and Bollinger Band signals for OHLCV bar sequences.

This library computes On-Balance Volume and Bollinger Bands over a complete,
time-ordered list of bars and aligns the results onto a shorter intraday
record for presentation.
"""

from candlesignals.models import Bar, BollingerSeries, BollingerSnapshot, IntradayRecord
from candlesignals.alignment import align_intraday_signals
from candlesignals.api import (
    compute_bollinger,
    compute_obv,
    enrich_intraday,
    list_indicators,
    load_indicator,
)

__version__ = "0.1.0"
__all__ = [
    "compute_obv",
    "compute_bollinger",
    "align_intraday_signals",
    "enrich_intraday",
    "list_indicators",
    "load_indicator",
    "Bar",
    "BollingerSeries",
    "BollingerSnapshot",
    "IntradayRecord",
]
