"""
Public API for candlesignals library.
"""

import importlib
import pkgutil
from typing import Callable, List, Optional, Sequence, Tuple

import candlesignals.indicators
from candlesignals.alignment import align_intraday_signals
from candlesignals.indicators import bollinger, obv
from candlesignals.models import Bar, BollingerSeries, BollingerSnapshot, IntradayRecord
from candlesignals.utils.config import get_config
from candlesignals.utils.exceptions import IndicatorNotFoundError
from candlesignals.utils.logger import get_logger

logger = get_logger(__name__)


def compute_obv(bars: Sequence[Bar]) -> List[float]:
    """
    Compute the On-Balance Volume series for a bar sequence.

    Args:
        bars: Bars ordered by timestamp

    Returns:
        OBV values, index-aligned with ``bars``
    """
    logger.debug(f"Computing OBV over {len(bars)} bars")
    return obv.calculate(list(bars))


def compute_bollinger(
    bars: Sequence[Bar],
    period: Optional[int] = None,
    std_mult: Optional[float] = None,
) -> Tuple[BollingerSeries, BollingerSnapshot]:
    """
    Compute Bollinger Bands for a bar sequence.

    Args:
        bars: Bars ordered by timestamp
        period: Window size (defaults to BOLLINGER_PERIOD from config)
        std_mult: Band multiplier (defaults to BOLLINGER_STD_MULT from config)

    Returns:
        (series, snapshot) as produced by the bollinger indicator

    Raises:
        InvalidArgumentError: For a non-positive period or negative multiplier
    """
    settings = get_config().indicators
    if period is None:
        period = settings.bollinger_period
    if std_mult is None:
        std_mult = settings.bollinger_std_mult

    logger.debug(f"Computing Bollinger Bands over {len(bars)} bars (period={period}, k={std_mult})")
    series, snapshot = bollinger.calculate(list(bars), period=period, std_mult=std_mult)

    if bars and len(bars) < period:
        logger.debug(f"Only {len(bars)} bars for period {period}; Bollinger snapshot is empty")

    return series, snapshot


def enrich_intraday(
    record: IntradayRecord,
    bars: Sequence[Bar],
    period: Optional[int] = None,
) -> BollingerSnapshot:
    """
    Compute OBV and Bollinger Bands over ``bars`` and align both onto ``record``.

    Args:
        record: Intraday record whose indicator buffers are rebuilt
        bars: Full bar history, ordered by timestamp
        period: Bollinger window (defaults to config)

    Returns:
        The latest Bollinger snapshot
    """
    obv_series = compute_obv(bars)
    series, snapshot = compute_bollinger(bars, period=period)
    align_intraday_signals(record, obv_series, series)
    return snapshot


def list_indicators() -> List[str]:
    """
    List available indicator modules.

    Returns:
        Sorted list of indicator names (e.g. ['bollinger', 'obv'])
    """
    indicators = []
    for module_info in pkgutil.iter_modules(candlesignals.indicators.__path__):
        if not module_info.name.startswith("_"):
            indicators.append(module_info.name)

    return sorted(indicators)


def load_indicator(indicator_name: str) -> Callable:
    """
    Load an indicator module by name.

    Args:
        indicator_name: Name of the indicator (e.g., 'obv')

    Returns:
        The indicator's calculate function

    Raises:
        IndicatorNotFoundError: If no such indicator exists
    """
    if indicator_name not in list_indicators():
        raise IndicatorNotFoundError(
            f"Indicator not found: {indicator_name}. "
            f"Available: {', '.join(list_indicators())}"
        )

    module = importlib.import_module(f"candlesignals.indicators.{indicator_name}")
    return module.calculate
