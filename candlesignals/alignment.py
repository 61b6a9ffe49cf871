"""
Intraday signal alignment.

Indicator series are computed over the full bar history, while an
IntradayRecord covers a shorter, more recent window. Alignment keeps the
trailing values of each series that line up with the record's mid prices.

The record is mutated without locking; callers sharing one record between
threads must serialize calls themselves.
"""

from typing import List, Optional, Sequence

from candlesignals.models import BollingerSeries, IntradayRecord
from candlesignals.utils.logger import get_logger

logger = get_logger(__name__)


def _fill_trailing(buffer: List[float], source: Sequence[float], target_len: int) -> None:
    buffer.clear()
    buffer.extend(source[-target_len:])


def align_intraday_signals(
    record: Optional[IntradayRecord],
    obv_series: Optional[Sequence[float]],
    bollinger_series: Optional[BollingerSeries],
) -> None:
    """
    Right-align indicator series onto a record's indicator buffers.

    Each buffer is cleared in place and refilled with the last
    ``len(record.mid_prices)`` values of its source series, or the whole
    source when it is shorter. Calling this twice with the same inputs
    leaves the record unchanged the second time.

    Args:
        record: Intraday record to update. None is a no-op.
        obv_series: OBV values over the full bar history. None is treated
            as an empty series.
        bollinger_series: Bands over the full bar history. When None the
            three Bollinger buffers are left empty.
    """
    if record is None:
        return

    record.clear_indicators()

    target_len = len(record.mid_prices)
    if target_len == 0:
        return

    _fill_trailing(record.obv_values, obv_series or [], target_len)

    if bollinger_series is not None:
        _fill_trailing(record.bollinger_upper, bollinger_series.upper, target_len)
        _fill_trailing(record.bollinger_middle, bollinger_series.middle, target_len)
        _fill_trailing(record.bollinger_lower, bollinger_series.lower, target_len)

    logger.debug(
        f"Aligned intraday signals: target={target_len} "
        f"obv={len(record.obv_values)} bollinger={len(record.bollinger_middle)}"
    )
