"""
Tests for intraday signal alignment.
"""

from candlesignals.alignment import align_intraday_signals
from candlesignals.models import BollingerSeries, IntradayRecord


def _series(length: int) -> BollingerSeries:
    return BollingerSeries(
        upper=[float(i) + 2 for i in range(length)],
        middle=[float(i) for i in range(length)],
        lower=[float(i) - 2 for i in range(length)],
    )


def test_keeps_trailing_window():
    record = IntradayRecord(mid_prices=[1.0, 2.0, 3.0])
    obv_series = [float(i) for i in range(10)]

    align_intraday_signals(record, obv_series, _series(10))

    assert record.obv_values == obv_series[7:10]
    assert record.bollinger_middle == [7.0, 8.0, 9.0]
    assert record.bollinger_upper == [9.0, 10.0, 11.0]
    assert record.bollinger_lower == [5.0, 6.0, 7.0]


def test_short_source_is_copied_whole():
    record = IntradayRecord(mid_prices=[1.0] * 8)

    align_intraday_signals(record, [1.0, 2.0, 3.0], _series(3))

    assert record.obv_values == [1.0, 2.0, 3.0]
    assert record.bollinger_middle == [0.0, 1.0, 2.0]


def test_zero_band_values_are_kept():
    # Leading zeros mean "insufficient window" but keep their slot
    record = IntradayRecord(mid_prices=[1.0] * 4)
    bands = BollingerSeries(
        upper=[0.0, 0.0, 5.0, 6.0],
        middle=[0.0, 0.0, 4.0, 5.0],
        lower=[0.0, 0.0, 3.0, 4.0],
    )

    align_intraday_signals(record, [0.0, 1.0, 2.0, 3.0], bands)

    assert record.bollinger_middle == [0.0, 0.0, 4.0, 5.0]


def test_is_idempotent():
    record = IntradayRecord(mid_prices=[1.0] * 4)
    obv_series = [float(i) for i in range(6)]
    bands = _series(6)

    align_intraday_signals(record, obv_series, bands)
    first = (
        list(record.obv_values),
        list(record.bollinger_upper),
        list(record.bollinger_middle),
        list(record.bollinger_lower),
    )
    align_intraday_signals(record, obv_series, bands)

    assert (
        record.obv_values,
        record.bollinger_upper,
        record.bollinger_middle,
        record.bollinger_lower,
    ) == first
    assert len(record.obv_values) == 4


def test_replaces_previous_contents_in_place():
    record = IntradayRecord(mid_prices=[1.0, 2.0], obv_values=[99.0, 98.0, 97.0])
    buffer = record.obv_values

    align_intraday_signals(record, [1.0, 2.0, 3.0], None)

    assert record.obv_values is buffer
    assert buffer == [2.0, 3.0]


def test_missing_bollinger_leaves_band_buffers_empty():
    record = IntradayRecord(
        mid_prices=[1.0, 2.0],
        bollinger_upper=[1.0],
        bollinger_middle=[1.0],
        bollinger_lower=[1.0],
    )

    align_intraday_signals(record, [5.0, 6.0, 7.0], None)

    assert record.obv_values == [6.0, 7.0]
    assert record.bollinger_upper == []
    assert record.bollinger_middle == []
    assert record.bollinger_lower == []


def test_missing_obv_is_treated_as_empty():
    record = IntradayRecord(mid_prices=[1.0, 2.0])

    align_intraday_signals(record, None, _series(5))

    assert record.obv_values == []
    assert record.bollinger_middle == [3.0, 4.0]


def test_empty_mid_prices_clears_buffers():
    record = IntradayRecord(
        mid_prices=[],
        obv_values=[1.0],
        bollinger_upper=[1.0],
        bollinger_middle=[1.0],
        bollinger_lower=[1.0],
    )

    align_intraday_signals(record, [1.0, 2.0], _series(2))

    assert record.obv_values == []
    assert record.bollinger_upper == []
    assert record.bollinger_middle == []
    assert record.bollinger_lower == []


def test_none_record_is_noop():
    assert align_intraday_signals(None, [1.0], _series(1)) is None


def test_mid_prices_untouched():
    record = IntradayRecord(mid_prices=[10.5, 11.5])

    align_intraday_signals(record, [1.0, 2.0, 3.0], _series(3))

    assert record.mid_prices == [10.5, 11.5]
