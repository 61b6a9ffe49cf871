"""
OBV (On-Balance Volume) Indicator

The calculate function accepts a list of Bar objects and returns a list of
cumulative OBV values aligned by index with the input.
"""

from typing import List

from candlesignals.models import Bar


def calculate(bars: List[Bar]) -> List[float]:
    """
    Calculate OBV (On-Balance Volume) values for a bar sequence.

    Formula:
    - If close ↑ → OBV += volume
    - If close ↓ → OBV −= volume
    - If close = → OBV unchanged

    Args:
        bars: List of Bar objects ordered by timestamp

    Returns:
        List of OBV values, same length as ``bars``. The first value is
        always 0.0 since there is no prior close to compare against.
    """
    if not bars:
        return []

    obv = [0.0] * len(bars)
    for i in range(1, len(bars)):
        obv[i] = obv[i - 1]
        current_close = bars[i].close
        prev_close = bars[i - 1].close

        if current_close > prev_close:
            obv[i] += bars[i].volume
        elif current_close < prev_close:
            obv[i] -= bars[i].volume

    return obv
