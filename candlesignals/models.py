"""
Data models for the candlesignals library.

Bars are the immutable input to every indicator. Series and snapshots are
freshly built per call; the IntradayRecord is owned by the caller and only
has its indicator buffers rewritten.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from candlesignals.utils.exceptions import DataFormatError


def to_utc(ts: datetime) -> datetime:
    """Convert datetime to timezone-aware UTC datetime."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


@dataclass(frozen=True)
class Bar:
    """Single OHLCV bar (immutable)."""
    timestamp: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0

    @property
    def mid_price(self) -> float:
        """Midpoint of the bar's high/low range."""
        return (self.high + self.low) / 2

    def to_dict(self) -> Dict[str, Any]:
        """Convert Bar to a JSON-friendly dictionary."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Bar":
        """
        Create a Bar from a dictionary.

        The timestamp may be a datetime, an ISO-8601 string or epoch seconds.
        A missing or empty volume is read as 0.0.

        Raises:
            DataFormatError: If a required field is missing or not numeric
        """
        try:
            ts = data["timestamp"]
            if isinstance(ts, str):
                ts = datetime.fromisoformat(ts)
            elif isinstance(ts, (int, float)) and not isinstance(ts, bool):
                # Epoch seconds
                ts = datetime.fromtimestamp(ts, timezone.utc)
            elif not isinstance(ts, datetime):
                raise DataFormatError(f"Invalid bar timestamp {ts!r}")
            volume = data.get("volume")
            return cls(
                timestamp=to_utc(ts),
                open=float(data["open"]),
                high=float(data["high"]),
                low=float(data["low"]),
                close=float(data["close"]),
                volume=float(volume) if volume not in (None, "") else 0.0,
            )
        except KeyError as e:
            raise DataFormatError(f"Bar is missing field {e}")
        except (TypeError, ValueError, OverflowError, OSError) as e:
            raise DataFormatError(f"Invalid bar {data!r}: {e}")


@dataclass
class BollingerSeries:
    """Upper, middle and lower bands, index-aligned with the input bars."""
    upper: List[float] = field(default_factory=list)
    middle: List[float] = field(default_factory=list)
    lower: List[float] = field(default_factory=list)

    @classmethod
    def zeros(cls, length: int) -> "BollingerSeries":
        return cls(
            upper=[0.0] * length,
            middle=[0.0] * length,
            lower=[0.0] * length,
        )

    def __len__(self) -> int:
        return len(self.middle)

    def to_dict(self) -> Dict[str, List[float]]:
        return {
            "upper": list(self.upper),
            "middle": list(self.middle),
            "lower": list(self.lower),
        }


@dataclass(frozen=True)
class BollingerSnapshot:
    """
    Bollinger reading for the final window of a bar sequence.

    Attributes:
        middle: Mean close of the final window
        upper: middle + k * std
        lower: middle - k * std
        bandwidth: (upper - lower) / middle, or 0.0 when middle is 0
        z_score: (last close - middle) / std, or 0.0 when std is 0

    An all-zero snapshot means there was not enough data for a reading.
    """
    middle: float = 0.0
    upper: float = 0.0
    lower: float = 0.0
    bandwidth: float = 0.0
    z_score: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self == BollingerSnapshot()

    def to_dict(self) -> Dict[str, float]:
        return {
            "middle": self.middle,
            "upper": self.upper,
            "lower": self.lower,
            "bandwidth": self.bandwidth,
            "z_score": self.z_score,
        }


@dataclass
class IntradayRecord:
    """
    Caller-owned intraday price record.

    mid_prices is never touched by the library. The four indicator buffers
    are cleared and rebuilt in place on every alignment.
    """
    mid_prices: List[float] = field(default_factory=list)
    obv_values: List[float] = field(default_factory=list)
    bollinger_upper: List[float] = field(default_factory=list)
    bollinger_middle: List[float] = field(default_factory=list)
    bollinger_lower: List[float] = field(default_factory=list)

    def clear_indicators(self) -> None:
        self.obv_values.clear()
        self.bollinger_upper.clear()
        self.bollinger_middle.clear()
        self.bollinger_lower.clear()
