#!/usr/bin/env python3
"""
Indicator enrichment CLI.

Reads a bar file (JSON array or CSV with a header row) and prints OBV and
Bollinger Band values for each bar, followed by the latest snapshot.

Usage:
    # Full series as a table
    python -m candlesignals --input bars.csv

    # Last 30 bars only, as JSON
    python -m candlesignals --input bars.json --intraday 30 --format json
"""

import argparse
import csv
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from candlesignals.alignment import align_intraday_signals
from candlesignals.api import compute_bollinger, compute_obv
from candlesignals.models import Bar, BollingerSnapshot, IntradayRecord
from candlesignals.utils.config import get_config
from candlesignals.utils.exceptions import CandleSignalsError, ConfigurationError, DataFormatError
from candlesignals.utils.logger import setup_logger


def load_bars(path: Path) -> List[Bar]:
    """
    Load bars from a JSON or CSV file, chosen by extension.

    Raises:
        DataFormatError: If the file cannot be read or a row is malformed
    """
    suffix = path.suffix.lower()
    if suffix not in (".json", ".csv"):
        raise DataFormatError(f"Unsupported input format '{suffix}' (expected .json or .csv)")

    try:
        with path.open(newline="", encoding="utf-8") as f:
            if suffix == ".json":
                rows = json.load(f)
            else:
                rows = list(csv.DictReader(f))
    except OSError as e:
        raise DataFormatError(f"Cannot read {path}: {e}")
    except json.JSONDecodeError as e:
        raise DataFormatError(f"Invalid JSON in {path}: {e}")
    except UnicodeDecodeError as e:
        raise DataFormatError(f"{path} is not valid UTF-8: {e}")

    if not isinstance(rows, list):
        raise DataFormatError(f"{path} must contain a list of bars")

    return [Bar.from_dict(row) for row in rows]


def build_rows(bars: List[Bar], period: int, std_mult: float, intraday: Optional[int]):
    """Compute indicators and return (rows, snapshot) ready for output."""
    obv_series = compute_obv(bars)
    series, snapshot = compute_bollinger(bars, period=period, std_mult=std_mult)

    if intraday is None:
        record = IntradayRecord(mid_prices=[bar.mid_price for bar in bars])
    else:
        tail = bars[-intraday:] if intraday > 0 else []
        record = IntradayRecord(mid_prices=[bar.mid_price for bar in tail])

    align_intraday_signals(record, obv_series, series)

    shown = bars[len(bars) - len(record.obv_values):]
    rows = []
    for i, bar in enumerate(shown):
        rows.append({
            "timestamp": bar.timestamp,
            "close": bar.close,
            "obv": record.obv_values[i],
            "bb_upper": record.bollinger_upper[i],
            "bb_middle": record.bollinger_middle[i],
            "bb_lower": record.bollinger_lower[i],
        })
    return rows, snapshot


def format_output(rows: List[Dict[str, Any]], snapshot: BollingerSnapshot, format_type: str = "table") -> None:
    """
    Format and display indicator rows.

    Args:
        rows: Row dictionaries from build_rows
        snapshot: Latest Bollinger snapshot
        format_type: Output format ('table', 'csv', 'json')
    """
    if format_type == "table":
        print("\n" + "=" * 100)
        print(f"{'Timestamp':<20} {'Close':>12} {'OBV':>18} {'BB Upper':>14} {'BB Middle':>14} {'BB Lower':>14}")
        print("=" * 100)

        for row in rows:
            timestamp_str = row["timestamp"].strftime("%Y-%m-%d %H:%M:%S")
            print(
                f"{timestamp_str:<20} "
                f"{row['close']:>12.4f} "
                f"{row['obv']:>18.2f} "
                f"{row['bb_upper']:>14.4f} "
                f"{row['bb_middle']:>14.4f} "
                f"{row['bb_lower']:>14.4f}"
            )

        print("=" * 100)
        if snapshot.is_empty:
            print("Latest: insufficient data for Bollinger Bands")
        else:
            print(
                f"Latest: middle={snapshot.middle:.4f} upper={snapshot.upper:.4f} "
                f"lower={snapshot.lower:.4f} bandwidth={snapshot.bandwidth:.4f} "
                f"z={snapshot.z_score:.4f}"
            )

    elif format_type == "csv":
        print("timestamp,close,obv,bb_upper,bb_middle,bb_lower")
        for row in rows:
            timestamp_str = row["timestamp"].strftime("%Y-%m-%d %H:%M:%S")
            print(
                f"{timestamp_str},"
                f"{row['close']},"
                f"{row['obv']},"
                f"{row['bb_upper']},"
                f"{row['bb_middle']},"
                f"{row['bb_lower']}"
            )

    elif format_type == "json":
        output = {
            "bars": [
                {**row, "timestamp": row["timestamp"].isoformat()}
                for row in rows
            ],
            "snapshot": snapshot.to_dict(),
        }
        print(json.dumps(output, indent=2))


def main(argv: Optional[List[str]] = None) -> int:
    """Main function."""
    try:
        config = get_config()
    except ConfigurationError as e:
        # Logging settings come from the same config, so fall back to defaults
        setup_logger("candlesignals").error(f"✗ {e}")
        return 1

    parser = argparse.ArgumentParser(
        prog="candlesignals",
        description="Compute OBV and Bollinger Bands for a bar file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full series as a table
  candlesignals --input bars.csv

  # 10-bar Bollinger window, last 30 bars as JSON
  candlesignals --input bars.json --period 10 --intraday 30 --format json
        """,
    )

    parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Bar file (.json array of bars or .csv with timestamp,open,high,low,close,volume)",
    )

    parser.add_argument(
        "--period",
        type=int,
        default=config.indicators.bollinger_period,
        help=f"Bollinger window (default: {config.indicators.bollinger_period})",
    )

    parser.add_argument(
        "--std-mult",
        type=float,
        default=config.indicators.bollinger_std_mult,
        help=f"Bollinger band multiplier (default: {config.indicators.bollinger_std_mult})",
    )

    parser.add_argument(
        "--intraday",
        type=int,
        help="Only show the most recent N bars, aligned as an intraday record",
    )

    parser.add_argument(
        "--format",
        type=str,
        choices=["table", "csv", "json"],
        default="table",
        help="Output format (default: table)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        help=f"Logging level (default: {config.log_level})",
    )

    args = parser.parse_args(argv)

    if args.intraday is not None and args.intraday < 0:
        parser.error("--intraday must be >= 0")

    logger = setup_logger("candlesignals", log_level=args.log_level, log_file=config.log_file)

    try:
        bars = load_bars(args.input)
        logger.debug(f"Loaded {len(bars)} bars from {args.input}")
        rows, snapshot = build_rows(bars, args.period, args.std_mult, args.intraday)
    except CandleSignalsError as e:
        logger.error(f"✗ {e}")
        return 1

    format_output(rows, snapshot, format_type=args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main())
