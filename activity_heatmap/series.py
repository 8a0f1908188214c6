"""Building day series from raw event timestamps."""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Tuple

import pandas as pd

from .errors import InvalidInput
from .settings import DAYS_PER_WEEK, DEFAULT_CHART_DAYS

SECONDS_PER_DAY = 24 * 60 * 60


def daily_counts(timestamps: Iterable[int], now: int, num_days: int = DEFAULT_CHART_DAYS) -> List[int]:
    """Count events per day over the ``num_days`` ending at ``now``.

    Days are measured backwards from ``now`` in whole 24h periods. Events
    in the future count for today, older ones fall out of the window. The
    result is oldest first.
    """
    if num_days <= 0:
        raise InvalidInput(f"num_days must be positive, got {num_days}")

    events = pd.Series(list(timestamps), dtype="int64")
    days_ago = ((now - events) // SECONDS_PER_DAY).clip(lower=0)
    days_ago = days_ago[days_ago < num_days]

    counts = days_ago.value_counts().reindex(range(num_days), fill_value=0)
    return counts.iloc[::-1].astype(int).tolist()


def weekday_offset(first_day: date) -> int:
    # Sunday is row 0
    return (first_day.weekday() + 1) % DAYS_PER_WEEK


def series_for_window(
    timestamps: Iterable[int], now: int, num_days: int = DEFAULT_CHART_DAYS
) -> Tuple[List[int], int]:
    """Day counts and the weekday row of the first day, for a window ending at ``now`` (UTC)."""
    days = daily_counts(timestamps, now, num_days)
    first = pd.Timestamp(now, unit="s", tz="UTC") - pd.Timedelta(days=num_days - 1)
    return days, weekday_offset(first.date())
