"""Price-series derivation shared by the summary normalizers."""
from collections.abc import Iterable

from stock_data_agg.providers.core.utils import month_label, parse_lenient
from stock_data_agg.schemas import PricePoint

SUMMARY_MAX_POINTS = 12


def first_wins(items: Iterable[tuple[str, object]]) -> dict[str, object]:
    """Build an insertion-ordered dict, keeping the first value seen for each key."""
    merged: dict[str, object] = {}
    for key, value in items:
        merged.setdefault(key, value)
    return merged


def build_price_series(
    closes: Iterable[tuple[str, str | None]],
    max_points: int = SUMMARY_MAX_POINTS,
) -> list[PricePoint]:
    """Turn (date, close) pairs into the summary's price series.

    Duplicate dates keep their first occurrence; points are sorted ascending by
    date, non-positive closes are dropped and only the most recent max_points
    remain.
    """
    by_date = first_wins(closes)
    points = [
        PricePoint(label=month_label(day), value=parse_lenient(close))
        for day, close in sorted(by_date.items(), key=lambda item: item[0])
    ]
    valid = [p for p in points if p.value > 0]
    return valid[-max_points:]


def series_stats(series: list[PricePoint]) -> tuple[float, float, float]:
    """Return (week_52_high, week_52_low, year_start_price); zeros for an empty series."""
    if not series:
        return 0.0, 0.0, 0.0
    values = [p.value for p in series]
    return max(values), min(values), series[0].value
