"""Shared utilities for stock-data providers."""
import math
from datetime import date

from stock_data_agg.schemas.stock import NOT_AVAILABLE, ZERO


# Fixed English labels; strftime("%b") would follow the process locale.
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def normalize_stock_symbol(symbol: str) -> str:
    """Normalize a stock symbol (trimmed, uppercase)."""
    return symbol.strip().upper()


def parse_lenient(value: object) -> float:
    """Parse a numeric string; blank, None, garbage, NaN or infinity become 0.0. Never raises."""
    if value is None:
        return 0.0
    try:
        result = float(str(value).strip())
    except ValueError:
        return 0.0
    return result if math.isfinite(result) else 0.0


def parse_percent(value: str | None) -> float:
    """Parse a percent string such as "0.79%" or "0.79" leniently."""
    if value is None:
        return 0.0
    return parse_lenient(value.strip().rstrip("%"))


def ensure_percent_suffix(value: str | None) -> str:
    """Return value with exactly one trailing '%'; missing values become "0%"."""
    text = (value or "").strip().rstrip("%").strip()
    return f"{text or ZERO}%"


def first_non_blank(*candidates: str | None) -> str:
    """Return the first candidate that is not None or whitespace; "" if none."""
    for candidate in candidates:
        if candidate is not None and candidate.strip():
            return candidate
    return ""


def or_default(value: str | None, default: str = ZERO) -> str:
    """Return value unchanged unless it is None or blank."""
    return value if value is not None and value.strip() else default


def month_label(raw: str) -> str:
    """Three-letter month of the ISO date prefix of raw; raw itself if unparsable."""
    try:
        return MONTH_ABBREVIATIONS[date.fromisoformat(raw[:10]).month - 1]
    except (TypeError, ValueError):
        return raw
