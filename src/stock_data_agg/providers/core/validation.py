"""Detection of error signals that upstream APIs embed in 200-status bodies."""
from typing import Any

from stock_data_agg.providers.core.exceptions import (RateLimitedError,
                                                      UpstreamDataError)

RATE_LIMIT_KEYS = ("Information", "Note")
ERROR_MESSAGE_KEY = "Error Message"


def check_embedded_signals(payload: Any, operation: str, symbol: str) -> None:
    """Raise for the "Information"/"Note" (rate limit) and "Error Message" markers."""
    if not isinstance(payload, dict):
        return
    for key in RATE_LIMIT_KEYS:
        if key in payload:
            raise RateLimitedError(operation, symbol, str(payload[key]))
    if ERROR_MESSAGE_KEY in payload:
        raise UpstreamDataError(
            operation, symbol, f"Upstream error: {payload[ERROR_MESSAGE_KEY]}"
        )
