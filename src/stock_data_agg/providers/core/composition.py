"""Concurrent multi-call composition with per-branch failure policy."""
import asyncio
import logging
from collections.abc import Awaitable, Iterable
from typing import Any

from stock_data_agg.providers.core.exceptions import (ProviderError,
                                                      RateLimitedError,
                                                      TransportError)

logger = logging.getLogger(__name__)

# Error kinds that abort a summary from any branch.
SUMMARY_FATAL_ERRORS: tuple[type[ProviderError], ...] = (TransportError, RateLimitedError)


def _abort(exc: ProviderError, operation: str, symbol: str) -> ProviderError:
    """Re-create a fatal branch error under the composite operation's name."""
    message = f"{operation} for '{symbol}' aborted: {exc}"
    if isinstance(exc, TransportError):
        return TransportError(
            operation, symbol, message, status_code=exc.status_code, timeout=exc.timeout
        )
    return type(exc)(operation, symbol, message)


async def gather_branches(
    operation: str,
    symbol: str,
    calls: dict[str, Awaitable[Any]],
    *,
    required: Iterable[str] = (),
    fatal: tuple[type[ProviderError], ...] = (),
) -> dict[str, Any]:
    """Run independent upstream calls concurrently and resolve each branch.

    Args:
        operation: Composite operation name (e.g. "summary"), used in logs and errors.
        symbol: Symbol the calls are for.
        calls: Branch name -> awaitable returning a provider model.
        required: Branches whose ProviderError propagates unchanged.
        fatal: Error kinds that abort the whole operation from any branch,
            re-raised under `operation` and chained to the original.

    Returns:
        Branch name -> result, or None for branches whose failure was absorbed.
    """
    required = set(required)
    results = await asyncio.gather(*calls.values(), return_exceptions=True)
    resolved: dict[str, Any] = {}
    for name, result in zip(calls, results):
        if not isinstance(result, BaseException):
            resolved[name] = result
            continue
        if not isinstance(result, ProviderError) or name in required:
            raise result
        if isinstance(result, fatal):
            raise _abort(result, operation, symbol) from result
        logger.warning(
            "%s for %s: %s branch unavailable, using sentinels: %s",
            operation, symbol, name, result,
        )
        resolved[name] = None
    return resolved
