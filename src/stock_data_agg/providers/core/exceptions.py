"""Typed provider errors shared by every upstream stock-data provider.

Each error carries the operation (e.g. "quote", "summary") and the symbol it
belongs to so the service layer can log and map it without re-parsing messages.
"""


class ProviderError(Exception):
    """Base class for failures raised while fetching or normalizing upstream data."""

    def __init__(self, operation: str, symbol: str | None, message: str) -> None:
        super().__init__(message)
        self.operation = operation
        self.symbol = symbol


class TransportError(ProviderError):
    """Upstream unreachable, non-2xx, timed out, or returned malformed JSON."""

    def __init__(
        self,
        operation: str,
        symbol: str | None,
        message: str,
        *,
        status_code: int | None = None,
        timeout: bool = False,
    ) -> None:
        super().__init__(operation, symbol, message)
        self.status_code = status_code
        self.timeout = timeout


class RateLimitedError(ProviderError):
    """Upstream signalled that the API key is over its request quota."""


class UpstreamDataError(ProviderError):
    """Upstream explicitly reported an error payload for the request."""


class MissingFieldError(ProviderError):
    """Response parsed but lacks a field the normalization step requires."""

    def __init__(self, operation: str, symbol: str | None, field: str) -> None:
        super().__init__(
            operation, symbol, f"Missing '{field}' in {operation} response for '{symbol}'"
        )
        self.field = field
