"""Domain concept for mapping provider exceptions to HTTP responses."""
from dataclasses import dataclass

from fastapi import HTTPException

from stock_data_agg.providers.core.exceptions import (MissingFieldError,
                                                      ProviderError,
                                                      RateLimitedError,
                                                      TransportError,
                                                      UpstreamDataError)


@dataclass(frozen=True)
class ProviderErrorMapper:
    """Maps provider exceptions to HTTP (status_code, detail).

    Inject this into services to centralize error-to-HTTP mapping with the
    resource and upstream API names used in response details.
    """

    resource_name: str = "Resource"
    api_name: str = "API"

    def _not_found(self, symbol: str | None) -> str:
        if symbol is None:
            return f"{self.resource_name} not found"
        return f"{self.resource_name} '{symbol}' not found"

    def to_http(
        self,
        exc: Exception,
        symbol: str | None = None,
    ) -> tuple[int, str]:
        """Map a provider exception to (status_code, detail) for HTTP responses.

        Args:
            exc: The exception raised by the provider or service.
            symbol: Optional symbol to include in detail (e.g. "AAPL").

        Returns:
            (status_code, detail) suitable for HTTPException(status_code=..., detail=...).
        """
        if isinstance(exc, RateLimitedError):
            return (429, f"{self.api_name} rate limit reached. Please wait and try again.")
        if isinstance(exc, MissingFieldError):
            return (404, self._not_found(symbol))
        if isinstance(exc, UpstreamDataError):
            return (502, f"{self.api_name} error: {exc}")
        if isinstance(exc, TransportError):
            if exc.status_code == 404:
                return (404, self._not_found(symbol))
            if exc.timeout:
                detail = "Request timed out"
                if symbol is not None:
                    detail = f"Request to {self.api_name} timed out for '{symbol}'"
                return (504, detail)
            return (502, f"{self.api_name} error")
        if isinstance(exc, ProviderError):
            return (500, f"{self.api_name} {exc.operation} failed")
        return (500, "Internal server error")

    def raise_http(
        self,
        exc: Exception,
        symbol: str | None = None,
    ) -> None:
        """Map provider exception to HTTP and raise HTTPException. Never returns."""
        status_code, detail = self.to_http(exc, symbol=symbol)
        raise HTTPException(status_code=status_code, detail=detail) from exc
