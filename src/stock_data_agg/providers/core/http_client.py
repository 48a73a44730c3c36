"""Outbound JSON transport shared by the REST-based stock providers."""
import logging
import os
from collections.abc import Callable
from typing import Any

import httpx

from stock_data_agg.providers.core.exceptions import TransportError
from stock_data_agg.providers.core.series import first_wins

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0

# (payload, operation, symbol) -> None; raises a ProviderError on embedded error signals.
PayloadValidator = Callable[[Any, str, str], None]


def _default_timeout() -> float:
    return float(os.getenv("HTTP_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS)))


class JsonApiClient:
    """Thin wrapper over httpx.AsyncClient that performs GETs and decodes JSON.

    The api key is appended to every request as a query parameter. Every
    decoded body is passed through the provider's payload validator before it
    is returned, so embedded error signals surface as typed errors ahead of
    any structural parsing.

    One instance is shared across requests; httpx.AsyncClient is safe for
    concurrent use.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        validator: PayloadValidator | None = None,
        api_key_param: str = "apikey",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Provider base URL (e.g. "https://api.twelvedata.com").
            api_key: Provider API key, sent as `api_key_param`.
            validator: Hook that inspects decoded bodies for embedded errors.
            api_key_param: Query parameter name for the key.
            timeout: Request timeout in seconds. Defaults to HTTP_TIMEOUT_SECONDS env var.
            transport: Optional httpx transport (tests use httpx.MockTransport).
        """
        self._api_key = api_key
        self._api_key_param = api_key_param
        self._validator = validator
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"Accept": "application/json"},
            timeout=timeout if timeout is not None else _default_timeout(),
            transport=transport,
        )

    async def get_json(
        self,
        path: str,
        *,
        operation: str,
        symbol: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """GET path with params (+ api key) and return the validated JSON body.

        Raises:
            TransportError: Network failure, timeout, non-2xx status or invalid JSON.
            ProviderError: Whatever the validator raises for embedded error payloads.
        """
        query = dict(params or {}) | {self._api_key_param: self._api_key}
        try:
            response = await self._client.get(path, params=query)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise TransportError(
                operation, symbol, f"{operation} request timed out for '{symbol}'", timeout=True
            ) from e
        except httpx.HTTPStatusError as e:
            raise TransportError(
                operation,
                symbol,
                f"{operation} request for '{symbol}' failed with status {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(
                operation, symbol, f"{operation} request for '{symbol}' failed: {e}"
            ) from e

        try:
            # Duplicate keys keep their first occurrence (json.loads keeps the last).
            payload = response.json(object_pairs_hook=first_wins)
        except ValueError as e:
            raise TransportError(
                operation, symbol, f"Malformed JSON in {operation} response for '{symbol}'"
            ) from e

        if self._validator is not None:
            self._validator(payload, operation, symbol)
        logger.debug("%s %s for %s ok", operation, path, symbol)
        return payload

    async def aclose(self) -> None:
        """Close the underlying httpx client."""
        await self._client.aclose()
