"""Async client for the Jupiter swap aggregator API.

API docs: https://station.jup.ag/docs/apis/swap-api

Usage:
    async with JupiterSwapApiClient.default() as client:
        quote = await client.quote(QuoteRequest(
            input_mint=NATIVE_MINT,
            output_mint=USDC_MINT,
            amount=10_000_000,
        ))
        swap = await client.swap(SwapRequest(
            user_public_key=wallet,
            quote_response=quote,
        ))
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from jupiter_swap_api.config import DEFAULT_BASE_PATH, Settings, get_settings
from jupiter_swap_api.contracts import (
    QuoteRequest,
    QuoteResponse,
    SwapInstructionsResponse,
    SwapInstructionsResponseInternal,
    SwapRequest,
    SwapResponse,
    swap_instructions_from_internal,
)
from jupiter_swap_api.decoding import check_status_code_and_deserialize
from jupiter_swap_api.errors import TransportError

logger = logging.getLogger(__name__)

BASE_PATH = DEFAULT_BASE_PATH


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration: API root plus the shared HTTP client."""

    base_path: str
    client: httpx.AsyncClient

    def url(self, suffix: str) -> str:
        return f"{self.base_path}{suffix}"


class JupiterSwapApiClient:
    """Quote, swap and swap-instructions calls against one API root.

    Holds no mutable state, so one instance can serve concurrent calls.
    Errors are raised as TransportError, StatusError or DecodeError and
    never retried.
    """

    def __init__(self, base_path: str, client: httpx.AsyncClient):
        """Initialize the client.

        Args:
            base_path: API root, e.g. "https://quote-api.jup.ag/v6"
            client: Shared HTTP client; its timeouts apply to every call
        """
        if not base_path:
            raise ValueError("base_path must not be empty")

        self._config = ClientConfig(base_path=base_path.rstrip("/"), client=client)

    @classmethod
    def default(cls) -> "JupiterSwapApiClient":
        """Canonical API root with a fresh default HTTP client.

        Redirects are followed, so a moved endpoint still resolves.
        """
        return cls(BASE_PATH, httpx.AsyncClient(follow_redirects=True))

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "JupiterSwapApiClient":
        """Build from Settings (JUPITER_* environment variables by default)."""
        settings = settings or get_settings()
        client = httpx.AsyncClient(
            timeout=settings.timeout,
            headers=settings.get_headers(),
            follow_redirects=True,
        )
        return cls(settings.base_path, client)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_path(self) -> str:
        return self._config.base_path

    @property
    def client(self) -> httpx.AsyncClient:
        return self._config.client

    async def _send(self, method: str, suffix: str, **kwargs: Any) -> httpx.Response:
        url = self._config.url(suffix)
        logger.debug(f"{method} {url}")
        try:
            return await self._config.client.request(method, url, **kwargs)
        except httpx.RequestError as e:
            raise TransportError(e, method=method, url=url) from e

    async def quote(self, quote_request: QuoteRequest) -> QuoteResponse:
        """Get a priced route.

        Args:
            quote_request: Sent as the query string of GET /quote

        Returns:
            QuoteResponse, to be passed unchanged into a SwapRequest
        """
        response = await self._send(
            "GET", "/quote", params=quote_request.to_query_params()
        )
        return await check_status_code_and_deserialize(response, QuoteResponse)

    async def swap(self, swap_request: SwapRequest) -> SwapResponse:
        """Get a serialized, unsigned swap transaction for a quote."""
        response = await self._send("POST", "/swap", json=swap_request.to_wire())
        return await check_status_code_and_deserialize(response, SwapResponse)

    async def swap_instructions(self, swap_request: SwapRequest) -> SwapInstructionsResponse:
        """Get the individual instructions of a swap instead of a whole transaction."""
        response = await self._send(
            "POST", "/swap-instructions", json=swap_request.to_wire()
        )
        internal = await check_status_code_and_deserialize(
            response, SwapInstructionsResponseInternal
        )
        return swap_instructions_from_internal(internal)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._config.client.aclose()

    async def __aenter__(self) -> "JupiterSwapApiClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_path={self.base_path!r})"
