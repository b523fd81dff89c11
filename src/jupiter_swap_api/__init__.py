"""Async client for the Jupiter swap aggregator API."""

from jupiter_swap_api.client import BASE_PATH, ClientConfig, JupiterSwapApiClient
from jupiter_swap_api.config import Settings, get_settings
from jupiter_swap_api.contracts import (
    Instruction,
    QuoteRequest,
    QuoteResponse,
    SwapInstructionsResponse,
    SwapInstructionsResponseInternal,
    SwapMode,
    SwapRequest,
    SwapResponse,
    TransactionConfig,
    swap_instructions_from_internal,
)
from jupiter_swap_api.decoding import ResponseLike, check_status_code_and_deserialize
from jupiter_swap_api.errors import (
    DecodeError,
    JupiterSwapApiError,
    StatusError,
    TransportError,
)

__all__ = [
    # Client
    "BASE_PATH",
    "ClientConfig",
    "JupiterSwapApiClient",
    "Settings",
    "get_settings",
    # Contracts
    "Instruction",
    "QuoteRequest",
    "QuoteResponse",
    "SwapInstructionsResponse",
    "SwapInstructionsResponseInternal",
    "SwapMode",
    "SwapRequest",
    "SwapResponse",
    "TransactionConfig",
    "swap_instructions_from_internal",
    # Decoding
    "ResponseLike",
    "check_status_code_and_deserialize",
    # Errors
    "DecodeError",
    "JupiterSwapApiError",
    "StatusError",
    "TransportError",
]
