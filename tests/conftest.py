"""Pytest configuration and fixtures."""

import base64
import json
from typing import AsyncGenerator, Callable

import httpx
import pytest
import pytest_asyncio

from jupiter_swap_api.client import JupiterSwapApiClient

TEST_BASE_PATH = "https://jupiter.test/v6"

NATIVE_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
COMPUTE_BUDGET_PROGRAM = "ComputeBudget111111111111111111111111111111"
JUPITER_PROGRAM = "JUP6LkbZbjS1jKKwapdHNy74zcZ3tLUZoi5QNyVTaV4"
USER_PUBKEY = "11111111111111111111111111111111"


def b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def instruction_payload(program_id: str, data: bytes, accounts: int = 1) -> dict:
    return {
        "programId": program_id,
        "accounts": [
            {
                "pubkey": f"Acct{i}{'1' * 28}",
                "isSigner": i == 0,
                "isWritable": i % 2 == 0,
            }
            for i in range(accounts)
        ],
        "data": b64(data),
    }


@pytest.fixture
def quote_payload() -> dict:
    """A /quote body as returned by the service."""
    return {
        "inputMint": NATIVE_MINT,
        "inAmount": "10000000",
        "outputMint": USDC_MINT,
        "outAmount": "1453012",
        "otherAmountThreshold": "1445747",
        "swapMode": "ExactIn",
        "slippageBps": 50,
        "platformFee": None,
        "priceImpactPct": "0.0001",
        "routePlan": [
            {
                "swapInfo": {
                    "ammKey": "5BKxfWMbmYBAEWvyPZS9esPducUba9GqyMjtLCfbaqyF",
                    "label": "Meteora DLMM",
                    "inputMint": NATIVE_MINT,
                    "outputMint": USDC_MINT,
                    "inAmount": "10000000",
                    "outAmount": "1453012",
                    "feeAmount": "2500",
                    "feeMint": NATIVE_MINT,
                },
                "percent": 100,
            }
        ],
        "contextSlot": 299283763,
        "timeTaken": 0.015,
    }


@pytest.fixture
def swap_payload() -> dict:
    """A /swap body as returned by the service."""
    return {
        "swapTransaction": b64(b"\x01signed-transaction-bytes"),
        "lastValidBlockHeight": 279632475,
        "prioritizationFeeLamports": 9999,
        "computeUnitLimit": 388876,
        "prioritizationType": {
            "computeBudget": {"microLamports": 25715, "estimatedMicroLamports": 785625}
        },
        "dynamicSlippageReport": None,
        "simulationError": None,
    }


@pytest.fixture
def swap_instructions_payload() -> dict:
    """A /swap-instructions body with every optional part present."""
    return {
        "tokenLedgerInstruction": instruction_payload(JUPITER_PROGRAM, b"ledger"),
        "computeBudgetInstructions": [
            instruction_payload(COMPUTE_BUDGET_PROGRAM, b"\x02\x40\x0d\x03\x00", accounts=0),
            instruction_payload(COMPUTE_BUDGET_PROGRAM, b"\x03\x10\x27", accounts=0),
        ],
        "setupInstructions": [instruction_payload(TOKEN_PROGRAM, b"\x01", accounts=4)],
        "swapInstruction": instruction_payload(JUPITER_PROGRAM, b"\xe5\x17\xcb\x97", accounts=6),
        "cleanupInstruction": instruction_payload(TOKEN_PROGRAM, b"\x09", accounts=3),
        "otherInstructions": [instruction_payload(TOKEN_PROGRAM, b"\x0c", accounts=2)],
        "addressLookupTableAddresses": [
            "GxS6FiQ3mNnAar9HGQ6mxP7t6FcwmHkU7peSeQDUHmpN",
            "HsLPzBjqK3SUKQZwHdd2QHVc9cioPrsHNw9GcUDs7WL7",
        ],
        "prioritizationFeeLamports": 9999,
        "computeUnitLimit": 388876,
        "prioritizationType": {"jito": {"lamports": 10000}},
        "dynamicSlippageReport": {
            "slippageBps": 36,
            "otherAmount": 1449000,
            "simulatedIncurredSlippageBps": 2,
            "amplificationRatio": "1.5",
            "categoryName": "solana",
            "heuristicMaxSlippageBps": 300,
        },
        "simulationError": None,
    }


class Recorder:
    """Captures requests seen by a MockTransport."""

    def __init__(self):
        self.requests: list[httpx.Request] = []

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def make_client(recorder: Recorder) -> Callable[..., JupiterSwapApiClient]:
    """Build a client whose transport answers via handler(request)."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> JupiterSwapApiClient:
        def _record(request: httpx.Request) -> httpx.Response:
            recorder.requests.append(request)
            return handler(request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        return JupiterSwapApiClient(TEST_BASE_PATH, http)

    return _make


@pytest_asyncio.fixture
async def routed_client(
    make_client, quote_payload, swap_payload, swap_instructions_payload
) -> AsyncGenerator[JupiterSwapApiClient, None]:
    """Client backed by a fake service that answers all three endpoints."""
    routes = {
        ("GET", "/v6/quote"): quote_payload,
        ("POST", "/v6/swap"): swap_payload,
        ("POST", "/v6/swap-instructions"): swap_instructions_payload,
    }

    def handler(request: httpx.Request) -> httpx.Response:
        payload = routes.get((request.method, request.url.path))
        if payload is None:
            return httpx.Response(404, text="Not Found")
        return httpx.Response(200, json=payload)

    client = make_client(handler)
    yield client
    await client.aclose()
