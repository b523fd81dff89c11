"""Quote request and response contracts."""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import Field

from jupiter_swap_api.contracts.base import AmountStr, JupiterModel, Pubkey


class SwapMode(str, Enum):
    """Which side of the swap is fixed."""

    EXACT_IN = "ExactIn"
    EXACT_OUT = "ExactOut"


class QuoteRequest(JupiterModel):
    """Parameters for GET /quote, sent as the query string."""

    input_mint: Pubkey = Field(..., description="Mint of the token to sell")
    output_mint: Pubkey = Field(..., description="Mint of the token to buy")
    amount: int = Field(..., ge=0, description="Raw amount (smallest units)")
    swap_mode: Optional[SwapMode] = Field(None, description="ExactIn or ExactOut")
    slippage_bps: int = Field(default=50, ge=0, le=10000, description="Slippage in bps")
    auto_slippage: Optional[bool] = None
    max_auto_slippage_bps: Optional[int] = None
    compute_auto_slippage: bool = False
    auto_slippage_collision_usd_value: Optional[int] = None
    minimize_slippage: Optional[bool] = None
    platform_fee_bps: Optional[int] = Field(None, description="Platform fee in bps")
    dexes: Optional[list[str]] = Field(None, description="Only route through these dexes")
    exclude_dexes: Optional[list[str]] = Field(None, description="Never route through these dexes")
    only_direct_routes: Optional[bool] = None
    as_legacy_transaction: Optional[bool] = None
    restrict_intermediate_tokens: Optional[bool] = None
    max_accounts: Optional[int] = Field(None, description="Cap on accounts used by the route")
    quote_type: Optional[str] = None
    prefer_liquid_dexes: Optional[bool] = None
    quote_args: dict[str, str] = Field(
        default_factory=dict,
        description="Extra query parameters passed through verbatim",
    )

    def to_query_params(self) -> dict[str, str]:
        """Flatten into query-string pairs.

        Unset options are omitted, lists are comma-joined and
        quote_args are merged in at the top level.
        """
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        extra = data.pop("quoteArgs", {})

        params: dict[str, str] = {}
        for key, value in data.items():
            if isinstance(value, bool):
                params[key] = "true" if value else "false"
            elif isinstance(value, list):
                params[key] = ",".join(value)
            else:
                params[key] = str(value)

        params.update(extra)
        return params


class SwapInfo(JupiterModel):
    """One hop through a single AMM."""

    amm_key: Pubkey
    label: Optional[str] = None
    input_mint: Pubkey
    output_mint: Pubkey
    in_amount: AmountStr
    out_amount: AmountStr
    fee_amount: AmountStr
    fee_mint: Pubkey


class RoutePlanStep(JupiterModel):
    """A hop plus the share of the input it routes."""

    swap_info: SwapInfo
    percent: int = Field(..., ge=0, le=100)


RoutePlanWithMetadata = list[RoutePlanStep]


class PlatformFee(JupiterModel):
    amount: AmountStr
    fee_bps: int


class QuoteResponse(JupiterModel):
    """Priced route returned by GET /quote.

    Passed back unmodified inside a SwapRequest.
    """

    input_mint: Pubkey
    in_amount: AmountStr
    output_mint: Pubkey
    out_amount: AmountStr
    other_amount_threshold: AmountStr
    swap_mode: SwapMode
    slippage_bps: int
    computed_auto_slippage: Optional[int] = None
    platform_fee: Optional[PlatformFee] = None
    price_impact_pct: Decimal
    route_plan: RoutePlanWithMetadata
    context_slot: int = 0
    time_taken: float = 0.0

    @property
    def labels(self) -> list[str]:
        """AMM labels along the route, in order."""
        return [step.swap_info.label or "Unknown" for step in self.route_plan]
