"""Execution options flattened into the /swap and /swap-instructions body."""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import Field

from jupiter_swap_api.contracts.base import JupiterModel, Pubkey


class PriorityLevel(str, Enum):
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "veryHigh"


class AutoMultiplier(JupiterModel):
    """Multiply the automatically estimated fee."""

    auto_multiplier: int = Field(..., ge=1)


class JitoTipLamports(JupiterModel):
    """Pay a Jito tip instead of a compute-unit price."""

    jito_tip_lamports: int = Field(..., ge=0)


class PriorityLevelWithMaxLamportsInner(JupiterModel):
    priority_level: PriorityLevel
    max_lamports: int = Field(..., ge=0)


class PriorityLevelWithMaxLamports(JupiterModel):
    """Target a percentile of recent fees, capped at max_lamports."""

    priority_level_with_max_lamports: PriorityLevelWithMaxLamportsInner


PrioritizationFeeLamports = Union[
    int,
    Literal["auto"],
    AutoMultiplier,
    JitoTipLamports,
    PriorityLevelWithMaxLamports,
]

ComputeUnitPriceMicroLamports = Union[int, Literal["auto"]]


class DynamicSlippageSettings(JupiterModel):
    min_bps: Optional[int] = None
    max_bps: Optional[int] = None


class KeyedUiAccount(JupiterModel):
    """Account state injected for simulation, as returned by getAccountInfo."""

    pubkey: Pubkey
    data: list[str]
    owner: Pubkey
    lamports: int
    executable: bool = False
    rent_epoch: Optional[int] = None
    space: Optional[int] = None


class TransactionConfig(JupiterModel):
    """How the service should build the swap transaction."""

    wrap_and_unwrap_sol: bool = Field(default=True, description="Wrap SOL in and unwrap out")
    allow_optimized_wrapped_sol_token_account: bool = False
    fee_account: Optional[Pubkey] = Field(None, description="Token account collecting the platform fee")
    destination_token_account: Optional[Pubkey] = None
    compute_unit_price_micro_lamports: Optional[ComputeUnitPriceMicroLamports] = None
    prioritization_fee_lamports: Optional[PrioritizationFeeLamports] = None
    dynamic_compute_unit_limit: bool = False
    as_legacy_transaction: bool = False
    use_shared_accounts: bool = True
    use_token_ledger: bool = False
    skip_user_accounts_rpc_calls: bool = False
    keyed_ui_accounts: Optional[list[KeyedUiAccount]] = None
    program_authority_id: Optional[int] = None
    dynamic_slippage: Optional[DynamicSlippageSettings] = None
