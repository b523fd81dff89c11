"""Request and response contracts for the Jupiter swap API.

Wire models are pydantic models; the reshaped swap-instructions
response is made of plain frozen dataclasses.
"""

from jupiter_swap_api.contracts.quote import (
    PlatformFee,
    QuoteRequest,
    QuoteResponse,
    RoutePlanStep,
    RoutePlanWithMetadata,
    SwapInfo,
    SwapMode,
)
from jupiter_swap_api.contracts.swap import (
    AccountMeta,
    AccountMetaInternal,
    DynamicSlippageReport,
    Instruction,
    InstructionInternal,
    SwapInstructionsResponse,
    SwapInstructionsResponseInternal,
    SwapRequest,
    SwapResponse,
    UiSimulationError,
    swap_instructions_from_internal,
)
from jupiter_swap_api.contracts.transaction_config import (
    AutoMultiplier,
    ComputeUnitPriceMicroLamports,
    DynamicSlippageSettings,
    JitoTipLamports,
    KeyedUiAccount,
    PrioritizationFeeLamports,
    PriorityLevel,
    PriorityLevelWithMaxLamports,
    PriorityLevelWithMaxLamportsInner,
    TransactionConfig,
)

__all__ = [
    # Quote contracts
    "PlatformFee",
    "QuoteRequest",
    "QuoteResponse",
    "RoutePlanStep",
    "RoutePlanWithMetadata",
    "SwapInfo",
    "SwapMode",
    # Swap contracts
    "AccountMeta",
    "AccountMetaInternal",
    "DynamicSlippageReport",
    "Instruction",
    "InstructionInternal",
    "SwapInstructionsResponse",
    "SwapInstructionsResponseInternal",
    "SwapRequest",
    "SwapResponse",
    "UiSimulationError",
    "swap_instructions_from_internal",
    # Transaction config
    "AutoMultiplier",
    "ComputeUnitPriceMicroLamports",
    "DynamicSlippageSettings",
    "JitoTipLamports",
    "KeyedUiAccount",
    "PrioritizationFeeLamports",
    "PriorityLevel",
    "PriorityLevelWithMaxLamports",
    "PriorityLevelWithMaxLamportsInner",
    "TransactionConfig",
]
