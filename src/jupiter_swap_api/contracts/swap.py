"""Swap request and response contracts.

The /swap-instructions endpoint answers with a wire shape
(SwapInstructionsResponseInternal) that is reshaped into plain
dataclasses (SwapInstructionsResponse) before it reaches callers.
"""

import copy
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from pydantic import Field, model_serializer

from jupiter_swap_api.contracts.base import Base64Bytes, JupiterModel, Pubkey
from jupiter_swap_api.contracts.quote import QuoteResponse
from jupiter_swap_api.contracts.transaction_config import TransactionConfig


class SwapRequest(JupiterModel):
    """Body for POST /swap and POST /swap-instructions.

    The config fields are sent at the top level of the body, next to
    userPublicKey and quoteResponse.
    """

    user_public_key: Pubkey = Field(..., description="Wallet that signs the swap")
    quote_response: QuoteResponse
    config: TransactionConfig = Field(default_factory=TransactionConfig)

    @model_serializer(mode="wrap")
    def _flatten_config(self, handler):
        data = handler(self)
        data.update(data.pop("config", None) or {})
        return data


class UiSimulationError(JupiterModel):
    error_code: Optional[str] = None
    error: Optional[str] = None


class DynamicSlippageReport(JupiterModel):
    slippage_bps: Optional[int] = None
    other_amount: Optional[int] = None
    simulated_incurred_slippage_bps: Optional[int] = None
    amplification_ratio: Optional[Decimal] = None
    category_name: Optional[str] = None
    heuristic_max_slippage_bps: Optional[int] = None


class SwapResponse(JupiterModel):
    """Serialized, unsigned swap transaction from POST /swap."""

    swap_transaction: Base64Bytes
    last_valid_block_height: int
    prioritization_fee_lamports: int = 0
    compute_unit_limit: int = 0
    prioritization_type: Optional[dict[str, Any]] = None
    dynamic_slippage_report: Optional[DynamicSlippageReport] = None
    simulation_error: Optional[UiSimulationError] = None


# ======================
# Wire shape
# ======================


class AccountMetaInternal(JupiterModel):
    pubkey: Pubkey
    is_signer: bool
    is_writable: bool


class InstructionInternal(JupiterModel):
    program_id: Pubkey
    accounts: list[AccountMetaInternal]
    data: Base64Bytes


class SwapInstructionsResponseInternal(JupiterModel):
    """Literal body of POST /swap-instructions."""

    token_ledger_instruction: Optional[InstructionInternal] = None
    compute_budget_instructions: list[InstructionInternal] = Field(default_factory=list)
    setup_instructions: list[InstructionInternal] = Field(default_factory=list)
    swap_instruction: InstructionInternal
    cleanup_instruction: Optional[InstructionInternal] = None
    other_instructions: list[InstructionInternal] = Field(default_factory=list)
    address_lookup_table_addresses: list[Pubkey] = Field(default_factory=list)
    prioritization_fee_lamports: int = 0
    compute_unit_limit: int = 0
    prioritization_type: Optional[dict[str, Any]] = None
    dynamic_slippage_report: Optional[DynamicSlippageReport] = None
    simulation_error: Optional[UiSimulationError] = None

    def to_public(self) -> "SwapInstructionsResponse":
        return swap_instructions_from_internal(self)


# ======================
# Public shape
# ======================


@dataclass(frozen=True)
class AccountMeta:
    """An account referenced by an instruction."""

    pubkey: str
    is_signer: bool
    is_writable: bool


@dataclass(frozen=True)
class Instruction:
    """A ready-to-compile instruction with its data already decoded."""

    program_id: str
    accounts: tuple[AccountMeta, ...]
    data: bytes


@dataclass(frozen=True)
class SwapInstructionsResponse:
    """Instructions that make up a swap, for callers assembling their own transaction.

    Instruction order within a transaction is: compute budget, token
    ledger, setup, swap, cleanup. other_instructions are appended by
    the caller as needed.

    Frozen but not hashable: prioritization_type is a dict and the
    report fields are pydantic models.
    """

    __hash__ = None

    swap_instruction: Instruction
    token_ledger_instruction: Optional[Instruction] = None
    compute_budget_instructions: tuple[Instruction, ...] = ()
    setup_instructions: tuple[Instruction, ...] = ()
    cleanup_instruction: Optional[Instruction] = None
    other_instructions: tuple[Instruction, ...] = ()
    address_lookup_table_addresses: tuple[str, ...] = ()
    prioritization_fee_lamports: int = 0
    compute_unit_limit: int = 0
    prioritization_type: Optional[dict[str, Any]] = None
    dynamic_slippage_report: Optional[DynamicSlippageReport] = None
    simulation_error: Optional[UiSimulationError] = None

    @property
    def instructions(self) -> list[Instruction]:
        """All instructions in transaction order, other_instructions excluded."""
        ordered = list(self.compute_budget_instructions)
        if self.token_ledger_instruction is not None:
            ordered.append(self.token_ledger_instruction)
        ordered.extend(self.setup_instructions)
        ordered.append(self.swap_instruction)
        if self.cleanup_instruction is not None:
            ordered.append(self.cleanup_instruction)
        return ordered


def _instruction_from_internal(internal: InstructionInternal) -> Instruction:
    return Instruction(
        program_id=internal.program_id,
        accounts=tuple(
            AccountMeta(
                pubkey=meta.pubkey,
                is_signer=meta.is_signer,
                is_writable=meta.is_writable,
            )
            for meta in internal.accounts
        ),
        data=internal.data,
    )


def _optional_instruction(internal: Optional[InstructionInternal]) -> Optional[Instruction]:
    if internal is None:
        return None
    return _instruction_from_internal(internal)


def _copy_model(model):
    if model is None:
        return None
    return model.model_copy(deep=True)


def swap_instructions_from_internal(
    internal: SwapInstructionsResponseInternal,
) -> SwapInstructionsResponse:
    """Reshape the wire form into the public form.

    Every wire field maps to the public field of the same name; nothing
    is dropped. Mutable values are copied, so the result shares no
    state with the wire model.
    """
    return SwapInstructionsResponse(
        token_ledger_instruction=_optional_instruction(internal.token_ledger_instruction),
        compute_budget_instructions=tuple(
            _instruction_from_internal(ix) for ix in internal.compute_budget_instructions
        ),
        setup_instructions=tuple(
            _instruction_from_internal(ix) for ix in internal.setup_instructions
        ),
        swap_instruction=_instruction_from_internal(internal.swap_instruction),
        cleanup_instruction=_optional_instruction(internal.cleanup_instruction),
        other_instructions=tuple(
            _instruction_from_internal(ix) for ix in internal.other_instructions
        ),
        address_lookup_table_addresses=tuple(internal.address_lookup_table_addresses),
        prioritization_fee_lamports=internal.prioritization_fee_lamports,
        compute_unit_limit=internal.compute_unit_limit,
        prioritization_type=copy.deepcopy(internal.prioritization_type),
        dynamic_slippage_report=_copy_model(internal.dynamic_slippage_report),
        simulation_error=_copy_model(internal.simulation_error),
    )
