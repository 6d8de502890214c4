"""Types for validator deposit derivation and funding."""

from dataclasses import dataclass
from enum import Enum

from solders.pubkey import Pubkey  # type: ignore

from .constants import (
    REVENUE_DISTRIBUTION_PROGRAM_ID,
    SEED_SOLANA_VALIDATOR_DEPOSIT,
)


@dataclass(frozen=True)
class DerivationConfig:
    """Namespace for deposit PDA derivation."""

    program_id: Pubkey
    seed: bytes = SEED_SOLANA_VALIDATOR_DEPOSIT

    def validate(self) -> None:
        if not self.seed:
            raise ValueError("Derivation seed cannot be empty")
        if len(self.seed) > 32:
            raise ValueError(f"Derivation seed must be at most 32 bytes, got {len(self.seed)}")

    @classmethod
    def from_program_id(cls, program_id: str, seed: bytes = SEED_SOLANA_VALIDATOR_DEPOSIT) -> "DerivationConfig":
        return cls(program_id=Pubkey.from_string(program_id), seed=seed)


DEFAULT_DERIVATION_CONFIG = DerivationConfig.from_program_id(REVENUE_DISTRIBUTION_PROGRAM_ID)


@dataclass(frozen=True)
class DerivedAddress:
    """A validator deposit PDA and the bump seed that produced it."""

    address: Pubkey
    bump: int  # 0-255
    validator: Pubkey

    def __str__(self) -> str:
        return str(self.address)


class LivenessStatus(Enum):
    PRESENT = "present"
    ABSENT = "absent"
    UNKNOWN = "unknown"


class FundingDecision(Enum):
    PROCEED = "proceed"
    CANCEL = "cancel"
    CANCEL_ON_ERROR = "cancel_on_error"

    @property
    def is_cancel(self) -> bool:
        return self is not FundingDecision.PROCEED


@dataclass(frozen=True)
class LivenessResult:
    """Outcome of a gossip membership lookup."""

    status: LivenessStatus
    identity: Pubkey
    error: str | None = None


@dataclass(frozen=True)
class PdaBalance:
    """Balance of a validator deposit PDA."""

    deposit: DerivedAddress
    lamports: int


@dataclass(frozen=True)
class FundingReceipt:
    """Result of a submitted deposit transfer."""

    signature: str
    validator: Pubkey
    destination: Pubkey
    lamports: int
