"""Validator deposit PDAs for the revenue distribution program.

Derives the deposit Program Derived Address of a Solana validator, looks up
its balance, and funds it from a local keypair once the validator is seen
in gossip.
"""

from dz_validator_pda.client import ChainClient, SolanaRpcClient
from dz_validator_pda.constants import (
    LAMPORTS_PER_SOL,
    REVENUE_DISTRIBUTION_PROGRAM_ID,
    SEED_SOLANA_VALIDATOR_DEPOSIT,
)
from dz_validator_pda.errors import (
    ClientError,
    DepositError,
    FundingCancelled,
    FundingError,
    InvalidAmount,
    SubmissionFailed,
    ValidationError,
)
from dz_validator_pda.funding import FundingWorkflow, get_pda_balance
from dz_validator_pda.liveness import LivenessGate, decide
from dz_validator_pda.pda import derive
from dz_validator_pda.signers import ClientSvmSigner, KeypairSigner
from dz_validator_pda.types import (
    DEFAULT_DERIVATION_CONFIG,
    DerivationConfig,
    DerivedAddress,
    FundingDecision,
    FundingReceipt,
    LivenessResult,
    LivenessStatus,
    PdaBalance,
)
from dz_validator_pda.utils import parse_amount, parse_pubkey, sol_to_lamports

__version__ = "0.1.0"

__all__ = [
    # Constants
    "LAMPORTS_PER_SOL",
    "REVENUE_DISTRIBUTION_PROGRAM_ID",
    "SEED_SOLANA_VALIDATOR_DEPOSIT",
    # Types
    "DEFAULT_DERIVATION_CONFIG",
    "DerivationConfig",
    "DerivedAddress",
    "FundingDecision",
    "FundingReceipt",
    "LivenessResult",
    "LivenessStatus",
    "PdaBalance",
    # Derivation
    "derive",
    # Liveness
    "LivenessGate",
    "decide",
    # Funding
    "FundingWorkflow",
    "get_pda_balance",
    # Client and signers
    "ChainClient",
    "SolanaRpcClient",
    "ClientSvmSigner",
    "KeypairSigner",
    # Utils
    "parse_amount",
    "parse_pubkey",
    "sol_to_lamports",
    # Errors
    "DepositError",
    "ValidationError",
    "ClientError",
    "FundingError",
    "FundingCancelled",
    "InvalidAmount",
    "SubmissionFailed",
]
