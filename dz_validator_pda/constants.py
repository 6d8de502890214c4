"""Constants for validator deposit PDA derivation and funding."""

# Revenue distribution program that owns validator deposit accounts
REVENUE_DISTRIBUTION_PROGRAM_ID = "dzrevZC94tBLwuHw1dyynZxaXTWyp7yocsinyEVPtt4"

# Seed prefix for validator deposit PDAs
SEED_SOLANA_VALIDATOR_DEPOSIT = b"solana_validator_deposit"

# Lamports per SOL
LAMPORTS_PER_SOL = 1_000_000_000

# Submission settings
DEFAULT_MAX_RETRIES = 3
DEFAULT_RPC_TIMEOUT_SECONDS = 10

# CLI operations
OP_PDA_ADDRESS = "pda-address"
OP_PDA_BALANCE = "pda-balance"
OP_PDA_FUND_ADDRESS = "pda-fund-address"
SUPPORTED_OPERATIONS = (OP_PDA_ADDRESS, OP_PDA_BALANCE, OP_PDA_FUND_ADDRESS)

# Base58 alphabet (no 0, O, I, l)
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
PUBKEY_LENGTH = 32

# Cluster names
SOLANA_MAINNET = "mainnet-beta"
SOLANA_DEVNET = "devnet"
SOLANA_TESTNET = "testnet"
DEFAULT_NETWORK = SOLANA_MAINNET

NETWORK_CONFIGS = {
    SOLANA_MAINNET: {"rpc_url": "https://api.mainnet-beta.solana.com"},
    SOLANA_DEVNET: {"rpc_url": "https://api.devnet.solana.com"},
    SOLANA_TESTNET: {"rpc_url": "https://api.testnet.solana.com"},
}

# Network aliases accepted on the command line
NETWORK_ALIASES = {
    "mainnet": SOLANA_MAINNET,
    "m": SOLANA_MAINNET,
    "d": SOLANA_DEVNET,
    "t": SOLANA_TESTNET,
}

# Environment variables
ENV_RPC_URL = "SOLANA_RPC_URL"
ENV_PROGRAM_ID = "DZ_REVENUE_DISTRIBUTION_PROGRAM_ID"
ENV_LOG_LEVEL = "LOG_LEVEL"

# Error codes
# Validation
ERR_INVALID_OPERATION = "invalid_operation"
ERR_INVALID_PUBKEY = "invalid_pubkey_format"
ERR_INVALID_AMOUNT = "invalid_amount"
ERR_INVALID_KEYPAIR = "invalid_keypair"

# Client
ERR_CLIENT = "client_error"

# Funding
ERR_FUNDING_CANCELLED = "funding_cancelled"
ERR_VALIDATOR_NOT_IN_GOSSIP = "funding_cancelled_validator_not_in_gossip"
ERR_GOSSIP_CHECK_FAILED = "funding_cancelled_gossip_check_failed"
ERR_SUBMISSION_FAILED = "submission_failed"
