"""Utility functions for identity parsing, amounts and network selection."""

from decimal import Decimal, InvalidOperation

import base58  # type: ignore[import-untyped]
from solders.pubkey import Pubkey  # type: ignore

from .constants import (
    BASE58_ALPHABET,
    ERR_INVALID_AMOUNT,
    ERR_INVALID_PUBKEY,
    LAMPORTS_PER_SOL,
    NETWORK_ALIASES,
    NETWORK_CONFIGS,
    PUBKEY_LENGTH,
)
from .errors import InvalidAmount, ValidationError

MAX_LAMPORTS = 2**64 - 1


def parse_pubkey(address: str) -> Pubkey:
    """Parse a base58 Solana public key.

    Args:
        address: Base58 encoded 32-byte public key.

    Returns:
        The parsed Pubkey.

    Raises:
        ValidationError: If the string is empty, contains whitespace or
            characters outside the base58 alphabet, or does not decode
            to exactly 32 bytes.
    """
    if not address or not address.strip():
        raise ValidationError("Invalid pubkey format: empty string", code=ERR_INVALID_PUBKEY)

    if any(c.isspace() for c in address):
        raise ValidationError("Invalid pubkey format: contains whitespace", code=ERR_INVALID_PUBKEY)

    for c in address:
        if c not in BASE58_ALPHABET:
            raise ValidationError(
                f"Invalid pubkey format: invalid base58 character {c!r}",
                code=ERR_INVALID_PUBKEY,
            )

    raw = base58.b58decode(address)
    if len(raw) != PUBKEY_LENGTH:
        raise ValidationError(
            f"Invalid pubkey format: expected {PUBKEY_LENGTH} bytes, got {len(raw)}",
            code=ERR_INVALID_PUBKEY,
        )

    return Pubkey.from_bytes(raw)


def parse_amount(amount: str) -> Decimal:
    """Parse a user supplied SOL amount.

    Raises:
        ValidationError: If the amount is not a finite, strictly positive decimal.
    """
    text = (amount or "").strip()
    if not text:
        raise ValidationError("Invalid amount: amount cannot be empty", code=ERR_INVALID_AMOUNT)

    try:
        value = Decimal(text)
    except InvalidOperation:
        raise ValidationError(f"Invalid amount: {amount!r} is not a number", code=ERR_INVALID_AMOUNT)

    if not value.is_finite():
        raise ValidationError(f"Invalid amount: {amount!r} is not a finite number", code=ERR_INVALID_AMOUNT)
    if value <= 0:
        raise ValidationError(f"Invalid amount: {amount} must be greater than zero", code=ERR_INVALID_AMOUNT)

    return value


def sol_to_lamports(amount: Decimal | int | str) -> int:
    """Convert SOL to lamports, truncating digits below one lamport.

    Raises:
        InvalidAmount: If the result is not a positive u64.
    """
    if not isinstance(amount, Decimal):
        try:
            amount = Decimal(str(amount))
        except InvalidOperation:
            raise InvalidAmount(f"Invalid amount: {amount!r} is not a number")

    if not amount.is_finite():
        raise InvalidAmount(f"Invalid amount: {amount} is not a finite number")

    lamports = int(amount * LAMPORTS_PER_SOL)
    if lamports <= 0:
        raise InvalidAmount(f"Invalid amount: {amount} SOL is less than 1 lamport")
    if lamports > MAX_LAMPORTS:
        raise InvalidAmount(f"Invalid amount: {amount} SOL exceeds the maximum transferable amount")

    return lamports


def format_sol(lamports: int) -> str:
    """Format a lamport amount as SOL without trailing zeros."""
    value = (Decimal(lamports) / LAMPORTS_PER_SOL).normalize()
    return format(value, "f")


def normalize_network(network: str) -> str:
    """Normalize a cluster name or alias (e.g. 'mainnet', 'd') to its canonical name."""
    name = (network or "").strip().lower()
    name = NETWORK_ALIASES.get(name, name)
    if name not in NETWORK_CONFIGS:
        raise ValueError(f"Unknown Solana network: {network}")
    return name


def get_rpc_url(network: str, custom_url: str | None = None) -> str:
    """Get the RPC URL for a Solana cluster."""
    if custom_url:
        return custom_url
    return NETWORK_CONFIGS[normalize_network(network)]["rpc_url"]
