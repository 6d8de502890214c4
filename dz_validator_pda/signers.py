"""Signer implementations for funding validator deposits."""

import json
from pathlib import Path
from typing import Protocol

from solders.hash import Hash  # type: ignore
from solders.keypair import Keypair  # type: ignore
from solders.message import Message  # type: ignore
from solders.pubkey import Pubkey  # type: ignore
from solders.transaction import Transaction  # type: ignore

from .constants import ERR_INVALID_KEYPAIR
from .errors import ValidationError


class ClientSvmSigner(Protocol):
    """Protocol for a signer that pays fees and signs a transfer."""

    @property
    def pubkey(self) -> Pubkey:
        """The signer's public key (fee payer and transfer source)."""
        ...

    def sign_transaction(self, message: Message, recent_blockhash: Hash) -> Transaction:
        """Sign a message as its fee payer and sole signer.

        Args:
            message: Message whose payer is this signer.
            recent_blockhash: Blockhash the transaction is valid for.

        Returns:
            The fully signed transaction.
        """
        ...


class KeypairSigner:
    """Signer backed by a local solders Keypair."""

    def __init__(self, keypair: Keypair):
        self._keypair = keypair

    @property
    def pubkey(self) -> Pubkey:
        return self._keypair.pubkey()

    @property
    def address(self) -> str:
        return str(self._keypair.pubkey())

    def sign_transaction(self, message: Message, recent_blockhash: Hash) -> Transaction:
        return Transaction([self._keypair], message, recent_blockhash)

    @classmethod
    def from_bytes(cls, key_bytes: bytes) -> "KeypairSigner":
        return cls(Keypair.from_bytes(key_bytes))

    @classmethod
    def from_file(cls, path: str | Path) -> "KeypairSigner":
        """Load a keypair file in the Solana CLI format (JSON array of 64 bytes).

        Raises:
            ValidationError: If the file is missing or does not hold a keypair.
        """
        path = Path(path).expanduser()
        try:
            with path.open() as f:
                secret = json.load(f)
        except FileNotFoundError:
            raise ValidationError(f"Keypair file not found: {path}", code=ERR_INVALID_KEYPAIR)
        except (OSError, json.JSONDecodeError) as e:
            raise ValidationError(f"Failed to read keypair file {path}: {e}", code=ERR_INVALID_KEYPAIR)

        if not isinstance(secret, list) or len(secret) != 64:
            raise ValidationError(
                f"Invalid keypair file {path}: expected a JSON array of 64 bytes",
                code=ERR_INVALID_KEYPAIR,
            )

        try:
            return cls.from_bytes(bytes(secret))
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid keypair file {path}: {e}", code=ERR_INVALID_KEYPAIR)
