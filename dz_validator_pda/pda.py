"""PDA derivation for validator deposit accounts."""

import logging

from solders.pubkey import Pubkey  # type: ignore

from .types import DEFAULT_DERIVATION_CONFIG, DerivationConfig, DerivedAddress

logger = logging.getLogger(__name__)


def deposit_seeds(validator_id: Pubkey, config: DerivationConfig = DEFAULT_DERIVATION_CONFIG) -> list[bytes]:
    return [config.seed, bytes(validator_id)]


def derive(validator_id: Pubkey, config: DerivationConfig = DEFAULT_DERIVATION_CONFIG) -> DerivedAddress:
    """Derive the deposit PDA of a validator.

    Searches bump seeds from 255 downward for the first
    sha256(seed || validator || bump || program_id || "ProgramDerivedAddress")
    that is not a point on the ed25519 curve.

    Args:
        validator_id: The validator's identity public key.
        config: Program id and seed namespace.

    Returns:
        DerivedAddress with the PDA and its bump seed.
    """
    config.validate()
    address, bump = Pubkey.find_program_address(deposit_seeds(validator_id, config), config.program_id)
    logger.debug("Derived deposit PDA %s (bump %d) for validator %s", address, bump, validator_id)
    return DerivedAddress(address=address, bump=bump, validator=validator_id)
