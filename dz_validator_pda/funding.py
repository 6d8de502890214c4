"""Funding workflow for validator deposit PDAs.

Sends a single SOL transfer from a local keypair to a validator's deposit PDA,
gated on the validator being present in gossip.
"""

import logging
from decimal import Decimal

from solders.message import Message  # type: ignore
from solders.pubkey import Pubkey  # type: ignore
from solders.system_program import TransferParams, transfer  # type: ignore

from .client import ChainClient
from .constants import (
    DEFAULT_MAX_RETRIES,
    ERR_GOSSIP_CHECK_FAILED,
    ERR_VALIDATOR_NOT_IN_GOSSIP,
)
from .errors import ClientError, FundingCancelled, SubmissionFailed
from .liveness import LivenessGate, cancel_reason
from .pda import derive
from .signers import ClientSvmSigner
from .types import (
    DEFAULT_DERIVATION_CONFIG,
    DerivationConfig,
    FundingDecision,
    FundingReceipt,
    PdaBalance,
)
from .utils import sol_to_lamports

logger = logging.getLogger(__name__)


class FundingWorkflow:
    """Funds validator deposit PDAs.

    Either cancels before the blockhash is fetched or makes exactly one
    submission. The signer is both the fee payer and the only signer.
    """

    def __init__(
        self,
        client: ChainClient,
        config: DerivationConfig = DEFAULT_DERIVATION_CONFIG,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ):
        self._client = client
        self._config = config
        self._max_retries = max_retries
        self._gate = LivenessGate(client)

    def fund(
        self,
        identity: Pubkey,
        signer: ClientSvmSigner,
        amount: Decimal | int | str,
    ) -> FundingReceipt:
        """Transfer ``amount`` SOL from the signer to the validator's deposit PDA.

        Args:
            identity: Validator identity public key.
            signer: Fee payer and transfer source.
            amount: Amount in SOL.

        Returns:
            FundingReceipt with the transaction signature.

        Raises:
            FundingCancelled: The validator is not in gossip or the check failed.
            InvalidAmount: The amount is below one lamport.
            ClientError: The blockhash could not be fetched.
            SubmissionFailed: The RPC node did not accept the transaction.
        """
        # 1. Liveness gate
        decision, result = self._gate.evaluate(identity)
        if decision.is_cancel:
            reason = cancel_reason(result)
            logger.warning("Funding cancelled: %s", reason)
            if decision is FundingDecision.CANCEL:
                raise FundingCancelled(reason, decision=decision, code=ERR_VALIDATOR_NOT_IN_GOSSIP)
            raise FundingCancelled(reason, decision=decision, code=ERR_GOSSIP_CHECK_FAILED)

        # 2. Convert to lamports
        lamports = sol_to_lamports(amount)

        # 3. Derive destination
        deposit = derive(identity, self._config)

        # 4. Recent blockhash; ClientError propagates
        blockhash = self._client.get_latest_blockhash()

        # 5. Transfer instruction
        payer = signer.pubkey
        transfer_ix = transfer(
            TransferParams(
                from_pubkey=payer,
                to_pubkey=deposit.address,
                lamports=lamports,
            )
        )

        # 6. Sign
        message = Message([transfer_ix], payer)
        tx = signer.sign_transaction(message, blockhash)

        # 7. Submit
        logger.info(
            "Sending %d lamports from %s to deposit PDA %s of validator %s",
            lamports,
            payer,
            deposit.address,
            identity,
        )
        try:
            signature = self._client.send_transaction(
                tx,
                skip_preflight=False,
                max_retries=self._max_retries,
            )
        except ClientError as e:
            raise SubmissionFailed(e.detail or e.message) from e

        # 8. Receipt
        logger.info("Deposit transfer submitted: %s", signature)
        return FundingReceipt(
            signature=signature,
            validator=identity,
            destination=deposit.address,
            lamports=lamports,
        )


def get_pda_balance(
    identity: Pubkey,
    client: ChainClient,
    config: DerivationConfig = DEFAULT_DERIVATION_CONFIG,
) -> PdaBalance:
    """Derive a validator's deposit PDA and look up its balance.

    Raises:
        ClientError: If the balance lookup fails.
    """
    deposit = derive(identity, config)
    lamports = client.get_balance(deposit.address)
    return PdaBalance(deposit=deposit, lamports=lamports)
