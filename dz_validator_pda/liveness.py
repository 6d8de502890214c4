"""Gossip liveness gate for validator deposit funding.

Funding only proceeds when the validator is visible in the cluster's gossip
network. A failed lookup cancels funding exactly like an explicit absence.
"""

import logging

from solders.pubkey import Pubkey  # type: ignore

from .client import ChainClient
from .types import FundingDecision, LivenessResult, LivenessStatus

logger = logging.getLogger(__name__)

NOT_IN_GOSSIP_REASON = "validator not found in gossip network"
GOSSIP_CHECK_FAILED_REASON = "unable to verify validator in gossip network"


def decide(result: LivenessResult) -> FundingDecision:
    """Map a liveness result to a funding decision."""
    if result.status is LivenessStatus.PRESENT:
        return FundingDecision.PROCEED
    if result.status is LivenessStatus.ABSENT:
        return FundingDecision.CANCEL
    return FundingDecision.CANCEL_ON_ERROR


def cancel_reason(result: LivenessResult) -> str:
    if result.status is LivenessStatus.ABSENT:
        return f"{NOT_IN_GOSSIP_REASON} ({result.identity})"
    return f"{GOSSIP_CHECK_FAILED_REASON} ({result.identity}): {result.error}"


class LivenessGate:
    """Checks validator presence in gossip before any funds move."""

    def __init__(self, client: ChainClient):
        self._client = client

    def check(self, identity: Pubkey) -> LivenessResult:
        """Look up the identity among the cluster's gossip nodes.

        Never raises: any error during the lookup yields UNKNOWN.
        """
        try:
            node_ids = self._client.get_cluster_node_identities()
        except Exception as e:
            logger.warning("Gossip lookup for validator %s failed: %s", identity, e)
            return LivenessResult(LivenessStatus.UNKNOWN, identity, error=str(e))

        target = str(identity)
        if any(node_id == target for node_id in node_ids):
            logger.info("Validator %s found in gossip network", identity)
            return LivenessResult(LivenessStatus.PRESENT, identity)

        logger.info("Validator %s not found in gossip network", identity)
        return LivenessResult(LivenessStatus.ABSENT, identity)

    def evaluate(self, identity: Pubkey) -> tuple[FundingDecision, LivenessResult]:
        result = self.check(identity)
        return decide(result), result
