"""
Solana Devnet Integration Test
Checks the RPC adapter and PDA lookups against Solana devnet.
"""

import pytest
from solders.pubkey import Pubkey

from dz_validator_pda.client import SolanaRpcClient
from dz_validator_pda.constants import NETWORK_CONFIGS, SOLANA_DEVNET
from dz_validator_pda.funding import get_pda_balance
from dz_validator_pda.liveness import LivenessGate
from dz_validator_pda.types import LivenessStatus

DEVNET_RPC = NETWORK_CONFIGS[SOLANA_DEVNET]["rpc_url"]


@pytest.mark.integration
class TestSolanaDevnet:
    """Live devnet checks; run with `pytest -m integration`."""

    def test_get_latest_blockhash(self):
        blockhash = SolanaRpcClient(DEVNET_RPC).get_latest_blockhash()
        print(f"✅ Latest blockhash: {blockhash}")
        assert blockhash is not None

    def test_cluster_nodes(self):
        identities = SolanaRpcClient(DEVNET_RPC).get_cluster_node_identities()
        print(f"✅ {len(identities)} nodes in devnet gossip")
        assert len(identities) > 0

    def test_gossip_member_is_present(self):
        client = SolanaRpcClient(DEVNET_RPC)
        node = Pubkey.from_string(client.get_cluster_node_identities()[0])

        assert LivenessGate(client).check(node).status is LivenessStatus.PRESENT

    def test_pda_balance(self):
        balance = get_pda_balance(
            Pubkey.from_string("FjYEr2UCeFzNfAKiFrbhG34Zv8LxbmfHYAFhAfc7SLQL"),
            SolanaRpcClient(DEVNET_RPC),
        )
        print(f"✅ PDA {balance.deposit.address}: {balance.lamports} lamports")
        assert balance.lamports >= 0
