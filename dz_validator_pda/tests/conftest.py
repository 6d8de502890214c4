"""Shared fixtures for validator deposit tests."""

import json

import pytest
from solders.hash import Hash
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature

from dz_validator_pda.signers import KeypairSigner

VALIDATOR_ADDRESS = "FjYEr2UCeFzNfAKiFrbhG34Zv8LxbmfHYAFhAfc7SLQL"
OTHER_VALIDATOR_ADDRESS = "11111111111111111111111111111112"


class FakeChainClient:
    """In-memory ChainClient that records every call."""

    def __init__(
        self,
        node_ids=None,
        balance=0,
        gossip_error=None,
        balance_error=None,
        blockhash_error=None,
        send_error=None,
    ):
        self.node_ids = list(node_ids or [])
        self.balance = balance
        self.gossip_error = gossip_error
        self.balance_error = balance_error
        self.blockhash_error = blockhash_error
        self.send_error = send_error
        self.blockhash = Hash.new_unique()
        self.signature = str(Signature.default())
        self.calls = []
        self.sent = []

    def called(self, name):
        return [c for c in self.calls if c == name]

    def get_balance(self, address):
        self.calls.append("get_balance")
        self.balance_address = address
        if self.balance_error:
            raise self.balance_error
        return self.balance

    def get_cluster_node_identities(self):
        self.calls.append("get_cluster_node_identities")
        if self.gossip_error:
            raise self.gossip_error
        return list(self.node_ids)

    def get_latest_blockhash(self):
        self.calls.append("get_latest_blockhash")
        if self.blockhash_error:
            raise self.blockhash_error
        return self.blockhash

    def send_transaction(self, tx, *, skip_preflight=False, max_retries=3):
        self.calls.append("send_transaction")
        if self.send_error:
            raise self.send_error
        self.sent.append({"tx": tx, "skip_preflight": skip_preflight, "max_retries": max_retries})
        return self.signature


@pytest.fixture
def validator_id():
    return Pubkey.from_string(VALIDATOR_ADDRESS)


@pytest.fixture
def keypair():
    return Keypair()


@pytest.fixture
def signer(keypair):
    return KeypairSigner(keypair)


@pytest.fixture
def keypair_file(tmp_path, keypair):
    path = tmp_path / "id.json"
    path.write_text(json.dumps(list(bytes(keypair))))
    return path


@pytest.fixture
def make_client():
    return FakeChainClient
