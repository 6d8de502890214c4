"""Solana RPC access for deposit operations.

``ChainClient`` lists the calls the deposit workflow needs. ``SolanaRpcClient``
implements it on top of ``solana.rpc.api.Client`` and turns RPC failures into
``ClientError`` so callers never see transport-specific exceptions.
"""

import logging
from typing import Protocol

from solana.exceptions import SolanaRpcException  # type: ignore
from solana.rpc.api import Client  # type: ignore
from solana.rpc.core import RPCException  # type: ignore
from solana.rpc.types import TxOpts  # type: ignore
from solders.hash import Hash  # type: ignore
from solders.pubkey import Pubkey  # type: ignore
from solders.transaction import Transaction  # type: ignore

from .constants import DEFAULT_MAX_RETRIES, DEFAULT_RPC_TIMEOUT_SECONDS
from .errors import ClientError

logger = logging.getLogger(__name__)

RPC_ERRORS = (RPCException, SolanaRpcException)


class ChainClient(Protocol):
    """Protocol for the chain calls made by deposit operations."""

    def get_balance(self, address: Pubkey) -> int:
        """Balance of an account in lamports."""
        ...

    def get_cluster_node_identities(self) -> list[str]:
        """Base58 identities of all nodes currently in gossip."""
        ...

    def get_latest_blockhash(self) -> Hash:
        ...

    def send_transaction(
        self,
        tx: Transaction,
        *,
        skip_preflight: bool = False,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> str:
        """Submit a signed transaction and return its signature."""
        ...


class SolanaRpcClient:
    """ChainClient backed by a Solana JSON-RPC endpoint."""

    def __init__(self, rpc_url: str, timeout: float = DEFAULT_RPC_TIMEOUT_SECONDS):
        self._rpc_url = rpc_url
        self._client = Client(rpc_url, timeout=timeout)

    def get_balance(self, address: Pubkey) -> int:
        try:
            resp = self._client.get_balance(address)
        except RPC_ERRORS as e:
            logger.warning("getBalance failed for %s via %s: %s", address, self._rpc_url, e)
            raise ClientError(f"Failed to get balance: {e}", detail=str(e)) from e
        return resp.value

    def get_cluster_node_identities(self) -> list[str]:
        try:
            resp = self._client.get_cluster_nodes()
        except RPC_ERRORS as e:
            logger.warning("getClusterNodes failed via %s: %s", self._rpc_url, e)
            raise ClientError(f"Failed to get cluster nodes: {e}", detail=str(e)) from e
        return [str(node.pubkey) for node in resp.value]

    def get_latest_blockhash(self) -> Hash:
        try:
            resp = self._client.get_latest_blockhash()
        except RPC_ERRORS as e:
            logger.warning("getLatestBlockhash failed via %s: %s", self._rpc_url, e)
            raise ClientError(f"Failed to get latest blockhash: {e}", detail=str(e)) from e
        return resp.value.blockhash

    def send_transaction(
        self,
        tx: Transaction,
        *,
        skip_preflight: bool = False,
        max_retries: int = DEFAULT_MAX_RETRIES,
    ) -> str:
        opts = TxOpts(skip_preflight=skip_preflight, max_retries=max_retries)
        try:
            resp = self._client.send_raw_transaction(bytes(tx), opts=opts)
        except RPC_ERRORS as e:
            logger.error("sendTransaction failed via %s: %s", self._rpc_url, e)
            raise ClientError(f"Failed to send transaction: {e}", detail=str(e)) from e
        return str(resp.value)
