"""Command line interface for validator deposit PDAs.

Usage:
    dz-validator-pda pda-address <validator_address>
    dz-validator-pda pda-balance <validator_address>
    dz-validator-pda pda-fund-address <validator_address> <keypair_path> <amount>
"""

import logging
import os
import sys
from decimal import Decimal, InvalidOperation
from typing import NoReturn, Optional

import typer
from typer.core import TyperCommand
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from solders.pubkey import Pubkey  # type: ignore

from .client import ChainClient, SolanaRpcClient
from .constants import (
    DEFAULT_NETWORK,
    DEFAULT_RPC_TIMEOUT_SECONDS,
    ENV_LOG_LEVEL,
    ENV_PROGRAM_ID,
    ENV_RPC_URL,
    OP_PDA_ADDRESS,
    OP_PDA_BALANCE,
    OP_PDA_FUND_ADDRESS,
    REVENUE_DISTRIBUTION_PROGRAM_ID,
    SUPPORTED_OPERATIONS,
)
from .errors import DepositError, ValidationError
from .funding import FundingWorkflow, get_pda_balance
from .pda import derive
from .signers import KeypairSigner
from .types import DerivationConfig
from .utils import format_sol, get_rpc_url, parse_amount, parse_pubkey

load_dotenv()

EXAMPLE_VALIDATOR = "FjYEr2UCeFzNfAKiFrbhG34Zv8LxbmfHYAFhAfc7SLQL"

app = typer.Typer(
    help="Derive, inspect and fund validator deposit PDAs.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

logger = logging.getLogger(__name__)


def create_client(rpc_url: str, timeout: float = DEFAULT_RPC_TIMEOUT_SECONDS) -> ChainClient:
    return SolanaRpcClient(rpc_url, timeout=timeout)


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, os.getenv(ENV_LOG_LEVEL, "WARNING").upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error: {escape(message)}[/red]")
    raise typer.Exit(1)


def _print_usage() -> None:
    err_console.print(
        "Usage: dz-validator-pda <operation> <validator_address> [keypair_path] [amount]",
        markup=False,
    )
    err_console.print("Operations:")
    err_console.print(f"  [cyan]{OP_PDA_ADDRESS}[/cyan]       Generate PDA address for validator")
    err_console.print(f"  [cyan]{OP_PDA_BALANCE}[/cyan]       Show balance of PDA address for validator")
    err_console.print(f"  [cyan]{OP_PDA_FUND_ADDRESS}[/cyan]  Fund PDA address from a keypair (validator must be in gossip)")
    err_console.print(f"Example: dz-validator-pda {OP_PDA_ADDRESS} {EXAMPLE_VALIDATOR}")
    err_console.print(f"Example: dz-validator-pda {OP_PDA_BALANCE} {EXAMPLE_VALIDATOR}")
    err_console.print(f"Example: dz-validator-pda {OP_PDA_FUND_ADDRESS} {EXAMPLE_VALIDATOR} ~/.config/solana/id.json 1.5")


def _parse_program_id(program_id: str) -> DerivationConfig:
    try:
        return DerivationConfig(program_id=parse_pubkey(program_id))
    except ValidationError as e:
        _fail(f"Invalid program id: {e.message}")


def _print_deposit(validator_address: str, pda: Pubkey) -> None:
    console.print(f"Validator pubkey {validator_address}", highlight=False)
    console.print(f"PDA Address: {pda}", highlight=False)


def _is_number(token: str) -> bool:
    try:
        Decimal(token)
    except InvalidOperation:
        return False
    return True


class DepositCommand(TyperCommand):
    """Reports bad usage as ``Error: ...`` with exit code 1.

    A negative number is never an option, so it is rejected as an amount
    rather than as an unknown option.
    """

    def make_context(self, info_name, args, parent=None, **extra):
        value_options = {
            opt
            for param in self.params
            if param.param_type_name == "option" and not param.is_flag
            for opt in param.opts
        }
        takes_value = False
        for token in args:
            if token == "--":
                break
            if not takes_value and token.startswith("-") and _is_number(token):
                _fail(f"Invalid amount: {token} must be greater than zero")
            takes_value = token in value_options

        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except typer.TyperException as e:
            _fail(e.format_message())


@app.command(cls=DepositCommand)
def main(
    operation: Optional[str] = typer.Argument(None, help="pda-address, pda-balance or pda-fund-address", show_default=False),
    validator_address: Optional[str] = typer.Argument(None, help="Validator identity public key (base58)", show_default=False),
    keypair_path: Optional[str] = typer.Argument(None, help="Funding keypair file (pda-fund-address only)"),
    amount: Optional[str] = typer.Argument(None, help="Amount in SOL (pda-fund-address only)"),
    network: str = typer.Option(DEFAULT_NETWORK, "--network", "-n", help="Cluster: mainnet-beta, devnet or testnet"),
    rpc_url: Optional[str] = typer.Option(None, "--rpc-url", "-u", envvar=ENV_RPC_URL, help="RPC endpoint (overrides --network)"),
    program_id: str = typer.Option(
        REVENUE_DISTRIBUTION_PROGRAM_ID,
        "--program-id",
        envvar=ENV_PROGRAM_ID,
        help="Program that owns deposit PDAs",
    ),
    timeout: float = typer.Option(DEFAULT_RPC_TIMEOUT_SECONDS, "--timeout", help="RPC timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Derive, inspect and fund the deposit PDA of a Solana validator.

    Examples:
    - dz-validator-pda pda-address FjYEr2UCeFzNfAKiFrbhG34Zv8LxbmfHYAFhAfc7SLQL
    - dz-validator-pda pda-balance FjYEr2UCeFzNfAKiFrbhG34Zv8LxbmfHYAFhAfc7SLQL --network devnet
    - dz-validator-pda pda-fund-address FjYEr2UCeFzNfAKiFrbhG34Zv8LxbmfHYAFhAfc7SLQL ~/.config/solana/id.json 1.5
    """
    _configure_logging(verbose)

    if operation is None or validator_address is None:
        err_console.print("[red]Error: Please provide operation name and validator address as parameters[/red]")
        _print_usage()
        raise typer.Exit(1)

    if not operation.strip():
        _fail("Operation parameter cannot be empty")

    if not validator_address.strip():
        _fail("Validator address parameter cannot be empty")

    if operation not in SUPPORTED_OPERATIONS:
        _fail(f"Unknown operation '{operation}'. Supported operations: {', '.join(SUPPORTED_OPERATIONS)}")

    try:
        validator_id = parse_pubkey(validator_address)
    except ValidationError as e:
        _fail(e.message)

    config = _parse_program_id(program_id)

    if operation == OP_PDA_ADDRESS:
        deposit = derive(validator_id, config)
        _print_deposit(validator_address, deposit.address)
        return

    # Fund arguments are validated before any network call
    signer = None
    sol_amount = None
    if operation == OP_PDA_FUND_ADDRESS:
        if not keypair_path or amount is None:
            _fail(f"{OP_PDA_FUND_ADDRESS} requires keypair path and amount parameters")
        try:
            sol_amount = parse_amount(amount)
            signer = KeypairSigner.from_file(keypair_path)
        except ValidationError as e:
            _fail(e.message)

    try:
        url = get_rpc_url(network, rpc_url)
    except ValueError as e:
        _fail(str(e))

    logger.debug("Using RPC endpoint %s", url)
    client = create_client(url, timeout)

    try:
        if operation == OP_PDA_BALANCE:
            balance = get_pda_balance(validator_id, client, config)
            _print_deposit(validator_address, balance.deposit.address)
            console.print(
                f"PDA Balance: {balance.lamports} lamports ({format_sol(balance.lamports)} SOL)",
                highlight=False,
            )
            return

        _print_deposit(validator_address, derive(validator_id, config).address)
        receipt = FundingWorkflow(client, config).fund(validator_id, signer, sol_amount)
    except DepositError as e:
        _fail(e.message)

    console.print(
        f"Transferred {format_sol(receipt.lamports)} SOL ({receipt.lamports} lamports) "
        f"from {signer.address} to {receipt.destination}",
        highlight=False,
    )
    console.print(f"Transaction signature: {receipt.signature}", highlight=False)
