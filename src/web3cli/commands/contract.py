"""
Contract commands - build, deploy, and call Solidity contracts.

build:  compile a source file and write NAME.bin / NAME.abi per contract
deploy: sign and broadcast a creation transaction for a .bin file, then
        wait for the receipt
call:   not implemented yet, prints a notice
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click
import httpx

from ..compiler import compile_solidity, read_abi, read_bytecode, read_source, write_artifacts
from ..config import Settings, pass_settings
from ..errors import Web3CliError
from ..log import fatal, get_logger
from ..utils import marshal_json
from .common import fail, rpc_url_or_fatal

logger = get_logger("contract")


@click.group()
def contract() -> None:
    """actions with contracts"""
    pass


@contract.command()
@click.argument("filename", required=False, default="")
@click.option("--solc-version", default=None, help="solc version to use (installed if missing)")
@click.option(
    "--output-dir",
    "-o",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for the .bin/.abi files (default: current directory)",
)
@click.option(
    "--creation",
    is_flag=True,
    default=False,
    help="Write creation bytecode instead of runtime bytecode to the .bin file",
)
@pass_settings
def build(
    settings: Settings,
    filename: str,
    solc_version: Optional[str],
    output_dir: Optional[Path],
    creation: bool,
) -> None:
    """Build the specified contract."""
    try:
        source = read_source(Path(filename))
    except Web3CliError as exc:
        fatal(str(exc), exc.exit_code)

    logger.debug("Building Sol: %s", source)

    try:
        compiled = compile_solidity(source, solc_version=solc_version)
    except Web3CliError as exc:
        fail(f"Failed to compile {filename!r}", exc)

    logger.debug("Compiled Sol Details: %s", marshal_json(compiled))

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)

    for compiled_contract in compiled.values():
        try:
            bin_path, abi_path = write_artifacts(
                compiled_contract, output_dir=output_dir, creation=creation
            )
        except Web3CliError as exc:
            fatal(str(exc), exc.exit_code)
        click.echo(
            "Contract has been successfully compiled and the following files "
            f"have been written: {bin_path.name}, {abi_path.name}"
        )


@contract.command()
@click.argument("filename", required=False, default="")
@click.option(
    "--private-key",
    envvar="PRIVATE_KEY",
    default=None,
    hidden=True,
    help="The private key",
)
@click.option("--abi", "abi_file", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="ABI file used to encode constructor arguments")
@click.option("--args", "args_json", default="[]", help="Constructor args as JSON array")
@click.option("--gas-limit", type=int, default=None, help="Gas limit (default: estimated)")
@pass_settings
def deploy(
    settings: Settings,
    filename: str,
    private_key: Optional[str],
    abi_file: Optional[Path],
    args_json: str,
    gas_limit: Optional[int],
) -> None:
    """Build and deploy the specified contract to the network."""
    rpc_url = rpc_url_or_fatal(settings)

    try:
        bytecode = read_bytecode(Path(filename))
    except Web3CliError as exc:
        fatal(str(exc), exc.exit_code)

    # Parse constructor args
    try:
        constructor_args = json.loads(args_json)
        if not isinstance(constructor_args, list):
            raise ValueError("Args must be a JSON array")
    except (json.JSONDecodeError, ValueError) as exc:
        fatal(f"Invalid args: {exc}")

    abi = None
    if abi_file is not None:
        try:
            abi = read_abi(abi_file)
        except Web3CliError as exc:
            fatal(str(exc), exc.exit_code)

    from ..rpc.tx import deploy_contract

    try:
        result = deploy_contract(
            bytecode,
            private_key,
            rpc_url,
            constructor_args=constructor_args,
            abi=abi,
            gas_limit=gas_limit,
        )
    except (Web3CliError, httpx.HTTPError, ValueError, TypeError) as exc:
        fail("Cannot deploy the contract", exc)

    click.echo(f"Contract has been successfully deployed with transaction: {result['tx_hash']}")
    if result.get("status") == 0:
        fatal(f"Deployment transaction reverted: {result['tx_hash']}")
    contract_address = result.get("contract_address")
    if not contract_address:
        fatal("Cannot get the receipt: no contract address in receipt")
    click.echo(f"Contract address is: {contract_address}")


@contract.command()
@click.option("--function", "func_name", default=None, help="The name of the function to call")
@click.option("--contract", "contract_address", default=None, help="The address of the deployed contract")
@pass_settings
def call(settings: Settings, func_name: Optional[str], contract_address: Optional[str]) -> None:
    """Call the specified function of the contract."""
    # TODO: encode func_name against the contract ABI and send it via eth_call
    click.echo(f"calling the function of the deployed contract from: {settings.network or ''}")
