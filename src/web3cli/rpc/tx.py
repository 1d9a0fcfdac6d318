"""
Deployment transactions - build, sign, and send contract creations.

Uses eth-account for signing and the httpx-based JSON-RPC client for
sending. Gas is paid by the account behind the supplied private key.
"""

from __future__ import annotations

from typing import Any, Optional

from eth_abi import encode
from eth_abi.exceptions import EncodingError
from eth_utils import to_checksum_address, to_hex

from ..keys import get_account
from ..log import get_logger
from .client import (
    estimate_gas,
    get_chain_id,
    get_gas_price,
    get_nonce,
    send_raw_transaction,
    wait_for_receipt,
)

logger = get_logger("tx")


def encode_constructor_args(abi: list[dict[str, Any]], args: list) -> str:
    """
    ABI-encode constructor arguments.

    Returns:
        Hex string (no 0x prefix) to append to creation bytecode
    """
    constructor = None
    for entry in abi:
        if entry.get("type") == "constructor":
            constructor = entry
            break

    if constructor is None:
        raise ValueError("Constructor not found in ABI, but constructor args were provided.")

    input_types = [inp["type"] for inp in constructor.get("inputs", [])]
    if len(input_types) != len(args):
        raise ValueError(
            f"Constructor takes {len(input_types)} arguments, got {len(args)}"
        )
    try:
        return encode(input_types, args).hex()
    except EncodingError as exc:
        raise ValueError(f"Cannot encode constructor args: {exc}") from exc


def build_deploy_tx(
    bytecode: str,
    sender: str,
    rpc_url: str,
    gas_limit: Optional[int] = None,
) -> dict[str, Any]:
    """
    Build an unsigned contract creation transaction (no 'to' field).

    Nonce, gas price and chain id come from the node. The gas limit is
    estimated unless given.
    """
    data = bytecode if bytecode.startswith("0x") else "0x" + bytecode

    if gas_limit is None:
        gas_limit = estimate_gas({"from": sender, "data": data}, rpc_url)

    return {
        "data": data,
        "value": 0,
        "nonce": get_nonce(sender, rpc_url),
        "gas": gas_limit,
        "gasPrice": get_gas_price(rpc_url),
        "chainId": get_chain_id(rpc_url),
    }


def deploy_contract(
    bytecode: str,
    private_key: Optional[str],
    rpc_url: str,
    constructor_args: Optional[list] = None,
    abi: Optional[list[dict[str, Any]]] = None,
    gas_limit: Optional[int] = None,
    wait: bool = True,
    timeout: Optional[float] = None,
) -> dict[str, Any]:
    """
    Deploy a contract to the chain.

    Builds a creation transaction, signs it, sends it, and optionally waits
    for the receipt to extract the deployed contract address.

    Args:
        bytecode: Hex-encoded creation bytecode (0x prefix optional)
        private_key: Private key for signing
        rpc_url: RPC endpoint URL
        constructor_args: Constructor arguments (requires abi)
        abi: Contract ABI used to encode constructor_args
        gas_limit: Gas limit (default: estimated by the node)
        wait: Whether to wait for the receipt
        timeout: Receipt wait timeout; None waits indefinitely

    Returns:
        Dict with tx_hash and, when waited for, receipt, status (None for
        receipts without a status field) and contract_address
    """
    account = get_account(private_key)

    deploy_data = bytecode.strip()
    if constructor_args:
        if abi is None:
            raise ValueError("An ABI is required to encode constructor arguments")
        deploy_data = deploy_data + encode_constructor_args(abi, constructor_args)

    tx = build_deploy_tx(deploy_data, account.address, rpc_url, gas_limit=gas_limit)
    logger.debug("Deploying from %s with nonce %d", account.address, tx["nonce"])

    signed = account.sign_transaction(tx)
    tx_hash = send_raw_transaction(to_hex(signed.raw_transaction), rpc_url)
    result: dict[str, Any] = {"tx_hash": tx_hash}

    if wait:
        receipt = wait_for_receipt(tx_hash, rpc_url, timeout=timeout)
        result["receipt"] = receipt
        # Pre-Byzantium receipts carry a state root instead of a status
        status = receipt.get("status")
        result["status"] = int(status, 16) if status is not None else None
        contract_address = receipt.get("contractAddress")
        if contract_address:
            result["contract_address"] = to_checksum_address(contract_address)

    return result
