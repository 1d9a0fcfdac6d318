"""
JSON-RPC client.

Every call takes the resolved RPC URL explicitly and opens a short-lived
httpx client. Errors reported by the node surface as RpcError.
"""

from __future__ import annotations

import time
from typing import Any, Optional

import httpx

from ..errors import RpcError
from ..log import get_logger
from ..utils import BlockId, hex_to_int, to_block_param

logger = get_logger("rpc")

# Fields of eth_getBlockByNumber that belong to the block body, not the header
BLOCK_BODY_FIELDS = ("transactions", "uncles", "withdrawals")

RPC_TIMEOUT = 30


def _rpc_call(method: str, params: list, rpc_url: str) -> Any:
    """
    Make a JSON-RPC call.

    Args:
        method: RPC method name (e.g., "eth_getBalance")
        params: RPC parameters
        rpc_url: RPC endpoint URL

    Returns:
        Result field from the RPC response

    Raises:
        RpcError: If the node returns an error
        httpx.HTTPError: On transport or HTTP status failures
    """
    payload = {
        "jsonrpc": "2.0",
        "method": method,
        "params": params,
        "id": 1,
    }
    logger.debug("-> %s %s", method, params)

    with httpx.Client(timeout=RPC_TIMEOUT) as client:
        response = client.post(rpc_url, json=payload)
        response.raise_for_status()
        try:
            data = response.json()
        except ValueError as exc:
            raise RpcError(f"Invalid JSON-RPC response from {rpc_url}: {exc}") from exc

    if not isinstance(data, dict):
        raise RpcError(f"Invalid JSON-RPC response from {rpc_url}: {data!r}")

    if "error" in data:
        error = data["error"]
        if isinstance(error, dict):
            raise RpcError(f"RPC error {error.get('code')}: {error.get('message')}")
        raise RpcError(f"RPC error: {error}")

    return data.get("result")


def get_block_header(block: BlockId, rpc_url: str) -> dict[str, Any]:
    """
    Fetch a block header.

    Args:
        block: Block number, tag, or None for the latest block
        rpc_url: RPC endpoint URL

    Returns:
        The block as returned by the node, minus its body fields
    """
    result = _rpc_call("eth_getBlockByNumber", [to_block_param(block), False], rpc_url)
    if result is None:
        raise RpcError(f"block not found: {to_block_param(block)}")
    return {k: v for k, v in result.items() if k not in BLOCK_BODY_FIELDS}


def get_transaction(tx_hash: str, rpc_url: str) -> tuple[dict[str, Any], bool]:
    """
    Fetch a transaction by hash.

    Returns:
        Tuple of (transaction dict, is_pending)
    """
    result = _rpc_call("eth_getTransactionByHash", [tx_hash], rpc_url)
    if result is None:
        raise RpcError(f"transaction not found: {tx_hash}")
    return result, result.get("blockNumber") is None


def get_balance(address: str, rpc_url: str, block: BlockId = None) -> int:
    """Get the balance of an address in wei."""
    result = _rpc_call("eth_getBalance", [address, to_block_param(block)], rpc_url)
    return hex_to_int(result)


def get_code(address: str, rpc_url: str, block: BlockId = None) -> str:
    """
    Get the contract code at an address.

    Returns:
        0x-prefixed hex code, or "" when the address holds no code
    """
    result = _rpc_call("eth_getCode", [address, to_block_param(block)], rpc_url)
    if not result or result == "0x":
        return ""
    return result


def get_snapshot(rpc_url: str, block: BlockId = None) -> Any:
    """Get the clique consensus snapshot."""
    return _rpc_call("clique_getSnapshot", [to_block_param(block)], rpc_url)


def get_nonce(address: str, rpc_url: str) -> int:
    result = _rpc_call("eth_getTransactionCount", [address, "pending"], rpc_url)
    return hex_to_int(result)


def get_gas_price(rpc_url: str) -> int:
    return hex_to_int(_rpc_call("eth_gasPrice", [], rpc_url))


def get_chain_id(rpc_url: str) -> int:
    return hex_to_int(_rpc_call("eth_chainId", [], rpc_url))


def estimate_gas(tx: dict[str, Any], rpc_url: str) -> int:
    return hex_to_int(_rpc_call("eth_estimateGas", [tx], rpc_url))


def send_raw_transaction(raw_tx: str, rpc_url: str) -> str:
    """
    Send a signed raw transaction.

    Args:
        raw_tx: 0x-prefixed hex encoded signed transaction

    Returns:
        Transaction hash (0x-prefixed hex)
    """
    return _rpc_call("eth_sendRawTransaction", [raw_tx], rpc_url)


def wait_for_receipt(
    tx_hash: str,
    rpc_url: str,
    timeout: Optional[float] = None,
    poll_interval: float = 2.0,
) -> dict[str, Any]:
    """
    Wait for a transaction receipt.

    Args:
        tx_hash: Transaction hash
        rpc_url: RPC endpoint URL
        timeout: Maximum wait time in seconds; None polls until mined
        poll_interval: Polling interval in seconds

    Returns:
        Transaction receipt dict

    Raises:
        TimeoutError: If a timeout was given and the receipt did not appear
    """
    start = time.monotonic()
    while True:
        receipt = _rpc_call("eth_getTransactionReceipt", [tx_hash], rpc_url)
        if receipt is not None:
            return receipt
        if timeout is not None and time.monotonic() - start >= timeout:
            raise TimeoutError(f"Transaction {tx_hash} not confirmed within {timeout}s")
        logger.debug("Waiting for receipt of %s", tx_hash)
        time.sleep(poll_interval)
