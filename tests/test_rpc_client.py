"""Unit tests for the JSON-RPC client, with httpx and _rpc_call patched out."""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import patch

import httpx
import pytest

from web3cli.errors import RpcError
from web3cli.rpc import client
from web3cli.rpc.client import (
    _rpc_call,
    get_balance,
    get_block_header,
    get_code,
    get_snapshot,
    get_transaction,
    wait_for_receipt,
)

RPC_URL = "http://localhost:8545"


def _response(payload: Any, status: int = 200) -> httpx.Response:
    return httpx.Response(status, json=payload, request=httpx.Request("POST", RPC_URL))


class TestRpcCall:
    def test_returns_result(self) -> None:
        with patch("httpx.Client.post", return_value=_response({"jsonrpc": "2.0", "id": 1, "result": "0x10"})) as post:
            assert _rpc_call("eth_blockNumber", [], RPC_URL) == "0x10"

        url = post.call_args.args[0]
        payload = post.call_args.kwargs["json"]
        assert url == RPC_URL
        assert payload["method"] == "eth_blockNumber"
        assert payload["params"] == []
        assert payload["jsonrpc"] == "2.0"

    def test_error_object(self) -> None:
        error = {"code": -32601, "message": "the method clique_getSnapshot does not exist"}
        with patch("httpx.Client.post", return_value=_response({"jsonrpc": "2.0", "id": 1, "error": error})):
            with pytest.raises(RpcError, match="-32601"):
                _rpc_call("clique_getSnapshot", ["latest"], RPC_URL)

    def test_http_status_error(self) -> None:
        with patch("httpx.Client.post", return_value=_response({}, status=502)):
            with pytest.raises(httpx.HTTPStatusError):
                _rpc_call("eth_chainId", [], RPC_URL)

    def test_non_json_body(self) -> None:
        html = httpx.Response(200, text="<html>bad gateway</html>", request=httpx.Request("POST", RPC_URL))
        with patch("httpx.Client.post", return_value=html):
            with pytest.raises(RpcError, match="Invalid JSON-RPC response"):
                _rpc_call("eth_chainId", [], RPC_URL)

    def test_non_object_body(self) -> None:
        with patch("httpx.Client.post", return_value=_response([1, 2])):
            with pytest.raises(RpcError, match="Invalid JSON-RPC response"):
                _rpc_call("eth_chainId", [], RPC_URL)


class TestReads:
    def test_block_header_strips_body(self, fake_rpc: Callable) -> None:
        rpc = fake_rpc(
            {
                "eth_getBlockByNumber": {
                    "number": "0x1",
                    "hash": "0xabc",
                    "miner": "0x0000000000000000000000000000000000000000",
                    "transactions": ["0xdead"],
                    "uncles": [],
                }
            }
        )
        with patch.object(client, "_rpc_call", rpc):
            header = get_block_header(1, RPC_URL)

        assert header == {
            "number": "0x1",
            "hash": "0xabc",
            "miner": "0x0000000000000000000000000000000000000000",
        }
        assert rpc.calls == [("eth_getBlockByNumber", ["0x1", False], RPC_URL)]

    def test_block_header_latest(self, fake_rpc: Callable) -> None:
        rpc = fake_rpc({"eth_getBlockByNumber": {"number": "0x9"}})
        with patch.object(client, "_rpc_call", rpc):
            get_block_header(None, RPC_URL)
        assert rpc.calls[0][1] == ["latest", False]

    def test_block_not_found(self, fake_rpc: Callable) -> None:
        rpc = fake_rpc({"eth_getBlockByNumber": None})
        with patch.object(client, "_rpc_call", rpc):
            with pytest.raises(RpcError, match="block not found"):
                get_block_header(10**9, RPC_URL)

    def test_transaction_mined(self, fake_rpc: Callable) -> None:
        tx = {"hash": "0x01", "blockNumber": "0x5"}
        rpc = fake_rpc({"eth_getTransactionByHash": tx})
        with patch.object(client, "_rpc_call", rpc):
            assert get_transaction("0x01", RPC_URL) == (tx, False)

    def test_transaction_pending(self, fake_rpc: Callable) -> None:
        tx = {"hash": "0x01", "blockNumber": None}
        rpc = fake_rpc({"eth_getTransactionByHash": tx})
        with patch.object(client, "_rpc_call", rpc):
            assert get_transaction("0x01", RPC_URL) == (tx, True)

    def test_transaction_not_found(self, fake_rpc: Callable) -> None:
        rpc = fake_rpc({"eth_getTransactionByHash": None})
        with patch.object(client, "_rpc_call", rpc):
            with pytest.raises(RpcError, match="transaction not found"):
                get_transaction("0x01", RPC_URL)

    def test_balance(self, fake_rpc: Callable) -> None:
        rpc = fake_rpc({"eth_getBalance": "0xde0b6b3a7640000"})
        with patch.object(client, "_rpc_call", rpc):
            assert get_balance("0xabc", RPC_URL) == 10**18
        assert rpc.calls[0][1] == ["0xabc", "latest"]

    @pytest.mark.parametrize("raw,expected", [("0x", ""), (None, ""), ("0x6080", "0x6080")])
    def test_code(self, fake_rpc: Callable, raw: Any, expected: str) -> None:
        rpc = fake_rpc({"eth_getCode": raw})
        with patch.object(client, "_rpc_call", rpc):
            assert get_code("0xabc", RPC_URL) == expected

    def test_snapshot(self, fake_rpc: Callable) -> None:
        snap = {"number": 10, "signers": {"0xabc": {}}}
        rpc = fake_rpc({"clique_getSnapshot": snap})
        with patch.object(client, "_rpc_call", rpc):
            assert get_snapshot(RPC_URL) == snap
        assert rpc.calls == [("clique_getSnapshot", ["latest"], RPC_URL)]


class TestWaitForReceipt:
    def test_polls_until_receipt(self) -> None:
        receipts = iter([None, None, {"status": "0x1"}])
        rpc = lambda method, params, rpc_url: next(receipts)
        with patch.object(client, "_rpc_call", rpc), patch.object(client.time, "sleep") as sleep:
            assert wait_for_receipt("0x01", RPC_URL) == {"status": "0x1"}
        assert sleep.call_count == 2

    def test_timeout(self) -> None:
        rpc = lambda method, params, rpc_url: None
        with patch.object(client, "_rpc_call", rpc), patch.object(client.time, "sleep"):
            with pytest.raises(TimeoutError):
                wait_for_receipt("0x01", RPC_URL, timeout=0)
