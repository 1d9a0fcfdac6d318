from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

import pytest

from web3cli.log import LOGGER_NAME


class FakeRpc:
    """Stand-in for web3cli.rpc.client._rpc_call answering from a method table."""

    def __init__(self, responses: dict[str, Any]) -> None:
        self.responses = responses
        self.calls: list[tuple[str, list, str]] = []

    def __call__(self, method: str, params: list, rpc_url: str) -> Any:
        self.calls.append((method, params, rpc_url))
        response = self.responses[method]
        if isinstance(response, BaseException):
            raise response
        return response

    def methods(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture()
def fake_rpc() -> Callable[[dict[str, Any]], FakeRpc]:
    return FakeRpc


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers bound to streams of a finished CliRunner invocation."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
