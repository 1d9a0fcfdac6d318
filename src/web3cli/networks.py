"""
Network name to RPC URL resolution.

The set of known networks is closed: adding one means adding a Network
member and a row in NETWORK_URLS.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .errors import NetworkConfigError
from .log import get_logger

logger = get_logger("networks")


class Network(str, Enum):
    TESTNET = "testnet"
    MAINNET = "mainnet"
    LOCALHOST = "localhost"
    ETHEREUM = "ethereum"
    ROPSTEN = "ropsten"


NETWORK_URLS: dict[Network, str] = {
    Network.TESTNET: "https://testnet-rpc.gochain.io",
    Network.MAINNET: "https://rpc.gochain.io",
    Network.LOCALHOST: "http://localhost:8545",
    Network.ETHEREUM: "https://main-rpc.linkpool.io",
    Network.ROPSTEN: "https://ropsten-rpc.linkpool.io",
}


def network_names() -> list[str]:
    return [network.value for network in Network]


def resolve_rpc_url(network: Optional[str], rpc_url: Optional[str]) -> str:
    """
    Resolve the RPC endpoint to talk to.

    Args:
        network: Network name (testnet/mainnet/localhost/ethereum/ropsten)
        rpc_url: Explicit RPC URL

    Returns:
        The RPC URL

    Raises:
        NetworkConfigError: If both inputs are given, or the network name
            is missing or unknown
    """
    if rpc_url:
        if network:
            raise NetworkConfigError(
                f"Cannot set both rpcURL {rpc_url!r} and network {network!r}"
            )
    else:
        try:
            rpc_url = NETWORK_URLS[Network(network)]
        except ValueError:
            raise NetworkConfigError(f"Unrecognized network: {network or ''}") from None
        logger.debug("Network: %s", network)

    logger.debug("RPC URL: %s", rpc_url)
    return rpc_url
