from __future__ import annotations

from typing import Any

import click
import httpx

from ..config import Settings, pass_settings
from ..errors import RpcError
from ..log import get_logger
from ..rpc.client import get_balance, get_code
from .common import echo_json, fail, rpc_url_or_fatal

logger = get_logger("address")


def address_details(balance: int, code: str) -> dict[str, Any]:
    """Build the address view; the code field is left out for accounts without code."""
    details: dict[str, Any] = {"balance": balance}
    if code:
        details["code"] = code
    return details


@click.command()
@click.argument("address_hash", required=False, default="")
@pass_settings
def address(settings: Settings, address_hash: str) -> None:
    """Show information about the address."""
    rpc_url = rpc_url_or_fatal(settings)

    try:
        balance = get_balance(address_hash, rpc_url)
    except (RpcError, httpx.HTTPError) as exc:
        fail("Cannot get address balance from the network", exc)

    try:
        code = get_code(address_hash, rpc_url)
    except (RpcError, httpx.HTTPError) as exc:
        fail("Cannot get address code from the network", exc)

    logger.debug("Address details:")
    echo_json(address_details(balance, code))
