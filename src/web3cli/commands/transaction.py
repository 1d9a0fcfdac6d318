from __future__ import annotations

import click
import httpx

from ..config import Settings, pass_settings
from ..errors import RpcError
from ..log import get_logger
from ..rpc.client import get_transaction
from .common import echo_json, fail, rpc_url_or_fatal

logger = get_logger("transaction")


@click.command()
@click.argument("tx_hash", required=False, default="")
@pass_settings
def transaction(settings: Settings, tx_hash: str) -> None:
    """Show information about the transaction."""
    rpc_url = rpc_url_or_fatal(settings)

    try:
        tx, is_pending = get_transaction(tx_hash, rpc_url)
    except (RpcError, httpx.HTTPError) as exc:
        fail("Cannot get transaction details from the network", exc)

    logger.debug("Transaction details:")
    echo_json({"transaction": tx, "pending": is_pending})
