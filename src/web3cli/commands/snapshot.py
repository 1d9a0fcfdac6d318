from __future__ import annotations

import click
import httpx

from ..config import Settings, pass_settings
from ..errors import RpcError
from ..log import get_logger
from ..rpc.client import get_snapshot
from .common import echo_json, fail, rpc_url_or_fatal

logger = get_logger("snapshot")


@click.command()
@pass_settings
def snapshot(settings: Settings) -> None:
    """Show the clique snapshot."""
    rpc_url = rpc_url_or_fatal(settings)

    try:
        result = get_snapshot(rpc_url)
    except (RpcError, httpx.HTTPError) as exc:
        fail("Cannot get snapshot from the network", exc)

    logger.debug("Snapshot details:")
    echo_json(result)
