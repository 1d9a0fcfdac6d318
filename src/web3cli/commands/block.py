from __future__ import annotations

from typing import Optional

import click
import httpx

from ..config import Settings, pass_settings
from ..errors import BlockNumberError, RpcError
from ..log import fatal, get_logger
from ..rpc.client import get_block_header
from ..utils import parse_block_number
from .common import echo_json, fail, rpc_url_or_fatal

logger = get_logger("block")


@click.command()
@click.argument("number", required=False, default="")
@pass_settings
def block(settings: Settings, number: Optional[str]) -> None:
    """
    Show information about the block.

    NUMBER is a decimal or 0x-prefixed block number, or one of
    latest/earliest/pending. Omit it for the latest block.
    """
    rpc_url = rpc_url_or_fatal(settings)

    try:
        block_number = parse_block_number(number)
    except BlockNumberError as exc:
        fatal(str(exc), exc.exit_code)

    try:
        header = get_block_header(block_number, rpc_url)
    except (RpcError, httpx.HTTPError) as exc:
        fail("Cannot get block details from the network", exc)

    logger.debug("Block details:")
    echo_json(header)
