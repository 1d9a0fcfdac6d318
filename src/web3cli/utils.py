from __future__ import annotations

import json
from typing import Any, Optional, Union

from .errors import BlockNumberError

BLOCK_TAGS = ("latest", "earliest", "pending")

BlockId = Union[int, str, None]


def marshal_json(data: Any) -> str:
    return json.dumps(data, indent=2, default=_json_default)


def _json_default(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if hasattr(value, "to_dict"):
        return value.to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def parse_block_number(value: Optional[str]) -> BlockId:
    """
    Parse a block number argument.

    An empty value means the latest block and yields None. Block tags are
    passed through; anything else must be a non-negative decimal or
    0x-prefixed hex integer.
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    if text.lower() in BLOCK_TAGS:
        return text.lower()

    try:
        if text.lower().startswith("0x"):
            number = int(text[2:], 16)
        else:
            number = int(text, 10)
    except ValueError:
        raise BlockNumberError(f"block number must be integer {value!r}") from None

    if number < 0:
        raise BlockNumberError(f"block number must not be negative {value!r}")
    return number


def to_block_param(block: BlockId) -> str:
    """Encode a parsed block number as a JSON-RPC block parameter."""
    if block is None:
        return "latest"
    if isinstance(block, str):
        return block
    return hex(block)


def hex_to_int(value: Optional[str]) -> int:
    if not value:
        return 0
    return int(value, 16)
