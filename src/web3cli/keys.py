"""
Private key handling for contract deployment.

The key comes from --private-key or the PRIVATE_KEY environment variable
and is only ever used to build an eth-account LocalAccount for signing.
"""

from __future__ import annotations

from typing import Optional

from eth_account import Account
from eth_account.signers.local import LocalAccount


def normalize_private_key(private_key: Optional[str]) -> str:
    """
    Validate presence of a private key and ensure it is 0x-prefixed.

    Raises:
        ValueError: If no key was supplied
    """
    if not private_key or not private_key.strip():
        raise ValueError("PRIVATE_KEY not set. Pass --private-key or set PRIVATE_KEY.")

    private_key = private_key.strip()
    if not private_key.startswith("0x"):
        private_key = "0x" + private_key
    return private_key


def get_account(private_key: Optional[str]) -> LocalAccount:
    """
    Get an eth-account LocalAccount from a private key.

    Raises:
        ValueError: If the key is missing or malformed
    """
    return Account.from_key(normalize_private_key(private_key))
