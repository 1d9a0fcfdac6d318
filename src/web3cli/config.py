"""
Runtime configuration for web3-cli.

Global options are collected into a Settings object stored on the click
context. NETWORK, RPC_URL and PRIVATE_KEY may also be kept in
~/.web3cli/.env, which is loaded without overriding the real environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from .networks import resolve_rpc_url

# Default config directory
WEB3CLI_DIR = Path.home() / ".web3cli"
WEB3CLI_ENV = WEB3CLI_DIR / ".env"


def load_env_file(env_path: Optional[Path] = None) -> bool:
    """
    Load variables from a .env file into the process environment.

    Variables already set in the environment win over the file.

    Returns:
        True if the file existed and was loaded
    """
    env_path = env_path or WEB3CLI_ENV
    if not env_path.exists():
        return False
    return load_dotenv(env_path, override=False)


@dataclass
class Settings:
    network: Optional[str] = None
    rpc_url_override: Optional[str] = None
    verbose: bool = False

    def rpc_url(self) -> str:
        """Resolve the RPC endpoint; raises NetworkConfigError on bad input."""
        return resolve_rpc_url(self.network, self.rpc_url_override)


pass_settings = click.make_pass_decorator(Settings, ensure=True)
