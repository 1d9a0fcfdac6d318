"""
web3-cli

Command-line client for EVM-compatible nodes.

Commands:
  block (bl)         - Show information about a block
  transaction (tx)   - Show information about a transaction
  address (addr)     - Show balance and code of an address
  snapshot (sn)      - Show the clique snapshot
  contract (c)       - Build, deploy and call contracts
"""

from __future__ import annotations

from typing import Optional

import click

from .config import Settings, load_env_file
from .log import setup_logging
from .networks import network_names


# ============ Constants ============

VERSION = "0.0.1"

ALIASES: dict[str, str] = {
    "bl": "block",
    "tx": "transaction",
    "addr": "address",
    "c": "contract",
    "sn": "snapshot",
}


class AliasedGroup(click.Group):
    """click Group that also accepts the short command aliases."""

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, ALIASES.get(cmd_name, cmd_name))

    def resolve_command(self, ctx: click.Context, args: list[str]):
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name if cmd else None, cmd, args


# ============ Main CLI Group ============


@click.group(cls=AliasedGroup)
@click.version_option(version=VERSION, prog_name="web3-cli")
@click.option(
    "--network",
    envvar="NETWORK",
    default=None,
    help=f"The name of the network ({'/'.join(network_names())})",
)
@click.option("--rpc-url", envvar="RPC_URL", default=None, help="The network RPC URL")
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, network: Optional[str], rpc_url: Optional[str], verbose: bool) -> None:
    """web3 cli tool"""
    setup_logging(verbose=verbose)
    ctx.obj = Settings(network=network, rpc_url_override=rpc_url, verbose=verbose)


# ============ Commands ============

from .commands.block import block
from .commands.transaction import transaction
from .commands.address import address
from .commands.contract import contract
from .commands.snapshot import snapshot

cli.add_command(block)
cli.add_command(transaction)
cli.add_command(address)
cli.add_command(contract)
cli.add_command(snapshot)


# ============ Entry Points ============


def main() -> None:
    """web3-cli entry point."""
    load_env_file()
    cli()


if __name__ == "__main__":
    main()
