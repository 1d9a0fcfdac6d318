"""
Error taxonomy for web3-cli.

Library modules raise these; command modules turn them into a fatal exit.
"""

from __future__ import annotations


class Web3CliError(RuntimeError):
    exit_code: int = 1


class NetworkConfigError(Web3CliError):
    """Conflicting or unrecognized --network / --rpc-url inputs."""


class BlockNumberError(Web3CliError, ValueError):
    """Block number argument could not be parsed."""


class ArtifactError(Web3CliError):
    """Contract source or artifact file could not be read or written."""


class RpcError(Web3CliError):
    """The node returned an error or an empty result."""


class CompilerError(Web3CliError):
    """solc failed or is not installed."""
