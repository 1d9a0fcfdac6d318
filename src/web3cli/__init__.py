__all__ = [
    # Errors
    "Web3CliError",
    "NetworkConfigError",
    "BlockNumberError",
    "ArtifactError",
    "RpcError",
    "CompilerError",
    # Networks
    "Network",
    "NETWORK_URLS",
    "resolve_rpc_url",
    # Compiler
    "CompiledContract",
    "compile_solidity",
    "write_artifacts",
    # RPC
    "get_block_header",
    "get_transaction",
    "get_balance",
    "get_code",
    "get_snapshot",
    "wait_for_receipt",
    "deploy_contract",
    # Helpers
    "marshal_json",
    "parse_block_number",
]

from .errors import (
    ArtifactError,
    BlockNumberError,
    CompilerError,
    NetworkConfigError,
    RpcError,
    Web3CliError,
)
from .networks import NETWORK_URLS, Network, resolve_rpc_url
from .compiler import CompiledContract, compile_solidity, write_artifacts
from .rpc.client import (
    get_balance,
    get_block_header,
    get_code,
    get_snapshot,
    get_transaction,
    wait_for_receipt,
)
from .rpc.tx import deploy_contract
from .utils import marshal_json, parse_block_number
