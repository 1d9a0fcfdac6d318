"""
Command implementations for web3-cli.

Each module corresponds to a top-level CLI command:
- block:       Show a block header
- transaction: Show a transaction and whether it is pending
- address:     Show balance and contract code of an address
- snapshot:    Show the clique consensus snapshot
- contract:    Build, deploy and call Solidity contracts
"""
