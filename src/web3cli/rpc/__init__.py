"""
JSON-RPC layer for web3-cli.

Read calls (blocks, transactions, balances, code, clique snapshots) live in
client; deployment transactions are built and signed in tx.

Uses httpx + eth-account + eth-abi instead of the heavyweight web3.py.
"""
