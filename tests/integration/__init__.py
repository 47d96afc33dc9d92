"""
Integration tests for the governance harness.

These run against a local node forking Ethereum mainnet (Hardhat Network or Anvil)
reachable at FORK_RPC_URL, and are skipped when no such node answers.
"""
