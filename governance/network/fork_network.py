from typing import Any, Callable, Dict, List, Optional, Tuple

from web3 import Web3
from web3.types import RPCEndpoint

from utils.exceptions import ForkNetworkError
from utils.formatter_utils import hex_to_dec, to_hex_quantity, to_normalized_address
from utils.logger_utils import get_logger
from utils.rpc_provider_utils import get_provider_from_uri
from utils.rpc_utils import rpc_response_to_result
from utils.validation_utils import validate_block_count, validate_block_number, validate_next_timestamp

logger = get_logger("Fork Network")


class ForkNetwork(object):
    """
    Controls a local node that forks mainnet (Hardhat Network or Anvil).

    Both nodes answer the hardhat_* and evm_* methods used here, so the harness
    can impersonate accounts, override balances, mine and travel in time without
    knowing which one is running.
    """

    def __init__(self, w3: Web3):
        self.w3 = w3
        # fixture function -> (snapshot id, fixture result)
        self._fixture_snapshots: Dict[Callable[[], Any], Tuple[str, Any]] = {}

    @classmethod
    def from_uri(cls, uri: str, timeout: int = 120) -> "ForkNetwork":
        return cls(Web3(get_provider_from_uri(uri, timeout=timeout)))

    def is_connected(self) -> bool:
        return self.w3.is_connected()

    def request(self, method: str, params: Optional[List[Any]] = None) -> Any:
        logger.debug(f"RPC {method} {params}")
        response = self.w3.provider.make_request(RPCEndpoint(method), params or [])
        return rpc_response_to_result(method, response)

    # --- chain state ---

    def quantity(self, method: str, value: Any) -> int:
        """Decodes a QUANTITY the node returned for method; anything else is a node error."""
        try:
            result = hex_to_dec(value)
        except ValueError as e:
            raise ForkNetworkError(method, str(e))
        if result is None:
            raise ForkNetworkError(method, "node returned no quantity")
        return result

    def latest_block(self) -> int:
        return self.quantity("eth_blockNumber", self.request("eth_blockNumber"))

    def latest_timestamp(self) -> int:
        block = self.request("eth_getBlockByNumber", ["latest", False])
        if not block:
            raise ForkNetworkError("eth_getBlockByNumber", "node returned no latest block")
        return self.quantity("eth_getBlockByNumber", block.get("timestamp"))

    def reset(self, fork_url: Optional[str] = None, block_number: Optional[int] = None) -> None:
        """Re-forks the upstream node. Without fork_url the node drops back to its configured fork."""
        if fork_url is None:
            params = []
        else:
            forking: Dict[str, Any] = {"jsonRpcUrl": fork_url}
            if block_number is not None:
                validate_block_number(block_number)
                forking["blockNumber"] = block_number
            params = [{"forking": forking}]

        self.request("hardhat_reset", params)
        self._fixture_snapshots.clear()
        logger.info(f"Fork reset at block {block_number if block_number is not None else 'latest'}")

    # --- accounts ---

    def impersonate_account(self, address: str) -> str:
        address = to_normalized_address(address)
        self.request("hardhat_impersonateAccount", [address])
        logger.debug(f"Impersonating {address}")
        return address

    def stop_impersonating_account(self, address: str) -> None:
        self.request("hardhat_stopImpersonatingAccount", [to_normalized_address(address)])

    def set_balance(self, address: str, wei: int) -> None:
        self.request("hardhat_setBalance", [to_normalized_address(address), to_hex_quantity(wei)])

    def get_balance(self, address: str) -> int:
        return self.w3.eth.get_balance(to_normalized_address(address))

    def impersonate_funded_account(self, address: str, top_up_wei: Optional[int] = None) -> str:
        """Impersonates address and, when top_up_wei is given, raises its balance to at least that much."""
        address = self.impersonate_account(address)
        if top_up_wei and self.get_balance(address) < top_up_wei:
            self.set_balance(address, top_up_wei)
        return address

    # --- mining and time ---

    def mine(self, blocks: int = 1, interval: Optional[int] = None) -> int:
        """Mines `blocks` blocks at once and returns the new block height."""
        validate_block_count(blocks)
        params = [to_hex_quantity(blocks)]
        if interval is not None:
            params.append(to_hex_quantity(interval))
        self.request("hardhat_mine", params)
        latest = self.latest_block()
        logger.info(f"Mined {blocks} blocks, now at block {latest}")
        return latest

    def increase_time(self, seconds: int) -> None:
        """Moves the clock forward; takes effect on the next mined block."""
        if seconds < 0:
            raise ValueError(f"Cannot increase time by a negative amount: {seconds}")
        self.request("evm_increaseTime", [seconds])

    def increase_to(self, timestamp: int) -> None:
        """Sets the timestamp of the next block, which must be later than the latest one."""
        validate_next_timestamp(timestamp, self.latest_timestamp())
        self.request("evm_setNextBlockTimestamp", [timestamp])

    # --- snapshots ---

    def snapshot(self) -> str:
        return self.request("evm_snapshot")

    def revert(self, snapshot_id: str) -> None:
        if not self.request("evm_revert", [snapshot_id]):
            raise ForkNetworkError("evm_revert", f"snapshot {snapshot_id} could not be restored")

    def load_fixture(self, fixture: Callable[[], Any]) -> Any:
        """
        Runs fixture once, snapshots the resulting chain state and returns its result.
        Later calls with the same fixture revert the chain to that snapshot instead of
        running it again, so every test starts from the same state.
        """
        cached = self._fixture_snapshots.get(fixture)
        if cached is None:
            result = fixture()
            self._fixture_snapshots[fixture] = (self.snapshot(), result)
            return result

        snapshot_id, result = cached
        self.revert(snapshot_id)
        # evm_revert consumes the snapshot
        self._fixture_snapshots[fixture] = (self.snapshot(), result)
        return result
