from typing import Sequence

from web3.contract import Contract
from web3.types import TxReceipt

from governance.service.transaction_service import TransactionService
from utils.formatter_utils import BytesLike, to_bytes32, to_calldata_bytes, to_normalized_address
from utils.logger_utils import get_logger
from utils.validation_utils import validate_index_aligned

logger = get_logger("Timelock Service")


class TimelockService(object):
    def __init__(self, contract: Contract, transaction_service: TransactionService):
        self.contract = contract
        self.transactions = transaction_service

    @property
    def address(self) -> str:
        return self.contract.address

    def wait_time(self) -> int:
        return self.contract.functions.waitTime().call()

    def call_timestamp(self, call_hash: BytesLike) -> int:
        """Timestamp at which call_hash was registered, 0 when it is not registered."""
        return self.contract.functions.callTimestamps(to_bytes32(call_hash)).call()

    def is_registered(self, call_hash: BytesLike) -> bool:
        return self.call_timestamp(call_hash) != 0

    def encode_register_call(self, call_hash: BytesLike) -> bytes:
        """Calldata for registerCall(bytes32), the payload a CoreVoting proposal carries."""
        return to_calldata_bytes(self.contract.encode_abi("registerCall", args=[to_bytes32(call_hash)]))

    def execute(self, sender: str, targets: Sequence[str], calldatas: Sequence[BytesLike]) -> TxReceipt:
        validate_index_aligned(list(targets), list(calldatas))
        receipt = self.transactions.transact_and_wait(
            self.contract.functions.execute(
                [to_normalized_address(target) for target in targets],
                [to_calldata_bytes(data) for data in calldatas],
            ),
            sender,
        )
        logger.info(f"Timelock call with {len(targets)} targets executed in block {receipt['blockNumber']}")
        return receipt
