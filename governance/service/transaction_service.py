from typing import Any, List, Sequence, Tuple

from hexbytes import HexBytes
from web3 import Web3
from web3.exceptions import TimeExhausted, TransactionNotFound
from web3.types import TxReceipt

from utils.exceptions import MissingReceiptError, TransactionRevertedError
from utils.formatter_utils import to_normalized_address
from utils.logger_utils import get_logger

logger = get_logger("Transaction Service")

DEFAULT_RECEIPT_TIMEOUT = 120

# (contract function call, sender)
PendingCall = Tuple[Any, str]


class TransactionService(object):
    """
    Sends transactions from unlocked (impersonated) accounts on the fork and waits for them.
    Nothing is retried: a missing receipt or a reverted transaction is raised to the caller.
    """

    def __init__(self, w3: Web3, receipt_timeout: int = DEFAULT_RECEIPT_TIMEOUT):
        self.w3 = w3
        self.receipt_timeout = receipt_timeout

    def send(self, contract_function, sender: str, value: int = 0) -> HexBytes:
        tx_params = {"from": to_normalized_address(sender)}
        if value:
            tx_params["value"] = value
        tx_hash = contract_function.transact(tx_params)
        logger.debug(f"Sent {contract_function.fn_name} from {sender}: {Web3.to_hex(tx_hash)}")
        return HexBytes(tx_hash)

    def wait_for_receipt(self, tx_hash: HexBytes) -> TxReceipt:
        tx_hex = Web3.to_hex(tx_hash)
        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(tx_hash, timeout=self.receipt_timeout)
        except (TimeExhausted, TransactionNotFound) as e:
            raise MissingReceiptError(tx_hex) from e

        if not receipt:
            raise MissingReceiptError(tx_hex)
        if receipt.get("status") == 0:
            raise TransactionRevertedError(tx_hex, receipt)
        return receipt

    def transact_and_wait(self, contract_function, sender: str, value: int = 0) -> TxReceipt:
        return self.wait_for_receipt(self.send(contract_function, sender, value))

    def send_batch_and_wait(self, calls: Sequence[PendingCall]) -> List[TxReceipt]:
        """
        Sends every call before waiting on any receipt.
        Mining order between the calls is not significant.
        """
        tx_hashes = [self.send(contract_function, sender) for contract_function, sender in calls]
        logger.info(f"Sent batch of {len(tx_hashes)} transactions, waiting for receipts...")
        return [self.wait_for_receipt(tx_hash) for tx_hash in tx_hashes]
