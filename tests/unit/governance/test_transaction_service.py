from unittest.mock import MagicMock

import pytest
from hexbytes import HexBytes
from web3.exceptions import TimeExhausted

from governance.service.transaction_service import TransactionService
from utils.exceptions import MissingReceiptError, TransactionRevertedError

SENDER = "0x0000000000000000000000000000000000000001"
TX_HASH = HexBytes("0x" + "aa" * 32)


@pytest.fixture
def mock_web3():
    return MagicMock()


@pytest.fixture
def service(mock_web3):
    return TransactionService(mock_web3, receipt_timeout=5)


def test_send_transacts_from_sender(service):
    contract_function = MagicMock()
    contract_function.transact.return_value = TX_HASH

    assert service.send(contract_function, SENDER) == TX_HASH
    contract_function.transact.assert_called_once_with({"from": SENDER})


def test_successful_receipt_is_returned(service, mock_web3):
    receipt = {"status": 1, "blockNumber": 10}
    mock_web3.eth.wait_for_transaction_receipt.return_value = receipt

    assert service.wait_for_receipt(TX_HASH) == receipt
    mock_web3.eth.wait_for_transaction_receipt.assert_called_once_with(TX_HASH, timeout=5)


def test_missing_receipt_raises(service, mock_web3):
    mock_web3.eth.wait_for_transaction_receipt.return_value = None

    with pytest.raises(MissingReceiptError):
        service.wait_for_receipt(TX_HASH)


def test_receipt_timeout_raises_missing_receipt(service, mock_web3):
    mock_web3.eth.wait_for_transaction_receipt.side_effect = TimeExhausted("timeout")

    with pytest.raises(MissingReceiptError):
        service.wait_for_receipt(TX_HASH)


def test_reverted_transaction_raises(service, mock_web3):
    mock_web3.eth.wait_for_transaction_receipt.return_value = {"status": 0, "blockNumber": 10}

    with pytest.raises(TransactionRevertedError) as exc_info:
        service.wait_for_receipt(TX_HASH)
    assert exc_info.value.receipt["status"] == 0


def test_batch_sends_everything_before_waiting(service, mock_web3):
    order = []

    def make_function(name):
        function = MagicMock()
        function.transact.side_effect = lambda params: order.append(("send", name)) or HexBytes(name.encode())
        return function

    def wait(tx_hash, timeout):
        order.append(("wait", bytes(tx_hash).decode()))
        return {"status": 1}

    mock_web3.eth.wait_for_transaction_receipt.side_effect = wait

    receipts = service.send_batch_and_wait([(make_function("a"), SENDER), (make_function("b"), SENDER)])

    assert len(receipts) == 2
    assert order == [("send", "a"), ("send", "b"), ("wait", "a"), ("wait", "b")]


def test_batch_propagates_first_failure(service, mock_web3):
    function = MagicMock()
    function.transact.return_value = TX_HASH
    mock_web3.eth.wait_for_transaction_receipt.side_effect = [{"status": 1}, {"status": 0}]

    with pytest.raises(TransactionRevertedError):
        service.send_batch_and_wait([(function, SENDER), (function, SENDER)])
