import pytest

from utils.exceptions import ForkNetworkError, ProposalAssertionError
from utils.rpc_utils import rpc_response_to_result
from utils.validation_utils import (
    validate_block_count,
    validate_block_number,
    validate_index_aligned,
    validate_next_timestamp,
)


def test_validate_block_count():
    validate_block_count(1)
    with pytest.raises(ValueError):
        validate_block_count(0)


def test_validate_block_number():
    validate_block_number(0)
    with pytest.raises(ValueError):
        validate_block_number(-1)


def test_validate_next_timestamp_must_move_forward():
    validate_next_timestamp(101, 100)
    with pytest.raises(ValueError):
        validate_next_timestamp(100, 100)


def test_validate_index_aligned():
    validate_index_aligned(["a"], [b""])
    with pytest.raises(ValueError):
        validate_index_aligned(["a", "b"], [b""])


def test_rpc_result_is_returned():
    assert rpc_response_to_result("eth_blockNumber", {"jsonrpc": "2.0", "id": 1, "result": "0x1"}) == "0x1"
    assert rpc_response_to_result("hardhat_mine", {"jsonrpc": "2.0", "id": 1, "result": None}) is None


def test_rpc_error_raises():
    with pytest.raises(ForkNetworkError) as exc_info:
        rpc_response_to_result(
            "hardhat_impersonateAccount",
            {"jsonrpc": "2.0", "id": 1, "error": {"code": -32601, "message": "Method not found"}},
        )

    assert exc_info.value.method == "hardhat_impersonateAccount"
    assert exc_info.value.code == -32601
    assert "Method not found" in str(exc_info.value)


def test_rpc_missing_result_raises():
    with pytest.raises(ForkNetworkError):
        rpc_response_to_result("eth_blockNumber", {"jsonrpc": "2.0", "id": 1})


def test_proposal_assertion_error_lists_mismatches():
    error = ProposalAssertionError("Proposals aren't equal.", {"quorum": (3, 2)})

    assert isinstance(error, AssertionError)
    assert "quorum: expected 3, got 2" in str(error)
