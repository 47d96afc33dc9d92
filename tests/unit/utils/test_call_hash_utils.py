import pytest
from eth_abi import encode
from eth_utils import keccak
from hexbytes import HexBytes

from utils.call_hash_utils import create_call_hash

TIMELOCK = "0x81758f3361A769016eae4844072FA6d7f828a651"
GSC_VAULT = "0xcA870E8aa4FCEa85b5f0c6F4209C8CBA9265B940"
REGISTER_CALL = bytes.fromhex("72f22a9f" + "11" * 32)
SET_BOUND = bytes.fromhex("bd8ad5e2" + "00" * 31 + "01")


def test_matches_abi_encoded_keccak():
    expected = keccak(encode(["address[]", "bytes[]"], [[TIMELOCK], [REGISTER_CALL]]))

    assert create_call_hash([TIMELOCK], [REGISTER_CALL]) == HexBytes(expected)


def test_hex_and_bytes_calldata_are_equivalent():
    from_bytes = create_call_hash([TIMELOCK], [REGISTER_CALL])
    from_hex = create_call_hash([TIMELOCK], ["0x" + REGISTER_CALL.hex()])

    assert from_bytes == from_hex


def test_address_case_does_not_matter():
    assert create_call_hash([TIMELOCK.lower()], [REGISTER_CALL]) == create_call_hash([TIMELOCK], [REGISTER_CALL])


def test_order_sensitive():
    forward = create_call_hash([TIMELOCK, GSC_VAULT], [REGISTER_CALL, SET_BOUND])
    reversed_ = create_call_hash([GSC_VAULT, TIMELOCK], [SET_BOUND, REGISTER_CALL])

    assert forward != reversed_


def test_duplicates_are_kept():
    once = create_call_hash([GSC_VAULT], [SET_BOUND])
    twice = create_call_hash([GSC_VAULT, GSC_VAULT], [SET_BOUND, SET_BOUND])

    assert once != twice


def test_empty_calldata():
    expected = keccak(encode(["address[]", "bytes[]"], [[GSC_VAULT], [b""]]))

    assert create_call_hash([GSC_VAULT], ["0x"]) == HexBytes(expected)


def test_length_mismatch_raises():
    with pytest.raises(ValueError, match="same length"):
        create_call_hash([TIMELOCK, GSC_VAULT], [REGISTER_CALL])
