import pytest
from hexbytes import HexBytes

from utils.formatter_utils import (
    hex_to_dec,
    to_bytes32,
    to_calldata_bytes,
    to_hex_quantity,
    to_normalized_address,
)


def test_hex_to_dec():
    assert hex_to_dec("0x10") == 16
    assert hex_to_dec(None) is None
    assert hex_to_dec(7) == 7


def test_to_hex_quantity_has_no_leading_zeros():
    assert to_hex_quantity(0) == "0x0"
    assert to_hex_quantity(900) == "0x384"


def test_to_hex_quantity_rejects_negative():
    with pytest.raises(ValueError):
        to_hex_quantity(-1)


def test_to_normalized_address_checksums():
    assert to_normalized_address("0x81758f3361a769016eae4844072fa6d7f828a651") == (
        "0x81758f3361A769016eae4844072FA6d7f828a651"
    )
    assert to_normalized_address(None) is None


def test_to_calldata_bytes():
    assert to_calldata_bytes("0x") == b""
    assert to_calldata_bytes("0xdeadbeef") == bytes.fromhex("deadbeef")
    assert to_calldata_bytes(HexBytes("0x01")) == b"\x01"


def test_to_calldata_bytes_rejects_garbage():
    with pytest.raises(ValueError):
        to_calldata_bytes("not hex")
    with pytest.raises(TypeError):
        to_calldata_bytes(12)


def test_to_bytes32_requires_32_bytes():
    assert to_bytes32("0x" + "ab" * 32) == bytes.fromhex("ab" * 32)
    with pytest.raises(ValueError):
        to_bytes32("0xab")


def test_hex_to_dec_rejects_malformed_quantity():
    with pytest.raises(ValueError):
        hex_to_dec("not hex")
    with pytest.raises(ValueError):
        hex_to_dec(["0x1"])
