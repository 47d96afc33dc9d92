# MIT License
#
# Copyright (c) 2018 Evgeny Medvedev, evge.medvedev@gmail.com
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Modified by: Cuong CT, 6/12/2025
# Change Description: using eth_utils library for address, quantity and calldata conversions

from typing import Optional, Union

from eth_utils import is_hex, to_bytes, to_checksum_address, to_int
from hexbytes import HexBytes

BytesLike = Union[bytes, bytearray, HexBytes, str]


def hex_to_dec(hex_string: Optional[Union[str, int]]) -> Optional[int]:
    """
    Converts a hex quantity returned by the node to a decimal integer.
    Raises ValueError on anything that is not a hex quantity.
    """
    if hex_string is None:
        return None
    if isinstance(hex_string, int):
        return hex_string
    if not isinstance(hex_string, str) or not is_hex(hex_string):
        raise ValueError(f"Invalid hex string for conversion: {hex_string!r}")
    return to_int(hexstr=hex_string)


def to_hex_quantity(value: int) -> str:
    """
    Encodes a non-negative integer as a JSON-RPC QUANTITY (no leading zeros).
    """
    if value < 0:
        raise ValueError(f"Quantity must be non-negative, got {value}")
    return hex(value)


def to_normalized_address(address: Optional[str]) -> Optional[str]:
    """
    Convert address to its EIP-55 checksum form.
    """
    if address is None or not isinstance(address, str):
        return None
    return to_checksum_address(address)


def to_calldata_bytes(data: BytesLike) -> bytes:
    """
    Accepts calldata as raw bytes or a 0x-prefixed hex string and returns bytes.
    "0x" is the empty calldata.
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        if not is_hex(data) and data not in ("", "0x"):
            raise ValueError(f"Calldata is not a hex string: {data!r}")
        return to_bytes(hexstr=data)
    raise TypeError(f"Unsupported calldata type: {type(data).__name__}")


def to_bytes32(value: BytesLike) -> bytes:
    raw = to_calldata_bytes(value)
    if len(raw) != 32:
        raise ValueError(f"Expected 32 bytes, got {len(raw)}")
    return raw
