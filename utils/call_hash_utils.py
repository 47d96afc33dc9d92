from typing import Sequence

from eth_abi import encode
from eth_utils import keccak
from hexbytes import HexBytes

from utils.formatter_utils import BytesLike, to_calldata_bytes, to_normalized_address
from utils.validation_utils import validate_index_aligned

CALL_HASH_ABI_TYPES = ["address[]", "bytes[]"]


def create_call_hash(targets: Sequence[str], calldatas: Sequence[BytesLike]) -> HexBytes:
    """
    keccak256(abi.encode(address[] targets, bytes[] calldatas)).

    This is the commitment CoreVoting stores as proposalHash and Timelock keys its
    registered calls by. Order matters: targets[i] is called with calldatas[i].
    """
    targets = list(targets)
    calldatas = list(calldatas)
    validate_index_aligned(targets, calldatas)

    encoded = encode(
        CALL_HASH_ABI_TYPES,
        [
            [to_normalized_address(target) for target in targets],
            [to_calldata_bytes(data) for data in calldatas],
        ],
    )
    return HexBytes(keccak(encoded))
