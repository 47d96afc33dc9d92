def validate_block_count(blocks: int) -> None:
    """
    Validate the number of blocks to mine.

    Args:
        blocks: The number of blocks, must be >= 1

    Raises:
        ValueError: If the block count is invalid
    """
    if blocks < 1:
        raise ValueError(f"Block count must be greater than or equal to 1, got {blocks}")


def validate_block_number(block_number: int) -> None:
    """
    Validate a single block number.

    Args:
        block_number: The block number to validate, must be >= 0

    Raises:
        ValueError: If the block number is invalid
    """
    if block_number < 0:
        raise ValueError(f"Block number must be greater than or equal to 0, got {block_number}")


def validate_next_timestamp(timestamp: int, latest_timestamp: int) -> None:
    """
    Validate a timestamp for the next block.

    Args:
        timestamp: The timestamp to set on the next block.
        latest_timestamp: The timestamp of the latest mined block.

    Raises:
        ValueError: If the timestamp does not move the chain forward
    """
    if timestamp <= latest_timestamp:
        raise ValueError(
            f"Next block timestamp ({timestamp}) must be greater than the latest block timestamp ({latest_timestamp})"
        )


def validate_index_aligned(targets: list, calldatas: list) -> None:
    """
    Validate that every target has exactly one calldata entry.

    Raises:
        ValueError: If the lists differ in length
    """
    if len(targets) != len(calldatas):
        raise ValueError(
            f"targets ({len(targets)}) and calldatas ({len(calldatas)}) must have the same length"
        )
