"""
Base Layer Padding

A balanced Merkle tree needs a power-of-two number of leaves, so the base
layer is extended with filler blocks before hashing.
"""

from typing import Any, List, Sequence

from ..constants import FILLER_BLOCK


def is_power_of_two(n: int) -> bool:
    """Return True if n is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def next_power_of_two(n: int) -> int:
    """
    Smallest power of two greater than or equal to n.

    Examples:
        >>> next_power_of_two(0)
        1
        >>> next_power_of_two(9)
        16
        >>> next_power_of_two(16)
        16
    """
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def get_tree_depth(capacity: int) -> int:
    """
    Calculate the depth of a merkle tree for given capacity.

    Args:
        capacity: Number of leaves (must be power of two)

    Returns:
        Number of reduction rounds from leaves to root

    Examples:
        >>> get_tree_depth(16)
        4
        >>> get_tree_depth(1)
        0
    """
    if not is_power_of_two(capacity):
        raise ValueError("Capacity must be a power of two")

    return capacity.bit_length() - 1


def pad_base_layer(blocks: Sequence[Any], filler: Any = FILLER_BLOCK) -> List[Any]:
    """
    Pad a block sequence to a power-of-two length with filler blocks.

    The original sequence is left untouched; a new list is returned with the
    filler appended after the last real block. An empty sequence pads to a
    single filler block, since 2^0 is the smallest power of two >= 0.

    Args:
        blocks: Ordered blocks
        filler: Protocol filler value

    Returns:
        New list of length next_power_of_two(len(blocks))

    Examples:
        >>> pad_base_layer([b"a", b"b", b"c"])
        [b'a', b'b', b'c', b'']
        >>> pad_base_layer([b"a", b"b"])
        [b'a', b'b']
    """
    padded = list(blocks)
    padded.extend([filler] * (next_power_of_two(len(padded)) - len(padded)))
    return padded
