"""
Block Serialization

Blocks are opaque byte sequences. Text blocks are accepted and encoded as
UTF-8, so a word and its encoded bytes are the same block. Any other value
is rejected: without a type tag two different values could encode to the
same bytes and commit to the same root.
"""

from typing import Any


def serialize_value(value: Any) -> bytes:
    """
    Convert a block to the bytes fed into the hash function.

    Args:
        value: bytes-like block or str

    Returns:
        Block bytes

    Raises:
        TypeError: If value is neither bytes-like nor str

    Examples:
        >>> serialize_value(b"fox")
        b'fox'
        >>> serialize_value("fox")
        b'fox'
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(
        f"Blocks must be bytes or str, got {type(value).__name__}"
    )
