"""
Hex and Digest Conversion Utilities

Helpers for moving digests and blocks between bytes, hex strings and
unsigned integers at the CLI and API boundaries.
"""

import re

_HEX_RE = re.compile(r"^[0-9a-fA-F]*$")


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert a hex string to bytes.

    Args:
        hex_str: Hex string (with or without '0x' prefix)

    Returns:
        Bytes representation of the hex string

    Raises:
        ValueError: If the string has an odd length or non-hex characters

    Examples:
        >>> hex_to_bytes("0x1234")
        b'\\x124'
        >>> hex_to_bytes("")
        b''
    """
    if hex_str.startswith(("0x", "0X")):
        hex_str = hex_str[2:]

    if not _HEX_RE.match(hex_str) or len(hex_str) % 2 == 1:
        raise ValueError(f"Invalid hex string: {hex_str!r}")

    return bytes.fromhex(hex_str)


def bytes_to_hex(data: bytes, prefix: bool = True) -> str:
    """
    Convert bytes to a hex string.

    Args:
        data: Bytes to convert
        prefix: Whether to include '0x' prefix

    Returns:
        Hex string representation

    Examples:
        >>> bytes_to_hex(b'\\x12\\x34')
        '0x1234'
        >>> bytes_to_hex(b'\\x12\\x34', prefix=False)
        '1234'
    """
    hex_str = data.hex()
    return f"0x{hex_str}" if prefix else hex_str


def digest_to_int(digest: bytes) -> int:
    """Read a digest as a little-endian unsigned integer."""
    return int.from_bytes(digest, "little")
