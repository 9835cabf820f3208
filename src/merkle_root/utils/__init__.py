"""
Utility Functions

Hex string and digest conversion helpers shared by the CLI and REST API.
"""

from .hex_helpers import (
    hex_to_bytes,
    bytes_to_hex,
    digest_to_int,
)

__all__ = [
    'hex_to_bytes',
    'bytes_to_hex',
    'digest_to_int',
]
