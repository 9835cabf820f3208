"""
Hash Functions for Merkle Trees

This module provides the Hasher, the stateless hash capability injected into
the tree logic. The tree code never calls a hash function directly, so the
algorithm and digest width can be swapped without touching it.

Supported algorithms:
- sha256, sha3_256: 32-byte native digests, optionally truncated
- blake2b: native variable width from 1 to 64 bytes
- blake3: extendable output, 1 to MAX_DIGEST_SIZE (64) bytes

Digests are plain ``bytes``; a digest's canonical byte representation is the
digest itself. Equal inputs always give equal digests for one Hasher
configuration. Nothing is promised across configurations.
"""

import hashlib
from typing import Any, Optional

import blake3

from ..constants import (
    ALGORITHM_DIGEST_SIZES,
    ALGORITHM_MAX_DIGEST_SIZES,
    DEFAULT_ALGORITHM,
    MAX_DIGEST_SIZE,
    SUPPORTED_ALGORITHMS,
)
from ..serialization import serialize_value

# A digest is a fixed-width byte string
Digest = bytes


class Hasher:
    """
    Fixed-width hash function over byte sequences.

    Args:
        algorithm: One of SUPPORTED_ALGORITHMS
        digest_size: Digest width in bytes. Defaults to the algorithm's
            natural width. ``digest_size=8`` gives a 64-bit digest.

    Raises:
        ValueError: If the algorithm is unknown or the width is out of range

    Examples:
        >>> len(Hasher().hash(b"fox"))
        32
        >>> len(Hasher("blake2b", digest_size=8).hash(b"fox"))
        8
    """

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM, digest_size: Optional[int] = None):
        algorithm = algorithm.lower()
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(
                f"Unknown hash algorithm: {algorithm}. "
                f"Supported: {', '.join(SUPPORTED_ALGORITHMS)}"
            )

        if digest_size is None:
            digest_size = ALGORITHM_DIGEST_SIZES[algorithm]

        max_size = min(ALGORITHM_MAX_DIGEST_SIZES[algorithm], MAX_DIGEST_SIZE)
        if not 1 <= digest_size <= max_size:
            raise ValueError(
                f"Invalid digest size {digest_size} for {algorithm} (1..{max_size})"
            )

        self.algorithm = algorithm
        self.digest_size = digest_size

    def __repr__(self) -> str:
        return f"Hasher(algorithm={self.algorithm!r}, digest_size={self.digest_size})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hasher):
            return NotImplemented
        return (self.algorithm, self.digest_size) == (other.algorithm, other.digest_size)

    def __hash__(self) -> int:
        return hash((self.algorithm, self.digest_size))

    def hash_bytes(self, data: bytes) -> Digest:
        """
        Hash raw bytes to a digest of exactly ``digest_size`` bytes.

        Args:
            data: Bytes to hash

        Returns:
            Digest bytes
        """
        if self.algorithm == "blake2b":
            return hashlib.blake2b(data, digest_size=self.digest_size).digest()
        if self.algorithm == "blake3":
            return blake3.blake3(data).digest(length=self.digest_size)
        if self.algorithm == "sha3_256":
            return hashlib.sha3_256(data).digest()[: self.digest_size]
        return hashlib.sha256(data).digest()[: self.digest_size]

    def hash(self, value: Any) -> Digest:
        """
        Hash a block.

        Args:
            value: bytes-like block or str (UTF-8 encoded)

        Returns:
            Digest of the block bytes

        Raises:
            TypeError: If value is neither bytes-like nor str
        """
        return self.hash_bytes(serialize_value(value))

    def concatenate_hash(self, left: Digest, right: Digest) -> Digest:
        """
        Hash the concatenation of two digests, left first.

        Args:
            left: Left child digest
            right: Right child digest

        Returns:
            Parent digest, ``hash(left || right)``

        Raises:
            ValueError: If either digest has the wrong width
        """
        if len(left) != self.digest_size or len(right) != self.digest_size:
            raise ValueError(
                f"Digests must be {self.digest_size} bytes, "
                f"got {len(left)} and {len(right)}"
            )
        return self.hash_bytes(bytes(left) + bytes(right))


DEFAULT_HASHER = Hasher()


def hash_value(value: Any, hasher: Optional[Hasher] = None) -> Digest:
    """Hash a value with the given hasher (sha256 by default)."""
    return (hasher or DEFAULT_HASHER).hash(value)
