"""
Merkle Root Constants

This module contains the protocol constants used when building balanced
binary Merkle trees: the filler block used for base-layer padding and the
supported hash algorithms with their natural digest widths.
"""

# ====================
# Padding
# ====================

# Filler block appended to the base layer until its length is a power of two.
# The tree does not mark padding specially; only the original length tells
# real blocks and filler apart.
FILLER_BLOCK = b""

# ====================
# Hash Algorithms
# ====================

DEFAULT_ALGORITHM = "sha256"

# Natural digest width (bytes) of each supported algorithm
ALGORITHM_DIGEST_SIZES = {
    "sha256": 32,
    "sha3_256": 32,
    "blake2b": 32,
    "blake3": 32,
}

# Hard cap on any digest width, including blake3 extended output
MAX_DIGEST_SIZE = 64

# Upper bound on the digest width per algorithm
ALGORITHM_MAX_DIGEST_SIZES = {
    "sha256": 32,
    "sha3_256": 32,
    "blake2b": 64,
    "blake3": MAX_DIGEST_SIZE,
}

SUPPORTED_ALGORITHMS = tuple(ALGORITHM_DIGEST_SIZES)
