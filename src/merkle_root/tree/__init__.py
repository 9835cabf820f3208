"""
Merkle Tree Operations

This package computes the root of a balanced binary Merkle tree.

The module is organized into these components:
- hashing: the injectable Hasher and Digest type
- padding: base-layer padding to a power-of-two length
- layers: pairwise reduction from one layer to the next
- calculator: orchestration from blocks to root
- errors: EmptyInputError and MalformedLayerError
"""

from .errors import (
    MerkleTreeError,
    EmptyInputError,
    MalformedLayerError,
)

from .hashing import (
    Digest,
    Hasher,
    DEFAULT_HASHER,
    hash_value,
)

from .padding import (
    is_power_of_two,
    next_power_of_two,
    get_tree_depth,
    pad_base_layer,
)

from .layers import (
    concatenate_hash,
    reduce_layer,
    reduce_to_root,
)

from .calculator import (
    EmptyInputPolicy,
    RootCalculator,
    tokenize_words,
    calc_root,
)

__all__ = [
    # Errors
    "MerkleTreeError",
    "EmptyInputError",
    "MalformedLayerError",
    # Hashing
    "Digest",
    "Hasher",
    "DEFAULT_HASHER",
    "hash_value",
    # Padding
    "is_power_of_two",
    "next_power_of_two",
    "get_tree_depth",
    "pad_base_layer",
    # Layers
    "concatenate_hash",
    "reduce_layer",
    "reduce_to_root",
    # Calculator
    "EmptyInputPolicy",
    "RootCalculator",
    "tokenize_words",
    "calc_root",
]
