"""
Merkle Root

Computes the root digest of a balanced binary Merkle tree built from an
ordered sequence of blocks. The root commits to every block and to their
order: changing, reordering, adding or removing a block changes the root.

Modules:
- constants: filler block and supported hash algorithms
- serialization: block bytes for hashing
- tree: hashing, padding, layer reduction and root calculation
- config: environment-driven settings
- main: root computation with tree metadata for the CLI and API
"""

from .constants import FILLER_BLOCK, DEFAULT_ALGORITHM, SUPPORTED_ALGORITHMS
from .tree import (
    Digest,
    Hasher,
    RootCalculator,
    EmptyInputPolicy,
    MerkleTreeError,
    EmptyInputError,
    MalformedLayerError,
    pad_base_layer,
    concatenate_hash,
    reduce_layer,
    tokenize_words,
    calc_root,
    hash_value,
)

__version__ = "0.1.0"

__all__ = [
    'FILLER_BLOCK',
    'DEFAULT_ALGORITHM',
    'SUPPORTED_ALGORITHMS',
    'Digest',
    'Hasher',
    'RootCalculator',
    'EmptyInputPolicy',
    'MerkleTreeError',
    'EmptyInputError',
    'MalformedLayerError',
    'pad_base_layer',
    'concatenate_hash',
    'reduce_layer',
    'tokenize_words',
    'calc_root',
    'hash_value',
]
