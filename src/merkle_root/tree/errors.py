"""
Merkle tree error taxonomy.

Both errors are contract violations surfaced immediately to the caller.
No partial root is ever returned.
"""


class MerkleTreeError(Exception):
    """Base exception for Merkle root computation."""
    pass


class EmptyInputError(MerkleTreeError):
    """Raised when there are no blocks and empty trees are not allowed."""
    pass


class MalformedLayerError(MerkleTreeError):
    """Raised when a layer that cannot be paired reaches the reducer."""
    pass
