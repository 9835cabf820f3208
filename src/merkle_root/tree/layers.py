"""
Layer Reduction

Builds each layer of the tree from the one below it by hashing adjacent
left/right pairs. Element 2i pairs with element 2i+1 and the parent lands at
position i, so left-to-right order is preserved on every level.
"""

import logging
from concurrent.futures import Executor
from typing import List, Optional, Sequence, Tuple

from .errors import MalformedLayerError
from .hashing import DEFAULT_HASHER, Digest, Hasher

logger = logging.getLogger(__name__)


def concatenate_hash(left: Digest, right: Digest, hasher: Optional[Hasher] = None) -> Digest:
    """
    Hash the concatenation of two digests, left first.

    Order matters: concatenate_hash(a, b) != concatenate_hash(b, a)
    for a != b, with overwhelming probability.
    """
    return (hasher or DEFAULT_HASHER).concatenate_hash(left, right)


def _pairs(layer: Sequence[Digest]) -> List[Tuple[Digest, Digest]]:
    return [(layer[i], layer[i + 1]) for i in range(0, len(layer), 2)]


def reduce_layer(
    layer: Sequence[Digest],
    hasher: Optional[Hasher] = None,
    executor: Optional[Executor] = None,
) -> List[Digest]:
    """
    Produce the next layer up from a layer of digests.

    Args:
        layer: Digests of one tree level; length must be even and >= 2
        hasher: Hasher used for the pair hashes (sha256 by default)
        executor: Optional executor; pair hashes within one round are
            independent and may run in parallel

    Returns:
        Parent digests, half the length of ``layer``, in the same order

    Raises:
        MalformedLayerError: If the layer cannot be split into pairs

    Examples:
        >>> len(reduce_layer([b"\\x00" * 32] * 4))
        2
    """
    if len(layer) < 2 or len(layer) % 2 != 0:
        raise MalformedLayerError(
            f"Cannot reduce layer of length {len(layer)}: expected an even length >= 2"
        )

    hasher = hasher or DEFAULT_HASHER
    pairs = _pairs(layer)

    if executor is not None:
        # map yields results in submission order
        return list(executor.map(lambda pair: hasher.concatenate_hash(*pair), pairs))

    return [hasher.concatenate_hash(left, right) for left, right in pairs]


def reduce_to_root(
    layer: Sequence[Digest],
    hasher: Optional[Hasher] = None,
    executor: Optional[Executor] = None,
) -> Digest:
    """
    Reduce a leaf layer round by round until one digest remains.

    Args:
        layer: Leaf digests; length must be a power of two
        hasher: Hasher used for the pair hashes
        executor: Optional executor for per-round parallelism

    Returns:
        The root digest. A single-leaf layer is its own root.

    Raises:
        MalformedLayerError: If the layer is empty or any round has odd length
    """
    if not layer:
        raise MalformedLayerError("Cannot reduce an empty layer")

    current = list(layer)
    depth = 0
    while len(current) > 1:
        current = reduce_layer(current, hasher, executor)
        depth += 1
        logger.debug(f"Reduced to layer {depth} with {len(current)} node(s)")

    return current[0]
