"""
Root Calculator

Orchestrates the full pipeline from blocks to root:

    blocks -> padded blocks -> leaf digests -> pairwise reduction -> root

Example with the sentence "The quick brown fox jumps over the lazy dog":
nine words are not a power of two, so seven filler blocks are appended to
reach sixteen leaves, and four rounds of reduction (16 -> 8 -> 4 -> 2 -> 1)
produce the root.
"""

import enum
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

from ..constants import FILLER_BLOCK
from .errors import EmptyInputError
from .hashing import Digest, Hasher
from .layers import reduce_to_root
from .padding import pad_base_layer

if TYPE_CHECKING:
    from ..config import TreeSettings

logger = logging.getLogger(__name__)


class EmptyInputPolicy(str, enum.Enum):
    """What to do when there are no blocks at all."""

    ERROR = "error"
    FILLER = "filler"


def tokenize_words(text: str) -> List[bytes]:
    """
    Split text into whitespace-delimited words encoded as UTF-8 blocks.

    Examples:
        >>> tokenize_words("The quick  brown\\tfox")
        [b'The', b'quick', b'brown', b'fox']
    """
    return [word.encode("utf-8") for word in text.split()]


class RootCalculator:
    """
    Computes the root digest of a balanced binary Merkle tree.

    Args:
        hasher: Hash capability for leaves and inner nodes (sha256 by default)
        filler: Block used to pad the base layer
        empty_policy: Behaviour for empty input (raise, or one filler leaf)
        max_workers: When greater than 1, pair hashes within each round run
            on a thread pool of this size
    """

    def __init__(
        self,
        hasher: Optional[Hasher] = None,
        filler: Any = FILLER_BLOCK,
        empty_policy: EmptyInputPolicy = EmptyInputPolicy.ERROR,
        max_workers: Optional[int] = None,
    ):
        self.hasher = hasher or Hasher()
        self.filler = filler
        self.empty_policy = EmptyInputPolicy(empty_policy)
        if max_workers is not None and max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.max_workers = max_workers

    @classmethod
    def from_settings(cls, settings: "TreeSettings") -> "RootCalculator":
        """Build a calculator from TreeSettings."""
        return cls(
            hasher=Hasher(settings.algorithm, settings.digest_size),
            filler=settings.filler,
            empty_policy=settings.empty_policy,
            max_workers=settings.max_workers,
        )

    def pad(self, blocks: Sequence[Any]) -> List[Any]:
        """Apply the empty-input policy, then pad to a power of two."""
        if not blocks and self.empty_policy is EmptyInputPolicy.ERROR:
            raise EmptyInputError("No blocks to hash")
        return pad_base_layer(blocks, self.filler)

    def leaf_layer(self, blocks: Sequence[Any]) -> List[Digest]:
        """Pad the blocks and hash each one into the leaf layer."""
        return [self.hasher.hash(block) for block in self.pad(blocks)]

    def calc_root(self, blocks: Sequence[Any]) -> Digest:
        """
        Calculate the Merkle root of an ordered block sequence.

        Args:
            blocks: Pre-tokenized blocks (bytes or str)

        Returns:
            Root digest of ``hasher.digest_size`` bytes

        Raises:
            EmptyInputError: If blocks is empty and the policy is ``error``
            TypeError: If a block is neither bytes nor str
        """
        leaves = self.leaf_layer(blocks)
        logger.debug(
            f"Hashed {len(blocks)} block(s) into {len(leaves)} leaves with {self.hasher!r}"
        )

        if self.max_workers is not None and self.max_workers > 1 and len(leaves) > 2:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                return reduce_to_root(leaves, self.hasher, executor)

        return reduce_to_root(leaves, self.hasher)

    def calc_root_from_text(self, text: str) -> Digest:
        """Calculate the root of a text tokenized on whitespace."""
        return self.calc_root(tokenize_words(text))


def calc_root(blocks: Sequence[Any], hasher: Optional[Hasher] = None) -> Digest:
    """Calculate the Merkle root of blocks with the default padding rules."""
    return RootCalculator(hasher=hasher).calc_root(blocks)
