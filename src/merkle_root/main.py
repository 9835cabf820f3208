"""
Merkle Root - Main root computation module

This module contains the functions used by both the CLI and API interfaces to
compute Merkle roots from block lists, text or files, together with the
metadata describing the tree that was built.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence

from .config import TreeSettings
from .tree import RootCalculator, get_tree_depth, next_power_of_two, tokenize_words

logger = logging.getLogger(__name__)


@dataclass
class RootResult:
    """Container for root computation results."""
    root: bytes
    leaf_count: int
    padded_count: int
    depth: int
    algorithm: str
    digest_size: int
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def filler_count(self) -> int:
        return self.padded_count - self.leaf_count


def compute_root(blocks: Sequence[Any], settings: Optional[TreeSettings] = None) -> RootResult:
    """
    Compute the Merkle root of pre-tokenized blocks.

    Args:
        blocks: Ordered blocks
        settings: Tree settings; read from the environment when omitted

    Returns:
        RootResult with the root and the shape of the tree

    Raises:
        EmptyInputError: If blocks is empty and the policy is ``error``
        ValueError: If the settings are invalid
    """
    settings = settings or TreeSettings.from_env()
    calculator = RootCalculator.from_settings(settings)

    root = calculator.calc_root(blocks)
    padded_count = next_power_of_two(len(blocks))

    result = RootResult(
        root=root,
        leaf_count=len(blocks),
        padded_count=padded_count,
        depth=get_tree_depth(padded_count),
        algorithm=calculator.hasher.algorithm,
        digest_size=calculator.hasher.digest_size,
        metadata={
            "empty_policy": calculator.empty_policy.value,
            "filler": calculator.filler.hex(),
        },
    )
    logger.info(
        f"Computed root {root.hex()} over {result.leaf_count} block(s) "
        f"({result.filler_count} filler, depth {result.depth})"
    )
    return result


def compute_text_root(text: str, settings: Optional[TreeSettings] = None) -> RootResult:
    """Compute the root of whitespace-delimited words in text."""
    return compute_root(tokenize_words(text), settings)


def compute_file_root(path: str, settings: Optional[TreeSettings] = None) -> RootResult:
    """Compute the root of the words in a UTF-8 text file."""
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    logger.debug(f"Loaded {len(text)} characters from {path}")
    return compute_text_root(text, settings)
