"""
Tree Configuration

Settings for root computation, read from environment variables. A ``.env``
file in the working directory is loaded on import.

Environment variables:
- MERKLE_HASH_ALGORITHM: sha256 (default), sha3_256, blake2b or blake3
- MERKLE_DIGEST_SIZE: digest width in bytes (defaults to the algorithm's width)
- MERKLE_EMPTY_POLICY: "error" (default) or "filler"
- MERKLE_FILLER_HEX: filler block as hex (defaults to the empty block)
- MERKLE_MAX_WORKERS: thread pool size for per-round parallel hashing
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv

from .constants import DEFAULT_ALGORITHM, FILLER_BLOCK, SUPPORTED_ALGORITHMS
from .tree.calculator import EmptyInputPolicy
from .utils.hex_helpers import hex_to_bytes

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class TreeSettings:
    """Configuration for hashing and padding."""
    algorithm: str = DEFAULT_ALGORITHM
    digest_size: Optional[int] = None
    empty_policy: EmptyInputPolicy = EmptyInputPolicy.ERROR
    filler: bytes = FILLER_BLOCK
    max_workers: Optional[int] = None

    @classmethod
    def from_env(cls) -> "TreeSettings":
        """
        Build settings from MERKLE_* environment variables.

        Raises:
            ValueError: If any variable holds an invalid value
        """
        algorithm = os.getenv("MERKLE_HASH_ALGORITHM", DEFAULT_ALGORITHM).lower()
        if algorithm not in SUPPORTED_ALGORITHMS:
            raise ValueError(
                f"MERKLE_HASH_ALGORITHM must be one of {', '.join(SUPPORTED_ALGORITHMS)}, "
                f"got {algorithm!r}"
            )

        policy = os.getenv("MERKLE_EMPTY_POLICY", EmptyInputPolicy.ERROR.value).lower()
        try:
            empty_policy = EmptyInputPolicy(policy)
        except ValueError:
            raise ValueError(f"MERKLE_EMPTY_POLICY must be 'error' or 'filler', got {policy!r}")

        try:
            filler = hex_to_bytes(os.getenv("MERKLE_FILLER_HEX", ""))
        except ValueError as e:
            raise ValueError(f"MERKLE_FILLER_HEX is not valid hex: {e}")

        settings = cls(
            algorithm=algorithm,
            digest_size=_optional_int("MERKLE_DIGEST_SIZE"),
            empty_policy=empty_policy,
            filler=filler,
            max_workers=_optional_int("MERKLE_MAX_WORKERS"),
        )
        logger.debug(f"Loaded tree settings from environment: {settings}")
        return settings

    def override(self, **changes) -> "TreeSettings":
        """Return a copy with the non-None keyword values applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
