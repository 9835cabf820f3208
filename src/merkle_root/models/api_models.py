"""
API Models

This module defines Pydantic models for API request and response validation.
"""

from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..constants import MAX_DIGEST_SIZE, SUPPORTED_ALGORITHMS


class ErrorResponse(BaseModel):
    """
    Response model for API errors.

    Attributes:
        error: Error message
        code: Error code (string identifier)
        details: Additional error details
    """
    error: str = Field(..., description="Error message")
    code: str = Field(..., description="Error code")
    details: Optional[dict] = Field(default=None, description="Additional error details")


class HealthResponse(BaseModel):
    """
    Response model for health check endpoint.

    Attributes:
        status: Service status
        algorithm: Configured default hash algorithm
        version: Service version
        timestamp: Response timestamp
    """
    status: str = Field(..., description="Service status")
    algorithm: str = Field(..., description="Default hash algorithm")
    version: str = Field(..., description="Service version")
    timestamp: Optional[str] = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(),
        description="Response timestamp",
    )


class RootRequest(BaseModel):
    """
    Request model for root computation.

    Exactly one of ``blocks`` or ``text`` must be given. Text is split on
    whitespace; blocks are used as-is, decoded according to ``encoding``.

    Attributes:
        blocks: Ordered blocks
        text: Text to tokenize into words
        encoding: How blocks are encoded ("utf-8" or "hex")
        algorithm: Hash algorithm override
        digest_size: Digest width override in bytes
        allow_empty: Treat empty input as a single filler leaf
    """
    blocks: Optional[List[str]] = Field(default=None, description="Ordered blocks")
    text: Optional[str] = Field(default=None, description="Whitespace-delimited text")
    encoding: str = Field(default="utf-8", description="Block encoding: 'utf-8' or 'hex'")
    algorithm: Optional[str] = Field(default=None, description="Hash algorithm")
    digest_size: Optional[int] = Field(
        default=None, ge=1, le=MAX_DIGEST_SIZE, description="Digest width in bytes"
    )
    allow_empty: bool = Field(default=False, description="Allow empty input (single filler leaf)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "blocks": ["The", "quick", "brown", "fox", "jumps", "over", "the", "lazy", "dog"],
                "encoding": "utf-8",
                "algorithm": "sha256",
            }
        }
    )

    @field_validator('encoding')
    @classmethod
    def validate_encoding(cls, v):
        """Validate block encoding."""
        if v not in ("utf-8", "hex"):
            raise ValueError("Encoding must be 'utf-8' or 'hex'")
        return v

    @field_validator('algorithm')
    @classmethod
    def validate_algorithm(cls, v):
        """Validate hash algorithm name."""
        if v is not None and v.lower() not in SUPPORTED_ALGORITHMS:
            raise ValueError(f"Algorithm must be one of {', '.join(SUPPORTED_ALGORITHMS)}")
        return v.lower() if v is not None else v

    @model_validator(mode='after')
    def validate_source(self):
        """Require exactly one input source."""
        if (self.blocks is None) == (self.text is None):
            raise ValueError("Provide exactly one of 'blocks' or 'text'")
        return self


class RootResponse(BaseModel):
    """
    Response model for root computation.
    Matches the RootResult from main.py for consistency.
    """
    root: str = Field(..., description="Root digest as hex string")
    leaf_count: int = Field(..., description="Number of input blocks")
    padded_count: int = Field(..., description="Number of leaves after padding")
    depth: int = Field(..., description="Number of reduction rounds")
    algorithm: str = Field(..., description="Hash algorithm used")
    digest_size: int = Field(..., description="Digest width in bytes")
    metadata: dict = Field(default_factory=dict, description="Additional metadata")

    @field_validator('root')
    @classmethod
    def validate_hex_format(cls, v):
        """Validate hex string format."""
        if not v.startswith('0x'):
            raise ValueError("Must be a hex string starting with '0x'")
        return v
