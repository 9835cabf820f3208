"""
API Models Package

Pydantic request and response models for the Merkle root API.

Usage:
    from merkle_root.models import RootRequest, RootResponse

    request = RootRequest(text="The quick brown fox")
"""

from .api_models import (
    RootRequest,
    RootResponse,
    ErrorResponse,
    HealthResponse
)

__all__ = [
    'RootRequest',
    'RootResponse',
    'ErrorResponse',
    'HealthResponse'
]
