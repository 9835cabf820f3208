"""
REST API for Merkle Root

This module provides a FastAPI-based REST API for computing Merkle roots
over block lists or text, with full OpenAPI documentation.
"""

import logging
import traceback
from dataclasses import replace

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import TreeSettings
from ..main import RootResult, compute_root, compute_text_root
from ..models.api_models import ErrorResponse, HealthResponse, RootRequest, RootResponse
from ..tree import EmptyInputError, EmptyInputPolicy, MalformedLayerError
from ..utils.hex_helpers import bytes_to_hex, hex_to_bytes

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Merkle Root API",
    description="""
    Compute the root digest of a balanced binary Merkle tree.

    The base layer is padded with filler blocks to a power-of-two length,
    every block is hashed into a leaf, and adjacent pairs are hashed together
    level by level until a single root remains.

    ## Input
    - **blocks**: an ordered list of blocks, UTF-8 text or hex encoded
    - **text**: free text, split into words on whitespace

    ## Hashing
    The hash algorithm and digest width default to the server configuration
    and can be overridden per request.
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_settings() -> TreeSettings:
    """Dependency to get the tree settings from the environment."""
    return TreeSettings.from_env()


@app.exception_handler(EmptyInputError)
async def empty_input_handler(request, exc: EmptyInputError):
    """Handle empty input."""
    logger.error(f"Empty input: {exc}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error=str(exc),
            code="EMPTY_INPUT",
            details={"error_type": "EmptyInputError"}
        ).model_dump()
    )


@app.exception_handler(ValueError)
async def value_error_handler(request, exc: ValueError):
    """Handle validation errors."""
    logger.error(f"Validation error: {exc}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error=str(exc),
            code="VALIDATION_ERROR",
            details={"error_type": "ValueError"}
        ).model_dump()
    )


@app.exception_handler(MalformedLayerError)
async def malformed_layer_handler(request, exc: MalformedLayerError):
    """Handle internal tree invariant violations."""
    logger.error(f"Malformed layer: {exc}\n{traceback.format_exc()}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error=str(exc),
            code="MALFORMED_LAYER",
            details={"error_type": "MalformedLayerError"}
        ).model_dump()
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc: Exception):
    """Handle unexpected errors."""
    logger.error(f"Unexpected error: {exc}\n{traceback.format_exc()}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal server error",
            code="INTERNAL_ERROR",
            details={"error_type": type(exc).__name__}
        ).model_dump()
    )


def _request_settings(request: RootRequest, base: TreeSettings) -> TreeSettings:
    settings = base
    if request.algorithm is not None:
        # a new algorithm starts from its own natural width
        settings = replace(settings, algorithm=request.algorithm, digest_size=None)
    if request.digest_size is not None:
        settings = replace(settings, digest_size=request.digest_size)
    if request.allow_empty:
        settings = replace(settings, empty_policy=EmptyInputPolicy.FILLER)
    return settings


def _to_response(result: RootResult) -> RootResponse:
    return RootResponse(
        root=bytes_to_hex(result.root),
        leaf_count=result.leaf_count,
        padded_count=result.padded_count,
        depth=result.depth,
        algorithm=result.algorithm,
        digest_size=result.digest_size,
        metadata=result.metadata,
    )


@app.get("/", response_model=dict)
async def root():
    """API root endpoint with basic information."""
    return {
        "name": "Merkle Root API",
        "version": __version__,
        "description": "Compute balanced binary Merkle tree roots",
        "docs": "/docs",
        "health": "/health"
    }


@app.get("/health", response_model=HealthResponse)
async def health_check(settings: TreeSettings = Depends(get_settings)):
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        algorithm=settings.algorithm,
        version=__version__
    )


@app.post("/root", response_model=RootResponse)
def compute_merkle_root(
    request: RootRequest,
    base_settings: TreeSettings = Depends(get_settings)
):
    """
    Compute the Merkle root of the given blocks or text.

    **Response Structure:**
    - `root`: root digest as 0x-prefixed hex
    - `leaf_count` / `padded_count`: blocks before and after padding
    - `depth`: number of reduction rounds
    """
    settings = _request_settings(request, base_settings)

    if request.text is not None:
        result = compute_text_root(request.text, settings)
    elif request.encoding == "hex":
        result = compute_root([hex_to_bytes(b) for b in request.blocks], settings)
    else:
        result = compute_root([b.encode("utf-8") for b in request.blocks], settings)

    return _to_response(result)


def run_server(host: str = "127.0.0.1", port: int = 8000, dev: bool = False):
    """
    Run the API server.

    Args:
        host: Host to bind to
        port: Port to bind to
        dev: Enable development mode with auto-reload
    """
    logger.info(f"Starting Merkle Root API server on {host}:{port}")
    uvicorn.run(
        "merkle_root.api.rest_api:app",
        host=host,
        port=port,
        reload=dev,
        log_level="info"
    )


if __name__ == "__main__":
    run_server(dev=True)
