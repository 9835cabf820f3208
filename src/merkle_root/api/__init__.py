"""
REST API Package

FastAPI application exposing Merkle root computation over HTTP.

Usage:
    from merkle_root.api import app, run_server

    run_server(port=8000)
"""

from .rest_api import app, run_server

__all__ = [
    'app',
    'run_server'
]
