"""HTTP layer - FastAPI application exposing the relationship queries.

Usage:
    uvicorn kinroute.api:create_app --factory
"""

from .app import create_app

__all__ = ["create_app"]
