"""API router package for endpoint composition."""

from .compatibility import api_create_compatibility_router

__all__ = ["api_create_compatibility_router"]
