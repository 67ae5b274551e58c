"""
API v1 package.

Contains versioned API routes for user registration and the product catalog.
"""

from src.api.v1.routes import router

__all__ = ["router"]
