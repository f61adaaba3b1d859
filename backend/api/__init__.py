"""
Outreach API package.

Provides the FastAPI application for role resolution and admin-request review.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
