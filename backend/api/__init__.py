"""
Bastion API package.

Provides the FastAPI application for the Bastion identity service.
"""

from .app import create_app

__all__ = ["create_app"]
