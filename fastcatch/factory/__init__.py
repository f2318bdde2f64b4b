"""
Factory module for FastAPI applications.
"""

from fastcatch.factory.app import configure_app

__all__ = ["configure_app"]
