"""Flask web API for rotaplan."""

from .app import create_app

__all__ = ["create_app"]
