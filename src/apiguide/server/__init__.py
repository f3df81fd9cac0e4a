"""HTTP API for apiguide"""

from .app import create_app

__all__ = ["create_app"]
