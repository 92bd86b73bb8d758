"""
Web front-end for scicalc.

Serves the calculator state machine over a JSON API.
"""

from .server import app

__all__ = ["app"]
