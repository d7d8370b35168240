"""
HTTP API.
"""

from blogapi.api.app import create_app

__all__ = ["create_app"]
