"""
Services - the rules behind each endpoint.
"""

from blogapi.services.users import UserService
from blogapi.services.posts import PostService

__all__ = [
    "UserService",
    "PostService",
]
