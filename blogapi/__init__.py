"""
Blog API - posts with JWT-authenticated, author-only mutation.
"""

__version__ = "0.1.0"
