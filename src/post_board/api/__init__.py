"""
API Client Module

Provides the HTTP client for the remote posts resource.
"""

from .client import APIClient, NetworkError, Post

__all__ = ["APIClient", "NetworkError", "Post"]
