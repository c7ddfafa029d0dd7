"""
Store Module

Provides the local post list kept in sync with the remote resource.
"""

from .post_store import ConfirmCallback, PostStore

__all__ = ["ConfirmCallback", "PostStore"]
