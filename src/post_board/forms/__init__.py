"""
Forms Module

Provides draft validation and the creation form state.
"""

from .validator import Draft, FormErrors, validate_draft
from .new_post import NewPostForm

__all__ = ["Draft", "FormErrors", "validate_draft", "NewPostForm"]
