"""
Session Module

Provides the edit session state machine and the two-step delete
confirmation.
"""

from .edit_session import EditSession
from .confirmation import ConfirmationState, DeleteConfirmation

__all__ = ["EditSession", "ConfirmationState", "DeleteConfirmation"]
