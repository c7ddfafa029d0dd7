"""
Delete Confirmation Module

Two-step confirmation for front ends that cannot block on a prompt:
a deletion is requested first and resolved by a later yes/no answer.
"""

import logging
from enum import Enum

from ..config import config


logger = logging.getLogger(__name__)


class ConfirmationState(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class DeleteConfirmation:
    """
    PendingConfirmation -> Confirmed / Cancelled for one post.

    The answer given to ``resolve`` is what the store's confirmation
    gate receives.
    """

    def __init__(self, post_id: int):
        self.post_id = post_id
        self.state = ConfirmationState.PENDING
        self.prompt = config.view.confirm_prompt
        logger.debug(f"Delete of post {post_id} awaiting confirmation")

    @property
    def is_pending(self) -> bool:
        return self.state is ConfirmationState.PENDING

    def resolve(self, answer: bool) -> bool:
        """
        Record the operator's answer.

        Args:
            answer: True to confirm the deletion.

        Returns:
            The answer.

        Raises:
            RuntimeError: If the confirmation was already resolved.
        """
        if not self.is_pending:
            raise RuntimeError(
                f"Confirmation for post {self.post_id} already {self.state.value}"
            )

        self.state = ConfirmationState.CONFIRMED if answer else ConfirmationState.CANCELLED
        return answer
