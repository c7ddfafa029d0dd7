"""
New Post Form Module

State of the creation form: the draft, its inline field errors and
the submission-in-progress flag.
"""

import logging
from typing import TYPE_CHECKING

from ..config import config
from .validator import FIELDS, Draft, FormErrors, has_errors, validate_draft

if TYPE_CHECKING:
    from ..store.post_store import PostStore


logger = logging.getLogger(__name__)


class NewPostForm:
    """
    Creation form state.

    Validation gates submission; the draft and errors are reset only
    after the server has confirmed the new post.
    """

    def __init__(self):
        self.draft = Draft()
        self.errors: FormErrors = {}
        self.is_submitting = False

    @property
    def button_label(self) -> str:
        """Label of the submit control."""
        if self.is_submitting:
            return config.view.submitting_label
        return config.view.submit_label

    def set_field(self, name: str, value: str) -> None:
        """
        Change one draft field and clear that field's error, if any.

        Args:
            name: "title" or "body".
            value: New field text.

        Raises:
            ValueError: If the field name is unknown.
        """
        if name not in FIELDS:
            raise ValueError(f"Unknown form field: {name!r}")
        if self.is_submitting:
            logger.debug(f"Ignoring edit of {name} while submitting")
            return

        setattr(self.draft, name, value)
        if self.errors.get(name):
            self.errors[name] = None

    def validate(self) -> bool:
        """Recompute all field errors; True if the draft is valid."""
        self.errors = validate_draft(self.draft)
        return not has_errors(self.errors)

    def submit(self, store: "PostStore") -> bool:
        """
        Validate and, if valid, create the post through the store.

        Args:
            store: Store that performs the creation request.

        Returns:
            True if the post was created.
        """
        if self.is_submitting:
            logger.debug("Submission already in progress")
            return False

        if not self.validate():
            logger.info(f"Draft rejected: {self.errors}")
            return False

        self.is_submitting = True
        try:
            created = store.create(self.draft)
        finally:
            self.is_submitting = False

        if created is None:
            return False

        self.reset()
        return True

    def reset(self) -> None:
        """Empty the draft and drop all errors."""
        self.draft = Draft()
        self.errors = {}
