"""
Edit Session Module

Tracks the single post being edited and its working draft.

States:
    Idle            - no post is being edited
    Editing(post_id) - a draft copy of one post is open
"""

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Optional

from ..api import Post
from ..forms.validator import FIELDS

if TYPE_CHECKING:
    from ..store.post_store import PostStore


logger = logging.getLogger(__name__)


class EditSession:
    """
    Idle / Editing(post_id) state machine.

    Saving performs no validation; the draft goes to the server as typed
    (trimmed by the store).
    """

    def __init__(self):
        self.post_id: Optional[int] = None
        self.draft: Optional[Post] = None

    @property
    def is_active(self) -> bool:
        return self.post_id is not None

    def is_editing(self, post_id: int) -> bool:
        """True if this post is the one currently being edited."""
        return self.post_id is not None and self.post_id == post_id

    def start(self, post: Post) -> None:
        """
        Open an edit on a post, replacing any session already open.

        Args:
            post: The stored post; a copy becomes the draft.
        """
        if self.is_active and self.post_id != post.id:
            logger.info(f"Discarding open edit of post {self.post_id}")

        self.post_id = post.id
        self.draft = replace(post)
        logger.debug(f"Editing post {post.id}")

    def set_field(self, name: str, value: str) -> None:
        """
        Change a draft field. Does nothing while Idle.

        Raises:
            ValueError: If the field name is unknown.
        """
        if name not in FIELDS:
            raise ValueError(f"Unknown post field: {name!r}")
        if self.draft is None:
            return
        setattr(self.draft, name, value)

    def save(self, store: "PostStore") -> bool:
        """
        Send the draft through the store; close the session on success.

        Returns:
            True if the update was confirmed. On failure the session
            stays open with its draft.
        """
        if self.post_id is None or self.draft is None:
            return False

        if store.update(self.post_id, self.draft) is None:
            return False

        self.close()
        return True

    def cancel(self) -> None:
        """Discard the draft unconditionally."""
        if self.is_active:
            logger.debug(f"Cancelled edit of post {self.post_id}")
        self.close()

    def close(self) -> None:
        self.post_id = None
        self.draft = None

    def display(self, post: Post) -> Post:
        """The draft for the post being edited, the stored post otherwise."""
        if self.draft is not None and self.is_editing(post.id):
            return self.draft
        return post
