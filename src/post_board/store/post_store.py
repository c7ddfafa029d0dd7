"""
Post Store Module

Holds the local copy of the post list and keeps it consistent with the
remote resource. Every change is applied only after the server has
confirmed it; failures are logged and leave the list untouched.
"""

import logging
from typing import Callable, List, Optional, Union

from ..api import APIClient, NetworkError, Post
from ..config import config
from ..forms.validator import Draft, has_errors, validate_draft


logger = logging.getLogger(__name__)

# Synchronous yes/no gate, called with the prompt text
ConfirmCallback = Callable[[str], bool]


class PostStore:
    """
    Cached list of posts with create/update/delete against the API.
    """

    def __init__(self, api: Optional[APIClient] = None):
        """
        Initialize the store.

        Args:
            api: Client for the remote resource (a default one is created if None).
        """
        self.api = api or APIClient()
        self.posts: List[Post] = []
        self.is_loading = True
        logger.info("PostStore initialized")

    def get(self, post_id: int) -> Optional[Post]:
        """Return the local entry with this id, if any."""
        for post in self.posts:
            if post.id == post_id:
                return post
        return None

    def load(self) -> List[Post]:
        """
        Replace the local list with the first posts of the remote listing.

        Failures are logged only; the list then stays as it was (empty on
        first load). The loading flag is cleared either way.

        Returns:
            The current local list.
        """
        try:
            posts = self.api.fetch_posts(max_posts=config.api.max_posts)
            self.posts = _unique(posts)
            logger.info(f"Loaded {len(self.posts)} posts")
        except NetworkError as e:
            logger.error(f"Error fetching posts: {e}")
        finally:
            self.is_loading = False

        return self.posts

    def create(self, draft: Draft) -> Optional[Post]:
        """
        Create a post from a valid draft and put it at the front of the list.

        Args:
            draft: Draft that must pass validation.

        Returns:
            The created post, or None if the draft was invalid or the
            request failed.
        """
        errors = validate_draft(draft)
        if has_errors(errors):
            logger.warning(f"Refusing to create invalid draft: {errors}")
            return None

        try:
            data = self.api.create_post(draft.title.strip(), draft.body.strip())
            post = Post.from_dict(data)
        except (NetworkError, AttributeError, TypeError) as e:
            logger.error(f"Error creating post: {e}")
            return None

        # The server may hand back an id already present locally
        self.posts = [post] + [p for p in self.posts if p.id != post.id]
        logger.info(f"Created post {post.id}")
        return post

    def update(self, post_id: int, draft: Union[Draft, Post]) -> Optional[Post]:
        """
        Send the draft fields for a post and merge the server's answer.

        No validation is performed on this path.

        Args:
            post_id: ID of the post to update.
            draft: Object carrying the new title and body.

        Returns:
            The post as confirmed by the server, or None if the request
            or its response failed. When the post is no longer listed the
            confirmed post is still returned, but nothing is added locally.
        """
        try:
            title, body = draft.title.strip(), draft.body.strip()
            data = self.api.update_post(post_id, title, body)
            if not isinstance(data, dict):
                raise NetworkError(f"unexpected response {data!r}")

            current = self.get(post_id)
            if current is None:
                current = Post(id=post_id, title=title, body=body)
            updated = current.merged(data)
        except (NetworkError, AttributeError, TypeError) as e:
            logger.error(f"Error updating post {post_id}: {e}")
            return None

        if self.get(post_id) is None:
            logger.warning(f"Updated post {post_id} is not in the local list")
            return updated

        self.posts = [updated if p.id == post_id else p for p in self.posts]
        logger.info(f"Updated post {post_id}")
        return updated

    def delete(self, post_id: int, confirm: ConfirmCallback) -> bool:
        """
        Delete a post after an explicit yes from the operator.

        Args:
            post_id: ID of the post to delete.
            confirm: Gate called with the prompt; nothing is sent unless it
                returns True.

        Returns:
            True if the server confirmed the deletion.
        """
        if not confirm(config.view.confirm_prompt):
            logger.info(f"Deletion of post {post_id} cancelled")
            return False

        try:
            self.api.delete_post(post_id)
        except NetworkError as e:
            logger.error(f"Error deleting post {post_id}: {e}")
            return False

        self.posts = [p for p in self.posts if p.id != post_id]
        logger.info(f"Deleted post {post_id}")
        return True


def _unique(posts: List[Post]) -> List[Post]:
    seen = set()
    result = []
    for post in posts:
        if post.id in seen:
            continue
        seen.add(post.id)
        result.append(post)
    return result
