"""
API Client Module

HTTP client for the remote posts resource (JSONPlaceholder-style REST
endpoints). Every call issues exactly one request; failures of any kind
are reported as NetworkError.
"""

import logging
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, replace

import httpx

from ..config import config


logger = logging.getLogger(__name__)


class NetworkError(Exception):
    """A request could not be sent or the response was not a success."""


@dataclass
class Post:
    """Represents a post owned by the remote resource."""
    id: int
    title: str
    body: str
    user_id: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Post":
        """
        Build a post from a JSON object returned by the API.

        Raises:
            NetworkError: If the id is missing or title/body is not text.
        """
        if not isinstance(data, dict) or "id" not in data:
            raise NetworkError(f"Malformed post in response: {data!r}")

        return cls(
            id=data["id"],
            title=_text_field(data, "title", ""),
            body=_text_field(data, "body", ""),
            user_id=data.get("userId"),
        )

    def merged(self, data: Dict[str, Any]) -> "Post":
        """
        Return a copy with the server-returned fields applied.

        Fields missing from ``data`` keep their current values.

        Raises:
            NetworkError: If a returned title/body is not text.
        """
        return replace(
            self,
            title=_text_field(data, "title", self.title),
            body=_text_field(data, "body", self.body),
            user_id=data.get("userId", self.user_id),
        )


def _text_field(data: Dict[str, Any], name: str, default: str) -> str:
    value = data.get(name, default)
    if not isinstance(value, str):
        raise NetworkError(f"Field {name!r} is not text: {value!r}")
    return value


class APIClient:
    """
    HTTP client for the posts resource.

    One short-lived httpx.Client is opened per request. No retries are
    performed and no timeout is set unless configured.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        """
        Initialize the API client.

        Args:
            base_url: Root URL of the API (uses config default if None).
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
        """
        self.base_url = base_url or config.api.base_url
        self.posts_path = config.api.posts_endpoint
        self._transport = transport
        logger.info(f"APIClient initialized (base_url: {self.base_url})")

    def fetch_posts(self, max_posts: Optional[int] = None) -> List[Post]:
        """
        Fetch posts from the API.

        Args:
            max_posts: Maximum number of posts to return (uses config default if None).

        Returns:
            List of Post objects, truncated to max_posts.

        Raises:
            NetworkError: If the request or decoding fails.
        """
        max_posts = max_posts or config.api.max_posts

        data = self._request("GET", self.posts_path)
        if not isinstance(data, list):
            raise NetworkError(f"Unexpected API response format: {type(data).__name__}")

        posts = [Post.from_dict(item) for item in data[:max_posts]]
        logger.info(f"Fetched {len(posts)} posts successfully")
        return posts

    def create_post(self, title: str, body: str) -> Dict[str, Any]:
        """
        Create a post.

        Args:
            title: Post title, sent as given.
            body: Post body, sent as given.

        Returns:
            The created post as returned by the server (id assigned there).
        """
        payload = {
            "title": title,
            "body": body,
            "userId": config.api.user_id,
        }
        return self._request("POST", self.posts_path, payload)

    def update_post(self, post_id: int, title: str, body: str) -> Dict[str, Any]:
        """
        Replace the fields of an existing post.

        Args:
            post_id: ID of the post to update.
            title: New title.
            body: New body.

        Returns:
            The updated post as returned by the server.
        """
        payload = {
            "id": post_id,
            "title": title,
            "body": body,
            "userId": config.api.user_id,
        }
        return self._request("PUT", self._post_path(post_id), payload)

    def delete_post(self, post_id: int) -> None:
        """Delete a post; the response body is ignored."""
        self._request("DELETE", self._post_path(post_id), decode=False)

    def test_connection(self) -> bool:
        """
        Check that the API answers at all.

        Returns:
            True if the posts endpoint responded with a success status.
        """
        try:
            self._request("GET", self.posts_path, decode=False)
            return True
        except NetworkError as e:
            logger.warning(f"API connection test failed: {e}")
            return False

    def _post_path(self, post_id: int) -> str:
        return f"{self.posts_path}/{post_id}"

    def _client(self) -> httpx.Client:
        kwargs: Dict[str, Any] = {"base_url": self.base_url}
        if config.api.timeout_seconds is not None:
            kwargs["timeout"] = config.api.timeout_seconds
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.Client(**kwargs)

    def _request(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        decode: bool = True
    ) -> Any:
        """
        Send a single request and decode the JSON response.

        Raises:
            NetworkError: On transport failure, non-success status or
                an undecodable body.
        """
        headers = {}
        if payload is not None:
            headers["Content-type"] = config.api.content_type

        logger.debug(f"{method} {self.base_url}{path}")

        try:
            with self._client() as client:
                response = client.request(method, path, json=payload, headers=headers)
                response.raise_for_status()
                if not decode:
                    return None
                return response.json()

        except httpx.HTTPStatusError as e:
            raise NetworkError(
                f"{method} {path} returned {e.response.status_code}"
            ) from e

        except httpx.HTTPError as e:
            raise NetworkError(f"{method} {path} failed: {e}") from e

        except ValueError as e:
            raise NetworkError(f"{method} {path} returned invalid JSON: {e}") from e
