"""
Pytest fixtures: an in-memory posts API served through httpx.MockTransport.

Every request the client sends is recorded so tests can assert on the
exact calls made.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from post_board.api.client import APIClient


BASE_URL = "https://api.test"


class FakePostsServer:
    """Minimal JSONPlaceholder-like backend."""

    def __init__(self, posts: Optional[List[Dict[str, Any]]] = None):
        self.posts = posts if posts is not None else [
            {"userId": 1, "id": 1, "title": "A", "body": "B"},
            {"userId": 1, "id": 2, "title": "Second", "body": "Second body"},
            {"userId": 1, "id": 3, "title": "Third", "body": "Third body"},
        ]
        self.requests: List[httpx.Request] = []
        self.failing: Set[str] = set()  # HTTP methods answered with 500
        self.unreachable = False
        self.next_id = 101
        self.update_response: Optional[Dict[str, Any]] = None

    def requests_for(self, method: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if self.unreachable:
            raise httpx.ConnectError("connection refused", request=request)
        if request.method in self.failing:
            return httpx.Response(500, json={})

        parts = request.url.path.strip("/").split("/")
        if parts[0] != "posts":
            return httpx.Response(404, json={})

        if len(parts) == 1:
            if request.method == "GET":
                return httpx.Response(200, json=self.posts)
            if request.method == "POST":
                payload = json.loads(request.content)
                created = dict(payload, id=self.next_id)
                return httpx.Response(201, json=created)
            return httpx.Response(405, json={})

        post_id = int(parts[1])
        if request.method == "PUT":
            payload = json.loads(request.content)
            if self.update_response is not None:
                return httpx.Response(200, json=self.update_response)
            return httpx.Response(200, json=payload)
        if request.method == "DELETE":
            return httpx.Response(200, json={})
        if request.method == "GET":
            for post in self.posts:
                if post["id"] == post_id:
                    return httpx.Response(200, json=post)
            return httpx.Response(404, json={})

        return httpx.Response(405, json={})


@pytest.fixture
def server():
    """A fresh fake backend for each test."""
    return FakePostsServer()


@pytest.fixture
def client(server):
    """APIClient wired to the fake backend."""
    return APIClient(base_url=BASE_URL, transport=httpx.MockTransport(server.handle))
