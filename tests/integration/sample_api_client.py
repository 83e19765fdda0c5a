"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Sample API client for the JSONPlaceholder public API.

Shows how an application builds a concrete client on top of ``HTTPClient``:
one subclass, an ``auth_headers`` override, and one small method per
endpoint. Integration tests drive it through a mocked httpx transport.
"""

from typing import Any, Dict, List, Tuple

from vcutils.http_client import HTTPClient, Outcome

BASE_URL = "https://jsonplaceholder.typicode.com"


class SampleAPIClient(HTTPClient):
    """JSONPlaceholder client."""

    base_url = BASE_URL

    def auth_headers(self) -> List[Tuple[str, str]]:
        return [
            ("Content-Type", "application/json"),
            ("User-Agent", "VCUtils-Sample-Client/1.0"),
        ]

    def get_posts(self) -> Outcome:
        """Fetch all posts."""
        return self.request("GET", f"{self.base_url}/posts")

    def get_post(self, post_id: int) -> Outcome:
        """Fetch a specific post by ID."""
        return self.request("GET", f"{self.base_url}/posts/{post_id}")

    def create_post(self, post_data: Dict[str, Any]) -> Outcome:
        """Create a new post."""
        return self.request("POST", f"{self.base_url}/posts", post_data)

    def update_post(self, post_id: int, post_data: Dict[str, Any]) -> Outcome:
        return self.request("PUT", f"{self.base_url}/posts/{post_id}", post_data)

    def delete_post(self, post_id: int) -> Outcome:
        return self.request("DELETE", f"{self.base_url}/posts/{post_id}")

    def get_users(self) -> Outcome:
        return self.request("GET", f"{self.base_url}/users")

    def get_user(self, user_id: int) -> Outcome:
        return self.request("GET", f"{self.base_url}/users/{user_id}")

    def get_post_comments(self, post_id: int) -> Outcome:
        """Fetch comments for a specific post."""
        return self.request("GET", f"{self.base_url}/posts/{post_id}/comments")

    def get_albums(self) -> Outcome:
        return self.request("GET", f"{self.base_url}/albums")

    def get_invalid_endpoint(self) -> Outcome:
        """Request an endpoint that does not exist."""
        return self.request("GET", f"{self.base_url}/invalid-endpoint")

    def empty_response(self) -> Outcome:
        """Request that answers 204 with no content; decoding is skipped."""
        return self.request("GET", "https://httpbin.org/status/204")
