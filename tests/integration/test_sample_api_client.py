"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Integration tests for a concrete API client built on HTTPClient.

Drives the full stack (facade, httpx adapter, JSON serializer, normalizer,
telemetry) against an in-process JSONPlaceholder stand-in served through
``httpx.MockTransport``.
"""

import json
import threading

import httpx
import pytest

from sample_api_client import SampleAPIClient
from vcutils.http_client import Failure, HttpxAdapter, Success

POSTS = [
    {"userId": 1, "id": 1, "title": "sunt aut facere", "body": "quia et suscipit"},
    {"userId": 1, "id": 2, "title": "qui est esse", "body": "est rerum tempore"},
]

USER = {
    "id": 1,
    "name": "Leanne Graham",
    "address": {"street": "Kulas Light", "city": "Gwenborough"},
}


def jsonplaceholder(request: httpx.Request) -> httpx.Response:
    """Minimal in-process JSONPlaceholder."""
    if request.url.host == "httpbin.org" and request.url.path == "/status/204":
        return httpx.Response(204)
    if request.url.host == "down.invalid":
        raise httpx.ConnectError("connection refused", request=request)

    method, path = request.method, request.url.path
    if method == "GET" and path == "/posts":
        return httpx.Response(200, json=POSTS)
    if method == "GET" and path == "/posts/1":
        return httpx.Response(200, json=POSTS[0])
    if method == "POST" and path == "/posts":
        return httpx.Response(201, json={**json.loads(request.content), "id": 101})
    if method == "PUT" and path == "/posts/1":
        return httpx.Response(200, json={**json.loads(request.content), "id": 1})
    if method == "DELETE" and path == "/posts/1":
        return httpx.Response(200, json={})
    if method == "GET" and path == "/users":
        return httpx.Response(200, json=[USER])
    if method == "GET" and path == "/users/1":
        return httpx.Response(200, json=USER)
    if method == "GET" and path == "/posts/1/comments":
        return httpx.Response(200, json=[{"postId": 1, "id": 1, "email": "Eliseo@gardner.biz"}])
    if method == "GET" and path == "/albums":
        return httpx.Response(200, json=[{"userId": 1, "id": 1, "title": "quidem molestiae enim"}])
    if method == "GET" and path == "/html":
        return httpx.Response(200, text="<html>maintenance</html>")
    return httpx.Response(404, json={})


@pytest.fixture
def client():
    adapter = HttpxAdapter(transport=httpx.MockTransport(jsonplaceholder))
    with SampleAPIClient(adapter=adapter, log_level="none") as api_client:
        yield api_client


class TestSampleAPIClient:
    def test_get_posts(self, client):
        outcome = client.get_posts()
        assert isinstance(outcome, Success)
        assert outcome.status == 200
        assert [post.id for post in outcome.body] == [1, 2]

    def test_get_post(self, client):
        outcome = client.get_post(1)
        assert outcome == Success(200, POSTS[0])
        assert outcome.body.title == "sunt aut facere"

    def test_create_post(self, client):
        outcome = client.create_post({"title": "foo", "body": "bar", "userId": 1})
        assert outcome == Success(201, {"title": "foo", "body": "bar", "userId": 1, "id": 101})

    def test_update_post(self, client):
        outcome = client.update_post(1, {"title": "updated"})
        assert outcome.status == 200
        assert outcome.body.title == "updated"

    def test_delete_post(self, client):
        assert client.delete_post(1) == Success(200, {})

    def test_nested_user_fields(self, client):
        outcome = client.get_user(1)
        assert outcome.body.address.city == "Gwenborough"

    def test_list_endpoints(self, client):
        assert client.get_users().body[0].name == "Leanne Graham"
        assert client.get_post_comments(1).body[0].postId == 1
        assert client.get_albums().body[0].title == "quidem molestiae enim"

    def test_invalid_endpoint(self, client):
        outcome = client.get_invalid_endpoint()
        assert outcome == Failure(404, {})

    def test_empty_response(self, client):
        assert client.empty_response() == Success(204, b"")

    def test_undecodable_success_body(self, client):
        outcome = client.request("GET", f"{client.base_url}/html")
        assert isinstance(outcome, Failure)
        assert outcome.status == 200
        assert outcome.body == b"<html>maintenance</html>"

    def test_connection_refused(self, client):
        outcome = client.request("GET", "http://down.invalid/posts")
        assert isinstance(outcome, Failure)
        assert outcome.status is None
        assert outcome.message == "Error making request: connect_error"

    def test_auth_headers_are_sent(self):
        seen = {}

        def handler(request):
            seen.update(request.headers)
            return httpx.Response(200, json=[])

        adapter = HttpxAdapter(transport=httpx.MockTransport(handler))
        with SampleAPIClient(adapter=adapter, log_level="none") as api_client:
            api_client.create_post({"title": "foo"})

        assert seen["user-agent"] == "VCUtils-Sample-Client/1.0"
        assert seen["content-type"] == "application/json"

    def test_concurrent_requests_share_one_client(self, client):
        results = []

        def worker():
            results.append(client.get_post(1))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert len(results) == 8
        assert all(outcome == Success(200, POSTS[0]) for outcome in results)

    def test_telemetry_sees_every_call(self):
        events = []
        lock = threading.Lock()
        done = threading.Event()

        def listener(event):
            with lock:
                events.append(event)
                if len(events) == 3:
                    done.set()

        adapter = HttpxAdapter(transport=httpx.MockTransport(jsonplaceholder))
        with SampleAPIClient(adapter=adapter, log_level="none", telemetry_listener=listener) as api_client:
            api_client.get_post(1)
            api_client.get_invalid_endpoint()
            api_client.request("GET", "http://down.invalid/")

        assert done.wait(timeout=5)
        assert sorted(event.url for event in events) == [
            "http://down.invalid/",
            "https://jsonplaceholder.typicode.com/invalid-endpoint",
            "https://jsonplaceholder.typicode.com/posts/1",
        ]
        assert all(event.client.endswith("SampleAPIClient") for event in events)
