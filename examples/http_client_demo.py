"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Demo script for the VCUtils HTTP client.

This script demonstrates building a concrete client on top of HTTPClient,
branching on Success / Failure outcomes, and attaching a telemetry listener.

Requirements:
- Network access to https://jsonplaceholder.typicode.com
"""

import asyncio
import time

from vcutils.http_client import (
    AsyncHTTPClient,
    Failure,
    HTTPClient,
    Success,
    TelemetryEvent,
)
from vcutils.logging_config import setup_logging

BASE_URL = "https://jsonplaceholder.typicode.com"


class PlaceholderClient(HTTPClient):
    """Client for the JSONPlaceholder demo API."""

    def auth_headers(self):
        return [("User-Agent", "VCUtils-Demo/1.0")]


def print_event(event: TelemetryEvent) -> None:
    print(f"   [telemetry] {event.method} {event.url} -> {event.outcome.status} in {event.elapsed_ms} ms")


def demo_synchronous_client():
    """Demonstrate synchronous HTTPClient usage."""
    print("=== Synchronous HTTPClient Demo ===\n")

    with PlaceholderClient(log_level="info", telemetry_listener=print_event) as client:
        # 1. Fetch a resource
        print("1. Fetching post 1...")
        outcome = client.get(f"{BASE_URL}/posts/1")
        if isinstance(outcome, Success):
            print(f"   Title: {outcome.body.title}\n")
        else:
            print(f"   Failed: {outcome.status} {outcome.message}\n")

        # 2. Create a resource; the dict body goes through the JSON serializer
        print("2. Creating a post...")
        outcome = client.post(f"{BASE_URL}/posts", {"title": "foo", "body": "bar", "userId": 1})
        print(f"   Status: {outcome.status}, new id: {outcome.body.id}\n")

        # 3. Missing resources come back as Failure, never as exceptions
        print("3. Requesting a missing endpoint...")
        outcome = client.get(f"{BASE_URL}/invalid-endpoint")
        if isinstance(outcome, Failure):
            print(f"   {outcome.kind.value} failure with status {outcome.status}\n")

        # 4. Transport problems are values too
        print("4. Requesting an unreachable host...")
        outcome = client.get("http://localhost:1/", options={"timeout": 1})
        print(f"   {outcome.message}\n")

    # Telemetry is delivered in the background
    time.sleep(0.5)


async def demo_async_client():
    """Demonstrate AsyncHTTPClient usage."""
    print("=== Async HTTPClient Demo ===\n")

    async with AsyncHTTPClient(name="demo.async", log_level="none") as client:
        outcomes = await asyncio.gather(
            *(client.get(f"{BASE_URL}/users/{user_id}") for user_id in range(1, 4))
        )
        for outcome in outcomes:
            if outcome.ok:
                print(f"   {outcome.body.name} lives in {outcome.body.address.city}")
    print()


if __name__ == "__main__":
    setup_logging(level="INFO", json_format=False)

    demo_synchronous_client()
    asyncio.run(demo_async_client())
