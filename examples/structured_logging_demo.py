#!/usr/bin/env python
"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

Demo of structured logging in VCUtils.

Shows the JSON request trail the HTTP client writes, with correlation IDs
carried across calls. Uses the mock adapter, so no network is needed.
"""

import tempfile
from pathlib import Path

from vcutils.http_client import HTTPClient, MockAdapter, RawResponse, TransportFailure
from vcutils.logging_config import (
    clear_correlation_id,
    get_logger,
    set_correlation_id,
    setup_logging,
)


def main():
    """Run structured logging demo."""

    with tempfile.TemporaryDirectory() as tmpdir:
        log_file = Path(tmpdir) / "vcutils.log"
        setup_logging(level="DEBUG", log_file=log_file, json_format=True)

        logger = get_logger("demo")

        print("=" * 60)
        print("Structured Logging Demo")
        print("=" * 60)
        print(f"\nLog file: {log_file}\n")

        adapter = MockAdapter({
            ("GET", "https://api.test/posts/1"): RawResponse(status=200, body=b'{"id": 1}'),
            ("GET", "https://api.test/broken"): RawResponse(status=200, body=b"<html>"),
            ("GET", "https://api.test/slow"): TransportFailure(reason="timeout"),
        })
        client = HTTPClient(name="demo.Client", adapter=adapter, log_level="info")

        # Example 1: Basic structured logging
        print("1. Basic structured logging with custom fields:")
        logger.info("application_started", version="1.0.0", environment="demo")

        # Example 2: Request trail under one correlation ID
        print("2. Request trail with a correlation ID:")
        set_correlation_id("req-12345")
        client.get("https://api.test/posts/1")
        client.get("https://api.test/missing")
        clear_correlation_id()

        # Example 3: Decode failures are logged at error level
        print("3. Decode failure logging:")
        client.get("https://api.test/broken")

        # Example 4: Transport failures
        print("4. Transport failure logging:")
        client.get("https://api.test/slow")

        # Example 5: Request logging switched off for one client
        print("5. Quiet client:")
        HTTPClient(name="demo.Quiet", adapter=adapter, log_level=False).get("https://api.test/posts/1")

        print("\n" + "=" * 60)
        print("Log file contents:")
        print("=" * 60)
        print(log_file.read_text())


if __name__ == "__main__":
    main()
