#!/usr/bin/env python3
"""
Command-line client for a running scrape service.

Usage:
    render-scrape-client https://example.com
    render-scrape-client https://example.com --api-url http://localhost:3000

Environment Variables:
    API_URL: Base URL of the service (default: http://localhost:3000)
"""

import argparse
import os
import sys

import requests

DEFAULT_API_URL = os.getenv("API_URL", "http://localhost:3000")


class ScrapeClientError(Exception):
    def __init__(self, status_code, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


class ScrapeClient:
    """Thin wrapper around POST /scrape."""

    def __init__(self, base_url: str = DEFAULT_API_URL, timeout: float = 60.0):
        self.base_url = base_url.rstrip("/")
        # a little longer than the server's own navigation timeout
        self.timeout = timeout

    def scrape(self, url: str) -> str:
        resp = requests.post(f"{self.base_url}/scrape", json={"url": url}, timeout=self.timeout)
        if resp.ok:
            return resp.text

        message = resp.text
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and "error" in body:
            message = body["error"]
        raise ScrapeClientError(resp.status_code, message)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Fetch the rendered text of a page through the scrape service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument("url", help="page to render (http or https)")
    parser.add_argument("--api-url", default=DEFAULT_API_URL, help="base URL of the service")
    parser.add_argument("--timeout", type=float, default=60.0, help="client timeout in seconds")
    args = parser.parse_args(argv)

    client = ScrapeClient(args.api_url, timeout=args.timeout)
    try:
        text = client.scrape(args.url)
    except ScrapeClientError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except requests.RequestException as e:
        print(f"Error: could not reach {client.base_url}: {e}", file=sys.stderr)
        return 1

    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
