"""
Basic Request Usage Examples

Demonstrates GET, POST with a body, headers and error handling.
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.http_request import Request, Method, RequestConfig


def basic_get_request():
    """Simple GET request."""
    print("\n=== Basic GET Request ===")

    with Request(Method.GET, "https://httpbin.org/get") as req:
        response = req.execute()

    print(f"Status: {response.status_code}")
    print(f"Body: {response.text[:200]}")


def post_with_body():
    """POST request with a JSON body."""
    print("\n=== POST with body ===")

    with Request(Method.POST, "https://httpbin.org/post") as req:
        req.set_header("Content-Type", "application/json")
        req.set_body('{"title": "My Post", "userId": 1}')
        response = req.execute()

    print(f"Status: {response.status_code}")


def with_custom_headers():
    """Repeated headers are sent combined."""
    print("\n=== Custom Headers ===")

    with Request(Method.GET, "https://httpbin.org/headers") as req:
        req.set_header("X-Tag", "alpha")
        req.set_header("X-Tag", "beta")
        req.set_user_agent("examples/1.0")
        response = req.execute()

    print(response.text)


def with_config():
    """Timeouts, proxy and TLS settings through RequestConfig."""
    print("\n=== With Config ===")

    config = RequestConfig.create(timeout=(3, 10), verify_ssl=True, max_redirects=5)

    with Request(Method.GET, "https://httpbin.org/redirect/2", config=config) as req:
        response = req.execute()

    print(f"Status after redirects: {response.status_code}")


def transfer_errors():
    """Transfer failures are returned, not raised."""
    print("\n=== Transfer Errors ===")

    with Request(Method.GET, "http://nonexistent.invalid/") as req:
        response = req.execute()

    print(f"Error: {response.error}")
    print(f"Status: {response.status_code}")
    print(f"Message: {response.error_string}")


if __name__ == "__main__":
    print("=" * 50)
    print("HTTP Request - Basic Usage Examples")
    print("=" * 50)

    basic_get_request()
    post_with_body()
    with_custom_headers()
    with_config()
    transfer_errors()

    print("\n" + "=" * 50)
    print("All examples completed!")
    print("=" * 50)
