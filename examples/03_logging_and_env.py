"""
Logging and Environment Configuration Examples
"""

import sys
import os

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.http_request import Request, Method, RequestConfig, LoggingConfig, load_from_env


def colored_logging():
    """Request lifecycle logged to the console."""
    print("\n" + "=" * 60)
    print("EXAMPLE 1: Colored Console Logging")
    print("=" * 60 + "\n")

    config = RequestConfig.create(
        logging=LoggingConfig.create(level="INFO", format="colored")
    )

    # Authorization value and token are masked in the log
    with Request(Method.GET, "https://httpbin.org/get?token=s3cr3t", config=config) as req:
        req.set_header("Authorization", "Bearer abc")
        req.execute()


def from_environment():
    """
    Build config from HTTP_REQUEST_* variables.

    Example:
        HTTP_REQUEST_TIMEOUT_READ=10 HTTP_REQUEST_LOG_ENABLED=true python 03_logging_and_env.py
    """
    print("\n" + "=" * 60)
    print("EXAMPLE 2: Environment Config")
    print("=" * 60 + "\n")

    config = load_from_env(verify_ssl=True)
    print(f"Config: {config}")

    with Request(Method.GET, "https://httpbin.org/get", config=config) as req:
        response = req.execute()
    print(f"Status: {response.status_code}")


if __name__ == "__main__":
    colored_logging()
    from_environment()
