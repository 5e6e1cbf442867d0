"""
Multipart Form Examples

File parts are read from disk during execute(); memory parts can be
truncated to a byte count.
"""

import sys
import os
import tempfile

# Add parent directory to path for imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.http_request import Request, Method, FormNotInitializedError


def upload_file():
    """Upload a file together with a text field."""
    print("\n=== Upload File ===")

    with tempfile.NamedTemporaryFile("w", suffix=".csv", delete=False) as fh:
        fh.write("id,value\n1,42\n")
        path = fh.name

    try:
        with Request(Method.POST, "https://httpbin.org/post") as req:
            req.make_form()
            req.add_field("comment", "nightly export")
            req.add_file("report", path, "report.csv")
            response = req.execute()

        print(f"Status: {response.status_code}")
        print(response.text[:300])
    finally:
        os.unlink(path)


def truncated_field():
    """Send only the first bytes of a buffer."""
    print("\n=== Truncated Field ===")

    with Request(Method.POST, "https://httpbin.org/post") as req:
        req.make_form()
        req.add_field("prefix", b"abcdef", size=3)
        response = req.execute()

    print(f"Status: {response.status_code}")


def form_misuse():
    """add_field() before make_form() is a programming error."""
    print("\n=== Form Misuse ===")

    with Request(Method.POST, "https://httpbin.org/post") as req:
        try:
            req.add_field("a", "b")
        except FormNotInitializedError as e:
            print(f"Caught: {e}")


if __name__ == "__main__":
    upload_file()
    truncated_field()
    form_misuse()
