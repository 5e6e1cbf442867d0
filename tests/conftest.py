"""
Pytest configuration and fixtures for http-request-core tests.
"""

import json
import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

import src.http_request.core.engine as engine_module
import src.http_request.core.logging.logger as logger_module
from src.http_request.core.logging.config import LoggingConfig
from src.http_request.core.logging.filters import clear_correlation_id


@pytest.fixture(autouse=True)
def fresh_engine():
    """Every test starts with an uninitialized engine."""
    engine_module.reset_engine()
    yield
    engine_module.reset_engine()


@pytest.fixture
def reset_logger():
    """Close all package loggers before and after the test."""
    logger_module.shutdown_logging()
    clear_correlation_id()
    yield
    logger_module.shutdown_logging()
    clear_correlation_id()


@pytest.fixture
def logging_config_with_file(tmp_path):
    """LoggingConfig writing JSON to a temporary file only."""
    return LoggingConfig.create(
        level="DEBUG",
        format="json",
        enable_console=False,
        enable_file=True,
        file_path=str(tmp_path / "requests.log")
    )


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Local echo server for integration tests
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class _EchoHandler(BaseHTTPRequestHandler):
    """Replies with a JSON description of the received request."""

    def _echo(self):
        if self.path.startswith("/status/"):
            code = int(self.path.rsplit("/", 1)[1])
            self.send_response(code)
            self.send_header("Content-Length", "0")
            self.end_headers()
            return

        if self.path == "/redirect":
            self.send_response(302)
            self.send_header("Location", "/landing")
            self.send_header("Content-Length", "0")
            self.end_headers()
            return

        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length else b""

        payload = json.dumps({
            "method": self.command,
            "path": self.path,
            "headers": [[name, value] for name, value in self.headers.items()],
            "body": body.decode("latin-1"),
        }).encode("utf-8")

        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    do_GET = do_POST = do_PUT = do_PATCH = do_DELETE = _echo

    def log_message(self, format, *args):
        pass


@pytest.fixture(scope="session")
def echo_server():
    """Base URL of a local echo server running in a background thread."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _EchoHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{server.server_address[1]}"
    server.shutdown()
    server.server_close()


@pytest.fixture
def closed_port():
    """A local port with nothing listening on it."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    return port
