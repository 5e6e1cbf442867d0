"""
Tests for structured logging of Request.execute().
"""

import json

import pytest
import requests
import responses

from src.http_request.core.config import RequestConfig
from src.http_request.core.logging.config import LoggingConfig
from src.http_request.core.method import Method
from src.http_request.core.request import Request


def read_records(path):
    with open(path, encoding="utf-8") as fh:
        return [json.loads(line) for line in fh if line.strip()]


@pytest.mark.usefixtures("reset_logger")
class TestRequestLogging:
    """Request logs through the process-wide logger when configured."""

    @responses.activate
    def test_success_logged(self, logging_config_with_file):
        responses.add(responses.GET, "https://api.example.com/items?token=s3cr3t", body="[]")
        config = RequestConfig(logging=logging_config_with_file)

        with Request(Method.GET, "https://api.example.com/items?token=s3cr3t", config=config) as req:
            req.set_header("Authorization", "Bearer abc")
            req.execute()

        records = read_records(logging_config_with_file.file_path)
        messages = [r["message"] for r in records]
        assert messages == ["Request started", "Request completed"]

        started, completed = records
        assert started["headers"] == ["Authorization: ***REDACTED***"]
        assert "s3cr3t" not in started["url"]
        assert completed["status_code"] == 200
        assert completed["correlation_id"] == started["correlation_id"]
        assert "duration_ms" in completed

    @responses.activate
    def test_failure_logged(self, logging_config_with_file):
        responses.add(
            responses.GET,
            "https://api.example.com/down",
            body=requests.exceptions.ConnectionError("refused"),
        )
        config = RequestConfig(logging=logging_config_with_file)

        with Request(Method.GET, "https://api.example.com/down", config=config) as req:
            req.execute()

        failed = read_records(logging_config_with_file.file_path)[-1]
        assert failed["message"] == "Request failed"
        assert failed["level"] == "ERROR"
        assert failed["status_code"] == 2
        assert failed["error"].startswith("Couldn't connect to server")

    @responses.activate
    def test_ignored_body_warned(self, logging_config_with_file):
        responses.add(responses.POST, "https://api.example.com/upload", status=200)
        config = RequestConfig(logging=logging_config_with_file)

        with Request(Method.POST, "https://api.example.com/upload", config=config) as req:
            req.set_body("raw")
            req.make_form()
            req.add_field("a", "b")
            req.execute()

        levels = {r["message"]: r["level"] for r in read_records(logging_config_with_file.file_path)}
        assert levels["Request body ignored, multipart form takes precedence"] == "WARNING"

    @responses.activate
    def test_no_logger_without_config(self):
        responses.add(responses.GET, "https://api.example.com/items", status=200)

        with Request(Method.GET, "https://api.example.com/items") as req:
            assert req._logger is None
            assert req.execute().status_code == 200

    @responses.activate
    def test_each_logging_config_keeps_its_own_output(self, tmp_path):
        responses.add(responses.GET, "https://api.example.com/a", status=200)
        responses.add(responses.GET, "https://api.example.com/b", status=200)

        def file_config(name):
            return RequestConfig(logging=LoggingConfig.create(
                format="json", enable_console=False, enable_file=True, file_path=str(tmp_path / name)
            ))

        with Request(Method.GET, "https://api.example.com/a", config=file_config("a.log")) as first:
            with Request(Method.GET, "https://api.example.com/b", config=file_config("b.log")) as second:
                first.execute()
                second.execute()

        first_urls = {r["url"] for r in read_records(tmp_path / "a.log")}
        second_urls = {r["url"] for r in read_records(tmp_path / "b.log")}
        assert first_urls == {"https://api.example.com/a"}
        assert second_urls == {"https://api.example.com/b"}
