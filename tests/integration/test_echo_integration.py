"""
Integration tests against a local echo server.

Run with: pytest -m integration
"""

import json

import pytest

from src.http_request import ClientStatus, Method, Request, RequestConfig, engine_info


pytestmark = pytest.mark.integration


@pytest.fixture(autouse=True)
def no_env_proxy(monkeypatch):
    """Keep proxies from the host environment away from 127.0.0.1."""
    for name in ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy"):
        monkeypatch.delenv(name, raising=False)


def echoed(response):
    return json.loads(response.text)


def echoed_header(response, name):
    values = [v for n, v in echoed(response)["headers"] if n.lower() == name.lower()]
    return values[0] if values else None


class TestEchoServer:
    """Full round trips through the engine."""

    def test_get_returns_real_status(self, echo_server):
        with Request(Method.GET, f"{echo_server}/hello") as req:
            response = req.execute()

        assert response.status_code == 200
        assert response.error is False
        assert response.error_string == ""
        assert response.url == f"{echo_server}/hello"
        assert echoed(response)["method"] == "GET"
        assert engine_info() is not None

    @pytest.mark.parametrize("method, verb", [
        (Method.POST, "POST"),
        (Method.PUT, "PUT"),
        (Method.PATCH, "PATCH"),
        (Method.DELETE, "DELETE"),
        (42, "GET"),
    ])
    def test_method_sent_on_wire(self, echo_server, method, verb):
        with Request(method, f"{echo_server}/verb") as req:
            assert echoed(req.execute())["method"] == verb

    def test_http_error_is_not_client_error(self, echo_server):
        with Request(Method.GET, f"{echo_server}/status/404") as req:
            response = req.execute()

        assert response.status_code == 404
        assert response.error is False

    def test_redirect_followed(self, echo_server):
        with Request(Method.GET, f"{echo_server}/redirect") as req:
            response = req.execute()

        assert response.status_code == 200
        assert echoed(response)["path"] == "/landing"

    def test_redirect_limit(self, echo_server):
        with Request(Method.GET, f"{echo_server}/redirect", RequestConfig(max_redirects=0)) as req:
            response = req.execute()

        assert response.status_code == ClientStatus.PERFORM_ERROR
        assert response.error_string.startswith("Number of redirects hit maximum amount")

    def test_duplicate_headers_sent(self, echo_server):
        with Request(Method.GET, f"{echo_server}/headers") as req:
            req.set_header("X-A", "1")
            req.set_header("X-A", "2")
            response = req.execute()

        assert echoed_header(response, "X-A") == "1, 2"

    def test_empty_header_value_drops_default(self, echo_server):
        with Request(Method.GET, f"{echo_server}/headers") as req:
            req.set_header("Accept", "")
            response = req.execute()

        assert echoed_header(response, "Accept") is None

    def test_user_agent(self, echo_server):
        with Request(Method.GET, f"{echo_server}/ua") as req:
            default_ua = echoed_header(req.execute(), "User-Agent")
            req.set_user_agent("uploader/2.0")
            custom_ua = echoed_header(req.execute(), "User-Agent")

        assert default_ua.startswith("http-request-core/")
        assert custom_ua == "uploader/2.0"

    def test_non_latin1_header_values(self, echo_server):
        with Request(Method.GET, f"{echo_server}/headers") as req:
            req.set_header("X-Name", "привет")
            req.set_user_agent("агент")
            response = req.execute()

        assert response.error is False
        assert response.status_code == 200
        # http.server decodes header bytes as Latin-1
        assert echoed_header(response, "X-Name").encode("latin-1").decode("utf-8") == "привет"
        assert echoed_header(response, "User-Agent").encode("latin-1").decode("utf-8") == "агент"

    def test_non_ascii_header_name_is_transfer_failure(self, echo_server):
        with Request(Method.GET, f"{echo_server}/headers") as req:
            req.set_header("Имя", "1")
            response = req.execute()

        assert response.error is True
        assert response.status_code == ClientStatus.PERFORM_ERROR
        assert response.error_string.startswith("Failed sending data to the peer")

    def test_empty_form_keeps_body(self, echo_server):
        with Request(Method.POST, f"{echo_server}/body") as req:
            req.set_body("payload")
            req.make_form()
            response = req.execute()

        assert echoed(response)["body"] == "payload"

    def test_body_sent(self, echo_server):
        with Request(Method.POST, f"{echo_server}/body") as req:
            req.set_header("Content-Type", "application/json")
            req.set_body('{"name": "John"}')
            response = req.execute()

        assert echoed(response)["body"] == '{"name": "John"}'

    def test_multipart_field_and_file(self, echo_server, tmp_path):
        upload = tmp_path / "report.csv"
        upload.write_bytes(b"id,value\n1,42\n")

        with Request(Method.POST, f"{echo_server}/upload") as req:
            req.make_form()
            req.add_field("a", "bcd", 1)
            req.add_file("report", str(upload), "renamed.csv")
            response = req.execute()

        body = echoed(response)["body"]
        assert echoed_header(response, "Content-Type").startswith("multipart/form-data; boundary=")
        assert 'name="a"\r\n\r\nb\r\n' in body
        assert 'name="report"; filename="renamed.csv"' in body
        assert "id,value\n1,42\n" in body

    def test_missing_file_is_transfer_failure(self, echo_server, tmp_path):
        with Request(Method.POST, f"{echo_server}/upload") as req:
            req.make_form()
            req.add_file("report", str(tmp_path / "missing.csv"))
            response = req.execute()

        assert response.error is True
        assert response.status_code == ClientStatus.PERFORM_ERROR
        assert response.error_string.startswith("Failed to open/read local data from file/application")


class TestUnreachable:
    """Transfer failures come back as client-error responses."""

    def test_connection_refused(self, closed_port):
        with Request(Method.GET, f"http://127.0.0.1:{closed_port}/") as req:
            response = req.execute()

        assert response.error is True
        assert response.status_code <= ClientStatus.CLIENT_ERROR_MAX
        assert response.error_string.startswith("Couldn't connect to server")
        assert response.text == ""
        assert req.error_buffer

    def test_unsupported_scheme(self):
        with Request(Method.GET, "gopher://example.com/") as req:
            response = req.execute()

        assert response.status_code == ClientStatus.PERFORM_ERROR
        assert response.error_string.startswith("Unsupported protocol")

    def test_execute_after_close(self, echo_server):
        req = Request(Method.GET, echo_server)
        req.close()

        response = req.execute()
        assert response.status_code == ClientStatus.INIT_ERROR
        assert response.error_string == "engine handle is not available"
