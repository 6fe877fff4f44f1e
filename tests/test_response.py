"""
Tests for the buffered WSGI Response.
"""

import pytest

from tsubaki.http.error import HeadersSentError
from tsubaki.http.response import Response


class TestResponse:
    """Tests for status, headers and sending."""

    def setup_method(self) -> None:
        self.sent = []
        self.response = Response(start_response=lambda status, headers: self.sent.append((status, headers)),
                                 protocol="HTTP/2.0")

    def test_defaults(self) -> None:
        assert self.response.code == 200
        assert self.response.statusLine() == "HTTP/2.0 200 OK"
        assert self.response.getHeader("Content-Type") == "text/plain"

    def test_status_uses_table_phrase(self) -> None:
        self.response.status(503)
        assert self.response.reason == "Service Unavailable"

    def test_status_custom_description(self) -> None:
        self.response.status(503, "Back Soon")
        assert self.response.statusLine() == "HTTP/2.0 503 Back Soon"

    def test_set_header_replaces_case_insensitively(self) -> None:
        self.response.setHeader("content-type", "text/html; charset=utf-8")
        values = [v for k, v in self.response.headers if k.lower() == "content-type"]
        assert values == ["text/html; charset=utf-8"]
        assert self.response.type == "html"

    def test_set_header_append(self) -> None:
        self.response.setHeader("Set-Cookie", "a=1")
        self.response.setHeader("Set-Cookie", "b=2", replace=False)
        assert [v for k, v in self.response.headers if k == "Set-Cookie"] == ["a=1", "b=2"]

    def test_ok_sends_once(self) -> None:
        self.response.status(404)
        self.response.ok()
        self.response.ok()
        assert len(self.sent) == 1
        assert self.sent[0][0] == "404 Not Found"

    def test_emitting_after_send_raises(self) -> None:
        self.response.ok()
        with pytest.raises(HeadersSentError):
            self.response.status(500)
        with pytest.raises(HeadersSentError):
            self.response.setHeader("X-Late", "1")

    def test_encode(self) -> None:
        self.response.content = "hi"
        assert self.response.encode() == b"200 OK hi"

        self.response.setHeader("Content-Type", "text/html; charset=utf-8")
        self.response.content = "<p>café</p>"
        assert self.response.encode() == "<p>café</p>".encode("utf-8")

    def test_unknown_status_is_ignored(self) -> None:
        """A code with no phrase leaves the current status untouched."""
        self.response.status(299)
        assert self.response.code == 200
        assert self.response.statusLine() == "HTTP/2.0 200 OK"

        self.response.ok()
        assert self.sent[0][0] == "200 OK"

    def test_status_line_without_phrase(self) -> None:
        response = Response(start_response=lambda status, headers: None, code=299)
        assert response.statusLine() is None
