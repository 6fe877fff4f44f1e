"""
Tests for the HTTP status table and status line helpers.
"""

import pytest

from tsubaki.http.status import (
    HEADER_DESCRIPTIONS,
    lookupReason,
    protocolToken,
    statusLine,
)


class TestLookupReason:
    """Tests for lookupReason."""

    @pytest.mark.parametrize(
        "code, phrase",
        [
            (100, "Continue"),
            (103, "Early Hints"),
            (200, "OK"),
            (226, "IM Used"),
            (306, "Reserved"),
            (404, "Not Found"),
            (418, "I'm a teapot"),
            (451, "Unavailable For Legal Reasons"),
            (500, "Internal Server Error"),
            (511, "Network Authentication Required"),
        ],
    )
    def test_known_codes(self, code: int, phrase: str) -> None:
        """Known codes map to their documented phrase."""
        assert lookupReason(code) == phrase

    def test_full_code_set(self) -> None:
        """The table holds exactly the registered codes, no more, no less."""
        expected = {
            *range(100, 104),
            *range(200, 208), 226,
            *range(300, 309),
            *range(400, 419), *range(421, 425), 426, 428, 429, 431, 451,
            *range(500, 508), 510, 511,
        }
        assert set(HEADER_DESCRIPTIONS) == expected
        for code in expected:
            assert lookupReason(code) == HEADER_DESCRIPTIONS[code]

    @pytest.mark.parametrize("code", [299, 419, 508, 509, 600, 0, -1])
    def test_unknown_codes_are_empty(self, code: int) -> None:
        """Codes missing from the table yield an empty string."""
        assert lookupReason(code) == ""

    @pytest.mark.parametrize("value", [None, "404", 404.5, True, [404]])
    def test_non_codes_never_raise(self, value) -> None:
        """Lookup is total: odd inputs give an empty string."""
        assert lookupReason(value) == ""

    def test_every_entry_is_non_empty(self) -> None:
        """Every table entry is a non-empty phrase in the 1xx-5xx range."""
        for code, phrase in HEADER_DESCRIPTIONS.items():
            assert 100 <= code <= 599
            assert phrase

    def test_table_is_read_only(self) -> None:
        """The table cannot be mutated at runtime."""
        with pytest.raises(TypeError):
            HEADER_DESCRIPTIONS[299] = "Nope"


class TestProtocolToken:
    """Tests for protocolToken."""

    @pytest.mark.parametrize("protocol", ["HTTP/1.1", "HTTP/2", "HTTP/2.0"])
    def test_allowed_protocols_kept(self, protocol: str) -> None:
        assert protocolToken(protocol) == protocol

    @pytest.mark.parametrize("protocol", ["HTTP/0.9", "HTTP/1.0", "", None, "HTTP/3"])
    def test_fallback_to_http_1_0(self, protocol) -> None:
        assert protocolToken(protocol) == "HTTP/1.0"


class TestStatusLine:
    """Tests for statusLine."""

    def test_status_line_from_table(self) -> None:
        assert statusLine(404, "HTTP/1.1") == "HTTP/1.1 404 Not Found"

    def test_status_line_falls_back_to_http_1_0(self) -> None:
        assert statusLine(500, "HTTP/0.9") == "HTTP/1.0 500 Internal Server Error"

    def test_custom_description(self) -> None:
        """A custom description wins over the table, even for unknown codes."""
        assert statusLine(299, "HTTP/2", "Fine") == "HTTP/2 299 Fine"

    def test_unknown_code_has_no_status_line(self) -> None:
        assert statusLine(299, "HTTP/1.1") is None
