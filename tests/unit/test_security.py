#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_security.py
"""Unit tests for URL sanitization.

Tests cover:
- Scheme allowlist enforcement
- Host requirement and control character rejection
- Non-string input handling

"""

import pytest

from mdxtree.utils.security import has_control_characters, sanitize_url


@pytest.mark.unit
class TestSanitizeUrl:
    """Test sanitize_url against the default and custom allowlists."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/a.png",
            "http://example.com/a.png",
            "HTTPS://Example.com/A.png",
            "https://example.com:8443/path?q=1#frag",
        ],
    )
    def test_accepts_http_urls(self, url):
        """Test that absolute http(s) URLs are returned unchanged."""
        assert sanitize_url(url) == url

    def test_strips_surrounding_whitespace(self):
        """Test that only surrounding whitespace is removed."""
        assert sanitize_url("  https://example.com/a.png  ") == "https://example.com/a.png"

    @pytest.mark.parametrize(
        "url",
        [
            "javascript:alert(1)",
            "data:image/png;base64,AAAA",
            "ftp://example.com/a.png",
            "file:///etc/passwd",
            "vbscript:msgbox(1)",
        ],
    )
    def test_rejects_other_schemes(self, url):
        """Test that schemes outside the allowlist are rejected."""
        assert sanitize_url(url) is None

    @pytest.mark.parametrize("url", ["/relative/a.png", "a.png", "//example.com/a.png", "https://"])
    def test_rejects_urls_without_scheme_or_host(self, url):
        """Test that relative and host-less URLs are rejected."""
        assert sanitize_url(url) is None

    def test_rejects_control_characters(self):
        """Test that embedded control characters are rejected."""
        assert sanitize_url("https://exa\nmple.com/") is None
        assert sanitize_url("https://example.com/\x00") is None

    @pytest.mark.parametrize("value", [None, 42, 1.5, True, ["https://example.com"], "", "   "])
    def test_rejects_non_strings_and_blank(self, value):
        """Test that non-string and blank values are rejected."""
        assert sanitize_url(value) is None

    def test_narrowed_allowlist(self):
        """Test a caller-provided scheme allowlist narrower than the default."""
        assert sanitize_url("https://example.com/a.png", ("https",)) == "https://example.com/a.png"
        assert sanitize_url("http://example.com/a.png", ("https",)) is None


@pytest.mark.unit
class TestHasControlCharacters:
    """Test control character detection."""

    def test_plain_text(self):
        """Test printable text."""
        assert has_control_characters("https://example.com/ü") is False

    @pytest.mark.parametrize("char", ["\x00", "\t", "\r", "\x1f", "\x7f"])
    def test_control_characters(self, char):
        """Test each control character class."""
        assert has_control_characters(f"a{char}b") is True
