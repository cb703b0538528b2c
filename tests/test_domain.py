"""
Test suite for domain normalization, validation and trust classification
"""

import pytest

from securecheck.core.domain import clean_domain, is_trusted_domain, is_valid_domain


class TestCleanDomain:
    """Test cases for clean_domain."""

    @pytest.mark.parametrize("raw,expected", [
        ("example.com", "example.com"),
        ("  Example.COM  ", "example.com"),
        ("https://example.com", "example.com"),
        ("http://www.example.com", "example.com"),
        ("HTTPS://WWW.Google.com/path?x=1", "google.com"),
        ("example.com?query=1", "example.com"),
        ("example.com/a/b?c=d", "example.com"),
        ("www.docs.github.com", "docs.github.com"),
        ("", ""),
        ("   ", ""),
        ("/only/a/path", ""),
    ])
    def test_clean_domain(self, raw, expected):
        """Test scheme, www, path and query stripping."""
        assert clean_domain(raw) == expected

    def test_strips_repeated_prefixes(self):
        """Test that no leading www. survives cleaning."""
        assert clean_domain("http://www.www.example.com") == "example.com"
        assert clean_domain("https://https://example.com") == "example.com"
        assert clean_domain("http:// www.example.com") == "example.com"

    @pytest.mark.parametrize("raw", [
        "HTTPS://WWW.Google.com/path?x=1",
        "www.www.example.com",
        "http:// www.example.com",
        "  https://www. example.com /x",
        "https://https://example.com",
        "not a domain at all",
        "?x=1",
        "",
    ])
    def test_cleaning_is_idempotent(self, raw):
        """Test clean_domain(clean_domain(s)) == clean_domain(s)."""
        once = clean_domain(raw)
        assert clean_domain(once) == once

    def test_never_raises_on_odd_input(self):
        """Test that cleaning is total."""
        assert clean_domain("://") == ":"
        assert isinstance(clean_domain("éxample.com"), str)


class TestIsValidDomain:
    """Test cases for is_valid_domain."""

    @pytest.mark.parametrize("value", [
        "example.com",
        "sub.domain.co.uk",
        "my-site.org",
        "https://www.example.com/path",
        "HTTPS://WWW.Google.com/path?x=1",
        "example.com?x=1",
        "  example.com  ",
        "xn--bcher-kva.example",
    ])
    def test_valid_domains(self, value):
        assert is_valid_domain(value) is True

    @pytest.mark.parametrize("value", [
        "",
        "   ",
        "localhost",
        "example",
        "example.c",
        "exa mple.com",
        "example.com.",
        "123.45",
        "https://",
        "ftp://example.com",
        "user@example.com",
        "example.com\n.evil",
    ])
    def test_invalid_domains(self, value):
        assert is_valid_domain(value) is False


class TestTrustedDomain:
    """Test cases for the trusted domain allow-list."""

    @pytest.mark.parametrize("domain", [
        "google.com",
        "www.google.com",
        "docs.github.com",
        "GitHub.com",
        "en.wikipedia.org",
        "w3.org",
        "mit.edu",
        "whitehouse.gov",
        "edu",
        "gov",
    ])
    def test_trusted(self, domain):
        assert is_trusted_domain(domain) is True

    @pytest.mark.parametrize("domain", [
        "example.com",
        "notgoogle.com",
        "google.com.evil.io",
        "github.co",
        "education.com",
        "",
    ])
    def test_untrusted(self, domain):
        assert is_trusted_domain(domain) is False
