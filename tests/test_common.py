"""Tests for common utilities."""

import logging

from shortlink.common.validators import is_valid_url
from shortlink.common.url_builder import build_short_url, redirect_location
from shortlink.common.logging_config import setup_logging


class TestValidators:
    """Test validation utilities."""

    def test_valid_urls(self):
        """Test valid URL validation."""
        valid, _ = is_valid_url("https://example.com")
        assert valid

        valid, _ = is_valid_url("http://example.com/path")
        assert valid

        valid, _ = is_valid_url("https://sub.example.com:8080/path?query=value#frag")
        assert valid

        # Any scheme with a host is accepted
        valid, _ = is_valid_url("ftp://files.example.com/pub")
        assert valid

    def test_missing_scheme_or_host(self):
        valid, error = is_valid_url("")
        assert not valid
        assert "required" in error.lower()

        valid, error = is_valid_url("not-a-url")
        assert not valid

        valid, error = is_valid_url("example.com/path")
        assert not valid
        assert "scheme" in error.lower()

        valid, error = is_valid_url("http://")
        assert not valid
        assert "host" in error.lower()

        valid, error = is_valid_url("mailto:someone@example.com")
        assert not valid

    def test_malformed_urls(self):
        valid, _ = is_valid_url("http://[::1")
        assert not valid

        valid, _ = is_valid_url("http://example.com:notaport/")
        assert not valid

        valid, _ = is_valid_url("https://exa mple.com")
        assert not valid

        valid, _ = is_valid_url(" https://example.com")
        assert not valid

    def test_too_long(self):
        valid, error = is_valid_url("https://example.com/" + "a" * 2048)
        assert not valid
        assert "too long" in error.lower()

    def test_length_is_counted_in_bytes(self):
        prefix = "https://example.com/"

        valid, _ = is_valid_url(prefix + "é" * ((2048 - len(prefix)) // 2))
        assert valid

        # 1100 characters, 2220 bytes
        valid, error = is_valid_url(prefix + "é" * 1100)
        assert not valid
        assert "bytes" in error

    def test_lone_surrogate(self):
        valid, error = is_valid_url("https://example.com/\ud800")
        assert not valid
        assert "utf-8" in error.lower()

    def test_non_string(self):
        valid, _ = is_valid_url(None)
        assert not valid


class TestURLBuilder:
    """Test URL building utilities."""

    def test_build_short_url_no_prefix(self):
        url = build_short_url(short_code="abc12", base_url="https://example.com/", path_prefix="")

        assert url == "https://example.com/abc12"

    def test_build_short_url_with_prefix(self):
        url = build_short_url(short_code="abc12", base_url="https://example.com", path_prefix="/s/")

        assert url == "https://example.com/s/abc12"

    def test_redirect_location_keeps_printable_ascii(self):
        url = "https://example.com/a|b?q={x}&r=\"y\"&s=%20"

        assert redirect_location(url) == url

    def test_redirect_location_encodes_non_ascii(self):
        assert redirect_location("https://例え.jp/ü") == "https://%E4%BE%8B%E3%81%88.jp/%C3%BC"


class TestLogging:
    def test_setup_logging_replaces_handlers(self, tmp_path):
        log_file = tmp_path / "shortlink.log"

        setup_logging(level="INFO")
        logger = setup_logging(level="WARNING", log_file=str(log_file))

        assert logger.name == "shortlink"
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 2

        logging.getLogger("shortlink.service").warning("collision storm")
        for handler in logger.handlers:
            handler.flush()
        assert "collision storm" in log_file.read_text()


def test_common_exports():
    from shortlink import common

    assert sorted(common.__all__) == [
        "build_short_url",
        "is_valid_url",
        "redirect_location",
        "setup_logging",
    ]
    for name in common.__all__:
        assert callable(getattr(common, name))
