"""Tests for log sanitising of catalog text"""
from shopcart.logging import get_logger, sanitize_string_for_logging


def test_sanitize_escapes_line_breaks():
    assert sanitize_string_for_logging("Mug\nINFO - forged\r\t\x00") == "Mug\\nINFO - forged\\r\\t"


def test_sanitize_truncates_and_handles_empty():
    assert sanitize_string_for_logging("x" * 60, max_length=10) == "x" * 10 + "..."
    assert sanitize_string_for_logging(None) == "N/A"
    assert sanitize_string_for_logging("") == "N/A"


def test_get_logger_is_cached():
    assert get_logger("shopcart.cart") is get_logger("shopcart.cart")
