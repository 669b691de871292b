"""Tests for utility functions."""

import logging

import pytest

from modelhub.utils import mask_api_key, setup_logger


@pytest.mark.parametrize("api_key,expected", [
    ("sk-abcdefghijk", "sk-*******hijk"),
    ("sk-test-key-123", "sk-********-123"),
    ("sk-abcdef", "*****cdef"),
    ("abcdefg", "****efg"),
    ("abcdef", "****ef"),
    ("abcde", "****e"),
    ("abcd", "****"),
    ("ab", "****"),
    ("", ""),
])
def test_mask_api_key(api_key, expected):
    assert mask_api_key(api_key) == expected


@pytest.mark.parametrize("length", range(1, 16))
def test_mask_api_key_hides_at_least_four(length):
    """Every key length keeps at least four characters out of the output."""
    api_key = "".join(chr(ord("a") + i) for i in range(length))
    masked = mask_api_key(api_key)

    visible = masked.replace("*", "")
    assert masked.count("*") >= 4
    assert len(visible) <= max(length - 4, 0)
    assert api_key not in masked


def test_setup_logger_levels():
    name = "modelhub.test_setup_logger"
    logger = setup_logger(name)
    try:
        assert logger.level == logging.INFO
        assert setup_logger(name, verbose=True).level == logging.DEBUG
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()
