"""Tests for detect_cycles.config module."""

import logging
import os
import pytest
from unittest.mock import patch


class TestGetEncoding:
    """Tests for get_encoding."""

    def test_default(self):
        from detect_cycles.config import DEFAULT_ENCODING, get_encoding

        env_copy = {k: v for k, v in os.environ.items() if k != "DETECT_CYCLES_ENCODING"}
        with patch.dict(os.environ, env_copy, clear=True):
            assert get_encoding() == DEFAULT_ENCODING == "utf-8"

    def test_from_environment(self):
        from detect_cycles.config import get_encoding

        with patch.dict(os.environ, {"DETECT_CYCLES_ENCODING": " cp1252 "}):
            assert get_encoding() == "cp1252"

    def test_blank_environment_uses_default(self):
        from detect_cycles.config import get_encoding

        with patch.dict(os.environ, {"DETECT_CYCLES_ENCODING": "  "}):
            assert get_encoding() == "utf-8"

    def test_override_wins(self):
        from detect_cycles.config import get_encoding

        with patch.dict(os.environ, {"DETECT_CYCLES_ENCODING": "cp1252"}):
            assert get_encoding("latin-1") == "latin-1"


class TestGetLogLevel:
    """Tests for get_log_level."""

    def test_verbose_forces_debug(self):
        from detect_cycles.config import get_log_level

        with patch.dict(os.environ, {"DETECT_CYCLES_LOG_LEVEL": "ERROR"}):
            assert get_log_level(verbose=True) == logging.DEBUG

    def test_default_warning(self):
        from detect_cycles.config import get_log_level

        env_copy = {k: v for k, v in os.environ.items() if k != "DETECT_CYCLES_LOG_LEVEL"}
        with patch.dict(os.environ, env_copy, clear=True):
            assert get_log_level() == logging.WARNING

    @pytest.mark.parametrize("value,expected", [
        ("info", logging.INFO),
        ("ERROR", logging.ERROR),
        (" debug ", logging.DEBUG),
    ])
    def test_from_environment(self, value, expected):
        from detect_cycles.config import get_log_level

        with patch.dict(os.environ, {"DETECT_CYCLES_LOG_LEVEL": value}):
            assert get_log_level() == expected

    def test_invalid_falls_back(self):
        from detect_cycles.config import get_log_level

        with patch.dict(os.environ, {"DETECT_CYCLES_LOG_LEVEL": "chatty"}):
            assert get_log_level() == logging.WARNING
