"""Tests for logging setup."""

from __future__ import annotations

import logging

import pytest

from dirprincipal.util.logging import resolve_level, setup_logging


class TestResolveLevel:
    """resolve_level accepts level names and numbers."""

    @pytest.mark.parametrize(
        "level, expected",
        [("debug", logging.DEBUG), (" Warning ", logging.WARNING), (logging.ERROR, logging.ERROR)],
    )
    def test_known(self, level, expected):
        assert resolve_level(level) == expected

    def test_unknown(self):
        with pytest.raises(ValueError, match="verbose"):
            resolve_level("verbose")


class TestSetupLogging:
    """setup_logging configures the root and ldap3 loggers."""

    def test_debug_keeps_ldap3_at_warning(self):
        assert setup_logging("debug") == logging.DEBUG
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("ldap3").level == logging.WARNING

    def test_error_applies_to_ldap3(self):
        setup_logging(logging.ERROR)
        assert logging.getLogger().level == logging.ERROR
        assert logging.getLogger("ldap3").level == logging.ERROR
        setup_logging(logging.INFO)
