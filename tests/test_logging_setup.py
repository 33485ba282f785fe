"""Tests for spendlog.logging_setup."""

import io
import logging

import pytest

from spendlog.logging_setup import configure_logging, get_logger, parse_level, resolve_level


class TestParseLevel:
    """Tests for parse_level."""

    def test_int_passthrough(self) -> None:
        """Should return numeric levels unchanged."""
        assert parse_level(logging.DEBUG) == logging.DEBUG

    def test_level_names(self) -> None:
        """Should accept level names in any case."""
        assert parse_level("info") == logging.INFO
        assert parse_level(" ERROR ") == logging.ERROR

    def test_numeric_string(self) -> None:
        """Should accept numeric strings."""
        assert parse_level("15") == 15

    def test_unknown_name_uses_default(self) -> None:
        """Should fall back to the default for unknown names."""
        assert parse_level("chatty") == logging.WARNING
        assert parse_level("chatty", default=logging.ERROR) == logging.ERROR


class TestResolveLevel:
    """Tests for resolve_level."""

    def test_cli_option_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should prefer --log-level over environment and config."""
        monkeypatch.setenv("SPENDLOG_LOG_LEVEL", "ERROR")
        assert resolve_level("DEBUG", "WARNING") == logging.DEBUG

    def test_env_beats_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should prefer SPENDLOG_LOG_LEVEL over the config file."""
        monkeypatch.setenv("SPENDLOG_LOG_LEVEL", "INFO")
        assert resolve_level(None, "ERROR") == logging.INFO

    def test_config_fallback(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should use the config level when nothing else is set."""
        monkeypatch.delenv("SPENDLOG_LOG_LEVEL", raising=False)
        assert resolve_level(None, "ERROR") == logging.ERROR


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_to_stream(self) -> None:
        """Should emit package records to the given stream."""
        stream = io.StringIO()
        configure_logging(logging.INFO, stream)

        get_logger("spendlog.domain.ledger").info("hello ledger")

        assert "spendlog.domain.ledger INFO hello ledger" in stream.getvalue()

    def test_reconfigure_replaces_handler(self) -> None:
        """Should keep a single stream handler across sessions."""
        first = io.StringIO()
        second = io.StringIO()
        configure_logging(logging.INFO, first)
        logger = configure_logging(logging.INFO, second)

        get_logger("spendlog.config").info("second session")

        stream_handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(stream_handlers) == 1
        assert first.getvalue() == ""
        assert "second session" in second.getvalue()

    def test_level_filters_records(self) -> None:
        """Should drop records below the configured level."""
        stream = io.StringIO()
        configure_logging(logging.WARNING, stream)

        get_logger("spendlog.domain.prices").debug("quiet")

        assert stream.getvalue() == ""
