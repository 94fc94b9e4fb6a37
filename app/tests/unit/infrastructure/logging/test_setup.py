"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging() under the test environment
- Configuration on import
- get_module_logger()
- Logging suppression in test environment
"""

import logging

import pytest
import structlog

from infrastructure.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_returns_logger(self, mock_settings):
        logger = configure_logging(settings=mock_settings)
        assert logger is not None
        assert hasattr(logger, "info")
        assert hasattr(logger, "error")

    def test_accepts_overrides(self, mock_settings):
        logger = configure_logging(
            settings=mock_settings, log_level="DEBUG", json_logs=True
        )
        assert logger is not None

    def test_without_settings(self):
        assert configure_logging() is not None

    def test_idempotent(self, mock_settings):
        configure_logging(settings=mock_settings)
        logger = configure_logging(settings=mock_settings)
        assert logger is not None

    def test_configured_on_import(self):
        from infrastructure.logging import setup

        assert structlog.is_configured()
        assert setup.logger is not None

    def test_suppresses_in_test_env(self, mock_settings):
        """In test environment, root logger level is set high to suppress output."""
        configure_logging(settings=mock_settings)
        assert logging.root.level > logging.CRITICAL


@pytest.mark.unit
class TestGetLogger:
    """Test suite for logger helpers."""

    def test_get_module_logger_binds_calling_module(self):
        from infrastructure.execution import runner

        context = structlog.get_context(runner.logger)
        assert context["module_path"] == "infrastructure.execution.runner"
        assert context["component"] == "runner"

    def test_logging_methods_dont_raise(self, mock_settings):
        configure_logging(settings=mock_settings)
        logger = get_module_logger()

        logger.debug("debug_event", key="value")
        logger.info("info_event", key="value")
        logger.warning("warning_event", key="value")
        logger.error("error_event", key="value")

    def test_exception_logging(self, mock_settings):
        configure_logging(settings=mock_settings)
        logger = get_module_logger()

        try:
            raise ValueError("test error")
        except ValueError:
            logger.exception("exception_occurred")
