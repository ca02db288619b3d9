"""Unit tests for infrastructure domain probes.

Tests that domain probes correctly capture domain events
following the Domain Oriented Observability pattern.
"""

from unittest.mock import MagicMock

import structlog

from infrastructure.observability import ObservationContext
from infrastructure.observability.probes import DefaultStoreConnectionProbe


class TestStoreConnectionProbe:
    """Tests for StoreConnectionProbe protocol and implementation."""

    def test_default_probe_creates_with_default_logger(self):
        """Default probe should work without explicit logger."""
        probe = DefaultStoreConnectionProbe()
        assert probe._logger is not None

    def test_default_probe_accepts_custom_logger(self):
        """Default probe should accept a custom logger."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultStoreConnectionProbe(logger=mock_logger)
        assert probe._logger is mock_logger

    def test_pool_created_logs_info(self):
        """pool_created should log url and pool size."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultStoreConnectionProbe(logger=mock_logger)

        probe.pool_created(url="redis://localhost:6379/0", max_connections=10)

        mock_logger.info.assert_called_once_with(
            "store_pool_created",
            url="redis://localhost:6379/0",
            max_connections=10,
        )

    def test_connection_failed_logs_error(self):
        """connection_failed should log error with url and message."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultStoreConnectionProbe(logger=mock_logger)

        probe.connection_failed(
            url="redis://localhost:6379/0", error=Exception("Connection refused")
        )

        mock_logger.error.assert_called_once_with(
            "store_connection_failed",
            url="redis://localhost:6379/0",
            error="Connection refused",
        )

    def test_connection_acquired_logs_debug(self):
        """connection_acquired should log at debug level."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultStoreConnectionProbe(logger=mock_logger)

        probe.connection_acquired()

        mock_logger.debug.assert_called_once_with("store_connection_acquired")

    def test_pool_closed_logs_info(self):
        """pool_closed should log at info level."""
        mock_logger = MagicMock(spec=structlog.stdlib.BoundLogger)
        probe = DefaultStoreConnectionProbe(logger=mock_logger)

        probe.pool_closed()

        mock_logger.info.assert_called_once_with("store_pool_closed")


class TestObservationContext:
    """Tests for ObservationContext."""

    def test_as_dict_skips_none_values(self):
        """Only set fields appear in the log kwargs."""
        context = ObservationContext(request_id="req-1")
        assert context.as_dict() == {"request_id": "req-1"}

    def test_as_dict_includes_request_fields_and_extra(self):
        """All set fields and extra metadata are included."""
        context = ObservationContext(
            request_id="req-1",
            method="POST",
            path="/users",
            extra={"client": "cli"},
        )

        assert context.as_dict() == {
            "request_id": "req-1",
            "method": "POST",
            "path": "/users",
            "client": "cli",
        }

    def test_with_extra_returns_new_context(self):
        """with_extra should not mutate the original context."""
        context = ObservationContext(request_id="req-1")

        extended = context.with_extra(limit=10)

        assert extended.as_dict() == {"request_id": "req-1", "limit": 10}
        assert context.extra == {}
