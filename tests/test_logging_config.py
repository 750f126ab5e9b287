# tests/test_logging_config.py

"""Tests for the per-run logging configuration."""

import logging
import unittest

from catalog_admin.config.logging_config import setup_logging
from catalog_admin.config.settings import Settings


class TestLoggingConfig(unittest.TestCase):
    """Verify logging setup behaviour."""

    def setUp(self) -> None:
        """Start every test with a bare catalog_admin logger."""
        self.root_logger = logging.getLogger("catalog_admin")
        self.root_logger.handlers.clear()
        self.addCleanup(self._close_handlers)

    def _close_handlers(self) -> None:
        for handler in self.root_logger.handlers:
            handler.close()
        self.root_logger.handlers.clear()

    def test_log_file_created_in_logs_dir(self) -> None:
        """The run log is created under Settings.LOGS_DIR."""
        log_path = setup_logging()
        self.assertTrue(log_path.exists())
        self.assertEqual(log_path.parent, Settings.LOGS_DIR)

    def test_log_file_naming_convention(self) -> None:
        """Log file name matches run_YYYYMMDD_HHMMSS.log."""
        log_path = setup_logging()
        self.assertRegex(log_path.name, r"^run_\d{8}_\d{6}\.log$")

    def test_handler_levels(self) -> None:
        """File captures DEBUG, console only WARNING and up."""
        setup_logging()
        file_handlers = [
            h
            for h in self.root_logger.handlers
            if isinstance(h, logging.FileHandler)
        ]
        console_handlers = [
            h
            for h in self.root_logger.handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.FileHandler)
        ]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(len(console_handlers), 1)
        self.assertEqual(file_handlers[0].level, logging.DEBUG)
        self.assertEqual(console_handlers[0].level, logging.WARNING)
        self.assertEqual(self.root_logger.level, logging.DEBUG)

    def test_repeated_calls_no_duplicate_handlers(self) -> None:
        """Calling setup_logging twice keeps the same handlers."""
        setup_logging()
        before = list(self.root_logger.handlers)
        setup_logging()
        self.assertEqual(self.root_logger.handlers, before)

    def test_child_logger_reaches_file(self) -> None:
        """Module loggers under catalog_admin.* write to the run log."""
        log_path = setup_logging()
        logging.getLogger("catalog_admin.store").debug("store marker 42")
        for handler in self.root_logger.handlers:
            handler.flush()
        content = log_path.read_text(encoding="utf-8")
        self.assertIn("store marker 42", content)
        self.assertIn("catalog_admin.store", content)

    def test_stderr_line_names_the_logger(self) -> None:
        """Warnings on stderr carry level and logger name, not a timestamp."""
        setup_logging()
        console = next(
            h
            for h in self.root_logger.handlers
            if not isinstance(h, logging.FileHandler)
        )
        record = logging.LogRecord(
            "catalog_admin.gateway", logging.WARNING, __file__, 1,
            "slow response", None, None,
        )
        self.assertEqual(
            console.format(record),
            "WARNING catalog_admin.gateway: slow response",
        )


if __name__ == "__main__":
    unittest.main()
