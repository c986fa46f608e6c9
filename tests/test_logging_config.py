"""Unit tests for logging setup."""

import logging

from dgfl.logging_config import setup_logging


class TestSetupLogging:
    """Tests for console and file handlers."""

    def test_console_only_by_default(self):
        """Test a run without a log directory logs INFO to stderr only."""
        logger = setup_logging()
        assert logger.level == logging.INFO
        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
        assert logger.handlers[0].level == logging.INFO

    def test_quiet_console_shows_errors_only(self):
        """Test quiet mode raises the console threshold."""
        logger = setup_logging(quiet=True)
        assert logger.handlers[0].level == logging.ERROR

    def test_log_dir_writes_debug_file(self, tmp_path):
        """Test a log directory gets a per-run file with DEBUG records."""
        log_dir = tmp_path / 'logs'
        logger = setup_logging(log_dir=log_dir, quiet=True)

        logging.getLogger('dgfl.attribution').debug('Ignoring unrostered MPO player: Jane Roe')
        for handler in logger.handlers:
            handler.flush()

        files = list(log_dir.glob('standings_*.log'))
        assert len(files) == 1
        assert 'Ignoring unrostered MPO player: Jane Roe' in files[0].read_text()

    def test_repeat_setup_replaces_handlers(self):
        """Test calling setup twice does not duplicate output."""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1
