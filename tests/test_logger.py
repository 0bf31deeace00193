"""
Tests for logging setup.
"""

import logging

import pytest

from rsh.logger import ROOT_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def clean_logger():
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestSetupLogging:
    """Test logger configuration."""

    def test_level(self):
        """Test the level is applied."""
        logger = setup_logging("DEBUG")
        assert logger.level == logging.DEBUG
        assert logger.name == "rsh"

    def test_no_duplicate_handlers(self):
        """Test repeated setup keeps a single handler."""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        """Test logs go to the file when given."""
        path = tmp_path / "rsh.log"
        setup_logging("INFO", str(path))
        logging.getLogger("rsh.shell").info("Rejected command %r", "rm")
        for handler in logging.getLogger(ROOT_LOGGER).handlers:
            handler.flush()
        assert "Rejected command 'rm'" in path.read_text()

    def test_child_loggers_inherit(self):
        """Test module loggers use the rsh configuration."""
        setup_logging("ERROR")
        assert not logging.getLogger("rsh.launcher").isEnabledFor(logging.INFO)
