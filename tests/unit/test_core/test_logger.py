"""Tests for logging setup."""

import logging
import subprocess
import sys
from pathlib import Path

import pytest
from rich.logging import RichHandler

from classdiagram.core.config import LoggingSettings
from classdiagram.core.logger import setup_logging
from classdiagram.core.logger.logger import _remove_installed

PROJECT_ROOT = Path(__file__).parents[3]


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Remove the handlers installed during a test and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield
    _remove_installed(root)
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_rich_handler(self):
        """Test that a Rich handler is installed by default."""
        setup_logging(LoggingSettings(level="INFO"))
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert any(isinstance(h, RichHandler) for h in root.handlers)

    def test_plain_handler_and_file(self, tmp_path: Path):
        """Test the plain stream handler and the log file."""
        log_file = tmp_path / "logs" / "run.log"
        setup_logging(LoggingSettings(level="DEBUG", use_rich=False, file=log_file))

        logging.getLogger("classdiagram.test").debug("written to file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_level_override(self):
        """Test that an explicit level wins over the settings."""
        setup_logging(LoggingSettings(level="WARNING", use_rich=False), level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_repeated_setup_keeps_foreign_handlers(self):
        """Test that a second call replaces only its own handlers."""
        root = logging.getLogger()
        foreign = logging.NullHandler()
        root.addHandler(foreign)

        setup_logging(LoggingSettings())
        setup_logging(LoggingSettings())

        assert foreign in root.handlers
        assert sum(isinstance(h, RichHandler) for h in root.handlers) == 1
        root.removeHandler(foreign)

    def test_library_import_installs_no_handler(self):
        """Test that importing the generator leaves the root logger untouched."""
        code = "import logging, classdiagram.project; print(len(logging.getLogger().handlers))"
        result = subprocess.run(
            [sys.executable, "-c", code],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            check=True,
        )
        assert result.stdout.strip() == "0"
