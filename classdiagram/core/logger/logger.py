"""Logging setup for the command line, with Rich console output.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are installed by the command line through ``setup_logging``.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from classdiagram.core.config.settings import LoggingSettings

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handlers installed by the last setup_logging call
_installed: list[logging.Handler] = []


def _remove_installed(root_logger: logging.Logger) -> None:
    for handler in _installed:
        root_logger.removeHandler(handler)
        handler.close()
    _installed.clear()


def setup_logging(settings: LoggingSettings | None = None, level: str | None = None) -> None:
    """Configure the root logger.

    Calling it again replaces the handlers of the previous call and leaves
    handlers installed by anyone else alone.

    Args:
        settings: Logging settings. Defaults are used if not provided.
        level: Level overriding ``settings.level``, e.g. ``"DEBUG"``.
    """
    settings = settings or LoggingSettings()
    log_level = getattr(logging, (level or settings.level).upper())

    root_logger = logging.getLogger()
    _remove_installed(root_logger)
    root_logger.setLevel(log_level)

    handler: logging.Handler
    if settings.use_rich:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(settings.format))
    _installed.append(handler)

    if settings.file:
        settings.file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        _installed.append(file_handler)

    for installed in _installed:
        root_logger.addHandler(installed)
