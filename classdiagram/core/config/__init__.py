"""Configuration management for classdiagram."""

from classdiagram.core.config.loader import ConfigLoader
from classdiagram.core.config.settings import (
    GeneratorSettings,
    LoggingSettings,
    Settings,
)

__all__ = [
    "ConfigLoader",
    "GeneratorSettings",
    "LoggingSettings",
    "Settings",
]
