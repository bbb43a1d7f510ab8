"""Exception definitions module."""

from classdiagram.core.exceptions.errors import (
    ClassDiagramError,
    ConfigurationError,
    SourceReadError,
    UnsupportedLanguageError,
)

__all__ = [
    "ClassDiagramError",
    "ConfigurationError",
    "SourceReadError",
    "UnsupportedLanguageError",
]
