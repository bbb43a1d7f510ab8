"""Custom exception definitions for classdiagram."""

from typing import Any


class ClassDiagramError(Exception):
    """Base exception for all classdiagram errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class SourceReadError(ClassDiagramError):
    """Exception raised when a source file cannot be read or decoded."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize source read error.

        Args:
            message: Error message.
            file_path: Path of the file that could not be read.
            details: Additional error details.
        """
        details = details or {}
        if file_path:
            details["file_path"] = file_path
        super().__init__(message, details)


class UnsupportedLanguageError(ClassDiagramError):
    """Exception raised for an unknown source language name."""

    def __init__(
        self,
        message: str,
        language: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize unsupported language error.

        Args:
            message: Error message.
            language: Language name given by the caller.
            details: Additional error details.
        """
        details = details or {}
        if language:
            details["language"] = language
        super().__init__(message, details)


class ConfigurationError(ClassDiagramError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
