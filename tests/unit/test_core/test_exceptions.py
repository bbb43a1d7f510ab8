"""Tests for exceptions."""

from classdiagram.core.exceptions import (
    ClassDiagramError,
    ConfigurationError,
    SourceReadError,
    UnsupportedLanguageError,
)


class TestExceptions:
    """Tests for custom exceptions."""

    def test_base_error(self):
        """Test the message and optional details."""
        assert str(ClassDiagramError("boom")) == "boom"
        error = ClassDiagramError("boom", {"a": 1})
        assert error.details == {"a": 1}
        assert str(error) == "boom - Details: {'a': 1}"

    def test_source_read_error(self):
        """Test that the file path is kept in the details."""
        error = SourceReadError("cannot read", file_path="A.cs")
        assert isinstance(error, ClassDiagramError)
        assert error.details == {"file_path": "A.cs"}

    def test_unsupported_language_error(self):
        """Test that the language name is kept in the details."""
        error = UnsupportedLanguageError("unknown", language="go", details={"known": "cs, java"})
        assert error.details == {"known": "cs, java", "language": "go"}

    def test_configuration_error(self):
        """Test the config key detail."""
        error = ConfigurationError("bad", config_key="generator.title")
        assert error.details["config_key"] == "generator.title"
        assert ConfigurationError("bad").details == {}
