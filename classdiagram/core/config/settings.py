"""Application settings using Pydantic Settings."""

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from classdiagram.core.config.loader import ConfigLoader
from classdiagram.core.exceptions.errors import ConfigurationError

DEFAULT_CONFIG_PATH = Path("classdiagram.yaml")


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSDIAGRAM_LOGGING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = Field(
        default="WARNING",
        description="Log level",
    )
    format: str = Field(
        default="[%(name)s] %(message)s",
        description="Log format string",
    )
    file: Path | None = Field(
        default=None,
        description="Log file path",
    )
    use_rich: bool = Field(
        default=True,
        description="Use Rich console for output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("file", mode="before")
    @classmethod
    def validate_file(cls, v: str | None) -> Path | None:
        """Validate and convert file to Path."""
        if v is None or v == "":
            return None
        return Path(v)


class GeneratorSettings(BaseSettings):
    """Diagram generation settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSDIAGRAM_GENERATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    title: str = Field(
        default="class-diagram",
        description="Title written after @startuml",
    )
    max_workers: int = Field(
        default=4,
        ge=1,
        le=64,
        description="Threads used to parse source files",
    )
    max_file_size: int = Field(
        default=1024 * 1024,
        ge=1,
        description="Largest source file to parse, in bytes",
    )
    excluded_dirs: list[str] = Field(
        default_factory=lambda: [
            ".git",
            ".svn",
            ".vs",
            ".idea",
            "bin",
            "obj",
            "build",
            "target",
            "node_modules",
        ],
        description="Directory names never searched for sources",
    )
    encoding: str = Field(
        default="utf-8",
        description="Encoding used to read source files",
    )
    newline: str = Field(
        default="\n",
        description="Line separator of the generated diagram",
    )

    @field_validator("newline", mode="before")
    @classmethod
    def validate_newline(cls, v: str) -> str:
        """Accept escaped forms such as '\\r\\n' from YAML or env."""
        return v.replace("\\r", "\r").replace("\\n", "\n")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSDIAGRAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    generator: GeneratorSettings = Field(default_factory=GeneratorSettings)

    @classmethod
    def from_yaml(cls, path: Path) -> "Settings":
        """Load settings from YAML file.

        Args:
            path: Path to YAML configuration file.

        Returns:
            Settings instance with values from YAML.

        Raises:
            ConfigurationError: If the file cannot be loaded or holds invalid values.
        """
        loader = ConfigLoader(path)
        loader.load()

        try:
            return cls(
                logging=LoggingSettings(**loader.get_section("logging")),
                generator=GeneratorSettings(**loader.get_section("generator")),
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {path}",
                config_key=str(path),
                details={"errors": e.error_count()},
            ) from e

    @classmethod
    def load(cls, path: Path | None = None) -> "Settings":
        """Load settings from an explicit file or the default location.

        Priority: YAML file > environment variables > .env > defaults

        Args:
            path: Optional YAML configuration file.

        Returns:
            Settings instance.
        """
        if path is not None:
            return cls.from_yaml(path)

        if DEFAULT_CONFIG_PATH.exists():
            return cls.from_yaml(DEFAULT_CONFIG_PATH)

        # Environment variables and .env are automatically loaded by pydantic-settings
        return cls()

