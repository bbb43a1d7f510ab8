"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from classdiagram.core.config import GeneratorSettings
from classdiagram.models import ClassNode
from classdiagram.parser import CSHARP, JAVA, SourceCodeParser

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _find_class(classes: list[ClassNode], name: str) -> ClassNode:
    """Find a class, inner classes included, by name.

    Args:
        classes: Top-level classes.
        name: Class name such as ``Outer.Inner``.

    Returns:
        The matching class.
    """
    for root in classes:
        for cls in root.all_classes():
            if cls.name == name:
                return cls
    raise AssertionError(f"Class {name} not found in {[c.name for c in classes]}")


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample C# and Java sources."""
    return FIXTURES_DIR


@pytest.fixture
def csharp_source() -> str:
    """Sample C# compilation unit."""
    return (FIXTURES_DIR / "Shapes.cs").read_text(encoding="utf-8")


@pytest.fixture
def java_source() -> str:
    """Sample Java compilation unit."""
    return (FIXTURES_DIR / "Zoo.java").read_text(encoding="utf-8")


@pytest.fixture
def csharp_classes(csharp_source: str) -> list[ClassNode]:
    """Classes parsed from the C# sample."""
    return SourceCodeParser(CSHARP).parse(csharp_source)


@pytest.fixture
def java_classes(java_source: str) -> list[ClassNode]:
    """Classes parsed from the Java sample."""
    return SourceCodeParser(JAVA).parse(java_source)


@pytest.fixture
def generator_settings() -> GeneratorSettings:
    """Generator settings that do not depend on the environment."""
    return GeneratorSettings(
        title="test-diagram",
        max_workers=2,
        newline="\n",
    )


@pytest.fixture
def csharp_project(tmp_path: Path) -> Path:
    """Create a small C# project tree.

    Args:
        tmp_path: Pytest temporary directory.

    Returns:
        Project root.
    """
    src = tmp_path / "src"
    (src / "Models").mkdir(parents=True)
    (src / "bin").mkdir()

    (src / "Models" / "Shapes.cs").write_text(
        (FIXTURES_DIR / "Shapes.cs").read_text(encoding="utf-8"),
        encoding="utf-8",
    )
    (src / "Program.cs").write_text(
        "namespace Drawing\n"
        "{\n"
        "    public class Program\n"
        "    {\n"
        "        private Shapes.Canvas canvas;\n"
        "        public static void Main(string[] args) { }\n"
        "    }\n"
        "}\n",
        encoding="utf-8",
    )
    (src / "bin" / "Generated.cs").write_text("public class Generated { }\n", encoding="utf-8")
    (src / "notes.txt").write_text("public class NotSource { }\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def find_class():
    """Lookup helper ``find_class(classes, name)`` over a class tree."""
    return _find_class
