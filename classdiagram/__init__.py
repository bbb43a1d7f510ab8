"""classdiagram - PlantUML class diagrams from C# and Java source code."""

__version__ = "0.1.0"
