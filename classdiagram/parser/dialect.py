"""Language dialects understood by the structural parser."""

from dataclasses import dataclass
from pathlib import Path

from classdiagram.core.exceptions import UnsupportedLanguageError

from ..models.modifier import ClassCategory, Modifier


@dataclass(frozen=True)
class Dialect:
    """Parameters that differ between the supported languages.

    Attributes:
        name: Canonical language name.
        aliases: Names accepted on the command line.
        extensions: Source file extensions.
        scope_keyword: ``namespace`` or ``package``.
        nested_scopes: Whether scope declarations nest (C# namespaces do).
        default_access: Access level of declarations without one.
        categories: Declaration keywords recognized as classes.
        strip_directives: Whether ``#`` preprocessor lines are removed.
    """

    name: str
    aliases: tuple[str, ...]
    extensions: tuple[str, ...]
    scope_keyword: str
    nested_scopes: bool
    default_access: Modifier
    categories: tuple[ClassCategory, ...]
    strip_directives: bool


CSHARP = Dialect(
    name="csharp",
    aliases=("cs", "csharp", "c#"),
    extensions=(".cs",),
    scope_keyword="namespace",
    nested_scopes=True,
    default_access=Modifier.INTERNAL,
    categories=(ClassCategory.CLASS, ClassCategory.INTERFACE, ClassCategory.ENUM, ClassCategory.STRUCT),
    strip_directives=True,
)

JAVA = Dialect(
    name="java",
    aliases=("java",),
    extensions=(".java",),
    scope_keyword="package",
    nested_scopes=False,
    default_access=Modifier.PACKAGE,
    categories=(ClassCategory.CLASS, ClassCategory.INTERFACE, ClassCategory.ENUM),
    strip_directives=False,
)

DIALECTS: tuple[Dialect, ...] = (CSHARP, JAVA)


def get_dialect(name: str) -> Dialect:
    """Look up a dialect by name or alias, case-insensitively.

    Raises:
        UnsupportedLanguageError: If no dialect matches.
    """
    key = (name or "").strip().lower()
    for dialect in DIALECTS:
        if key in dialect.aliases:
            return dialect
    supported = ", ".join(alias for d in DIALECTS for alias in d.aliases)
    raise UnsupportedLanguageError(
        f"Unsupported language: {name!r} (expected one of {supported})",
        language=name,
    )


def dialect_for_path(path: Path) -> Dialect | None:
    """Return the dialect whose extension matches ``path``, if any."""
    suffix = Path(path).suffix.lower()
    for dialect in DIALECTS:
        if suffix in dialect.extensions:
            return dialect
    return None
