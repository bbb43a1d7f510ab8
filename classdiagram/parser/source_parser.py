"""Structural parser for a single C# or Java compilation unit."""

import logging
import re
from dataclasses import dataclass

from ..models.structure import ClassNode
from .components import ClassMatcher
from .dialect import CSHARP, Dialect
from .grammar import NAME
from .reader import SourceCodeReader

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Scope:
    name: str
    depth: int
    # block scopes own the statements below them, file scopes
    # (Java packages, C# "namespace X;") the rest of the file
    is_block: bool


class SourceCodeParser:
    """Extracts the top-level classes of a compilation unit.

    Namespace (C#) or package (Java) declarations set the scope name of
    the classes that follow. C# namespaces nest and are joined with dots.
    """

    def __init__(self, dialect: Dialect = CSHARP) -> None:
        self.dialect = dialect
        self._scope_pattern = re.compile(rf"^\s*{re.escape(dialect.scope_keyword)}\s+(?P<name>{NAME})")

    def parse(self, code: str) -> list[ClassNode]:
        """Parse source text.

        Args:
            code: Source text of one file.

        Returns:
            Top-level classes in source order; inner classes are attached
            to their outer class.
        """
        reader = SourceCodeReader(code, strip_directives=self.dialect.strip_directives)
        classes: list[ClassNode] = []
        scopes: list[_Scope] = []

        while not reader.is_end:
            line = reader.peek()
            self._close_scopes(scopes, line.depth)

            match = self._scope_pattern.match(line.text)
            if match:
                reader.try_read()
                if not self.dialect.nested_scopes:
                    scopes.clear()
                scopes.append(_Scope(match.group("name"), line.depth, line.opens_block))
                continue

            matcher = ClassMatcher(
                scope_name=".".join(scope.name for scope in scopes),
                default_access=self.dialect.default_access,
                categories=self.dialect.categories,
            )
            node = matcher.try_parse(reader)
            if node is not None:
                classes.append(node)
                continue

            reader.try_read()

        logger.debug(f"Parsed {len(classes)} top-level classes ({self.dialect.name})")
        return classes

    @staticmethod
    def _close_scopes(scopes: list[_Scope], depth: int) -> None:
        """Drop the scopes that do not enclose a statement at ``depth``."""
        while scopes:
            scope = scopes[-1]
            if (scope.is_block and depth <= scope.depth) or (not scope.is_block and depth < scope.depth):
                scopes.pop()
            else:
                break


def parse(code: str, dialect: Dialect = CSHARP) -> list[ClassNode]:
    """Parse one compilation unit with the given dialect."""
    return SourceCodeParser(dialect).parse(code)
