"""Statement tokenizer and the cursor the matchers read from."""

import re

from .text_analyzer import DepthText, split_with_depth

# One left-to-right scan: whichever of a comment or a literal starts first
# is removed whole, together with any quotes or comment markers inside it.
_COMMENT_OR_LITERAL = re.compile(
    r"""
    (?P<comment>//[^\r\n]*|/\*.*?\*/)
    |(?P<literal>
        \"\"\".*?\"\"\"                         # Java text block
        |@\"(?:[^\"]|\"\")*\"                   # C# verbatim string
        |\"(?:\\.|[^\"\\\r\n])*\"               # string with escapes
        |'(?:\\u[0-9a-fA-F]{4}|\\.|[^'\\\r\n])'  # character literal
    )
    """,
    re.DOTALL | re.VERBOSE,
)
_DIRECTIVE = re.compile(r"^[ \t]*#[^\r\n]*", re.MULTILINE)
_WHITESPACE = re.compile(r"\s+")


def _blank(match: re.Match[str]) -> str:
    # comments separate tokens, literal contents vanish
    return " " if match.group("comment") is not None else ""


def strip_source(code: str, strip_directives: bool = True) -> str:
    """Remove literals, comments and directives and collapse whitespace.

    An opening quote or ``/*`` without a matching close is left in place.

    Args:
        code: Raw source text.
        strip_directives: Remove lines starting with ``#`` (C# preprocessor).

    Returns:
        Single line text containing only code.
    """
    code = _COMMENT_OR_LITERAL.sub(_blank, code)
    if strip_directives:
        code = _DIRECTIVE.sub("", code)
    return _WHITESPACE.sub(" ", code).strip()


def tokenize(code: str, strip_directives: bool = True) -> list[DepthText]:
    """Split source text into statements with their brace depth.

    Statements are separated by ``{``, ``}`` and ``;``. A statement that
    opens a block (a class or method header) is at depth d, is marked
    with ``opens_block`` and its body statements are at depth d + 1.

    Args:
        code: Raw source text.
        strip_directives: Remove ``#`` preprocessor lines.

    Returns:
        Non-blank, trimmed statements in source order.
    """
    statements: list[DepthText] = []
    blocks = split_with_depth(strip_source(code, strip_directives), "{", "}")
    for index, block in enumerate(blocks):
        # only a '{' raises the depth of the next piece
        followed_by_brace = index + 1 < len(blocks) and blocks[index + 1].depth > block.depth
        parts = block.split(";")
        for part_index, part in enumerate(parts):
            text = part.text.strip()
            if text:
                opens_block = followed_by_brace and part_index == len(parts) - 1
                statements.append(DepthText(text, part.depth, opens_block))
    return statements


class SourceCodeReader:
    """Forward cursor over tokenized statements.

    Matchers save ``position`` before they read and assign it back when a
    match fails, so a failed attempt leaves no trace.
    """

    def __init__(self, code: str = "", strip_directives: bool = True) -> None:
        self._lines: tuple[DepthText, ...] = tuple(tokenize(code, strip_directives))
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int) -> None:
        if not 0 <= value <= len(self._lines):
            raise ValueError(f"Position {value} is outside 0..{len(self._lines)}")
        self._position = value

    @property
    def is_end(self) -> bool:
        return self._position >= len(self._lines)

    def try_read(self) -> DepthText | None:
        """Return the next statement and advance, or ``None`` at the end."""
        if self.is_end:
            return None
        line = self._lines[self._position]
        self._position += 1
        return line

    def peek(self) -> DepthText | None:
        """Return the next statement without advancing."""
        if self.is_end:
            return None
        return self._lines[self._position]

    def peek_depth(self) -> int | None:
        """Depth of the next statement, ``None`` at the end."""
        line = self.peek()
        return line.depth if line else None

    def count_deeper_lines(self, depth: int) -> int:
        """Count the consecutive statements from the cursor deeper than ``depth``.

        The cursor is not moved.
        """
        count = 0
        for line in self._lines[self._position:]:
            if line.depth <= depth:
                break
            count += 1
        return count

    def skip_deeper_lines(self, depth: int) -> int:
        """Advance past the statements deeper than ``depth`` and return how many."""
        count = self.count_deeper_lines(depth)
        self._position += count
        return count

    def __len__(self) -> int:
        return len(self._lines)
