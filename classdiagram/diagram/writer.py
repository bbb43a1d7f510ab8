"""Indentation-aware text builder for diagram sources."""


class CodeWriter:
    """Builds text line by line.

    The indentation and ``header_symbol`` are written at the start of each
    line, which is how whole blocks get commented out.
    """

    INDENTATION = "\t"

    def __init__(self, newline: str = "\n") -> None:
        self.newline = newline or ""
        self.indent = 0
        self.header_symbol: str | None = None
        self._parts: list[str] = []
        self._at_line_start = True

    def increase_indent(self, count: int = 1) -> "CodeWriter":
        self.indent += count
        return self

    def decrease_indent(self, count: int = 1) -> "CodeWriter":
        self.indent = max(0, self.indent - count)
        return self

    def new_line(self) -> "CodeWriter":
        self._parts.append(self.newline)
        self._at_line_start = True
        return self

    def write(self, text: str) -> "CodeWriter":
        if self._at_line_start:
            self._parts.append(self.INDENTATION * self.indent)
            self._parts.append(self.header_symbol or "")
            self._at_line_start = False
        self._parts.append(text)
        return self

    def __str__(self) -> str:
        return "".join(self._parts)
