"""Depth-aware text splitting shared by the tokenizer and the type parser."""

from dataclasses import dataclass, field
from typing import Callable, Iterable


@dataclass(frozen=True)
class DepthText:
    """A piece of text and the nesting depth it was found at.

    ``opens_block`` is set by the tokenizer on statements directly followed
    by ``{``. It does not take part in comparisons.
    """

    text: str
    depth: int
    opens_block: bool = field(default=False, compare=False)

    def split(self, separator: str) -> list["DepthText"]:
        """Split the text, keeping the depth on every part."""
        return [DepthText(part, self.depth) for part in self.text.split(separator)]


def split_with_depth(text: str, nest: str, unnest: str) -> list[DepthText]:
    """Split ``text`` on the nest and unnest tokens, tracking depth.

    The depth starts at 0, increases by one after each ``nest`` token and
    decreases by one after each ``unnest`` token. Empty pieces are kept so
    that ``merge`` can rebuild the original text.

    Args:
        text: Text to split.
        nest: Token opening a level, e.g. ``{`` or ``<``.
        unnest: Token closing a level, e.g. ``}`` or ``>``.

    Returns:
        Pieces in text order with their depth.
    """
    result: list[DepthText] = []
    depth = 0
    for piece in text.split(nest):
        for sub in piece.split(unnest):
            result.append(DepthText(sub, depth))
            depth -= 1
        # one unnest less than pieces, then the nest token itself
        depth += 2
    return result


def merge(texts: Iterable[DepthText], nest: str, unnest: str) -> str:
    """Join pieces back together, re-inserting tokens where the depth changes."""
    parts: list[str] = []
    previous: DepthText | None = None
    for current in texts:
        if previous is not None:
            if previous.depth < current.depth:
                parts.append(nest)
            elif previous.depth > current.depth:
                parts.append(unnest)
        parts.append(current.text)
        previous = current
    return "".join(parts)


def split(
    text: str,
    separator: str,
    nest: str,
    unnest: str,
    depth_filter: Callable[[int], bool] | None = None,
) -> list[str]:
    """Split ``text`` on ``separator`` only where ``depth_filter`` accepts the depth.

    ``split("A<B,C>,D", ",", "<", ">", lambda d: d == 0)`` returns
    ``["A<B,C>", "D"]``.

    Args:
        text: Text to split.
        separator: Separator string.
        nest: Token opening a level.
        unnest: Token closing a level.
        depth_filter: Predicate on the depth; ``None`` splits everywhere.

    Returns:
        The split words with nested text merged back in.
    """
    words: list[str] = []
    pending: list[DepthText] = []
    for item in split_with_depth(text, nest, unnest):
        if depth_filter is not None and not depth_filter(item.depth):
            pending.append(item)
            continue

        parts = item.split(separator)
        if len(parts) == 1:
            pending.append(item)
            continue

        pending.append(parts[0])
        words.append(merge(pending, nest, unnest))
        words.extend(part.text for part in parts[1:-1])
        pending = [parts[-1]]

    if pending:
        words.append(merge(pending, nest, unnest))
    return words


def split_top_level(text: str, separator: str = ",", nest: str = "<", unnest: str = ">") -> list[str]:
    """Split on ``separator`` outside of any nested region."""
    return split(text, separator, nest, unnest, lambda depth: depth == 0)
