"""Parser for type expressions such as ``Dictionary<string, List<int>>[]``."""

import re

from ..models.modifier import ArgumentModifier
from ..models.structure import ArgumentInfo, TypeBuilder, TypeRef
from .grammar import ARGUMENT_PATTERN
from .text_analyzer import DepthText, merge, split_top_level, split_with_depth

PLACEHOLDER_TYPE = TypeRef(name="")

_VARARG = re.compile(r"\s*\.\.\.\s*")
_MULTI_RANK = re.compile(r"\[\s*((?:,\s*)*)\]")


def expand_array_ranks(text: str) -> str:
    """Rewrite ``[,]`` style ranks as repeated ``[]`` groups (``[,,]`` -> ``[][][]``)."""
    return _MULTI_RANK.sub(lambda m: "[]" * (m.group(1).count(",") + 1), text)


def _strip_type_args(segment: str) -> str:
    """Keep only the depth 0 text of a segment: ``Outer<T>`` -> ``Outer``."""
    pieces = [piece for piece in split_with_depth(segment, "<", ">") if piece.depth == 0]
    return merge(pieces, "<", ">").strip()


def _last_at_depth(root: TypeBuilder, depth: int) -> TypeBuilder:
    """Follow the last type argument ``depth`` times, stopping at a leaf."""
    node = root
    for _ in range(depth):
        if not node.type_args:
            break
        node = node.type_args[-1]
    return node


def parse_type(text: str) -> TypeRef:
    """Parse a type expression.

    Dots at depth 0 separate outer segments; those keep their names but
    lose their type arguments, so ``Outer<int>.Inner<string>`` becomes
    ``Outer.Inner<string>``. Array ranks attach to the innermost open type.

    Args:
        text: Type text as written in source.

    Returns:
        The parsed type, or the placeholder type for blank text.
    """
    text = expand_array_ranks(_VARARG.sub("[]", text or ""))
    segments = [s.strip() for s in split_top_level(text, ".") if s.strip()]
    if not segments:
        return PLACEHOLDER_TYPE

    outer = ".".join(_strip_type_args(s) for s in segments[:-1])

    words: list[DepthText] = []
    for item in split_with_depth(segments[-1], "<", ">"):
        for part in item.text.split(","):
            for word in part.split("["):
                if word.strip():
                    words.append(DepthText(word.strip(), item.depth))

    if not words:
        return PLACEHOLDER_TYPE

    first = words[0]
    root = TypeBuilder(f"{outer}.{first.text}" if outer else first.text)
    for word in words[1:]:
        depth = word.depth - first.depth
        if word.text == "]":
            _last_at_depth(root, depth).array_rank += 1
        elif word.text.startswith("."):
            # Outer<T>.Inner nested inside type arguments
            node = _last_at_depth(root, depth)
            node.name += word.text
            node.type_args.clear()
        else:
            _last_at_depth(root, depth - 1).type_args.append(TypeBuilder(word.text))

    return root.freeze()


def parse_arguments(text: str) -> list[ArgumentInfo]:
    """Parse a comma separated argument list.

    Commas inside generic brackets do not split arguments. Pieces that do
    not look like ``[modifier] Type name [= default]`` are ignored.
    """
    arguments: list[ArgumentInfo] = []
    if not text or not text.strip():
        return arguments

    for piece in split_top_level(expand_array_ranks(text)):
        match = ARGUMENT_PATTERN.match(piece.strip())
        if not match:
            continue
        keywords = match.group("keywords").split()
        modifier = ArgumentModifier.NONE
        for keyword in keywords:
            modifier = ArgumentModifier.parse(keyword)
            if modifier is not ArgumentModifier.NONE:
                break
        arguments.append(
            ArgumentInfo(
                type=parse_type(match.group("type")),
                name=match.group("name"),
                modifier=modifier,
            )
        )
    return arguments
