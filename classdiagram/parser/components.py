"""Signature matchers for class, method, field and enum value declarations.

Every matcher reads from a ``SourceCodeReader`` and returns the parsed
node, or ``None`` with the reader position restored when the next
statement is not the declaration it is looking for.
"""

import logging
import re
from functools import lru_cache

from ..models.modifier import (
    ALL_ACCESS_LEVELS,
    ClassCategory,
    Modifier,
    PropertyKind,
    is_modifier_word,
    parse_modifiers,
)
from ..models.structure import ClassNode, FieldInfo, MethodInfo, TypeRef
from .grammar import (
    ANNOTATION,
    ARGUMENTS,
    ATTRIBUTE,
    INHERITANCE,
    MODIFIERS,
    NAME,
    OPERATOR,
    TYPE,
    TYPE_PARAM,
    VARARG,
)
from .reader import SourceCodeReader
from .text_analyzer import DepthText, merge, split, split_top_level, split_with_depth
from .type_parser import parse_arguments, parse_type

logger = logging.getLogger(__name__)

ALL_CATEGORIES = tuple(ClassCategory)

METHOD_PATTERN = re.compile(
    rf"^{ATTRIBUTE}{ANNOTATION}(?P<modifiers>{MODIFIERS})(?:<{TYPE_PARAM}>\s*)?"
    rf"(?:(?P<return_type>{TYPE}{VARARG}?)\s+)?(?P<name>{OPERATOR}|{NAME})\s*(?:<{TYPE_PARAM}>\s*)?"
    rf"\(\s*(?P<arguments>{ARGUMENTS})\s*\)"
)

FIELD_PATTERN = re.compile(
    rf"^{ATTRIBUTE}{ANNOTATION}(?P<modifiers>{MODIFIERS})(?P<type>{TYPE})\s+(?P<name>{NAME})\s*"
    rf"(?:\[\s*(?P<indexer>{ARGUMENTS})\s*\])?"
)

GETTER_PATTERN = re.compile(rf"^{ATTRIBUTE}{MODIFIERS}get\b")
SETTER_PATTERN = re.compile(rf"^{ATTRIBUTE}{MODIFIERS}(?:set|init)\b")

ENUM_VALUE_PATTERN = re.compile(rf"^{ATTRIBUTE}{ANNOTATION}(?P<name>{NAME})")

_INHERITANCE_KEYWORD = re.compile(r":|\bextends\b|\bimplements\b")

ENUM_VALUE_MODIFIER = Modifier.PUBLIC | Modifier.STATIC
ENUM_VALUE_TYPE = TypeRef(name="int")

CONVERSION_KEYWORDS = frozenset({"implicit", "explicit"})


@lru_cache(maxsize=None)
def class_pattern(categories: tuple[ClassCategory, ...] = ALL_CATEGORIES) -> re.Pattern[str]:
    """Build the class declaration pattern for a set of category keywords."""
    keywords = "|".join(category.value for category in categories)
    return re.compile(
        rf"^{ATTRIBUTE}{ANNOTATION}(?P<modifiers>{MODIFIERS})(?P<category>{keywords})\s+"
        rf"(?P<name>{NAME}(?:\s*<{TYPE_PARAM}>\s*)?)\s*(?P<inheritance>{INHERITANCE})"
    )


def with_default_access(modifier: Modifier, default_access: Modifier) -> Modifier:
    """Add ``default_access`` when ``modifier`` carries no access level."""
    if modifier & ALL_ACCESS_LEVELS:
        return modifier
    return modifier | default_access


def parse_inheritance(text: str) -> list[TypeRef]:
    """Parse ``: A, B`` or ``extends A implements B<C>`` into a list of types.

    Keywords are only replaced outside of generic brackets.
    """
    pieces = [
        DepthText(_INHERITANCE_KEYWORD.sub(",", piece.text) if piece.depth == 0 else piece.text, piece.depth)
        for piece in split_with_depth(text, "<", ">")
    ]
    normalized = merge(pieces, "<", ">")
    return [parse_type(part) for part in split_top_level(normalized) if part.strip()]


class EnumValuesMatcher:
    """Matches the comma separated value list of an enum body."""

    def __init__(self, definition_depth: int) -> None:
        self.definition_depth = definition_depth

    def try_parse(self, reader: SourceCodeReader) -> list[FieldInfo] | None:
        position = reader.position
        line = reader.try_read()
        if line is None or line.depth != self.definition_depth + 1:
            reader.position = position
            return None

        values: list[FieldInfo] = []
        # constructor arguments of Java enum constants may contain commas
        for piece in split(line.text, ",", "(", ")", lambda depth: depth == 0):
            match = ENUM_VALUE_PATTERN.match(piece.strip())
            if match:
                values.append(
                    FieldInfo(
                        modifier=ENUM_VALUE_MODIFIER,
                        name=match.group("name"),
                        type=ENUM_VALUE_TYPE,
                    )
                )
        return values


class MethodMatcher:
    """Matches method and constructor declarations and skips their bodies."""

    def __init__(self, default_access: Modifier = Modifier.INTERNAL, in_interface: bool = False) -> None:
        self.default_access = default_access
        self.in_interface = in_interface

    def try_parse(self, reader: SourceCodeReader) -> MethodInfo | None:
        position = reader.position
        line = reader.try_read()
        if line is None:
            return None

        match = METHOD_PATTERN.match(line.text)
        if not match:
            reader.position = position
            return None

        modifier = parse_modifiers(match.group("modifiers"))
        if self.in_interface:
            modifier = (modifier & ~ALL_ACCESS_LEVELS) | Modifier.PUBLIC | Modifier.ABSTRACT
        else:
            modifier = with_default_access(modifier, self.default_access)

        name = match.group("name")
        return_type = match.group("return_type")
        if return_type in CONVERSION_KEYWORDS:
            # "implicit operator int(...)" returns the type after "operator"
            return_type = name[len("operator"):]
        method = MethodInfo(
            modifier=modifier,
            name=name,
            return_type=parse_type(return_type) if return_type else None,
            arguments=parse_arguments(match.group("arguments")),
        )

        reader.skip_deeper_lines(line.depth)
        return method


class FieldMatcher:
    """Matches fields, properties, events and indexers.

    Accessor statements one level below the declaration decide the
    property kind: ``get`` sets GET, ``set`` and ``init`` set SET. A
    declaration with a default value is a plain field, and ``=>`` directly
    after the name makes an expression-bodied getter.
    """

    def __init__(self, default_access: Modifier = Modifier.INTERNAL) -> None:
        self.default_access = default_access

    def try_parse(self, reader: SourceCodeReader) -> FieldInfo | None:
        position = reader.position
        line = reader.try_read()
        if line is None:
            return None

        match = FIELD_PATTERN.match(line.text)
        if not match:
            reader.position = position
            return None

        field_type = parse_type(match.group("type"))
        if is_modifier_word(field_type.name):
            # "public int" is a modifier followed by a type, not a field
            reader.position = position
            return None

        tail = line.text[match.end():].strip()
        expression_bodied = tail.startswith("=>")
        has_default = not expression_bodied and "=" in tail

        kind = PropertyKind.NONE
        indexer = match.group("indexer")
        if indexer is not None:
            kind |= PropertyKind.INDEXER
        if expression_bodied:
            kind |= PropertyKind.GET

        accessors = self._read_accessors(reader, line.depth)
        if not has_default:
            kind |= accessors

        return FieldInfo(
            modifier=with_default_access(parse_modifiers(match.group("modifiers")), self.default_access),
            name=match.group("name"),
            type=field_type,
            property_kind=kind,
            indexer_args=parse_arguments(indexer) if indexer else [],
        )

    @staticmethod
    def _read_accessors(reader: SourceCodeReader, depth: int) -> PropertyKind:
        """Consume the statements below the declaration and collect accessors."""
        kind = PropertyKind.NONE
        for _ in range(reader.count_deeper_lines(depth)):
            line = reader.try_read()
            if line is None or line.depth != depth + 1:
                continue
            if GETTER_PATTERN.match(line.text):
                kind |= PropertyKind.GET
            if SETTER_PATTERN.match(line.text):
                kind |= PropertyKind.SET
        return kind


class ClassMatcher:
    """Matches a class, interface, enum or struct declaration and its body.

    Body statements one level below the declaration are offered to the
    member matchers in this order: enum values (first statement of an
    enum), nested class, method, field, enum values (later statements of
    an enum). A statement nobody accepts is skipped.
    """

    def __init__(
        self,
        scope_name: str = "",
        default_access: Modifier = Modifier.INTERNAL,
        categories: tuple[ClassCategory, ...] = ALL_CATEGORIES,
    ) -> None:
        self.scope_name = scope_name
        self.default_access = default_access
        self.categories = categories
        self._pattern = class_pattern(categories)

    def try_parse(self, reader: SourceCodeReader, parent_name: str = "") -> ClassNode | None:
        """Parse the next class declaration.

        Args:
            reader: Statement reader positioned at the declaration.
            parent_name: Name of the enclosing class for inner classes.

        Returns:
            The class with its members, or ``None`` if the next statement
            is not a class declaration.
        """
        position = reader.position
        line = reader.try_read()
        if line is None:
            return None

        match = self._pattern.match(line.text)
        if not match:
            reader.position = position
            return None

        name = match.group("name").strip()
        node = ClassNode(
            modifier=with_default_access(parse_modifiers(match.group("modifiers")), self.default_access),
            category=ClassCategory(match.group("category")),
            scope_name=self.scope_name,
            type=parse_type(f"{parent_name}.{name}" if parent_name else name),
            inherited_types=parse_inheritance(match.group("inheritance")),
        )
        self._parse_body(reader, node, line.depth)
        logger.debug(f"Parsed {node.category.value} {node.full_name}")
        return node

    def _parse_body(self, reader: SourceCodeReader, node: ClassNode, depth: int) -> None:
        end = reader.position + reader.count_deeper_lines(depth)
        is_enum = node.category is ClassCategory.ENUM
        methods = MethodMatcher(self.default_access, in_interface=node.category is ClassCategory.INTERFACE)
        fields = FieldMatcher(self.default_access)
        enum_values = EnumValuesMatcher(depth)

        first_line = True
        while reader.position < end:
            if reader.peek_depth() != depth + 1:
                reader.try_read()
                continue

            values = enum_values.try_parse(reader) if is_enum and first_line else None
            if values is not None:
                node.fields.extend(values)
                first_line = False
                continue
            first_line = False

            inner = self.try_parse(reader, node.name)
            if inner is not None:
                node.inner_classes.append(inner)
                continue

            method = methods.try_parse(reader)
            if method is not None:
                node.methods.append(method)
                continue

            field = fields.try_parse(reader)
            if field is not None:
                node.fields.append(field)
                continue

            values = enum_values.try_parse(reader) if is_enum else None
            if values is not None:
                node.fields.extend(values)
                continue

            reader.try_read()
