"""PlantUML class diagram renderer."""

from itertools import groupby
from typing import Iterable

from ..models.modifier import ALL_ACCESS_LEVELS, ClassCategory, Modifier, PropertyKind
from ..models.structure import ArgumentInfo, ClassNode, FieldInfo, MethodInfo
from .relations import Relation, RelationKind
from .writer import CodeWriter

COMMENT_SYMBOL = "'"

ARROWS: dict[RelationKind, str] = {
    RelationKind.DEPENDENCY: ".down.>",
    RelationKind.ASSOCIATION: "-down->",
    RelationKind.AGGREGATION: "o-down->",
    RelationKind.COMPOSITION: "*-down->",
    RelationKind.GENERALIZATION: "-up-|>",
    RelationKind.REALIZATION: ".up.|>",
    # down, so that inner classes are placed below their outer class
    RelationKind.NESTED: "-down-+",
}

# PlantUML has no struct, it is drawn as a class with a stereotype
CATEGORY_KEYWORDS: dict[ClassCategory, str] = {
    ClassCategory.CLASS: "class",
    ClassCategory.INTERFACE: "interface",
    ClassCategory.ENUM: "enum",
    ClassCategory.STRUCT: "class",
}


def access_symbol(modifier: Modifier) -> str:
    """UML visibility symbol of a modifier set."""
    if Modifier.PUBLIC in modifier:
        return "+"
    if Modifier.PROTECTED in modifier:
        return "#"
    if Modifier.INTERNAL in modifier or Modifier.PACKAGE in modifier:
        return "~"
    if Modifier.PRIVATE in modifier:
        return "-"
    return "~"


def modifier_text(modifier: Modifier) -> str:
    text = ""
    if Modifier.ABSTRACT in modifier:
        text += "{abstract} "
    if Modifier.STATIC in modifier or Modifier.CONST in modifier:
        text += "{static} "
    return text


def arguments_text(arguments: Iterable[ArgumentInfo]) -> str:
    return ", ".join(f"{arg.name} : {arg.type}" for arg in arguments)


def is_visible(modifier: Modifier, access_filter: Modifier) -> bool:
    """Whether a member passes the access level filter."""
    return bool(modifier & access_filter & ALL_ACCESS_LEVELS)


class PumlGenerator:
    """Writes classes and relations as a PlantUML class diagram.

    Members outside ``access_filter`` are commented out. Excluded classes,
    their inner classes and every relation touching one of them are
    commented out as well, so the diagram source keeps the full model.
    """

    def __init__(
        self,
        access_filter: Modifier = ALL_ACCESS_LEVELS,
        excluded_classes: Iterable[str] | None = None,
        newline: str = "\n",
    ) -> None:
        self.access_filter = access_filter
        self.excluded_names = set(excluded_classes or ())
        self.newline = newline
        self._excluded_ids: set[int] = set()

    def generate(self, title: str, classes: Iterable[ClassNode], relations: Iterable[Relation]) -> str:
        writer = CodeWriter(self.newline)
        self._excluded_ids = set()

        self._write_header(writer, title)

        ordered = sorted(classes, key=lambda cls: cls.scope_name)
        for scope, group in groupby(ordered, key=lambda cls: cls.scope_name):
            if scope:
                writer.write(f"package {scope} {{").new_line().new_line()
                writer.increase_indent()

            for cls in sorted(group, key=lambda cls: cls.name):
                self._write_class(writer, cls, parent_excluded=False)

            if scope:
                writer.decrease_indent()
                writer.write("}").new_line().new_line()

        for relation in relations:
            if relation.is_self_relation:
                continue
            self._write_relation(writer, relation)

        writer.new_line().write("@enduml").new_line()
        return str(writer)

    def is_excluded(self, cls: ClassNode) -> bool:
        return cls.name in self.excluded_names or cls.full_name in self.excluded_names

    @staticmethod
    def _write_header(writer: CodeWriter, title: str) -> None:
        writer.write(f"@startuml {title}".rstrip()).new_line().new_line()
        writer.write("skinparam classAttributeIconSize 0").new_line().new_line()

    def _write_class(self, writer: CodeWriter, cls: ClassNode, parent_excluded: bool) -> None:
        excluded = parent_excluded or self.is_excluded(cls)
        if excluded:
            self._excluded_ids.add(id(cls))
            writer.header_symbol = COMMENT_SYMBOL

        abstract = "abstract " if Modifier.ABSTRACT in cls.modifier else ""
        stereotype = "<<struct>> " if cls.category is ClassCategory.STRUCT else ""
        writer.write(f"{abstract}{CATEGORY_KEYWORDS[cls.category]} {cls.type} {stereotype}{{").new_line()
        writer.increase_indent()

        for field in cls.fields:
            self._write_member(writer, field.modifier, excluded, self._field_text(field))
        for method in cls.methods:
            self._write_member(writer, method.modifier, excluded, self._method_text(method))

        writer.decrease_indent()
        writer.write("}").new_line().new_line()

        for inner in cls.inner_classes:
            self._write_class(writer, inner, excluded)
            if excluded:
                writer.header_symbol = COMMENT_SYMBOL

        writer.header_symbol = None

    def _write_member(self, writer: CodeWriter, modifier: Modifier, class_excluded: bool, text: str) -> None:
        if not class_excluded:
            writer.header_symbol = None if is_visible(modifier, self.access_filter) else COMMENT_SYMBOL
        writer.write(text).new_line()
        if not class_excluded:
            writer.header_symbol = None

    @staticmethod
    def _field_text(field: FieldInfo) -> str:
        stereotypes = []
        if Modifier.EVENT in field.modifier:
            stereotypes.append("event")
        if PropertyKind.GET in field.property_kind:
            stereotypes.append("get")
        if PropertyKind.SET in field.property_kind:
            stereotypes.append("set")
        stereotype = f"<<{','.join(stereotypes)}>> " if stereotypes else ""
        indexer = f"[{arguments_text(field.indexer_args)}]" if field.indexer_args else ""
        return (
            f"{access_symbol(field.modifier)} {stereotype}{modifier_text(field.modifier)}"
            f"{field.name}{indexer} : {field.type}"
        )

    @staticmethod
    def _method_text(method: MethodInfo) -> str:
        return_type = f" : {method.return_type}" if method.return_type is not None else ""
        return (
            f"{access_symbol(method.modifier)} {modifier_text(method.modifier)}"
            f"{method.name}({arguments_text(method.arguments)}){return_type}"
        )

    def _write_relation(self, writer: CodeWriter, relation: Relation) -> None:
        touches_excluded = (
            id(relation.source) in self._excluded_ids
            or id(relation.target) in self._excluded_ids
            or self.is_excluded(relation.source)
            or self.is_excluded(relation.target)
        )
        writer.header_symbol = COMMENT_SYMBOL if touches_excluded else None
        writer.write(f"{relation.source.name} {ARROWS[relation.kind]} {relation.target.name}").new_line()
        writer.header_symbol = None


def generate(
    title: str,
    classes: Iterable[ClassNode],
    relations: Iterable[Relation],
    access_filter: Modifier = ALL_ACCESS_LEVELS,
    excluded_classes: Iterable[str] | None = None,
    newline: str = "\n",
) -> str:
    """Render a PlantUML class diagram.

    Args:
        title: Diagram title written after ``@startuml``.
        classes: Top-level classes; inner classes follow their outer class.
        relations: Relations to draw. Self relations are skipped.
        access_filter: Access levels whose members are shown.
        excluded_classes: Class names to comment out with their relations.
        newline: Line separator.

    Returns:
        PlantUML source text.
    """
    return PumlGenerator(access_filter, excluded_classes, newline).generate(title, classes, relations)
