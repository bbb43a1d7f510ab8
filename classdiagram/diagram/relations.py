"""Relation inference between parsed classes."""

import logging
from enum import Enum
from typing import Iterable

from ..models.modifier import ClassCategory
from ..models.structure import ClassNode, TypeRef

logger = logging.getLogger(__name__)


class RelationKind(str, Enum):
    """UML relation kinds."""

    DEPENDENCY = "dependency"
    ASSOCIATION = "association"
    AGGREGATION = "aggregation"
    COMPOSITION = "composition"
    GENERALIZATION = "generalization"
    REALIZATION = "realization"
    NESTED = "nested"


# Kinds made redundant by the key kind between the same two classes
REDUNDANT_KINDS: dict[RelationKind, frozenset[RelationKind]] = {
    RelationKind.COMPOSITION: frozenset(
        {RelationKind.AGGREGATION, RelationKind.ASSOCIATION, RelationKind.DEPENDENCY}
    ),
    RelationKind.AGGREGATION: frozenset({RelationKind.ASSOCIATION, RelationKind.DEPENDENCY}),
    RelationKind.ASSOCIATION: frozenset({RelationKind.DEPENDENCY}),
    RelationKind.DEPENDENCY: frozenset(),
    RelationKind.GENERALIZATION: frozenset(),
    RelationKind.REALIZATION: frozenset(),
    RelationKind.NESTED: frozenset(),
}


class Relation:
    """A directed relation from ``source`` to ``target``.

    Two relations are equal when they have the same kind and the very same
    class objects at both ends. Classes with equal content parsed from
    different files stay distinct.
    """

    __slots__ = ("source", "target", "kind")

    def __init__(self, source: ClassNode, target: ClassNode, kind: RelationKind) -> None:
        if source is None or target is None:
            raise ValueError("Relation ends must not be None")
        self.source = source
        self.target = target
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.source is other.source and self.target is other.target and self.kind is other.kind

    def __hash__(self) -> int:
        return hash((id(self.source), id(self.target), self.kind))

    def __repr__(self) -> str:
        return f"Relation({self.source.full_name} -> {self.target.full_name}, {self.kind.value})"

    @property
    def is_self_relation(self) -> bool:
        return self.source is self.target

    def redundants_in(self, relations: Iterable["Relation"]) -> list["Relation"]:
        """Return the weaker relations between the same two classes."""
        weaker = REDUNDANT_KINDS[self.kind]
        return [
            r
            for r in relations
            if r.source is self.source and r.target is self.target and r.kind in weaker
        ]


class TypeResolver:
    """Resolves type references to known classes by qualified name.

    A reference matches a class when the dotted segments of the reference
    and of ``scope_name + "." + exact_name`` agree, compared from the
    right over the length of the shorter one. When several classes match,
    the one whose own name has the fewest segments wins (an outer class
    before an inner class of the same name), then the first in input order.
    """

    def __init__(self, classes: Iterable[ClassNode]) -> None:
        self._classes = [(cls, cls.full_name.split(".")) for cls in classes]
        self._cache: dict[str, ClassNode | None] = {}

    def resolve(self, ref: TypeRef) -> ClassNode | None:
        if ref.is_placeholder:
            return None
        key = ref.exact_name
        if key not in self._cache:
            self._cache[key] = self._lookup(key.split("."))
        return self._cache[key]

    def _lookup(self, ref_parts: list[str]) -> ClassNode | None:
        candidates = [cls for cls, parts in self._classes if _right_aligned_match(ref_parts, parts)]
        if not candidates:
            return None
        return min(candidates, key=lambda cls: len(cls.name.split(".")))


def _right_aligned_match(left: list[str], right: list[str]) -> bool:
    count = min(len(left), len(right))
    return left[len(left) - count:] == right[len(right) - count:]


def remove_redundant(relations: list[Relation]) -> list[Relation]:
    """Drop relations implied by a stronger relation between the same classes."""
    redundant: set[Relation] = set()
    for relation in relations:
        redundant.update(relation.redundants_in(relations))
    return [r for r in relations if r not in redundant]


def infer(classes: Iterable[ClassNode]) -> list[Relation]:
    """Infer relations between classes and all of their inner classes.

    - Inherited types give a realization when the target is an interface,
      otherwise a generalization.
    - Every inner class gives a nested relation to its outer class.
    - Field types (with indexer arguments) give associations.
    - Method return and argument types give dependencies.

    Type arguments are followed recursively, unresolved types are ignored
    and a class never relates to itself.

    Args:
        classes: Top-level classes of every parsed file.

    Returns:
        Unique relations in the order they were found.
    """
    all_classes = [cls for root in classes for cls in root.iter_classes()]
    resolver = TypeResolver(all_classes)
    found: dict[Relation, None] = {}

    def add(source: ClassNode, ref: TypeRef, kind: RelationKind | None = None) -> None:
        target = resolver.resolve(ref)
        if target is None or target is source:
            return
        if kind is None:
            kind = (
                RelationKind.REALIZATION
                if target.category is ClassCategory.INTERFACE
                else RelationKind.GENERALIZATION
            )
        found.setdefault(Relation(source, target, kind), None)

    for cls in all_classes:
        for inherited in cls.inherited_types:
            add(cls, inherited)

        for inner in cls.inner_classes:
            if inner is not cls:
                found.setdefault(Relation(inner, cls, RelationKind.NESTED), None)

        for field in cls.fields:
            for ref in field.related_types():
                add(cls, ref, RelationKind.ASSOCIATION)

        for method in cls.methods:
            for ref in method.related_types():
                add(cls, ref, RelationKind.DEPENDENCY)

    relations = remove_redundant(list(found))
    logger.debug(f"Inferred {len(relations)} relations between {len(all_classes)} classes")
    return relations
