"""Relation inference and PlantUML rendering."""

from .puml import ARROWS, PumlGenerator, generate
from .relations import REDUNDANT_KINDS, Relation, RelationKind, TypeResolver, infer, remove_redundant
from .writer import CodeWriter

__all__ = [
    "ARROWS",
    "CodeWriter",
    "PumlGenerator",
    "REDUNDANT_KINDS",
    "Relation",
    "RelationKind",
    "TypeResolver",
    "generate",
    "infer",
    "remove_redundant",
]
