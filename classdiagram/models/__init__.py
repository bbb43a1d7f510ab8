"""Structural model types."""

from .modifier import (
    ALL_ACCESS_LEVELS,
    ArgumentModifier,
    ClassCategory,
    Modifier,
    PropertyKind,
    parse_access_filter,
)
from .structure import (
    ArgumentInfo,
    ClassNode,
    FieldInfo,
    MethodInfo,
    TypeBuilder,
    TypeRef,
)

__all__ = [
    "ALL_ACCESS_LEVELS",
    "ArgumentInfo",
    "ArgumentModifier",
    "ClassCategory",
    "ClassNode",
    "FieldInfo",
    "MethodInfo",
    "Modifier",
    "PropertyKind",
    "TypeBuilder",
    "TypeRef",
    "parse_access_filter",
]
