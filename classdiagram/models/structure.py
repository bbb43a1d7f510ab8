"""Structural model extracted from C# and Java source code."""

from dataclasses import dataclass, field
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field

from .modifier import ArgumentModifier, ClassCategory, Modifier, PropertyKind


class TypeRef(BaseModel):
    """Parsed type expression: name, generic arguments and array rank.

    Dotted outer-class prefixes stay part of ``name`` (``Outer.Inner``).
    Instances are immutable and compare structurally.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type_args: tuple["TypeRef", ...] = ()
    array_rank: int = Field(default=0, ge=0)

    @property
    def exact_name(self) -> str:
        """Name with a generic arity suffix, e.g. ``Dictionary`2``."""
        if self.type_args:
            return f"{self.name}`{len(self.type_args)}"
        return self.name

    @property
    def is_placeholder(self) -> bool:
        """True for the empty type produced from blank type text."""
        return not self.name

    def contained_types(self) -> list["TypeRef"]:
        """Return this type followed by every type in its argument subtree."""
        types = [self]
        for arg in self.type_args:
            types.extend(arg.contained_types())
        return types

    def __str__(self) -> str:
        args = f"<{','.join(str(a) for a in self.type_args)}>" if self.type_args else ""
        return self.name + args + "[]" * self.array_rank


@dataclass
class TypeBuilder:
    """Mutable type node used while a type expression is being parsed."""

    name: str
    array_rank: int = 0
    type_args: list["TypeBuilder"] = field(default_factory=list)

    def freeze(self) -> TypeRef:
        """Convert this builder tree into an immutable ``TypeRef``."""
        return TypeRef(
            name=self.name,
            array_rank=self.array_rank,
            type_args=tuple(arg.freeze() for arg in self.type_args),
        )


class ArgumentInfo(BaseModel):
    """Method or indexer argument."""

    model_config = ConfigDict(frozen=True)

    type: TypeRef
    name: str
    modifier: ArgumentModifier = ArgumentModifier.NONE


class FieldInfo(BaseModel):
    """Field, property, event or indexer of a class."""

    modifier: Modifier = Modifier.NONE
    name: str
    type: TypeRef
    property_kind: PropertyKind = PropertyKind.NONE
    indexer_args: list[ArgumentInfo] = Field(default_factory=list)

    @property
    def is_property(self) -> bool:
        """True if the field has a getter or a setter."""
        return bool(self.property_kind & (PropertyKind.GET | PropertyKind.SET))

    def related_types(self) -> list[TypeRef]:
        """Every type the field refers to, indexer arguments included."""
        types = self.type.contained_types()
        for arg in self.indexer_args:
            types.extend(arg.type.contained_types())
        return types


class MethodInfo(BaseModel):
    """Method or constructor of a class. Constructors have no return type."""

    modifier: Modifier = Modifier.NONE
    name: str
    return_type: TypeRef | None = None
    arguments: list[ArgumentInfo] = Field(default_factory=list)

    @property
    def is_constructor(self) -> bool:
        return self.return_type is None

    def related_types(self) -> list[TypeRef]:
        """Every type in the return type and the argument types."""
        types = self.return_type.contained_types() if self.return_type else []
        for arg in self.arguments:
            types.extend(arg.type.contained_types())
        return types


class ClassNode(BaseModel):
    """Class, interface, enum or struct with its members and inner classes."""

    modifier: Modifier = Modifier.NONE
    category: ClassCategory = ClassCategory.CLASS
    scope_name: str = ""  # namespace (C#) or package (Java)
    type: TypeRef
    inherited_types: list[TypeRef] = Field(default_factory=list)
    inner_classes: list["ClassNode"] = Field(default_factory=list)
    methods: list[MethodInfo] = Field(default_factory=list)
    fields: list[FieldInfo] = Field(default_factory=list)

    @property
    def name(self) -> str:
        """Class name, prefixed with its outer classes for inner classes."""
        return self.type.name

    @property
    def full_name(self) -> str:
        """Scope qualified name including the generic arity suffix."""
        if self.scope_name:
            return f"{self.scope_name}.{self.type.exact_name}"
        return self.type.exact_name

    def all_classes(self) -> list["ClassNode"]:
        """Return this class and every inner class, depth first."""
        return list(self.iter_classes())

    def iter_classes(self) -> Iterator["ClassNode"]:
        yield self
        for inner in self.inner_classes:
            yield from inner.iter_classes()
