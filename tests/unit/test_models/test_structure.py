"""Tests for the structural model."""

import pytest
from pydantic import ValidationError

from classdiagram.models import (
    ArgumentInfo,
    ClassNode,
    FieldInfo,
    MethodInfo,
    PropertyKind,
    TypeBuilder,
    TypeRef,
)


class TestTypeRef:
    """Tests for TypeRef."""

    def test_str(self):
        """Test the text form of a type."""
        ref = TypeRef(
            name="Dictionary",
            type_args=(TypeRef(name="string"), TypeRef(name="List", type_args=(TypeRef(name="int"),))),
            array_rank=2,
        )
        assert str(ref) == "Dictionary<string,List<int>>[][]"
        assert ref.exact_name == "Dictionary`2"

    def test_contained_types(self):
        """Test the pre-order walk over type arguments."""
        ref = TypeRef(
            name="A",
            type_args=(TypeRef(name="B", type_args=(TypeRef(name="C"),)), TypeRef(name="D")),
        )
        assert [t.name for t in ref.contained_types()] == ["A", "B", "C", "D"]

    def test_structural_equality(self):
        """Test that equal types compare and hash equal."""
        assert TypeRef(name="X", array_rank=1) == TypeRef(name="X", array_rank=1)
        assert hash(TypeRef(name="X")) == hash(TypeRef(name="X"))
        assert TypeRef(name="X") != TypeRef(name="X", array_rank=1)

    def test_immutable(self):
        """Test that a type cannot be modified."""
        ref = TypeRef(name="X")
        with pytest.raises(ValidationError):
            ref.name = "Y"

    def test_negative_rank_rejected(self):
        """Test rank validation."""
        with pytest.raises(ValidationError):
            TypeRef(name="X", array_rank=-1)

    def test_builder_freeze(self):
        """Test converting a builder tree."""
        builder = TypeBuilder(name="List", type_args=[TypeBuilder(name="int", array_rank=1)])
        assert builder.freeze() == TypeRef(name="List", type_args=(TypeRef(name="int", array_rank=1),))


class TestMembers:
    """Tests for field and method helpers."""

    def test_field_related_types(self):
        """Test that indexer arguments are related types of a field."""
        field = FieldInfo(
            name="this",
            type=TypeRef(name="Item"),
            property_kind=PropertyKind.INDEXER | PropertyKind.GET,
            indexer_args=[ArgumentInfo(type=TypeRef(name="Key"), name="key")],
        )
        assert [t.name for t in field.related_types()] == ["Item", "Key"]
        assert field.is_property

    def test_plain_field_is_not_property(self):
        """Test is_property for a plain field and an indexer without accessors."""
        assert not FieldInfo(name="x", type=TypeRef(name="int")).is_property
        assert not FieldInfo(name="this", type=TypeRef(name="int"), property_kind=PropertyKind.INDEXER).is_property

    def test_method_related_types(self):
        """Test return and argument types of a method."""
        method = MethodInfo(
            name="Find",
            return_type=TypeRef(name="List", type_args=(TypeRef(name="User"),)),
            arguments=[ArgumentInfo(type=TypeRef(name="Query"), name="q")],
        )
        assert [t.name for t in method.related_types()] == ["List", "User", "Query"]
        assert not method.is_constructor

    def test_constructor(self):
        """Test that a constructor has no return type."""
        ctor = MethodInfo(name="User", arguments=[ArgumentInfo(type=TypeRef(name="int"), name="id")])
        assert ctor.is_constructor
        assert [t.name for t in ctor.related_types()] == ["int"]


class TestClassNode:
    """Tests for ClassNode."""

    def test_full_name(self):
        """Test scope qualified names with generic arity."""
        cls = ClassNode(scope_name="App.Models", type=TypeRef(name="Box", type_args=(TypeRef(name="T"),)))
        assert cls.name == "Box"
        assert cls.full_name == "App.Models.Box`1"
        assert ClassNode(type=TypeRef(name="A")).full_name == "A"

    def test_all_classes_depth_first(self):
        """Test the order of the class tree walk."""
        leaf = ClassNode(type=TypeRef(name="A.B.C"))
        b = ClassNode(type=TypeRef(name="A.B"), inner_classes=[leaf])
        d = ClassNode(type=TypeRef(name="A.D"))
        root = ClassNode(type=TypeRef(name="A"), inner_classes=[b, d])
        assert [c.name for c in root.all_classes()] == ["A", "A.B", "A.B.C", "A.D"]
