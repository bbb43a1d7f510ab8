"""Tests for the type expression parser."""

import pytest

from classdiagram.models import ArgumentModifier, TypeRef
from classdiagram.parser.type_parser import PLACEHOLDER_TYPE, expand_array_ranks, parse_arguments, parse_type


def T(name: str, *args: TypeRef, rank: int = 0) -> TypeRef:
    """Shorthand for building expected types."""
    return TypeRef(name=name, type_args=tuple(args), array_rank=rank)


class TestParseType:
    """Tests for parse_type."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("int", T("int")),
            ("  string  ", T("string")),
            ("int[]", T("int", rank=1)),
            ("int[][]", T("int", rank=2)),
            ("int[,]", T("int", rank=2)),
            ("int[,,]", T("int", rank=3)),
            ("String...", T("String", rank=1)),
            ("List<int>", T("List", T("int"))),
            ("List<int>[]", T("List", T("int"), rank=1)),
            ("List<int[]>", T("List", T("int", rank=1))),
            ("Dictionary<string, List<int>>", T("Dictionary", T("string"), T("List", T("int")))),
            ("Dictionary<string[],int[]>[]", T("Dictionary", T("string", rank=1), T("int", rank=1), rank=1)),
            ("System.Collections.Generic.List<int>", T("System.Collections.Generic.List", T("int"))),
            ("Outer<int>.Inner<string>", T("Outer.Inner", T("string"))),
            ("List<Outer.Inner>", T("List", T("Outer.Inner"))),
            ("List<Outer<int>.Inner[]>", T("List", T("Outer.Inner", rank=1))),
            ("List<? extends Number>", T("List", T("? extends Number"))),
            ("int?", T("int?")),
        ],
    )
    def test_parse(self, text, expected):
        """Test parsing representative type expressions."""
        assert parse_type(text) == expected

    def test_nested_generic_arguments(self):
        """Test a three level generic type."""
        result = parse_type("A<B<C<D>>, E>")
        assert result.name == "A"
        assert [arg.name for arg in result.type_args] == ["B", "E"]
        assert result.type_args[0].type_args[0].type_args[0] == T("D")

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_blank_text_gives_placeholder(self, text):
        """Test that blank text yields the placeholder type."""
        result = parse_type(text)
        assert result == PLACEHOLDER_TYPE
        assert result.is_placeholder

    @pytest.mark.parametrize(
        "text",
        [
            "int",
            "List<int>[]",
            "Dictionary<string,List<int[]>>",
            "Outer.Inner<T>[][]",
            "Func<A,B,C>",
        ],
    )
    def test_round_trip(self, text):
        """Test that rendering a parsed type and parsing it again is stable."""
        parsed = parse_type(text)
        assert str(parsed) == text
        assert parse_type(str(parsed)) == parsed

    def test_exact_name(self):
        """Test the generic arity suffix."""
        assert parse_type("Dictionary<K,V>").exact_name == "Dictionary`2"
        assert parse_type("List<int>[]").exact_name == "List`1"
        assert parse_type("int").exact_name == "int"


class TestExpandArrayRanks:
    """Tests for expand_array_ranks."""

    def test_expand(self):
        """Test multi-dimensional rank expansion."""
        assert expand_array_ranks("int[,]") == "int[][]"
        assert expand_array_ranks("int[ , , ]") == "int[][][]"
        assert expand_array_ranks("int[]") == "int[]"


class TestParseArguments:
    """Tests for parse_arguments."""

    def test_empty(self):
        """Test an empty argument list."""
        assert parse_arguments("") == []
        assert parse_arguments("   ") == []

    def test_simple_arguments(self):
        """Test plain arguments."""
        args = parse_arguments("int x, string y")
        assert [(a.name, a.type) for a in args] == [("x", T("int")), ("y", T("string"))]

    def test_generic_commas_do_not_split(self):
        """Test that commas inside type arguments stay in the type."""
        args = parse_arguments("Dictionary<string, int> map, int[,] grid")
        assert args[0].type == T("Dictionary", T("string"), T("int"))
        assert args[0].name == "map"
        assert args[1].type == T("int", rank=2)

    @pytest.mark.parametrize(
        "text, modifier, type_, name",
        [
            ("this string s", ArgumentModifier.THIS, T("string"), "s"),
            ("ref int count", ArgumentModifier.REF, T("int"), "count"),
            ("out int result", ArgumentModifier.OUT, T("int"), "result"),
            ("in Point p", ArgumentModifier.IN, T("Point"), "p"),
            ("params int[] values", ArgumentModifier.PARAMS, T("int", rank=1), "values"),
            ("ref in x", ArgumentModifier.REF, T("in"), "x"),
            ("final String name", ArgumentModifier.NONE, T("String"), "name"),
            ("int... amounts", ArgumentModifier.NONE, T("int", rank=1), "amounts"),
        ],
    )
    def test_argument_modifiers(self, text, modifier, type_, name):
        """Test argument modifiers and keywords."""
        (arg,) = parse_arguments(text)
        assert arg.modifier is modifier
        assert arg.type == type_
        assert arg.name == name

    def test_attributes_annotations_and_defaults(self):
        """Test decorations and default values are ignored."""
        args = parse_arguments("[FromBody] Order order, @NonNull String id, int retries = 3")
        assert [a.name for a in args] == ["order", "id", "retries"]
        assert [a.type.name for a in args] == ["Order", "String", "int"]
