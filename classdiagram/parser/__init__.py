"""C# and Java structural parser.

Source text is tokenized into statements with their brace depth, and
the statements are matched against declaration signatures to build a
tree of ``ClassNode`` objects.
"""

from .components import ClassMatcher, EnumValuesMatcher, FieldMatcher, MethodMatcher
from .dialect import CSHARP, DIALECTS, JAVA, Dialect, dialect_for_path, get_dialect
from .reader import SourceCodeReader, strip_source, tokenize
from .source_parser import SourceCodeParser, parse
from .text_analyzer import DepthText
from .type_parser import PLACEHOLDER_TYPE, parse_arguments, parse_type

__all__ = [
    "CSHARP",
    "ClassMatcher",
    "DIALECTS",
    "DepthText",
    "Dialect",
    "EnumValuesMatcher",
    "FieldMatcher",
    "JAVA",
    "MethodMatcher",
    "PLACEHOLDER_TYPE",
    "SourceCodeParser",
    "SourceCodeReader",
    "dialect_for_path",
    "get_dialect",
    "parse",
    "parse_arguments",
    "parse_type",
    "strip_source",
    "tokenize",
]
