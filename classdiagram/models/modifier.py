"""Modifier flags, class categories and related keyword tables."""

import re
from enum import Enum, Flag, auto


class Modifier(Flag):
    """Declaration modifiers of C# and Java.

    Access levels are a disjoint sub-set (see ``ALL_ACCESS_LEVELS``);
    every other member is an independent flag.
    """

    NONE = 0
    PUBLIC = auto()
    PROTECTED = auto()
    INTERNAL = auto()
    PACKAGE = auto()
    PRIVATE = auto()
    STATIC = auto()
    ABSTRACT = auto()
    SEALED = auto()
    FINAL = auto()
    VIRTUAL = auto()
    NEW = auto()
    OVERRIDE = auto()
    READONLY = auto()
    CONST = auto()
    VOLATILE = auto()
    EVENT = auto()
    ASYNC = auto()
    EXTERN = auto()
    PARTIAL = auto()
    UNSAFE = auto()
    STRICTFP = auto()
    TRANSIENT = auto()
    NATIVE = auto()
    SYNCHRONIZED = auto()
    DEFAULT = auto()  # Java interface default methods


ALL_ACCESS_LEVELS = (
    Modifier.PUBLIC
    | Modifier.PROTECTED
    | Modifier.INTERNAL
    | Modifier.PACKAGE
    | Modifier.PRIVATE
)

# Keyword order is the order used when modifiers are written back as text.
MODIFIER_WORDS: dict[str, Modifier] = {
    "public": Modifier.PUBLIC,
    "protected": Modifier.PROTECTED,
    "internal": Modifier.INTERNAL,
    "package": Modifier.PACKAGE,
    "private": Modifier.PRIVATE,
    "static": Modifier.STATIC,
    "sealed": Modifier.SEALED,
    "final": Modifier.FINAL,
    "virtual": Modifier.VIRTUAL,
    "new": Modifier.NEW,
    "override": Modifier.OVERRIDE,
    "abstract": Modifier.ABSTRACT,
    "readonly": Modifier.READONLY,
    "const": Modifier.CONST,
    "volatile": Modifier.VOLATILE,
    "event": Modifier.EVENT,
    "async": Modifier.ASYNC,
    "extern": Modifier.EXTERN,
    "partial": Modifier.PARTIAL,
    "unsafe": Modifier.UNSAFE,
    "strictfp": Modifier.STRICTFP,
    "transient": Modifier.TRANSIENT,
    "native": Modifier.NATIVE,
    "synchronized": Modifier.SYNCHRONIZED,
    "default": Modifier.DEFAULT,
}


def parse_modifier(word: str) -> Modifier:
    """Return the flag for a single modifier keyword, or ``Modifier.NONE``."""
    return MODIFIER_WORDS.get(word, Modifier.NONE)


def is_modifier_word(word: str) -> bool:
    """Check whether ``word`` is a modifier keyword."""
    return word in MODIFIER_WORDS


def parse_modifiers(text: str) -> Modifier:
    """Combine every modifier keyword found in whitespace separated text."""
    mod = Modifier.NONE
    for word in text.split():
        mod |= parse_modifier(word)
    return mod


def to_modifier_string(modifier: Modifier) -> str:
    """Render a modifier set as space separated keywords."""
    return " ".join(word for word, flag in MODIFIER_WORDS.items() if flag in modifier)


def access_level(modifier: Modifier) -> Modifier:
    """Return only the access level bits of ``modifier``."""
    return modifier & ALL_ACCESS_LEVELS


def parse_access_filter(text: str | None) -> Modifier:
    """Parse a user supplied access level list such as ``"public,protected"``.

    Words may be separated by ',', ' ' or '|'. Non-access keywords are
    ignored, and an empty result means every access level.
    """
    if not text:
        return ALL_ACCESS_LEVELS

    mod = Modifier.NONE
    for word in re.split(r"[,\s|]+", text.strip()):
        mod |= parse_modifier(word.lower())

    mod &= ALL_ACCESS_LEVELS
    return mod if mod else ALL_ACCESS_LEVELS


class ClassCategory(str, Enum):
    """Kind of a type declaration; the value is its keyword."""

    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    STRUCT = "struct"


class PropertyKind(Flag):
    """Property traits of a field."""

    NONE = 0
    GET = auto()
    SET = auto()
    INDEXER = auto()


class ArgumentModifier(str, Enum):
    """Parameter passing modifier written before an argument type."""

    NONE = ""
    THIS = "this"
    IN = "in"
    OUT = "out"
    REF = "ref"
    PARAMS = "params"

    @classmethod
    def parse(cls, word: str | None) -> "ArgumentModifier":
        """Parse a keyword, returning ``NONE`` for anything unknown."""
        if not word:
            return cls.NONE
        try:
            return cls(word.strip().lower())
        except ValueError:
            return cls.NONE
