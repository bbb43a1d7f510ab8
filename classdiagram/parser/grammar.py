"""Regular expression fragments for C# and Java declarations.

The fragments are plain strings so they can be combined into the
declaration patterns of ``components`` and ``source_parser``. None of
them contain capturing groups.
"""

import re

from ..models.modifier import MODIFIER_WORDS

MODIFIER = "(?:" + "|".join(MODIFIER_WORDS) + ")"
MODIFIERS = rf"(?:{MODIFIER}\s+)*"

NAME = r"[^\s,:\[\]\(\)<>=]+"

# C# operator overloads and conversions: operator +, operator ==, operator int
OPERATOR = r"operator\s*[^\s\(]+"

# A name without dots, so that dotted types do not backtrack through NAME.
_SEGMENT = r"[^\s,.:\[\]\(\)<>=]+"

# Generic parameter list of a declaration: <T, U>
TYPE_PARAM = r"[^:\[\]\(\)<>=]+"

# Generic argument list of a type: anything but parentheses, ':' and '='
TYPE_ARG = r"[^:\(\)=]+"

ARRAY = r"(?:\s*\[[\s,]*\]\s*)"

TYPE = rf"{_SEGMENT}(?:\s*<{TYPE_ARG}>\s*)?(?:\.{_SEGMENT}(?:\s*<{TYPE_ARG}>\s*)?)*{ARRAY}*"

VARARG = r"(?:\s*\.\.\.)"

# C# attributes: [Serializable] [Obsolete(...)]
ATTRIBUTE = r"(?:\s*\[[^\[\]]*\]\s*)*"

# Java annotations: @Override @SuppressWarnings(...)
ANNOTATION = rf"(?:\s*@{NAME}\s*(?:\([^\(\)]*\))?\s*)*"

ARGUMENT_KEYWORD = r"(?:this|in|out|ref|params|final|scoped)"

ARGUMENT = (
    rf"{ATTRIBUTE}{ANNOTATION}(?:{ARGUMENT_KEYWORD}\s+)*"
    rf"{TYPE}{VARARG}?\s+{NAME}(?:\s*=[^,]*)?"
)

ARGUMENTS = rf"(?:{ARGUMENT}(?:\s*,\s*{ARGUMENT})*)?"

CATEGORY = r"(?:class|interface|enum|struct)"

INHERITANCE = rf"(?:\s*(?::|\bextends\b|\bimplements\b)\s*{TYPE}(?:\s*,\s*{TYPE})*)*"

ARGUMENT_PATTERN = re.compile(
    rf"^{ATTRIBUTE}{ANNOTATION}(?P<keywords>(?:{ARGUMENT_KEYWORD}\s+)*)"
    rf"(?P<type>{TYPE}{VARARG}?)\s+(?P<name>{NAME})(?:\s*=.*)?$"
)
