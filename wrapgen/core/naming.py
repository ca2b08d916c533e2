"""
Naming utilities for safe code generation.

Handles case conversions, keyword conflicts and the method-name
transform from source selectors to wrapper identifiers.
"""

import re
from enum import Enum
from typing import Dict, Optional, Set

from .errors import NameCollisionError


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName


def to_snake_case(name: str) -> str:
    """Convert to snake_case."""
    name = name.replace("-", "_")

    # Split acronym runs from the following word: URLString -> URL_String
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    # Insert underscore before uppercase letters
    name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)

    name = name.lower()
    name = re.sub(r"_+", "_", name)

    return name.strip("_")


def to_camel_case(name: str) -> str:
    """Convert to camelCase."""
    parts = to_snake_case(name).split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


def to_pascal_case(name: str) -> str:
    """Convert to PascalCase."""
    return "".join(part.capitalize() for part in to_snake_case(name).split("_") if part)


def join_selector(selector: str) -> str:
    """
    Collapse an Objective-C selector into one camel-case identifier.

    ``tapAtPoint:withCount:`` becomes ``tapAtPointWithCount``.
    """
    parts = [part for part in selector.split(":") if part]
    if not parts:
        return selector
    return parts[0] + "".join(part[0].upper() + part[1:] for part in parts[1:])


def to_wrapper_name(source_name: str, case: NamingCase = NamingCase.SNAKE_CASE) -> str:
    """
    Convert a source method name to the wrapper method name.

    Args:
        source_name: Method name or selector as declared in the interface
        case: Target naming convention

    Returns:
        Wrapper identifier, e.g. ``doWithBar`` -> ``do_with_bar``
    """
    joined = join_selector(source_name)
    if case == NamingCase.SNAKE_CASE:
        return to_snake_case(joined)
    if case == NamingCase.CAMEL_CASE:
        return to_camel_case(joined)
    return to_pascal_case(joined)


class MethodNameRegistry:
    """Tracks wrapper names of one class and rejects collisions."""

    def __init__(self, class_name: str):
        self.class_name = class_name
        self._owners: Dict[str, str] = {}

    def reserve(self, wrapper_name: str, source_name: str) -> str:
        """
        Claim a wrapper name for a source method.

        Raises:
            NameCollisionError: If another source method already owns the name
        """
        owner = self._owners.get(wrapper_name)
        if owner is not None:
            raise NameCollisionError(self.class_name, wrapper_name, owner, source_name)
        self._owners[wrapper_name] = source_name
        return wrapper_name


class NameSanitizer:
    """Escapes identifiers that clash with a target language's keywords."""

    def __init__(self, reserved_words: Optional[Set[str]] = None, suffix: str = "_"):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            suffix: Suffix appended to names that clash
        """
        self.reserved_words = reserved_words or set()
        self.suffix = suffix

    def sanitize_name(self, name: str) -> str:
        """Return ``name``, suffixed when it is a reserved word."""
        if name in self.reserved_words:
            return f"{name}{self.suffix}"
        return name


JAVASCRIPT_RESERVED_WORDS = {
    "arguments", "await", "break", "case", "catch", "class", "const",
    "continue", "debugger", "default", "delete", "do", "else", "enum", "eval",
    "export", "extends", "false", "finally", "for", "function", "if",
    "implements", "import", "in", "instanceof", "interface", "let", "new",
    "null", "package", "private", "protected", "public", "return", "static",
    "super", "switch", "this", "throw", "true", "try", "typeof", "var",
    "void", "while", "with", "yield",
}

PYTHON_RESERVED_WORDS = {
    "and", "as", "assert", "async", "await", "break", "class", "continue",
    "def", "del", "elif", "else", "except", "finally", "for", "from",
    "global", "if", "import", "in", "is", "lambda", "nonlocal", "not", "or",
    "pass", "raise", "return", "try", "while", "with", "yield", "True",
    "False", "None",
}

# Names the generated Python guards call; parameters must not shadow them
PYTHON_GUARD_BUILTINS = {
    "isinstance", "bool", "int", "float", "str", "dict", "type",
    "TypeError", "ValueError",
}


def create_javascript_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for JavaScript parameters."""
    return NameSanitizer(JAVASCRIPT_RESERVED_WORDS)


def create_python_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Python."""
    return NameSanitizer(PYTHON_RESERVED_WORDS)
