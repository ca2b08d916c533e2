"""Objective-C header parsing.

Reads the ``@interface`` block of a header and produces the interface
description dictionary consumed by
:func:`wrapgen.core.interface.convert_parser_output`.
"""

import re
from typing import Any

from ..core.interface import InterfaceError
from ..logging_config import get_logger

logger = get_logger(__name__)


class InterfaceParseError(InterfaceError):
    """Raised when header text does not contain a usable interface."""

    pass


class ObjCHeaderParser:
    """Parse method declarations, argument types and doc comments of a header.

    Only the first ``@interface ... @end`` block is read. Supported forms:
        - ``- (void)tap;`` instance methods, ``+ (id)action;`` class methods
        - multi-part selectors ``- (id)swipeWithDirection:(GREYDirection)d speed:(CGFloat)s;``
        - ``/** ... */``, ``/* ... */`` and runs of ``//`` comments directly above a method
    """

    INTERFACE_PATTERN = re.compile(
        r"@interface\s+(?P<name>[A-Za-z_]\w*)(?P<body>.*?)^\s*@end\b",
        re.DOTALL | re.MULTILINE,
    )
    TOKEN_PATTERN = re.compile(
        r"(?P<block>/\*.*?\*/)"
        r"|(?P<line>//[^\n]*)"
        r"|(?P<method>^[ \t]*(?P<kind>[-+])\s*\((?P<returns>[^)]*)\)(?P<selector>[^;{]*);)",
        re.DOTALL | re.MULTILINE,
    )
    SELECTOR_PART_PATTERN = re.compile(
        r"(?P<label>[A-Za-z_]\w*)?\s*:\s*\((?P<type>[^)]*)\)\s*(?P<name>[A-Za-z_]\w*)"
    )
    BARE_SELECTOR_PATTERN = re.compile(r"^\s*(?P<label>[A-Za-z_]\w*)")
    QUALIFIERS = re.compile(
        r"\b(?:nullable|nonnull|null_unspecified|_Nullable|_Nonnull|_Null_unspecified|__kindof)\b"
    )

    @classmethod
    def parse(cls, source: str) -> dict[str, Any]:
        """Parse header text into an interface description dictionary.

        Args:
            source: Objective-C header source text.

        Returns:
            Dictionary with ``name`` and ``methods`` keys.

        Raises:
            InterfaceParseError: If no complete ``@interface`` block is found.
        """
        match = cls.INTERFACE_PATTERN.search(source)
        if not match:
            raise InterfaceParseError("No @interface ... @end block found")

        name = match.group("name")
        methods = cls._parse_body(match.group("body"))
        logger.debug("Parsed interface %s with %d methods", name, len(methods))
        return {"name": name, "methods": methods}

    @classmethod
    def _parse_body(cls, body: str) -> list[dict[str, Any]]:
        methods = []
        comments: list[str] = []
        last_end = 0
        after_method = False

        for token in cls.TOKEN_PATTERN.finditer(body):
            gap = body[last_end:token.start()]
            # Comments only attach when nothing but whitespace separates them
            if gap.strip():
                comments = []
            # A comment on the same line as a declaration belongs to that declaration
            trailing = after_method and "\n" not in gap
            after_method = False
            last_end = token.end()

            if trailing and not token.group("method"):
                continue
            if token.group("block"):
                comments = [cls._clean_block_comment(token.group("block"))]
            elif token.group("line"):
                comments.append(token.group("line")[2:].strip())
            else:
                method = cls._parse_method(token)
                if method is not None:
                    method["comment"] = "\n".join(comments).strip() or None
                    methods.append(method)
                comments = []
                after_method = True

        return methods

    @classmethod
    def _parse_method(cls, token: re.Match) -> dict[str, Any] | None:
        selector_text = token.group("selector")
        parts = list(cls.SELECTOR_PART_PATTERN.finditer(selector_text))

        if parts:
            labels = [part.group("label") or "" for part in parts]
            name = "".join(f"{label}:" for label in labels)
            args = [
                {"name": part.group("name"), "type": cls.normalize_type(part.group("type"))}
                for part in parts
            ]
        else:
            bare = cls.BARE_SELECTOR_PATTERN.match(selector_text)
            if not bare:
                logger.warning("Skipping unreadable declaration: %s", token.group("method").strip())
                return None
            name = bare.group("label")
            args = []

        return {
            "name": name,
            "args": args,
            "returnType": cls.normalize_type(token.group("returns")),
            "static": token.group("kind") == "+",
        }

    @classmethod
    def normalize_type(cls, type_text: str) -> str:
        """Normalize a declared type: ``NSString*`` becomes ``NSString *``."""
        cleaned = cls.QUALIFIERS.sub("", type_text)
        cleaned = re.sub(r"\s*\*", " *", cleaned)
        cleaned = re.sub(r"\*\s+\*", "**", cleaned)
        return " ".join(cleaned.split())

    @staticmethod
    def _clean_block_comment(text: str) -> str:
        inner = text[2:-2]
        if inner.startswith("*"):
            inner = inner[1:]

        lines = []
        for line in inner.split("\n"):
            line = line.strip()
            if line.startswith("*"):
                line = line[1:].strip()
            lines.append(line)
        return "\n".join(lines).strip()


def parse_objc_header(source: str) -> dict[str, Any]:
    """Parse Objective-C header text. See :class:`ObjCHeaderParser`."""
    return ObjCHeaderParser.parse(source)
