"""
Interface parsers.

Turn interface-description source text into the dictionary shape accepted
by :func:`wrapgen.core.interface.convert_parser_output`.
"""

from .objc import InterfaceParseError, ObjCHeaderParser, parse_objc_header

__all__ = [
    "InterfaceParseError",
    "ObjCHeaderParser",
    "parse_objc_header",
]
