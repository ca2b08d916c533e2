"""
Core interface representation for code generation.

Converts interface parser output into a normalized internal format
that the synthesizers can work with consistently.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


class InterfaceError(Exception):
    """Exception raised for malformed interface descriptions."""

    pass


@dataclass(frozen=True)
class ArgumentDescription:
    """A single method argument: identifier-safe name and source type name."""

    name: str
    type: str


@dataclass(frozen=True)
class MethodDescription:
    """Represents one method declared by an interface."""

    name: str
    args: Tuple[ArgumentDescription, ...] = field(default_factory=tuple)
    return_type: str = "void"
    comment: Optional[str] = None
    is_static: bool = False

    @property
    def argument_names(self) -> Tuple[str, ...]:
        """Argument names in declaration order."""
        return tuple(arg.name for arg in self.args)


@dataclass(frozen=True)
class InterfaceDescription:
    """Represents a class and its methods, in declaration order."""

    name: str
    methods: Tuple[MethodDescription, ...] = field(default_factory=tuple)


def convert_parser_output(parser_result: Dict[str, Any]) -> InterfaceDescription:
    """
    Convert interface parser output to an InterfaceDescription.

    The parser output looks like this:

        {
          "name": "BasicName",
          "methods": [
            {
              "args": [{"type": "NSInteger", "name": "argOne"}],
              "comment": "This is the comment of basic method one",
              "name": "basicMethodOneWithArgOne:",
              "returnType": "NSInteger",
              "static": false
            }
          ]
        }

    Args:
        parser_result: Dictionary produced by an interface parser

    Returns:
        InterfaceDescription: Normalized interface representation

    Raises:
        InterfaceError: If required keys are missing or have the wrong shape
    """
    if not isinstance(parser_result, dict):
        raise InterfaceError(
            f"Interface description must be an object, got {type(parser_result).__name__}"
        )

    class_name = parser_result.get("name")
    if not isinstance(class_name, str) or not class_name:
        raise InterfaceError("Interface description has no class name")

    raw_methods = parser_result.get("methods", [])
    if not isinstance(raw_methods, list):
        raise InterfaceError(f"Methods of {class_name} must be a list")

    methods = tuple(_convert_method(class_name, raw) for raw in raw_methods)
    return InterfaceDescription(name=class_name, methods=methods)


def _convert_method(class_name: str, raw: Dict[str, Any]) -> MethodDescription:
    """Convert one parser method record."""
    if not isinstance(raw, dict) or not raw.get("name"):
        raise InterfaceError(f"Method without a name in {class_name}")

    args = []
    for raw_arg in raw.get("args") or []:
        if not isinstance(raw_arg, dict) or "name" not in raw_arg or "type" not in raw_arg:
            raise InterfaceError(
                f"Argument of {class_name}.{raw['name']} needs a name and a type"
            )
        args.append(ArgumentDescription(name=raw_arg["name"], type=raw_arg["type"]))

    return MethodDescription(
        name=raw["name"],
        args=tuple(args),
        return_type=raw.get("returnType") or "void",
        comment=raw.get("comment") or None,
        is_static=bool(raw.get("static", False)),
    )
