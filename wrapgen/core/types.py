"""
Type registry for wrapper generation.

Maps source-language type names to the validation checks a generated
wrapper performs before building its invocation descriptor.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union


class CheckKind(Enum):
    """Kinds of predicates a generated guard clause can test."""

    TYPE_OF = "type_of"  # primitive or shape check
    ONE_OF = "one_of"  # membership in a fixed literal set


@dataclass(frozen=True)
class Check:
    """
    A single, language-neutral predicate.

    For ``TYPE_OF`` checks ``expected`` names the runtime kind
    (``number``, ``string``, ``boolean``, ``object``) and ``selector``
    optionally names the field of the argument being tested. For
    ``ONE_OF`` checks ``options`` holds the allowed literals.
    """

    kind: CheckKind
    expected: str = ""
    selector: Optional[str] = None
    options: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Single:
    """Constraint made of one check."""

    check: Check


@dataclass(frozen=True)
class Sequence:
    """Constraint made of ordered checks that must all hold."""

    checks: Tuple[Check, ...]


Constraint = Union[Single, Sequence]


def type_check(expected: str, selector: Optional[str] = None) -> Check:
    """Build a primitive-type check, optionally on a field of the argument."""
    return Check(kind=CheckKind.TYPE_OF, expected=expected, selector=selector)


def one_of_check(options: Tuple[str, ...]) -> Check:
    """Build an enumerated-value check."""
    return Check(kind=CheckKind.ONE_OF, options=tuple(options))


def expand_constraint(constraint: Constraint) -> Tuple[Check, ...]:
    """Resolve a constraint into its ordered checks."""
    if isinstance(constraint, Single):
        return (constraint.check,)
    if isinstance(constraint, Sequence):
        return constraint.checks
    raise TypeError(f"Not a constraint: {constraint!r}")


IS_NUMBER = Single(type_check("number"))
IS_STRING = Single(type_check("string"))
IS_BOOLEAN = Single(type_check("boolean"))
IS_POINT = Sequence(
    (
        type_check("object"),
        type_check("number", selector="x"),
        type_check("number", selector="y"),
    )
)

# Declared types that validate as another type
TYPE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "NSUInteger": "NSInteger",
        "NSString *": "NSString",
    }
)

# Literal sets of the enumerations the bridge understands
ENUMERATIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "GREYDirection": ("left", "right", "up", "down"),
        "GREYContentEdge": ("left", "right", "top", "bottom"),
        "GREYPinchDirection": ("outward", "inward"),
    }
)

TYPE_CONSTRAINTS: Mapping[str, Constraint] = MappingProxyType(
    {
        "NSInteger": IS_NUMBER,
        "CGFloat": IS_NUMBER,
        "CGPoint": IS_POINT,
        "CFTimeInterval": IS_NUMBER,
        "double": IS_NUMBER,
        "float": IS_NUMBER,
        "NSString": IS_STRING,
        "BOOL": IS_BOOLEAN,
        "NSDate *": IS_NUMBER,
        **{name: Single(one_of_check(options)) for name, options in ENUMERATIONS.items()},
    }
)


def canonicalize_type(type_name: str) -> str:
    """Resolve a declared type through the alias table."""
    return TYPE_ALIASES.get(type_name, type_name)


def lookup_constraint(canonical_type: str) -> Optional[Constraint]:
    """
    Look up the constraint for a canonical type.

    Returns:
        The registered constraint, or None when the type is not registered
    """
    return TYPE_CONSTRAINTS.get(canonical_type)
