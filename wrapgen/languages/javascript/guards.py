"""
JavaScript guard clauses.

Maps language-neutral checks to JavaScript conditions and error messages.
"""

from dataclasses import dataclass

from ...core.synthesis import ValidationCheck
from ...core.types import CheckKind
from ...core.templates import quote_literal


@dataclass(frozen=True)
class Guard:
    """A rendered guard clause: throw when ``condition`` holds."""

    condition: str
    message: str


def _article(word: str) -> str:
    return "an" if word[:1] in "aeiou" else "a"


def render_guard(check: ValidationCheck, identifier: str) -> Guard:
    """
    Render one validation check against a parameter identifier.

    Args:
        check: Check bound to a source argument
        identifier: JavaScript parameter name holding the value

    Returns:
        Guard with the failing condition and the error message expression
    """
    spec = check.check

    if spec.kind == CheckKind.ONE_OF:
        options = ", ".join(quote_literal(option) for option in spec.options)
        label = ", ".join(spec.options)
        return Guard(
            condition=f"![{options}].includes({identifier})",
            message=(
                f"{quote_literal(f'{check.argument} should be one of [{label}], but got ')}"
                f" + {identifier}"
            ),
        )

    subject = identifier
    label = check.argument
    if spec.selector:
        subject = f"{identifier}.{spec.selector}"
        label = f"{check.argument}.{spec.selector}"

    condition = f'typeof {subject} !== "{spec.expected}"'
    if spec.expected == "object":
        condition = f"{condition} || {subject} === null"

    expectation = f"{label} should be {_article(spec.expected)} {spec.expected}, but got "
    return Guard(
        condition=condition,
        message=f'{quote_literal(expectation)} + {subject} + " (" + typeof {subject} + ")"',
    )
