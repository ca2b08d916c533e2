"""
Python guard clauses.

Maps language-neutral checks to Python conditions and the exception
raised when a condition holds.
"""

from dataclasses import dataclass

from ...core.synthesis import ValidationCheck
from ...core.templates import quote_literal
from ...core.types import CheckKind

# Runtime kind -> expression testing that ``{value}`` is NOT of that kind
_TYPE_CONDITIONS = {
    "number": "isinstance({value}, bool) or not isinstance({value}, (int, float))",
    "string": "not isinstance({value}, str)",
    "boolean": "not isinstance({value}, bool)",
    "object": "not isinstance({value}, dict)",
}


@dataclass(frozen=True)
class Guard:
    """A rendered guard clause: raise ``exception`` when ``condition`` holds."""

    condition: str
    exception: str
    message: str


def render_guard(check: ValidationCheck, identifier: str) -> Guard:
    """
    Render one validation check against a parameter identifier.

    Args:
        check: Check bound to a source argument
        identifier: Python parameter name holding the value

    Returns:
        Guard with the failing condition and the exception to raise
    """
    spec = check.check

    if spec.kind == CheckKind.ONE_OF:
        options = ", ".join(quote_literal(option) for option in spec.options)
        if len(spec.options) == 1:
            options += ","
        label = ", ".join(spec.options).replace("%", "%%")
        template = quote_literal(f"{check.argument} should be one of [{label}], but got %r")
        return Guard(
            condition=f"{identifier} not in ({options})",
            exception="ValueError",
            message=f"{template} % ({identifier},)",
        )

    if spec.expected not in _TYPE_CONDITIONS:
        raise ValueError(f"Unsupported runtime kind: {spec.expected}")

    subject = identifier
    label = check.argument
    if spec.selector:
        subject = f"{identifier}.get({quote_literal(spec.selector)})"
        label = f"{check.argument}.{spec.selector}"

    article = "an" if spec.expected[:1] in "aeiou" else "a"
    template = quote_literal(f"{label} should be {article} {spec.expected}, but got %r (%s)")
    return Guard(
        condition=_TYPE_CONDITIONS[spec.expected].format(value=subject),
        exception="TypeError",
        message=f"{template} % ({subject}, type({subject}).__name__)",
    )
