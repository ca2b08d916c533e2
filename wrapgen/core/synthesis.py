"""
Method and class synthesis.

Turns interface descriptions into a language-neutral description of the
wrapper module: per method, the guard clauses to emit and the invocation
descriptor to return. Target generators render this into source text.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..logging_config import get_logger
from .interface import ArgumentDescription, InterfaceDescription, MethodDescription
from .naming import MethodNameRegistry, NamingCase, to_wrapper_name
from .sanitizers import lookup_sanitizer
from .types import Check, canonicalize_type, expand_constraint, lookup_constraint

logger = get_logger(__name__)

DESCRIPTOR_TARGET_TYPE = "Class"


@dataclass(frozen=True)
class ValidationCheck:
    """A check bound to the argument it guards."""

    argument: str
    check: Check


@dataclass(frozen=True)
class DescriptorArgument:
    """One entry of the descriptor's ``args`` list."""

    type: str  # declared type, never the canonical one
    argument: str
    sanitizer: Optional[str] = None


@dataclass(frozen=True)
class UncheckedArgument:
    """An argument whose type has no registered constraint."""

    argument: str
    type: str


@dataclass(frozen=True)
class GeneratedMethod:
    """Everything a target needs to render one wrapper method."""

    name: str
    source_name: str
    class_name: str
    params: Tuple[str, ...]
    is_static: bool
    checks: Tuple[ValidationCheck, ...]
    descriptor_args: Tuple[DescriptorArgument, ...]
    return_type: str = "void"
    comment: Optional[str] = None
    unchecked: Tuple[UncheckedArgument, ...] = field(default_factory=tuple)

    @property
    def comment_style(self) -> Optional[str]:
        """``line`` for single-line comments, ``block`` for multi-line ones."""
        if not self.comment:
            return None
        return "block" if "\n" in self.comment else "line"

    @property
    def target(self) -> dict:
        """The descriptor's target record."""
        return {"type": DESCRIPTOR_TARGET_TYPE, "value": self.class_name}


@dataclass(frozen=True)
class GeneratedModule:
    """One class of wrapper methods plus its export."""

    class_name: str
    methods: Tuple[GeneratedMethod, ...]

    @property
    def warnings(self) -> List[str]:
        """Diagnostics for arguments generated without validation."""
        return [
            f"No type check for {self.class_name}.{method.source_name} "
            f"argument '{unchecked.argument}' of type '{unchecked.type}'"
            for method in self.methods
            for unchecked in method.unchecked
        ]


class MethodSynthesizer:
    """Builds the validated wrapper for a single method description."""

    def __init__(self, method_case: NamingCase = NamingCase.SNAKE_CASE):
        self.method_case = method_case

    def synthesize(self, class_name: str, method: MethodDescription) -> GeneratedMethod:
        """
        Synthesize one wrapper method.

        Args:
            class_name: Name of the class the method belongs to
            method: Method description from the interface

        Returns:
            GeneratedMethod with guard clauses in argument order and the
            descriptor returned at the end
        """
        checks: List[ValidationCheck] = []
        unchecked: List[UncheckedArgument] = []
        descriptor_args: List[DescriptorArgument] = []

        for arg in method.args:
            canonical = canonicalize_type(arg.type)

            arg_checks = self._create_checks(class_name, method, arg, canonical)
            if arg_checks is None:
                unchecked.append(UncheckedArgument(argument=arg.name, type=arg.type))
            else:
                checks.extend(arg_checks)

            descriptor_args.append(
                DescriptorArgument(
                    type=arg.type,
                    argument=arg.name,
                    sanitizer=lookup_sanitizer(canonical),
                )
            )

        returns = canonicalize_type(method.return_type)
        if returns != "void" and lookup_constraint(returns) is None:
            logger.info(
                "Could not find type check for %s.%s return type '%s'",
                class_name,
                method.name,
                method.return_type,
            )

        return GeneratedMethod(
            name=to_wrapper_name(method.name, self.method_case),
            source_name=method.name,
            class_name=class_name,
            params=method.argument_names,
            is_static=method.is_static,
            checks=tuple(checks),
            descriptor_args=tuple(descriptor_args),
            return_type=method.return_type,
            comment=method.comment,
            unchecked=tuple(unchecked),
        )

    def _create_checks(
        self,
        class_name: str,
        method: MethodDescription,
        arg: ArgumentDescription,
        canonical: str,
    ) -> Optional[List[ValidationCheck]]:
        """Bind the registered checks of a type to one argument."""
        constraint = lookup_constraint(canonical)
        if constraint is None:
            logger.info(
                "Could not find type check for %s.%s argument '%s' of type '%s'",
                class_name,
                method.name,
                arg.name,
                arg.type,
            )
            return None

        return [
            ValidationCheck(argument=arg.name, check=check)
            for check in expand_constraint(constraint)
        ]


class ClassSynthesizer:
    """Assembles every method of an interface into one generated module."""

    def __init__(self, method_synthesizer: Optional[MethodSynthesizer] = None):
        self.method_synthesizer = method_synthesizer or MethodSynthesizer()

    def synthesize(self, interface: InterfaceDescription) -> GeneratedModule:
        """
        Synthesize the wrapper module for an interface.

        Raises:
            NameCollisionError: If two methods map to the same wrapper name
        """
        names = MethodNameRegistry(interface.name)
        methods = []

        for method in interface.methods:
            generated = self.method_synthesizer.synthesize(interface.name, method)
            names.reserve(generated.name, method.name)
            methods.append(generated)

        logger.debug("Synthesized %d methods for %s", len(methods), interface.name)
        return GeneratedModule(class_name=interface.name, methods=tuple(methods))
