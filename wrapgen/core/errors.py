"""
Exception hierarchy for wrapper generation.
"""

from typing import Optional


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class NameCollisionError(GeneratorError):
    """Raised when two source methods map to the same wrapper name in one class."""

    def __init__(self, class_name: str, wrapper_name: str, first: str, second: str):
        super().__init__(
            f"Methods '{first}' and '{second}' of {class_name} both map to "
            f"wrapper name '{wrapper_name}'"
        )
        self.class_name = class_name
        self.wrapper_name = wrapper_name
        self.first = first
        self.second = second


class EmissionError(GeneratorError):
    """Raised when an (input, output) file pair cannot be generated."""

    def __init__(self, input_path: str, output_path: str, cause: Optional[Exception] = None):
        message = f"Failed to generate {output_path} from {input_path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
        self.input_path = input_path
        self.output_path = output_path
        self.cause = cause
