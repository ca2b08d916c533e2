"""
Core code generation components.

Provides the type and sanitizer registries, synthesis of wrapper methods,
base classes used by all target generators and the emission driver.
"""

from .errors import EmissionError, GeneratorError, NameCollisionError
from .interface import (
    ArgumentDescription,
    InterfaceDescription,
    InterfaceError,
    MethodDescription,
    convert_parser_output,
)
from .types import (
    Check,
    CheckKind,
    Constraint,
    Sequence,
    Single,
    canonicalize_type,
    expand_constraint,
    lookup_constraint,
)
from .sanitizers import lookup_sanitizer
from .naming import MethodNameRegistry, NameSanitizer, NamingCase, to_wrapper_name
from .synthesis import ClassSynthesizer, GeneratedMethod, GeneratedModule, MethodSynthesizer
from .generator import CodeGenerator, GenerationResult, generate_code
from .emitter import EmissionDriver, EmissionResult, emit_files
from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Errors
    "GeneratorError",
    "NameCollisionError",
    "EmissionError",
    # Interface model
    "ArgumentDescription",
    "MethodDescription",
    "InterfaceDescription",
    "InterfaceError",
    "convert_parser_output",
    # Registries
    "Check",
    "CheckKind",
    "Constraint",
    "Single",
    "Sequence",
    "canonicalize_type",
    "expand_constraint",
    "lookup_constraint",
    "lookup_sanitizer",
    # Naming
    "MethodNameRegistry",
    "NameSanitizer",
    "NamingCase",
    "to_wrapper_name",
    # Synthesis
    "MethodSynthesizer",
    "ClassSynthesizer",
    "GeneratedMethod",
    "GeneratedModule",
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Emission
    "EmissionDriver",
    "EmissionResult",
    "emit_files",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
