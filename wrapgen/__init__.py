"""
wrapgen: wrapper code generation from interface descriptions.

Generates validated wrapper classes whose methods return invocation
descriptors for a native class.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .core.config import GeneratorConfig, load_config
from .core.emitter import EmissionDriver, EmissionResult
from .core.errors import EmissionError, GeneratorError, NameCollisionError
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.interface import InterfaceDescription, InterfaceError, convert_parser_output
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
)
from .utils import InterfaceLoadError, load_interface_file

__version__ = "0.1.0"

ConfigLike = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


def generate_from_interface(
    interface: Union[InterfaceDescription, Dict[str, Any]],
    language: str = "javascript",
    config: ConfigLike = None,
) -> GenerationResult:
    """
    Generate a wrapper file from an interface description.

    Args:
        interface: InterfaceDescription or parser output dictionary
        language: Target language name or alias
        config: Generator configuration object, dict or path

    Returns:
        GenerationResult with generated code

    Raises:
        NameCollisionError: If two methods map to the same wrapper name
    """
    if isinstance(interface, dict):
        interface = convert_parser_output(interface)

    generator = get_generator(language, config)
    return EmissionDriver(generator).render(interface)


def generate_files(
    files: Mapping[Union[str, Path], Union[str, Path]],
    language: str = "javascript",
    config: ConfigLike = None,
) -> List[EmissionResult]:
    """
    Generate one wrapper file per (input, output) pair.

    Raises:
        EmissionError: For the first pair that fails
    """
    return EmissionDriver(get_generator(language, config)).run(files)


def quick_generate(interface: Dict[str, Any], language: str = "javascript", **options) -> str:
    """
    Generate wrapper code from a parser output dictionary.

    Args:
        interface: Interface description dictionary
        language: Target language
        **options: Generator options

    Returns:
        Generated code string
    """
    result = generate_from_interface(interface, language, options or None)

    if result.success:
        return result.code
    else:
        raise GeneratorError(f"Code generation failed: {result.error_message}")


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "NameCollisionError",
    "EmissionError",
    "EmissionDriver",
    "EmissionResult",
    "InterfaceDescription",
    "InterfaceError",
    "InterfaceLoadError",
    "convert_parser_output",
    "generate_code",
    "generate_from_interface",
    "generate_files",
    "quick_generate",
    "get_generator",
    "get_language_info",
    "list_all_language_info",
    "list_supported_languages",
    "load_config",
    "load_interface_file",
]
