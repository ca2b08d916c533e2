"""Utility functions for loading interface descriptions.

This module provides functions for reading interface descriptions from
Objective-C headers or pre-parsed JSON files with proper error handling.
"""

import json
from pathlib import Path
from typing import Any

from .core.interface import InterfaceDescription, convert_parser_output
from .logging_config import get_logger
from .parsers import parse_objc_header

logger = get_logger(__name__)

JSON_SUFFIXES = {".json"}


class InterfaceLoadError(Exception):
    """Custom exception for interface loading errors."""

    pass


def read_source(file_path: str | Path) -> str:
    """Read an input file as UTF-8 text.

    Args:
        file_path: Path to the input file.

    Returns:
        File contents.

    Raises:
        InterfaceLoadError: If the file doesn't exist or cannot be read.
    """
    file_path = Path(file_path)
    logger.debug(f"Reading interface source: {file_path}")

    if not file_path.is_file():
        logger.error(f"File not found: {file_path}")
        raise InterfaceLoadError(f"File not found: {file_path}")

    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise InterfaceLoadError(f"Error reading file {file_path}: {e}") from e


def parse_interface_source(source: str, suffix: str = ".h") -> dict[str, Any]:
    """Parse interface source text into the parser dictionary shape.

    Args:
        source: Source text.
        suffix: File suffix selecting the parser (``.json`` or a header suffix).

    Returns:
        Interface description dictionary.

    Raises:
        InterfaceLoadError: If JSON input is invalid.
        InterfaceParseError: If header input has no interface.
    """
    if suffix.lower() in JSON_SUFFIXES:
        try:
            return json.loads(source)
        except json.JSONDecodeError as e:
            raise InterfaceLoadError(f"Invalid JSON interface description: {e}") from e

    return parse_objc_header(source)


def load_interface_file(file_path: str | Path) -> InterfaceDescription:
    """Load an interface description from a header or JSON file.

    Args:
        file_path: Path to an Objective-C header or a JSON interface description.

    Returns:
        Parsed InterfaceDescription.

    Raises:
        InterfaceLoadError: If the file cannot be read or holds invalid JSON.
        InterfaceError: If the description is malformed.
    """
    file_path = Path(file_path)
    source = read_source(file_path)
    parsed = parse_interface_source(source, file_path.suffix)
    interface = convert_parser_output(parsed)
    logger.info(f"Loaded interface {interface.name} from {file_path}")
    return interface


def load_manifest(manifest_path: str | Path) -> dict[str, str]:
    """Load an input-to-output path mapping from a JSON manifest.

    Relative paths are resolved against the manifest's directory.

    Args:
        manifest_path: Path to the manifest file.

    Returns:
        Mapping of input path to output path, in manifest order.

    Raises:
        InterfaceLoadError: If the manifest is missing, invalid, or not a string mapping.
    """
    manifest_path = Path(manifest_path)
    source = read_source(manifest_path)

    try:
        data = json.loads(source)
    except json.JSONDecodeError as e:
        raise InterfaceLoadError(f"Invalid JSON in manifest {manifest_path}: {e}") from e

    if not isinstance(data, dict) or not all(
        isinstance(key, str) and isinstance(value, str) for key, value in data.items()
    ):
        raise InterfaceLoadError(
            f"Manifest {manifest_path} must map input paths to output paths"
        )

    base = manifest_path.parent
    return {str(base / key): str(base / value) for key, value in data.items()}
