"""
Target language generators.

Each subpackage renders synthesized wrapper modules for one language.
"""

from .javascript import JavaScriptGenerator, create_javascript_generator
from .python import PythonGenerator, create_python_generator

__all__ = [
    "JavaScriptGenerator",
    "create_javascript_generator",
    "PythonGenerator",
    "create_python_generator",
]
