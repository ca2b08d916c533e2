"""
Python code generator module.

Generates Python wrapper classes whose methods return invocation descriptors.
"""

from .generator import PythonGenerator, create_python_generator
from .guards import Guard, render_guard

__all__ = [
    "PythonGenerator",
    "create_python_generator",
    "Guard",
    "render_guard",
]
