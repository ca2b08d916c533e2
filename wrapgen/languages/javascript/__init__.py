"""
JavaScript code generator module.

Generates CommonJS wrapper classes whose methods return invocation descriptors.
"""

from .generator import JavaScriptGenerator, create_javascript_generator
from .guards import Guard, render_guard

__all__ = [
    "JavaScriptGenerator",
    "create_javascript_generator",
    "Guard",
    "render_guard",
]
