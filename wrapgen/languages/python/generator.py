"""
Python code generator implementation.

Renders synthesized wrapper modules as Python classes whose methods
return invocation descriptors.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.naming import (
    PYTHON_GUARD_BUILTINS,
    PYTHON_RESERVED_WORDS,
    NameSanitizer,
    create_python_sanitizer,
)
from ...core.synthesis import GeneratedMethod, GeneratedModule
from .guards import render_guard


class PythonGenerator(CodeGenerator):
    """Code generator for Python wrapper classes."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Python generator with configuration."""
        super().__init__(config)

        self.sanitizer = create_python_sanitizer()
        self.param_sanitizer = NameSanitizer(PYTHON_RESERVED_WORDS | PYTHON_GUARD_BUILTINS | {"self"})

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    @property
    def helpers_file_name(self) -> str:
        return "global_functions.py"

    @property
    def export_marker(self) -> str:
        return "__all__"

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def generate(self, module: GeneratedModule) -> str:
        """Generate the class definition and its export."""
        methods = [
            self.render_template("method.py.j2", self._method_context(method)).rstrip("\n")
            for method in module.methods
        ]

        context = {
            "i": self.config.indent,
            "class_name": module.class_name,
            "methods": methods,
        }
        return self.render_template("class.py.j2", context)

    def _method_context(self, method: GeneratedMethod) -> Dict[str, Any]:
        """Build template context for one method."""
        identifiers = {name: self.param_sanitizer.sanitize_name(name) for name in method.params}

        guards = [
            render_guard(check, identifiers[check.argument]) for check in method.checks
        ]

        args = []
        for arg in method.descriptor_args:
            value = identifiers[arg.argument]
            if arg.sanitizer:
                value = f"{arg.sanitizer}({value})"
            args.append({"type": arg.type, "value": value})

        params = [identifiers[name] for name in method.params]
        if not method.is_static:
            params.insert(0, "self")

        add_comments = self.config.add_comments and method.comment_style is not None
        return {
            "i": self.config.indent,
            "name": self.sanitizer.sanitize_name(method.name),
            "params": params,
            "is_static": method.is_static,
            "guards": guards,
            "target": method.target,
            "method_name": method.source_name,
            "args": args,
            "comment_style": method.comment_style if add_comments else None,
            "comment_lines": self._comment_lines(method.comment) if add_comments else [],
        }

    def _comment_lines(self, comment: str) -> list:
        """Split a comment into lines safe inside a docstring."""
        escaped = comment.replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
        return escaped.split("\n")


def create_python_generator(config: Optional[Dict[str, Any]] = None) -> PythonGenerator:
    """Create a Python generator with default configuration."""
    return PythonGenerator(load_config("python", custom_config=config))
