"""
JavaScript code generator implementation.

Renders synthesized wrapper modules as CommonJS classes whose methods
return invocation descriptors.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.naming import create_javascript_sanitizer
from ...core.synthesis import GeneratedMethod, GeneratedModule
from .guards import render_guard


class JavaScriptGenerator(CodeGenerator):
    """Code generator for JavaScript wrapper classes."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize JavaScript generator with configuration."""
        super().__init__(config)
        self.sanitizer = create_javascript_sanitizer()

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "javascript"

    @property
    def file_extension(self) -> str:
        """Return JavaScript file extension."""
        return ".js"

    @property
    def helpers_file_name(self) -> str:
        return "global-functions.js"

    @property
    def export_marker(self) -> str:
        return "module.exports"

    def get_template_directory(self) -> Path:
        """Return the JavaScript templates directory."""
        return Path(__file__).parent / "templates"

    def generate(self, module: GeneratedModule) -> str:
        """Generate the class definition and its export."""
        methods = [self._render_method(method).rstrip("\n") for method in module.methods]

        context = {
            "class_name": module.class_name,
            "methods": methods,
        }
        return self.render_template("class.js.j2", context)

    def _render_method(self, method: GeneratedMethod) -> str:
        """Render one wrapper method."""
        return self.render_template("method.js.j2", self._method_context(method))

    def _method_context(self, method: GeneratedMethod) -> Dict[str, Any]:
        """Build template context for one method."""
        identifiers = {name: self.sanitizer.sanitize_name(name) for name in method.params}

        guards = [
            render_guard(check, identifiers[check.argument]) for check in method.checks
        ]

        args = []
        for arg in method.descriptor_args:
            value = identifiers[arg.argument]
            if arg.sanitizer:
                value = f"{arg.sanitizer}({value})"
            args.append({"type": arg.type, "value": value})

        add_comments = self.config.add_comments and method.comment_style is not None
        return {
            "i": self.config.indent,
            "name": method.name,
            "params": [identifiers[name] for name in method.params],
            "is_static": method.is_static,
            "guards": guards,
            "target": method.target,
            "method_name": method.source_name,
            "args": args,
            "comment_style": method.comment_style if add_comments else None,
            "comment_lines": self._comment_lines(method.comment) if add_comments else [],
        }

    def _comment_lines(self, comment: str) -> list:
        """Split a comment into lines that cannot close the surrounding comment."""
        return comment.replace("*/", "*\\/").split("\n")


def create_javascript_generator(config: Optional[Dict[str, Any]] = None) -> JavaScriptGenerator:
    """Create a JavaScript generator with default configuration."""
    return JavaScriptGenerator(load_config("javascript", custom_config=config))
