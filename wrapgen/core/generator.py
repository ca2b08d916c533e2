"""
Base generator interface for all code generation targets.

Defines the contract that all target language generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..logging_config import get_logger
from .config import GeneratorConfig
from .errors import GeneratorError
from .naming import NamingCase
from .synthesis import ClassSynthesizer, GeneratedModule, MethodSynthesizer
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'javascript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.js')."""
        pass

    @property
    @abstractmethod
    def helpers_file_name(self) -> str:
        """Return the file name of the bundled global helper functions."""
        pass

    @property
    @abstractmethod
    def export_marker(self) -> str:
        """Return the text that starts the helper resource's export statement."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    def create_synthesizer(self) -> ClassSynthesizer:
        """Create a class synthesizer honouring the configured method case."""
        try:
            method_case = NamingCase(self.config.method_case)
        except ValueError as e:
            raise GeneratorError(f"Invalid method_case: {self.config.method_case}") from e
        return ClassSynthesizer(MethodSynthesizer(method_case))

    @abstractmethod
    def generate(self, module: GeneratedModule) -> str:
        """
        Render the class definition and export of a module.

        Args:
            module: Synthesized module

        Returns:
            Generated code as a string
        """
        pass

    def render_preamble(self) -> str:
        """Render the static comment marking a file as generated."""
        return self.render_template(
            f"preamble{self.file_extension}.j2",
            {"readme_reference": self.config.readme_reference},
        )

    def get_helpers_path(self) -> Path:
        """Path of the global helper functions resource."""
        if self.config.helpers_file:
            return Path(self.config.helpers_file)

        template_dir = self.get_template_directory()
        if template_dir is None:
            raise GeneratorError(f"No helper functions resource for {self.language_name}")
        return template_dir.parent / self.helpers_file_name

    def load_helpers(self) -> str:
        """
        Read the helper resource, up to its own export statement.

        Raises:
            GeneratorError: If the resource cannot be read
        """
        path = self.get_helpers_path()
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as e:
            raise GeneratorError(f"Cannot read helper functions from {path}: {e}") from e

        marker_at = source.find(self.export_marker)
        if marker_at == -1:
            logger.warning("No export statement in %s, including whole file", path)
            return source
        return source[:marker_at]

    def build_file(self, module: GeneratedModule) -> str:
        """Assemble preamble, helper functions and generated module."""
        parts = [self.render_preamble()]
        if self.config.include_helpers:
            parts.append(self.load_helpers())
        parts.append(self.format_code(self.generate(module)))

        code = "\n".join(parts)
        if self.config.line_ending != "\n":
            code = code.replace("\n", self.config.line_ending)
        return code

    def validate_module(self, module: GeneratedModule) -> List[str]:
        """
        Validate a synthesized module for issues worth reporting.

        Args:
            module: Module to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = list(module.warnings)

        if not module.methods:
            warnings.append(f"Class '{module.class_name}' has no methods")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply basic formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Optional[Exception] = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, module: GeneratedModule) -> GenerationResult:
    """
    Generate a complete file using the specified generator with error handling.

    Args:
        generator: Code generator instance
        module: Synthesized module

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_module(module)
        code = generator.build_file(module)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "class_name": module.class_name,
            "method_count": len(module.methods),
            "unchecked_arguments": sum(len(m.unchecked) for m in module.methods),
        }

        return GenerationResult(code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed for %s: %s", module.class_name, e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
