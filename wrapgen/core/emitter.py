"""
Emission driver.

Runs the full pipeline for each (input, output) file pair: load and parse
the interface, synthesize the wrapper module, render it with a target
generator and write the result.
"""

import os
import stat
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Union

from ..logging_config import get_logger
from .errors import EmissionError
from .generator import CodeGenerator, GenerationResult, generate_code
from .interface import InterfaceDescription

logger = get_logger(__name__)

PathLike = Union[str, Path]


@dataclass
class EmissionResult:
    """Outcome of one generated file pair."""

    input_path: Path
    output_path: Path
    class_name: str
    method_count: int
    warnings: List[str] = field(default_factory=list)


def write_atomic(path: PathLike, content: str) -> None:
    """
    Write text so that ``path`` either keeps its old content or gets all of ``content``.

    The text goes to a temporary file in the target directory first and is
    then moved into place. The file keeps the mode of the file it replaces; a new
    file gets the default mode for the current umask.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.chmod(tmp_name, _target_mode(path))
        os.replace(tmp_name, path)
    except BaseException:
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        pass

    # os.umask can only be read by setting it
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class EmissionDriver:
    """Generates one output file per input file, sequentially."""

    def __init__(
        self,
        generator: CodeGenerator,
        loader: Optional[Callable[[PathLike], InterfaceDescription]] = None,
    ):
        """
        Initialize the driver.

        Args:
            generator: Target generator used for every file pair
            loader: Callable returning the InterfaceDescription of an input path
        """
        if loader is None:
            from ..utils import load_interface_file

            loader = load_interface_file

        self.generator = generator
        self.loader = loader

    def render(self, interface: InterfaceDescription) -> GenerationResult:
        """
        Synthesize and render one interface in memory.

        Raises:
            NameCollisionError: If two methods map to the same wrapper name
        """
        module = self.generator.create_synthesizer().synthesize(interface)
        result = generate_code(self.generator, module)

        for warning in result.warnings:
            logger.info(warning)
        return result

    def emit(self, input_path: PathLike, output_path: PathLike) -> EmissionResult:
        """
        Generate a single output file.

        Raises:
            EmissionError: If any step fails; no output file is written then
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        try:
            interface = self.loader(input_path)
            result = self.render(interface)
            if not result.success:
                raise result.exception or RuntimeError(result.error_message)
            write_atomic(output_path, result.code)
        except Exception as e:
            logger.error("Generation failed for %s: %s", input_path, e)
            raise EmissionError(str(input_path), str(output_path), e) from e

        logger.info("Wrote %s (%d methods)", output_path, result.metadata["method_count"])
        return EmissionResult(
            input_path=input_path,
            output_path=output_path,
            class_name=interface.name,
            method_count=result.metadata["method_count"],
            warnings=list(result.warnings),
        )

    def run(self, files: Mapping[PathLike, PathLike]) -> List[EmissionResult]:
        """
        Generate every (input, output) pair in mapping order.

        Stops at the first failing pair by raising its EmissionError.
        """
        results = []
        for input_path, output_path in files.items():
            results.append(self.emit(input_path, output_path))
        return results


def emit_files(
    files: Mapping[PathLike, PathLike],
    generator: CodeGenerator,
) -> List[EmissionResult]:
    """Convenience wrapper around :class:`EmissionDriver`."""
    return EmissionDriver(generator).run(files)
