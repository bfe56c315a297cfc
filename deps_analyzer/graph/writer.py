"""Write a diagram to disk, converting it with the Graphviz `dot` program when needed."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from deps_analyzer.graph.diagram import Diagram
from deps_analyzer.graph.errors import RenderError

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "svg"
# Formats written as DOT text without calling Graphviz
_SOURCE_FORMATS = {"dot", "gv"}


def infer_format(output_path: Path, output_format: str | None = None) -> str:
    if output_format:
        return output_format.lower()
    suffix = output_path.suffix.lstrip(".").lower()
    return suffix or DEFAULT_FORMAT


def write_diagram(
    diagram: Diagram,
    output_path: Path,
    output_format: str | None = None,
    executable: str = "dot",
) -> Path:
    """Write ``diagram`` to ``output_path`` and return the path."""
    fmt = infer_format(output_path, output_format)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if fmt in _SOURCE_FORMATS:
        output_path.write_text(diagram.source, encoding="utf-8")
        return output_path

    program = shutil.which(executable)
    if program is None:
        raise RenderError(
            f"Graphviz '{executable}' not found on PATH. "
            f"Install graphviz or write a .dot file instead."
        )

    cmd = [program, f"-T{fmt}", "-o", str(output_path)]
    logger.debug("Running %s", " ".join(cmd))
    try:
        proc = subprocess.run(
            cmd,
            input=diagram.source,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise RenderError(f"Failed to run {executable}: {e}") from e

    if proc.returncode != 0:
        stderr = proc.stderr.strip()
        raise RenderError(
            f"{executable} exited with status {proc.returncode}" + (f": {stderr}" if stderr else "")
        )
    return output_path
