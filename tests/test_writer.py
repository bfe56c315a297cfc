"""Tests for writing diagrams with the external Graphviz program."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from deps_analyzer.graph import Diagram, RenderError, infer_format, render, write_diagram
from deps_analyzer.models import DependencyGraph


def _diagram() -> Diagram:
    graph = DependencyGraph(project_deps={":app": [":core"]}, lib_deps={":app": []})
    return render(graph, ":app")


def test_infer_format():
    assert infer_format(Path("out.svg")) == "svg"
    assert infer_format(Path("out.PNG")) == "png"
    assert infer_format(Path("out")) == "svg"
    assert infer_format(Path("out.svg"), "pdf") == "pdf"


def test_dot_output_written_without_graphviz(tmp_path):
    target = tmp_path / "nested" / "deps.dot"
    with patch("deps_analyzer.graph.writer.subprocess.run") as run:
        path = write_diagram(_diagram(), target)
    run.assert_not_called()
    assert path == target
    assert target.read_text().startswith("digraph Dependencies {")


def test_invokes_dot_with_source_on_stdin(tmp_path):
    target = tmp_path / "deps.svg"
    diagram = _diagram()
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")
    with patch("deps_analyzer.graph.writer.shutil.which", return_value="/usr/bin/dot"), \
         patch("deps_analyzer.graph.writer.subprocess.run", return_value=completed) as run:
        write_diagram(diagram, target)

    args, kwargs = run.call_args
    assert args[0] == ["/usr/bin/dot", "-Tsvg", "-o", str(target)]
    assert kwargs["input"] == diagram.source


def test_missing_program(tmp_path):
    with patch("deps_analyzer.graph.writer.shutil.which", return_value=None):
        with pytest.raises(RenderError, match="not found"):
            write_diagram(_diagram(), tmp_path / "deps.svg")


def test_non_zero_exit(tmp_path):
    failed = subprocess.CompletedProcess(args=[], returncode=1, stdout="", stderr="syntax error")
    with patch("deps_analyzer.graph.writer.shutil.which", return_value="/usr/bin/dot"), \
         patch("deps_analyzer.graph.writer.subprocess.run", return_value=failed):
        with pytest.raises(RenderError, match="syntax error"):
            write_diagram(_diagram(), tmp_path / "deps.png")


def test_os_error_is_render_error(tmp_path):
    with patch("deps_analyzer.graph.writer.shutil.which", return_value="/usr/bin/dot"), \
         patch("deps_analyzer.graph.writer.subprocess.run", side_effect=PermissionError("denied")):
        with pytest.raises(RenderError, match="denied"):
            write_diagram(_diagram(), tmp_path / "deps.svg")
