"""Diagram layer."""

from deps_analyzer.graph.diagram import Diagram, DiagramEdge, DiagramNode
from deps_analyzer.graph.errors import DiagramTooLargeError, RenderError
from deps_analyzer.graph.renderer import TreeRenderer, render
from deps_analyzer.graph.styles import DEFAULT_COLORS, ColorScheme, NodeColors
from deps_analyzer.graph.writer import infer_format, write_diagram

__all__ = [
    "ColorScheme",
    "DEFAULT_COLORS",
    "Diagram",
    "DiagramEdge",
    "DiagramNode",
    "DiagramTooLargeError",
    "NodeColors",
    "RenderError",
    "TreeRenderer",
    "infer_format",
    "render",
    "write_diagram",
]
