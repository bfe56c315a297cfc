"""Node and edge color schemes for rendered diagrams."""

from __future__ import annotations

from dataclasses import dataclass

from deps_analyzer.models import DependencyKind


@dataclass(frozen=True)
class NodeColors:
    fill: str
    text: str
    edge: str


@dataclass(frozen=True)
class ColorScheme:
    root: NodeColors
    project: NodeColors
    library: NodeColors

    def for_kind(self, kind: DependencyKind) -> NodeColors:
        return self.library if kind is DependencyKind.LIBRARY else self.project


DEFAULT_COLORS = ColorScheme(
    root=NodeColors(fill="#4CAF50", text="white", edge="#2E7D32"),
    project=NodeColors(fill="#81C784", text="black", edge="#2E7D32"),
    library=NodeColors(fill="#BA68C8", text="white", edge="#6A1B9A"),
)

GRAPH_NODE_DEFAULTS = 'shape=box, style=filled, width=2, height=0.5, fontname="Arial"'
GRAPH_EDGE_DEFAULTS = 'penwidth=1.5, fontname="Arial"'
