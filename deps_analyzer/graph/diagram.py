"""In-memory DOT diagram: ordered statements plus structured node/edge records."""

from __future__ import annotations

from dataclasses import dataclass, field

from deps_analyzer.graph.styles import NodeColors
from deps_analyzer.models import DependencyKind


def quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass
class DiagramNode:
    key: str
    label: str
    kind: DependencyKind | None  # None for the root


@dataclass
class DiagramEdge:
    source: str
    target: str
    kind: DependencyKind


@dataclass
class Diagram:
    """A `digraph` description. Statements keep emission order."""
    name: str = "Dependencies"
    statements: list[str] = field(default_factory=list)
    nodes: list[DiagramNode] = field(default_factory=list)
    edges: list[DiagramEdge] = field(default_factory=list)

    def add_attribute(self, statement: str) -> None:
        self.statements.append(f"  {statement};")

    def add_node(self, key: str, label: str, colors: NodeColors, kind: DependencyKind | None) -> None:
        self.statements.append(
            f"  {quote(key)} [fillcolor={quote(colors.fill)}, label={quote(label)}, "
            f"fontcolor={quote(colors.text)}];"
        )
        self.nodes.append(DiagramNode(key=key, label=label, kind=kind))

    def add_edge(self, source: str, target: str, colors: NodeColors, kind: DependencyKind) -> None:
        style = "style=dashed, " if kind is DependencyKind.LIBRARY else ""
        self.statements.append(
            f"  {quote(source)} -> {quote(target)} [{style}color={quote(colors.edge)}];"
        )
        self.edges.append(DiagramEdge(source=source, target=target, kind=kind))

    @property
    def node_keys(self) -> set[str]:
        return {node.key for node in self.nodes}

    def in_degrees(self) -> dict[str, int]:
        degrees = {node.key: 0 for node in self.nodes}
        for edge in self.edges:
            degrees[edge.target] = degrees.get(edge.target, 0) + 1
        return degrees

    def labels(self) -> dict[str, str]:
        return {node.key: node.label for node in self.nodes}

    @property
    def source(self) -> str:
        return "\n".join([f"digraph {self.name} {{", *self.statements, "}"]) + "\n"
