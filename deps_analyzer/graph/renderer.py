"""Turn a DependencyGraph into a DOT diagram, either shared-node or as a duplicated tree."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

from deps_analyzer.graph.diagram import Diagram
from deps_analyzer.graph.errors import DiagramTooLargeError
from deps_analyzer.graph.styles import (
    DEFAULT_COLORS,
    GRAPH_EDGE_DEFAULTS,
    GRAPH_NODE_DEFAULTS,
    ColorScheme,
)
from deps_analyzer.models import DependencyGraph, DependencyKind, Direction

logger = logging.getLogger(__name__)


def render(
    graph: DependencyGraph,
    root: str,
    duplicate: bool = False,
    direction: Direction = Direction.HORIZONTAL,
    colors: ColorScheme = DEFAULT_COLORS,
    max_nodes: int | None = None,
) -> Diagram:
    """Build the diagram for ``graph`` rooted at ``root``.

    ``max_nodes`` only applies to duplicated-tree mode, whose size can grow
    exponentially with the number of shared dependencies.
    """
    diagram = Diagram()
    diagram.add_attribute(f"rankdir={direction.value}")
    diagram.add_attribute(f"node [{GRAPH_NODE_DEFAULTS}]")
    diagram.add_attribute(f"edge [{GRAPH_EDGE_DEFAULTS}]")
    diagram.add_node(root, root, colors.root, None)

    if duplicate:
        TreeRenderer(graph, diagram, colors, max_nodes=max_nodes).run(root)
    else:
        _render_shared(graph, diagram, colors)

    logger.info(
        "Rendered %d node(s) and %d edge(s) (duplicate=%s)",
        len(diagram.nodes), len(diagram.edges), duplicate,
    )
    return diagram


def _render_shared(graph: DependencyGraph, diagram: Diagram, colors: ColorScheme) -> None:
    # Nodes are redeclared per occurrence; Graphviz merges identical declarations.
    for kind, mapping in (
        (DependencyKind.PROJECT, graph.project_deps),
        (DependencyKind.LIBRARY, graph.lib_deps),
    ):
        scheme = colors.for_kind(kind)
        for module, deps in mapping.items():
            for dep in deps:
                diagram.add_node(dep, dep, scheme, kind)
                diagram.add_edge(module, dep, scheme, kind)


@dataclass
class RenderState:
    added_nodes: set[str] = field(default_factory=set)
    processed_nodes: dict[str, str | None] = field(default_factory=dict)  # dep -> first parent
    node_counters: dict[str, int] = field(default_factory=dict)
    queued_nodes: set[str] = field(default_factory=set)
    processed_edges: set[str] = field(default_factory=set)
    node_bases: dict[str, str] = field(default_factory=dict)  # node key -> module/library id
    node_paths: dict[str, frozenset[str]] = field(default_factory=dict)  # node key -> ancestor ids


class TreeRenderer:
    """Duplicated-tree mode: clone shared dependencies so every node has one parent.

    The walk is breadth-first over diagram nodes. A dependency is attached to
    the first node that claims it; any later parent gets a fresh clone
    (``<id>_<n>``, labelled ``<id>``) whose children are cloned right away and
    queued. A clone whose id already appears among its own ancestors closes a
    cycle and is drawn as a leaf.
    """

    def __init__(
        self,
        graph: DependencyGraph,
        diagram: Diagram,
        colors: ColorScheme = DEFAULT_COLORS,
        max_nodes: int | None = None,
    ):
        self.graph = graph
        self.diagram = diagram
        self.colors = colors
        self.max_nodes = max_nodes
        self.state = RenderState()
        self.queue: deque[str] = deque()
        self._known_ids = set(graph.project_deps) | set(graph.lib_deps)
        for deps in (*graph.project_deps.values(), *graph.lib_deps.values()):
            self._known_ids.update(deps)

    def run(self, root: str) -> None:
        state = self.state
        state.added_nodes.add(root)
        state.node_bases[root] = root
        state.node_paths[root] = frozenset([root])
        # The root is never attached under another node; references to it are cloned.
        state.processed_nodes[root] = None
        self._enqueue(root)

        while self.queue:
            current = self.queue.popleft()
            state.queued_nodes.discard(current)
            for kind, dep in self.graph.children(state.node_bases[current]):
                self._expand(current, kind, dep)

    def _expand(self, current: str, kind: DependencyKind, dep: str) -> None:
        state = self.state

        if dep not in state.processed_nodes:
            if dep not in state.added_nodes:
                self._declare(dep, dep, kind, parent=current)
            self._link(current, dep, kind)
            state.processed_nodes[dep] = current
            self._enqueue(dep)
            return

        if state.processed_nodes[dep] == current:
            return

        clone, expandable = self._clone(current, dep, kind)
        if not expandable:
            return
        for child_kind, child in self.graph.children(dep):
            edge_key = f"{clone}->{child}"
            if edge_key in state.processed_edges:
                continue
            state.processed_edges.add(edge_key)
            grandchild, grandchild_expandable = self._clone(clone, child, child_kind)
            if grandchild_expandable:
                self._enqueue(grandchild)

    def _clone(self, parent: str, dep: str, kind: DependencyKind) -> tuple[str, bool]:
        """Declare and link a new copy of ``dep`` under ``parent``.

        Returns the clone key and whether its children may be expanded.
        """
        clone = self._next_clone_key(dep)
        self._declare(clone, dep, kind, parent=parent)
        self.diagram.add_edge(parent, clone, self.colors.for_kind(kind), kind)
        self.state.processed_edges.add(f"{parent}->{clone}")
        expandable = dep not in self.state.node_paths[parent]
        if not expandable:
            logger.debug("Cycle back to %s under %s; not expanding %s", dep, parent, clone)
        return clone, expandable

    def _next_clone_key(self, base: str) -> str:
        counters = self.state.node_counters
        while True:
            counters[base] = counters.get(base, 0) + 1
            key = f"{base}_{counters[base]}"
            if key not in self.state.added_nodes and key not in self._known_ids:
                return key

    def _declare(self, key: str, label: str, kind: DependencyKind, parent: str) -> None:
        state = self.state
        self.diagram.add_node(key, label, self.colors.for_kind(kind), kind)
        state.added_nodes.add(key)
        state.node_bases[key] = label
        state.node_paths[key] = state.node_paths[parent] | {label}
        if self.max_nodes is not None and len(state.added_nodes) > self.max_nodes:
            raise DiagramTooLargeError(
                f"Duplicated tree exceeds {self.max_nodes} nodes; "
                f"lower --depth or render without --duplicate"
            )

    def _link(self, source: str, target: str, kind: DependencyKind) -> None:
        edge_key = f"{source}->{target}"
        if edge_key in self.state.processed_edges:
            return
        self.diagram.add_edge(source, target, self.colors.for_kind(kind), kind)
        self.state.processed_edges.add(edge_key)

    def _enqueue(self, key: str) -> None:
        if key in self.state.queued_nodes:
            return
        self.queue.append(key)
        self.state.queued_nodes.add(key)
