"""3-stage pipeline orchestrator: resolve -> render -> write."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from deps_analyzer.analyzer import DependencyAnalyzer
from deps_analyzer.graph import Diagram, render, write_diagram
from deps_analyzer.locator import DescriptorLocator
from deps_analyzer.models import AnalyzerConfig, DependencyGraph
from deps_analyzer.naming import normalize_module
from deps_analyzer.scanner import KtsDeclarationScanner


ProgressCallback = Callable[[str, int, int], None]


@dataclass
class AnalysisResult:
    graph: DependencyGraph
    diagram: Diagram
    output_path: Path | None = None


def build_analyzer(config: AnalyzerConfig) -> DependencyAnalyzer:
    scanner = KtsDeclarationScanner(
        library_prefixes=config.library_prefixes,
        configurations=config.configurations,
    )
    locator = DescriptorLocator(config.project_root, descriptor_name=config.descriptor_name)
    return DependencyAnalyzer(config.project_root, scanner=scanner, locator=locator)


def run_resolve(config: AnalyzerConfig, progress: ProgressCallback | None = None) -> DependencyGraph:
    """Stage 1: Resolve the dependency graph."""
    if config.max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {config.max_depth}")
    root = normalize_module(config.root_module)

    if progress:
        progress("Resolving", 0, 1)
    graph = build_analyzer(config).analyze(root, config.max_depth)
    if progress:
        progress("Resolving", 1, 1)
    return graph


def render_only(config: AnalyzerConfig, graph: DependencyGraph) -> Diagram:
    """Stage 2: Render the graph without writing anything."""
    return render(
        graph,
        normalize_module(config.root_module),
        duplicate=config.duplicate,
        direction=config.direction,
        max_nodes=config.max_nodes,
    )


def run_analysis(
    config: AnalyzerConfig,
    progress: ProgressCallback | None = None,
    write: bool = True,
) -> AnalysisResult:
    """Run the full pipeline."""
    graph = run_resolve(config, progress=progress)

    if progress:
        progress("Rendering", 0, 1)
    diagram = render_only(config, graph)
    if progress:
        progress("Rendering", 1, 1)

    result = AnalysisResult(graph=graph, diagram=diagram)
    if not write:
        return result

    # Stage 3: Write
    if progress:
        progress("Writing", 0, 1)
    result.output_path = write_diagram(
        diagram,
        config.output_path,
        output_format=config.output_format,
        executable=config.dot_executable,
    )
    if progress:
        progress("Writing", 1, 1)

    return result
