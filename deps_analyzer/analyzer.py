"""Dependency resolver: breadth-first walk over module build descriptors."""

from __future__ import annotations

import logging
from collections import deque
from pathlib import Path

from deps_analyzer.locator import DescriptorLocator
from deps_analyzer.models import DependencyGraph
from deps_analyzer.scanner import BaseDeclarationScanner, KtsDeclarationScanner

logger = logging.getLogger(__name__)


class DependencyAnalyzer:
    """Resolve the project and library dependencies reachable from a root module."""

    def __init__(
        self,
        project_root: Path | str = ".",
        scanner: BaseDeclarationScanner | None = None,
        locator: DescriptorLocator | None = None,
    ):
        self.project_root = Path(project_root)
        self.scanner = scanner or KtsDeclarationScanner()
        self.locator = locator or DescriptorLocator(self.project_root)

    def analyze(self, root_module: str, max_depth: int = 0) -> DependencyGraph:
        """BFS from root_module.

        With ``max_depth > 0`` modules at depth ``max_depth`` or deeper are
        dropped entirely: they are never scanned and get no entry. Every module
        is enqueued at most once (at its shortest distance from the root), so
        cyclic module graphs terminate even when the depth is unlimited.
        """
        graph = DependencyGraph()
        queue = deque([root_module])
        depth: dict[str, int] = {root_module: 0}

        logger.info("Analyzing dependencies for module: %s", root_module)

        while queue:
            current = queue.popleft()
            current_depth = depth[current]

            if max_depth > 0 and current_depth >= max_depth:
                continue

            build_file = self.locator.locate(current)
            if build_file is None:
                continue

            record = self.scanner.scan_file(build_file)
            graph.scanned.append(current)
            logger.debug(
                "Found dependencies for %s: project=%s libs=%s",
                current, record.project_deps, record.lib_deps,
            )

            if not record.is_empty:
                graph.add(current, record)

            for dep in record.project_deps:
                if dep in depth:
                    continue
                depth[dep] = current_depth + 1
                queue.append(dep)

        graph.depths = depth
        logger.info(
            "Resolved %d module(s) with dependencies out of %d scanned",
            len(graph.project_deps), len(graph.scanned),
        )
        return graph
