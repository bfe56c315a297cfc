"""Data models for the deps-analyzer pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator


class DependencyKind(enum.Enum):
    PROJECT = "project"
    LIBRARY = "library"


class Direction(enum.Enum):
    HORIZONTAL = "LR"
    VERTICAL = "TB"


@dataclass
class DependencyRecord:
    """Declarations found in a single build descriptor."""
    project_deps: list[str] = field(default_factory=list)
    lib_deps: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.project_deps and not self.lib_deps


@dataclass
class DependencyGraph:
    """Result from the resolver stage.

    ``project_deps`` and ``lib_deps`` always share the same keys: a module is
    recorded in both or in neither. Modules visited without any declaration
    are left out.
    """
    project_deps: dict[str, list[str]] = field(default_factory=dict)
    lib_deps: dict[str, list[str]] = field(default_factory=dict)
    depths: dict[str, int] = field(default_factory=dict)  # module -> BFS depth
    scanned: list[str] = field(default_factory=list)  # modules whose descriptor was found, readable or not

    @property
    def modules(self) -> list[str]:
        return list(self.project_deps)

    def add(self, module: str, record: DependencyRecord) -> None:
        self.project_deps[module] = list(record.project_deps)
        self.lib_deps[module] = list(record.lib_deps)

    def children(self, module: str) -> Iterator[tuple[DependencyKind, str]]:
        """Yield direct dependencies, project ones first."""
        for dep in self.project_deps.get(module, []):
            yield DependencyKind.PROJECT, dep
        for dep in self.lib_deps.get(module, []):
            yield DependencyKind.LIBRARY, dep


@dataclass
class AnalyzerConfig:
    """Configuration for the analysis pipeline."""
    root_module: str = ""
    project_root: Path = field(default_factory=lambda: Path("."))
    max_depth: int = 0  # 0 means unlimited
    output_path: Path = field(default_factory=lambda: Path("module_dependencies.svg"))
    output_format: str | None = None  # inferred from output_path suffix
    direction: Direction = Direction.HORIZONTAL
    duplicate: bool = False
    dot_executable: str = "dot"
    descriptor_name: str = "build.gradle.kts"
    library_prefixes: tuple[str, ...] = ("libs.", "deliverooLibs.")
    configurations: tuple[str, ...] = ("implementation", "api", "compileOnly")
    max_nodes: int | None = 10_000
