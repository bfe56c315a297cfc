"""Kotlin DSL scanner: line/brace heuristics over the `dependencies { }` block.

This is not a Kotlin parser. It recognises the one-declaration-per-line idiom
used by type-safe project accessors and version catalogs::

    dependencies {
        implementation(projects.account.accountDomain)
        api(libs.kotlinCoroutines)
    }
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from deps_analyzer.models import DependencyRecord
from deps_analyzer.naming import PROJECTS_PREFIX, dot_to_module
from deps_analyzer.scanner.base import BaseDeclarationScanner

logger = logging.getLogger(__name__)

DEFAULT_LIBRARY_PREFIXES = ("libs.", "deliverooLibs.")
DEFAULT_CONFIGURATIONS = ("implementation", "api", "compileOnly")

_BLOCK_OPENER_RE = re.compile(r"\bdependencies\s*\{")


class KtsDeclarationScanner(BaseDeclarationScanner):
    """Scanner for `build.gradle.kts` descriptors."""

    def __init__(
        self,
        library_prefixes: Iterable[str] = DEFAULT_LIBRARY_PREFIXES,
        configurations: Iterable[str] = DEFAULT_CONFIGURATIONS,
    ):
        self.library_prefixes = tuple(library_prefixes)
        self.configurations = tuple(configurations)
        self._project_forms = tuple(f"{cfg}({PROJECTS_PREFIX}" for cfg in self.configurations)
        self._config_openers = tuple(f"{cfg}(" for cfg in self.configurations)
        self._library_re = re.compile("|".join(re.escape(p) for p in self.library_prefixes))

    def scan_text(self, text: str) -> DependencyRecord:
        record = DependencyRecord()
        in_block = False
        depth = 0

        for raw_line in text.splitlines():
            line = raw_line.strip()

            if _BLOCK_OPENER_RE.search(line):
                in_block = True
                depth = 1
                continue

            if not in_block:
                continue

            if "{" in line:
                depth += 1
            if "}" in line:
                depth -= 1
                if depth == 0:
                    in_block = False

            project = self.parse_project_dependency(line)
            if project:
                record.project_deps.append(project)
            library = self.parse_library_dependency(line)
            if library:
                record.lib_deps.append(library)

        return record

    def parse_project_dependency(self, line: str) -> str | None:
        """Return the module id declared on this line, if any."""
        if not any(form in line for form in self._project_forms):
            return None
        start = line.index(PROJECTS_PREFIX)
        end = line.find(")", start)
        if end == -1:
            return None
        return dot_to_module(line[start:end])

    def parse_library_dependency(self, line: str) -> str | None:
        """Return the library accessor declared on this line, verbatim."""
        if not any(opener in line for opener in self._config_openers):
            return None
        # A prefix inside the `projects.` accessor (`projects.core.libs.x`) is part of a module path
        project_start = line.find(PROJECTS_PREFIX)
        project_end = line.find(")", project_start) if project_start != -1 else -1
        if project_start != -1 and project_end == -1:
            project_end = len(line)
        start = next(
            (m.start() for m in self._library_re.finditer(line)
             if not project_start <= m.start() < project_end),
            None,
        )
        if start is None:
            return None
        end = line.find(")", start)
        if end == -1:
            return None
        library = line[start:end]
        logger.debug("Found library dependency: %s from line: %s", library, line)
        return library
