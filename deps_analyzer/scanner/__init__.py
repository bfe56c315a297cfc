"""Declaration scanners for build descriptors."""

from __future__ import annotations

from pathlib import Path

from deps_analyzer.models import DependencyRecord
from deps_analyzer.scanner.base import BaseDeclarationScanner
from deps_analyzer.scanner.kts_scanner import (
    DEFAULT_CONFIGURATIONS,
    DEFAULT_LIBRARY_PREFIXES,
    KtsDeclarationScanner,
)


def scan_descriptor(path: Path, scanner: BaseDeclarationScanner | None = None) -> DependencyRecord:
    """Scan one descriptor file with the given scanner (Kotlin DSL by default)."""
    return (scanner or KtsDeclarationScanner()).scan_file(path)


__all__ = [
    "BaseDeclarationScanner",
    "KtsDeclarationScanner",
    "DEFAULT_CONFIGURATIONS",
    "DEFAULT_LIBRARY_PREFIXES",
    "scan_descriptor",
]
