"""Abstract base declaration scanner."""

from __future__ import annotations

import abc
import logging
from pathlib import Path

from deps_analyzer.models import DependencyRecord

logger = logging.getLogger(__name__)


class BaseDeclarationScanner(abc.ABC):
    """Base class for build-descriptor scanners."""

    @abc.abstractmethod
    def scan_text(self, text: str) -> DependencyRecord:
        """Extract declared dependencies from descriptor text."""

    def scan_file(self, file_path: Path) -> DependencyRecord:
        """Scan a descriptor on disk; an unreadable file yields no dependencies."""
        try:
            text = file_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning("Error opening file %s: %s", file_path, e)
            return DependencyRecord()
        return self.scan_text(text)
