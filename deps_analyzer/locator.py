"""Find the build descriptor belonging to a module."""

from __future__ import annotations

import logging
from pathlib import Path

from deps_analyzer.naming import module_to_path

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTOR = "build.gradle.kts"


class DescriptorLocator:
    """Map module ids to `<project_root>/<kebab path>/<descriptor_name>`."""

    def __init__(self, project_root: Path | str = ".", descriptor_name: str = DEFAULT_DESCRIPTOR):
        self.project_root = Path(project_root)
        self.descriptor_name = descriptor_name

    def descriptor_path(self, module: str) -> Path:
        return self.project_root / module_to_path(module) / self.descriptor_name

    def locate(self, module: str) -> Path | None:
        """Return the descriptor path, or None when the module has no descriptor."""
        path = self.descriptor_path(module)
        if path.is_file():
            return path
        logger.debug("No build descriptor for %s at %s", module, path)
        return None
