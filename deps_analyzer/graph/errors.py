"""Errors raised while producing a diagram."""


class RenderError(Exception):
    """The diagram could not be produced or converted to an image."""


class DiagramTooLargeError(RenderError):
    """Duplicated-tree rendering exceeded the configured node ceiling."""
