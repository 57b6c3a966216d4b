"""Error taxonomy for manifest generation.

Every error is terminal: the pipeline stops at the first one and nothing is
written.
"""

from __future__ import annotations

from pathlib import Path


class ManifestError(Exception):
    """Base class for all manifest generation failures."""


class ConfigurationError(ManifestError):
    """Raised when a required option is missing or invalid."""


class ImageResolutionError(ManifestError):
    """Raised when the image digest cannot be resolved."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


class TemplateRenderError(ManifestError):
    """Raised when a template cannot be loaded or rendered."""

    def __init__(self, message: str, template: str) -> None:
        super().__init__(message)
        self.template = template


class OutputWriteError(ManifestError):
    """Raised when the manifest cannot be persisted."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path
