"""Folio exception hierarchy.

Only structural problems are errors. Unknown theme, section, animation and
typography ids are resolved through defaults and never raise.
"""

from pathlib import Path


class FolioError(Exception):
    """Base class for all Folio errors."""


class ConfigValidationError(FolioError, ValueError):
    """Raised when a portfolio configuration does not match the declared shape.

    Attributes:
        problems: Every shape problem found, in discovery order
    """

    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        message = "Invalid portfolio configuration: " + "; ".join(self.problems)
        super().__init__(message)


class StorageError(FolioError):
    """Raised when a file-backed store cannot be written."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"Storage error for {path}: {message}")


class TemplateRenderError(FolioError):
    """Raised when a packaged template is missing or fails to render."""

    def __init__(self, template: str, message: str) -> None:
        self.template = template
        super().__init__(f"Template {template} failed: {message}")
