"""Exceptions raised at the flowscribe library boundary.

Rendering itself never raises for unresolved catalog references; these errors
cover loading input documents and selecting output formats or templates.
"""

from __future__ import annotations


class FlowscribeError(Exception):
    """Base class for flowscribe errors."""


class ModelLoadError(FlowscribeError):
    """A flow or catalog document could not be read or validated."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")


class UnsupportedFormatError(FlowscribeError, ValueError):
    """Requested output format is not known."""


class UnknownTemplateError(FlowscribeError, ValueError):
    """Requested built-in catalog template is not known."""
