"""Errors that abort a build."""

from __future__ import annotations

from pathlib import Path


class BuildError(Exception):
    """Base class for every fatal build error."""


class ConfigurationError(BuildError):
    """Raised when a required input (content root, template, stylesheet) is missing."""


class CacheCorruptionError(BuildError):
    """Raised when the persisted cache file holds a malformed line."""

    def __init__(self, path: Path, line_number: int, line: str):
        self.path = path
        self.line_number = line_number
        self.line = line
        super().__init__(f"{path}:{line_number}: malformed cache line {line!r}")


class RenderError(BuildError):
    """Raised when a single file cannot be rendered."""

    def __init__(self, source: Path | str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class OutputCollisionError(RenderError):
    """Raised when two sources would be written to the same output path."""
