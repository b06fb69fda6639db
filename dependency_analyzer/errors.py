"""Error taxonomy for dependency resolution.

Every error raised here aborts the current resolution run. The core never
catches, retries or downgrades them; only the CLI decides how to present them.
"""

from __future__ import annotations

from pathlib import Path


class AnalyzerError(Exception):
    """Base class for all analyzer errors."""


class ConfigurationError(AnalyzerError):
    """Invalid static configuration (glob patterns, resolver names, settings files)."""


class PrerequisiteError(AnalyzerError):
    """A resolver's external prerequisite is missing or misconfigured.

    Attributes:
        resolver: Identifier of the resolver that failed preparation
        command: The external command that was looked for, if any
    """

    def __init__(self, resolver: str, message: str, command: str | None = None):
        super().__init__(message)
        self.resolver = resolver
        self.command = command


class ResolutionError(AnalyzerError):
    """Resolving a single definition file failed.

    Attributes:
        resolver: Identifier of the resolver
        definition_file: The manifest that could not be resolved
    """

    def __init__(self, resolver: str, definition_file: Path, message: str):
        super().__init__(message)
        self.resolver = resolver
        self.definition_file = definition_file


class ResolverNotImplementedError(AnalyzerError, NotImplementedError):
    """A resolver has no real resolution logic for a definition file."""

    def __init__(self, resolver: str, definition_file: Path):
        super().__init__(f"{resolver} cannot resolve '{definition_file}' yet: resolution is not implemented")
        self.resolver = resolver
        self.definition_file = definition_file
