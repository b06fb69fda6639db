"""Dependency graph models produced by resolvers.

The orchestration core treats ``DependencyGraph`` as opaque: it only threads
graphs through the result map. Resolvers and the result writer are the only
code that look inside.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel
from pydantic import Field


class Dependency(BaseModel):
    """A single dependency, optionally with its own resolved children."""

    name: str = Field(description="Package name as known to the ecosystem")
    version: str | None = Field(default=None, description="Resolved version or declared constraint")
    scope: str = Field(default="default", description="Ecosystem scope, e.g. devDependencies")
    dependencies: list[Dependency] = Field(default_factory=list, description="Transitive dependencies")


class DependencyGraph(BaseModel):
    """Resolved dependencies for the project rooted at one definition file."""

    resolver: str = Field(description="Identifier of the resolver that produced this graph")
    definition_file: str = Field(description="Path of the definition file")
    project_name: str | None = None
    project_version: str | None = None
    dependencies: list[Dependency] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list, description="Non-fatal issues noted during resolution")

    def dependency_count(self) -> int:
        """Count all dependencies, including transitive ones."""
        pending = list(self.dependencies)
        count = 0
        while pending:
            dependency = pending.pop()
            count += 1
            pending.extend(dependency.dependencies)
        return count


# One entry per successfully resolved definition file
ResolutionResult = dict[Path, DependencyGraph]
