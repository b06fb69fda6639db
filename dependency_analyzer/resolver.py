"""Resolver capability every ecosystem implementation must satisfy.

A resolver is any object that provides the ``Resolver`` protocol. Default
behavior is offered as plain helper functions rather than a base class:
implementations that need no preparation call ``no_preparation`` and stubs
without real resolution call ``not_implemented``.

Lifecycle for one orchestration run:
    NotPrepared -> Prepared (prepare_resolution) -> Resolving (resolve_one per file) -> Done
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING
from typing import Protocol
from typing import runtime_checkable

from .errors import ResolverNotImplementedError

if TYPE_CHECKING:
    from .matching import DefinitionFileMatcher
    from .models import ResolutionResult

logger = logging.getLogger(__name__)


@runtime_checkable
class Resolver(Protocol):
    """Protocol for ecosystem-specific dependency resolvers.

    Attributes:
        homepage_url: Homepage of the ecosystem's tool
        primary_language: Language the ecosystem is primarily used with
        globs_for_definition_files: Prioritized glob patterns of supported definition files
        matcher: Matcher compiled from ``globs_for_definition_files``
    """

    homepage_url: str
    primary_language: str
    globs_for_definition_files: tuple[str, ...]
    matcher: DefinitionFileMatcher

    def identifier(self) -> str:
        """Stable name used for logging and selection."""
        ...

    def command(self, working_dir: Path) -> str:
        """Name or path of the external tool this resolver would run in ``working_dir``."""
        ...

    def prepare_resolution(self) -> None:
        """One-time preparation, like checking prerequisites. Must be idempotent."""
        ...

    def resolve_one(
        self,
        project_dir: Path,
        working_dir: Path,
        definition_file: Path,
        result: ResolutionResult,
    ) -> None:
        """Resolve ``definition_file`` and store its graph in ``result[definition_file]``."""
        ...


def no_preparation(resolver: Resolver) -> None:
    """Default preparation step for resolvers without prerequisites."""
    logger.debug(f"Resolution of {resolver.identifier()} dependencies does not require preparation.")


def not_implemented(resolver: Resolver, definition_file: Path) -> None:
    """Default resolution step for resolvers that cannot resolve yet.

    Raises:
        ResolverNotImplementedError: Always
    """
    raise ResolverNotImplementedError(resolver.identifier(), definition_file)


def matches_definition_file(resolver: Resolver, path: Path | str) -> bool:
    """Check whether ``path`` is a definition file handled by ``resolver``."""
    return resolver.matcher.matches(path)
