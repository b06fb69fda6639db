"""Registry of known resolvers.

The registry is an ordered, immutable value. Order encodes priority: when a
file matches several resolvers, callers that need a single owner pick the
first one in registry order. The registry itself never picks.

The CLI builds the default registry once at startup via
``create_default_registry()`` and passes it along explicitly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from collections.abc import Iterator
from pathlib import Path

from .errors import ConfigurationError
from .resolver import Resolver
from .resolver import matches_definition_file

logger = logging.getLogger(__name__)


class ResolverRegistry:
    """Ordered collection of resolvers, highest priority first."""

    def __init__(self, resolvers: Iterable[Resolver]):
        """Initialize registry.

        Args:
            resolvers: Resolvers in priority order

        Raises:
            ConfigurationError: If two resolvers share an identifier
        """
        self._resolvers: tuple[Resolver, ...] = tuple(resolvers)

        seen: set[str] = set()
        for resolver in self._resolvers:
            key = resolver.identifier().lower()
            if key in seen:
                raise ConfigurationError(f"Resolver '{resolver.identifier()}' is registered more than once")
            seen.add(key)

    def __iter__(self) -> Iterator[Resolver]:
        return iter(self._resolvers)

    def __len__(self) -> int:
        return len(self._resolvers)

    def __getitem__(self, index: int) -> Resolver:
        return self._resolvers[index]

    def identifiers(self) -> list[str]:
        """Get resolver identifiers in priority order."""
        return [resolver.identifier() for resolver in self._resolvers]

    def get(self, identifier: str) -> Resolver:
        """Look up a resolver by identifier (case-insensitive).

        Raises:
            ConfigurationError: If no resolver has this identifier
        """
        for resolver in self._resolvers:
            if resolver.identifier().lower() == identifier.lower():
                return resolver
        raise ConfigurationError(
            f"Unknown resolver '{identifier}'. Available resolvers: {', '.join(self.identifiers())}"
        )

    def select(self, identifiers: Iterable[str]) -> ResolverRegistry:
        """Narrow the registry to the named resolvers.

        The returned registry keeps registry order, not the order of
        ``identifiers``.

        Raises:
            ConfigurationError: If any identifier is unknown
        """
        wanted = {self.get(identifier).identifier() for identifier in identifiers}
        return ResolverRegistry(r for r in self._resolvers if r.identifier() in wanted)

    def matching(self, path: Path | str) -> list[Resolver]:
        """Get every resolver whose definition-file globs match ``path``, in priority order."""
        return [resolver for resolver in self._resolvers if matches_definition_file(resolver, path)]

    def __repr__(self) -> str:
        return f"ResolverRegistry({self.identifiers()})"


def create_default_registry() -> ResolverRegistry:
    """Build the registry of all built-in resolvers, in priority order."""
    from .managers import GRADLE_RESOLVER
    from .managers import NPM_RESOLVER
    from .managers import PIP_RESOLVER

    registry = ResolverRegistry([GRADLE_RESOLVER, NPM_RESOLVER, PIP_RESOLVER])
    logger.debug(f"Built resolver registry with {len(registry)} resolvers: {registry.identifiers()}")
    return registry
