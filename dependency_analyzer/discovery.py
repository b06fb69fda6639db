"""Definition file discovery - walks a project tree and routes manifests to resolvers.

Routing policy: a file matching several resolvers belongs to the first one in
registry order. This tie-break lives here, in the caller, not in the registry
or the orchestrator.
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .errors import ConfigurationError
from .registry import ResolverRegistry
from .resolver import Resolver

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDES = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        "node_modules",
        "__pycache__",
        ".venv",
        "venv",
        "build",
        ".gradle",
    }
)


def select_resolver(registry: ResolverRegistry, path: Path) -> Resolver | None:
    """Pick the owning resolver for a file, or None if no resolver matches.

    Args:
        registry: Resolvers in priority order
        path: Candidate definition file

    Returns:
        Highest-priority matching resolver
    """
    candidates = registry.matching(path)
    if not candidates:
        return None
    if len(candidates) > 1:
        losers = ", ".join(r.identifier() for r in candidates[1:])
        logger.debug(f"'{path}' matches several resolvers, using {candidates[0].identifier()} over {losers}")
    return candidates[0]


def find_definition_files(
    project_dir: Path,
    registry: ResolverRegistry,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDES,
) -> dict[Resolver, list[Path]]:
    """
    Find definition files below a project directory.

    Directory and file names are walked in sorted order so results are
    stable across runs and platforms.

    Args:
        project_dir: Root of the project to analyze
        registry: Resolvers to route files to, in priority order
        exclude_dirs: Directory names that are never descended into

    Returns:
        Map of resolver to its definition files, containing only resolvers
        that matched at least one file, in registry order

    Raises:
        ConfigurationError: If project_dir is not a directory

    Example:
        >>> found = find_definition_files(Path("."), create_default_registry())
        >>> for resolver, files in found.items():
        ...     print(resolver.identifier(), len(files))
    """
    if not project_dir.is_dir():
        raise ConfigurationError(f"Project directory '{project_dir}' does not exist or is not a directory")

    excluded = set(exclude_dirs)
    found: dict[Resolver, list[Path]] = {resolver: [] for resolver in registry}

    for root, dirs, files in os.walk(project_dir):
        # Prune in place so os.walk does not descend into excluded directories
        dirs[:] = sorted(d for d in dirs if d not in excluded)

        for name in sorted(files):
            path = Path(root) / name
            resolver = select_resolver(registry, path.relative_to(project_dir))
            if resolver is not None:
                found[resolver].append(path)

    result = {resolver: paths for resolver, paths in found.items() if paths}
    logger.info(
        f"Found {sum(len(p) for p in result.values())} definition files for "
        f"{len(result)} resolvers in '{project_dir}'"
    )
    return result
