"""Resolution orchestrator - drives one resolver over a batch of definition files.

Policy: all or nothing. Either every definition file is resolved and the full
result map is returned, or the first failure propagates and no map is
returned at all. Files resolved before the failure are discarded.
"""

import logging
import time
from collections.abc import Sequence
from pathlib import Path

from .errors import ResolutionError
from .models import ResolutionResult
from .resolver import Resolver

logger = logging.getLogger(__name__)


def resolve_dependencies(
    resolver: Resolver,
    project_dir: Path,
    definition_files: Sequence[Path],
) -> ResolutionResult:
    """Resolve dependencies for each definition file with one resolver.

    The resolver is prepared exactly once, before the first file and also
    when ``definition_files`` is empty. Files are resolved sequentially in
    the given order; the order only affects log output.

    Args:
        resolver: Resolver handling all of the given definition files
        project_dir: Root directory of the analyzed project
        definition_files: Definition files discovered for this resolver

    Returns:
        Map with exactly one dependency graph per definition file

    Raises:
        PrerequisiteError: Preparation failed
        ResolutionError: A definition file could not be resolved, or the
            resolver returned without storing a graph for it
        ResolverNotImplementedError: The resolver has no real resolution logic
    """
    identifier = resolver.identifier()

    resolver.prepare_resolution()

    result: ResolutionResult = {}
    requested: set[Path] = set()

    for definition_file in definition_files:
        working_dir = definition_file.parent
        requested.add(definition_file)

        logger.info(f"Resolving {identifier} dependencies in '{working_dir}'...")

        start = time.perf_counter()
        resolver.resolve_one(project_dir, working_dir, definition_file, result)
        elapsed = time.perf_counter() - start

        if definition_file not in result:
            raise ResolutionError(
                identifier,
                definition_file,
                f"{identifier} returned without a dependency graph for '{definition_file}'",
            )

        unexpected = sorted(str(path) for path in result if path not in requested)
        if unexpected:
            raise ResolutionError(
                identifier,
                definition_file,
                f"{identifier} stored graphs for files it was not asked to resolve: {', '.join(unexpected)}",
            )

        logger.info(
            f"Resolving {identifier} dependencies in '{working_dir.name}' took {elapsed:.2f}s.",
            extra={
                "event": "resolution:elapsed",
                "resolver": identifier,
                "definition_file": str(definition_file),
                "elapsed_seconds": round(elapsed, 3),
            },
        )

    return result
