"""Dependency analyzer.

Routes ecosystem definition files (package.json, build.gradle, ...) to
resolvers and aggregates one dependency graph per file.

Public API:
- Resolver: Protocol every ecosystem resolver satisfies
- DefinitionFileMatcher: Glob matching at any directory depth
- ResolverRegistry / create_default_registry: Ordered resolver collection
- resolve_dependencies: Run one resolver over a batch of definition files
- find_definition_files: Walk a project and route files to resolvers
"""

from .discovery import find_definition_files
from .errors import AnalyzerError
from .errors import ConfigurationError
from .errors import PrerequisiteError
from .errors import ResolutionError
from .errors import ResolverNotImplementedError
from .matching import DefinitionFileMatcher
from .models import Dependency
from .models import DependencyGraph
from .models import ResolutionResult
from .orchestrator import resolve_dependencies
from .registry import ResolverRegistry
from .registry import create_default_registry
from .resolver import Resolver
from .resolver import no_preparation
from .resolver import not_implemented

__all__ = [
    "AnalyzerError",
    "ConfigurationError",
    "PrerequisiteError",
    "ResolutionError",
    "ResolverNotImplementedError",
    "DefinitionFileMatcher",
    "Dependency",
    "DependencyGraph",
    "ResolutionResult",
    "Resolver",
    "no_preparation",
    "not_implemented",
    "ResolverRegistry",
    "create_default_registry",
    "resolve_dependencies",
    "find_definition_files",
]
