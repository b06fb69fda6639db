"""CLI commands for dependency-analyzer."""

from .analyze import analyze
from .resolvers import list_resolvers
from .resolvers import match_paths

__all__ = [
    "analyze",
    "list_resolvers",
    "match_paths",
]
