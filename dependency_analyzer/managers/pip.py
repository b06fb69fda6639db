"""PIP resolver.

Reports the requirements declared in ``requirements*.txt`` files. Projects
described only by ``setup.py`` cannot be resolved yet.
"""

import logging
import re
import sys
from collections.abc import Iterator
from pathlib import Path

from ..errors import ResolutionError
from ..matching import DefinitionFileMatcher
from ..models import Dependency
from ..models import DependencyGraph
from ..models import ResolutionResult
from ..resolver import no_preparation
from ..resolver import not_implemented

logger = logging.getLogger(__name__)

_COMMENT = re.compile(r"(^|\s)#.*$")
_REQUIREMENT = re.compile(r"^(?P<name>[A-Za-z0-9](?:[A-Za-z0-9._-]*[A-Za-z0-9])?)\s*(?:\[[^\]]*\])?\s*(?P<spec>.*)$")
# Per-requirement options such as --hash follow the specifier after whitespace
_OPTION = re.compile(r"\s--?[A-Za-z]")


class PIP:
    """Resolver for Python projects managed with pip."""

    homepage_url = "https://pip.pypa.io/"
    primary_language = "Python"
    globs_for_definition_files = ("setup.py", "requirements*.txt")

    def __init__(self):
        self.matcher = DefinitionFileMatcher(self.globs_for_definition_files)

    def identifier(self) -> str:
        return "PIP"

    def command(self, working_dir: Path) -> str:
        return "pip.exe" if sys.platform == "win32" else "pip"

    def prepare_resolution(self) -> None:
        no_preparation(self)

    def resolve_one(
        self,
        project_dir: Path,
        working_dir: Path,
        definition_file: Path,
        result: ResolutionResult,
    ) -> None:
        if definition_file.name == "setup.py":
            not_implemented(self, definition_file)

        try:
            lines = definition_file.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ResolutionError(self.identifier(), definition_file, f"Cannot read '{definition_file}': {e}") from e

        dependencies, notes = parse_requirements(lines)
        for note in notes:
            logger.debug(f"{definition_file}: {note}")

        result[definition_file] = DependencyGraph(
            resolver=self.identifier(),
            definition_file=str(definition_file),
            project_name=working_dir.name or None,
            dependencies=dependencies,
            errors=notes,
        )

    def __repr__(self) -> str:
        return "PIP()"


def _logical_lines(lines: list[str]) -> Iterator[tuple[int, str]]:
    """Join backslash continuations, yielding (first line number, joined text)."""
    start: int | None = None
    parts: list[str] = []
    for number, raw in enumerate(lines, start=1):
        if start is None:
            start = number
        stripped = raw.rstrip()
        if stripped.endswith("\\"):
            parts.append(stripped[:-1])
            continue
        parts.append(raw)
        yield start, " ".join(parts)
        start, parts = None, []
    if start is not None:
        yield start, " ".join(parts)


def _collapse(text: str) -> str:
    return " ".join(text.split())


def parse_requirements(lines: list[str]) -> tuple[list[Dependency], list[str]]:
    """Parse requirement lines into dependencies.

    Lines ending in a backslash continue on the next line. Options (``-r``,
    ``-e``, ``--index-url`` ...), per-requirement options such as
    ``--hash``, direct paths and URLs are not followed; they are reported as
    notes instead.

    Args:
        lines: Lines of a requirements file

    Returns:
        Tuple of (dependencies, notes about skipped lines)
    """
    dependencies: list[Dependency] = []
    notes: list[str] = []

    for number, text in _logical_lines(lines):
        line = _COMMENT.sub("", text).strip()
        if not line:
            continue

        if line.startswith("-"):
            notes.append(f"line {number}: skipped option '{_collapse(line)}'")
            continue

        option = _OPTION.search(line)
        if option is not None:
            notes.append(f"line {number}: skipped option '{_collapse(line[option.start() :])}'")
            line = line[: option.start()].strip()

        requirement = line.split(";", 1)[0].strip()
        match = _REQUIREMENT.match(requirement)
        if match is None:
            notes.append(f"line {number}: skipped unsupported requirement '{line}'")
            continue

        spec = match.group("spec").strip()
        if spec.startswith((":", "+")):
            # A bare URL such as https://host/pkg.whl or git+https://host/repo
            notes.append(f"line {number}: skipped unsupported requirement '{line}'")
            continue

        dependencies.append(Dependency(name=match.group("name"), version=spec or None, scope="install"))

    return dependencies, notes


PIP_RESOLVER = PIP()
