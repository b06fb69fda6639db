"""NPM resolver.

Reports the dependencies declared in ``package.json``, grouped by the
section they are declared in.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Any

from ..errors import ResolutionError
from ..matching import DefinitionFileMatcher
from ..models import Dependency
from ..models import DependencyGraph
from ..models import ResolutionResult
from ..resolver import no_preparation

logger = logging.getLogger(__name__)

DEPENDENCY_SECTIONS = ("dependencies", "devDependencies", "optionalDependencies", "peerDependencies")


class NPM:
    """Resolver for NPM projects."""

    homepage_url = "https://www.npmjs.com/"
    primary_language = "JavaScript"
    globs_for_definition_files = ("package.json",)

    def __init__(self):
        self.matcher = DefinitionFileMatcher(self.globs_for_definition_files)

    def identifier(self) -> str:
        return "NPM"

    def command(self, working_dir: Path) -> str:
        return "npm.cmd" if sys.platform == "win32" else "npm"

    def prepare_resolution(self) -> None:
        no_preparation(self)

    def resolve_one(
        self,
        project_dir: Path,
        working_dir: Path,
        definition_file: Path,
        result: ResolutionResult,
    ) -> None:
        manifest = self._load_manifest(definition_file)

        dependencies: list[Dependency] = []
        for section in DEPENDENCY_SECTIONS:
            declared = manifest.get(section, {})
            if not isinstance(declared, dict):
                raise ResolutionError(
                    self.identifier(),
                    definition_file,
                    f"'{section}' in '{definition_file}' must be an object, got {type(declared).__name__}",
                )
            for name, version in sorted(declared.items()):
                dependencies.append(Dependency(name=name, version=_string_or_none(version), scope=section))

        logger.debug(f"Found {len(dependencies)} declared dependencies in '{definition_file}'")

        result[definition_file] = DependencyGraph(
            resolver=self.identifier(),
            definition_file=str(definition_file),
            project_name=_string_or_none(manifest.get("name")),
            project_version=_string_or_none(manifest.get("version")),
            dependencies=dependencies,
        )

    def _load_manifest(self, definition_file: Path) -> dict[str, Any]:
        try:
            manifest = json.loads(definition_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise ResolutionError(self.identifier(), definition_file, f"Cannot read '{definition_file}': {e}") from e
        except json.JSONDecodeError as e:
            raise ResolutionError(
                self.identifier(), definition_file, f"Invalid JSON in '{definition_file}': {e}"
            ) from e

        if not isinstance(manifest, dict):
            raise ResolutionError(
                self.identifier(), definition_file, f"'{definition_file}' must contain a JSON object"
            )
        return manifest

    def __repr__(self) -> str:
        return "NPM()"


def _string_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


NPM_RESOLVER = NPM()
