"""Gradle resolver."""

import sys
from pathlib import Path

from ..matching import DefinitionFileMatcher
from ..models import ResolutionResult
from ..resolver import no_preparation
from ..resolver import not_implemented


class Gradle:
    """Resolver for Gradle builds.

    Prefers the project's Gradle wrapper over a globally installed Gradle,
    so no preparation is needed up front: the wrapper may only exist in some
    working directories.
    """

    homepage_url = "https://gradle.org/"
    primary_language = "Java"
    globs_for_definition_files = ("build.gradle", "settings.gradle")

    def __init__(self):
        self.matcher = DefinitionFileMatcher(self.globs_for_definition_files)

    def identifier(self) -> str:
        return "Gradle"

    def command(self, working_dir: Path) -> str:
        wrapper = "gradlew.bat" if sys.platform == "win32" else "gradlew"
        if (working_dir / wrapper).is_file():
            return wrapper
        return "gradle"

    def prepare_resolution(self) -> None:
        no_preparation(self)

    def resolve_one(
        self,
        project_dir: Path,
        working_dir: Path,
        definition_file: Path,
        result: ResolutionResult,
    ) -> None:
        # TODO: run the "dependencies" task via self.command(working_dir) and parse its tree output
        not_implemented(self, definition_file)

    def __repr__(self) -> str:
        return "Gradle()"


GRADLE_RESOLVER = Gradle()
