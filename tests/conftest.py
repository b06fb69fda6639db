"""Pytest configuration and shared stub resolvers for dependency-analyzer tests."""

from pathlib import Path

import pytest

from dependency_analyzer.errors import ResolutionError
from dependency_analyzer.matching import DefinitionFileMatcher
from dependency_analyzer.models import Dependency
from dependency_analyzer.models import DependencyGraph
from dependency_analyzer.models import ResolutionResult
from dependency_analyzer.resolver import no_preparation


class StubResolver:
    """Resolver double that records calls and returns canned graphs.

    Args:
        name: Identifier to report
        globs: Definition file globs
        graphs: Canned graphs by definition file; a default graph is built otherwise
        fail_on: Definition file whose resolution raises ``error``
        error: Exception raised for ``fail_on`` (ResolutionError by default)
        prepare_error: Exception raised by prepare_resolution
        store: If False, resolve_one returns without storing a graph
    """

    homepage_url = "https://example.invalid/"
    primary_language = "Stub"

    def __init__(
        self,
        name: str = "Stub",
        globs: tuple[str, ...] = ("package.json",),
        graphs: dict[Path, DependencyGraph] | None = None,
        fail_on: Path | None = None,
        error: BaseException | None = None,
        prepare_error: BaseException | None = None,
        store: bool = True,
    ):
        self.name = name
        self.globs_for_definition_files = globs
        self.matcher = DefinitionFileMatcher(globs)
        self.graphs = graphs or {}
        self.fail_on = fail_on
        self.error = error
        self.prepare_error = prepare_error
        self.store = store
        self.prepare_calls = 0
        self.calls: list[tuple[Path, Path, Path]] = []

    def identifier(self) -> str:
        return self.name

    def command(self, working_dir: Path) -> str:
        return "stub"

    def prepare_resolution(self) -> None:
        self.prepare_calls += 1
        if self.prepare_error is not None:
            raise self.prepare_error
        no_preparation(self)

    def resolve_one(
        self,
        project_dir: Path,
        working_dir: Path,
        definition_file: Path,
        result: ResolutionResult,
    ) -> None:
        self.calls.append((project_dir, working_dir, definition_file))
        if definition_file == self.fail_on:
            raise self.error or ResolutionError(self.name, definition_file, "stub failure")
        if self.store:
            result[definition_file] = self.graphs.get(definition_file) or make_graph(self.name, definition_file)


def make_graph(resolver: str, definition_file: Path, *names: str) -> DependencyGraph:
    """Build a small graph with one dependency per name."""
    return DependencyGraph(
        resolver=resolver,
        definition_file=str(definition_file),
        dependencies=[Dependency(name=name, version="1.0.0") for name in names],
    )


@pytest.fixture
def stub_resolver() -> StubResolver:
    return StubResolver()


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Point HOME and the working directory at temporary directories."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    return home
