"""Tests for writing analyzer results."""

import json
from pathlib import Path

import pytest
import yaml

from conftest import make_graph
from dependency_analyzer.output import OutputFormat
from dependency_analyzer.output import build_document
from dependency_analyzer.output import write_results


@pytest.fixture
def results(tmp_path: Path):
    project = tmp_path / "project"
    web = project / "web" / "package.json"
    api = project / "api" / "package.json"
    return project, {
        "NPM": {
            web: make_graph("NPM", web, "react"),
            api: make_graph("NPM", api, "express", "cors"),
        }
    }


def test_build_document_uses_relative_sorted_paths(results):
    project, data = results

    document = build_document(project, data)

    assert document["project_dir"] == project.as_posix()
    assert list(document["resolvers"]["NPM"]) == ["api/package.json", "web/package.json"]
    api = document["resolvers"]["NPM"]["api/package.json"]
    assert [d["name"] for d in api["dependencies"]] == ["express", "cors"]


def test_paths_outside_project_stay_absolute(tmp_path):
    elsewhere = Path("/elsewhere/package.json")
    document = build_document(tmp_path, {"NPM": {elsewhere: make_graph("NPM", elsewhere)}})

    assert list(document["resolvers"]["NPM"]) == ["/elsewhere/package.json"]


def test_write_yaml(results, tmp_path):
    project, data = results

    output_file = write_results(project, data, tmp_path / "out")

    assert output_file == tmp_path / "out" / "analyzer-result.yml"
    loaded = yaml.safe_load(output_file.read_text())
    assert loaded == build_document(project, data)


def test_write_json(results, tmp_path):
    project, data = results

    output_file = write_results(project, data, tmp_path / "out", OutputFormat.JSON)

    assert output_file.suffix == ".json"
    assert json.loads(output_file.read_text()) == build_document(project, data)


def test_refuses_to_overwrite(results, tmp_path):
    project, data = results
    write_results(project, data, tmp_path / "out")

    with pytest.raises(FileExistsError):
        write_results(project, data, tmp_path / "out")

    write_results(project, {}, tmp_path / "out", overwrite=True)
    assert yaml.safe_load((tmp_path / "out" / "analyzer-result.yml").read_text())["resolvers"] == {}


def test_output_format_values():
    assert OutputFormat("yaml") is OutputFormat.YAML
    assert OutputFormat.YAML.extension == "yml"
    assert OutputFormat.JSON.extension == "json"
