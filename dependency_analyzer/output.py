"""Writing analyzer results to disk."""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from .models import ResolutionResult

logger = logging.getLogger(__name__)

RESULT_BASENAME = "analyzer-result"


class OutputFormat(str, Enum):
    """Serialization format for analyzer results."""

    YAML = "yaml"
    JSON = "json"

    @property
    def extension(self) -> str:
        return "yml" if self is OutputFormat.YAML else "json"


def _display_path(path: Path, project_dir: Path) -> str:
    try:
        return path.relative_to(project_dir).as_posix()
    except ValueError:
        return path.as_posix()


def build_document(project_dir: Path, results: dict[str, ResolutionResult]) -> dict[str, Any]:
    """Build the serializable result document.

    Args:
        project_dir: Analyzed project root, used to shorten definition file paths
        results: Resolution results keyed by resolver identifier

    Returns:
        Plain dict ready for YAML or JSON serialization
    """
    resolvers: dict[str, Any] = {}
    for identifier, result in results.items():
        entries = {_display_path(path, project_dir): graph.model_dump(mode="json") for path, graph in result.items()}
        resolvers[identifier] = dict(sorted(entries.items()))

    return {"project_dir": project_dir.as_posix(), "resolvers": resolvers}


def result_path(output_dir: Path, output_format: OutputFormat = OutputFormat.YAML) -> Path:
    """Path of the result file ``write_results`` writes for this format."""
    return output_dir / f"{RESULT_BASENAME}.{output_format.extension}"


def write_results(
    project_dir: Path,
    results: dict[str, ResolutionResult],
    output_dir: Path,
    output_format: OutputFormat = OutputFormat.YAML,
    overwrite: bool = False,
) -> Path:
    """Write analyzer results to ``output_dir``.

    Returns:
        Path of the written file

    Raises:
        FileExistsError: If the result file exists and overwrite is False
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    output_file = result_path(output_dir, output_format)

    if output_file.exists() and not overwrite:
        raise FileExistsError(f"Result file '{output_file}' already exists, use --overwrite to replace it")

    document = build_document(project_dir, results)
    with open(output_file, "w", encoding="utf-8") as f:
        if output_format is OutputFormat.YAML:
            yaml.safe_dump(document, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(document, f, indent=2)
            f.write("\n")

    logger.info(f"Wrote analyzer results to '{output_file}'")
    return output_file
