"""
Validation of decoded JSON input for the grouping engine.

The grouping functions trust their input. Callers that receive changed
files or a dependency graph from outside (the CLI, a tool wrapper) run
them through :func:`parse_changed_files` and
:func:`parse_dependency_graph` first, which reject malformed payloads
with an :class:`InputError`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from .group_model import VALID_STATUSES, ChangedFile, DependencyGraph, DependencyInfo

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False

_COUNT_FIELDS = ("changes", "additions", "deletions")


class InputError(ValueError):
    """Raised when changed-file or dependency-graph input is malformed."""

    pass


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _is_string_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(item, str) for item in value)


def parse_changed_files(data: Any) -> List[ChangedFile]:
    """Validate a changed-file list and convert it to :class:`ChangedFile` objects.

    ``data`` may be the list itself or a pull request detail object whose
    ``files`` key holds the list.

    Raises
    ------
    InputError
        If the payload or any entry is malformed.
    """
    if isinstance(data, dict) and "files" in data:
        data = data["files"]
    if not isinstance(data, list):
        raise InputError("Changed file list must be a JSON array")

    changed_files: List[ChangedFile] = []
    for index, entry in enumerate(data):
        if not isinstance(entry, dict):
            raise InputError(f"Changed file #{index} must be an object")
        missing = [key for key in ("filename", "status", *_COUNT_FIELDS) if key not in entry]
        if missing:
            raise InputError(f"Changed file #{index} is missing keys: {', '.join(missing)}")
        if not isinstance(entry["filename"], str):
            raise InputError(f"Changed file #{index}: 'filename' must be a string")
        if entry["status"] not in VALID_STATUSES:
            raise InputError(
                f"Changed file '{entry['filename']}': unknown status {entry['status']!r} "
                f"(expected one of {', '.join(VALID_STATUSES)})"
            )
        for key in _COUNT_FIELDS:
            if not _is_count(entry[key]):
                raise InputError(f"Changed file '{entry['filename']}': '{key}' must be a non-negative integer")
        changed_files.append(ChangedFile.from_dict(entry))

    logger.debug("Parsed %d changed file(s)", len(changed_files))
    return changed_files


def parse_dependency_graph(data: Any) -> DependencyGraph:
    """Validate a simplified dependency graph and convert its entries.

    Raises
    ------
    InputError
        If the graph is not an object or an entry lacks string-list
        ``dependencies``/``dependents``.
    """
    if not isinstance(data, dict):
        raise InputError("Dependency graph must be a JSON object")

    graph: Dict[str, DependencyInfo] = {}
    for path, entry in data.items():
        if not isinstance(entry, dict):
            raise InputError(f"Dependency graph entry '{path}' must be an object")
        for key in ("dependencies", "dependents"):
            if not _is_string_list(entry.get(key)):
                raise InputError(f"Dependency graph entry '{path}': '{key}' must be a list of strings")
        graph[path] = DependencyInfo(
            dependencies=list(entry["dependencies"]),
            dependents=list(entry["dependents"]),
        )

    logger.debug("Parsed dependency graph with %d node(s)", len(graph))
    return graph
