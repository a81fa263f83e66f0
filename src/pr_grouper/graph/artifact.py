"""
Simplification of dependency-cruiser output.

The CI workflow runs dependency-cruiser and uploads its JSON report as an
artifact. The report lists every module with its resolved dependencies
and dependents, including node core modules and third-party packages.
:func:`simplify_dependency_graph` keeps only internal modules (those
under ``internal_prefix``) and reduces each to a
:class:`~pr_grouper.grouping.group_model.DependencyInfo`.

Dependents are copied from the report unfiltered.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from pr_grouper.grouping.group_model import DependencyGraph, DependencyInfo
from pr_grouper.grouping.schema import InputError, parse_dependency_graph

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False

DEFAULT_INTERNAL_PREFIX = "src/"


def _internal_dependencies(module: Dict[str, Any], internal_prefix: str) -> List[str]:
    resolved: List[str] = []
    for dep in module.get("dependencies") or []:
        if not isinstance(dep, dict):
            continue
        target = dep.get("resolved")
        if target and dep.get("coreModule") is False and isinstance(target, str) and target.startswith(internal_prefix):
            resolved.append(target)
    return resolved


def simplify_dependency_graph(raw: Any, internal_prefix: str = DEFAULT_INTERNAL_PREFIX) -> DependencyGraph:
    """Reduce a dependency-cruiser report to internal modules only.

    Parameters
    ----------
    raw : Any
        Decoded dependency-cruiser JSON. Expected to hold a ``modules``
        array; anything else yields an empty graph.
    internal_prefix : str
        Path prefix identifying the project's own modules.

    Returns
    -------
    DependencyGraph
        Mapping of internal module path to its internal dependencies and
        its dependents.
    """
    graph: Dict[str, DependencyInfo] = {}
    modules = raw.get("modules") if isinstance(raw, dict) else None
    if not isinstance(modules, list):
        logger.warning("Could not find 'modules' array in the dependency artifact")
        return graph

    skipped = 0
    for module in modules:
        if not isinstance(module, dict):
            skipped += 1
            continue
        source = module.get("source")
        if module.get("coreModule") is True or not isinstance(source, str) or not source.startswith(internal_prefix):
            skipped += 1
            continue
        dependents = [d for d in module.get("dependents") or [] if isinstance(d, str)]
        graph[source] = DependencyInfo(
            dependencies=_internal_dependencies(module, internal_prefix),
            dependents=dependents,
        )

    logger.debug("Simplified dependency graph: kept %d module(s), skipped %d", len(graph), skipped)
    return graph


def load_dependency_graph(
    path: Union[str, Path],
    raw: bool = False,
    internal_prefix: str = DEFAULT_INTERNAL_PREFIX,
) -> DependencyGraph:
    """Load a dependency graph from a JSON file.

    With ``raw=True`` the file is a dependency-cruiser report and is
    simplified; otherwise it must already be a simplified graph.

    Raises
    ------
    InputError
        If the file cannot be read, is not valid JSON, or does not have
        the expected structure.
    """
    graph_path = Path(path)
    try:
        data = json.loads(graph_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read dependency graph '%s': %s", graph_path, exc)
        raise InputError(f"Cannot read dependency graph {graph_path}: {exc}") from exc

    if raw:
        return simplify_dependency_graph(data, internal_prefix)
    return parse_dependency_graph(data)
