"""
Partition a pull request's changed files into review groups.

Categorized files (removed, build artifacts, configuration, docs, CI)
are collected into one group per category. Uncategorized files missing
from the dependency graph land in a single ``isolated_change`` group.
The remaining reviewable files are split into connected components of
the dependency graph, each emitted as a ``dependency_group`` annotated
with the unchanged files it depends on or is used by.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping

from .categorizer import categorize_file
from .components import build_adjacency, collect_context, find_connected_components
from .group_model import (
    DEPENDENCY_GROUP,
    ISOLATED_CHANGE,
    ChangedFile,
    DependencyGraph,
    FileGroup,
)
from .schema import parse_changed_files, parse_dependency_graph

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False

ISOLATED_REASON = "Changed file not in dependency graph or unrelated"
CONNECTED_REASON = "Connected component in changed dependency graph"
SINGLETON_REASON = "Changed file with no reviewable dependencies/dependents in this PR"


def group_changed_files(changed_files: Iterable[ChangedFile], dependency_graph: DependencyGraph) -> List[FileGroup]:
    """Group changed files by category and dependency connectivity.

    Parameters
    ----------
    changed_files : Iterable[ChangedFile]
        Files changed in the pull request.
    dependency_graph : DependencyGraph
        Mapping of file path to its dependencies and dependents. May be
        incomplete or empty.

    Returns
    -------
    List[FileGroup]
        Category groups in the order their type was first seen, followed
        by dependency groups in the order of their first reviewable file.
        Every group has at least one changed file.
    """
    changed_files = list(changed_files)
    stats: Dict[str, ChangedFile] = {f.filename: f for f in changed_files}
    category_groups: Dict[str, FileGroup] = {}
    reviewable: List[str] = []

    for changed_file in changed_files:
        category = categorize_file(changed_file.filename, changed_file.status)
        if category is None:
            if changed_file.status == "removed":
                continue
            if changed_file.filename in dependency_graph:
                reviewable.append(changed_file.filename)
                continue
            group = category_groups.get(ISOLATED_CHANGE)
            if group is None:
                group = category_groups[ISOLATED_CHANGE] = FileGroup(ISOLATED_CHANGE, ISOLATED_REASON)
        else:
            group = category_groups.get(category.type)
            if group is None:
                group = category_groups[category.type] = FileGroup(category.type, category.reason)
        group.add_file(changed_file)

    adjacency = build_adjacency(reviewable, dependency_graph)
    dependency_groups: List[FileGroup] = []
    for component in find_connected_components(reviewable, adjacency):
        dependencies, dependents = collect_context(component, dependency_graph)
        group = FileGroup(
            DEPENDENCY_GROUP,
            CONNECTED_REASON if len(component) > 1 else SINGLETON_REASON,
            dependencies=dependencies,
            dependents=dependents,
        )
        for filename in component:
            changed_file = stats[filename]
            group.changed_files.append(filename)
            group.changes += changed_file.changes
            group.additions += changed_file.additions
            group.deletions += changed_file.deletions
        dependency_groups.append(group)

    groups = [g for g in [*category_groups.values(), *dependency_groups] if g.changed_files]
    logger.debug(
        "Grouped %d changed file(s) into %d group(s): %s",
        len(changed_files),
        len(groups),
        ", ".join(f"{g.type}={len(g.changed_files)}" for g in groups),
    )
    return groups


def group_changed_files_from_dicts(changed_file_list: Any, dependency_graph: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """Validate decoded JSON input, group it, and return JSON-ready groups.

    Raises
    ------
    InputError
        If either input is malformed.
    """
    groups = group_changed_files(
        parse_changed_files(changed_file_list),
        parse_dependency_graph(dependency_graph),
    )
    return [group.to_dict() for group in groups]
