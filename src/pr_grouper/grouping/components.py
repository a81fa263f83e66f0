"""
Connected components over the changed part of the dependency graph.

Only reviewable files (uncategorized, present in the graph, not removed)
take part in the traversal. Edges are symmetrized: a file importing
another and a file imported by another both connect the two. Graph
entries for files outside the reviewable set are never traversed; they
only show up as context in :func:`collect_context`.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Set, Tuple

from .group_model import DependencyGraph, DependencyInfo

_EMPTY = DependencyInfo()


def build_adjacency(reviewable_files: Iterable[str], dependency_graph: DependencyGraph) -> Dict[str, List[str]]:
    """Build an undirected adjacency list restricted to ``reviewable_files``.

    Every reviewable file gets an entry, even with no neighbours.
    Neighbour lists keep first-insertion order and hold no duplicates.
    """
    reviewable = list(reviewable_files)
    reviewable_set = set(reviewable)
    adjacency: Dict[str, List[str]] = {}
    for filename in reviewable:
        adjacency.setdefault(filename, [])
        info = dependency_graph.get(filename, _EMPTY)
        for related in [*info.dependencies, *info.dependents]:
            if related not in reviewable_set:
                continue
            neighbours = adjacency.setdefault(related, [])
            if related not in adjacency[filename]:
                adjacency[filename].append(related)
            if filename not in neighbours:
                neighbours.append(filename)
    return adjacency


def find_connected_components(reviewable_files: Iterable[str], adjacency: Dict[str, List[str]]) -> List[List[str]]:
    """Partition ``reviewable_files`` into connected components.

    Components are discovered in the order of their first file in
    ``reviewable_files``. Within a component, files are listed in
    depth-first pre-order, visiting neighbours in adjacency order. The
    traversal uses an explicit stack so long import chains do not hit the
    recursion limit.
    """
    visited: Set[str] = set()
    components: List[List[str]] = []
    for start in reviewable_files:
        if start in visited:
            continue
        component: List[str] = []
        visited.add(start)
        component.append(start)
        stack = [iter(adjacency.get(start, ()))]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    component.append(neighbour)
                    stack.append(iter(adjacency.get(neighbour, ())))
                    break
            else:
                stack.pop()
        components.append(component)
    return components


def collect_context(component: List[str], dependency_graph: DependencyGraph) -> Tuple[List[str], List[str]]:
    """Return the context ``(dependencies, dependents)`` of a component.

    Both lists come from the full graph entries of the component's files,
    are deduplicated in first-seen order and exclude the component's own
    files.
    """
    members = set(component)
    dependencies: Dict[str, None] = {}
    dependents: Dict[str, None] = {}
    for filename in component:
        info = dependency_graph.get(filename, _EMPTY)
        for dep in info.dependencies:
            if dep not in members:
                dependencies.setdefault(dep, None)
        for dep in info.dependents:
            if dep not in members:
                dependents.setdefault(dep, None)
    return list(dependencies), list(dependents)
