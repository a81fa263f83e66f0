"""
Dependency graph input handling.

Converts dependency-cruiser artifacts produced in CI into the simplified
graph consumed by :mod:`pr_grouper.grouping`. See
:mod:`pr_grouper.graph.artifact` for details.
"""

from .artifact import load_dependency_graph, simplify_dependency_graph  # noqa: F401
