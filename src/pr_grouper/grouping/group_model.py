"""
Data models for changed-file grouping.

A :class:`ChangedFile` describes one file touched by a pull request, a
:class:`DependencyInfo` holds the import edges of one project file, and a
:class:`FileGroup` is one output partition handed to the review
dispatcher. :meth:`FileGroup.to_dict` produces the JSON shape consumed
downstream (note the camel-cased ``changedFiles`` key).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

# Group types
REMOVED = "removed"
IGNORED = "ignored"
CONFIG_OR_DEPENDENCIES = "config_or_dependencies"
DOCS = "docs"
WORKFLOW = "workflow"
ISOLATED_CHANGE = "isolated_change"
DEPENDENCY_GROUP = "dependency_group"

VALID_STATUSES = ("added", "modified", "removed", "renamed")


@dataclass
class ChangedFile:
    """A file changed in the pull request.

    Attributes
    ----------
    filename : str
        Path relative to the repository root.
    status : str
        One of ``added``, ``modified``, ``removed`` or ``renamed``.
    changes, additions, deletions : int
        Line counts as reported by the source-control host.
    """

    filename: str
    status: str
    changes: int = 0
    additions: int = 0
    deletions: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ChangedFile":
        """Build a changed file from a decoded JSON object, ignoring extra keys."""
        return cls(
            filename=data["filename"],
            status=data["status"],
            changes=data["changes"],
            additions=data["additions"],
            deletions=data["deletions"],
        )


@dataclass
class DependencyInfo:
    """Import edges of one file in the dependency graph."""

    dependencies: List[str] = field(default_factory=list)
    dependents: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {"dependencies": list(self.dependencies), "dependents": list(self.dependents)}


DependencyGraph = Dict[str, DependencyInfo]


@dataclass(frozen=True)
class Category:
    """Fixed category assigned to a changed file by the categorizer."""

    type: str
    reason: str


@dataclass
class FileGroup:
    """A group of changed files to be reviewed together.

    Attributes
    ----------
    type : str
        Group type (``docs``, ``workflow``, ``dependency_group`` ...).
    reason : str
        Why these files were grouped.
    changed_files : List[str]
        Changed files belonging to the group, in discovery order.
    dependencies : List[str]
        Files the group's changed files import. Context only, never
        overlaps ``changed_files``.
    dependents : List[str]
        Files importing the group's changed files. Context only.
    changes, additions, deletions : int
        Sums over ``changed_files``.
    """

    type: str
    reason: str
    changed_files: List[str] = field(default_factory=list)
    dependencies: List[str] = field(default_factory=list)
    dependents: List[str] = field(default_factory=list)
    changes: int = 0
    additions: int = 0
    deletions: int = 0

    def add_file(self, changed_file: ChangedFile) -> None:
        """Append a changed file and accumulate its line counts."""
        self.changed_files.append(changed_file.filename)
        self.changes += changed_file.changes
        self.additions += changed_file.additions
        self.deletions += changed_file.deletions

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "reason": self.reason,
            "changedFiles": list(self.changed_files),
            "dependencies": list(self.dependencies),
            "dependents": list(self.dependents),
            "changes": self.changes,
            "additions": self.additions,
            "deletions": self.deletions,
        }
