"""
Pull request size summary.

Reviewers use the overall size of a pull request to decide how deep a
review can go. The totals are computed from the changed-file list, so no
extra request to the source-control host is needed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

from pr_grouper.grouping.group_model import ChangedFile


@dataclass(frozen=True)
class PRSize:
    """Totals over all changed files of a pull request."""

    changed_files: int
    additions: int
    deletions: int
    total_changes: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "changedFiles": self.changed_files,
            "additions": self.additions,
            "deletions": self.deletions,
            "totalChanges": self.total_changes,
        }


def summarize_pr_size(changed_files: Iterable[ChangedFile]) -> PRSize:
    """Sum up file count and line counts; ``total_changes`` is additions plus deletions."""
    count = additions = deletions = 0
    for changed_file in changed_files:
        count += 1
        additions += changed_file.additions
        deletions += changed_file.deletions
    return PRSize(
        changed_files=count,
        additions=additions,
        deletions=deletions,
        total_changes=additions + deletions,
    )
