"""
Grouping of pull request changes for review.

This package classifies changed files into fixed categories and splits
the remaining source files into dependency-connected review groups. See
:mod:`pr_grouper.grouping.file_grouper` for the entry point and
:mod:`pr_grouper.grouping.categorizer` for the category rules.
"""

from .categorizer import categorize_file  # noqa: F401
from .file_grouper import group_changed_files, group_changed_files_from_dicts  # noqa: F401
from .group_model import ChangedFile, DependencyInfo, FileGroup  # noqa: F401
from .schema import InputError, parse_changed_files, parse_dependency_graph  # noqa: F401
