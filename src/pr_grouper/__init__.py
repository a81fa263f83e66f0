"""
Top-level package for pr_grouper.

Groups the changed files of a pull request into review units using a
project dependency graph. The command line entry point lives in
``pr_grouper.cli``; the grouping engine in ``pr_grouper.grouping``.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
