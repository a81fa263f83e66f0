"""
Summaries of pull request changes.
"""

from .pr_size import PRSize, summarize_pr_size  # noqa: F401
