"""
Rules for assigning fixed categories to changed files.

Files that match a rule (removed files, build artifacts, lock files,
configuration, documentation, CI workflows) are grouped by category and
never enter dependency analysis. Rules are evaluated in order and the
first match wins, so a removed lock file is ``removed`` rather than
``config_or_dependencies``. The classification depends only on the file
name and status, which keeps it deterministic and testable rule by rule.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from .group_model import (
    CONFIG_OR_DEPENDENCIES,
    DOCS,
    IGNORED,
    REMOVED,
    WORKFLOW,
    Category,
)

Predicate = Callable[[str, str], bool]


def is_removed(filename: str, status: str) -> bool:
    return status == "removed"


def is_build_artifact(filename: str, status: str) -> bool:
    return any(
        filename.startswith(f"{segment}/") or f"/{segment}/" in filename
        for segment in ("dist", "build")
    )


def is_lock_file(filename: str, status: str) -> bool:
    return filename.endswith(".lock") or filename.endswith("lock.yaml") or filename == "pnpm-lock.yaml"


def is_package_manifest(filename: str, status: str) -> bool:
    return filename == "package.json"


def is_gitignore(filename: str, status: str) -> bool:
    return filename == ".gitignore"


def is_project_config(filename: str, status: str) -> bool:
    return (
        filename.endswith("tsconfig.json")
        or filename.startswith(".eslintrc")
        or filename.startswith("prettier.config")
    )


def is_documentation(filename: str, status: str) -> bool:
    return filename.endswith(".md") or filename.upper().startswith("LICENSE")


def is_ci_workflow(filename: str, status: str) -> bool:
    return ".github/workflows/" in filename or ".gitlab-ci" in filename


# Evaluated top to bottom; the order is significant.
CATEGORY_RULES: Tuple[Tuple[Predicate, str, str], ...] = (
    (is_removed, REMOVED, "File removed in this PR"),
    (is_build_artifact, IGNORED, "Filtered out as build artifact"),
    (is_lock_file, CONFIG_OR_DEPENDENCIES, "Dependency lock file"),
    (is_package_manifest, CONFIG_OR_DEPENDENCIES, "Package manager configuration"),
    (is_gitignore, CONFIG_OR_DEPENDENCIES, "Git ignore file"),
    (is_project_config, CONFIG_OR_DEPENDENCIES, "Project configuration file"),
    (is_documentation, DOCS, "Documentation or license file"),
    (is_ci_workflow, WORKFLOW, "CI/CD workflow file"),
)


def categorize_file(filename: str, status: str) -> Optional[Category]:
    """Assign a fixed category to a changed file.

    Parameters
    ----------
    filename : str
        Path of the changed file relative to the repository root.
    status : str
        Change status (``added``, ``modified``, ``removed``, ``renamed``).

    Returns
    -------
    Optional[Category]
        The category of the first matching rule, or ``None`` when the
        file is a reviewable source file.
    """
    for predicate, group_type, reason in CATEGORY_RULES:
        if predicate(filename, status):
            return Category(type=group_type, reason=reason)
    return None
