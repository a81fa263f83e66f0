"""
Command line interface for the pr_grouper tool.

This module defines the ``main`` function used as the entry point of the
``prgroup`` command. It loads configuration, reads the changed-file list
and the dependency graph, groups the changed files, and prints the groups
either as JSON for downstream review tooling or as a readable report.
Exit codes are listed below.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import click

from pr_grouper import __version__
from pr_grouper.config.loader import OUTPUT_FORMATS, ConfigError, load_config
from pr_grouper.graph.artifact import load_dependency_graph
from pr_grouper.grouping.file_grouper import group_changed_files
from pr_grouper.grouping.group_model import DEPENDENCY_GROUP, ChangedFile, FileGroup
from pr_grouper.grouping.schema import InputError, parse_changed_files
from pr_grouper.report.pr_size import PRSize, summarize_pr_size

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_INVALID_USAGE = 2
EXIT_INPUT_ERROR = 3
EXIT_NO_CHANGES = 4
EXIT_CONFIG_ERROR = 5


# ---------------------------------------------------------------------------
# Display utilities
# ---------------------------------------------------------------------------

def print_step(step_num: int, total_steps: int, message: str):
    """Print a step indicator."""
    click.echo(f"\n{'='*60}")
    click.echo(f"Step {step_num}/{total_steps}: {message}")
    click.echo(f"{'='*60}")


def print_info(message: str, indent: int = 0):
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}")


def print_success(message: str, indent: int = 0):
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}")


def print_warning(message: str, indent: int = 0):
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}", err=True)


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


def print_summary_box(title: str, items: List[str]):
    """Print a formatted summary box."""
    max_width = max(len(title), max(len(item) for item in items) if items else 0)
    box_width = min(max_width + 4, 60)

    click.echo(f"\n┌{'─' * box_width}┐")
    click.echo(f"│ {title.ljust(box_width - 2)}│")
    click.echo(f"├{'─' * box_width}┤")
    for item in items:
        click.echo(f"│ {item.ljust(box_width - 2)}│")
    click.echo(f"└{'─' * box_width}┘")


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


def _enable_library_logging() -> None:
    # Module loggers start detached from the root logger; reattach them now
    # that the root has handlers.
    for name in list(logging.root.manager.loggerDict):
        if name == "pr_grouper" or name.startswith("pr_grouper."):
            logging.getLogger(name).propagate = True


# ---------------------------------------------------------------------------
# Core functionality
# ---------------------------------------------------------------------------

def read_changed_files(path: Path) -> List[ChangedFile]:
    """Read and validate the changed-file list from a JSON file.

    Parameters
    ----------
    path : Path
        File holding either a list of changed files or a pull request
        detail object with a ``files`` list.

    Raises
    ------
    InputError
        If the file cannot be read or its content is malformed.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read changed files '%s': %s", path, exc)
        raise InputError(f"Cannot read changed files {path}: {exc}") from exc
    return parse_changed_files(data)


def build_document(groups: List[FileGroup], size: PRSize) -> Dict[str, Any]:
    """Assemble the JSON document emitted by ``--format json``."""
    return {
        "size": size.to_dict(),
        "groups": [group.to_dict() for group in groups],
    }


def render_group(group: FileGroup, group_num: int, total_groups: int) -> None:
    """Print one group in the text report."""
    click.echo(f"\n{'─'*60}")
    click.echo(f"📦 Group {group_num}/{total_groups}")
    click.echo(f"{'─'*60}")

    click.echo(f"\n🏷️  Type: {click.style(group.type, fg='cyan', bold=True)}")
    click.echo(f"   Reason: {group.reason}")
    click.echo(f"   Lines: +{group.additions} -{group.deletions} ({group.changes} changed)")

    click.echo(f"\n📄 Changed files ({len(group.changed_files)}):")
    for filename in group.changed_files:
        click.echo(f"   • {filename}")

    if group.dependencies:
        click.echo(f"\n⬇️  Depends on ({len(group.dependencies)}):")
        for filename in group.dependencies:
            click.echo(f"   • {filename}")
    if group.dependents:
        click.echo(f"\n⬆️  Used by ({len(group.dependents)}):")
        for filename in group.dependents:
            click.echo(f"   • {filename}")


@click.command()
@click.option(
    "--changes",
    "changes_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file with the changed-file list or pull request details.",
)
@click.option(
    "--graph",
    "graph_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON file with the project dependency graph.",
)
@click.option("--raw-graph", is_flag=True, help="Treat --graph as a dependency-cruiser report and simplify it.")
@click.option("--internal-prefix", help="Path prefix of internal modules when simplifying a raw graph.")
@click.option("--format", "output_format", type=click.Choice(OUTPUT_FORMATS), help="Output format.")
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="Write the JSON result to this file.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file (defaults to ~/.pr_grouper/.pr_grouper_config.json).",
)
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name="prgroup")
def main(
    changes_path: Path,
    graph_path: Path,
    raw_graph: bool,
    internal_prefix: Optional[str],
    output_format: Optional[str],
    output_path: Optional[Path],
    config_path: Optional[Path],
    verbose: bool,
) -> None:
    """📦 Group the changed files of a pull request for code review.

    Files are split into category groups (docs, config, CI, removed,
    build artifacts) and into groups of source files connected through
    the dependency graph.
    """
    # force=True so repeated invocations (tests) reconfigure handlers.
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        force=True,
    )
    _enable_library_logging()

    try:
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            print_error(f"Configuration error: {exc}")
            raise click.exceptions.Exit(EXIT_CONFIG_ERROR)

        if output_format is None:
            output_format = config["output_format"]
        if internal_prefix is None:
            internal_prefix = config["internal_prefix"]
        text_mode = output_format == "text" and output_path is None
        total_steps = 3

        if text_mode:
            print_step(1, total_steps, "Reading Changed Files")
        try:
            changed_files = read_changed_files(changes_path)
        except InputError as exc:
            print_error(f"Invalid changed files: {exc}")
            raise click.exceptions.Exit(EXIT_INPUT_ERROR)

        if not changed_files:
            print_warning("No changed files to group.")
            raise click.exceptions.Exit(EXIT_NO_CHANGES)

        size = summarize_pr_size(changed_files)
        if text_mode:
            print_success(f"Found {_plural(size.changed_files, 'changed file')}")
            print_info(f"+{size.additions} -{size.deletions} ({size.total_changes} lines)", indent=1)
            print_step(2, total_steps, "Loading Dependency Graph")

        try:
            dependency_graph = load_dependency_graph(graph_path, raw=raw_graph, internal_prefix=internal_prefix)
        except InputError as exc:
            print_error(f"Invalid dependency graph: {exc}")
            raise click.exceptions.Exit(EXIT_INPUT_ERROR)
        logger.debug("Dependency graph has %d node(s)", len(dependency_graph))

        groups = group_changed_files(changed_files, dependency_graph)

        if not text_mode:
            document = json.dumps(build_document(groups, size), indent=config["indent"])
            if output_path is not None:
                output_path.write_text(document + "\n", encoding="utf-8")
                print_success(f"Wrote {_plural(len(groups), 'group')} to {output_path}")
            else:
                click.echo(document)
            raise click.exceptions.Exit(EXIT_SUCCESS)

        print_success(f"Loaded graph with {_plural(len(dependency_graph), 'node')}")
        print_step(3, total_steps, "Grouping Changed Files")
        for idx, group in enumerate(groups, start=1):
            render_group(group, idx, len(groups))

        dependency_groups = [g for g in groups if g.type == DEPENDENCY_GROUP]
        print_summary_box(
            "Summary",
            [
                f"✓ Groups: {len(groups)}",
                f"✓ Dependency groups: {len(dependency_groups)}",
                f"✓ Files changed: {size.changed_files}",
                f"✓ Lines: +{size.additions} -{size.deletions}",
            ],
        )
        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        raise
    except Exception as exc:
        logging.exception("Unhandled error: %s", exc)
        print_error(f"Unexpected error: {exc}")
        raise click.exceptions.Exit(EXIT_GENERIC_ERROR)
