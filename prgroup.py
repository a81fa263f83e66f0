#!/usr/bin/env python
"""
Thin wrapper script to invoke the pr_grouper CLI.

Running ``python prgroup.py`` is equivalent to running the ``prgroup``
console script installed via ``pyproject.toml``.
"""

from pr_grouper.cli import main


if __name__ == "__main__":
    main(prog_name="prgroup")
