"""
Configuration loading for pr_grouper.

Provides a loader for the optional JSON configuration file in the
user's home directory. See :mod:`pr_grouper.config.loader` for
implementation details.
"""

from .loader import ConfigError, load_config  # noqa: F401
