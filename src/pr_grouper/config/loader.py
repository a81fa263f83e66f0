"""
Configuration loader for pr_grouper.

Settings are read from a JSON file named ``.pr_grouper_config.json`` in
the ``~/.pr_grouper/`` directory of the user's home directory, or from an
explicit path given on the command line. The file is optional: when the
default file does not exist, built-in defaults are used.

If an explicitly requested file is missing, or any file is malformed or
holds values of the wrong type, a :class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)
# Attach a null handler so library use without logging configuration stays
# silent. The CLI turns propagation back on when it configures logging.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False

CONFIG_FILENAME = ".pr_grouper_config.json"
OUTPUT_FORMATS = ("json", "text")

DEFAULT_CONFIG: Dict[str, Any] = {
    "internal_prefix": "src/",
    "output_format": "text",
    "indent": 2,
}


class ConfigError(Exception):
    """Raised when the configuration file is missing or invalid."""

    pass


def _get_config_directory() -> Path:
    """Return the directory holding the user-level configuration file."""
    return Path.home() / ".pr_grouper"


def _validate(data: Dict[str, Any]) -> None:
    if "internal_prefix" in data and not isinstance(data["internal_prefix"], str):
        raise ConfigError("'internal_prefix' must be a string")
    if "output_format" in data and data["output_format"] not in OUTPUT_FORMATS:
        raise ConfigError(f"'output_format' must be one of: {', '.join(OUTPUT_FORMATS)}")
    if "indent" in data:
        indent = data["indent"]
        if not isinstance(indent, int) or isinstance(indent, bool) or indent < 0:
            raise ConfigError("'indent' must be a non-negative integer")


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the grouping configuration and merge it over the defaults.

    Args:
        config_path: Explicit configuration file. When omitted, the
            user-level file in ``~/.pr_grouper/`` is used if present.

    Returns:
        A dictionary with the keys:
        - internal_prefix (str): Path prefix of the project's own modules
        - output_format (str): ``json`` or ``text``
        - indent (int): JSON indentation

    Raises:
        ConfigError: If an explicit file is missing, or the file is
            malformed or invalid.
    """
    config = dict(DEFAULT_CONFIG)

    if config_path is None:
        config_path = _get_config_directory() / CONFIG_FILENAME
        if not config_path.exists():
            logger.debug("No configuration file at %s, using defaults", config_path)
            return config
    elif not config_path.exists():
        logger.error("Configuration file '%s' does not exist", config_path)
        raise ConfigError(f"Missing configuration file: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path.name}: {exc}") from exc

    if not isinstance(data, dict):
        logger.error("Configuration file '%s' does not contain a JSON object", config_path)
        raise ConfigError(f"Configuration in {config_path.name} must be a JSON object")

    _validate(data)

    unknown = sorted(set(data) - set(DEFAULT_CONFIG))
    if unknown:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

    config.update({key: data[key] for key in DEFAULT_CONFIG if key in data})
    logger.debug("Loaded configuration from: %s", config_path)
    logger.debug("Configuration data: %s", config)
    return config
