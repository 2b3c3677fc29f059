#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmodel/config.py
"""Configuration file discovery and loading.

Configuration may come from a dedicated file (``.docmodel.toml``,
``.docmodel.yaml``, ``.docmodel.yml`` or ``.docmodel.json``) or from the
``[tool.docmodel]`` table of a ``pyproject.toml``. Two tables are
recognized, mapping onto the option classes:

.. code-block:: toml

    [references]
    fallback_slug = "part"
    suffix_start = 2

    [toc]
    require_references = true
    max_depth = 3

"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from docmodel.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from docmodel.exceptions import ConfigError
from docmodel.options import ReferenceOptions, TocOptions

logger = logging.getLogger(__name__)

_OPTION_SECTIONS: dict[str, type] = {
    "references": ReferenceOptions,
    "toc": TocOptions,
}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.docmodel]`` table of a pyproject.toml file.

    Returns
    -------
    dict
        The table, or an empty dict if the file has none

    Raises
    ------
    ConfigError
        If the file cannot be parsed or the table is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {pyproject_path}: {e}", str(pyproject_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading {pyproject_path}: {e}", str(pyproject_path), e) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}",
            str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up from ``start_dir`` (default: the working directory) to the
    filesystem root. In each directory the dedicated config files are
    checked first, then a pyproject.toml with a ``[tool.docmodel]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for the search

    Returns
    -------
    Path or None
        First config file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigError as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Discover a configuration file in the standard locations.

    Searches the working directory and its parents first, then the user's
    home directory (dedicated config files only).

    Returns
    -------
    Path or None
        Path of the discovered file

    """
    found = find_config_in_parents(start_dir)
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, malformed, or of an unsupported type

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ConfigError(f"Configuration file does not exist: {config_path}", str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", str(config_path))
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    # An empty YAML file loads as None
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(
            f"Config file must contain a mapping at root level, got {type(config).__name__}", str(config_path)
        )

    logger.debug("Loaded configuration from %s", config_path)
    return config


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries with deep merging.

    The override dictionary takes precedence; nested dictionaries are merged
    recursively rather than replaced.

    Examples
    --------
    >>> merge_configs({"toc": {"max_depth": 2}}, {"toc": {"require_references": True}})
    {'toc': {'max_depth': 2, 'require_references': True}}

    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value

    return result


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (``--config``)
    2. Path from the ``DOCMODEL_CONFIG`` environment variable
    3. Auto-discovered config file

    Returns
    -------
    dict
        Loaded configuration (empty dict if none found)

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


def options_from_config(config: Dict[str, Any]) -> tuple[ReferenceOptions, TocOptions]:
    """Build the option objects from a configuration dictionary.

    Parameters
    ----------
    config : dict
        Configuration with optional ``references`` and ``toc`` tables

    Returns
    -------
    tuple of (ReferenceOptions, TocOptions)
        Options with configured values applied over the defaults

    Raises
    ------
    ConfigError
        If a table or key is unknown, or a value is rejected by the options

    """
    unknown_sections = set(config) - set(_OPTION_SECTIONS)
    if unknown_sections:
        raise ConfigError(f"Unknown configuration sections: {', '.join(sorted(unknown_sections))}")

    built: dict[str, Any] = {}
    for section_name, options_class in _OPTION_SECTIONS.items():
        values = config.get(section_name, {})
        if not isinstance(values, dict):
            raise ConfigError(f"[{section_name}] must be a table, got {type(values).__name__}")

        allowed = {f.name: f.metadata.get("help", "") for f in fields(options_class)}
        unknown_keys = set(values) - set(allowed)
        if unknown_keys:
            accepted = ", ".join(sorted(allowed))
            raise ConfigError(
                f"Unknown keys in [{section_name}]: {', '.join(sorted(unknown_keys))} (accepted: {accepted})"
            )

        try:
            built[section_name] = options_class(**values)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid [{section_name}] configuration: {e}", original_error=e) from e

    return built["references"], built["toc"]


__all__ = [
    "find_config_in_parents",
    "discover_config_file",
    "load_config_file",
    "merge_configs",
    "load_config_with_priority",
    "options_from_config",
]
