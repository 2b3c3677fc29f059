#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmodel/constants.py
"""Default values shared across docmodel modules."""

from __future__ import annotations

# Reference assignment
DEFAULT_FALLBACK_SLUG = "section"
DEFAULT_SUFFIX_START = 2

# Configuration discovery
CONFIG_FILENAMES = [".docmodel.toml", ".docmodel.yaml", ".docmodel.yml", ".docmodel.json"]
PYPROJECT_TOOL_SECTION = "docmodel"
CONFIG_ENV_VAR = "DOCMODEL_CONFIG"

# CLI
DEFAULT_LOG_LEVEL = "WARNING"
TOC_INDENT = "  "
