# topmark:header:start
#
#   project      : Implementor
#   file         : constants.py
#   file_relpath : src/implementor/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Implementor Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    IMPLEMENTOR_VERSION: str = get_version("implementor")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    IMPLEMENTOR_VERSION = "0.0.0"

# Suffix appended to the interface's simple name to name the generated class:
IMPLEMENT_SUFFIX: str = "Impl"

SOURCE_EXTENSION: str = ".py"
COMPILED_EXTENSION: str = ".pyc"

# Archive layout
MANIFEST_ENTRY_NAME: str = "META-INF/MANIFEST.MF"
MANIFEST_VERSION_ATTRIBUTE: str = "Manifest-Version"
MANIFEST_VERSION: str = "1.0"

# Prefix for the temporary workspace created next to the destination archive:
WORKSPACE_PREFIX: str = "temp"

# Configuration discovery
CONFIG_FILE_NAME: str = "implementor.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
CONFIG_TABLE: str = "implementor"

LOG_LEVEL_ENV: str = "IMPLEMENTOR_LOG_LEVEL"
