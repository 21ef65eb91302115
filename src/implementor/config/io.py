# topmark:header:start
#
#   project      : Implementor
#   file         : io.py
#   file_relpath : src/implementor/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module provides I/O helpers for reading Implementor configuration from
on-disk TOML files (``implementor.toml`` / ``pyproject.toml``) and for rendering
the effective configuration back to TOML text.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from implementor.config.logging import get_logger
from implementor.constants import CONFIG_TABLE, PYPROJECT_FILE_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from implementor.config.logging import ImplementorLogger

TomlTable = dict[str, Any]

logger: ImplementorLogger = get_logger(__name__)


class ConfigLoadError(Exception):
    """Raised when a configuration file cannot be read or parsed."""


def load_toml_dict(path: Path) -> TomlTable:
    """Load a TOML file into a plain dict.

    Args:
        path (Path): Path to the TOML file.

    Returns:
        TomlTable: The parsed document, unwrapped to builtin types.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigLoadError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigLoadError(f"Invalid TOML in {path}: {exc}") from exc
    logger.debug("Loaded TOML from %s", path)
    return cast("TomlTable", doc.unwrap())


def extract_table(data: TomlTable, *, path: Path) -> TomlTable | None:
    """Return the Implementor table from a parsed TOML document.

    ``pyproject.toml`` files carry the settings under ``[tool.implementor]``;
    ``implementor.toml`` files under ``[implementor]``, or at the top level when
    that table is absent.

    Args:
        data (TomlTable): Parsed TOML document.
        path (Path): Where the document came from (selects the lookup rule).

    Returns:
        TomlTable | None: The settings table, or None if a ``pyproject.toml``
        has no ``[tool.implementor]`` section.
    """
    if path.name == PYPROJECT_FILE_NAME:
        tool: Any = data.get("tool", {})
        section: Any = tool.get(CONFIG_TABLE) if isinstance(tool, dict) else None
        if not isinstance(section, dict):
            logger.debug("[tool.%s] section missing in %s", CONFIG_TABLE, path)
            return None
        return cast("TomlTable", section)
    section = data.get(CONFIG_TABLE)
    if isinstance(section, dict):
        return cast("TomlTable", section)
    return data


def to_toml(table: TomlTable) -> str:
    """Render a settings table as a TOML document under ``[implementor]``.

    Args:
        table (TomlTable): Flat settings mapping; ``None`` values are omitted
            since TOML has no null.

    Returns:
        str: The TOML text.
    """
    doc = tomlkit.document()
    section = tomlkit.table()
    for key, value in table.items():
        if value is None:
            continue
        section.add(key, value)
    doc.add(CONFIG_TABLE, section)
    return tomlkit.dumps(doc)
