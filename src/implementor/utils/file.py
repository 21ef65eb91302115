# topmark:header:start
#
#   project      : Implementor
#   file         : file.py
#   file_relpath : src/implementor/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output path utilities for Implementor."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from implementor.config.logging import get_logger
from implementor.constants import SOURCE_EXTENSION

if TYPE_CHECKING:
    from implementor.config.logging import ImplementorLogger
    from implementor.introspection.types import TargetType

logger: ImplementorLogger = get_logger(__name__)


def package_directory(root: Path, package: str) -> Path:
    """Return the directory of ``package`` under ``root`` (``root`` for the unnamed package).

    Args:
        root (Path): The output root directory.
        package (str): Dotted package name, or ``""``.

    Returns:
        Path: ``root / a / b`` for package ``a.b``.
    """
    if not package:
        return root
    return root.joinpath(*package.split("."))


def source_path(root: Path, target: TargetType, suffix: str) -> Path:
    """Return ``root / <package path> / <Simple><Suffix>.py`` for ``target``."""
    return package_directory(root, target.package) / (
        target.implementation_name(suffix) + SOURCE_EXTENSION
    )

