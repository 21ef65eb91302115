# topmark:header:start
#
#   project      : Implementor
#   file         : workspace.py
#   file_relpath : src/implementor/toolchain/workspace.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Temporary workspace management for archive-mode generation."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from implementor.config.logging import get_logger
from implementor.core.errors import ErrorKind, ImplementorError

if TYPE_CHECKING:
    from implementor.config.logging import ImplementorLogger

logger: ImplementorLogger = get_logger(__name__)


def create_workspace(archive: Path, *, prefix: str) -> Path:
    """Create a uniquely named directory next to the destination archive.

    Args:
        archive (Path): Destination archive path; only its parent is used.
        prefix (str): Directory name prefix.

    Returns:
        Path: The new, empty workspace directory.

    Raises:
        ImplementorError: ``WORKSPACE_CREATION_ERROR`` if the parent cannot be
            resolved or the directory cannot be created.
    """
    try:
        parent = Path(archive).resolve().parent
        workspace = Path(tempfile.mkdtemp(prefix=prefix, dir=parent))
    except (OSError, RuntimeError) as exc:
        raise ImplementorError(
            ErrorKind.WORKSPACE_CREATION_ERROR,
            f"Unable to create temporary directory next to {archive}: {exc}",
        ) from exc
    logger.debug("Created workspace %s", workspace)
    return workspace


def remove_workspace(workspace: Path) -> None:
    """Delete ``workspace`` recursively, files before their directories.

    Raises:
        OSError: If any file or directory cannot be removed.
    """
    if not workspace.exists():
        logger.trace("Workspace %s already removed", workspace)
        return
    shutil.rmtree(workspace)
    logger.debug("Removed workspace %s", workspace)
