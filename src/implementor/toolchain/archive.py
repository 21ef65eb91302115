# topmark:header:start
#
#   project      : Implementor
#   file         : archive.py
#   file_relpath : src/implementor/toolchain/archive.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Manifest and archive writing.

The archive is a zip file holding exactly two members::

    META-INF/MANIFEST.MF            Manifest-Version: 1.0
    <package/path>/<Name><Suffix>.pyc
"""

from __future__ import annotations

import shutil
import zipfile
from typing import TYPE_CHECKING

from implementor.config.logging import get_logger
from implementor.constants import (
    COMPILED_EXTENSION,
    MANIFEST_ENTRY_NAME,
    MANIFEST_VERSION,
    MANIFEST_VERSION_ATTRIBUTE,
)
from implementor.core.errors import ErrorKind, ImplementorError

if TYPE_CHECKING:
    from pathlib import Path

    from implementor.config.logging import ImplementorLogger
    from implementor.introspection.types import TargetType

logger: ImplementorLogger = get_logger(__name__)

# Manifest lines end with CRLF and the main section ends with an empty line.
_MANIFEST_EOL = "\r\n"


def build_manifest(version: str = MANIFEST_VERSION) -> bytes:
    """Return the manifest bytes carrying only the mandatory version attribute."""
    return f"{MANIFEST_VERSION_ATTRIBUTE}: {version}{_MANIFEST_EOL}{_MANIFEST_EOL}".encode()


def archive_entry_name(target: TargetType, suffix: str) -> str:
    """Return ``<package/path>/<Simple><Suffix>.pyc`` (no directory for top-level modules)."""
    parts = target.package.split(".") if target.package else []
    return "/".join([*parts, target.implementation_name(suffix) + COMPILED_EXTENSION])


def write_archive(archive: Path, *, manifest: bytes, entry_name: str, compiled: Path) -> None:
    """Write ``archive`` with the manifest and one compiled entry.

    An existing file at ``archive`` is replaced. On failure the archive is left
    in whatever state the partial write produced.

    Args:
        archive (Path): Destination archive path.
        manifest (bytes): Manifest contents (see `build_manifest`).
        entry_name (str): Archive member name of the compiled artifact.
        compiled (Path): The compiled artifact to copy into the archive.

    Raises:
        ImplementorError: ``ARCHIVE_WRITE_FAILURE`` on any I/O failure.
    """
    try:
        with zipfile.ZipFile(archive, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            zf.writestr(MANIFEST_ENTRY_NAME, manifest)
            info = zipfile.ZipInfo.from_file(compiled, arcname=entry_name)
            info.compress_type = zipfile.ZIP_DEFLATED
            with compiled.open("rb") as src, zf.open(info, "w") as dst:
                shutil.copyfileobj(src, dst)
    except (OSError, ValueError, zipfile.BadZipFile) as exc:
        raise ImplementorError(
            ErrorKind.ARCHIVE_WRITE_FAILURE,
            f"Unable to write archive {archive}: {exc}",
        ) from exc
    logger.info("Wrote archive %s (%s)", archive, entry_name)
