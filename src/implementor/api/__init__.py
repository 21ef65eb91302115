# topmark:header:start
#
#   project      : Implementor
#   file         : __init__.py
#   file_relpath : src/implementor/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public Implementor API (stable surface).

Run the generator programmatically without going through the CLI:

```python
from implementor import api

result = api.implement("mypkg.shapes:Shape", "build/src")
if not result.ok:
    print(result.error.kind, result.error)

api.implement_archive(Shape, "dist/shape-impl.zip").raise_for_error()
print(api.preview(Shape))
```

Notes:
- ``target`` accepts a class or a type-reference string (``pkg.mod:Name`` or
  ``pkg.mod.Name``).
- ``config`` accepts a frozen `Config` or a plain mapping shaped like the
  ``[implementor]`` TOML table; unset keys keep their defaults. No config file
  is discovered implicitly.
- Generation failures are returned as `GenerationResult.error` values, not
  raised. Type lookup failures raise `TypeLookupError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from implementor.api.runtime import run_pipeline
from implementor.api.types import GenerationResult
from implementor.config.logging import get_logger
from implementor.constants import IMPLEMENTOR_VERSION
from implementor.core.errors import (
    ErrorKind,
    GenerationError,
    ImplementorError,
    TypeLookupError,
)
from implementor.introspection.lookup import resolve_type
from implementor.pipeline.pipelines import Pipeline

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from implementor.config import Config
    from implementor.config.logging import ImplementorLogger

logger: ImplementorLogger = get_logger(__name__)

__all__: list[str] = [
    "ErrorKind",
    "GenerationError",
    "GenerationResult",
    "ImplementorError",
    "TypeLookupError",
    "implement",
    "implement_archive",
    "preview",
    "resolve_type",
    "version",
]


def implement(
    target: object,
    root: Path | str,
    *,
    config: Config | Mapping[str, Any] | None = None,
) -> GenerationResult:
    """Generate the stub implementation source of ``target`` under ``root``.

    The file is written to ``<root>/<package path>/<Name><Suffix>.py``,
    replacing any existing file.

    Args:
        target (object): The interface (class or type-reference string).
        root (Path | str): Output root directory.
        config (Config | Mapping[str, Any] | None): Optional configuration.

    Returns:
        GenerationResult: ``source_path`` is set on success.

    Raises:
        TypeLookupError: If ``target`` is a string that does not resolve.
    """
    ctx = run_pipeline(Pipeline.SOURCE, target, config=config, root=root)
    return GenerationResult.from_context(ctx)


def implement_archive(
    target: object,
    archive: Path | str,
    *,
    config: Config | Mapping[str, Any] | None = None,
) -> GenerationResult:
    """Generate, compile and package the stub implementation of ``target``.

    The archive holds a manifest and the single compiled unit. The temporary
    workspace is removed whatever the outcome; the archive itself is not
    written atomically.

    Args:
        target (object): The interface (class or type-reference string).
        archive (Path | str): Destination archive path.
        config (Config | Mapping[str, Any] | None): Optional configuration.

    Returns:
        GenerationResult: ``archive_path`` is set on success.

    Raises:
        TypeLookupError: If ``target`` is a string that does not resolve.
    """
    ctx = run_pipeline(Pipeline.ARCHIVE, target, config=config, archive=archive)
    return GenerationResult.from_context(ctx)


def preview(
    target: object,
    *,
    config: Config | Mapping[str, Any] | None = None,
) -> str:
    """Return the normalized source text of the stub implementation.

    Nothing is written.

    Args:
        target (object): The interface (class or type-reference string).
        config (Config | Mapping[str, Any] | None): Optional configuration.

    Returns:
        str: The source text.

    Raises:
        ImplementorError: If validation fails.
        TypeLookupError: If ``target`` is a string that does not resolve.
    """
    ctx = run_pipeline(Pipeline.RENDER, target, config=config)
    result = GenerationResult.from_context(ctx).raise_for_error()
    return result.text or ""


def version() -> str:
    """Return the installed Implementor version string."""
    return IMPLEMENTOR_VERSION
