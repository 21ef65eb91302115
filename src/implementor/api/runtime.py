# topmark:header:start
#
#   project      : Implementor
#   file         : runtime.py
#   file_relpath : src/implementor/api/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime helpers for the public API.

These helpers build a `GenerationContext`, run a pipeline against it and are
shared by the CLI. They are not re-exported from `implementor.api`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from implementor.config import ensure_config
from implementor.config.logging import get_logger
from implementor.introspection.lookup import resolve_type
from implementor.pipeline import runner
from implementor.pipeline.context import GenerationContext

if TYPE_CHECKING:
    from collections.abc import Mapping

    from implementor.config import Config
    from implementor.config.logging import ImplementorLogger
    from implementor.pipeline.pipelines import Pipeline

logger: ImplementorLogger = get_logger(__name__)

__all__: list[str] = [
    "resolve_subject",
    "run_pipeline",
]


def resolve_subject(target: object, config: Config) -> object:
    """Return the object to implement.

    Strings are type references resolved with `resolve_type`, using the
    configured search paths; anything else is returned as is.

    Raises:
        TypeLookupError: If a string reference does not resolve.
    """
    if isinstance(target, str):
        return resolve_type(target, search_paths=config.search_paths)
    return target


def run_pipeline(
    pipeline: Pipeline,
    target: object,
    *,
    config: Config | Mapping[str, Any] | None = None,
    root: Path | str | None = None,
    archive: Path | str | None = None,
) -> GenerationContext:
    """Run ``pipeline`` for ``target`` and return the final context.

    Args:
        pipeline (Pipeline): The pipeline to run.
        target (object): A class or a type-reference string.
        config (Config | Mapping[str, Any] | None): Configuration.
        root (Path | str | None): Output root (source mode).
        archive (Path | str | None): Destination archive (archive mode).

    Returns:
        GenerationContext: The finished context.

    Raises:
        TypeLookupError: If ``target`` is a string that does not resolve.
    """
    cfg: Config = ensure_config(config)
    subject = resolve_subject(target, cfg)
    ctx = GenerationContext(
        subject=subject,
        config=cfg,
        root=Path(root) if root is not None else None,
        archive=Path(archive) if archive is not None else None,
    )
    logger.info("Running %s pipeline for %r", pipeline.name, subject)
    return runner.run(ctx, pipeline.steps)
