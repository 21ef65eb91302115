# topmark:header:start
#
#   project      : Implementor
#   file         : pipelines.py
#   file_relpath : src/implementor/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipeline variants (immutable, typed step sequences).

Overview
--------
- ``RENDER``: extract → validate → synthesize → normalize
- ``PREVIEW``: RENDER + stdout sink
- ``SOURCE``: RENDER + write to the output root
- ``ARCHIVE``: workspace → SOURCE (into the workspace) → compile → manifest → archive

Notes:
* Pipelines are immutable (Final[tuple[Step, ...]]) and steps are
  instantiated objects (not functions).
* Workspace cleanup is not a step: the runner performs it in a ``finally``
  block so it also runs after a failure.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from implementor.pipeline.contracts import Step

from .steps import (
    compiler,
    extractor,
    materializer,
    normalizer,
    packager,
    synthesizer,
    validator,
    workspace,
)

# Reflect, check and render (no output):
RENDER_PIPELINE: Final[tuple[Step, ...]] = (
    extractor.ExtractorStep(),  # Describe the target and enumerate its members
    validator.ValidatorStep(),  # Reject non-interfaces and private types
    synthesizer.SynthesizerStep(),  # Render the source text
    normalizer.NormalizerStep(),  # Escape non-ASCII text in literals/comments
)

PREVIEW_PIPELINE: Final[tuple[Step, ...]] = RENDER_PIPELINE + (
    materializer.MaterializerStep(materializer.StdoutSink()),  # Print the source unit
)

SOURCE_PIPELINE: Final[tuple[Step, ...]] = RENDER_PIPELINE + (
    materializer.MaterializerStep(),  # Write the source unit under the output root
)

ARCHIVE_PIPELINE: Final[tuple[Step, ...]] = (
    (workspace.WorkspaceStep(),)  # Allocate the temporary workspace
    + SOURCE_PIPELINE
    + (
        compiler.CompilerStep(),  # Byte-compile the source unit
        packager.ManifestStep(),  # Build the manifest
        packager.ArchiveStep(),  # Write the archive
    )
)


class Pipeline(tuple[Step, ...], Enum):
    """Available generation pipelines, mapped to their step sequences."""

    RENDER = RENDER_PIPELINE
    PREVIEW = PREVIEW_PIPELINE
    SOURCE = SOURCE_PIPELINE
    ARCHIVE = ARCHIVE_PIPELINE

    @property
    def steps(self) -> tuple[Step, ...]:
        """Return the instantiated, ordered step sequence for this pipeline."""
        return self.value
