# topmark:header:start
#
#   project      : Implementor
#   file         : context.py
#   file_relpath : src/implementor/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Processing context for one generation run.

A `GenerationContext` carries the configuration, the reflected descriptors,
the intermediate artifacts (synthesized text, source file, workspace, compiled
unit, manifest), and the outcome (a `GenerationError` or success) between
pipeline steps. One context is created per run and never shared.

Sections:
    FlowControl:
        Lets a step request early termination of the pipeline.

    GenerationContext:
        The mutable per-run state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from implementor.config.logging import get_logger
from implementor.diagnostic import DiagnosticLog
from implementor.pipeline.status import WriteStatus

if TYPE_CHECKING:
    from pathlib import Path

    from implementor.config import Config
    from implementor.config.logging import ImplementorLogger
    from implementor.core.errors import GenerationError, ImplementorError
    from implementor.introspection.types import MethodSignature, TargetType
    from implementor.pipeline.contracts import Step

logger: ImplementorLogger = get_logger(__name__)

__all__: list[str] = [
    "FlowControl",
    "GenerationContext",
]


@dataclass
class FlowControl:
    """Execution flow control for the current run."""

    halt: bool = False
    reason: str = ""  # short code, e.g. "private_interface"
    at_step: str = ""  # step name that requested the halt


@dataclass
class GenerationContext:
    """Mutable state of a single generation run.

    Attributes:
        subject (object): The type reference to implement (normally a class).
        config (Config): Effective configuration.
        root (Path | None): Output root directory (source mode).
        archive (Path | None): Destination archive (archive mode).
        target (TargetType | None): Descriptor of ``subject`` (set by the extractor).
        methods (tuple[MethodSignature, ...]): Members to implement.
        text (str | None): Synthesized source text.
        normalized (str | None): Encoding-normalized source text.
        source_path (Path | None): Where the source unit was written.
        write_status (WriteStatus): Outcome of the materializer step.
        workspace (Path | None): Temporary workspace (archive mode).
        workspace_removed (bool): True once the workspace is gone.
        compiled_path (Path | None): The compiled unit inside the workspace.
        manifest (bytes | None): Archive manifest contents.
        archive_path (Path | None): The written archive.
        error (GenerationError | None): The failure that halted the run.
        flow (FlowControl): Halt flag and reason.
        diagnostics (DiagnosticLog): Non-fatal diagnostics.
        steps (list[Step]): Steps invoked so far, in order.
    """

    subject: object
    config: Config
    root: Path | None = None
    archive: Path | None = None

    target: TargetType | None = None
    methods: tuple[MethodSignature, ...] = ()
    text: str | None = None
    normalized: str | None = None
    source_path: Path | None = None
    write_status: WriteStatus = WriteStatus.PENDING
    workspace: Path | None = None
    workspace_removed: bool = False
    compiled_path: Path | None = None
    manifest: bytes | None = None
    archive_path: Path | None = None

    error: GenerationError | None = None
    flow: FlowControl = field(default_factory=FlowControl)
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)
    steps: list[Step] = field(default_factory=lambda: [])

    @property
    def output_root(self) -> Path | None:
        """Return the directory the source unit is written under.

        The workspace in archive mode, the caller's root otherwise.
        """
        return self.workspace if self.archive is not None else self.root

    @property
    def ok(self) -> bool:
        """Return True if no step has failed."""
        return self.error is None

    def fail(self, exc: ImplementorError, *, at_step: str) -> None:
        """Record ``exc`` as the run's error and halt the flow."""
        self.error = exc.to_error()
        self.flow.halt = True
        self.flow.reason = exc.kind.value
        self.flow.at_step = at_step
        logger.debug("Generation failed at %s: %s", at_step, exc.message)

    def add_info(self, message: str) -> None:
        """Add an ``info`` diagnostic."""
        self.diagnostics.add_info(message)

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic."""
        self.diagnostics.add_warning(message)
