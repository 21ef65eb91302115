# topmark:header:start
#
#   project      : Implementor
#   file         : test_pipelines.py
#   file_relpath : tests/pipeline/test_pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the named pipeline variants."""

from __future__ import annotations

from implementor.pipeline.pipelines import Pipeline
from implementor.pipeline.steps.materializer import (
    FileSystemSink,
    MaterializerStep,
    StdoutSink,
)
from tests.conftest import mark_pipeline


@mark_pipeline
def test_every_pipeline_is_a_distinct_member() -> None:
    assert len(Pipeline) == 4
    assert Pipeline.SOURCE is not Pipeline.PREVIEW
    assert [p.name for p in Pipeline] == ["RENDER", "PREVIEW", "SOURCE", "ARCHIVE"]


@mark_pipeline
def test_source_and_preview_use_their_own_sinks() -> None:
    source_writer = Pipeline.SOURCE.steps[-1]
    preview_writer = Pipeline.PREVIEW.steps[-1]

    assert isinstance(source_writer, MaterializerStep)
    assert isinstance(preview_writer, MaterializerStep)
    assert isinstance(source_writer.sink, FileSystemSink)
    assert isinstance(preview_writer.sink, StdoutSink)


@mark_pipeline
def test_steps_compare_by_identity() -> None:
    assert MaterializerStep(StdoutSink()) != MaterializerStep()
