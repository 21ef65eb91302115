# topmark:header:start
#
#   project      : Implementor
#   file         : status.py
#   file_relpath : src/implementor/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for the generation pipeline."""

from __future__ import annotations

from enum import Enum


class WriteStatus(Enum):
    """Outcome of the materializer step."""

    PENDING = "pending"
    WRITTEN = "written"
    PREVIEWED = "previewed"
