# topmark:header:start
#
#   project      : Implementor
#   file         : __init__.py
#   file_relpath : src/implementor/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for Implementor.

Exposes the frozen `Config` snapshot, the `MutableConfig` builder, and the
logging helpers (``implementor.config.logging``).
"""

from __future__ import annotations

from implementor.config import logging
from implementor.config.io import ConfigLoadError
from implementor.config.model import Config, MutableConfig, ensure_config

__all__ = ["Config", "ConfigLoadError", "MutableConfig", "ensure_config", "logging"]
