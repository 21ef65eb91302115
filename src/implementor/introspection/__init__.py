# topmark:header:start
#
#   project      : Implementor
#   file         : __init__.py
#   file_relpath : src/implementor/introspection/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reflection over interface classes: descriptors, extraction and validation."""

from __future__ import annotations

from implementor.introspection.extractor import describe_type, extract_methods, is_interface
from implementor.introspection.types import (
    MethodSignature,
    Modifier,
    ParameterSpec,
    TargetType,
    TypeRef,
    ValueKind,
    Visibility,
)
from implementor.introspection.validator import validate

__all__ = [
    "MethodSignature",
    "Modifier",
    "ParameterSpec",
    "TargetType",
    "TypeRef",
    "ValueKind",
    "Visibility",
    "describe_type",
    "extract_methods",
    "is_interface",
    "validate",
]
