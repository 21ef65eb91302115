# topmark:header:start
#
#   project      : Implementor
#   file         : test_extractor.py
#   file_relpath : tests/introspection/test_extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for interface detection and member extraction."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING

from impl_samples import callbacks, concrete, deferred, diamond, generics, private, shapes

from implementor.introspection import describe_type, extract_methods, is_interface
from implementor.introspection.extractor import (
    member_names,
    package_of,
    resolve_annotations,
    visibility_of,
)
from implementor.introspection.types import Modifier, ValueKind, Visibility
from tests.conftest import parametrize

if TYPE_CHECKING:
    from implementor.introspection.types import MethodSignature


def _by_name(methods: tuple[MethodSignature, ...]) -> dict[str, MethodSignature]:
    return {m.name: m for m in methods}


@parametrize(
    "obj",
    [
        shapes.Sample,
        shapes.Figure,
        shapes.Named,
        diamond.Both,
        diamond.AbstractBoth,
        diamond.Marker,
        generics.Repository,
        deferred.Ledger,
        callbacks.Handler,
    ],
)
def test_interfaces_are_detected(obj: type) -> None:
    assert is_interface(obj)


@parametrize(
    "obj",
    [
        concrete.Concrete,
        concrete.Stateful,
        concrete.Complete,
        concrete.Color,
        int,
        object,
        len,
        "not a type",
    ],
)
def test_non_interfaces_are_rejected(obj: object) -> None:
    assert not is_interface(obj)


def test_describe_type_of_nested_and_top_level_modules() -> None:
    target = describe_type(shapes.Sample)
    assert target.module == "impl_samples.shapes"
    assert target.package == "impl_samples"
    assert target.simple_name == "Sample"
    assert target.qualified_name == "impl_samples.shapes.Sample"
    assert target.implementation_module("Impl") == "impl_samples.SampleImpl"

    import flat_api

    flat = describe_type(flat_api.Flat)
    assert flat.package == ""
    assert flat.implementation_module("Impl") == "FlatImpl"


def test_package_of_unknown_module_uses_dotted_prefix() -> None:
    assert package_of("no.such.module") == "no.such"
    assert package_of("lonely") == ""


def test_visibility() -> None:
    assert visibility_of(shapes.Sample) is Visibility.PUBLIC
    assert visibility_of(private._Hidden) is Visibility.PRIVATE
    assert visibility_of(private.Leaky._Token) is Visibility.PRIVATE
    assert visibility_of(private.make_local()) is Visibility.LOCAL


def test_extract_methods_sorted_with_kinds() -> None:
    methods = extract_methods(describe_type(shapes.Sample))
    assert [m.name for m in methods] == ["bar", "baz"]
    bar, baz = methods
    assert bar.return_type.text == "int"
    assert bar.return_type.kind is ValueKind.NUMERIC
    assert baz.return_type.kind is ValueKind.BOOLEAN
    assert [p.name for p in baz.parameters] == ["self", "s"]
    assert baz.parameters[1].type.text == "str"
    assert [e.text for e in baz.exceptions] == ["OSError"]


def test_extract_methods_modifiers() -> None:
    methods = _by_name(extract_methods(describe_type(shapes.Figure)))
    assert Modifier.ABSTRACT in methods["area"].modifiers
    assert Modifier.ABSTRACT not in methods["area"].rendered_modifiers
    assert Modifier.PROPERTY in methods["label"].modifiers
    assert not methods["label"].has_setter
    assert methods["color"].has_setter
    assert Modifier.STATIC in methods["unit"].modifiers
    assert Modifier.CLASS in methods["create"].modifiers
    assert Modifier.ASYNC in methods["fetch"].modifiers
    assert methods["explode"].return_type.kind is ValueKind.NEVER
    assert methods["scale"].return_type.kind is ValueKind.VOID
    assert methods["ratio"].return_type.kind is ValueKind.NUMERIC


def test_extract_methods_parameter_kinds() -> None:
    methods = _by_name(extract_methods(describe_type(shapes.Figure)))
    scale = methods["scale"].parameters
    assert [p.kind for p in scale] == [
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.KEYWORD_ONLY,
    ]
    assert scale[2].has_default
    create = methods["create"].parameters
    assert [p.kind for p in create][1:] == [
        inspect.Parameter.VAR_POSITIONAL,
        inspect.Parameter.VAR_KEYWORD,
    ]


def test_unresolved_exceptions_are_kept_apart() -> None:
    load = _by_name(extract_methods(describe_type(shapes.Figure)))["load"]
    assert [e.text for e in load.exceptions] == ["KeyError"]
    assert load.unresolved_exceptions == ("NoSuchError",)
    assert load.return_type.text is None


def test_private_protocol_members_are_not_collected() -> None:
    assert member_names(shapes.Named) == ["describe", "name"]


def test_diamond_members_are_emitted_once() -> None:
    for cls in (diamond.Both, diamond.AbstractBoth):
        names = [m.name for m in extract_methods(describe_type(cls))]
        assert names == ["common", "left", "right"]


def test_empty_interface_has_no_members() -> None:
    assert extract_methods(describe_type(diamond.Marker)) == ()


def test_non_interface_has_no_members() -> None:
    assert extract_methods(describe_type(concrete.Stateful)) == ()


def test_dunder_protocol_members_are_collected() -> None:
    assert member_names(callbacks.Handler) == ["__call__"]
    assert member_names(callbacks.SizedHandler) == ["__call__", "__len__"]


def test_dunder_member_signature() -> None:
    (call,) = extract_methods(describe_type(callbacks.Handler))
    assert call.name == "__call__"
    assert [p.name for p in call.parameters] == ["self", "event"]
    assert call.return_type.kind is ValueKind.BOOLEAN


def test_type_checking_only_names_stay_unresolved() -> None:
    hints = resolve_annotations(deferred.Ledger.ok)
    assert hints == {"amount": "Decimal", "return": bool}


def test_unresolved_annotations_keep_their_value_kind() -> None:
    methods = _by_name(extract_methods(describe_type(deferred.Ledger)))
    assert methods["ok"].return_type.kind is ValueKind.BOOLEAN
    assert methods["total"].return_type.kind is ValueKind.NUMERIC
    amount = methods["ok"].parameters[1].type
    assert amount.text == "'Decimal'"
    assert amount.unresolved == ("Decimal",)
    assert amount.classes == ()
