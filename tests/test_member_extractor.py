"""Tests for method and property extraction."""

from php_autodoc.member_extractor import (
    extract_method,
    extract_properties,
    filter_methods,
    visibility_of,
)
from php_autodoc.models import Method
from php_autodoc.source_nodes import MethodNode, ParameterNode, PropertyNode, TypeNode


def test_visibility_defaults_to_public() -> None:
    """No visibility modifier means public."""
    assert visibility_of([]) == "public"
    assert visibility_of(["static"]) == "public"
    assert visibility_of(["protected", "static"]) == "protected"
    assert visibility_of(["private"]) == "private"


def test_extract_method() -> None:
    """Modifiers, parameters and return type are carried over."""
    node = MethodNode(
        name="charge",
        modifiers=["final", "public", "static"],
        parameters=[
            ParameterNode("amount", type=TypeNode("named", name="int")),
            ParameterNode("currency", default="'USD'"),
            ParameterNode("items", variadic=True),
            ParameterNode("result", by_ref=True),
        ],
        return_type=TypeNode("nullable", parts=[TypeNode("named", name="Receipt")]),
        doc_comment="/** Charge it. */",
    )
    method = extract_method(node)

    assert method.name == "charge"
    assert method.visibility == "public"
    assert method.is_static
    assert method.is_final
    assert not method.is_abstract
    assert method.return_type == "?Receipt"
    assert method.doc_comment == "/** Charge it. */"
    assert [p.name for p in method.parameters] == ["amount", "currency", "items", "result"]
    assert method.parameters[0].type == "int"
    assert method.parameters[1].type is None
    assert method.parameters[1].default == "'USD'"
    assert method.parameters[2].variadic
    assert method.parameters[3].by_ref


def test_extract_properties_one_statement_many_names() -> None:
    """Each declared name becomes its own property sharing the statement's data."""
    node = PropertyNode(
        elements=[("a", "1"), ("b", None)],
        modifiers=["private", "static"],
        type=TypeNode("named", name="int"),
        doc_comment="/** Counters. */",
    )
    props = extract_properties(node)

    assert [(p.name, p.default) for p in props] == [("a", "1"), ("b", None)]
    assert {p.visibility for p in props} == {"private"}
    assert all(p.is_static and p.type == "int" for p in props)
    assert {p.doc_comment for p in props} == {"/** Counters. */"}


def test_private_properties_are_not_filtered() -> None:
    """Property extraction keeps every visibility."""
    node = PropertyNode(elements=[("secret", None)], modifiers=["private"])
    assert len(extract_properties(node)) == 1


def test_filter_methods() -> None:
    """Public is always kept; protected needs a flag; private needs include_private."""
    methods = [Method("a", "public"), Method("b", "protected"), Method("c", "private")]

    def names(**flags: bool) -> list[str]:
        return [m.name for m in filter_methods(methods, **flags)]

    assert names() == ["a"]
    assert names(include_protected=True) == ["a", "b"]
    assert names(include_private=True) == ["a", "b", "c"]
    assert names(include_private=True, include_protected=True) == ["a", "b", "c"]
