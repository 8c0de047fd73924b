"""Build method and property records from parsed member nodes."""

from php_autodoc.models import Method, Parameter, Property
from php_autodoc.source_nodes import MethodNode, ParameterNode, PropertyNode
from php_autodoc.type_resolver import convert_type


def visibility_of(modifiers: list[str]) -> str:
    """Return the member visibility; public when no modifier says otherwise."""
    if "private" in modifiers:
        return "private"
    if "protected" in modifiers:
        return "protected"
    return "public"


def extract_parameter(node: ParameterNode) -> Parameter:
    """Build a parameter record."""
    return Parameter(
        name=node.name,
        type=convert_type(node.type),
        default=node.default,
        by_ref=node.by_ref,
        variadic=node.variadic,
    )


def extract_method(node: MethodNode) -> Method:
    """Build a method record. No visibility filtering happens here."""
    return Method(
        name=node.name,
        visibility=visibility_of(node.modifiers),
        is_static="static" in node.modifiers,
        is_abstract="abstract" in node.modifiers,
        is_final="final" in node.modifiers,
        parameters=[extract_parameter(p) for p in node.parameters],
        return_type=convert_type(node.return_type),
        doc_comment=node.doc_comment,
    )


def extract_properties(node: PropertyNode) -> list[Property]:
    """Build one property record per name declared by the statement.

    The records share visibility, type and doc comment. Properties are
    never filtered by visibility.
    """
    visibility = visibility_of(node.modifiers)
    prop_type = convert_type(node.type)
    return [
        Property(
            name=name,
            visibility=visibility,
            is_static="static" in node.modifiers,
            type=prop_type,
            default=default,
            doc_comment=node.doc_comment,
        )
        for name, default in node.elements
    ]


def filter_methods(
    methods: list[Method],
    *,
    include_private: bool = False,
    include_protected: bool = False,
) -> list[Method]:
    """Drop the methods the visibility flags exclude.

    Public methods are always kept. Protected methods are kept when either
    flag is set, private methods only with ``include_private``.
    """
    keep = {"public"}
    if include_private or include_protected:
        keep.add("protected")
    if include_private:
        keep.add("private")
    return [m for m in methods if m.visibility in keep]
