"""Convert parsed type expressions to their canonical text form."""

from php_autodoc.source_nodes import TypeNode

UNKNOWN_TYPE = "mixed"


def convert_type(type_node: TypeNode | None) -> str | None:
    """Render a type expression as text.

    ``?T`` for nullable types, ``A|B`` for unions, ``A&B`` for
    intersections. Anything unrecognised becomes ``mixed``.
    """
    if type_node is None:
        return None

    kind = type_node.kind
    if kind == "named" and type_node.name:
        return type_node.name
    if kind == "nullable" and type_node.parts:
        return "?" + (convert_type(type_node.parts[0]) or UNKNOWN_TYPE)
    if kind == "union" and type_node.parts:
        return "|".join(convert_type(p) or UNKNOWN_TYPE for p in type_node.parts)
    if kind == "intersection" and type_node.parts:
        return "&".join(convert_type(p) or UNKNOWN_TYPE for p in type_node.parts)
    return UNKNOWN_TYPE
