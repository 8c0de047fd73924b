"""Parse PHP source into declaration-tree nodes.

Syntax analysis is done by tree-sitter with the PHP grammar. This module
only walks the concrete syntax tree and keeps the structural facts the
extractor needs: namespaces, class imports, class-like declarations and
their members, each with the doc comment attached to it.
"""

import tree_sitter_php
from tree_sitter import Language, Node, Parser

from php_autodoc.errors import ParseError
from php_autodoc.source_nodes import (
    DeclarationNode,
    MethodNode,
    NamespaceNode,
    ParameterNode,
    PropertyNode,
    SourceNode,
    TypeNode,
    UseNode,
)

PHP_LANGUAGE = Language(tree_sitter_php.language_php())

DECLARATION_TYPES = {
    "class_declaration": "class",
    "interface_declaration": "interface",
    "trait_declaration": "trait",
}
NAME_TYPES = {"name", "qualified_name", "namespace_name"}
MODIFIER_TYPES = {
    "visibility_modifier",
    "static_modifier",
    "abstract_modifier",
    "final_modifier",
    "readonly_modifier",
    "var_modifier",
}
PARAMETER_TYPES = {
    "simple_parameter",
    "variadic_parameter",
    "property_promotion_parameter",
}
NAMED_TYPE_TYPES = {"named_type", "primitive_type", "bottom_type", "name", "qualified_name"}
USE_CLAUSE_TYPES = {"namespace_use_clause", "namespace_use_group_clause"}
# use function / use const import non-class symbols.
NON_CLASS_IMPORTS = {"function", "const"}


def parse_source(content: bytes | str) -> list[SourceNode]:
    """Parse one file and return its statement nodes in file order.

    Raises ParseError when the file is not valid UTF-8 or contains a
    syntax error.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    else:
        try:
            content.decode("utf-8")
        except UnicodeDecodeError as e:
            msg = "source is not valid UTF-8"
            raise ParseError(msg) from e

    tree = Parser(PHP_LANGUAGE).parse(content)
    root = tree.root_node
    if root.has_error:
        bad = _first_error(root) or root
        msg = f"syntax error near line {bad.start_point[0] + 1}"
        raise ParseError(msg)

    nodes: list[SourceNode] = []
    _collect_statements(root.named_children, nodes)
    return nodes


def _text(node: Node | None) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8")


def _first_error(node: Node) -> Node | None:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _collect_statements(children: list[Node], out: list[SourceNode]) -> None:
    for child in children:
        kind = child.type
        if kind == "namespace_definition":
            name = child.child_by_field_name("name")
            out.append(NamespaceNode(name=_text(name) or None))
            body = child.child_by_field_name("body")
            if body is not None:
                _collect_statements(body.named_children, out)
        elif kind == "namespace_use_declaration":
            imports = _use_imports(child)
            if imports:
                out.append(UseNode(imports=imports))
        elif kind in DECLARATION_TYPES:
            out.append(_declaration(child, DECLARATION_TYPES[kind]))


def _doc_comment(node: Node) -> str | None:
    """Return the /** */ comment directly preceding ``node``, if any."""
    prev = node.prev_named_sibling
    if prev is not None and prev.type == "comment":
        text = _text(prev)
        if text.startswith("/**"):
            return text
    return None


def _is_non_class_import(node: Node) -> bool:
    return any(c.type in NON_CLASS_IMPORTS for c in node.children)


def _use_imports(node: Node) -> list[tuple[str, str]]:
    """Collect ``(alias, fqn)`` pairs from a use statement."""
    if _is_non_class_import(node):
        return []

    prefix = ""
    group = None
    for child in node.named_children:
        if child.type == "namespace_name":
            prefix = _text(child)
        elif child.type == "namespace_use_group":
            group = child

    clauses = group.named_children if group is not None else node.named_children
    imports: list[tuple[str, str]] = []
    for clause in clauses:
        if clause.type not in USE_CLAUSE_TYPES or _is_non_class_import(clause):
            continue
        # The imported name always comes before its alias.
        target = next((c for c in clause.named_children if c.type in NAME_TYPES), None)
        if target is None:
            continue
        fqn = _text(target).lstrip("\\")
        if prefix:
            fqn = f"{prefix}\\{fqn}"

        alias_node = clause.child_by_field_name("alias")
        if alias_node is None:
            aliasing = next(
                (c for c in clause.named_children if c.type == "namespace_aliasing_clause"),
                None,
            )
            if aliasing is not None and aliasing.named_children:
                alias_node = aliasing.named_children[-1]
        alias = _text(alias_node) if alias_node is not None else fqn.split("\\")[-1]
        imports.append((alias, fqn))
    return imports


def _references(node: Node) -> list[str]:
    return [_text(c) for c in node.named_children if c.type in NAME_TYPES]


def _declaration(node: Node, kind: str) -> DeclarationNode:
    decl = DeclarationNode(
        kind=kind,
        name=_text(node.child_by_field_name("name")),
        doc_comment=_doc_comment(node),
    )
    for child in node.named_children:
        if child.type == "base_clause":
            decl.extends = _references(child)
        elif child.type == "class_interface_clause":
            decl.implements = _references(child)

    body = node.child_by_field_name("body")
    if body is None:
        return decl
    for member in body.named_children:
        if member.type == "method_declaration":
            decl.members.append(_method(member))
        elif member.type == "property_declaration":
            decl.members.append(_property(member))
        elif member.type == "use_declaration":
            decl.mixins.extend(_references(member))
    return decl


def _modifiers(node: Node) -> list[str]:
    modifiers = []
    for child in node.children:
        if child.type in MODIFIER_TYPES:
            # private(set) and friends keep only the keyword.
            modifiers.append(_text(child).split("(")[0].strip().lower())
    return modifiers


def _method(node: Node) -> MethodNode:
    params = node.child_by_field_name("parameters")
    parameters = []
    if params is not None:
        parameters = [
            _parameter(p) for p in params.named_children if p.type in PARAMETER_TYPES
        ]
    return MethodNode(
        name=_text(node.child_by_field_name("name")),
        modifiers=_modifiers(node),
        parameters=parameters,
        return_type=_type(node.child_by_field_name("return_type")),
        doc_comment=_doc_comment(node),
    )


def _parameter(node: Node) -> ParameterNode:
    name_node = node.child_by_field_name("name")
    by_ref = any(c.type in ("reference_modifier", "&") for c in node.children)
    if name_node is not None and name_node.type == "by_ref":
        by_ref = True
    default = node.child_by_field_name("default_value")
    return ParameterNode(
        name=_text(name_node).lstrip("&$ \t"),
        type=_type(node.child_by_field_name("type")),
        default=_literal(default) if default is not None else None,
        by_ref=by_ref,
        variadic=node.type == "variadic_parameter",
    )


def _property(node: Node) -> PropertyNode:
    elements: list[tuple[str, str | None]] = []
    for child in node.named_children:
        if child.type != "property_element":
            continue
        name_node = child.child_by_field_name("name")
        if name_node is None:
            name_node = next(
                (c for c in child.named_children if c.type == "variable_name"), None
            )
        default = child.child_by_field_name("default_value")
        if default is None:
            initializer = next(
                (c for c in child.named_children if c.type == "property_initializer"),
                None,
            )
            if initializer is not None and initializer.named_children:
                default = initializer.named_children[0]
        elements.append(
            (
                _text(name_node).lstrip("$"),
                _literal(default) if default is not None else None,
            ),
        )
    return PropertyNode(
        elements=elements,
        modifiers=_modifiers(node),
        type=_type(node.child_by_field_name("type")),
        doc_comment=_doc_comment(node),
    )


def _type(node: Node | None) -> TypeNode | None:
    if node is None:
        return None
    kind = node.type
    if kind in NAMED_TYPE_TYPES:
        return TypeNode("named", name=_text(node))
    parts = [t for t in (_type(c) for c in node.named_children) if t is not None]
    if kind == "optional_type":
        return TypeNode("nullable", parts=parts[:1])
    if kind == "union_type":
        return TypeNode("union", parts=parts)
    if kind == "intersection_type":
        return TypeNode("intersection", parts=parts)
    return TypeNode(kind)


def _literal(node: Node) -> str:
    """Render a default-value expression as short literal text."""
    kind = node.type
    if kind in ("string", "encapsed_string"):
        text = _text(node).lstrip("bB")
        if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"":
            text = text[1:-1]
        return f"'{text}'"
    if kind in ("integer", "float", "boolean", "null", "name", "qualified_name"):
        return _text(node)
    if kind == "array_creation_expression":
        return "[]"
    return "unknown"
