"""Logic for rendering one declaration page."""

from collections.abc import Callable

from php_autodoc.docblock import format_docblock, param_description, return_description
from php_autodoc.markdown import md_code, md_codeblock, md_table
from php_autodoc.models import Declaration, Method, Parameter, Property

KIND_LABELS = {"class": "Class", "interface": "Interface", "mixin": "Trait"}


def render_class_page(
    declaration: Declaration,
    *,
    source_label: str,
    source_href: str,
    link_for: Callable[[str], str],
) -> str:
    """Render a declaration page in Markdown.

    ``link_for`` turns a fully-qualified name into link text relative to
    this page; ``source_href`` is the page-relative link to the source file.
    """
    header = [
        f"**Source:** [{source_label}]({source_href})",
        f"**Type:** {KIND_LABELS.get(declaration.kind, declaration.kind)}",
    ]
    if declaration.namespace:
        header.append(f"**Namespace:** {md_code(declaration.namespace)}")
    parts = [f"# {declaration.name}", "", "  \n".join(header), ""]

    parts.extend(_render_relations(declaration, link_for))

    description = format_docblock(declaration.doc_comment)
    if description:
        parts += ["## Description", "", description, ""]

    if declaration.properties:
        parts += ["## Properties", "", _properties_table(declaration.properties), ""]

    if declaration.methods:
        parts += ["## Methods", ""]
        for method in declaration.methods:
            parts.extend(_render_method(method))

    return "\n".join(parts).rstrip() + "\n"


def _render_relations(
    declaration: Declaration,
    link_for: Callable[[str], str],
) -> list[str]:
    """Render extends / implements / trait lines."""
    lines = []
    if declaration.super_type:
        lines.append(f"**Extends:** {link_for(declaration.super_type)}")
    if declaration.implemented_contracts:
        label = "Extends" if declaration.kind == "interface" else "Implements"
        links = ", ".join(link_for(c) for c in declaration.implemented_contracts)
        lines.append(f"**{label}:** {links}")
    if declaration.mixins:
        links = ", ".join(link_for(m) for m in declaration.mixins)
        lines.append(f"**Uses Traits:** {links}")
    if not lines:
        return []
    # Two trailing spaces keep the lines on separate rows.
    return ["  \n".join(lines), ""]


def _properties_table(properties: list[Property]) -> str:
    rows = [
        [
            md_code(f"${p.name}"),
            md_code(("static " if p.is_static else "") + p.visibility),
            md_code(p.type or "mixed"),
            md_code(p.default if p.default is not None else "-"),
            format_docblock(p.doc_comment),
        ]
        for p in properties
    ]
    return md_table(["Name", "Visibility", "Type", "Default", "Description"], rows)


def _modifier_prefix(method: Method) -> str:
    modifiers = [
        name
        for name, flag in (
            ("abstract", method.is_abstract),
            ("final", method.is_final),
            ("static", method.is_static),
        )
        if flag
    ]
    return " ".join(modifiers) + " " if modifiers else ""


def _parameter_signature(param: Parameter) -> str:
    text = f"{param.type} " if param.type else ""
    if param.by_ref:
        text += "&"
    if param.variadic:
        text += "..."
    text += f"${param.name}"
    if param.default is not None:
        text += f" = {param.default}"
    return text


def method_signature(method: Method) -> str:
    """Full signature line, e.g. ``public static make(int $x = 1): self``."""
    params = ", ".join(_parameter_signature(p) for p in method.parameters)
    signature = f"{method.visibility} {_modifier_prefix(method)}{method.name}({params})"
    if method.return_type:
        signature += f": {method.return_type}"
    return signature


def _render_method(method: Method) -> list[str]:
    parts = [f"### {_modifier_prefix(method)}{method.name}()", ""]
    parts += [md_codeblock("php", method_signature(method)), ""]

    description = format_docblock(method.doc_comment)
    if description:
        parts += [description, ""]

    if method.parameters:
        rows = [
            [
                md_code(("..." if p.variadic else "") + f"${p.name}"),
                md_code(p.type or "mixed"),
                md_code(p.default if p.default is not None else "-"),
                param_description(method.doc_comment, p.name),
            ]
            for p in method.parameters
        ]
        parts += [
            "**Parameters:**",
            "",
            md_table(["Name", "Type", "Default", "Description"], rows),
            "",
        ]

    if method.return_type:
        returns = md_code(method.return_type)
        description = return_description(method.doc_comment)
        if description:
            returns += f": {description}"
        parts += ["**Returns:**", returns, ""]

    parts += ["---", ""]
    return parts
