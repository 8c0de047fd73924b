"""Logic for rendering the README index of a documentation tree."""

from datetime import datetime

from php_autodoc.models import ParsedFile

GLOBAL_NAMESPACE = "(global)"


def render_index_page(
    title: str,
    parsed_files: list[ParsedFile],
    generated_at: datetime,
) -> str:
    """Render the index page listing every documented declaration by namespace."""
    parts = [
        f"# {title}",
        "",
        f"Generated on: {generated_at:%Y-%m-%d %H:%M:%S}",
        "",
        (
            "The documentation in this directory is generated from the source "
            "code. Edits will be removed upon regeneration."
        ),
        "",
        "## Overview",
        "",
        "- Pages mirror the source directory structure.",
        "- Each page links back to its source file.",
        "- Parent classes, interfaces and traits link to their own pages.",
        "",
    ]

    by_namespace: dict[str, list[tuple[str, str]]] = {}
    for parsed in parsed_files:
        for declaration in parsed.declarations:
            ns = declaration.namespace or GLOBAL_NAMESPACE
            by_namespace.setdefault(ns, []).append((declaration.name, parsed.page_path))

    if by_namespace:
        parts += ["## Contents", ""]
        for ns in sorted(by_namespace, key=str.lower):
            parts += [f"### {ns}", ""]
            for name, page in sorted(by_namespace[ns], key=lambda e: e[0].lower()):
                parts.append(f"- [{name}]({page})")
            parts.append("")

    return "\n".join(parts).rstrip() + "\n"
