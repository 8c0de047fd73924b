"""Markdown link text for class references."""

from collections.abc import Mapping

from php_autodoc.models import NAMESPACE_SEPARATOR
from php_autodoc.path_resolver import link_path


def short_name(fqn: str) -> str:
    """Last segment of a fully-qualified name."""
    return fqn.lstrip(NAMESPACE_SEPARATOR).rsplit(NAMESPACE_SEPARATOR, 1)[-1]


def class_link(fqn: str, class_map: Mapping[str, str], current_page: str) -> str:
    """Link to the page documenting ``fqn``, or inline code when undocumented."""
    name = short_name(fqn)
    target = class_map.get(fqn.lstrip(NAMESPACE_SEPARATOR))
    if target is None:
        return f"`{name}`"
    return f"[{name}]({link_path(current_page, target)})"
