"""Utility for determining the output page path of a source file."""

import posixpath

from php_autodoc.path_resolver import PAGE_SUFFIX


def page_path_for_source(relative_source_path: str) -> str:
    """Swap the source suffix for the page suffix: Services/Pay.php -> Services/Pay.md."""
    stem, _ = posixpath.splitext(relative_source_path)
    return stem + PAGE_SUFFIX
