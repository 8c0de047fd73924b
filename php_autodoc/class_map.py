"""Index every documented declaration by fully-qualified name."""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from php_autodoc.models import ParsedFile

logger = logging.getLogger(__name__)


def build_class_map(parsed_files: list[ParsedFile]) -> Mapping[str, str]:
    """Map each declaration FQN to the output-relative page documenting it.

    The returned mapping is read-only. When two files declare the same FQN
    the later file wins.
    """
    class_map: dict[str, str] = {}
    page_sources: dict[str, ParsedFile] = {}
    for parsed in parsed_files:
        if parsed.declarations:
            owner = page_sources.setdefault(parsed.page_path, parsed)
            if owner.source_path != parsed.source_path:
                logger.warning(
                    "Page %s is generated from both %s and %s; the later one wins",
                    parsed.page_path,
                    owner.source_path,
                    parsed.source_path,
                )
        for declaration in parsed.declarations:
            fqn = declaration.fqn
            previous = class_map.get(fqn)
            if previous is not None and previous != parsed.page_path:
                logger.warning(
                    "Duplicate declaration %s in %s (already documented in %s)",
                    fqn,
                    parsed.relative_path,
                    previous,
                )
            class_map[fqn] = parsed.page_path
    return MappingProxyType(class_map)
