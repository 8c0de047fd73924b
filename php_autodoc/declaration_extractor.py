"""Turn a parsed source file into Declaration records."""

import logging
from pathlib import Path

from php_autodoc.errors import FileSystemError, ParseError
from php_autodoc.member_extractor import (
    extract_method,
    extract_properties,
    filter_methods,
)
from php_autodoc.models import Declaration, Method, Property
from php_autodoc.namespace_context import NamespaceContext
from php_autodoc.source_nodes import (
    DeclarationNode,
    MethodNode,
    NamespaceNode,
    PropertyNode,
    SourceNode,
    UseNode,
)
from php_autodoc.source_parser import parse_source

logger = logging.getLogger(__name__)

# Parser kinds -> Declaration kinds.
KIND_MAP = {"class": "class", "interface": "interface", "trait": "mixin"}


def extract_declarations(
    nodes: list[SourceNode],
    *,
    include_private_methods: bool = False,
    include_protected_methods: bool = False,
) -> list[Declaration]:
    """Extract declarations from one file's nodes, in file order."""
    context = NamespaceContext()
    declarations: list[Declaration] = []
    for node in nodes:
        if isinstance(node, NamespaceNode):
            context.set_namespace(node.name)
        elif isinstance(node, UseNode):
            for alias, fqn in node.imports:
                context.add_alias(alias, fqn)
        elif isinstance(node, DeclarationNode):
            declarations.append(
                _extract_declaration(
                    node,
                    context,
                    include_private_methods=include_private_methods,
                    include_protected_methods=include_protected_methods,
                ),
            )
    return declarations


def _extract_declaration(
    node: DeclarationNode,
    context: NamespaceContext,
    *,
    include_private_methods: bool,
    include_protected_methods: bool,
) -> Declaration:
    """Build one declaration, resolving its references through ``context``."""
    kind = KIND_MAP.get(node.kind, node.kind)

    super_type = None
    contracts = [context.resolve(ref) for ref in node.implements]
    if kind == "class" and node.extends:
        super_type = context.resolve(node.extends[0])
    elif kind == "interface":
        # Interfaces may extend several parents; they are contracts too.
        contracts = [context.resolve(ref) for ref in node.extends] + contracts

    methods: list[Method] = []
    properties: list[Property] = []
    for member in node.members:
        if isinstance(member, MethodNode):
            methods.append(extract_method(member))
        elif isinstance(member, PropertyNode):
            properties.extend(extract_properties(member))

    return Declaration(
        name=node.name,
        kind=kind,
        namespace=context.current_namespace,
        doc_comment=node.doc_comment,
        super_type=super_type,
        implemented_contracts=contracts,
        mixins=[context.resolve(ref) for ref in node.mixins],
        methods=filter_methods(
            methods,
            include_private=include_private_methods,
            include_protected=include_protected_methods,
        ),
        properties=properties,
    )


def extract_file(
    path: Path,
    *,
    include_private_methods: bool = False,
    include_protected_methods: bool = False,
) -> list[Declaration]:
    """Parse and extract one source file.

    A file that cannot be parsed contributes no declarations.
    """
    try:
        content = path.read_bytes()
    except OSError as e:
        msg = f"Failed to read source file: {path}"
        raise FileSystemError(msg) from e

    try:
        nodes = parse_source(content)
    except ParseError as e:
        logger.warning("Skipping %s: %s", path, e)
        return []
    declarations = extract_declarations(
        nodes,
        include_private_methods=include_private_methods,
        include_protected_methods=include_protected_methods,
    )
    logger.debug("Extracted %d declarations from %s", len(declarations), path)
    return declarations
