"""Declaration-tree nodes produced by the source parser.

The parser flattens the concrete syntax tree into a short list of
statement nodes in file order. Every node carries a ``kind`` discriminator.
Reference strings (``extends``, ``implements``, ``mixins``, use imports) are
kept exactly as written so the namespace context can resolve them.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TypeNode:
    """A type expression: named, nullable, union, intersection or other."""

    kind: str
    name: str | None = None
    parts: list[TypeNode] = field(default_factory=list)


@dataclass
class ParameterNode:
    """A formal parameter of a method."""

    name: str
    type: TypeNode | None = None
    default: str | None = None
    by_ref: bool = False
    variadic: bool = False
    kind: str = "parameter"


@dataclass
class MethodNode:
    """A method member inside a declaration body."""

    name: str
    modifiers: list[str] = field(default_factory=list)
    parameters: list[ParameterNode] = field(default_factory=list)
    return_type: TypeNode | None = None
    doc_comment: str | None = None
    kind: str = "method"


@dataclass
class PropertyNode:
    """A property statement; one statement may declare several names."""

    elements: list[tuple[str, str | None]]  # (name, default literal)
    modifiers: list[str] = field(default_factory=list)
    type: TypeNode | None = None
    doc_comment: str | None = None
    kind: str = "property"


@dataclass
class NamespaceNode:
    """A namespace statement. ``name`` is None for the global namespace."""

    name: str | None = None
    kind: str = "namespace"


@dataclass
class UseNode:
    """A class import statement holding ``(alias, fqn)`` pairs."""

    imports: list[tuple[str, str]] = field(default_factory=list)
    kind: str = "use"


@dataclass
class DeclarationNode:
    """A class, interface or trait declaration."""

    kind: str  # class / interface / trait
    name: str
    doc_comment: str | None = None
    extends: list[str] = field(default_factory=list)
    implements: list[str] = field(default_factory=list)
    mixins: list[str] = field(default_factory=list)
    members: list[MethodNode | PropertyNode] = field(default_factory=list)


SourceNode = NamespaceNode | UseNode | DeclarationNode
