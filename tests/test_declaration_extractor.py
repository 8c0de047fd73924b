"""Tests for turning declaration-tree nodes into Declaration records."""

from pathlib import Path

import pytest

from php_autodoc.declaration_extractor import extract_declarations, extract_file
from php_autodoc.errors import FileSystemError
from php_autodoc.source_nodes import (
    DeclarationNode,
    MethodNode,
    NamespaceNode,
    PropertyNode,
    UseNode,
)


def service_nodes() -> list:
    """A namespaced class importing a contract and a trait."""
    return [
        NamespaceNode("App\\Services"),
        UseNode([("PaymentContract", "App\\Contracts\\PaymentContract")]),
        UseNode([("Logs", "\\App\\Concerns\\LogsActivity")]),
        DeclarationNode(
            kind="class",
            name="PaymentService",
            doc_comment="/** Handles payments. */",
            extends=["BaseService"],
            implements=["PaymentContract", "\\Countable"],
            mixins=["Logs"],
            members=[
                MethodNode("charge", modifiers=["public"]),
                MethodNode("validate", modifiers=["protected"]),
                MethodNode("secret", modifiers=["private"]),
                PropertyNode(elements=[("gateway", None)], modifiers=["private"]),
            ],
        ),
    ]


def test_references_are_resolved() -> None:
    """Parent, contracts and mixins resolve through the file's namespace state."""
    [decl] = extract_declarations(service_nodes())

    assert decl.name == "PaymentService"
    assert decl.kind == "class"
    assert decl.namespace == "App\\Services"
    assert decl.fqn == "App\\Services\\PaymentService"
    assert decl.super_type == "App\\Services\\BaseService"
    assert decl.implemented_contracts == ["App\\Contracts\\PaymentContract", "Countable"]
    assert decl.mixins == ["App\\Concerns\\LogsActivity"]
    assert decl.doc_comment == "/** Handles payments. */"


def test_method_filtering_and_properties() -> None:
    """Methods are filtered by visibility; properties never are."""
    [decl] = extract_declarations(service_nodes())
    assert [m.name for m in decl.methods] == ["charge"]
    assert [p.name for p in decl.properties] == ["gateway"]

    [decl] = extract_declarations(service_nodes(), include_protected_methods=True)
    assert [m.name for m in decl.methods] == ["charge", "validate"]

    [decl] = extract_declarations(service_nodes(), include_private_methods=True)
    assert [m.name for m in decl.methods] == ["charge", "validate", "secret"]


def test_trait_becomes_mixin() -> None:
    """Traits are reported with the mixin kind."""
    [decl] = extract_declarations([DeclarationNode(kind="trait", name="LogsActivity")])
    assert decl.kind == "mixin"
    assert decl.namespace is None
    assert decl.fqn == "LogsActivity"


def test_interface_parents_are_contracts() -> None:
    """Interfaces may extend several parents, listed as contracts."""
    nodes = [
        NamespaceNode("App\\Contracts"),
        DeclarationNode(
            kind="interface",
            name="Gateway",
            extends=["Chargeable", "\\JsonSerializable"],
        ),
    ]
    [decl] = extract_declarations(nodes)
    assert decl.super_type is None
    assert decl.implemented_contracts == ["App\\Contracts\\Chargeable", "JsonSerializable"]


def test_several_namespaces_in_one_file() -> None:
    """Each declaration takes the namespace in effect where it appears."""
    nodes = [
        NamespaceNode("First"),
        DeclarationNode(kind="class", name="A"),
        NamespaceNode("Second"),
        DeclarationNode(kind="class", name="B", extends=["A"]),
    ]
    first, second = extract_declarations(nodes)
    assert first.fqn == "First\\A"
    assert second.fqn == "Second\\B"
    assert second.super_type == "Second\\A"


def test_no_declarations() -> None:
    """A file with only statements yields nothing."""
    assert extract_declarations([NamespaceNode("App"), UseNode([("X", "Y\\X")])]) == []


def test_extract_file_skips_syntax_errors(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """A malformed file contributes no declarations and logs a warning."""
    broken = tmp_path / "Broken.php"
    broken.write_text("<?php\nclass Broken {\n    public function (\n", encoding="utf-8")

    assert extract_file(broken) == []
    assert "Broken.php" in caplog.text


def test_extract_file_missing(tmp_path: Path) -> None:
    """An unreadable file raises a file system error."""
    with pytest.raises(FileSystemError, match="Failed to read source file"):
        extract_file(tmp_path / "Missing.php")
