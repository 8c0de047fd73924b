"""Tests for page-to-page and page-to-source links."""

from pathlib import Path

import pytest

from php_autodoc.page_path_for_source import page_path_for_source
from php_autodoc.path_resolver import link_path, normalize_path, source_link


@pytest.mark.parametrize(
    ("from_page", "to_page", "expected"),
    [
        ("Services/Payment/Stripe.md", "Services/PaymentService.md", "../PaymentService.md"),
        ("Services/PaymentService.md", "Services/Payment/Stripe.md", "Payment/Stripe.md"),
        ("Services/PaymentService.md", "Services/Refunds.md", "Refunds.md"),
        (
            "Services/PaymentService.md",
            "Contracts/PaymentContract.md",
            "../Contracts/PaymentContract.md",
        ),
        ("Root.md", "Models/User.md", "Models/User.md"),
        ("A/B/C/Deep.md", "Top.md", "../../../Top.md"),
    ],
)
def test_link_path(from_page: str, to_page: str, expected: str) -> None:
    """Links climb to the common ancestor and descend to the target."""
    assert link_path(from_page, to_page) == expected


def test_source_link_relative(tmp_path: Path) -> None:
    """A page links back to its source file relative to its own directory."""
    output = tmp_path / "docs"
    source = tmp_path / "src" / "Services" / "PaymentService.php"
    assert (
        source_link("Services/PaymentService.md", source, output)
        == "../../src/Services/PaymentService.php"
    )


def test_source_link_divergent_roots() -> None:
    """Trees sharing only the filesystem root fall back to the page path."""
    link = source_link(
        "Services/PaymentService.md",
        "/a/b/c/d/e/f/g/h/Services/PaymentService.php",
        "/Users/test/project/docs",
    )
    assert link == "Services/PaymentService.php"


def test_source_link_up_levels(tmp_path: Path) -> None:
    """Five directories up is allowed; six falls back to the page path."""
    output = tmp_path / "docs"
    source = tmp_path / "src" / "Thing.php"

    assert source_link("a/b/c/d/Thing.md", source, output) == "../../../../../src/Thing.php"
    assert source_link("a/b/c/d/e/Thing.md", source, output) == "a/b/c/d/e/Thing.php"


def test_source_link_resolves_symlinks(tmp_path: Path) -> None:
    """Output and source are compared after symlink resolution."""
    real = tmp_path / "real"
    (real / "src").mkdir(parents=True)
    (real / "docs").mkdir()
    source = real / "src" / "Thing.php"
    source.write_text("<?php\n", encoding="utf-8")
    link = tmp_path / "link"
    try:
        link.symlink_to(real, target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported")

    assert source_link("Thing.md", source, link / "docs") == "../src/Thing.php"


def test_normalize_path_missing() -> None:
    """Paths that do not exist are normalised segment by segment."""
    assert normalize_path("/does/not/./exist/../here") == "/does/not/here"
    assert normalize_path("rel\\x/../y") == "rel/y"


def test_page_path_for_source() -> None:
    """The page path swaps the source suffix for .md."""
    assert page_path_for_source("Services/PaymentService.php") == "Services/PaymentService.md"
    assert page_path_for_source("Helper.inc") == "Helper.md"
