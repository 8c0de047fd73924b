"""Command-line entry point for generating documentation."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from php_autodoc.errors import AutodocError
from php_autodoc.generate_docs import INDEX_FILE, generate
from php_autodoc.load_config import load_config
from php_autodoc.markdown import md_table
from php_autodoc.validate_config import require_valid_config


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    ap = argparse.ArgumentParser(
        description="Generate cross-linked Markdown documentation for PHP sources.",
    )
    ap.add_argument("--config", help="Path to an autodoc.yml / autodoc.json file")
    ap.add_argument("--path", help="Output directory for the documentation")
    ap.add_argument(
        "--source",
        action="append",
        help="Additional source directory to scan (repeatable)",
    )
    ap.add_argument(
        "--exclude",
        action="append",
        help="Additional path substring to exclude (repeatable)",
    )
    ap.add_argument("--protected", action="store_true", help="Include protected methods")
    ap.add_argument("--private", action="store_true", help="Include private methods")
    ap.add_argument("--title", help="Title of the index page")
    ap.add_argument(
        "--project-root",
        type=Path,
        default=None,
        help="Directory all paths must stay inside (default: current directory)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Map parsed options onto configuration keys."""
    overrides: dict[str, Any] = {
        "output_path": args.path.strip() if args.path else None,
        "source_directories": _clean_list(args.source),
        "excluded_directories": _clean_list(args.exclude),
        "title": args.title,
    }
    if args.protected:
        overrides["include_protected_methods"] = True
    if args.private:
        overrides["include_private_methods"] = True
    if args.project_root is not None:
        overrides["project_root"] = str(args.project_root)
    return overrides


def _clean_list(values: list[str] | None) -> list[str] | None:
    if not values:
        return None
    cleaned = [v.strip() for v in values if v.strip()]
    return cleaned or None


def _print_configuration(config: dict[str, Any]) -> None:
    print("Configuration:")
    print(f"  Output Path: {config['output_path']}")
    print(f"  Source Directories: {', '.join(config['source_directories'])}")
    print(
        "  Include Protected Methods: "
        f"{'Yes' if config.get('include_protected_methods') else 'No'}",
    )
    print(
        f"  Include Private Methods: {'Yes' if config.get('include_private_methods') else 'No'}",
    )
    print()


def main(argv: list[str] | None = None) -> int:
    """Run documentation generation and print statistics."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("Starting documentation generation...")
    try:
        config = load_config(args.config, _overrides(args), args.project_root)
        require_valid_config(config)
        _print_configuration(config)
        stats = generate(config)
    except AutodocError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Documentation generation completed!")
    print()
    print(md_table(["Metric", "Count"], stats.as_rows()))
    print()
    print(f"Documentation saved to: {config['output_path']}")
    print(f"Index file: {config['output_path']}/{INDEX_FILE}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
