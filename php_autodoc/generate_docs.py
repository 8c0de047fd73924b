"""Orchestration logic for generating a documentation tree.

Every source file is parsed exactly once. The retained declarations are
first indexed into the class map, and only once the map is complete are
pages rendered, so a page may link to a declaration found later in scan
order.
"""

import logging
import shutil
from collections.abc import Mapping
from datetime import datetime
from functools import partial
from pathlib import Path
from typing import Any

from php_autodoc.class_map import build_class_map
from php_autodoc.declaration_extractor import extract_file
from php_autodoc.directory_scanner import relative_source_path, scan_source_files
from php_autodoc.errors import FileSystemError, ValidationError
from php_autodoc.link_builder import class_link
from php_autodoc.models import GenerationStats, ParsedFile
from php_autodoc.page_path_for_source import page_path_for_source
from php_autodoc.path_resolver import source_link
from php_autodoc.path_validator import is_within_root, validate_path
from php_autodoc.render_class_page import render_class_page
from php_autodoc.render_index_page import render_index_page
from php_autodoc.validate_config import require_valid_config

logger = logging.getLogger(__name__)

INDEX_FILE = "README.md"
DEFAULT_TITLE = "PHP Documentation"


def generate(
    config: dict[str, Any],
    *,
    generated_at: datetime | None = None,
) -> GenerationStats:
    """Generate the documentation tree described by ``config``.

    The output directory is deleted and recreated. Configuration and path
    problems are reported before anything is deleted.
    """
    require_valid_config(config)

    project_root = Path(config.get("project_root") or Path.cwd())
    output_path = config["output_path"].strip()
    sources = [s.strip() for s in config["source_directories"]]

    if config.get("skip_path_validation", False):
        output_dir = _absolute(output_path, project_root)
        source_dirs = [_absolute(s, project_root) for s in sources]
    else:
        output_dir = validate_path(output_path, project_root, "Output path")
        source_dirs = [validate_path(s, project_root, "Source directory") for s in sources]
    _check_output_dir(output_dir, source_dirs, project_root)

    _reset_output_dir(output_dir)

    files = scan_source_files(
        source_dirs,
        config.get("excluded_directories", []),
        config.get("file_extensions") or ["php"],
        base=project_root.resolve(),
    )
    logger.info("Found %d source files", len(files))

    parsed_files = [
        parse_file(
            f,
            source_dirs,
            base=project_root,
            include_private_methods=config.get("include_private_methods", False),
            include_protected_methods=config.get("include_protected_methods", False),
        )
        for f in files
    ]

    class_map = build_class_map(parsed_files)
    stats = GenerationStats(files_scanned=len(files))
    pages_written = 0
    for parsed in parsed_files:
        if not parsed.declarations:
            continue
        pages_written += 1
        _write_file(output_dir / parsed.page_path, render_file(parsed, class_map, output_dir))
        stats.declarations_documented += len(parsed.declarations)
        stats.methods_documented += sum(len(d.methods) for d in parsed.declarations)
        stats.properties_documented += sum(len(d.properties) for d in parsed.declarations)
    logger.info("Wrote %d pages into %s", pages_written, output_dir)

    index = render_index_page(
        config.get("title") or DEFAULT_TITLE,
        parsed_files,
        generated_at or datetime.now(),
    )
    _write_file(output_dir / INDEX_FILE, index)
    return stats


def parse_file(
    path: Path,
    source_dirs: list[Path],
    *,
    base: Path | None = None,
    include_private_methods: bool = False,
    include_protected_methods: bool = False,
) -> ParsedFile:
    """Extract one file's declarations and work out where its page goes."""
    relative = relative_source_path(path, source_dirs, base)
    return ParsedFile(
        source_path=path.resolve(),
        relative_path=relative,
        page_path=page_path_for_source(relative),
        declarations=extract_file(
            path,
            include_private_methods=include_private_methods,
            include_protected_methods=include_protected_methods,
        ),
    )


def render_file(
    parsed: ParsedFile,
    class_map: Mapping[str, str],
    output_dir: Path,
) -> str:
    """Render the page for every declaration in one source file."""
    link_for = partial(class_link, class_map=class_map, current_page=parsed.page_path)
    href = source_link(parsed.page_path, parsed.source_path, output_dir)
    pages = [
        render_class_page(
            declaration,
            source_label=parsed.relative_path,
            source_href=href,
            link_for=link_for,
        )
        for declaration in parsed.declarations
    ]
    return "\n".join(pages)


def _absolute(path: str, project_root: Path) -> Path:
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = project_root / candidate
    return candidate.resolve()


def _check_output_dir(output_dir: Path, source_dirs: list[Path], project_root: Path) -> None:
    """Refuse an output directory whose deletion would remove sources."""
    root = project_root.resolve()
    if output_dir == root:
        msg = f"Output path must not be the project root: {output_dir}"
        raise ValidationError(msg)
    for source_dir in source_dirs:
        if is_within_root(source_dir, output_dir):
            msg = (
                f"Output path {output_dir} contains source directory {source_dir}; "
                "it is deleted before generation."
            )
            raise ValidationError(msg)


def _reset_output_dir(output_dir: Path) -> None:
    if output_dir.is_dir():
        try:
            shutil.rmtree(output_dir)
        except OSError as e:
            msg = f"Failed to delete directory: {output_dir}. Check permissions."
            raise FileSystemError(msg) from e
    _make_dir(output_dir)


def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        msg = f"Failed to create directory: {path}. Check permissions and disk space."
        raise FileSystemError(msg) from e


def _write_file(path: Path, content: str) -> None:
    _make_dir(path.parent)
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        msg = f"Failed to write file: {path}. Check permissions and disk space."
        raise FileSystemError(msg) from e
