"""Find the source files to document."""

import logging
import os
from pathlib import Path

from php_autodoc.errors import FileSystemError

logger = logging.getLogger(__name__)


def scan_source_files(
    directories: list[Path],
    excluded: list[str] | None = None,
    extensions: list[str] | None = None,
    *,
    base: Path | None = None,
) -> list[Path]:
    """Recursively collect files with a wanted extension.

    A file is skipped when its path relative to ``base`` (or, outside
    ``base``, to the scanned directory) contains one of the ``excluded``
    substrings. Missing directories are skipped with a warning.
    """
    excluded = [e for e in (excluded or []) if e]
    wanted = {e.lstrip(".").lower() for e in (extensions or ["php"])}

    def _raise(error: OSError) -> None:
        msg = f"Failed to scan directory: {error.filename}. Check permissions."
        raise FileSystemError(msg) from error

    found: set[Path] = set()
    for directory in directories:
        if not directory.is_dir():
            logger.warning("Source directory not found, skipping: %s", directory)
            continue
        for dirpath, dirnames, filenames in os.walk(directory, onerror=_raise):
            dirnames.sort()
            for filename in filenames:
                path = Path(dirpath) / filename
                if path.suffix.lstrip(".").lower() not in wanted:
                    continue
                if _is_excluded(_match_text(path, directory, base), excluded):
                    continue
                if path.is_file():
                    found.add(path)
    return sorted(found)


def _match_text(path: Path, directory: Path, base: Path | None) -> str:
    for anchor in (base, directory):
        if anchor is None:
            continue
        try:
            return path.relative_to(anchor).as_posix()
        except ValueError:
            continue
    return path.as_posix()


def _is_excluded(text: str, excluded: list[str]) -> bool:
    return any(e.replace("\\", "/") in text for e in excluded)


def relative_source_path(
    file: Path,
    source_directories: list[Path],
    base: Path | None = None,
) -> str:
    """Forward-slash path of ``file`` relative to the directory containing it.

    With several source directories the path starts with that directory
    (relative to ``base``, or its bare name outside ``base``) so that
    ``a/Svc.php`` and ``b/Svc.php`` stay distinct.
    """
    resolved = file.resolve()
    for directory in (d.resolve() for d in source_directories):
        try:
            relative = resolved.relative_to(directory).as_posix()
        except ValueError:
            continue
        if len(source_directories) > 1:
            return f"{_directory_label(directory, base)}/{relative}"
        return relative
    return file.name


def _directory_label(directory: Path, base: Path | None) -> str:
    if base is not None:
        try:
            label = directory.relative_to(base.resolve()).as_posix()
        except ValueError:
            pass
        else:
            if label != ".":
                return label
    return directory.name
