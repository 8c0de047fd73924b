"""Relative links between generated pages and back to source files."""

import logging
import posixpath
from pathlib import Path

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".md"
# Beyond this many ../ segments a source link is replaced by the fallback.
MAX_UPWARD_LEVELS = 5


def link_path(from_page: str, to_page: str) -> str:
    """Relative link from one generated page to another.

    Both arguments are output-relative page paths using forward slashes,
    e.g. ``Services/Payment/Stripe.md`` -> ``Services/PaymentService.md``
    gives ``../PaymentService.md``.
    """
    from_dir = posixpath.dirname(_strip_suffix(from_page, PAGE_SUFFIX))
    to_stem = _strip_suffix(to_page, PAGE_SUFFIX)
    to_dir = posixpath.dirname(to_stem)

    from_parts = from_dir.split("/") if from_dir else []
    to_parts = to_dir.split("/") if to_dir else []
    while from_parts and to_parts and from_parts[0] == to_parts[0]:
        from_parts.pop(0)
        to_parts.pop(0)

    link = "../" * len(from_parts)
    if to_parts:
        link += "/".join(to_parts) + "/"
    return link + posixpath.basename(to_stem) + PAGE_SUFFIX


def source_link(
    doc_relative_path: str,
    absolute_source_path: str | Path,
    output_root: str | Path,
) -> str:
    """Relative link from a generated page back to the file it documents.

    When the two trees share nothing but the filesystem root, or the link
    would climb more than MAX_UPWARD_LEVELS directories, the page path with
    the source suffix is returned instead.
    """
    doc_dir = posixpath.dirname(f"{output_root}/{doc_relative_path}")
    doc_parts = normalize_path(doc_dir).split("/")
    source = normalize_path(str(absolute_source_path))
    source_parts = posixpath.dirname(source).split("/")

    common = 0
    for doc_part, source_part in zip(doc_parts, source_parts):
        if doc_part != source_part:
            break
        common += 1

    upward = len(doc_parts) - common
    root_only = common == 1 and doc_parts[0] == ""
    if common == 0 or root_only or upward > MAX_UPWARD_LEVELS:
        fallback = _swap_suffix(doc_relative_path, Path(source).suffix)
        logger.debug(
            "Source link for %s needs %d levels up; using %s",
            doc_relative_path,
            upward,
            fallback,
        )
        return fallback

    link = "../" * upward
    remaining = source_parts[common:]
    if remaining:
        link += "/".join(remaining) + "/"
    return link + posixpath.basename(source)


def normalize_path(path: str) -> str:
    """Absolute, forward-slash, symlink-resolved form of ``path``.

    Paths that do not exist are normalised segment by segment; an absolute
    path then has the symlinks of its existing ancestors resolved (so
    ``/var/...`` matches ``/private/var/...`` on macOS).
    """
    try:
        return Path(path).resolve(strict=True).as_posix()
    except (OSError, RuntimeError):
        pass

    path = path.replace("\\", "/")
    is_absolute = path.startswith("/")
    parts: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts:
                parts.pop()
        else:
            parts.append(segment)
    normalized = ("/" if is_absolute else "") + "/".join(parts)
    if not is_absolute:
        return normalized
    try:
        return Path(normalized).resolve().as_posix()
    except (OSError, RuntimeError):
        return normalized


def _strip_suffix(path: str, suffix: str) -> str:
    return path[: -len(suffix)] if path.endswith(suffix) else path


def _swap_suffix(path: str, suffix: str) -> str:
    stem, _ = posixpath.splitext(path)
    return stem + (suffix or "")
