"""Keep configured paths inside the project root.

Paths are checked after symlink resolution so that neither ``..``
segments nor symlinks can point the generator at a location outside the
project. Paths that do not exist yet (an output directory about to be
created) are checked twice: once after normalising their segments and
once through the nearest ancestor that does exist.
"""

import re
from pathlib import Path

from php_autodoc.errors import ConfigurationError, ValidationError

WINDOWS_ABSOLUTE_RE = re.compile(r"^[A-Za-z]:[\\/]")


def validate_path(path: str, project_root: str | Path, label: str = "Path") -> Path:
    """Validate ``path`` against ``project_root`` and return its resolved form.

    ``label`` names the path in error messages ("Output path",
    "Source directory", ...).
    """
    if not path or not path.strip():
        msg = f"{label} cannot be empty. Please provide a valid directory path."
        raise ValidationError(msg)

    if "\0" in path:
        msg = (
            f"{label} contains invalid characters (null byte). "
            "This is a potential security issue."
        )
        raise ValidationError(msg)

    try:
        root = Path(project_root).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        msg = f"Project root directory does not exist or is not accessible: {project_root}"
        raise ConfigurationError(msg) from e

    if is_absolute_path(path):
        candidate = path
    else:
        candidate = str(root).rstrip("/\\") + "/" + path.lstrip("/\\")

    try:
        resolved = Path(candidate).resolve(strict=True)
    except FileNotFoundError:
        resolved = _validate_missing_path(path, candidate, root, label)
    except (OSError, RuntimeError) as e:
        # Symlink loops and unreadable components.
        msg = f"{label} '{path}' cannot be resolved: {e}\nProject root: {root}"
        raise ValidationError(msg) from e

    if not is_within_root(resolved, root):
        msg = (
            f"{label} '{path}' is outside the allowed project root.\n"
            f"Resolved to: {resolved}\n"
            f"Project root: {root}\n"
            "Please use a path within your project directory, such as 'docs'."
        )
        raise ValidationError(msg)
    return resolved


def _validate_missing_path(path: str, candidate: str, root: Path, label: str) -> Path:
    """Check a path that does not exist yet. Returns its tentative resolved form."""
    normalized = Path(normalize_segments(candidate))
    try:
        # Non-strict resolution follows dangling symlinks to their target.
        followed = Path(candidate).resolve()
    except (OSError, RuntimeError) as e:
        msg = f"{label} '{path}' cannot be resolved: {e}\nProject root: {root}"
        raise ValidationError(msg) from e

    for tentative in (normalized, followed):
        if not is_within_root(tentative, root):
            msg = (
                f"{label} '{path}' would be created outside the allowed project root.\n"
                f"Resolved to: {tentative}\n"
                f"Project root: {root}\n"
                "Please use a path within your project directory."
            )
            raise ValidationError(msg)

    # Walk up the literal ancestors: a missing path can still sit below an
    # existing directory (or symlink) that leads outside the root.
    current = Path(candidate)
    while current.parent != current:
        parent = current.parent
        try:
            resolved_parent = parent.resolve(strict=True)
        except FileNotFoundError:
            current = parent
            continue
        except (OSError, RuntimeError) as e:
            msg = f"{label} '{path}' cannot be resolved: {e}\nProject root: {root}"
            raise ValidationError(msg) from e

        if not is_within_root(resolved_parent, root):
            msg = (
                f"{label} '{path}' would be created outside the allowed project root.\n"
                f"Parent directory: {resolved_parent}\n"
                f"Project root: {root}\n"
                "Please use a path within your project directory."
            )
            raise ValidationError(msg)
        remainder = Path(candidate).relative_to(parent)
        return Path(normalize_segments(str(resolved_parent / remainder)))

    return normalized


def normalize_segments(path: str) -> str:
    """Collapse ``.``, ``..`` and repeated separators without touching disk.

    A relative path that climbs above its own starting point is rejected.
    """
    path = path.replace("\\", "/")
    is_absolute = path.startswith("/")
    parts: list[str] = []
    for segment in path.split("/"):
        if segment in ("", "."):
            continue
        if segment == "..":
            if parts:
                parts.pop()
            elif not is_absolute:
                msg = f"Path attempts to traverse above the starting directory: {path}"
                raise ValidationError(msg)
        else:
            parts.append(segment)

    result = ("/" if is_absolute else "") + "/".join(parts)
    return result or ("/" if is_absolute else ".")


def is_absolute_path(path: str) -> bool:
    """True for POSIX absolute paths, drive paths (C:\\) and UNC paths."""
    return (
        path.startswith("/")
        or path.startswith("\\\\")
        or bool(WINDOWS_ABSOLUTE_RE.match(path))
    )


def is_within_root(path: str | Path, root: str | Path) -> bool:
    """True when ``path`` equals ``root`` or lies below it."""
    path_str = str(path).replace("\\", "/")
    root_str = str(root).replace("\\", "/").rstrip("/")
    return path_str == root_str or path_str.startswith(root_str + "/")
