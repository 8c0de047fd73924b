"""Check the shape of a configuration mapping."""

from typing import Any

from php_autodoc.errors import ConfigurationError

BOOLEAN_KEYS = ("include_private_methods", "include_protected_methods", "skip_path_validation")
STRING_LIST_KEYS = ("excluded_directories", "file_extensions")


def validate_config(config: dict[str, Any]) -> list[str]:
    """Return a message for every problem found; empty when valid."""
    errors = []
    errors.extend(_validate_output_path(config))
    errors.extend(_validate_source_directories(config))

    for key in STRING_LIST_KEYS:
        if key in config:
            errors.extend(_validate_string_list(key, config[key]))
    for key in BOOLEAN_KEYS:
        if key in config and not isinstance(config[key], bool):
            errors.append(f"{key} must be a boolean")
    if "title" in config and not isinstance(config["title"], str):
        errors.append("title must be a string")
    if config.get("project_root") is not None and not isinstance(
        config["project_root"], str
    ):
        errors.append("project_root must be a string")
    return errors


def require_valid_config(config: dict[str, Any]) -> None:
    """Raise ConfigurationError listing every problem in ``config``."""
    errors = validate_config(config)
    if errors:
        msg = "Invalid configuration:\n" + "\n".join(errors)
        raise ConfigurationError(msg)


def _validate_output_path(config: dict[str, Any]) -> list[str]:
    if "output_path" not in config or config["output_path"] is None:
        return ["output_path is required"]
    if not isinstance(config["output_path"], str):
        return ["output_path must be a string"]
    if not config["output_path"].strip():
        return ["output_path must be a non-empty string"]
    return []


def _validate_source_directories(config: dict[str, Any]) -> list[str]:
    if "source_directories" not in config or config["source_directories"] is None:
        return ["source_directories is required"]
    directories = config["source_directories"]
    if not isinstance(directories, list):
        return ["source_directories must be a list"]
    if not directories:
        return ["source_directories must contain at least one directory"]

    errors = []
    for index, directory in enumerate(directories):
        if not isinstance(directory, str):
            errors.append(f"source_directories element at index {index} must be a string")
        elif not directory.strip():
            errors.append(
                f"source_directories element at index {index} must be a non-empty string"
            )
    return errors


def _validate_string_list(key: str, value: Any) -> list[str]:
    if not isinstance(value, list):
        return [f"{key} must be a list"]
    return [
        f"{key} element at index {index} must be a string"
        for index, item in enumerate(value)
        if not isinstance(item, str)
    ]
