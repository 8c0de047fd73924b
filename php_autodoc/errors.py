"""Exception hierarchy raised by the documentation pipeline."""


class AutodocError(Exception):
    """Base class for all errors raised by php_autodoc."""


class ConfigurationError(AutodocError):
    """A required configuration key is missing or has the wrong shape."""


class ValidationError(AutodocError):
    """A configured path is empty, malformed or escapes the project root."""


class ParseError(AutodocError):
    """A single source file could not be parsed."""


class FileSystemError(AutodocError):
    """Creating, scanning or writing part of the output tree failed."""
