"""Generate cross-linked Markdown documentation from PHP source trees."""

__version__ = "0.1.0"
