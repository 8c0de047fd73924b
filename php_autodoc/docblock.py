"""Turn raw doc comments into Markdown text."""

import re

DELIMITERS_RE = re.compile(r"^/\*\*|\*/$")
LEADING_STAR_RE = re.compile(r"^\s*\*\s?")
# Tags only count at the start of a line; "admin@example.com" is prose.
TAG_LINE_RE = re.compile(r"^[ \t]*@\w+.*$", re.MULTILINE)
# @return <type> <description>; the type may carry generics and unions.
RETURN_RE = re.compile(
    r"@return\s+[^\s<]+(?:<[^>]+>)?(?:\|[^\s<]+(?:<[^>]+>)?)*\s+([^\n*]+)",
)


def format_docblock(docblock: str | None) -> str:
    """Strip comment markers and @tags, keeping the prose."""
    if not docblock:
        return ""
    text = DELIMITERS_RE.sub("", docblock.strip())
    lines = [LEADING_STAR_RE.sub("", line) for line in text.split("\n")]
    text = TAG_LINE_RE.sub("", "\n".join(lines))
    # Tag lines leave blank runs behind.
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def param_description(docblock: str | None, param_name: str) -> str:
    """Description given by ``@param <type> $name <description>``."""
    if not docblock:
        return ""
    pattern = r"@param\s+[\w\\|?<>,\[\]]+\s+\$" + re.escape(param_name) + r"[ \t]+(.+)$"
    match = re.search(pattern, docblock, re.MULTILINE)
    return match.group(1).strip() if match else ""


def return_description(docblock: str | None) -> str:
    """Description given by ``@return <type> <description>``."""
    if not docblock:
        return ""
    match = RETURN_RE.search(docblock)
    return match.group(1).strip() if match else ""
