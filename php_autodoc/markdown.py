"""Small Markdown building blocks."""


def md_escape_cell(text: str) -> str:
    """Make text safe for a single table cell."""
    return text.replace("|", "\\|").replace("\n", " ").strip()


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table; empty when there are no rows."""
    if not rows:
        return ""
    out = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(["---"] * len(headers)) + " |",
    ]
    out.extend("| " + " | ".join(md_escape_cell(c) for c in r) + " |" for r in rows)
    return "\n".join(out)


def md_codeblock(lang: str, code: str) -> str:
    """Generate a fenced code block."""
    return f"```{lang}\n{code.rstrip()}\n```"


def md_code(text: str) -> str:
    """Inline code span."""
    return f"`{text}`"
