"""Simple indentation of rendered HTML for display as source."""

from __future__ import annotations

__all__ = ["pretty_print_html"]

_INDENT = "    "


def _opens_block(line: str) -> bool:
    closing_at = line.find("</")
    has_closing_after = closing_at > 0
    return (
        line.startswith("<")
        and not line.startswith("</")
        and not line.endswith("/>")
        and not line.startswith("<!")
        and not has_closing_after
    )


def pretty_print_html(html: str) -> str:
    """Put each adjacent tag on its own line and indent by nesting depth.

    Blank lines are dropped and every emitted line ends with a newline.
    """
    lines = []
    depth = 0
    for raw_line in html.replace("><", ">\n<").split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith("</"):
            depth = max(depth - 1, 0)
        lines.append(f"{_INDENT * depth}{line}\n")
        if _opens_block(line):
            depth += 1
    return "".join(lines)