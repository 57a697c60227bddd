"""Construction of syntax tree nodes from the matched source text of Markdown elements."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice, takewhile

from marco.ast import Node, text_node

__all__ = [
    "build_atx_heading",
    "build_fenced_code_block",
    "build_indented_code_block",
    "build_blockquote",
    "build_task_list_item",
    "build_frontmatter",
    "build_math_block",
    "build_inline_math",
    "build_link_definition",
    "build_footnote_definition",
    "build_strong",
    "build_emphasis",
    "build_strikethrough",
    "build_inline_code",
    "build_link",
    "build_image",
    "build_video_embed",
    "build_autolink",
    "build_emoji",
    "build_mention",
    "build_html_block",
    "build_html_inline",
    "find_first",
]


def _lines(text: str) -> list[str]:
    """Split on newlines, drop one trailing empty line and strip a final carriage return."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _strip_leading(text: str, prefix: str) -> str:
    """Remove every repeated occurrence of ``prefix`` from the start of ``text``."""
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _strip_trailing(text: str, suffix: str) -> str:
    """Remove every repeated occurrence of ``suffix`` from the end of ``text``."""
    while suffix and text.endswith(suffix):
        text = text[: -len(suffix)]
    return text


def _wrapping(node_type: str, text: str) -> Node:
    node = Node(node_type)
    node.add_child(text_node(text))
    return node


def build_atx_heading(raw: str) -> Node:
    """Build a ``heading`` node from a line such as ``## Title``."""
    depth = len(raw) - len(raw.lstrip("#"))
    text = raw[depth:].lstrip(" ").strip()
    node = _wrapping("heading", text)
    node.add_attribute("depth", str(depth))
    return node


def build_fenced_code_block(language: str, code: str) -> Node:
    """Build a ``codeBlock`` node; the language is recorded only when non-empty."""
    node = Node("codeBlock")
    if language:
        node.add_attribute("language", language)
    node.add_attribute("value", code)
    return node


def build_indented_code_block(raw: str) -> Node:
    """Build a ``codeBlock`` node from lines indented by spaces or tabs."""
    code = "\n".join(
        _strip_leading(line, "    ").lstrip("\t") for line in _lines(raw)
    )
    return Node("codeBlock", {"value": code})


def build_blockquote(raw: str) -> Node:
    """Build a ``blockquote`` node holding the quoted text without its markers."""
    content = "\n".join(
        _strip_leading(line, "> ").lstrip(">") for line in _lines(raw)
    )
    return _wrapping("blockquote", content)


def build_task_list_item(raw: str) -> Node:
    """Build a ``listItem`` node with a ``checked`` attribute from ``- [x] text``."""
    checked = "[x]" in raw or "[X]" in raw
    pos = raw.find("] ")
    text = raw[pos + 2:].strip() if pos >= 0 else raw
    node = _wrapping("listItem", text)
    node.add_attribute("checked", "true" if checked else "false")
    return node


def build_frontmatter(raw: str) -> Node:
    """Build a ``frontmatter`` node; ``---`` fences mean YAML, anything else TOML."""
    fmt = "yaml" if raw.startswith("---") else "toml"
    body: Iterator[str] = takewhile(
        lambda line: not line.startswith("---") and not line.startswith("+++"),
        islice(_lines(raw), 1, None),
    )
    return Node("frontmatter", {"format": fmt, "value": "\n".join(body)})


def build_math_block(raw: str) -> Node:
    """Build a ``mathBlock`` node from ``$$ ... $$``."""
    content = _strip_trailing(_strip_leading(raw, "$$"), "$$").strip()
    return Node("mathBlock", {"value": content})


def build_inline_math(raw: str) -> Node:
    """Build a ``mathInline`` node from ``$...$``."""
    return Node("mathInline", {"value": raw.lstrip("$").rstrip("$")})


def build_link_definition(raw: str) -> Node:
    """Build a ``definition`` node from ``[label]: url``.

    The text is split on every colon, so only the part between the first and
    second colon becomes the URL.
    """
    parts = raw.split(":")
    label = parts[0].strip("[]")
    url = parts[1].strip() if len(parts) > 1 else ""
    return Node("definition", {"identifier": label, "url": url})


def build_footnote_definition(raw: str) -> Node:
    """Build a ``footnoteDefinition`` node from ``[^label]: text``."""
    parts = raw.split(":")
    label = parts[0].strip("[^]")
    text = parts[1].strip() if len(parts) > 1 else ""
    node = _wrapping("footnoteDefinition", text)
    node.add_attribute("identifier", label)
    return node


def build_strong(raw: str) -> Node:
    """Build a ``strong`` node from ``**text**`` or ``__text__``."""
    content = _strip_leading(_strip_leading(raw, "**"), "__")
    content = _strip_trailing(_strip_trailing(content, "**"), "__")
    return _wrapping("strong", content)


def build_emphasis(raw: str) -> Node:
    """Build an ``emphasis`` node from ``*text*`` or ``_text_``."""
    content = raw.lstrip("*").lstrip("_").rstrip("*").rstrip("_")
    return _wrapping("emphasis", content)


def build_strikethrough(raw: str) -> Node:
    """Build a ``delete`` node from ``~~text~~``."""
    content = _strip_trailing(_strip_leading(raw, "~~"), "~~")
    return _wrapping("delete", content)


def build_inline_code(raw: str) -> Node:
    """Build an ``inlineCode`` node from backtick-quoted text."""
    return Node("inlineCode", {"value": raw.lstrip("`").rstrip("`")})


def build_link(raw: str) -> Node | None:
    """Build a ``link`` node from ``[text](url)``, or return ``None`` if it does not match."""
    start = raw.find("[")
    middle = raw.find("](")
    end = raw.rfind(")")
    if start < 0 or middle < 0 or end < 0:
        return None
    node = _wrapping("link", raw[start + 1:middle])
    node.add_attribute("url", raw[middle + 2:end])
    return node


def build_image(raw: str) -> Node | None:
    """Build an ``image`` node from ``![alt](url)``, or return ``None`` if it does not match."""
    start = raw.find("![")
    middle = raw.find("](")
    end = raw.rfind(")")
    if start < 0 or middle < 0 or end < 0:
        return None
    return Node("image", {"url": raw[middle + 2:end], "alt": raw[start + 2:middle]})


def build_video_embed(raw: str) -> Node | None:
    """Build a ``video`` node from a linked image ``[![alt](poster)](url)``.

    Returns ``None`` when the text does not have that shape.
    """
    start_alt = raw.find("[![")
    if start_alt < 0:
        return None
    mid = raw.find("](")
    if mid < 0:
        return None
    img_url_end = raw.find(")", mid + 2)
    if img_url_end < 0:
        return None
    open_outer = raw.find("(", img_url_end + 1)
    if open_outer < 0:
        return None
    link_start = open_outer + 1
    link_end = raw.find(")", link_start)
    if link_end < 0:
        return None
    return Node(
        "video",
        {
            "value": raw,
            "url": raw[link_start:link_end].strip(),
            "poster": raw[mid + 2:img_url_end].strip(),
            "alt": raw[start_alt + 3:mid].strip(),
        },
    )


def build_autolink(raw: str) -> Node:
    """Build a ``link`` node from ``<url>`` whose text is the URL itself."""
    url = raw.lstrip("<").rstrip(">")
    node = _wrapping("link", url)
    node.add_attribute("url", url)
    return node


def build_emoji(raw: str) -> Node:
    """Build an ``emoji`` node from ``:name:`` keeping the original shortcode as ``value``."""
    return Node("emoji", {"name": raw.lstrip(":").rstrip(":"), "value": raw})


def build_mention(raw: str) -> Node:
    """Build a ``mention`` node from ``@username``."""
    return Node("mention", {"username": raw.lstrip("@"), "value": raw})


def build_html_block(raw: str) -> Node:
    """Build an ``htmlBlock`` node that passes ``raw`` through unchanged."""
    return Node("htmlBlock", {"value": raw})


def build_html_inline(raw: str) -> Node:
    """Build an ``htmlInline`` node that passes ``raw`` (tags or entities) through unchanged."""
    return Node("htmlInline", {"value": raw})


def find_first(node: Node, node_type: str) -> Node | None:
    """Return the first node of ``node_type`` in a depth-first, pre-order walk."""
    if node.node_type == node_type:
        return node
    for child in node.children:
        found = find_first(child, node_type)
        if found is not None:
            return found
    return None