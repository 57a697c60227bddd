"""Syntax tree nodes produced by the Markdown parser and consumed by the renderers."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Node", "text_node"]


@dataclass
class Node:
    """A node in the Markdown syntax tree.

    ``node_type`` names the kind of element (``"heading"``, ``"text"`` ...),
    ``attributes`` holds string properties such as ``url`` or ``value`` and
    ``children`` holds nested nodes in document order.
    """

    node_type: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list[Node] = field(default_factory=list)

    def add_child(self, child: Node) -> None:
        """Append ``child`` after the existing children."""
        self.children.append(child)

    def add_attribute(self, key: str, value: str) -> None:
        """Set attribute ``key`` to ``value``, replacing any earlier value."""
        self.attributes[key] = value


def text_node(text: str) -> Node:
    """Return a ``text`` node whose ``value`` attribute is ``text``."""
    return Node("text", {"value": text})