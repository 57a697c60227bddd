"""Markdown syntax tree nodes, node builders, and HTML escaping, emoji, YouTube and formatting helpers."""

__version__ = "0.1.0"