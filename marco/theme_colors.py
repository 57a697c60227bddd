"""Extraction of named colours from editor style-scheme XML."""

from __future__ import annotations

__all__ = ["extract_xml_color_value"]

_VALUE_MARK = 'value="'


def extract_xml_color_value(contents: str, key: str) -> str | None:
    """Return the ``value`` of the first ``<color name="key" value="..."/>`` entry.

    The search is textual: it finds ``name="key"``, then the next ``value="``
    after it, and returns the trimmed text up to the closing quote. Returns
    ``None`` when any part is missing.
    """
    name_pos = contents.find(f'name="{key}"')
    if name_pos < 0:
        return None
    value_pos = contents.find(_VALUE_MARK, name_pos)
    if value_pos < 0:
        return None
    start = value_pos + len(_VALUE_MARK)
    end = contents.find('"', start)
    if end < 0:
        return None
    return contents[start:end].strip()