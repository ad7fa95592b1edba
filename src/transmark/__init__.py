"""Highlighting of whitespace, escapes, markup and placeholders in translatable strings."""

from __future__ import annotations

from transmark.kinds import Annotation, TextKind

__version__ = "0.1.0"

__all__ = ["Annotation", "TextKind", "highlight"]


def highlight(
    text: str,
    format_flag: str = "",
    kinds: TextKind = TextKind.ALL,
    plural: str | None = None,
) -> list[Annotation]:
    """Select a highlighter for *text* and return its annotations, in emission order."""
    from transmark.items import TextItem
    from transmark.selection import for_item

    h = for_item(TextItem(text, plural, format_flag), kinds)
    if h is None:
        return []
    return h.scan(text)
