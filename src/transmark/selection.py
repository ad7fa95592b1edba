"""Choose and assemble the highlighter for a catalog item."""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import TypeVar, cast

from transmark.highlighter import CompositeHighlighter, Highlighter
from transmark.items import CatalogItem, item_strings
from transmark.kinds import TextKind
from transmark.patterns import COMMON_PLACEHOLDERS, FORMAT_PATTERNS, HTML_MARKUP, PatternRule
from transmark.scanner import StructuralScanner

_H = TypeVar("_H", bound=Highlighter)

_BASIC_KINDS = TextKind.LEADING_WHITESPACE | TextKind.ESCAPE

_lock = threading.Lock()
_shared: dict[str, Highlighter] = {}
_composites: dict[tuple[bool, bool, str, TextKind], CompositeHighlighter] = {}


def _get_shared(key: str, factory: Callable[[], _H]) -> _H:
    """Return the process-wide instance for *key*, building it exactly once."""
    h = _shared.get(key)
    if h is not None:
        return cast(_H, h)
    with _lock:
        h = _shared.get(key)
        if h is None:
            h = factory()
            _shared[key] = h
        return cast(_H, h)


def basic_highlighter() -> StructuralScanner:
    """The shared structural scanner."""
    return _get_shared("basic", StructuralScanner)


def markup_rule() -> PatternRule:
    return _get_shared("markup", lambda: PatternRule(HTML_MARKUP, TextKind.MARKUP, "markup"))


def placeholder_rule() -> PatternRule:
    return _get_shared(
        "placeholders",
        lambda: PatternRule(COMMON_PLACEHOLDERS, TextKind.PLACEHOLDER, "placeholders"),
    )


def format_rule(format_flag: str) -> PatternRule | None:
    """The shared rule for a dialect, or None for an unknown/empty one."""
    pattern = FORMAT_PATTERNS.get(format_flag)
    if pattern is None:
        return None
    return _get_shared(
        f"{format_flag}-format",
        lambda: PatternRule(pattern, TextKind.PLACEHOLDER, f"{format_flag}-format"),
    )


def _any_match(rule: PatternRule, item: CatalogItem) -> bool:
    return any(rule.matches(s) for s in item_strings(item))


def for_item(item: CatalogItem, kinds: TextKind = TextKind.ALL) -> Highlighter | None:
    """Return a highlighter suited to *item*, or None if nothing needs highlighting.

    Markup and generic placeholders are only included when their pattern occurs
    in the singular or plural string. The dialect rule follows the item's
    format flag. Children are ordered lowest priority first: markup, generic
    placeholders, dialect placeholders, then the structural scanner, so the
    scanner's ranges come last in the stream.
    """
    format_flag = item.format_flag

    needs_markup = bool(kinds & TextKind.MARKUP) and _any_match(markup_rule(), item)
    needs_generic = bool(kinds & TextKind.PLACEHOLDER) and _any_match(placeholder_rule(), item)

    if not needs_markup and not needs_generic and not format_flag:
        if kinds & _BASIC_KINDS:
            return basic_highlighter()
        return None

    dialect = format_flag if format_flag in FORMAT_PATTERNS else ""
    key = (needs_markup, needs_generic, dialect, kinds)
    cached = _composites.get(key)
    if cached is not None:
        return cached

    children: list[Highlighter] = []
    if needs_markup:
        children.append(markup_rule())
    if needs_generic:
        children.append(placeholder_rule())
    if kinds & TextKind.PLACEHOLDER:
        rule = format_rule(dialect)
        if rule is not None:
            children.append(rule)
    if kinds & _BASIC_KINDS:
        children.append(basic_highlighter())

    with _lock:
        return _composites.setdefault(key, CompositeHighlighter(children))
