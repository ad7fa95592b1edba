"""Annotation kinds, range records, and character classification helpers."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntFlag

import regex


class TextKind(IntFlag):
    LEADING_WHITESPACE = 1  # leading/trailing/duplicate blanks, NBSP
    ESCAPE = 2  # \n, \t, \\ ...
    MARKUP = 4  # <b>, </a>, &amp;
    PLACEHOLDER = 8  # %d, {0}, {{name}}, @var

    ALL = LEADING_WHITESPACE | ESCAPE | MARKUP | PLACEHOLDER


@dataclass(frozen=True, slots=True)
class Annotation:
    """A highlighted range of text, [start, end) in str indices."""

    start: int
    end: int
    kind: TextKind


NBSP = "\u00a0"

# Line breaks as editors and LSP clients count them
_LINE_BREAK = regex.compile(r"\r\n|\r|\n")

# Letters after a backslash that form an escape in the editor's plain-text view.
ESCAPE_CHARS = frozenset("0abfnrtv\\")

# User-facing names, as used on the command line and in transmark.toml
KIND_NAMES: dict[str, TextKind] = {
    "whitespace": TextKind.LEADING_WHITESPACE,
    "escape": TextKind.ESCAPE,
    "markup": TextKind.MARKUP,
    "placeholder": TextKind.PLACEHOLDER,
    "all": TextKind.ALL,
}


def is_blank(ch: str) -> bool:
    """Return True if ch is horizontal whitespace (TAB or a Zs space separator)."""
    return ch == "\t" or unicodedata.category(ch) == "Zs"


def kind_name(kind: TextKind) -> str:
    """Return the user-facing name of a single kind."""
    for name, value in KIND_NAMES.items():
        if value == kind:
            return name
    raise ValueError(f"not a single kind: {kind!r}")


def parse_kinds(names: Iterable[str]) -> TextKind:
    """Combine kind names (case-insensitive, comma lists allowed) into a mask."""
    mask = TextKind(0)
    for entry in names:
        for name in entry.split(","):
            name = name.strip().lower()
            if not name:
                continue
            if name not in KIND_NAMES:
                known = ", ".join(KIND_NAMES)
                raise ValueError(f"unknown kind '{name}' (expected one of: {known})")
            mask |= KIND_NAMES[name]
    return mask


def split_lines(source: str) -> list[str]:
    """Split *source* on \\n, \\r\\n and \\r only; a final line break adds no empty line.

    Other characters str.splitlines() breaks on (form feed, U+2028 ...) stay
    inside their line.
    """
    if not source:
        return []
    lines = _LINE_BREAK.split(source)
    if lines[-1] == "":
        lines.pop()
    return lines
