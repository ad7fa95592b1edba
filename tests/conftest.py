"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from transmark.highlighter import Highlighter
from transmark.kinds import Annotation, TextKind
from transmark.scanner import StructuralScanner

WS = TextKind.LEADING_WHITESPACE
ESC = TextKind.ESCAPE
MARKUP = TextKind.MARKUP
PH = TextKind.PLACEHOLDER


@pytest.fixture
def scan_basic():
    """Return a helper that runs a fresh structural scanner and returns (start, end, kind) triples."""
    scanner = StructuralScanner()

    def _scan(text: str) -> list[tuple[int, int, TextKind]]:
        return triples(scanner.scan(text))

    return _scan


@pytest.fixture
def recorder():
    """Return (emit, calls): an emit callback and the list it appends to."""
    calls: list[tuple[int, int, TextKind]] = []

    def emit(start: int, end: int, kind: TextKind) -> None:
        calls.append((start, end, kind))

    return emit, calls


def triples(annotations: list[Annotation]) -> list[tuple[int, int, TextKind]]:
    """Flatten annotations into plain tuples for compact comparisons."""
    return [(a.start, a.end, a.kind) for a in annotations]


def matched(h: Highlighter, text: str) -> list[str]:
    """Return the substrings a highlighter marks, in emission order."""
    return [text[a.start : a.end] for a in h.scan(text)]


def assert_in_bounds(annotations: list[Annotation], text: str) -> None:
    for a in annotations:
        assert 0 <= a.start < a.end <= len(text), f"bad range {a} for {text!r}"
