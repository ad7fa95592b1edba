"""Resolve overlapping annotations into sorted, non-overlapping runs."""

from __future__ import annotations

from collections.abc import Iterable

from transmark.kinds import Annotation, TextKind


def paint(length: int, annotations: Iterable[Annotation]) -> list[TextKind | None]:
    """Return the kind shown at each character; later annotations win on overlap.

    Ranges reaching past *length* are clipped.
    """
    cells: list[TextKind | None] = [None] * length
    for ann in annotations:
        for i in range(max(ann.start, 0), min(ann.end, length)):
            cells[i] = ann.kind
    return cells


def runs(cells: list[TextKind | None]) -> list[Annotation]:
    """Compress a painted cell list into maximal same-kind runs, left to right."""
    result: list[Annotation] = []
    start = 0
    current: TextKind | None = None
    for i, kind in enumerate(cells):
        if kind != current:
            if current is not None:
                result.append(Annotation(start, i, current))
            start = i
            current = kind
    if current is not None:
        result.append(Annotation(start, len(cells), current))
    return result


def flatten(text: str, annotations: Iterable[Annotation]) -> list[Annotation]:
    """Overlay *annotations* on *text* and return the visible runs."""
    return runs(paint(len(text), annotations))
