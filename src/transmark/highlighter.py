"""Highlighter interface and the composite that fans out to several highlighters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

from transmark.kinds import Annotation, TextKind

Emit = Callable[[int, int, TextKind], None]


class Highlighter(ABC):
    """Finds ranges of a string worth highlighting.

    Implementations hold no mutable state after construction, so a single
    instance may be shared between threads.
    """

    @abstractmethod
    def highlight(self, text: str, emit: Emit) -> None:
        """Call ``emit(start, end, kind)`` for every range found in *text*."""

    def scan(self, text: str) -> list[Annotation]:
        """Return the emitted ranges as a list, in emission order."""
        found: list[Annotation] = []

        def collect(start: int, end: int, kind: TextKind) -> None:
            found.append(Annotation(start, end, kind))

        self.highlight(text, collect)
        return found


class CompositeHighlighter(Highlighter):
    """Runs sub-highlighters in registration order over the same text.

    Output is the plain concatenation of each child's output; nothing is
    sorted, merged or deduplicated.
    """

    def __init__(self, children: Iterable[Highlighter] = ()) -> None:
        self._children = tuple(children)

    @property
    def children(self) -> tuple[Highlighter, ...]:
        return self._children

    def highlight(self, text: str, emit: Emit) -> None:
        for child in self._children:
            child.highlight(text, emit)

    def __repr__(self) -> str:
        return f"CompositeHighlighter({list(self._children)!r})"
