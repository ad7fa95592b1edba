"""Structural scanner — whitespace irregularities and escape sequences."""

from __future__ import annotations

from transmark.highlighter import Emit, Highlighter
from transmark.kinds import ESCAPE_CHARS, NBSP, TextKind, is_blank

_WS = TextKind.LEADING_WHITESPACE


class StructuralScanner(Highlighter):
    """Highlight leading/trailing blanks, NBSPs, blank runs and backslash escapes.

    Leading and trailing whitespace are found independently of the forward
    pass, so a blank run at either end is reported twice. Consumers overlay
    ranges rather than expect a partition.
    """

    def highlight(self, text: str, emit: Emit) -> None:
        if not text:
            return

        length = len(text)

        # Leading whitespace
        lead = 0
        while lead < length and is_blank(text[lead]):
            lead += 1
        if lead:
            emit(0, lead, _WS)

        # Trailing whitespace
        trail = 0
        while trail < length and is_blank(text[length - 1 - trail]):
            trail += 1
        if trail:
            emit(length - trail, length, _WS)

        self._forward_pass(text, emit)

    def _forward_pass(self, text: str, emit: Emit) -> None:
        length = len(text)
        run_start = -1
        pos = 0

        while pos < length:
            ch = text[pos]

            # NBSP is always highlighted on its own and neither starts nor ends a run
            if ch == NBSP:
                emit(pos, pos + 1, _WS)
            elif is_blank(ch):
                if run_start == -1:
                    run_start = pos
            elif run_start != -1:
                if pos - run_start >= 2:
                    emit(run_start, pos, _WS)
                run_start = -1

            if ch == "\\":
                if pos + 1 >= length:
                    break
                # The escaped character is consumed either way
                if text[pos + 1] in ESCAPE_CHARS:
                    emit(pos, pos + 2, TextKind.ESCAPE)
                pos += 1

            pos += 1

        if run_start != -1 and length - run_start >= 2:
            emit(run_start, length, _WS)

    def __repr__(self) -> str:
        return "StructuralScanner()"
