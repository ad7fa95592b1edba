"""Test overlaying annotations into visible runs."""

from conftest import ESC, MARKUP, PH, WS
from transmark.kinds import Annotation
from transmark.overlay import flatten, paint, runs


class TestPaint:
    def test_later_wins(self):
        cells = paint(5, [Annotation(0, 3, MARKUP), Annotation(1, 2, PH)])
        assert cells == [MARKUP, PH, MARKUP, None, None]

    def test_clipped(self):
        assert paint(2, [Annotation(1, 9, WS)]) == [None, WS]

    def test_empty(self):
        assert paint(0, [Annotation(0, 1, WS)]) == []


class TestRuns:
    def test_merges_adjacent_same_kind(self):
        assert runs([WS, WS, None, ESC, ESC, PH]) == [
            Annotation(0, 2, WS),
            Annotation(3, 5, ESC),
            Annotation(5, 6, PH),
        ]

    def test_no_cells(self):
        assert runs([]) == []


class TestFlatten:
    def test_duplicate_ranges_collapse(self):
        text = "  abc  "
        anns = [Annotation(0, 2, WS), Annotation(5, 7, WS), Annotation(0, 2, WS)]
        assert flatten(text, anns) == [Annotation(0, 2, WS), Annotation(5, 7, WS)]
