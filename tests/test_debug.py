"""Test the --debug annotation dump."""

import io

from conftest import ESC, WS
from transmark.debug import dump_annotations
from transmark.kinds import Annotation


class TestDumpAnnotations:
    def test_carets_under_ranges(self):
        out = io.StringIO()
        dump_annotations("a\\nb  ", [Annotation(1, 3, ESC), Annotation(4, 6, WS)], file=out)
        lines = out.getvalue().splitlines()
        assert lines[0] == "a\\nb  "
        assert lines[1] == " ^^ escape [1, 3)"
        assert lines[2] == "    ^^ whitespace [4, 6)"

    def test_label_indents(self):
        out = io.StringIO()
        dump_annotations("x ", [Annotation(1, 2, WS)], label="3:", file=out)
        lines = out.getvalue().splitlines()
        assert lines[0] == "3: x "
        assert lines[1] == "    ^ whitespace [1, 2)"

    def test_invisible_characters_keep_columns(self):
        out = io.StringIO()
        dump_annotations("\ta ", [], file=out)
        first, second = out.getvalue().splitlines()
        assert len(first) == 3
        assert "\t" not in first
        assert second == "(no annotations)"

    def test_default_stream_is_current_stderr(self, monkeypatch):
        first, second = io.StringIO(), io.StringIO()
        monkeypatch.setattr("sys.stderr", first)
        dump_annotations("a", [])
        monkeypatch.setattr("sys.stderr", second)
        dump_annotations("b", [])
        assert first.getvalue().startswith("a\n")
        assert second.getvalue().startswith("b\n")
