"""--debug annotation dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from transmark.kinds import Annotation, kind_name


def dump_annotations(
    text: str,
    annotations: list[Annotation],
    *,
    label: str = "",
    file: TextIO | None = None,
) -> None:
    """Print *text* followed by one caret line per annotation, in emission order.

    Writes to the current sys.stderr unless *file* is given.
    """
    if file is None:
        file = sys.stderr
    shown = _visible(text)
    header = f"{label} " if label else ""
    file.write(f"{header}{shown}\n")
    pad = " " * len(header)
    if not annotations:
        file.write(f"{pad}(no annotations)\n")
        return
    for ann in annotations:
        carets = "^" * max(1, ann.end - ann.start)
        file.write(f"{pad}{' ' * ann.start}{carets} {kind_name(ann.kind)} [{ann.start}, {ann.end})\n")


def _visible(text: str) -> str:
    # One output column per character so carets stay aligned
    return "".join(_VISIBLE.get(ch, ch) for ch in text)


_VISIBLE = {
    "\t": "\u2192",
    "\u00a0": "\u00b7",
    "\r": "\u240d",
    "\n": "\u2424",
}
