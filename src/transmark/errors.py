"""Error types with formatted text context."""

from __future__ import annotations

# Longest excerpt of the offending text shown by format()
_CONTEXT_WIDTH = 60


class HighlightError(Exception):
    """Raised when the matching engine fails for a reason other than a timeout."""

    def __init__(self, message: str, rule: str, text: str) -> None:
        self.message = message
        self.rule = rule
        self.text = text
        super().__init__(self.format())

    def format(self, source: str = "<text>") -> str:
        excerpt = self.text.splitlines()[0] if self.text else ""
        if len(excerpt) > _CONTEXT_WIDTH:
            excerpt = excerpt[: _CONTEXT_WIDTH - 3] + "..."

        gutter = "  |"
        return (
            f"error: {self.message}\n"
            f"  --> {source} (rule '{self.rule}', {len(self.text)} chars)\n"
            f"{gutter}\n"
            f"{gutter} {excerpt}"
        )
