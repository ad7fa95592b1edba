"""Minimal LSP server for transmark — semantic tokens only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL,
    SemanticTokens,
    SemanticTokensLegend,
    SemanticTokensParams,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from transmark.items import TextItem
from transmark.kinds import TextKind, split_lines
from transmark.overlay import flatten
from transmark.selection import for_item

# Index in this list is the token type number sent to the client
TOKEN_TYPES = ["whitespace", "escape", "markup", "placeholder"]

_TOKEN_INDEX = {
    TextKind.LEADING_WHITESPACE: 0,
    TextKind.ESCAPE: 1,
    TextKind.MARKUP: 2,
    TextKind.PLACEHOLDER: 3,
}

LEGEND = SemanticTokensLegend(token_types=TOKEN_TYPES, token_modifiers=[])

server = LanguageServer("transmark-lsp", "0.1.0", text_document_sync_kind=TextDocumentSyncKind.Full)


def _utf16_offsets(line: str) -> list[int]:
    """Map each str index (0..len) to its UTF-16 code unit offset."""
    offsets = [0]
    for ch in line:
        offsets.append(offsets[-1] + (2 if ord(ch) > 0xFFFF else 1))
    return offsets


def encode_line_tokens(lines: list[str], format_flag: str = "") -> list[int]:
    """Highlight each line and encode the visible runs in LSP relative form."""
    data: list[int] = []
    prev_line = 0
    prev_char = 0

    for line_no, line in enumerate(lines):
        h = for_item(TextItem(line, format_flag=format_flag), TextKind.ALL)
        if h is None:
            continue
        visible = flatten(line, h.scan(line))
        if not visible:
            continue
        offsets = _utf16_offsets(line)
        for run in visible:
            start = offsets[run.start]
            length = offsets[run.end] - start
            delta_line = line_no - prev_line
            delta_char = start - prev_char if delta_line == 0 else start
            data.extend([delta_line, delta_char, length, _TOKEN_INDEX[run.kind], 0])
            prev_line = line_no
            prev_char = start

    return data


def semantic_tokens(ls: LanguageServer, uri: str) -> SemanticTokens:
    """Compute semantic tokens for the document at *uri*."""
    doc = ls.workspace.get_text_document(uri)
    lines = split_lines(doc.source)
    return SemanticTokens(data=encode_line_tokens(lines))


@server.feature(TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL, LEGEND)
def semantic_tokens_full(ls: LanguageServer, params: SemanticTokensParams) -> SemanticTokens:
    return semantic_tokens(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
