"""Minimal LSP server for glint: semantic tokens and keyword completion."""

from __future__ import annotations

from bisect import bisect_right

import regex
from lsprotocol.types import (
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionParams,
    SemanticTokenModifiers,
    SemanticTokens,
    SemanticTokensLegend,
    SemanticTokensParams,
    SemanticTokenTypes,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer
from pygls.workspace import TextDocument

from glint.errors import PatternError, UnknownLanguageError
from glint.languages import LANGUAGES, get_lexer, language_for_filename, resolve_name
from glint.lexer import RegexLexer, sort_tokens
from glint.logger import get_logger
from glint.text import Utf16Index
from glint.tokens import Token, TokenKind

logger = get_logger(__name__)

TOKEN_TYPES: list[str] = [
    SemanticTokenTypes.Keyword,
    SemanticTokenTypes.Function,
    SemanticTokenTypes.Number,
    SemanticTokenTypes.String,
    SemanticTokenTypes.Comment,
    SemanticTokenTypes.Decorator,
    SemanticTokenTypes.Operator,
    SemanticTokenTypes.Variable,
    SemanticTokenTypes.Property,
    SemanticTokenTypes.Type,
]

TOKEN_MODIFIERS: list[str] = [
    SemanticTokenModifiers.DefaultLibrary,
    SemanticTokenModifiers.Readonly,
]

# TokenKind -> (token type, modifier names); kinds missing here are not sent
KIND_MAP: dict[TokenKind, tuple[str, tuple[str, ...]]] = {
    TokenKind.KEYWORD: (SemanticTokenTypes.Keyword, ()),
    TokenKind.BUILTIN: (SemanticTokenTypes.Function, (SemanticTokenModifiers.DefaultLibrary,)),
    TokenKind.NUMBER: (SemanticTokenTypes.Number, ()),
    TokenKind.STRING: (SemanticTokenTypes.String, ()),
    TokenKind.COMMENT: (SemanticTokenTypes.Comment, ()),
    TokenKind.FUNCTION: (SemanticTokenTypes.Function, ()),
    TokenKind.DECORATOR: (SemanticTokenTypes.Decorator, ()),
    TokenKind.OPERATOR: (SemanticTokenTypes.Operator, ()),
    TokenKind.VARIABLE: (SemanticTokenTypes.Variable, ()),
    TokenKind.PROPERTY: (SemanticTokenTypes.Property, ()),
    TokenKind.TYPE: (SemanticTokenTypes.Type, ()),
    TokenKind.CONSTANT: (SemanticTokenTypes.Variable, (SemanticTokenModifiers.Readonly,)),
}

LEGEND = SemanticTokensLegend(token_types=TOKEN_TYPES, token_modifiers=TOKEN_MODIFIERS)

_LINE_BREAK = regex.compile(r"\r\n|\r|\n")

server = LanguageServer("glint-lsp", "0.1.0", text_document_sync_kind=TextDocumentSyncKind.Full)


def _lexer_for(doc: TextDocument) -> RegexLexer | None:
    """Construct the lexer for *doc*, or None to fall back to plain text."""
    try:
        if doc.language_id and resolve_name(doc.language_id) in LANGUAGES:
            return get_lexer(doc.language_id)
        return get_lexer(language_for_filename(doc.filename or doc.uri))
    except UnknownLanguageError:
        logger.debug("no language for %s", doc.uri)
        return None
    except PatternError as exc:
        logger.warning("highlighting disabled for %s:\n%s", doc.uri, exc)
        return None


def _line_bounds(source: str, index: Utf16Index) -> tuple[list[int], list[int]]:
    """Return UTF-16 offsets of each line's start and of its line break."""
    starts = [0]
    ends: list[int] = []
    for m in _LINE_BREAK.finditer(source):
        ends.append(index.offset(m.start()))
        starts.append(index.offset(m.end()))
    ends.append(index.length)
    return starts, ends


def encode_semantic_tokens(tokens: list[Token], source: str) -> list[int]:
    """Delta-encode tokens for ``textDocument/semanticTokens``.

    Tokens are put in position order. Zero-width tokens, tokens overlapping
    an earlier one, and kinds without a legend entry are dropped; tokens that
    span lines are split at line breaks.
    """
    index = Utf16Index(source)
    starts, ends = _line_bounds(source, index)
    data: list[int] = []
    prev_line = 0
    prev_char = 0
    covered = 0

    for token in sort_tokens(tokens):
        mapped = KIND_MAP.get(token.kind) if isinstance(token.kind, TokenKind) else None
        if mapped is None or token.span.length == 0 or token.start < covered:
            continue
        covered = token.end
        type_index = TOKEN_TYPES.index(mapped[0])
        modifiers = 0
        for name in mapped[1]:
            modifiers |= 1 << TOKEN_MODIFIERS.index(name)

        line = bisect_right(starts, token.start) - 1
        pos = token.start
        while pos < token.end and line < len(starts):
            piece_end = min(token.end, ends[line])
            if piece_end > pos:
                char = pos - starts[line]
                delta_line = line - prev_line
                delta_char = char - prev_char if delta_line == 0 else char
                data.extend((delta_line, delta_char, piece_end - pos, type_index, modifiers))
                prev_line, prev_char = line, char
            line += 1
            if line < len(starts):
                pos = starts[line]

    return data


def semantic_tokens(ls: LanguageServer, uri: str) -> SemanticTokens:
    """Tokenize the document at *uri* and return its encoded semantic tokens."""
    doc = ls.workspace.get_text_document(uri)
    lexer = _lexer_for(doc)
    if lexer is None:
        return SemanticTokens(data=[])
    source = doc.source
    return SemanticTokens(data=encode_semantic_tokens(lexer.tokenize(source), source))


def keyword_completions(ls: LanguageServer, uri: str) -> CompletionList:
    """Offer the keyword vocabulary of the document's language."""
    doc = ls.workspace.get_text_document(uri)
    lexer = _lexer_for(doc)
    if lexer is None:
        return CompletionList(is_incomplete=False, items=[])
    items = [
        CompletionItem(label=kw, kind=CompletionItemKind.Keyword)
        for kw in dict.fromkeys(lexer.keywords)
    ]
    return CompletionList(is_incomplete=False, items=items)


@server.feature(TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL, LEGEND)
def semantic_tokens_full(ls: LanguageServer, params: SemanticTokensParams) -> SemanticTokens:
    return semantic_tokens(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_COMPLETION)
def completion(ls: LanguageServer, params: CompletionParams) -> CompletionList:
    return keyword_completions(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
