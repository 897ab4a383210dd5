"""Human-readable and JSON token dumps."""

from __future__ import annotations

import json
import sys
from collections.abc import Hashable, Iterable
from enum import Enum
from typing import TextIO

from glint.text import Utf16Index
from glint.tokens import Token


def kind_name(kind: Hashable) -> str:
    """Display name for a token kind."""
    if isinstance(kind, Enum):
        return str(kind.value)
    return str(kind)


def dump_tokens(tokens: Iterable[Token], source: str, *, file: TextIO = sys.stderr) -> None:
    """Print one ``KIND START-END TEXT`` line per token to *file*."""
    index = Utf16Index(source)
    for token in tokens:
        text = source[index.index(token.start) : index.index(token.end)]
        file.write(f"{kind_name(token.kind)} {token.start}-{token.end} {text!r}\n")


def tokens_to_json(tokens: Iterable[Token], source: str) -> str:
    """Serialize tokens as a JSON list of kind/start/end/text objects."""
    index = Utf16Index(source)
    items = [
        {
            "kind": kind_name(t.kind),
            "start": t.start,
            "end": t.end,
            "text": source[index.index(t.start) : index.index(t.end)],
        }
        for t in tokens
    ]
    return json.dumps(items, ensure_ascii=False, indent=2)
