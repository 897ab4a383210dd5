"""Script files without an extension, dispatched on the shebang line."""

from __future__ import annotations

from glint.languages.python import python_generators
from glint.languages.shell import shell_generators
from glint.lexer import RegexLexer
from glint.matchers import TokenGenerator


def interpreter(source: str) -> str:
    """Return the interpreter named by the shebang line, or ``""``."""
    if not source.startswith("#!"):
        return ""
    line = source[2:].partition("\n")[0].strip()
    parts = line.split()
    if not parts:
        return ""
    prog = parts[0].rsplit("/", 1)[-1]
    # "#!/usr/bin/env python3" names the interpreter in the next word
    if prog == "env":
        args = [p for p in parts[1:] if not p.startswith("-")]
        prog = args[0].rsplit("/", 1)[-1] if args else ""
    return prog


class ScriptLexer(RegexLexer):
    """Python for python shebangs, shell for everything else."""

    name = "script"

    def __init__(self) -> None:
        self._python = python_generators()
        self._shell = shell_generators()

    def generators(self, source: str) -> list[TokenGenerator]:
        if interpreter(source).startswith("python"):
            return list(self._python)
        return list(self._shell)


def make_lexer() -> ScriptLexer:
    return ScriptLexer()
