"""Built-in language registry: name, alias, and file extension lookup."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import PurePath

from glint.errors import UnknownLanguageError
from glint.languages import data, python, script, shell
from glint.lexer import RegexLexer
from glint.logger import get_logger

logger = get_logger(__name__)

LANGUAGES: dict[str, Callable[[], RegexLexer]] = {
    "python": python.make_lexer,
    "json": data.make_lexer,
    "shell": shell.make_lexer,
    "script": script.make_lexer,
}

# Alias map: alternate name -> canonical name
ALIASES: dict[str, str] = {
    "py": "python",
    "python3": "python",
    "sh": "shell",
    "bash": "shell",
    "zsh": "shell",
    "shellscript": "shell",
}

EXTENSIONS: dict[str, str] = {
    ".py": "python",
    ".pyi": "python",
    ".json": "json",
    ".sh": "shell",
    ".bash": "shell",
    ".zsh": "shell",
    "": "script",
}


def resolve_name(name: str) -> str:
    """Resolve an alias to its canonical language name."""
    name = name.lower()
    return ALIASES.get(name, name)


def available_languages() -> list[str]:
    """Return the canonical names of all registered languages."""
    return sorted(LANGUAGES)


def get_lexer(name: str) -> RegexLexer:
    """Construct the lexer for a language name or alias.

    Raises:
        UnknownLanguageError: if no language is registered under *name*.
        PatternError: if the language definition has an invalid pattern.
    """
    factory = LANGUAGES.get(resolve_name(name))
    if factory is None:
        raise UnknownLanguageError(name)
    lexer = factory()
    logger.debug("constructed %s lexer", lexer.name)
    return lexer


def language_for_filename(
    filename: str | PurePath, extra: Mapping[str, str] | None = None
) -> str:
    """Return the language name for *filename* from its extension.

    *extra* maps extensions to language names and takes precedence over the
    built-in table.
    """
    suffix = PurePath(filename).suffix.lower()
    if extra:
        for ext, name in extra.items():
            if _normalize_ext(ext) == suffix:
                return resolve_name(name)
    name = EXTENSIONS.get(suffix)
    if name is None:
        raise UnknownLanguageError(str(filename))
    return name


def lexer_for_filename(
    filename: str | PurePath, extra: Mapping[str, str] | None = None
) -> RegexLexer:
    """Construct the lexer for *filename*; see :func:`language_for_filename`."""
    return get_lexer(language_for_filename(filename, extra))


def _normalize_ext(ext: str) -> str:
    ext = ext.lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext
