"""Command-line interface for glint."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, Any

from glint.errors import PatternError, UnknownLanguageError

if TYPE_CHECKING:
    from glint.lexer import RegexLexer

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    language: str | None
    format: str
    sort: bool
    keywords: bool
    debug: bool
    extensions: dict[str, str] = field(default_factory=dict)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="glint",
        description="Tokenize source files for syntax highlighting",
    )
    p.add_argument("input", nargs="?", help="Input source file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-l",
        "--language",
        help="Language name (default: from config, then file extension)",
    )
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--sort",
        action="store_true",
        default=None,
        help="Sort tokens by position instead of generator order",
    )
    p.add_argument(
        "--keywords",
        action="store_true",
        help="Print the language's keyword vocabulary instead of tokens",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover glint.toml)",
    )
    p.add_argument(
        "--list-languages",
        action="store_true",
        help="List available languages and exit",
    )
    p.add_argument("--debug", action="store_true", help="Log debug output to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "glint.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.

    Raises:
        ValueError: on an invalid config value.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Language: config < CLI (extension lookup happens later)
    language: str | None = None
    cfg_language = config.get("language")
    if isinstance(cfg_language, str):
        language = cfg_language
    if args.language:
        language = args.language

    # Output format: config < CLI
    fmt = "text"
    cfg_format = config.get("format")
    if cfg_format is not None:
        if cfg_format not in FORMATS:
            raise ValueError(f"invalid format in config: {cfg_format!r}")
        fmt = cfg_format
    if args.format is not None:
        fmt = args.format

    # Sorting: config < CLI
    sort = False
    cfg_sort = config.get("sort")
    if isinstance(cfg_sort, bool):
        sort = cfg_sort
    if args.sort is not None:
        sort = args.sort

    extensions: dict[str, str] = {}
    cfg_ext = config.get("extensions")
    if isinstance(cfg_ext, dict):
        for k, v in cfg_ext.items():
            extensions[str(k)] = str(v)

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        language=language,
        format=fmt,
        sort=sort,
        keywords=args.keywords,
        debug=args.debug,
        extensions=extensions,
    )


def build_lexer(options: CliOptions) -> RegexLexer:
    """Construct the lexer selected by *options*.

    Raises:
        UnknownLanguageError: if the language cannot be determined.
        PatternError: if the language definition is invalid.
    """
    from glint.languages import get_lexer, lexer_for_filename

    if options.language:
        return get_lexer(options.language)
    return lexer_for_filename(options.input_file, options.extensions)


def tokenize_file(options: CliOptions) -> str:
    """Read and tokenize a file, returning the formatted output."""
    from glint.debug import dump_tokens, tokens_to_json
    from glint.lexer import sort_tokens

    lexer = build_lexer(options)

    if options.keywords:
        return "".join(f"{kw}\n" for kw in lexer.keywords)

    source = options.input_file.read_text(encoding="utf-8")
    tokens = lexer.tokenize(source)
    if options.sort:
        tokens = sort_tokens(tokens)

    if options.format == "json":
        return tokens_to_json(tokens, source) + "\n"

    buf = StringIO()
    dump_tokens(tokens, source, file=buf)
    return buf.getvalue()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_languages:
        from glint.languages import available_languages

        for name in available_languages():
            print(name)
        return 0

    if args.input is None:
        print("error: an input file is required", file=sys.stderr)
        return 2

    try:
        options = resolve_options(args)
    except (ValueError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.debug:
        logging.basicConfig(
            level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s"
        )

    try:
        output = tokenize_file(options)
    except PatternError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except UnknownLanguageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
