"""Command-line driver: tokenize PGN files and print their token streams.

Usage:
    pgnlex [PATH ...] [--format text|json] [--strict] [--profile] [-v]

Each PATH is a PGN file or a directory whose regular files are tokenized
in name order. With no PATH, the ``data`` directory is used. Illegal tokens
are reported and scanning carries on unless ``--strict`` is given.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TextIO

from pgnlex.config import LexConfig, lex_config_context
from pgnlex.errors import IllegalTokenError
from pgnlex.lexer import Lexer
from pgnlex.profiling import profiled_lex
from pgnlex.renderers import RENDERERS, TokenRenderer
from pgnlex.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_DATA_DIR = Path("data")

EXIT_OK = 0
EXIT_ILLEGAL = 1
EXIT_NO_INPUT = 2


def iter_sources(paths: Sequence[Path]) -> Iterator[Path]:
    """Expand PATH arguments into the files to tokenize.

    Directories contribute their regular files, sorted by name; missing
    paths are logged and skipped.
    """
    for path in paths:
        if path.is_dir():
            yield from sorted(p for p in path.iterdir() if p.is_file())
        elif path.is_file():
            yield path
        else:
            logger.warning("skipping %s: no such file or directory", path)


def tokenize_file(path: Path, renderer: TokenRenderer, out: TextIO) -> bool:
    """Tokenize one file and write its rendered stream to ``out``.

    Returns:
        False if the file could not be read, True otherwise.

    Raises:
        IllegalTokenError: On illegal input when strict mode is active.
    """
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("skipping %s: %s", path, e)
        return False

    _write(out, renderer.header(path.name))
    for token in Lexer(source, source_file=str(path)).tokenize():
        _write(out, renderer.render_token(token))
    _write(out, renderer.footer(path.name))
    return True


def _write(out: TextIO, line: str) -> None:
    if line:
        out.write(line + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pgnlex", description="Tokenize PGN chess game files"
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help=f"PGN files or directories (default: {DEFAULT_DATA_DIR})",
    )
    parser.add_argument(
        "--format", choices=sorted(RENDERERS), default="text", help="Output format"
    )
    parser.add_argument(
        "--strict", action="store_true", help="Stop at the first illegal token"
    )
    parser.add_argument(
        "--profile", action="store_true", help="Log tokenization metrics when done"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    out = out if out is not None else sys.stdout

    level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    elif args.profile:
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    renderer = RENDERERS[args.format]()
    paths = args.paths or [DEFAULT_DATA_DIR]
    config = LexConfig(strict=args.strict)

    tokenized = 0
    status = EXIT_OK
    with lex_config_context(config), profiled_lex() as metrics:
        for path in iter_sources(paths):
            try:
                if tokenize_file(path, renderer, out):
                    tokenized += 1
            except IllegalTokenError as e:
                logger.error("%s", e)
                status = EXIT_ILLEGAL
                break

    if args.profile:
        logger.info("metrics: %s", metrics.summary())

    if tokenized == 0 and status == EXIT_OK:
        logger.error("no readable PGN input found in %s", ", ".join(map(str, paths)))
        return EXIT_NO_INPUT
    return status


if __name__ == "__main__":
    sys.exit(main())
