"""
pgnlex: Portable Game Notation lexer for Python

Tokenizes PGN chess game records: tag pairs, move numbers, SAN move
symbols, comments, variations and result markers. Single pass, fixed
lookahead, zero runtime dependencies.

Quick Start:
    >>> from pgnlex import tokenize, describe
    >>> [describe(t) for t in tokenize("1. e4 1-0")]
    ['move number: 1.', 'file: e', 'rank: 4', 'white wins', 'end of input']

    >>> # Pull tokens one at a time
    >>> from pgnlex import Lexer
    >>> lexer = Lexer('[Event "Casual"]')
    >>> lexer.next_token()
    Token(TAG_PAIR, 'Event'='Casual', 1:1)

Malformed input does not raise: it produces ILLEGAL tokens carrying a
diagnostic. Enable ``LexConfig(strict=True)`` to raise IllegalTokenError
instead.
"""

from pgnlex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from pgnlex.errors import IllegalTokenError, LexerReuseError, PgnLexError
from pgnlex.lexer import Lexer
from pgnlex.location import SourceLocation
from pgnlex.profiling import LexAccumulator, get_lex_accumulator, profiled_lex
from pgnlex.renderers import JsonLinesRenderer, TextRenderer, TokenRenderer, describe
from pgnlex.serialization import from_dict, from_json, to_dict, to_json
from pgnlex.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Tokenize PGN source into a list of tokens ending with EOF.

    Args:
        source: Complete PGN text
        source_file: Optional source file path for diagnostics

    Returns:
        All tokens, EOF last

    Raises:
        IllegalTokenError: On illegal input when the active LexConfig is strict.

    Example:
        >>> [t.type.name for t in tokenize("O-O")]
        ['SHORT_CASTLE', 'EOF']
    """
    return list(Lexer(source, source_file=source_file).tokenize())


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "tokenize",
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    # Errors
    "PgnLexError",
    "IllegalTokenError",
    "LexerReuseError",
    # Configuration (ContextVar-based)
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Rendering
    "describe",
    "TokenRenderer",
    "TextRenderer",
    "JsonLinesRenderer",
    # Profiling
    "LexAccumulator",
    "get_lex_accumulator",
    "profiled_lex",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
