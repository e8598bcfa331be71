"""Single-pass PGN lexer with fixed lookahead.

Dispatches on the first non-whitespace character of each token. Tokens
longer than one character are handed to a sub-scanner mixin; those that
need lookahead beyond one character (castling, result markers) match
literals with an explicit mark/restore of the cursor.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from pgnlex.config import get_lex_config
from pgnlex.errors import IllegalTokenError, LexerReuseError
from pgnlex.lexer.charsets import DIGITS, FILE_CHARS, WHITESPACE
from pgnlex.lexer.scanners import (
    CastleScannerMixin,
    CommentScannerMixin,
    NumberScannerMixin,
    TagPairScannerMixin,
)
from pgnlex.profiling import get_lex_accumulator
from pgnlex.tokens import PIECE_TOKENS, SYMBOL_TOKENS, Token, TokenType
from pgnlex.utils.logger import get_logger

logger = get_logger(__name__)

# Saved cursor state: (offset, line, column)
Mark = tuple[int, int, int]


class Lexer(
    NumberScannerMixin,
    TagPairScannerMixin,
    CommentScannerMixin,
    CastleScannerMixin,
):
    """Pull-based PGN lexer.

    Usage:
            >>> lexer = Lexer("1. e4 e5")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(MOVE_NUMBER, '1.', 1:1)
        Token(FILE, 'e', 1:4)
        Token(RANK, '4', 1:5)
        Token(FILE, 'e', 1:7)
        Token(RANK, '5', 1:8)
        Token(EOF, '', 1:9)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        "_strict",
        "_produced",
        # Start of the token being scanned
        "_saved_pos",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Complete PGN text
            source_file: Optional source file path for diagnostics. Falls back
                to the active LexConfig's source_file.
        """
        config = get_lex_config()
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file if source_file is not None else config.source_file
        self._strict = config.strict
        self._produced = 0

        self._saved_pos = 0
        self._saved_lineno = 1
        self._saved_col = 1

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream ending with EOF.

        Yields:
            Token objects one at a time, EOF last.

        Raises:
            LexerReuseError: If this lexer has already produced tokens.
            IllegalTokenError: On illegal input when LexConfig.strict is set.
        """
        if self._produced:
            raise LexerReuseError(self._source_file)

        token_count = 0
        illegal_count = 0
        try:
            while True:
                token = self.next_token()
                token_count += 1
                if token.type is TokenType.ILLEGAL:
                    illegal_count += 1
                    if self._strict:
                        raise IllegalTokenError(
                            token.value,
                            lineno=token.lineno,
                            col_offset=token.col,
                            source_file=self._source_file,
                        )
                yield token
                if token.type is TokenType.EOF:
                    break
        finally:
            # Streams stopped by a strict error or by the consumer still count
            acc = get_lex_accumulator()
            if acc is not None:
                acc.record_stream(self._source_len, token_count, illegal_count)

    def next_token(self) -> Token:
        """Produce the next token.

        Once the input is exhausted every call returns an EOF token.
        Illegal input yields an ILLEGAL token; the cursor stays past the
        consumed characters and no resynchronization is attempted.
        """
        self._produced += 1
        self._skip_whitespace()
        self._save_location()

        char = self._advance()
        if not char:
            return self._make_token(TokenType.EOF, "")

        piece = PIECE_TOKENS.get(char)
        if piece is not None:
            return self._make_token(piece, char)
        if char in FILE_CHARS:
            return self._make_token(TokenType.FILE, char)
        symbol = SYMBOL_TOKENS.get(char)
        if symbol is not None:
            return self._make_token(symbol, char)
        if char in DIGITS:
            return self._scan_number(char)
        if char == "[":
            return self._scan_tag_pair()
        if char == "{":
            return self._scan_comment()
        if char == "O":
            return self._scan_castle()

        return self._illegal(f"unrecognized character {char!r}")

    # =========================================================================
    # Cursor primitives
    # =========================================================================

    def _peek(self) -> str:
        """Peek at the next character without consuming it.

        Returns:
            Next character or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def _advance(self) -> str:
        """Consume one character, updating line/column tracking.

        Returns:
            The consumed character, or empty string at end of input
            (the cursor stays clamped at the end).
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _skip_whitespace(self) -> None:
        while self._peek() in WHITESPACE:
            self._advance()

    def _mark(self) -> Mark:
        return (self._pos, self._lineno, self._col)

    def _restore(self, mark: Mark) -> None:
        self._pos, self._lineno, self._col = mark

    def _match(self, literal: str) -> bool:
        """Consume ``literal`` if it comes next; otherwise leave the cursor alone."""
        mark = self._mark()
        for expected in literal:
            if self._advance() != expected:
                self._restore(mark)
                return False
        return True

    # =========================================================================
    # Token construction
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location as the start of the next token."""
        self._saved_pos = self._pos
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(self, token_type: TokenType, value: str, *, key: str | None = None) -> Token:
        """Create a Token from the saved start to the current position."""
        return Token(
            type=token_type,
            value=value,
            key=key,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=self._saved_pos,
            _end_offset=self._pos,
            _end_lineno=self._lineno,
            _end_col=self._col,
            _source_file=self._source_file,
        )

    def _illegal(self, message: str) -> Token:
        logger.debug(
            "illegal token at %s:%d:%d: %s",
            self._source_file or "<string>",
            self._saved_lineno,
            self._saved_col,
            message,
        )
        return self._make_token(TokenType.ILLEGAL, message)
