"""Token and TokenType definitions for the pgnlex lexer.

The lexer produces a stream of Token objects for a downstream consumer
(a move-tree parser, a reporter, a linter). Each Token has a type, a
string value, and a source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pgnlex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    The set is closed: consumers are expected to handle every member.

    """

    # Stream structure
    ILLEGAL = auto()  # value holds the diagnostic
    EOF = auto()

    # Metadata and annotations
    MOVE_NUMBER = auto()  # 1. or 12...
    TAG_PAIR = auto()  # [Event "Casual"]
    COMMENT = auto()  # {text}

    # Pieces (pawns have no letter in SAN)
    KING = auto()  # K
    QUEEN = auto()  # Q
    ROOK = auto()  # R
    BISHOP = auto()  # B
    KNIGHT = auto()  # N

    # Squares
    FILE = auto()  # a-h
    RANK = auto()  # 1-8

    # Game termination markers
    WHITE_WIN = auto()  # 1-0
    BLACK_WIN = auto()  # 0-1
    DRAW = auto()  # 1/2-1/2
    STAR = auto()  # *

    # Move symbols
    TAKES = auto()  # x
    CHECK = auto()  # +
    MATE = auto()  # #
    PROMOTE = auto()  # =
    SHORT_CASTLE = auto()  # O-O
    LONG_CASTLE = auto()  # O-O-O

    # Variations
    LPAREN = auto()  # (
    RPAREN = auto()  # )


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: The payload. For MOVE_NUMBER, FILE, RANK and COMMENT this is
            the captured text; for TAG_PAIR it is the tag value; for ILLEGAL
            it is the diagnostic; for symbols it is the consumed literal.
        key: Tag name for TAG_PAIR tokens, None otherwise
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _end_lineno: End line number (for multi-line comments)
        _end_col: End column offset
        _source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    type: TokenType
    value: str
    key: str | None = None
    _lineno: int = 1
    _col: int = 1
    _start_offset: int = 0
    _end_offset: int = 0
    _end_lineno: int | None = None
    _end_col: int | None = None
    _source_file: str | None = None
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from pgnlex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        if self.key is not None:
            return f"Token({self.type.name}, {self.key!r}={val!r}, {self._lineno}:{self._col})"
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def is_illegal(self) -> bool:
        return self.type is TokenType.ILLEGAL


# Tokens whose value is fixed by their type
PIECE_TOKENS: dict[str, TokenType] = {
    "K": TokenType.KING,
    "Q": TokenType.QUEEN,
    "R": TokenType.ROOK,
    "B": TokenType.BISHOP,
    "N": TokenType.KNIGHT,
}

SYMBOL_TOKENS: dict[str, TokenType] = {
    "x": TokenType.TAKES,
    "+": TokenType.CHECK,
    "#": TokenType.MATE,
    "=": TokenType.PROMOTE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "*": TokenType.STAR,
}
