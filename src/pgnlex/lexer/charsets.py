"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from pgnlex.lexer.charsets import FILE_CHARS

    if char in FILE_CHARS:  # O(1) lookup
        ...
"""

# Whitespace separating tokens; never emitted
WHITESPACE: frozenset[str] = frozenset(" \t\n\r")

DIGITS: frozenset[str] = frozenset("0123456789")

# Board coordinates
FILE_CHARS: frozenset[str] = frozenset("abcdefgh")
RANK_CHARS: frozenset[str] = frozenset("12345678")

# Literal tails matched after the lead characters of fixed tokens
DRAW_TAIL = "2-1/2"  # after "1/"
CASTLE_STEP = "-O"
