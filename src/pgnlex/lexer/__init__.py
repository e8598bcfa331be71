"""Single-pass PGN lexer.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (cursor primitives + dispatch)
├── charsets.py          # Character classes and fixed literals
└── scanners/            # Sub-scanners entered after dispatch
    ├── number.py        # Move numbers, result markers, ranks
    ├── tag_pair.py      # [Key "Value"]
    ├── comment.py       # {text}
    └── castle.py        # O-O / O-O-O

Usage:
    >>> from pgnlex.lexer import Lexer
    >>> for token in Lexer("O-O-O").tokenize():
    ...     print(token)
    Token(LONG_CASTLE, 'O-O-O', 1:1)
    Token(EOF, '', 1:6)

"""

from pgnlex.lexer.core import Lexer

__all__ = ["Lexer"]
