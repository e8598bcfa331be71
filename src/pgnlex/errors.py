"""Exception classes for pgnlex.

Malformed PGN never raises on its own: the lexer reports it as an ILLEGAL
token. These exceptions cover strict mode and API misuse.
"""

from __future__ import annotations


class PgnLexError(Exception):
    """Base exception for all pgnlex errors.

    Subclass this for specific error categories.
    """

    pass


class IllegalTokenError(PgnLexError):
    """Illegal input met while tokenizing in strict mode.

    Raised by Lexer.tokenize() in place of yielding an ILLEGAL token when
    LexConfig.strict is enabled.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize error with optional location.

        Args:
            message: Diagnostic from the ILLEGAL token
            lineno: Line number where the token started (1-indexed)
            col_offset: Column offset where the token started (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class LexerReuseError(PgnLexError):
    """A Lexer was asked to tokenize a second time.

    Lexer instances are single-use; create a new one per document.
    """

    def __init__(self, source_file: str | None = None) -> None:
        self.source_file = source_file
        target = f" for {source_file}" if source_file else ""
        super().__init__(f"Lexer{target} has already been consumed; create a new Lexer")
