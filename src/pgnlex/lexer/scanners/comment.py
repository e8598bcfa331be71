"""Brace comment scanner mixin."""

from __future__ import annotations

from pgnlex.tokens import Token, TokenType


class CommentScannerMixin:
    """Mixin providing ``{...}`` comment scanning.

    Comment text is kept verbatim, newlines included. Braces do not nest:
    the first ``}`` closes the comment.

    """

    def _advance(self) -> str:
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, *, key: str | None = None) -> Token:
        """Create token spanning the saved start. Implemented by Lexer."""
        raise NotImplementedError

    def _illegal(self, message: str) -> Token:
        raise NotImplementedError

    def _scan_comment(self) -> Token:
        """Scan a comment after the opening ``{`` has been consumed."""
        text = []
        while True:
            char = self._advance()
            if not char:
                return self._illegal("unterminated comment")
            if char == "}":
                return self._make_token(TokenType.COMMENT, "".join(text))
            text.append(char)
