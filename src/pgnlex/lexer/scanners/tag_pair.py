"""Tag pair scanner mixin.

Scans ``[Key "Value"]`` metadata blocks. Values are taken verbatim up to
the next double quote; escaped quotes are not recognized.
"""

from __future__ import annotations

from pgnlex.lexer.charsets import WHITESPACE
from pgnlex.tokens import Token, TokenType


class TagPairScannerMixin:
    """Mixin providing tag pair scanning logic."""

    def _peek(self) -> str:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, *, key: str | None = None) -> Token:
        """Create token spanning the saved start. Implemented by Lexer."""
        raise NotImplementedError

    def _illegal(self, message: str) -> Token:
        raise NotImplementedError

    def _scan_tag_pair(self) -> Token:
        """Scan a tag pair after the opening ``[`` has been consumed.

        Returns:
            TAG_PAIR token, or ILLEGAL if the block is malformed or
            unterminated.
        """
        key = []
        while True:
            char = self._peek()
            if not char:
                return self._illegal("unterminated tag pair")
            if char in WHITESPACE:
                break
            if char == "]":
                # A tag with no value
                self._advance()
                return self._illegal("malformed tag pair")
            key.append(self._advance())

        if not key:
            return self._illegal("malformed tag pair: missing tag name")
        self._advance()

        if self._peek() != '"':
            return self._illegal("malformed tag pair: expected '\"' before value")
        self._advance()

        value = []
        while True:
            char = self._advance()
            if not char:
                return self._illegal("unterminated string literal")
            if char == '"':
                break
            value.append(char)

        if self._peek() != "]":
            return self._illegal("malformed tag pair: expected ']' after value")
        self._advance()

        return self._make_token(TokenType.TAG_PAIR, "".join(value), key="".join(key))
