"""Castle disambiguation scanner mixin.

"O-O" and "O-O-O" share a prefix, so castling is scanned as one unit
with bounded lookahead: match "-O" once (required), then try it again.
A failed second attempt restores the cursor so whatever follows a short
castle ("O-O+", "O-O-?") is scanned by the next call.
"""

from __future__ import annotations

from pgnlex.lexer.charsets import CASTLE_STEP
from pgnlex.tokens import Token, TokenType


class CastleScannerMixin:
    """Mixin providing castling notation scanning."""

    def _match(self, literal: str) -> bool:
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, *, key: str | None = None) -> Token:
        """Create token spanning the saved start. Implemented by Lexer."""
        raise NotImplementedError

    def _illegal(self, message: str) -> Token:
        raise NotImplementedError

    def _scan_castle(self) -> Token:
        """Scan castling notation after the leading ``O`` has been consumed.

        Returns:
            SHORT_CASTLE, LONG_CASTLE, or ILLEGAL("malformed castle").
        """
        if not self._match(CASTLE_STEP):
            return self._illegal("malformed castle")
        if self._match(CASTLE_STEP):
            return self._make_token(TokenType.LONG_CASTLE, "O-O-O")
        return self._make_token(TokenType.SHORT_CASTLE, "O-O")
