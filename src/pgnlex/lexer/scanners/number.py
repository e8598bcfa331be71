"""Number classification scanner mixin.

A leading digit can open a move number ("1.", "12..."), a result marker
("1-0", "0-1", "1/2-1/2") or be a bare rank in a square ("e4"). One
character of lookahead after the first digit picks the branch.
"""

from __future__ import annotations

from pgnlex.lexer.charsets import DIGITS, DRAW_TAIL, RANK_CHARS
from pgnlex.tokens import Token, TokenType

# Second character of a result marker, keyed by the first digit
_RESULT_TAILS: dict[str, tuple[str, TokenType]] = {
    "1": ("0", TokenType.WHITE_WIN),
    "0": ("1", TokenType.BLACK_WIN),
}


class NumberScannerMixin:
    """Mixin providing move number, result marker and rank scanning."""

    def _peek(self) -> str:
        raise NotImplementedError

    def _advance(self) -> str:
        raise NotImplementedError

    def _match(self, literal: str) -> bool:
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str, *, key: str | None = None) -> Token:
        """Create token spanning the saved start. Implemented by Lexer."""
        raise NotImplementedError

    def _illegal(self, message: str) -> Token:
        raise NotImplementedError

    def _scan_number(self, first: str) -> Token:
        """Classify the token opened by digit ``first``.

        Args:
            first: The digit already consumed by dispatch.

        Returns:
            MOVE_NUMBER, WHITE_WIN, BLACK_WIN, DRAW or RANK token, or
            ILLEGAL when a fixed literal does not match.
        """
        nxt = self._peek()

        if nxt == "/":
            self._advance()
            if first == "1" and self._match(DRAW_TAIL):
                return self._make_token(TokenType.DRAW, f"{first}/{DRAW_TAIL}")
            return self._illegal("malformed draw")

        if nxt == "-" and first in _RESULT_TAILS:
            self._advance()
            tail, token_type = _RESULT_TAILS[first]
            if self._match(tail):
                return self._make_token(token_type, f"{first}-{tail}")
            return self._illegal(f"malformed result: expected '{first}-{tail}'")

        if nxt == ".":
            return self._make_token(TokenType.MOVE_NUMBER, first + self._scan_periods())

        if nxt in DIGITS:
            return self._scan_multi_digit(first)

        # A digit standing alone is a rank; the following character is left
        # for the next call.
        if first in RANK_CHARS:
            return self._make_token(TokenType.RANK, first)
        return self._illegal(f"rank out of range: {first!r}")

    def _scan_multi_digit(self, first: str) -> Token:
        """Accumulate a move number of two or more digits.

        The run must end in a period; a non-digit other than ``.`` ends it
        with an ILLEGAL token and is left unconsumed.
        """
        digits = [first]
        while self._peek() in DIGITS:
            digits.append(self._advance())

        nxt = self._peek()
        if not nxt:
            return self._illegal("multi-digit formation did not terminate before eof")
        if nxt != ".":
            return self._illegal(
                f"multi-digit formation {''.join(digits)!r} interrupted by {nxt!r}"
            )
        return self._make_token(TokenType.MOVE_NUMBER, "".join(digits) + self._scan_periods())

    def _scan_periods(self) -> str:
        """Consume a run of periods (one for White, an ellipsis for Black)."""
        periods = []
        while self._peek() == ".":
            periods.append(self._advance())
        return "".join(periods)
