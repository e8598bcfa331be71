"""Human-readable token rendering.

``describe`` maps each token to descriptive text and knows nothing about
scanning. TextRenderer frames a document's tokens the way the console
reporter prints them.

Example:
    >>> from pgnlex import tokenize
    >>> [describe(t) for t in tokenize("Nxe5+")]
    ['knight', 'takes', 'file: e', 'rank: 5', 'check', 'end of input']
"""

from pgnlex.tokens import Token, TokenType


def describe(token: Token) -> str:
    """Render a token as descriptive text."""
    match token.type:
        case TokenType.ILLEGAL:
            return f"illegal: {token.value}"
        case TokenType.EOF:
            return "end of input"
        case TokenType.MOVE_NUMBER:
            return f"move number: {token.value}"
        case TokenType.TAG_PAIR:
            return f'tag pair: {token.key} = "{token.value}"'
        case TokenType.COMMENT:
            return f"comment: {token.value}"
        case TokenType.KING:
            return "king"
        case TokenType.QUEEN:
            return "queen"
        case TokenType.ROOK:
            return "rook"
        case TokenType.BISHOP:
            return "bishop"
        case TokenType.KNIGHT:
            return "knight"
        case TokenType.FILE:
            return f"file: {token.value}"
        case TokenType.RANK:
            return f"rank: {token.value}"
        case TokenType.WHITE_WIN:
            return "white wins"
        case TokenType.BLACK_WIN:
            return "black wins"
        case TokenType.DRAW:
            return "draw"
        case TokenType.STAR:
            return "result unknown"
        case TokenType.TAKES:
            return "takes"
        case TokenType.CHECK:
            return "check"
        case TokenType.MATE:
            return "mate"
        case TokenType.PROMOTE:
            return "promotes"
        case TokenType.SHORT_CASTLE:
            return "short castle"
        case TokenType.LONG_CASTLE:
            return "long castle"
        case TokenType.LPAREN:
            return "variation start"
        case TokenType.RPAREN:
            return "variation end"
    msg = f"Unhandled token type: {token.type!r}"
    raise ValueError(msg)


class TextRenderer:
    """Indented, one-description-per-line console output."""

    __slots__ = ("_indent",)

    def __init__(self, indent: str = "\t") -> None:
        self._indent = indent

    def header(self, name: str) -> str:
        return f"=== tokenizing: {name} ==="

    def render_token(self, token: Token) -> str:
        return f"{self._indent}{describe(token)}"

    def footer(self, name: str) -> str:
        return "=== end of file ==="
