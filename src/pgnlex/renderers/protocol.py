"""TokenRenderer protocol: stable interface for token stream output.

Any renderer that implements ``header``, ``render_token`` and ``footer``
conforms to this protocol. The CLI writes whatever non-empty strings
they return, one per line.

Example:
    from pgnlex.renderers.protocol import TokenRenderer

    def report(renderer: TokenRenderer, name: str, tokens) -> list[str]:
        lines = [renderer.header(name)]
        lines.extend(renderer.render_token(t) for t in tokens)
        lines.append(renderer.footer(name))
        return [line for line in lines if line]

"""

from typing import Protocol

from pgnlex.tokens import Token


class TokenRenderer(Protocol):
    """Protocol for token stream renderers."""

    def header(self, name: str) -> str:
        """Line written before the tokens of document ``name`` ("" for none)."""
        ...

    def render_token(self, token: Token) -> str:
        """Render one token as a single line."""
        ...

    def footer(self, name: str) -> str:
        """Line written after the tokens of document ``name`` ("" for none)."""
        ...
