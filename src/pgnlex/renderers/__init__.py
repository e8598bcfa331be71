"""pgnlex renderers.

Renderers turn tokens into output lines. They are decoupled from the
lexer: any consumer of a token stream can use them.

Available Renderers:
- TextRenderer: Descriptive console text (built on ``describe``)
- JsonLinesRenderer: One JSON object per token

"""

from pgnlex.renderers.jsonl import JsonLinesRenderer
from pgnlex.renderers.protocol import TokenRenderer
from pgnlex.renderers.text import TextRenderer, describe

RENDERERS: dict[str, type] = {
    "text": TextRenderer,
    "json": JsonLinesRenderer,
}

__all__ = ["RENDERERS", "JsonLinesRenderer", "TextRenderer", "TokenRenderer", "describe"]
