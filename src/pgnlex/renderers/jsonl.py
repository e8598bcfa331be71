"""JSON-lines token rendering.

One compact JSON object per token, as produced by
``pgnlex.serialization.to_dict``. No framing lines: each token's location
already names its source file.
"""

import json

from pgnlex.serialization import to_dict
from pgnlex.tokens import Token


class JsonLinesRenderer:
    """Render each token as a sorted-key JSON object on its own line."""

    __slots__ = ()

    def header(self, name: str) -> str:
        return ""

    def render_token(self, token: Token) -> str:
        return json.dumps(to_dict(token), sort_keys=True)

    def footer(self, name: str) -> str:
        return ""
