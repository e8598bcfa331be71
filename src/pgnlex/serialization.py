"""Token serialization: JSON round-trip for pgnlex tokens.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Handing token streams to tools written in other languages
- Snapshotting streams in tests
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from pgnlex import tokenize
    from pgnlex.serialization import to_json, from_json

    tokens = tokenize("1. e4 *")
    restored = from_json(to_json(tokens))
    assert [t.value for t in restored] == [t.value for t in tokens]

Thread Safety:
    All functions are pure: safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from pgnlex.location import SourceLocation
from pgnlex.tokens import Token, TokenType


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    ``type`` holds the TokenType member name. ``key`` is present only for
    TAG_PAIR tokens.

    """
    result: dict[str, Any] = {
        "type": token.type.name,
        "value": token.value,
        "location": _serialize_location(token.location),
    }
    if token.key is not None:
        result["key"] = token.key
    return result


def _serialize_location(loc: SourceLocation) -> dict[str, Any]:
    return {
        "lineno": loc.lineno,
        "col_offset": loc.col_offset,
        "offset": loc.offset,
        "end_offset": loc.end_offset,
        "end_lineno": loc.end_lineno,
        "end_col_offset": loc.end_col_offset,
        "source_file": loc.source_file,
    }


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict.

    Location fields are optional; a missing location or coordinate yields
    SourceLocation.unknown() coordinates.

    Raises:
        ValueError: If ``type`` is missing or unknown.

    """
    type_name = data.get("type")
    if type_name is None:
        msg = "Missing 'type' field in serialized token"
        raise ValueError(msg)

    try:
        token_type = TokenType[type_name]
    except KeyError:
        msg = f"Unknown token type: {type_name!r}"
        raise ValueError(msg) from None

    loc = data.get("location") or {}
    unknown = SourceLocation.unknown()

    return Token(
        type=token_type,
        value=data.get("value", ""),
        key=data.get("key"),
        _lineno=loc.get("lineno", unknown.lineno),
        _col=loc.get("col_offset", unknown.col_offset),
        _start_offset=loc.get("offset", 0),
        _end_offset=loc.get("end_offset", 0),
        _end_lineno=loc.get("end_lineno"),
        _end_col=loc.get("end_col_offset"),
        _source_file=loc.get("source_file"),
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON array string.

    Args:
        tokens: Tokens to serialize, typically a full stream.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps([to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(data: str) -> list[Token]:
    """Deserialize a token sequence from a JSON array string.

    Raises:
        ValueError: If the JSON is not an array of serialized tokens.

    """
    raw = json.loads(data)
    if not isinstance(raw, list):
        msg = f"Expected a JSON array of tokens, got {type(raw).__name__}"
        raise ValueError(msg)
    return [from_dict(item) for item in raw]
