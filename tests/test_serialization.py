"""Tests for pgnlex.serialization: token JSON round-trip."""

import json

import pytest

from pgnlex import tokenize
from pgnlex.location import SourceLocation
from pgnlex.serialization import from_dict, from_json, to_dict, to_json
from pgnlex.tokens import Token, TokenType


class TestToDict:
    def test_tag_pair(self) -> None:
        token = tokenize('[White "Tal"]', source_file="t.pgn")[0]
        data = to_dict(token)

        assert data["type"] == "TAG_PAIR"
        assert data["key"] == "White"
        assert data["value"] == "Tal"
        assert data["location"]["source_file"] == "t.pgn"
        assert data["location"]["end_offset"] == 13

    def test_key_omitted_for_other_tokens(self) -> None:
        data = to_dict(tokenize("e4")[0])
        assert "key" not in data
        assert data == {
            "type": "FILE",
            "value": "e",
            "location": {
                "lineno": 1,
                "col_offset": 1,
                "offset": 0,
                "end_offset": 1,
                "end_lineno": 1,
                "end_col_offset": 2,
                "source_file": None,
            },
        }


class TestRoundTrip:
    def test_stream_round_trip(self) -> None:
        tokens = tokenize('[Event "x"]\n1. e4 {best by test} (1. d4) 1... c5 O-O-O ? 0-1')
        assert from_json(to_json(tokens)) == tokens

    def test_json_is_deterministic(self) -> None:
        tokens = tokenize("1. e4 *")
        assert to_json(tokens) == to_json(tokenize("1. e4 *"))

    def test_indent(self) -> None:
        text = to_json(tokenize("*"), indent=2)
        assert "\n  " in text
        assert len(json.loads(text)) == 2


class TestFromDictErrors:
    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing 'type'"):
            from_dict({"value": "e"})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown token type: 'PAWN'"):
            from_dict({"type": "PAWN", "value": "P"})

    def test_not_an_array(self) -> None:
        with pytest.raises(ValueError, match="Expected a JSON array"):
            from_json('{"type": "EOF"}')

    def test_missing_location(self) -> None:
        token = from_dict({"type": "KING", "value": "K"})
        assert token == Token(TokenType.KING, "K", _lineno=0, _col=0)
        assert token.location == SourceLocation.unknown()

    def test_partial_location(self) -> None:
        token = from_dict({"type": "EOF", "value": "", "location": {}})
        assert token.lineno == 0
        assert token.col == 0

        token = from_dict({"type": "RANK", "value": "4", "location": {"lineno": 3, "offset": 7}})
        assert (token.lineno, token.col) == (3, 0)
        assert token.location.offset == 7
