"""Tests for number classification: move numbers, results and ranks."""

import pytest

from pgnlex.lexer import Lexer
from pgnlex.tokens import TokenType


def scan(source: str) -> list[tuple[TokenType, str]]:
    return [(t.type, t.value) for t in Lexer(source).tokenize()]


class TestMoveNumbers:
    def test_opening_move(self) -> None:
        assert scan("1. e4 e5") == [
            (TokenType.MOVE_NUMBER, "1."),
            (TokenType.FILE, "e"),
            (TokenType.RANK, "4"),
            (TokenType.FILE, "e"),
            (TokenType.RANK, "5"),
            (TokenType.EOF, ""),
        ]

    @pytest.mark.parametrize("text", ["1.", "1...", "12.", "12...", "127.", "127...", "1024."])
    def test_literal_preserved(self, text: str) -> None:
        """Digits and every period are kept verbatim."""
        assert scan(text) == [(TokenType.MOVE_NUMBER, text), (TokenType.EOF, "")]

    def test_multi_digit_terminates_on_period(self) -> None:
        tokens = list(Lexer("127. Nf3").tokenize())
        assert (tokens[0].type, tokens[0].value) == (TokenType.MOVE_NUMBER, "127.")
        assert tokens[1].type == TokenType.KNIGHT

    def test_black_continuation_after_comment(self) -> None:
        assert [t for t, _ in scan("12. Nf3 {solid} 12... Nc6")] == [
            TokenType.MOVE_NUMBER,
            TokenType.KNIGHT,
            TokenType.FILE,
            TokenType.RANK,
            TokenType.COMMENT,
            TokenType.MOVE_NUMBER,
            TokenType.KNIGHT,
            TokenType.FILE,
            TokenType.RANK,
            TokenType.EOF,
        ]

    def test_number_without_space_before_move(self) -> None:
        assert scan("1.e4")[:2] == [(TokenType.MOVE_NUMBER, "1."), (TokenType.FILE, "e")]

    def test_multi_digit_at_eof(self) -> None:
        assert scan("127") == [
            (TokenType.ILLEGAL, "multi-digit formation did not terminate before eof"),
            (TokenType.EOF, ""),
        ]

    def test_multi_digit_interrupted(self) -> None:
        """The interrupting character is left for the next token."""
        assert scan("12 e4") == [
            (TokenType.ILLEGAL, "multi-digit formation '12' interrupted by ' '"),
            (TokenType.FILE, "e"),
            (TokenType.RANK, "4"),
            (TokenType.EOF, ""),
        ]


class TestResults:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1-0", TokenType.WHITE_WIN),
            ("0-1", TokenType.BLACK_WIN),
            ("1/2-1/2", TokenType.DRAW),
        ],
    )
    def test_result_marker(self, text: str, expected: TokenType) -> None:
        assert scan(text) == [(expected, text), (TokenType.EOF, "")]

    def test_result_after_moves(self) -> None:
        assert scan("Qxf7# 1-0")[-2:] == [(TokenType.WHITE_WIN, "1-0"), (TokenType.EOF, "")]

    @pytest.mark.parametrize("text", ["1/2-0", "1/3", "1/", "3/2-1/2"])
    def test_malformed_draw(self, text: str) -> None:
        assert scan(text)[0] == (TokenType.ILLEGAL, "malformed draw")

    def test_malformed_white_win(self) -> None:
        assert scan("1-1") == [
            (TokenType.ILLEGAL, "malformed result: expected '1-0'"),
            (TokenType.RANK, "1"),
            (TokenType.EOF, ""),
        ]

    def test_malformed_black_win(self) -> None:
        assert scan("0-0")[0] == (TokenType.ILLEGAL, "malformed result: expected '0-1'")

    def test_dash_after_other_digit_is_not_a_result(self) -> None:
        assert scan("2-") == [
            (TokenType.RANK, "2"),
            (TokenType.ILLEGAL, "unrecognized character '-'"),
            (TokenType.EOF, ""),
        ]


class TestRanks:
    @pytest.mark.parametrize("digit", list("12345678"))
    def test_rank_digits(self, digit: str) -> None:
        assert scan(digit) == [(TokenType.RANK, digit), (TokenType.EOF, "")]

    @pytest.mark.parametrize("digit", ["0", "9"])
    def test_off_board_digit(self, digit: str) -> None:
        assert scan(digit)[0] == (TokenType.ILLEGAL, f"rank out of range: {digit!r}")

    def test_character_after_rank_is_reoffered(self) -> None:
        """The byte after a rank digit is scanned again, not dropped."""
        assert scan("4e") == [
            (TokenType.RANK, "4"),
            (TokenType.FILE, "e"),
            (TokenType.EOF, ""),
        ]

    def test_rank_followed_by_symbol(self) -> None:
        assert scan("Rd1+") == [
            (TokenType.ROOK, "R"),
            (TokenType.FILE, "d"),
            (TokenType.RANK, "1"),
            (TokenType.CHECK, "+"),
            (TokenType.EOF, ""),
        ]
