"""Tests for pgnlex.profiling: tokenization profiling API."""

import pytest

from pgnlex import Lexer, tokenize
from pgnlex.config import LexConfig, lex_config_context
from pgnlex.errors import IllegalTokenError
from pgnlex.profiling import (
    LexAccumulator,
    get_lex_accumulator,
    profiled_lex,
)


class TestGetLexAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_lex_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_lex():
            pass
        assert get_lex_accumulator() is None


class TestProfiledLex:
    def test_yields_accumulator(self) -> None:
        with profiled_lex() as acc:
            assert isinstance(acc, LexAccumulator)
            assert get_lex_accumulator() is acc

    def test_records_stream(self) -> None:
        with profiled_lex() as acc:
            tokenize("1. e4 {x")
        assert acc.documents == 1
        assert acc.source_length == len("1. e4 {x")
        assert acc.token_count == 5
        assert acc.illegal_count == 1

    def test_records_multiple_streams(self) -> None:
        with profiled_lex() as acc:
            tokenize("e4")
            tokenize("d4")
            tokenize("c4")
        assert acc.documents == 3
        assert acc.token_count == 9

    def test_closed_stream_recorded(self) -> None:
        with profiled_lex() as acc:
            stream = Lexer("1. e4 e5").tokenize()
            next(stream)
            stream.close()
        assert acc.documents == 1
        assert acc.token_count == 1
        assert acc.illegal_count == 0

    def test_strict_failure_recorded(self) -> None:
        with profiled_lex() as acc, lex_config_context(LexConfig(strict=True)):
            with pytest.raises(IllegalTokenError):
                list(Lexer("e4 ?").tokenize())
        assert acc.documents == 1
        assert acc.source_length == 4
        assert acc.token_count == 3
        assert acc.illegal_count == 1

    def test_total_duration_positive(self) -> None:
        with profiled_lex() as acc:
            tokenize("1. d4 d5 2. c4")
        assert acc.total_duration_ms > 0


class TestSummary:
    def test_empty_summary(self) -> None:
        summary = LexAccumulator().summary()
        assert summary["documents"] == 0
        assert summary["token_count"] == 0
        assert summary["illegal_count"] == 0

    def test_summary_after_lex(self) -> None:
        with profiled_lex() as acc:
            tokenize("O-O *")
        summary = acc.summary()
        assert summary["documents"] == 1
        assert summary["source_length"] == 5
        assert summary["token_count"] == 3
        assert "total_ms" in summary
