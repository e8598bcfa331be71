"""pgnlex LexAccumulator: opt-in profiling for tokenization.

Accumulates metrics across every Lexer.tokenize() stream that ends
inside a profiled block, including streams stopped early:
- Documents tokenized
- Source length
- Token and illegal-token counts

Zero overhead when disabled (get_lex_accumulator() returns None).

Example:
    from pgnlex import tokenize
    from pgnlex.profiling import profiled_lex

    with profiled_lex() as metrics:
        tokens = tokenize("1. e4 e5 *")

    print(metrics.summary())
    # {"total_ms": 0.1, "documents": 1, "source_length": 10, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class LexAccumulator:
    """Accumulated metrics during tokenization.

    Attributes:
        start_time: Profiling start timestamp.
        documents: Number of token streams recorded.
        source_length: Total length of the sources tokenized.
        token_count: Tokens produced, EOF included.
        illegal_count: ILLEGAL tokens produced.

    """

    start_time: float = field(default_factory=perf_counter)
    documents: int = 0
    source_length: int = 0
    token_count: int = 0
    illegal_count: int = 0

    def record_stream(self, source_length: int, token_count: int, illegal_count: int) -> None:
        """Record one finished token stream."""
        self.documents += 1
        self.source_length += source_length
        self.token_count += token_count
        self.illegal_count += illegal_count

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of lex metrics.

        Returns:
            Dict with total_ms, documents, source_length, token_count,
            illegal_count.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "documents": self.documents,
            "source_length": self.source_length,
            "token_count": self.token_count,
            "illegal_count": self.illegal_count,
        }


_accumulator: ContextVar[LexAccumulator | None] = ContextVar(
    "lex_accumulator",
    default=None,
)


def get_lex_accumulator() -> LexAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_lex() -> Iterator[LexAccumulator]:
    """Context manager for profiled tokenization.

    Creates a LexAccumulator and makes it available via
    get_lex_accumulator() for the duration of the with block.

    Example:
        with profiled_lex() as metrics:
            list(Lexer(source).tokenize())
        print(metrics.summary())

    """
    acc = LexAccumulator()
    token: Token[LexAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
