"""Lexer settings carried in a ContextVar.

A Lexer reads the active LexConfig once, in its constructor, so changing
the config afterwards does not affect a lexer that already exists. Each
thread and asyncio task sees its own value.

    with lex_config_context(LexConfig(strict=True)):
        tokens = list(Lexer(source).tokenize())  # raises on illegal input

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Options read by Lexer at construction.

    Attributes:
        strict: tokenize() raises IllegalTokenError at the first ILLEGAL
            token instead of yielding it
        source_file: Path stamped on tokens when Lexer gets none

    """

    strict: bool = False
    source_file: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Build a config from a mapping, dropping keys that are not fields.

        >>> LexConfig.from_dict({"strict": True, "colour": "red"}).strict
        True
        """
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in names})


_DEFAULT_CONFIG = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar("lex_config", default=_DEFAULT_CONFIG)


def get_lex_config() -> LexConfig:
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Replace the config for the current context."""
    _lex_config.set(config)


def reset_lex_config() -> None:
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Activate ``config`` for the with block, then put the previous one back."""
    previous = _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.reset(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
