"""ContextVar-based lexer configuration for dfalex.

A Lexer reads the active configuration once, at construction. Config lives
in a ContextVar (PEP 567), so each thread and each asyncio task sees its own
value and no locking is needed.

Usage:
    from dfalex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(encoding="utf-16-le")):
        results = list(lex(source, automaton))

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        encoding: Codec used to compute ``byte_start``/``byte_end`` of each
            result. Any text encoding known to :mod:`codecs` is accepted;
            a leading BOM counts toward the first byte offset.
        trace_steps: Log every step directive at DEBUG level. Off by
            default; tracing costs a logging call per character.

    """

    encoding: str = "utf-8"
    trace_steps: bool = False

    def __post_init__(self) -> None:
        # Unknown codecs and bytes-to-bytes codecs such as "hex" raise LookupError
        "".encode(self.encoding)

    @classmethod
    def from_dict(cls, config_dict: dict) -> LexConfig:
        """Create LexConfig from a dictionary, ignoring unknown keys.

        Example:
            >>> LexConfig.from_dict({"trace_steps": True, "other": 1}).trace_steps
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get the active lexer configuration for this context."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for the current context.

    Only affects the current thread's context.
    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(trace_steps=True)):
        ...     get_lex_config().trace_steps
        True

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
