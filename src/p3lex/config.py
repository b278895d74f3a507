"""ContextVar-based lexer configuration for p3lex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, at construction, unless one is
passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from p3lex.config import LexConfig, lex_config_context
    from p3lex.lexer import Lexer

    with lex_config_context(LexConfig(indent_width=2)):
        tokens = list(Lexer(source))

    # Or pass the config directly
    tokens = list(Lexer(source, config=LexConfig(indent_width=2)))

"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        indent_width: Number of leading spaces in one indentation level.
            Also used when serializing INDENT tokens back to text.
        error_context: Characters shown on each side of an unsupported
            character in the error message.
        raw_strings: When enabled, string literals tagged ``r``/``R`` keep
            their backslash sequences verbatim instead of decoding them.

    """

    indent_width: int = 4
    error_context: int = 10
    raw_strings: bool = False

    def __post_init__(self) -> None:
        if self.indent_width < 1:
            msg = f"indent_width must be at least 1, got {self.indent_width}"
            raise ValueError(msg)
        if self.error_context < 0:
            msg = f"error_context must not be negative, got {self.error_context}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> LexConfig:
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> LexConfig.from_dict({"indent_width": 2, "colour": "red"}).indent_width
            2

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(indent_width=2)):
        ...     get_lex_config().indent_width
        2

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
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
