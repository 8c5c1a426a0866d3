"""ContextVar-based compile configuration for pseudoscss.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per compile call, read by the parser and lexer in the
context.

Usage:
    # Via the public API
    html = compile("p { content: 'hi'; }", html="<!DOCTYPE html>")

    # Direct parser usage (advanced)
    from pseudoscss.config import CompileConfig, compile_config_context

    with compile_config_context(CompileConfig(strict=True)):
        html = Parser(source).parse()

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CompileConfig:
    """Immutable compile configuration.

    Note: source_file is per-call state, not configuration. It stays on
    the Parser instance.

    Attributes:
        html: Seed for the output buffer (e.g. a doctype)
        trace: Log every (token, frame) pair at DEBUG level
        strict: Raise UnbalancedInputError for an unterminated raw block
            or unclosed frames at end of input, instead of truncating

    """

    html: str = ""
    trace: bool = False
    strict: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> CompileConfig:
        """Create CompileConfig from dictionary.

        Only includes keys that are valid CompileConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> CompileConfig.from_dict({"strict": True, "unknown": 1}).strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: CompileConfig = CompileConfig()

_compile_config: ContextVar[CompileConfig] = ContextVar(
    "compile_config",
    default=_DEFAULT_CONFIG,
)


def get_compile_config() -> CompileConfig:
    """Get current compile configuration (thread-local)."""
    return _compile_config.get()


def set_compile_config(config: CompileConfig) -> None:
    """Set compile configuration for current context."""
    _compile_config.set(config)


def reset_compile_config() -> None:
    """Reset to the module-level default configuration."""
    _compile_config.set(_DEFAULT_CONFIG)


@contextmanager
def compile_config_context(config: CompileConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with compile_config_context(CompileConfig(strict=True)):
        ...     get_compile_config().strict
        True

    """
    previous = _compile_config.get()
    _compile_config.set(config)
    try:
        yield
    finally:
        _compile_config.set(previous)


__all__ = [
    "CompileConfig",
    "compile_config_context",
    "get_compile_config",
    "reset_compile_config",
    "set_compile_config",
]
