"""Immutable printing configuration and its ContextVar-based default.

``PrintingConfig`` is a frozen render policy: terminal types, exclusions,
formatters, and layout characters. Build one with ``PrintingConfigBuilder``
and reuse it across any number of render calls.

The module-level ``print_to_string`` uses the config active in the current
context when none is passed explicitly.

Usage:
    config = PrintingConfigBuilder(Person).excluding("age").build()

    # Per call
    text = ObjectPrinter(config).print_to_string(person)

    # Or as the context default
    with printing_config_context(config):
        text = print_to_string(person)

Thread Safety:
    PrintingConfig is immutable and safe to share. The context default is
    stored in a ContextVar, so each thread/context sees its own value.

"""

import datetime
import decimal
import enum
import fractions
import os
import uuid
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from objectprinting.formatters import ByMember, Formatter, FormatterKey

DEFAULT_TERMINAL_TYPES: frozenset[type] = frozenset(
    {
        int,
        float,
        complex,
        bool,
        decimal.Decimal,
        fractions.Fraction,
        uuid.UUID,
        str,
        bytes,
        datetime.datetime,
        datetime.date,
        datetime.time,
        datetime.timedelta,
        enum.Enum,
    }
)

DEFAULT_INDENT = "\t"
DEFAULT_CYCLE_MARKER = "Cycle detected! Object skipped."
NULL_TOKEN = "null"

_EMPTY_FORMATTERS: Mapping[FormatterKey, Formatter] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class PrintingConfig:
    """Immutable render policy.

    Attributes:
        terminal_types: Types (and their subclasses) rendered by ``str()``
        excluded_types: Members declared with these types are never rendered
        excluded_members: Members never rendered
        formatters: Custom formatters keyed by member or type
        indent: Text emitted once per depth level
        newline: Line separator
        cycle_marker: Text emitted instead of a value already entered in this call

    """

    terminal_types: frozenset[type] = DEFAULT_TERMINAL_TYPES
    excluded_types: frozenset[type] = frozenset()
    excluded_members: frozenset[ByMember] = frozenset()
    formatters: Mapping[FormatterKey, Formatter] = field(default_factory=lambda: _EMPTY_FORMATTERS)
    indent: str = DEFAULT_INDENT
    newline: str = os.linesep
    cycle_marker: str = DEFAULT_CYCLE_MARKER

    def __post_init__(self) -> None:
        # Freeze caller-supplied collections so the policy cannot drift.
        object.__setattr__(self, "terminal_types", frozenset(self.terminal_types))
        object.__setattr__(self, "excluded_types", frozenset(self.excluded_types))
        object.__setattr__(self, "excluded_members", frozenset(self.excluded_members))
        if not isinstance(self.formatters, MappingProxyType):
            object.__setattr__(self, "formatters", MappingProxyType(dict(self.formatters)))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "PrintingConfig":
        """Create PrintingConfig from a dictionary.

        Only keys that are PrintingConfig fields are used; unknown keys
        are silently ignored.

        Example:
            >>> config = PrintingConfig.from_dict({"indent": "  ", "other": 1})
            >>> config.indent
            '  '

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: PrintingConfig = PrintingConfig()

_printing_config: ContextVar[PrintingConfig] = ContextVar(
    "printing_config",
    default=_DEFAULT_CONFIG,
)


def get_printing_config() -> PrintingConfig:
    """Get the printing configuration active in this context."""
    return _printing_config.get()


def set_printing_config(config: PrintingConfig) -> None:
    """Set the printing configuration for the current context."""
    _printing_config.set(config)


def reset_printing_config() -> None:
    """Reset the current context to the default configuration."""
    _printing_config.set(_DEFAULT_CONFIG)


@contextmanager
def printing_config_context(config: PrintingConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with printing_config_context(PrintingConfig(indent="  ")):
        ...     get_printing_config().indent
        '  '
    """
    previous = _printing_config.get()
    _printing_config.set(config)
    try:
        yield
    finally:
        _printing_config.set(previous)


__all__ = [
    "DEFAULT_CYCLE_MARKER",
    "DEFAULT_TERMINAL_TYPES",
    "PrintingConfig",
    "get_printing_config",
    "printing_config_context",
    "reset_printing_config",
    "set_printing_config",
]
