"""Formatter keys, lookup, and built-in formatter factories.

A formatter is a caller-supplied ``value -> str`` function that fully owns
the output for a value: nothing it receives is expanded further.

Formatters are registered under one of two keys:

- ``ByMember(owner, name)`` for one specific member of one type
- ``ByType(type_)`` for every member declared with that type, and for
  terminal values of that exact type

Member keys always take precedence over type keys.

Example:
    >>> formatters = {ByType(float): formatted(".2f")}
    >>> type_formatter(formatters, 3.14159)(3.14159)
    '3.14'

Thread Safety:
    Keys are frozen. The formatter factories return pure functions.

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from objectprinting.members import MemberInfo

type Formatter = Callable[[Any], str]


@dataclass(frozen=True, slots=True)
class ByMember:
    """Formatter/exclusion key for one member of one type."""

    owner: type
    name: str

    def __str__(self) -> str:
        return f"{self.owner.__name__}.{self.name}"


@dataclass(frozen=True, slots=True)
class ByType:
    """Formatter key for every value or member of a type."""

    type_: type

    def __str__(self) -> str:
        return self.type_.__name__


type FormatterKey = ByMember | ByType


def member_keys(owner: type, name: str) -> tuple[ByMember, ...]:
    """Keys identifying a member of ``owner``, most specific first.

    A member registered on a base class also applies to subclasses, so
    the lookup walks the MRO.
    """
    return tuple(ByMember(cls, name) for cls in owner.__mro__ if cls is not object)


def resolve_formatter(
    formatters: Mapping[FormatterKey, Formatter],
    member: MemberInfo,
) -> Formatter | None:
    """Find the formatter for a member, member key first, then declared type.

    Args:
        formatters: Registered formatters
        member: Member being serialized

    Returns:
        Formatter if one is registered, None otherwise
    """
    if not formatters:
        return None
    for key in member_keys(member.owner, member.name):
        formatter = formatters.get(key)
        if formatter is not None:
            return formatter
    if member.declared_type is not None:
        return formatters.get(ByType(member.declared_type))
    return None


def type_formatter(
    formatters: Mapping[FormatterKey, Formatter],
    value: object,
) -> Formatter | None:
    """Find the formatter registered for the exact runtime type of ``value``."""
    if not formatters:
        return None
    return formatters.get(ByType(type(value)))


def trimmed(max_length: int) -> Formatter:
    """Formatter that cuts the value's text to at most ``max_length`` chars.

    Example:
        >>> trimmed(3)("Alice")
        'Ali'
    """

    def format_trimmed(value: Any) -> str:
        return ("null" if value is None else str(value))[:max_length]

    return format_trimmed


def formatted(format_spec: str) -> Formatter:
    """Formatter that applies ``format(value, format_spec)``.

    Example:
        >>> formatted(",")(1234567)
        '1,234,567'
    """

    def format_with_spec(value: Any) -> str:
        if value is None:
            return "null"
        return format(value, format_spec)

    return format_with_spec


def chained(first: Formatter, then: Formatter) -> Formatter:
    """Formatter that feeds the text produced by ``first`` into ``then``."""

    def format_chained(value: Any) -> str:
        return then(first(value))

    return format_chained


__all__ = [
    "ByMember",
    "ByType",
    "Formatter",
    "FormatterKey",
    "chained",
    "formatted",
    "member_keys",
    "resolve_formatter",
    "trimmed",
    "type_formatter",
]
