"""Fluent builder for PrintingConfig.

Example:
    >>> config = (
    ...     PrintingConfigBuilder(Person)
    ...     .excluding(lambda p: p.id)
    ...     .excluding_type(datetime.date)
    ...     .printing(lambda p: p.name).trimmed_to_length(10)
    ...     .printing_type(float).with_format(".2f")
    ...     .build()
    ... )
    >>> ObjectPrinter(config).print_to_string(person)

Thread Safety:
    The builder is mutable and not thread-safe. The PrintingConfig it
    builds is immutable and safe to share.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from objectprinting.config import (
    DEFAULT_CYCLE_MARKER,
    DEFAULT_INDENT,
    DEFAULT_TERMINAL_TYPES,
    PrintingConfig,
)
from objectprinting.errors import ConfigurationError
from objectprinting.formatters import (
    ByMember,
    ByType,
    Formatter,
    FormatterKey,
    chained,
    formatted,
    trimmed,
)
from objectprinting.members import resolve_member

if TYPE_CHECKING:
    from objectprinting.printer import ObjectPrinter


def _require_type(value: Any) -> type:
    if not isinstance(value, type):
        msg = f"expected a type, got {value!r}"
        raise ConfigurationError(msg)
    return value


class MemberPrintingConfig:
    """Pending formatter registration for one member or type.

    Every method stores a formatter and returns the parent builder.
    """

    __slots__ = ("_builder", "_key")

    def __init__(self, builder: PrintingConfigBuilder, key: FormatterKey) -> None:
        self._builder = builder
        self._key = key

    @property
    def key(self) -> FormatterKey:
        return self._key

    def using(self, formatter: Formatter) -> PrintingConfigBuilder:
        """Render the value with ``formatter`` instead of the default layout.

        Raises:
            ConfigurationError: If formatter is not callable
        """
        if not callable(formatter):
            msg = f"formatter for {self._key} must be callable, got {formatter!r}"
            raise ConfigurationError(msg)
        return self._builder._set_formatter(self._key, formatter)

    def with_format(self, format_spec: str) -> PrintingConfigBuilder:
        """Render the value with ``format(value, format_spec)``."""
        return self.using(formatted(format_spec))

    def trimmed_to_length(self, max_length: int) -> PrintingConfigBuilder:
        """Cut the rendered text to ``max_length`` characters.

        Applies on top of a formatter already registered for the same key.

        Raises:
            ConfigurationError: If max_length is negative
        """
        if max_length < 0:
            msg = f"max_length must be >= 0, got {max_length}"
            raise ConfigurationError(msg)
        existing = self._builder._formatters.get(self._key)
        formatter = trimmed(max_length)
        if existing is not None:
            formatter = chained(existing, formatter)
        return self.using(formatter)


class PrintingConfigBuilder:
    """Mutable builder for PrintingConfig.

    Args:
        owner: Default type that member selectors refer to. Selectors for
            other types use the ``(OtherType, selector)`` form or ``owner=``.
    """

    __slots__ = (
        "_cycle_marker",
        "_excluded_members",
        "_excluded_types",
        "_formatters",
        "_indent",
        "_newline",
        "_owner",
        "_terminal_types",
    )

    def __init__(self, owner: type | None = None) -> None:
        if owner is not None:
            _require_type(owner)
        self._owner = owner
        self._terminal_types: set[type] = set(DEFAULT_TERMINAL_TYPES)
        self._excluded_types: set[type] = set()
        self._excluded_members: set[ByMember] = set()
        self._formatters: dict[FormatterKey, Formatter] = {}
        self._indent = DEFAULT_INDENT
        self._newline: str | None = None
        self._cycle_marker = DEFAULT_CYCLE_MARKER

    @property
    def owner(self) -> type | None:
        return self._owner

    def _member(self, selector: Any, owner: type | None) -> ByMember:
        return resolve_member(owner if owner is not None else self._owner, selector)

    def _set_formatter(self, key: FormatterKey, formatter: Formatter) -> PrintingConfigBuilder:
        self._formatters[key] = formatter
        return self

    def excluding(self, selector: Any, *, owner: type | None = None) -> PrintingConfigBuilder:
        """Never render the selected member.

        Raises:
            MemberSelectorError: If the selector is not a simple member access
        """
        self._excluded_members.add(self._member(selector, owner))
        return self

    def excluding_type(self, type_: type) -> PrintingConfigBuilder:
        """Never render members declared with ``type_``."""
        self._excluded_types.add(_require_type(type_))
        return self

    def printing(self, selector: Any, *, owner: type | None = None) -> MemberPrintingConfig:
        """Start a formatter registration for the selected member."""
        return MemberPrintingConfig(self, self._member(selector, owner))

    def printing_type(self, type_: type) -> MemberPrintingConfig:
        """Start a formatter registration for every value of ``type_``."""
        return MemberPrintingConfig(self, ByType(_require_type(type_)))

    def terminal_type(self, type_: type) -> PrintingConfigBuilder:
        """Render values of ``type_`` with ``str()`` instead of expanding them."""
        self._terminal_types.add(_require_type(type_))
        return self

    def with_indent(self, indent: str) -> PrintingConfigBuilder:
        self._indent = indent
        return self

    def with_newline(self, newline: str) -> PrintingConfigBuilder:
        if not newline:
            msg = "newline must not be empty"
            raise ConfigurationError(msg)
        self._newline = newline
        return self

    def with_cycle_marker(self, marker: str) -> PrintingConfigBuilder:
        self._cycle_marker = marker
        return self

    def build(self) -> PrintingConfig:
        """Build an immutable PrintingConfig from the registered settings."""
        options: dict[str, Any] = {}
        if self._newline is not None:
            options["newline"] = self._newline
        return PrintingConfig(
            terminal_types=frozenset(self._terminal_types),
            excluded_types=frozenset(self._excluded_types),
            excluded_members=frozenset(self._excluded_members),
            formatters=dict(self._formatters),
            indent=self._indent,
            cycle_marker=self._cycle_marker,
            **options,
        )

    def build_printer(self) -> ObjectPrinter:
        """Build a config and wrap it in an ObjectPrinter."""
        from objectprinting.printer import ObjectPrinter

        return ObjectPrinter(self.build())


__all__ = [
    "MemberPrintingConfig",
    "PrintingConfigBuilder",
]
