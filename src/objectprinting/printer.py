"""Recursive rendering engine.

Turns an arbitrary object graph into an indented, human-readable block of
text. Each value is classified, in priority order, as:

1. ``None`` -> ``null``
2. terminal (instance of a terminal type) -> ``str(value)`` or its type formatter
3. already entered during this call -> the cycle marker
4. mapping -> ``dict {`` / ``key = value`` lines / ``}``
5. sequence or set -> ``list {`` / one element per line / ``}``
6. anything else -> type name followed by ``member = value`` lines

Step 3 keys on identity and never forgets an entry during a call, so a
shared instance reached through two paths is expanded the first time and
collapsed to the marker the second time, whether or not it is a true cycle.

Example:
    >>> printer = ObjectPrinter(PrintingConfig(newline="\\n"))
    >>> printer.print_to_string(Person(name="Alice", age=30))
    'Person\\n\\tname = Alice\\n\\tage = 30'

Thread Safety:
    All per-call state lives in a RenderContext created by each top-level
    call. A single ObjectPrinter can be shared between threads.

"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass, field
from typing import Any

from objectprinting.config import NULL_TOKEN, PrintingConfig, get_printing_config
from objectprinting.formatters import member_keys, resolve_formatter, type_formatter
from objectprinting.members import MemberInfo, public_members
from objectprinting.textblock import TextBlock
from objectprinting.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class RenderContext:
    """Per-call mutable state.

    ``visited`` maps ``id(value)`` to the value itself; holding the value
    keeps its id from being reused by a temporary created later in the
    same call.
    """

    visited: dict[int, Any] = field(default_factory=dict)

    def enter(self, value: Any) -> bool:
        """Record ``value``; return False if it was already entered."""
        key = id(value)
        if key in self.visited:
            return False
        self.visited[key] = value
        return True


class ObjectPrinter:
    """Renders object graphs according to a PrintingConfig.

    Args:
        config: Render policy. Defaults to the config active in the current
            context at construction time.
    """

    __slots__ = ("_config", "_terminal_classes")

    def __init__(self, config: PrintingConfig | None = None) -> None:
        self._config = config if config is not None else get_printing_config()
        self._terminal_classes = tuple(self._config.terminal_types)

    @property
    def config(self) -> PrintingConfig:
        return self._config

    def print_to_string(self, value: Any) -> str:
        """Render ``value`` at depth 0 with its own indentation."""
        return self.render(value)

    def render(self, value: Any, depth: int = 0, apply_indent_at_root: bool = True) -> str:
        """Render ``value`` as a text block.

        Args:
            value: Any value, including None and self-referential graphs
            depth: Indentation depth of the block
            apply_indent_at_root: Emit this block's own leading indentation.
                Pass False when the text follows a label on the same line.

        Returns:
            Text block without a trailing line separator

        Raises:
            ValueError: If depth is negative
        """
        if depth < 0:
            msg = f"depth must be >= 0, got {depth}"
            raise ValueError(msg)
        return self._render(value, depth, apply_indent_at_root, RenderContext())

    def _indent(self, depth: int) -> str:
        return self._config.indent * depth

    def is_terminal(self, value: Any) -> bool:
        return type(value) in self._config.terminal_types or isinstance(
            value, self._terminal_classes
        )

    def _render(self, value: Any, depth: int, apply_indent: bool, ctx: RenderContext) -> str:
        indent = self._indent(depth) if apply_indent else ""

        if value is None:
            return indent + NULL_TOKEN

        if self.is_terminal(value):
            formatter = type_formatter(self._config.formatters, value)
            if formatter is not None:
                return indent + formatter(value)
            return indent + str(value)

        if not ctx.enter(value):
            logger.debug(
                "%s at depth %d already rendered in this call, skipping",
                type(value).__name__,
                depth,
            )
            return indent + self._config.cycle_marker

        if isinstance(value, Mapping):
            return self._render_mapping(value, depth, indent, ctx)
        if isinstance(value, (Sequence, Set)):
            return self._render_sequence(value, depth, indent, ctx)
        return self._render_object(value, depth, indent, ctx)

    def _render_sequence(
        self, items: Sequence[Any] | Set[Any], depth: int, indent: str, ctx: RenderContext
    ) -> str:
        block = TextBlock(self._config.newline)
        block.add_line(indent, type(items).__name__, " {")
        for item in items:
            block.add_line(self._render(item, depth + 1, True, ctx))
        block.add_line(self._indent(depth), "}")
        return block.build()

    def _render_mapping(
        self, mapping: Mapping[Any, Any], depth: int, indent: str, ctx: RenderContext
    ) -> str:
        block = TextBlock(self._config.newline)
        block.add_line(indent, type(mapping).__name__, " {")
        item_indent = self._indent(depth + 1)
        for key, item in mapping.items():
            # Both sides follow the line prefix, so neither carries its own indent.
            block.add_line(
                item_indent,
                self._render(key, depth + 1, False, ctx),
                " = ",
                self._render(item, depth + 1, False, ctx),
            )
        block.add_line(self._indent(depth), "}")
        return block.build()

    def _render_object(self, obj: Any, depth: int, indent: str, ctx: RenderContext) -> str:
        block = TextBlock(self._config.newline)
        block.add_line(indent, type(obj).__name__)
        member_indent = self._indent(depth + 1)
        for member in self.select_members(obj):
            try:
                value = member.get_value(obj)
            except Exception as exc:
                logger.debug(
                    "Reading %s.%s failed: %r", type(obj).__name__, member.name, exc
                )
                block.add_line(
                    member_indent, member.name, " = ", f"<error: {type(exc).__name__}: {exc}>"
                )
                continue
            if member.declared_type is None:
                # Unannotated property: its value decides the type rules.
                member = dataclasses.replace(member, declared_type=type(value))
                if self.is_excluded(member):
                    continue
            block.add_line(
                member_indent, member.name, " = ", self._render_member(value, member, depth, ctx)
            )
        return block.build()

    def is_excluded(self, member: MemberInfo) -> bool:
        """True if the member or its declared type is excluded."""
        config = self._config
        if member.declared_type is not None and member.declared_type in config.excluded_types:
            return True
        if not config.excluded_members:
            return False
        return any(key in config.excluded_members for key in member_keys(member.owner, member.name))

    def select_members(self, obj: Any) -> list[MemberInfo]:
        """Public members of ``obj`` that survive the exclusion rules."""
        return [member for member in public_members(obj) if not self.is_excluded(member)]

    def _render_member(
        self, value: Any, member: MemberInfo, depth: int, ctx: RenderContext
    ) -> str:
        formatter = resolve_formatter(self._config.formatters, member)
        if formatter is not None:
            return formatter(value)
        return self._render(value, depth + 1, False, ctx)


def print_to_string(value: Any, config: PrintingConfig | None = None) -> str:
    """Render ``value`` with ``config``, or with the context default.

    Example:
        >>> print_to_string([1, 2])
        'list {\\n\\t1\\n\\t2\\n}'
    """
    return ObjectPrinter(config).print_to_string(value)


__all__ = [
    "ObjectPrinter",
    "RenderContext",
    "print_to_string",
]
