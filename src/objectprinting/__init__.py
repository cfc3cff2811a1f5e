"""
objectprinting — Debug-friendly text dumps of arbitrary object graphs

Renders any in-memory value (objects, dataclasses, mappings, sequences,
scalars) into an indented, human-readable block of text. Cycles and
shared references are detected by identity, so every graph terminates.
The output is for people, not for parsing back.

Quick Start:
    >>> from objectprinting import print_to_string
    >>> print(print_to_string({"a": [1, 2]}))
    dict {
        a = list {
            1
            2
        }
    }

Custom Configuration:
    >>> from objectprinting import PrintingConfigBuilder
    >>> printer = (
    ...     PrintingConfigBuilder(Person)
    ...     .excluding(lambda p: p.age)
    ...     .printing(lambda p: p.name).using(str.upper)
    ...     .printing_type(float).with_format(".2f")
    ...     .build_printer()
    ... )
    >>> print(printer.print_to_string(Person(name="Alice", age=30)))
    Person
        name = ALICE

Installation:
    pip install objectprinting      # zero runtime dependencies
"""

from objectprinting.builder import MemberPrintingConfig, PrintingConfigBuilder
from objectprinting.config import (
    DEFAULT_CYCLE_MARKER,
    DEFAULT_TERMINAL_TYPES,
    PrintingConfig,
    get_printing_config,
    printing_config_context,
    reset_printing_config,
    set_printing_config,
)
from objectprinting.errors import ConfigurationError, MemberSelectorError, ObjectPrintingError
from objectprinting.formatters import ByMember, ByType, Formatter, formatted, trimmed
from objectprinting.members import MemberInfo, describe_type, public_members, resolve_member
from objectprinting.printer import ObjectPrinter, print_to_string

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "ObjectPrinter",
    "print_to_string",
    # Configuration
    "PrintingConfig",
    "PrintingConfigBuilder",
    "MemberPrintingConfig",
    "DEFAULT_CYCLE_MARKER",
    "DEFAULT_TERMINAL_TYPES",
    "get_printing_config",
    "set_printing_config",
    "reset_printing_config",
    "printing_config_context",
    # Formatters
    "ByMember",
    "ByType",
    "Formatter",
    "formatted",
    "trimmed",
    # Members
    "MemberInfo",
    "describe_type",
    "public_members",
    "resolve_member",
    # Errors
    "ObjectPrintingError",
    "ConfigurationError",
    "MemberSelectorError",
]
