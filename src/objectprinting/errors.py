"""Exception classes for objectprinting.

Rendering itself never raises: every value has a textual form. The errors
below are raised while a configuration is being built.
"""

from __future__ import annotations


class ObjectPrintingError(Exception):
    """Base exception for all objectprinting errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigurationError(ObjectPrintingError, ValueError):
    """Invalid value passed to the configuration builder."""

    pass


class MemberSelectorError(ConfigurationError):
    """Member selector does not denote a simple member access.

    Raised when a selector is a computed expression, a chained access,
    a method, or a private name.
    """

    def __init__(self, owner: type | None, message: str) -> None:
        """Initialize selector error.

        Args:
            owner: Type the selector was resolved against (optional)
            message: Description of the problem
        """
        self.owner = owner
        prefix = f"{owner.__name__}: " if owner is not None else ""
        super().__init__(f"{prefix}{message}")
