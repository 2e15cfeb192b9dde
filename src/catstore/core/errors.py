"""
Error types for the catstore engine.

Type problems and missing categories raise; missing records never do
(lookups return ``None`` / ``False`` instead).
"""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for all catstore errors."""

    def __init__(self, message: str, category: str | None = None):
        self.message = message
        self.category = category
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the category name if available."""
        if self.category is not None:
            return f"[{self.category}] {self.message}"
        return self.message


class StoreTypeError(StoreError, TypeError):
    """
    Raised when a category name or record id is not a string.

    Examples:
    - ``store.get(42, "abc")``
    - ``store.get("users", None)``
    """

    pass


class CategoryNotFoundError(StoreError, LookupError):
    """
    Raised when an operation that needs an existing category is given an
    unknown one.

    Examples:
    - ``store.update("ghosts", record)`` before any ``create("ghosts", ...)``
    """

    pass


class MergeStrategyMissingError(StoreError):
    """Raised when an update needs a merge strategy and the store has none."""

    pass


class ConfigError(StoreError):
    """Raised when a store configuration file cannot be read or validated."""

    pass


def ensure_str(value: object, what: str, operation: str) -> str:
    """
    Check that *value* is a string.

    Args:
        value: The argument to check
        what: Argument label used in the message ("Category", "ID")
        operation: Calling operation, e.g. ``"Store.get"``

    Returns:
        The value, unchanged

    Raises:
        StoreTypeError: If *value* is not a ``str``
    """
    if not isinstance(value, str):
        raise StoreTypeError(f"{operation}: {what} {value!r} is not a string.")
    return value
