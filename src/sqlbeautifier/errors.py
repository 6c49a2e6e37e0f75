"""Exception classes for sqlbeautifier.

Scanning, formatting, minifying and highlighting never raise for any input
text. The only errors belong to the boundary: option values outside their
enumerated domains, and the host's empty-input precondition.
"""

from __future__ import annotations


class SqlBeautifierError(Exception):
    """Base exception for all sqlbeautifier errors."""

    pass


class OptionsError(SqlBeautifierError, ValueError):
    """A configuration update carried a value outside its domain.

    Raised by FormatOptions.from_dict() and configure() before any state
    is changed, so the current options are left untouched.
    """

    def __init__(self, option: str, value: object, allowed: tuple[str, ...] = ()) -> None:
        """Initialize options error.

        Args:
            option: Name of the offending option
            value: The rejected value
            allowed: Accepted spellings (empty for boolean toggles)
        """
        self.option = option
        self.value = value
        self.allowed = allowed

        expected = ", ".join(allowed) if allowed else "a boolean"
        super().__init__(f"Invalid value {value!r} for option '{option}' (expected {expected})")


class EmptyInputError(SqlBeautifierError, ValueError):
    """The host supplied blank SQL text where some was required."""

    def __init__(self, action: str = "format") -> None:
        self.action = action
        super().__init__(f"Please enter some SQL to {action}")
