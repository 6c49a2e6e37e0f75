"""Formatting options and ContextVar-based current configuration.

FormatOptions is an immutable value: updates go through merge(), which
returns a new value and leaves the original untouched. The "current"
options read by the module-level API live in a ContextVar, so concurrent
threads each see their own value and a configure() in one thread never
races with a format() in another.

Usage:
    from sqlbeautifier.config import FormatOptions, format_options_context

    opts = FormatOptions().merge({"keywordCase": "lower"})

    with format_options_context(opts):
        sqlbeautifier.format("select 1")

"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any

from sqlbeautifier.errors import OptionsError

logger = logging.getLogger(__name__)


class IndentType(Enum):
    """Unit of one indentation level."""

    TABS = "tabs"
    SPACES2 = "spaces2"
    SPACES4 = "spaces4"


class KeywordCase(Enum):
    """Casing applied to keyword and function names."""

    UPPER = "upper"
    LOWER = "lower"
    PROPER = "proper"


class CommaPosition(Enum):
    """Where list-separating commas go in an expanded SELECT list."""

    AFTER = "after"
    BEFORE = "before"
    SPACED = "spaced"


_INDENT_UNITS = {
    IndentType.TABS: "\t",
    IndentType.SPACES2: "  ",
    IndentType.SPACES4: "    ",
}

# Persisted (camelCase) spelling -> field name
_WIRE_NAMES = {
    "indentType": "indent_type",
    "keywordCase": "keyword_case",
    "commaPosition": "comma_position",
    "expandCommaLists": "expand_comma_lists",
    "expandBooleanExpr": "expand_boolean_expr",
    "expandCaseStatements": "expand_case_statements",
}

_ENUM_FIELDS: dict[str, type[Enum]] = {
    "indent_type": IndentType,
    "keyword_case": KeywordCase,
    "comma_position": CommaPosition,
}


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Immutable formatting options.

    Attributes:
        indent_type: Tabs, two spaces or four spaces per level
        keyword_case: Casing for keywords and function names
        comma_position: Comma placement in expanded SELECT lists
        expand_comma_lists: One SELECT column per line
        expand_boolean_expr: Break before AND/OR
        expand_case_statements: Lay CASE/WHEN/ELSE/END out on separate lines

    """

    indent_type: IndentType = IndentType.SPACES4
    keyword_case: KeywordCase = KeywordCase.UPPER
    comma_position: CommaPosition = CommaPosition.AFTER
    expand_comma_lists: bool = True
    expand_boolean_expr: bool = True
    expand_case_statements: bool = True

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> FormatOptions:
        """Create FormatOptions from a mapping.

        Accepts field names or their persisted camelCase spellings, and
        enum members or their string values. Unknown keys are silently
        ignored; missing keys take their defaults.

        Raises:
            OptionsError: A value lies outside its option's domain.

        Example:
            >>> FormatOptions.from_dict({"indentType": "tabs"}).indent_type
            <IndentType.TABS: 'tabs'>

        """
        return cls(**_coerce(config_dict))

    def merge(self, partial: Mapping[str, Any] | None = None, **changes: Any) -> FormatOptions:
        """Return a copy with the given fields replaced.

        Unspecified fields retain this value's settings. Validation happens
        before anything is built, so a bad update raises without side effects.
        """
        updates = dict(partial or {})
        updates.update(changes)
        current = {f.name: getattr(self, f.name) for f in fields(self)}
        current.update(_coerce(updates))
        return FormatOptions(**current)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted camelCase mapping."""
        result: dict[str, Any] = {}
        for wire, name in _WIRE_NAMES.items():
            value = getattr(self, name)
            result[wire] = value.value if isinstance(value, Enum) else value
        return result

    @property
    def indent_unit(self) -> str:
        return _INDENT_UNITS[self.indent_type]

    def indent(self, level: int) -> str:
        """Indentation string for a nesting level (negative levels clamp to 0)."""
        return self.indent_unit * max(level, 0)


def _coerce(config_dict: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize keys and validate values of a partial options mapping."""
    valid_fields = {f.name for f in fields(FormatOptions)}
    coerced: dict[str, Any] = {}
    for key, value in config_dict.items():
        name = _WIRE_NAMES.get(key, key)
        if name not in valid_fields:
            continue
        enum_type = _ENUM_FIELDS.get(name)
        if enum_type is not None:
            if isinstance(value, enum_type):
                coerced[name] = value
                continue
            try:
                coerced[name] = enum_type(value)
            except (TypeError, ValueError):
                raise OptionsError(key, value, tuple(m.value for m in enum_type)) from None
        elif isinstance(value, bool):
            coerced[name] = value
        else:
            raise OptionsError(key, value)
    return coerced


# Module-level default config (reused, never recreated)
DEFAULT_OPTIONS: FormatOptions = FormatOptions()

_format_options: ContextVar[FormatOptions] = ContextVar(
    "format_options",
    default=DEFAULT_OPTIONS,
)


def get_format_options() -> FormatOptions:
    """Get the current formatting options (thread-local)."""
    return _format_options.get()


def set_format_options(options: FormatOptions) -> None:
    """Set the formatting options for the current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _format_options.set(options)


def reset_format_options() -> None:
    """Reset to the module-level default options."""
    _format_options.set(DEFAULT_OPTIONS)


def configure(partial: Mapping[str, Any] | None = None, **changes: Any) -> FormatOptions:
    """Merge the given fields over the current options and make them current.

    Args:
        partial: Mapping of option names (snake_case or camelCase) to values
        **changes: Further option updates as keyword arguments

    Returns:
        The new current FormatOptions.

    Raises:
        OptionsError: A value lies outside its option's domain; the current
            options are left unchanged.

    Example:
        >>> configure(keywordCase="lower").keyword_case
        <KeywordCase.LOWER: 'lower'>

    """
    options = get_format_options().merge(partial, **changes)
    set_format_options(options)
    logger.debug("Format options updated: %s", options.to_dict())
    return options


@contextmanager
def format_options_context(options: FormatOptions) -> Iterator[FormatOptions]:
    """Context manager for temporary option changes.

    Restores the previous options even if an exception is raised.

    Example:
        >>> with format_options_context(FormatOptions(expand_case_statements=False)):
        ...     ...  # inline CASE rendering here

    """
    token = _format_options.set(options)
    try:
        yield options
    finally:
        _format_options.reset(token)


__all__ = [
    "CommaPosition",
    "DEFAULT_OPTIONS",
    "FormatOptions",
    "IndentType",
    "KeywordCase",
    "configure",
    "format_options_context",
    "get_format_options",
    "reset_format_options",
    "set_format_options",
]
