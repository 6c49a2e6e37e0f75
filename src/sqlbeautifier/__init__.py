"""
sqlbeautifier: SQL formatter, minifier and highlighter

Re-renders SQL text into a consistently indented form, a compacted form,
and colorized HTML markup of either. Works on the token stream of a
single-pass scanner: no database connection, no schema, no parse tree.
Syntactically invalid SQL is formatted too; nothing here is a validator.

Quick Start:
    >>> import sqlbeautifier
    >>> print(sqlbeautifier.format("select a,b from t where a=1 and b=2"))
    SELECT
        a,
        b
    FROM t
    WHERE a = 1
        AND b = 2

    >>> sqlbeautifier.minify("SELECT  a  --comment\\nFROM t")
    'SELECT a FROM t'

    >>> # Or bind options (and a preference store) once
    >>> from sqlbeautifier import Beautifier
    >>> b = Beautifier({"keywordCase": "lower", "indentType": "spaces2"})
    >>> result = b.format_and_highlight("SELECT 1")

Installation:
    pip install sqlbeautifier        # zero runtime dependencies
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple

from sqlbeautifier.config import (
    DEFAULT_OPTIONS,
    CommaPosition,
    FormatOptions,
    IndentType,
    KeywordCase,
    configure,
    format_options_context,
    get_format_options,
    reset_format_options,
    set_format_options,
)
from sqlbeautifier.errors import EmptyInputError, OptionsError, SqlBeautifierError
from sqlbeautifier.highlighting import STYLE_SHEET, highlight, render_styled_document
from sqlbeautifier.host import (
    DictInputCache,
    DictOptionsStore,
    ExportPayload,
    ExportSink,
    InputCache,
    ListExportSink,
    OptionsStore,
    build_export_payload,
    load_options,
    require_sql,
)
from sqlbeautifier.renderers.formatter import SqlFormatter
from sqlbeautifier.renderers.minifier import Minifier
from sqlbeautifier.scanner import Scanner, scan
from sqlbeautifier.tokens import Token, TokenKind
from sqlbeautifier.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


class FormattedResult(NamedTuple):
    """Formatted SQL and its highlighted markup."""

    formatted: str
    highlighted: str


def format(text: str, *, options: FormatOptions | None = None) -> str:  # noqa: A001
    """Format SQL text with indentation and line breaks.

    Args:
        text: Raw SQL text
        options: Options to use (defaults to the current context options)

    Returns:
        Formatted SQL, trimmed of leading/trailing whitespace.

    Example:
        >>> format("select * from t")
        'SELECT\\n    *\\nFROM t'
    """
    return SqlFormatter(options).format(text)


def minify(text: str) -> str:
    """Remove comments and non-essential whitespace.

    Example:
        >>> minify("SELECT 1")
        'SELECT 1'
    """
    return Minifier().minify(text)


def format_and_highlight(text: str, *, options: FormatOptions | None = None) -> FormattedResult:
    """Format SQL text and highlight the formatted result."""
    opts = options if options is not None else get_format_options()
    formatted = SqlFormatter(opts).format(text)
    return FormattedResult(formatted, highlight(formatted, True, options=opts))


class Beautifier:
    """High-level processor binding one set of options.

    Usage:
        >>> b = Beautifier()
        >>> b.format("select 1")
        'SELECT\\n    1'

        >>> # Persist preferences across sessions
        >>> store = DictOptionsStore()
        >>> b = Beautifier(store=store)
        >>> _ = b.configure(keywordCase="lower")
        >>> store.load()["keywordCase"]
        'lower'

    Thread Safety:
        Options are an immutable value, so concurrent format/minify calls
        are safe. configure() replaces the bound value; do not call it
        while another thread is formatting with the same instance.

    """

    __slots__ = ("_options", "_store")

    def __init__(
        self,
        options: FormatOptions | Mapping[str, Any] | None = None,
        *,
        store: OptionsStore | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            options: Initial options, as a FormatOptions or a partial mapping
                merged over the defaults
            store: Preference store; persisted options are loaded over the
                initial options and every configure() writes back

        Raises:
            OptionsError: Initial or stored options hold an invalid value.
        """
        if options is None:
            base = DEFAULT_OPTIONS
        elif isinstance(options, FormatOptions):
            base = options
        else:
            base = FormatOptions.from_dict(options)

        self._store = store
        self._options = load_options(store, base) if store is not None else base

    @property
    def options(self) -> FormatOptions:
        return self._options

    def configure(self, partial: Mapping[str, Any] | None = None, **changes: Any) -> FormatOptions:
        """Merge option updates over the bound options and persist them."""
        self._options = self._options.merge(partial, **changes)
        if self._store is not None:
            self._store.save(self._options.to_dict())
        logger.debug("Beautifier options updated: %s", self._options.to_dict())
        return self._options

    def scan(self, text: str) -> list[Token]:
        return scan(text)

    def format(self, text: str) -> str:
        return SqlFormatter(self._options).format(text)

    def minify(self, text: str) -> str:
        return Minifier().minify(text)

    def highlight(self, text: str, use_formatted_casing: bool = True) -> str:
        return highlight(text, use_formatted_casing, options=self._options)

    def format_and_highlight(self, text: str) -> FormattedResult:
        return format_and_highlight(text, options=self._options)

    def minify_and_highlight(self, text: str) -> FormattedResult:
        """Minify SQL text and highlight it with upper-case keywords."""
        minified = self.minify(text)
        return FormattedResult(minified, highlight(minified, False, options=self._options))

    def render_styled_document(self, text: str) -> str:
        return render_styled_document(text, options=self._options)

    def export(self, text: str, sink: ExportSink, *, rich: bool = True) -> ExportPayload:
        """Send ``text`` (and optionally its styled document) to an export sink."""
        payload = build_export_payload(text, rich=rich, options=self._options)
        sink.write(payload)
        return payload


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "configure",
    "scan",
    "format",
    "minify",
    "highlight",
    "format_and_highlight",
    "render_styled_document",
    "FormattedResult",
    # High-level
    "Beautifier",
    # Tokens
    "Scanner",
    "Token",
    "TokenKind",
    # Renderers
    "Minifier",
    "SqlFormatter",
    "STYLE_SHEET",
    # Configuration (ContextVar-based)
    "CommaPosition",
    "DEFAULT_OPTIONS",
    "FormatOptions",
    "IndentType",
    "KeywordCase",
    "format_options_context",
    "get_format_options",
    "reset_format_options",
    "set_format_options",
    # Host boundary
    "DictInputCache",
    "DictOptionsStore",
    "ExportPayload",
    "ExportSink",
    "InputCache",
    "ListExportSink",
    "OptionsStore",
    "build_export_payload",
    "load_options",
    "require_sql",
    # Errors
    "EmptyInputError",
    "OptionsError",
    "SqlBeautifierError",
]
