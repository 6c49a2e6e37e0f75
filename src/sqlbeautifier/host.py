"""Boundary protocols for the host application.

The formatting core performs no I/O. Whatever collects raw text, remembers
preferences and exports results lives on the host side and talks to the
core through these protocols:

- OptionsStore: persisted formatting preferences (read at startup, written
  on every option change)
- InputCache: the last SQL text the user entered
- ExportSink: receives plain text and, optionally, rich markup (e.g. a
  clipboard offering both text/plain and text/html)

The Dict*/List* classes are in-memory reference implementations, useful for
tests and for hosts without persistence.

Thread Safety:
    The in-memory implementations are not thread-safe. Hosts that share
    one across threads must wrap get/put in a lock.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from sqlbeautifier.config import FormatOptions
from sqlbeautifier.errors import EmptyInputError
from sqlbeautifier.highlighting import render_styled_document


class OptionsStore(Protocol):
    """Key-value store for formatting preferences."""

    def load(self) -> Mapping[str, Any] | None:
        """Return the persisted options mapping, or None if nothing is stored."""
        ...

    def save(self, options: Mapping[str, Any]) -> None:
        """Persist an options mapping (camelCase keys, string enum values)."""
        ...


class InputCache(Protocol):
    """Key-value store for the last entered SQL text."""

    def load(self) -> str | None:
        ...

    def save(self, text: str) -> None:
        ...


@dataclass(frozen=True, slots=True)
class ExportPayload:
    """What an export sink receives.

    Attributes:
        plain: The SQL text itself
        html: Standalone styled HTML document, or None for plain-only export
    """

    plain: str
    html: str | None = None


class ExportSink(Protocol):
    """Destination for exported results (clipboard, file, ...)."""

    def write(self, payload: ExportPayload) -> None:
        ...


class DictOptionsStore:
    """In-memory options store."""

    __slots__ = ("_data",)

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._data: dict[str, Any] | None = dict(initial) if initial is not None else None

    def load(self) -> Mapping[str, Any] | None:
        return dict(self._data) if self._data is not None else None

    def save(self, options: Mapping[str, Any]) -> None:
        self._data = dict(options)


class DictInputCache:
    """In-memory last-input cache."""

    __slots__ = ("_text",)

    def __init__(self, text: str | None = None) -> None:
        self._text = text

    def load(self) -> str | None:
        return self._text

    def save(self, text: str) -> None:
        self._text = text


class ListExportSink:
    """Export sink that records every payload it receives."""

    __slots__ = ("payloads",)

    def __init__(self) -> None:
        self.payloads: list[ExportPayload] = []

    def write(self, payload: ExportPayload) -> None:
        self.payloads.append(payload)


def require_sql(text: str, action: str = "format") -> str:
    """Host precondition: reject blank input before calling the core.

    Returns:
        The text stripped of surrounding whitespace.

    Raises:
        EmptyInputError: The text is empty or whitespace only.
    """
    stripped = text.strip()
    if not stripped:
        raise EmptyInputError(action)
    return stripped


def build_export_payload(
    text: str,
    *,
    rich: bool = True,
    options: FormatOptions | None = None,
) -> ExportPayload:
    """Build the payload for exporting ``text``.

    Args:
        text: The SQL output to export (formatted or minified)
        rich: Include the styled standalone HTML document
        options: Options for the styled document (defaults to the current
            context options)
    """
    html = render_styled_document(text, options=options) if rich else None
    return ExportPayload(plain=text, html=html)


def load_options(store: OptionsStore, base: FormatOptions | None = None) -> FormatOptions:
    """Read persisted options from ``store`` and merge them over ``base``."""
    base = base if base is not None else FormatOptions()
    stored = store.load()
    return base.merge(stored) if stored else base


__all__ = [
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
]
