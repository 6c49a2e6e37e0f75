"""Logging helpers for sqlbeautifier.

Every module logs through a standard library logger under the
``sqlbeautifier`` namespace, so hosts can tune the whole package with one
``logging.getLogger("sqlbeautifier")`` call. The library installs no
handlers and only ever logs at DEBUG.

Example:
    >>> import logging
    >>> logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "sqlbeautifier"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the package namespace.

    Example:
        >>> get_logger("scanner").name
        'sqlbeautifier.scanner'
        >>> get_logger("sqlbeautifier.scanner").name
        'sqlbeautifier.scanner'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def log_render(
    logger: logging.Logger,
    renderer: str,
    token_count: int,
    output: str,
    *,
    dropped: int = 0,
) -> None:
    """Record the DEBUG summary a renderer emits after each call.

    The line count is only computed when DEBUG is enabled for ``logger``.

    Args:
        logger: The renderer module's logger
        renderer: Short renderer name ("formatter", "minifier")
        token_count: Tokens consumed
        output: Rendered text
        dropped: Tokens left out of the output (comments, for the minifier)
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "%s: %d tokens -> %d chars, %d lines, %d dropped",
        renderer,
        token_count,
        len(output),
        output.count("\n") + 1 if output else 0,
        dropped,
    )
