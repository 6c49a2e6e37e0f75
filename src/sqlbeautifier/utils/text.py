"""Text helpers shared by the renderers and the highlighter."""

from __future__ import annotations

import html as html_module

from sqlbeautifier.config import KeywordCase


def escape_html(text: str) -> str:
    """Escape markup special characters.

    Escapes <, >, & and " but NOT single quotes, which keeps SQL string
    literals readable in the generated markup.

    Examples:
        >>> escape_html("a < 'b' & \\"c\\"")
        "a &lt; 'b' &amp; &quot;c&quot;"
    """
    return html_module.escape(text, quote=False).replace('"', "&quot;")


def apply_case(word: str, keyword_case: KeywordCase) -> str:
    """Re-case a keyword or function name.

    Examples:
        >>> apply_case("select", KeywordCase.UPPER)
        'SELECT'
        >>> apply_case("ROW_NUMBER", KeywordCase.PROPER)
        'Row_number'
    """
    if keyword_case is KeywordCase.LOWER:
        return word.lower()
    if keyword_case is KeywordCase.PROPER:
        return word[:1].upper() + word[1:].lower()
    return word.upper()
