"""Syntax highlighting for formatted or minified SQL.

Re-scans the given text and wraps each token in a ``<span>`` carrying a
presentation class. The whitespace between tokens is copied through
(escaped) so the markup keeps the layout of the text it was given.

A second entry point wraps the fragment in a complete standalone HTML
document with an embedded style sheet, suitable for pasting into rich-text
consumers (word processors, mail clients).

Contract:
    - never raises for any input text
    - escapes all token text before insertion
    - uses CSS classes in fragments; colors live only in STYLE_SHEET
"""

from __future__ import annotations

from sqlbeautifier.config import FormatOptions, get_format_options
from sqlbeautifier.renderers.formatter import SqlFormatter
from sqlbeautifier.scanner import scan
from sqlbeautifier.stringbuilder import StringBuilder
from sqlbeautifier.tokens import TokenKind
from sqlbeautifier.utils.text import apply_case, escape_html

# Token kind -> presentation class (UNKNOWN has none)
CSS_CLASSES: dict[TokenKind, str] = {
    TokenKind.KEYWORD: "sql-keyword",
    TokenKind.FUNCTION: "sql-function",
    TokenKind.STRING: "sql-string",
    TokenKind.COMMENT: "sql-comment",
    TokenKind.NUMBER: "sql-number",
    TokenKind.OPERATOR: "sql-operator",
    TokenKind.IDENTIFIER: "sql-identifier",
}

# One fixed color per class
CLASS_COLORS: dict[str, str] = {
    "sql-comment": "#00AA00",
    "sql-string": "#AA0000",
    "sql-function": "#AA00AA",
    "sql-keyword": "#0000AA",
    "sql-operator": "#777777",
    "sql-number": "#000000",
    "sql-identifier": "#000000",
}


def _build_style_sheet() -> str:
    sb = StringBuilder()
    sb.append(
        ".SQLCode {\n"
        "    font-size: 13px;\n"
        "    font-weight: bold;\n"
        "    font-family: 'Consolas', 'Courier New', monospace;\n"
        "    white-space: pre;\n"
        "    color: #000000;\n"
        "}\n"
    )
    for css_class, color in CLASS_COLORS.items():
        sb.append(f".{css_class} {{\n    color: {color};\n}}\n")
    return sb.build()


STYLE_SHEET: str = _build_style_sheet()

_DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style type="text/css">
{style}</style>
</head>
<body>
<pre class="SQLCode">{body}</pre>
</body>
</html>"""


def highlight(
    text: str,
    use_formatted_casing: bool = True,
    *,
    options: FormatOptions | None = None,
) -> str:
    """Highlight SQL text as an HTML fragment.

    Args:
        text: SQL text, usually already formatted or minified
        use_formatted_casing: Re-case keywords and functions per the
            keyword casing option; False renders them upper-case
        options: Options to read the casing from (defaults to the current
            context options)

    Returns:
        Markup with one span per classified token.

    Example:
        >>> highlight("SELECT 'a<b'")
        '<span class="sql-keyword">SELECT</span> <span class="sql-string">\\'a&lt;b\\'</span>'
    """
    opts = options if options is not None else get_format_options()
    sb = StringBuilder()
    pos = 0
    for token in scan(text):
        if token.start > pos:
            sb.append(escape_html(text[pos : token.start]))
        pos = token.end

        value = token.value
        if token.kind in (TokenKind.KEYWORD, TokenKind.FUNCTION):
            value = apply_case(value, opts.keyword_case) if use_formatted_casing else value.upper()

        css_class = CSS_CLASSES.get(token.kind)
        if css_class:
            sb.append(f'<span class="{css_class}">{escape_html(value)}</span>')
        else:
            sb.append(escape_html(value))
    if pos < len(text):
        sb.append(escape_html(text[pos:]))
    return sb.build()


def render_styled_document(text: str, *, options: FormatOptions | None = None) -> str:
    """Format SQL text and wrap its highlighting in a standalone HTML document.

    Args:
        text: Raw or already formatted SQL text
        options: Options for formatting and casing (defaults to the current
            context options)

    Returns:
        Complete HTML document with an embedded style sheet.
    """
    formatted = SqlFormatter(options).format(text)
    body = highlight(formatted, True, options=options)
    return _DOCUMENT_TEMPLATE.format(style=STYLE_SHEET, body=body)


__all__ = [
    "CLASS_COLORS",
    "CSS_CLASSES",
    "STYLE_SHEET",
    "highlight",
    "render_styled_document",
]
