"""Renderers turning a token sequence back into SQL text.

- formatter: indented, line-broken layout driven by FormatOptions
- minifier: compact single-line layout with comments removed
"""

from sqlbeautifier.renderers.formatter import (
    KEYWORD_RULES,
    FormatContext,
    Frame,
    FrameKind,
    KeywordRule,
    SqlFormatter,
    format_tokens,
)
from sqlbeautifier.renderers.minifier import Minifier, minify_tokens
from sqlbeautifier.renderers.protocol import TokenRenderer

__all__ = [
    "FormatContext",
    "Frame",
    "FrameKind",
    "KEYWORD_RULES",
    "KeywordRule",
    "Minifier",
    "SqlFormatter",
    "TokenRenderer",
    "format_tokens",
    "minify_tokens",
]
