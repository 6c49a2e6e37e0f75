"""Utility modules for sqlbeautifier.

Provides:
- text: escape_html, apply_case
- logger: get_logger and the log_render summary helper
"""

from sqlbeautifier.utils.logger import ROOT_LOGGER_NAME, get_logger, log_render
from sqlbeautifier.utils.text import apply_case, escape_html

__all__ = [
    "ROOT_LOGGER_NAME",
    "apply_case",
    "escape_html",
    "get_logger",
    "log_render",
]
