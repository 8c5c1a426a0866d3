"""Utility modules for pseudoscss.

Provides:
- text: escape_html, dedent_multiline, decode_string for literal handling
- logger: get_logger and configure_logging
"""

from pseudoscss.utils.logger import configure_logging, get_logger
from pseudoscss.utils.text import decode_string, dedent_multiline, escape_html

__all__ = [
    "configure_logging",
    "decode_string",
    "dedent_multiline",
    "escape_html",
    "get_logger",
]
