# model_compare/core/escape.py
from html import escape
from typing import Optional


def escape_html(text: Optional[str]) -> str:
    # Only &, < and > are replaced; quotes pass through unchanged.
    if not text:
        return ""
    return escape(text, quote=False)
