# model_compare/core/highlight.py
import re
from typing import List, Optional, Tuple

from model_compare.core.escape import escape_html

# Whitespace as browsers define it: \s minus \x1c-\x1f, plus U+FEFF.
# The capturing group keeps every whitespace run as its own token.
WHITESPACE = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
TOKEN_PATTERN = re.compile(f"([{WHITESPACE}]+)")

REMOVED_CLASS = "diff-removed"
ADDED_CLASS = "diff-added"


def tokenize(text: Optional[str]) -> List[str]:
    """
    Splits text into alternating word and whitespace tokens.
    Edge tokens may be empty strings; joining the tokens gives back the text.
    """
    return TOKEN_PATTERN.split(text or "")


def highlight_differences(text1: Optional[str], text2: Optional[str]) -> Tuple[str, str]:
    """
    Compares the two token streams position by position.

    Tokens that differ are wrapped in a "removed" span on the first side and an
    "added" span on the second side. There is no alignment step, so a single
    inserted word marks every following position as different.
    """
    words1 = tokenize(text1)
    words2 = tokenize(text2)

    highlighted1 = []
    highlighted2 = []
    for i in range(max(len(words1), len(words2))):
        word1 = words1[i] if i < len(words1) else ""
        word2 = words2[i] if i < len(words2) else ""

        if word1 == word2:
            highlighted1.append(escape_html(word1))
            highlighted2.append(escape_html(word2))
            continue

        if word1:
            highlighted1.append(_wrap(REMOVED_CLASS, word1))
        if word2:
            highlighted2.append(_wrap(ADDED_CLASS, word2))

    return "".join(highlighted1), "".join(highlighted2)


def _wrap(css_class: str, word: str) -> str:
    return f'<span class="{css_class}">{escape_html(word)}</span>'
