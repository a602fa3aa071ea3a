from __future__ import annotations

import re

"""Search term tokenization into clickable words.

Works for Latin and Cyrillic alike: ``"купить iphone 15 pro"`` gives
``["купить", "iphone", "15", "pro"]``; internal hyphens and apostrophes stay
inside the word (``"s-cool"``, ``"д'артаньян"``).
"""

__all__ = [
    "MAX_TOKENS",
    "tokenize_search_term",
]

MAX_TOKENS = 60

# letters/digits ([^\W_]) joined by single - ' or ’
_WORD_RE = re.compile(r"[^\W_]+(?:[-'’][^\W_]+)*")


def tokenize_search_term(text: object) -> list[str]:
    """Split a search term into clickable words.

    Args:
        text: Search term cell (``None`` and blanks give no tokens)

    Returns:
        Word tokens in order, at most ``MAX_TOKENS``; hyphens and apostrophes
        inside a word are kept ("t-shirt", "men's")
    """
    s = "" if text is None else str(text).strip()
    if not s:
        return []
    return _WORD_RE.findall(s)[:MAX_TOKENS]
