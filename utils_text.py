"""
Text Utilities for Part Naming
==============================
- Whitespace normalization
- Case-folded matching text for detection rules
- Keyword extraction for fallback names
"""

import re
from typing import FrozenSet, Iterable, List, Optional

# Words that never carry meaning in a fallback name
STOPWORDS: FrozenSet[str] = frozenset({
    "a", "an", "and", "the", "for", "of", "with", "without",
    "in", "on", "to", "or", "by", "from", "&", "+", "per",
})

_EDGE_PUNCT = re.compile(r'^[^\w]+|[^\w]+$')


def normalize_whitespace(s: str) -> str:
    """Normalizes whitespace in string"""
    if not s:
        return ""
    return re.sub(r"\s+", " ", s, flags=re.S).strip()


def fold(s: Optional[str]) -> str:
    """Case-folded, whitespace-collapsed text for keyword matching."""
    return normalize_whitespace(s or "").casefold()


def contains_any(text: str, terms: Iterable[str]) -> bool:
    """Checks if text contains any of the terms (text must already be folded)"""
    return any(term in text for term in terms)


def contains_word(text: str, word: str) -> bool:
    """Whole-word check, plural 's' allowed ("pin" matches "pins", not "spindle")."""
    return re.search(r'\b' + re.escape(word) + r's?\b', text) is not None


def significant_keywords(
    text: str,
    limit: int = 4,
    stopwords: Optional[Iterable[str]] = None,
) -> List[str]:
    """
    Picks the first `limit` meaningful words of a description.

    Punctuation at word edges is dropped, stopwords are skipped, the
    original case is kept.

    Example:
        "Ball Bearing, Pillow Widget" -> ["Ball", "Bearing", "Pillow", "Widget"]
    """
    if limit <= 0:
        return []
    skip = {w.casefold() for w in (STOPWORDS if stopwords is None else stopwords)}

    keywords = []
    for word in normalize_whitespace(text).split(" "):
        word = _EDGE_PUNCT.sub("", word)
        if not word or word.casefold() in skip:
            continue
        keywords.append(word)
        if len(keywords) >= limit:
            break
    return keywords
