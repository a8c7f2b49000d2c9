"""Keyword shielding.

Machine translation happily rewrites brand names and proper nouns.  Before
text is sent to the translator every keyword is swapped for a placeholder
token, and after translation the tokens are swapped back.

Placeholder tokens
------------------
Tokens are ``KW<index>PLH``, derived from the keyword's position in the
list and never from its content.  The ``PLH`` suffix keeps ``KW1PLH`` from
being a prefix of ``KW10PLH``, so restoring one token never clobbers
another.

Ordering
--------
Keywords are substituted one at a time in the order given.  When one
keyword contains another, whichever comes first in the list claims the
overlapping text::

    shield_keywords("New York City", ["New York", "York City"])
    → ("KW0PLH City", {"KW0PLH": "New York", "KW1PLH": "York City"})

A later keyword that happens to match text *inside* an earlier placeholder
(for example the keyword ``"PLH"``) corrupts that placeholder; round trips
are only exact when no keyword overlaps a token produced before it.
"""

from __future__ import annotations

PLACEHOLDER_PREFIX = "KW"
PLACEHOLDER_SUFFIX = "PLH"


def make_placeholder(index: int) -> str:
    """Return the placeholder token for the keyword at *index*."""
    return f"{PLACEHOLDER_PREFIX}{index}{PLACEHOLDER_SUFFIX}"


def shield_keywords(text: str, keywords: list[str]) -> tuple[str, dict[str, str]]:
    """Replace every occurrence of each keyword with its placeholder.

    Args:
        text:     Source text.
        keywords: Substrings to protect, processed in list order.

    Returns:
        ``(shielded_text, mapping)`` where *mapping* is placeholder →
        keyword.  Keywords that do not occur in *text* still get an entry;
        restoring an absent placeholder is a no-op.

    Raises:
        ValueError: If a keyword is the empty string.  Callers are expected
            to reject such input before it gets here.
    """
    mapping: dict[str, str] = {}
    for index, keyword in enumerate(keywords):
        if not keyword:
            raise ValueError(f"keyword at index {index} is empty")
        placeholder = make_placeholder(index)
        text = text.replace(keyword, placeholder)
        mapping[placeholder] = keyword
    return text, mapping


def unshield_keywords(text: str, mapping: dict[str, str]) -> str:
    """Put the original keywords back in place of their placeholders."""
    for placeholder, keyword in mapping.items():
        text = text.replace(placeholder, keyword)
    return text
