"""Card name normalization for loose equality comparisons."""

import re

_APOSTROPHES = str.maketrans({"’": "'", "‘": "'"})
_QUOTES = str.maketrans({"“": '"', "”": '"'})
_WHITESPACE = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """
    Canonicalize a card name for comparison.

    Lower-cases, unifies apostrophe and quote glyphs, drops everything except
    letters, digits, whitespace, apostrophes and hyphens, then collapses
    whitespace. The result is a lookup key only and is never displayed.

    Example:
        >>> normalize_name("Lim-Dûl’s  Vault!")
        "lim-dûl's vault"
    """
    lowered = name.lower().translate(_APOSTROPHES).translate(_QUOTES)
    kept = "".join(ch for ch in lowered if ch.isalnum() or ch.isspace() or ch in "'-")
    return _WHITESPACE.sub(" ", kept).strip()
