"""Transliteration of umlauts and accented characters to ASCII."""

from __future__ import annotations

from .constants import (
    SPECIAL_CHARS_LOWER,
    SPECIAL_CHARS_UPPER,
    SYMBOL_WORDS,
    UMLAUTS,
    UMLAUTS_LOWER_SPELLED,
    UMLAUTS_UPPER_SPELLED,
)

_UMLAUTS_TABLE = str.maketrans(UMLAUTS)
_SPECIAL_LOWER_TABLE = str.maketrans({**SPECIAL_CHARS_LOWER, **UMLAUTS_LOWER_SPELLED})
_SPECIAL_MIXED_TABLE = str.maketrans({
    **SPECIAL_CHARS_LOWER,
    **UMLAUTS_LOWER_SPELLED,
    **SPECIAL_CHARS_UPPER,
    **UMLAUTS_UPPER_SPELLED,
})
_ASCII_LOWER_TABLE = str.maketrans(SPECIAL_CHARS_LOWER)
_ASCII_MIXED_TABLE = str.maketrans({**SPECIAL_CHARS_LOWER, **SPECIAL_CHARS_UPPER})
_SYMBOL_TABLE = str.maketrans(SYMBOL_WORDS)


def umlauts_to_ascii(s: str) -> str:
    """``Größe`` -> ``Groesse``."""
    return s.translate(_UMLAUTS_TABLE)


def replace_special_characters(s: str, to_lower: bool = True) -> str:
    """Replace accented characters and umlauts with ASCII spellings.

    With *to_lower* the string is lower-cased first, otherwise upper-case
    characters are transliterated to upper-case replacements.
    """
    if to_lower:
        return s.lower().translate(_SPECIAL_LOWER_TABLE)
    return s.translate(_SPECIAL_MIXED_TABLE)


def special_chars_to_ascii(s: str, to_lower: bool) -> str:
    """Like ``replace_special_characters`` but keeps umlauts and spells out ``& @ #``."""
    if to_lower:
        s = s.lower().translate(_ASCII_LOWER_TABLE)
    else:
        s = s.translate(_ASCII_MIXED_TABLE)
    return s.translate(_SYMBOL_TABLE)
