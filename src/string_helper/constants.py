"""Shared constants: comparison operators, character categories, tables."""

from __future__ import annotations

from enum import Enum


# ---------------------------------------------------------------------------
# Comparison operators
# ---------------------------------------------------------------------------

OPERATOR_LESS_THAN = "<"
OPERATOR_LESS_OR_EQUAL = "<="
OPERATOR_GREATER_THAN = ">"
OPERATOR_GREATER_OR_EQUAL = ">="
OPERATOR_EQUAL = "=="


# ---------------------------------------------------------------------------
# Random string character categories
# ---------------------------------------------------------------------------

class CharType(str, Enum):
    AlphaLower = "alpha_lower"
    AlphaUpper = "alpha_upper"
    Number = "number"
    Special = "special"


# ---------------------------------------------------------------------------
# Transliteration tables
# ---------------------------------------------------------------------------

UMLAUTS: dict[str, str] = {
    "ä": "ae", "ö": "oe", "ü": "ue",
    "Ä": "Ae", "Ö": "Oe", "Ü": "Ue",
    "ß": "ss",
}

SPECIAL_CHARS_LOWER: dict[str, str] = {
    "š": "s", "ð": "dj", "ž": "z", "à": "a", "á": "a", "â": "a", "ã": "a",
    "å": "a", "æ": "a", "ç": "c", "è": "e", "é": "e", "ê": "e", "ë": "e",
    "ì": "i", "í": "i", "î": "i", "ï": "i", "ñ": "n", "ò": "o", "ó": "o",
    "ô": "o", "õ": "o", "ø": "o", "ù": "u", "ú": "u", "û": "u", "ý": "y",
    "þ": "b", "ÿ": "y", "ƒ": "f", "ß": "ss",
}

SPECIAL_CHARS_UPPER: dict[str, str] = {
    "Š": "S", "Ð": "DJ", "Ž": "Z", "À": "A", "Á": "A", "Â": "A", "Ã": "A",
    "Å": "A", "Æ": "A", "Ç": "C", "È": "E", "É": "E", "Ê": "E", "Ë": "E",
    "Ì": "I", "Í": "I", "Î": "I", "Ï": "I", "Ñ": "N", "Ò": "O", "Ó": "O",
    "Ô": "O", "Õ": "O", "Ø": "O", "Ù": "U", "Ú": "U", "Û": "U", "Ý": "Y",
    "Þ": "B", "Ÿ": "Y", "Ƒ": "F",
}

# replace_special_characters() spells umlauts out, special_chars_to_ascii() drops them
UMLAUTS_LOWER_SPELLED: dict[str, str] = {"ä": "ae", "ö": "oe", "ü": "ue"}
UMLAUTS_UPPER_SPELLED: dict[str, str] = {"Ä": "AE", "Ö": "OE", "Ü": "UE"}

SYMBOL_WORDS: dict[str, str] = {"&": "-and-", "@": "-at-", "#": "-number-"}


# ---------------------------------------------------------------------------
# Byte size units
# ---------------------------------------------------------------------------

BYTE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")
