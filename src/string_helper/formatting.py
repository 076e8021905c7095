"""Formatting helpers: byte sizes, CSV counts, HTML compression, messages."""

from __future__ import annotations

import csv
import html
import re
import string
from collections.abc import Iterable, Sequence

from .constants import BYTE_UNITS

_HTML_WHITESPACE_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r">[^\S ]+"), ">"),        # after tags, except space
    (re.compile(r"[^\S ]+<"), "<"),        # before tags, except space
    (re.compile(r"(\s)+"), r"\1"),
    (re.compile(r"<!--.*?-->", re.S), ""),
]


def format_bytes(size: int) -> str:
    """Human readable size: ``1536`` -> ``1.5 KB``."""
    if size < 0:
        raise ValueError(f"size must not be negative: {size}")
    value = float(size)
    exponent = 0
    while value >= 1024 and exponent < len(BYTE_UNITS) - 1:
        value /= 1024
        exponent += 1
    rounded = round(value, 1)
    number = str(int(rounded)) if rounded.is_integer() else str(rounded)
    return f"{number} {BYTE_UNITS[exponent]}"


def count_items_in_csv(text: str, delimiter: str = ",", respect_quotes: bool = False) -> int:
    """Number of items in a single CSV line.

    Without *respect_quotes* every delimiter counts, including those inside
    quoted items.
    """
    if not respect_quotes:
        return text.count(delimiter) + 1
    row = next(csv.reader([text], delimiter=delimiter, skipinitialspace=True), [])
    return max(len(row), 1)


def explode_trimmed(text: str, delimiter: str = ",") -> list[str]:
    return [item.strip() for item in text.split(delimiter)]


def compress_html(markup: str) -> str:
    for pattern, replacement in _HTML_WHITESPACE_RULES:
        markup = pattern.sub(replacement, markup)
    return markup


def reduce_char_repetitions(text: str, characters: str | Iterable[str]) -> str:
    """Collapse repeated runs of *characters* into a single occurrence.

    A list collapses each of its entries in turn.
    """
    if not isinstance(characters, str):
        for item in characters:
            text = reduce_char_repetitions(text, item)
        return text
    if not characters:
        return text
    double = characters * 2
    while double in text:
        text = text.replace(double, characters)
    return text


def to_alpha(index: int) -> str:
    """Spreadsheet-style column letters: 0 -> a, 25 -> z, 26 -> aa."""
    if index < 0:
        raise ValueError(f"index must not be negative: {index}")
    letters = string.ascii_lowercase
    dividend = index + 1
    alpha = ""
    while dividend > 0:
        dividend, modulo = divmod(dividend - 1, 26)
        alpha = letters[modulo] + alpha
    return alpha


def translate(message: str, args: Sequence[object] = (), escape_html_entities: bool = False) -> str:
    """printf-style formatting of *message* with *args*."""
    if escape_html_entities:
        message = html.escape(message, quote=True)
    if not args:
        return message
    return message % tuple(args)


def translate_plural(single: str, multiple: str, amount: int) -> str:
    return multiple if amount == 0 or amount > 1 else single
