"""Substring search, extraction, prefix/suffix checks and replacement."""

from __future__ import annotations

import warnings
from collections.abc import Iterable, Sequence


def str_pos_consecutive(
    haystack: str, needles: Sequence[str], associative: bool = True
) -> dict[str, int | None] | list[int | None] | None:
    """Find the offsets of *needles*, each searched after the previous match.

    A needle that is not found maps to ``None`` and does not move the search
    position. Returns ``None`` when no needle is found at all.
    """
    offsets: dict[str, int | None] = {}
    found: list[int | None] = []
    start = 0
    for needle in needles:
        offset = haystack.find(needle, start)
        if offset < 0:
            found.append(None)
        else:
            found.append(offset)
            start = offset + 1
        offsets.setdefault(needle, found[-1])

    if all(o is None for o in found):
        return None
    return offsets if associative else found


def str_pos_multiple(haystack: str, needles: Sequence[str]):
    """Deprecated alias of :func:`str_pos_consecutive`."""
    warnings.warn(
        "str_pos_multiple() is deprecated, use str_pos_consecutive()",
        DeprecationWarning,
        stacklevel=2,
    )
    return str_pos_consecutive(haystack, needles)


def get_string_between(s: str, start: str, end: str, trim: bool = True) -> str:
    """Text between the first *start* and the next *end* after it."""
    if not s or not start or not end:
        return ""
    offset = s.find(start)
    if offset < 0:
        return ""
    offset += len(start)
    end_offset = s.find(end, offset)
    if end_offset < 0:
        return ""
    between = s[offset:end_offset]
    return between.strip() if trim else between


def starts_with(haystack: str, needle: str | Iterable[str]) -> bool:
    """True if *haystack* starts with *needle*, or with any of several needles."""
    if isinstance(needle, str):
        return haystack.startswith(needle)
    return any(haystack.startswith(n) for n in needle)


def ends_with(haystack: str, needles: str | Iterable[str]) -> bool:
    if isinstance(needles, str):
        return haystack.endswith(needles)
    return any(haystack.endswith(n) for n in needles)


def contains_any_of(s: str, needles: str | Iterable[str]) -> bool:
    """True if *s* contains any needle.

    A plain string is taken as a set of single characters.
    """
    if isinstance(needles, str):
        needles = list(needles)
    return any(n in s for n in needles)


def replace_first(subject: str, search: str, replace: str = "") -> str:
    if not search:
        return subject
    return subject.replace(search, replace, 1)


def replace_last(subject: str, search: str, replace: str = "") -> str:
    if not search:
        return subject
    head, sep, tail = subject.rpartition(search)
    if not sep:
        return subject
    return head + replace + tail
