"""Wrapping, unwrapping and cutting strings around markers."""

from __future__ import annotations

from .search import ends_with, starts_with


def wrap(s: str, lhs: str, rhs: str, prevent_double_wrapping: bool = True) -> str:
    """Wrap *s* into *lhs* and *rhs*.

    With *prevent_double_wrapping*, a side that is already present is not
    added again.
    """
    if not prevent_double_wrapping:
        return lhs + s + rhs
    prefix = "" if starts_with(s, lhs) else lhs
    suffix = "" if ends_with(s, rhs) else rhs
    return prefix + s + suffix


def unwrap(s: str, lhs: str, rhs: str) -> str:
    if lhs and s.startswith(lhs):
        s = s[len(lhs):]
    if rhs and s.endswith(rhs):
        s = s[:-len(rhs)]
    return s


def remove_all_before(
    needle: str, s: str, offset: int = 0, exclude_needle: bool = False
) -> str:
    """Cut everything before the first *needle* found at or after *offset*.

    *s* is returned unchanged when the needle is not found.
    """
    if offset > len(s):
        return s
    start = s.find(needle, offset)
    if start < 0:
        return s
    return s[start + (len(needle) if exclude_needle else 0):]


def remove_all_after(
    needle: str, s: str, offset: int = 0, exclude_needle: bool = False
) -> str:
    """Cut everything after the first *needle* found at or after *offset*."""
    if offset > len(s):
        return s
    start = s.find(needle, offset)
    if start < 0:
        return s
    return s[:start + (0 if exclude_needle else len(needle))]


def remove_all_between(s: str, lhs: str, rhs: str, remove_delimiters: bool = True) -> str:
    """Remove the first section enclosed by *lhs* and *rhs*.

    The delimiters go too unless *remove_delimiters* is False.
    """
    if not s or not lhs or not rhs:
        return s
    offset_lhs = s.find(lhs)
    if offset_lhs < 0:
        return s
    offset_rhs = s.find(rhs, offset_lhs + len(lhs))
    if offset_rhs < 0:
        return s
    if remove_delimiters:
        return s[:offset_lhs] + s[offset_rhs + len(rhs):]
    return s[:offset_lhs + len(lhs)] + s[offset_rhs:]
