"""Case conversion helpers."""

from __future__ import annotations

import re

_DASHED_LOWER_RE = re.compile(r"-([a-z])")
_CAMEL_BOUNDARY_RE = re.compile(r"(?!^)[A-Z]{2,}(?=[A-Z][a-z])|[A-Z][a-z]")


def _lcfirst(s: str) -> str:
    return s[:1].lower() + s[1:]


def to_camel_case(s: str, upper_case_first_letter: bool = False) -> str:
    """``foo-bar-baz`` -> ``fooBarBaz`` (or ``FooBarBaz``)."""
    if upper_case_first_letter:
        s = s[:1].upper() + s[1:]
    return _DASHED_LOWER_RE.sub(lambda m: m[1].upper(), s)


def get_path_from_camel_case(camel: str, glue: str = "-") -> str:
    """``fooBarBaz`` -> ``foo-bar-baz``.

    Runs of capitals stay together: ``parseHTMLString`` -> ``parse-html-string``.
    """
    return _CAMEL_BOUNDARY_RE.sub(lambda m: glue + m[0], _lcfirst(camel)).lower()


def lower_first_and_last(s: str) -> str:
    if len(s) < 2:
        return s.lower()
    return s[0].lower() + s[1:-1] + s[-1].lower()
