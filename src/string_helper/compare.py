"""Compare two values by the name of a comparison operator."""

from __future__ import annotations

import operator

from .constants import (
    OPERATOR_EQUAL,
    OPERATOR_GREATER_OR_EQUAL,
    OPERATOR_GREATER_THAN,
    OPERATOR_LESS_OR_EQUAL,
    OPERATOR_LESS_THAN,
)

_OPERATORS = {
    OPERATOR_LESS_THAN: operator.lt,
    OPERATOR_LESS_OR_EQUAL: operator.le,
    OPERATOR_GREATER_THAN: operator.gt,
    OPERATOR_GREATER_OR_EQUAL: operator.ge,
    OPERATOR_EQUAL: operator.eq,
}


def _loose(value):
    """Numeric strings compare as numbers."""
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return value
    return value


def _as_text(value) -> str:
    return "" if value is None else str(value)


def compare_values(value, condition_value, operator_name: str | None = None, strict: bool = False) -> bool:
    """Apply ``<``, ``<=``, ``>``, ``==`` or ``>=`` to the two values.

    An unknown or missing operator falls back to ``>=``. Without *strict*,
    numeric strings are compared as numbers; with it, ``==`` also requires
    equal types. Pairs that cannot be ordered (a word against a number,
    ``None`` against anything) are compared as text, with ``None`` as ``""``.
    """
    if operator_name == OPERATOR_EQUAL and strict:
        return type(value) is type(condition_value) and value == condition_value
    compare = _OPERATORS.get(operator_name, operator.ge)
    if strict:
        lhs, rhs = value, condition_value
    else:
        lhs, rhs = _loose(value), _loose(condition_value)
    try:
        return compare(lhs, rhs)
    except TypeError:
        return compare(_as_text(value), _as_text(condition_value))
