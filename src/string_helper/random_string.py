"""Random string generation."""

from __future__ import annotations

import logging
import secrets
import string
from collections.abc import Sequence

from .constants import CharType
from .diagnostics import DiagnosticEvent, Observer

logger = logging.getLogger(__name__)


def get_random_letter(upper_case: bool = False, pool: str = string.ascii_lowercase) -> str:
    """Pick one character from *pool*."""
    if not pool:
        raise ValueError("pool must not be empty")
    letter = pool if len(pool) == 1 else secrets.choice(pool)
    return letter.upper() if upper_case else letter


def _default_char_types(
    alpha_lower: bool, alpha_upper: bool, numbers: bool, special_chars: str
) -> list[CharType]:
    types: list[CharType] = []
    if alpha_lower:
        types.append(CharType.AlphaLower)
    if alpha_upper:
        types.append(CharType.AlphaUpper)
    if numbers:
        types.append(CharType.Number)
    if special_chars:
        types.append(CharType.Special)
    return types


def _report_skipped(char_type: str, reason: str, observer: Observer | None) -> None:
    name = getattr(char_type, "value", char_type)
    event = DiagnosticEvent(
        source=f"{__name__}.get_random_string",
        message=f"{reason}: {name}",
        params={"char_type": name},
    )
    logger.warning("%s - %s", event.source, event.message)
    if observer is not None:
        observer(event)


def get_random_string(
    length: int = 8,
    alpha_lower: bool = True,
    alpha_upper: bool = False,
    numbers: bool = True,
    special_chars: str = "",
    each_special_char_only_once: bool = True,
    char_types: Sequence[str] | None = None,
    observer: Observer | None = None,
) -> str:
    """Generate a random string cycling through the enabled categories.

    Characters are drawn round-robin: lowercase letter, uppercase letter,
    digit, special character, then again from the first enabled category.
    With *each_special_char_only_once* every special character is used at
    most once, and the category is retired when the pool runs dry.

    *char_types* overrides the boolean switches with an explicit category
    order. Unknown categories are skipped and reported to *observer* as a
    ``DiagnosticEvent``.

    Raises ValueError when characters are still needed but no category is
    left to draw from.
    """
    if char_types is None:
        types: list[str] = list(
            _default_char_types(alpha_lower, alpha_upper, numbers, special_chars)
        )
    else:
        types = list(char_types)
    specials = special_chars
    chars: list[str] = []
    offset = 0

    while len(chars) < length:
        if not types:
            raise ValueError(
                f"cannot generate {length} characters: no character category left"
            )
        index = offset % len(types)
        char_type = types[index]

        if char_type == CharType.AlphaLower:
            chars.append(get_random_letter())
        elif char_type == CharType.AlphaUpper:
            chars.append(get_random_letter(upper_case=True))
        elif char_type == CharType.Number:
            chars.append(str(secrets.randbelow(10)))
        elif char_type == CharType.Special and specials:
            char = get_random_letter(pool=specials)
            chars.append(char)
            if each_special_char_only_once:
                specials = specials.replace(char, "")
                if not specials:
                    del types[index]
                    continue
        else:
            if char_type == CharType.Special:
                reason = "No special characters to draw from"
            else:
                reason = "Unknown char type"
            _report_skipped(char_type, reason, observer)
            del types[index]
            continue

        offset += 1

    return "".join(chars)
