"""Tests for string_helper.random_string."""

import logging

import pytest

from string_helper.constants import CharType
from string_helper.diagnostics import CollectingObserver
from string_helper.random_string import get_random_letter, get_random_string


# ---------------------------------------------------------------------------
# get_random_letter
# ---------------------------------------------------------------------------

def test_random_letter_default_pool():
    letter = get_random_letter()
    assert len(letter) == 1
    assert letter.islower()

def test_random_letter_upper_case():
    assert get_random_letter(upper_case=True).isupper()

def test_random_letter_single_char_pool():
    assert get_random_letter(pool="x") == "x"
    assert get_random_letter(upper_case=True, pool="x") == "X"

def test_random_letter_from_pool():
    assert get_random_letter(pool="!?") in "!?"

def test_random_letter_empty_pool():
    with pytest.raises(ValueError):
        get_random_letter(pool="")


# ---------------------------------------------------------------------------
# get_random_string
# ---------------------------------------------------------------------------

def test_default_alternates_letters_and_digits():
    s = get_random_string()
    assert len(s) == 8
    assert all(c.islower() for c in s[0::2])
    assert all(c.isdigit() for c in s[1::2])

def test_upper_case_only():
    s = get_random_string(6, alpha_lower=False, alpha_upper=True, numbers=False)
    assert len(s) == 6
    assert s.isupper()
    assert s.isalpha()

def test_each_special_char_only_once():
    s = get_random_string(10, numbers=False, special_chars="!?")
    assert len(s) == 10
    assert sorted(c for c in s if c in "!?") == ["!", "?"]

def test_special_chars_may_repeat():
    s = get_random_string(6, alpha_lower=False, numbers=False, special_chars="#",
                          each_special_char_only_once=False)
    assert s == "######"

def test_zero_length():
    assert get_random_string(0, alpha_lower=False, numbers=False) == ""

def test_no_category_enabled():
    with pytest.raises(ValueError):
        get_random_string(5, alpha_lower=False, numbers=False)

def test_special_pool_exhausted():
    with pytest.raises(ValueError):
        get_random_string(5, alpha_lower=False, numbers=False, special_chars="ab")

def test_explicit_char_type_order():
    s = get_random_string(4, char_types=[CharType.Number, CharType.AlphaUpper])
    assert s[0].isdigit() and s[2].isdigit()
    assert s[1].isupper() and s[3].isupper()


class TestUnknownCharType:
    def test_reported_to_observer(self):
        observer = CollectingObserver()
        s = get_random_string(4, char_types=["number", "emoji"], observer=observer)
        assert s.isdigit()
        assert len(observer.events) == 1
        event = observer.events[0]
        assert event.params == {"char_type": "emoji"}
        assert "Unknown char type: emoji" in event.message
        assert event.source.endswith("get_random_string")

    def test_logged_as_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="string_helper.random_string"):
            get_random_string(2, char_types=["number", "emoji"])
        assert any("emoji" in r.getMessage() for r in caplog.records)

    def test_empty_special_pool_reported(self):
        observer = CollectingObserver()
        s = get_random_string(3, char_types=["special", "alpha_lower"], observer=observer)
        assert s.islower()
        assert observer.events[0].params == {"char_type": "special"}

    def test_only_unknown_types(self):
        observer = CollectingObserver()
        with pytest.raises(ValueError):
            get_random_string(3, char_types=["emoji"], observer=observer)
        assert len(observer.events) == 1
