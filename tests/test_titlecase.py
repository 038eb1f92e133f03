"""
Tests for the title-case normalizer applied to spell text fields.
"""

import pytest

from spellgen.titlecase import proper_title


def test_ampersand_becomes_and():
    assert proper_title("FIRE BALL & bolt") == "Fire Ball And Bolt"


def test_small_words_stay_lowercase():
    assert proper_title("a gift to the king") == "a Gift to the King"


@pytest.mark.parametrize("text, expected", [
    ("ant hill", "Ant Hill"),
    ("onward to glory", "Onward to Glory"),
    ("THEN AN OWL", "Then an Owl"),
])
def test_small_words_match_whole_words_only(text, expected):
    assert proper_title(text) == expected


def test_whitespace_collapsed():
    assert proper_title("  magic \t  missile  ") == "Magic Missile"


def test_empty_string():
    assert proper_title("") == ""


def test_punctuation_starts_new_word_but_digits_do_not():
    assert proper_title("20' radius") == "20' Radius"
    assert proper_title("1st level (see text)") == "1st Level (See Text)"
    assert proper_title("o'clock") == "O'Clock"
