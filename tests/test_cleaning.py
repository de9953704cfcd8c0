"""Tests for field cleanup helpers."""

import pytest

from citekit.text.cleaning import (
    capitalize_first,
    clean_end_punctuation,
    clean_field,
    first_value,
    strip_brackets,
    strip_trailing_periods,
)


# ── Trailing punctuation ─────────────────────────────────────────────


def test_strips_trailing_separators():
    assert clean_end_punctuation("Smith, John, ") == "Smith, John"
    assert clean_end_punctuation("Boston :") == "Boston"
    assert clean_end_punctuation("The title /") == "The title"


def test_strips_dangling_period():
    assert clean_end_punctuation("A history.") == "A history"


def test_strips_mixed_run():
    assert clean_end_punctuation("Foo.,") == "Foo"
    assert clean_end_punctuation("Foo ;. ") == "Foo"


def test_keeps_initial():
    assert clean_end_punctuation("Smith, J.") == "Smith, J."
    assert clean_end_punctuation("Washington, D.C.") == "Washington, D.C."


def test_keeps_ellipsis():
    assert clean_end_punctuation("And then...") == "And then..."


def test_empty_and_none():
    assert clean_end_punctuation("") == ""
    assert clean_end_punctuation(None) == ""


@pytest.mark.parametrize(
    "value",
    ["Smith, John, ", "A history.", "Foo.,", "Smith, J.", "And then...",
     "[2nd ed.]", "  spaced  ;", "Vol. 12.", ""],
)
def test_clean_end_punctuation_idempotent(value):
    once = clean_end_punctuation(value)
    assert clean_end_punctuation(once) == once


# ── Brackets ─────────────────────────────────────────────────────────


def test_strip_brackets_one_level():
    assert strip_brackets("[2nd ed.]") == "2nd ed."
    assert strip_brackets("(Boston)") == "Boston"
    assert strip_brackets("[[nested]]") == "[nested]"


def test_strip_brackets_unbalanced_wrapping_kept():
    assert strip_brackets("(a) and (b)") == "(a) and (b)"
    assert strip_brackets("[Boston") == "[Boston"


def test_clean_field_combines_steps():
    assert clean_field("[Boston]:") == "Boston"
    assert clean_field("(12).") == "12"


# ── Misc ─────────────────────────────────────────────────────────────


def test_capitalize_first():
    assert capitalize_first("de la Croix, Jean") == "De la Croix, Jean"
    assert capitalize_first("Already") == "Already"
    assert capitalize_first("") == ""


def test_strip_trailing_periods():
    assert strip_trailing_periods("The thing..") == "The thing"
    assert strip_trailing_periods("Wait...") == "Wait..."
    assert strip_trailing_periods("Plain") == "Plain"


def test_first_value():
    assert first_value(None) == ""
    assert first_value([]) == ""
    assert first_value(["  a ", "b"]) == "a"
