"""Tests for name ordering and abbreviation."""

from citekit.text.names import abbreviate, reading_order, split_name


# ── Reading order ────────────────────────────────────────────────────


def test_reading_order_simple():
    assert reading_order("Smith, John") == "John Smith"


def test_reading_order_multiple_given_parts():
    assert reading_order("Smith, John, Paul") == "John, Paul Smith"


def test_reading_order_suffix_moves_to_end():
    assert reading_order("Smith, John, Jr.") == "John Smith, Jr."
    assert reading_order("King, Martin Luther, Jr., Ph.D.") == "Martin Luther King, Jr., Ph.D."


def test_reading_order_particles_stay_with_surname():
    assert reading_order("Croix, Jean de la") == "Jean de la Croix"


def test_reading_order_already_in_reading_order():
    assert reading_order("John Smith") == "John Smith"
    assert reading_order("Jean de la Croix") == "Jean de la Croix"
    assert reading_order("Plato") == "Plato"


def test_reading_order_corporate_unchanged():
    assert reading_order("United Nations (Organization)") == "United Nations (Organization)"


def test_reading_order_does_not_mutate_suffix_only_name():
    assert reading_order("Jr.") == "Jr."


def test_split_name_particles():
    assert split_name("Jean de la Croix") == ("Jean", "de la Croix")
    assert split_name("Plato") == ("", "Plato")
    assert split_name("") == ("", "")


# ── Abbreviation ─────────────────────────────────────────────────────


def test_abbreviate_given_names():
    assert abbreviate("Smith, John") == "Smith, J."
    assert abbreviate("Smith, John Paul") == "Smith, J. P."


def test_abbreviate_drops_dates():
    assert abbreviate("Smith, John, 1950-2010") == "Smith, J."
    assert abbreviate("Smith, John, 1950-") == "Smith, J."


def test_abbreviate_keeps_particles_suffixes_and_initials():
    assert abbreviate("Beethoven, Ludwig van") == "Beethoven, L. van"
    assert abbreviate("Smith, John, Jr.") == "Smith, J., Jr."
    assert abbreviate("Smith, J. R.") == "Smith, J. R."
    assert abbreviate("Henry, VIII") == "Henry, VIII"


def test_abbreviate_capitalizes_leading_letter():
    assert abbreviate("de Gaulle, Charles") == "De Gaulle, C."


def test_abbreviate_upper_cases_initials():
    assert abbreviate("smith, john paul") == "Smith, J. P."


def test_abbreviate_corporate_unchanged():
    assert abbreviate("Acme (Firm)") == "Acme (Firm)"
