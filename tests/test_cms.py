"""Tests for Chicago citations."""

from citekit.styles import render


# ── Factories ────────────────────────────────────────────────────────


def _raw(**fields):
    return {k: v if isinstance(v, list) else [v] for k, v in fields.items()}


def _cms(**fields) -> str:
    return render("cms", _raw(**fields)).body


# ── Creators ─────────────────────────────────────────────────────────


def test_two_authors_second_in_reading_order():
    body = _cms(
        author=["Smith, John", "Doe, Jane"],
        title="the great book",
        publisher="Penguin",
        published_location="New York",
        published_date="2020",
        format="book",
    )
    assert body == "Smith, John, and Jane Doe. <em>The Great Book</em>. New York: Penguin, 2020."


def test_three_authors_et_al():
    body = _cms(author=["Smith, John", "Doe, Jane", "Roe, Rita"], title="Book", format="book")
    assert body.startswith("Smith, John, et al. <em>Book</em>.")


def test_editor_only_gets_role_suffix_once():
    body = _cms(editor="Doe, Jane", title="essays", format="book")
    assert body == "Doe, Jane, ed. <em>Essays</em>."
    assert "Edited by" not in body


def test_plural_compilers():
    body = _cms(compiler=["Doe, Jane", "Roe, Rita"], title="Sources", format="book")
    assert body.startswith("Doe, Jane, and Rita Roe, comps.")


def test_author_with_editor_lists_editor_once():
    body = _cms(author="Smith, John", editor="Doe, Jane", title="Letters", format="book")
    assert body == "Smith, John. <em>Letters</em>. Edited by Jane Doe."
    assert body.count("Jane Doe") == 1


def test_translators_after_title():
    body = _cms(
        author="Tolstoy, Leo",
        translator=["Maude, Louise", "Maude, Aylmer"],
        title="war and peace",
        format="book",
    )
    assert body == "Tolstoy, Leo. <em>War and Peace</em>. Translated by Louise Maude and Aylmer Maude."


def test_three_contributors_joined_with_serial_comma():
    body = _cms(
        author="Smith, John",
        editor=["Doe, Jane", "Roe, Rita", "Poe, Ed"],
        title="Letters",
        format="book",
    )
    assert "Edited by Jane Doe, Rita Roe, and Ed Poe." in body


# ── Articles ─────────────────────────────────────────────────────────


def test_article_pages_after_date():
    body = _cms(
        author="Doe, Jane",
        title="a study",
        journal="journal of examples",
        volume="12",
        issue="3",
        pages="45-67",
        published_date="2014",
        format="article",
    )
    assert body == (
        'Doe, Jane. "A Study." <em>Journal of Examples</em>, vol. 12, no. 3, 2014, pp. 45 - 67.'
    )


def test_pages_after_text_use_colon():
    body = _cms(
        author="Doe, Jane",
        title="a study",
        journal="journal of examples",
        pages="45-67",
        format="article",
    )
    assert body == 'Doe, Jane. "A Study." <em>Journal of Examples</em>: pp. 45 - 67.'


def test_article_full_date():
    body = _cms(title="Report", journal="Daily", published_date="2014-03-15", format="article")
    assert body.endswith("<em>Daily</em>, 15 Mar. 2014.")


def test_explicit_citation_wins():
    assert _cms(explicit=["A", "B"], author="Smith, John") == "A\nB"
