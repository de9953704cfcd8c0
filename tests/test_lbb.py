"""Tests for Bluebook citations."""

import logging

from citekit.styles import render
from citekit.styles.lbb import build_editors, build_names, build_translators


# ── Factories ────────────────────────────────────────────────────────


def _raw(**fields):
    return {k: v if isinstance(v, list) else [v] for k, v in fields.items()}


def _lbb(**fields) -> str:
    return render("lbb", _raw(**fields)).body


def _sc(text):
    return f'<span style="font-variant: small-caps;">{text}</span>'


# ── Names ────────────────────────────────────────────────────────────


def test_name_lists():
    assert build_names([]) == ""
    assert build_names(["Smith, John"]) == "John Smith"
    assert build_names(["Smith, John", "Doe, Jane"]) == "John Smith & Jane Doe"
    assert build_names(["Smith, John", "Doe, Jane", "Roe, Rita"]) == "John Smith et al."


def test_role_suffixes():
    assert build_editors(["Doe, Jane"]) == "Jane Doe ed."
    assert build_editors(["Doe, Jane", "Roe, Rita"]) == "Jane Doe & Rita Roe eds."
    assert build_translators(["Doe, Jane"]) == "Jane Doe trans."
    assert build_editors([]) == ""


def test_institutional_author_abbreviated():
    assert build_names(["American Bar Association"]) == "Am. Bar Ass'n"


# ── Books ────────────────────────────────────────────────────────────


def test_book():
    body = _lbb(
        author="Smith, John",
        editor="Doe, Jane",
        title="The Law of Things",
        edition="2nd",
        published_date="2019",
        format="book",
    )
    assert body == (
        f"{_sc('John Smith')}, {_sc('The Law of Things')} (Jane Doe ed., 2nd ed. 2019)."
    )


def test_book_without_parenthetical():
    assert _lbb(title="Untitled Work", format="government_document") == f"{_sc('Untitled Work')}."


def test_unknown_format_falls_back_to_book():
    body = _lbb(author="Smith, John", title="A Map", published_date="1901", format="map")
    assert body == f"{_sc('John Smith')}, {_sc('A Map')} (1901)."


# ── Articles ─────────────────────────────────────────────────────────


def test_law_review_article():
    body = _lbb(
        author="Doe, Jane",
        title="the limits of contract",
        journal="Harvard Law Review",
        volume="12",
        pages="45-67",
        published_date="2014-03-15",
        publication_type="academic journal",
        format="article",
    )
    assert body == (
        f"Jane Doe, <em>The Limits of Contract</em>, 12 {_sc('Harv. L. Rev.')} 45 (2014)."
    )


def test_law_journal_title_needs_review_type():
    body = _lbb(
        title="Tax Tips",
        journal="Tax Law Monthly",
        volume="3",
        published_date="2014-03",
        publication_type="magazines",
        format="article",
    )
    assert "(2014)" not in body
    assert "Mar. 2014" in body


def test_magazine_article():
    body = _lbb(
        title="new gadgets",
        journal="Popular Science",
        volume="88",
        pages="10",
        published_date="2014-09",
        publication_type="magazines",
        format="article",
    )
    assert body == f"<em>New Gadgets</em>, {_sc('88 Popular Sci.')}, Sept. 2014, at 10."


def test_newspaper_article():
    body = _lbb(
        author="Doe, Jane",
        title="city news",
        journal="Daily Progress",
        pages="A1",
        published_date="2014-03-15",
        publication_type="news",
        format="article",
    )
    assert body == f"Jane Doe, <em>City News</em>, {_sc('Daily Progress')}, Mar. 15, 2014, at A1."


# ── Media & theses ───────────────────────────────────────────────────


def test_sound_recording_includes_artist():
    body = _lbb(
        author="Artist, Some",
        title="Greatest Hits",
        publisher="Label Records",
        published_date="1999",
        format="sound",
    )
    assert body == f"{_sc('Some Artist')}, {_sc('Greatest Hits')} (Label Records 1999)."


def test_video_omits_authors():
    body = _lbb(author="Director, A", title="The Film", published_date="2001", format="video")
    assert body == f"{_sc('The Film')} (2001)."


def test_thesis_from_data_source():
    body = _lbb(
        author=["Student, Grad", "Other, Person"],
        title="My Dissertation",
        published_date="2018-05-01",
        publisher="University of Virginia",
        data_source="libraetd",
        format="book",
    )
    assert body == "Grad Student, My Dissertation (May 1, 2018) (University of Virginia)."


def test_thesis_dispatch_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="citekit.styles.lbb"):
        _lbb(title="Paper", format="thesis")
    assert "thesis" in caplog.text


def test_explicit_citation_wins():
    assert _lbb(explicit="Given", title="Other", format="article") == "Given"
