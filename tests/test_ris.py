"""Tests for RIS export."""

import logging

import pytest

from citekit.core.config import RisConfig, load_config
from citekit.styles import render
from citekit.styles.ris import RisRenderer, clean_value, merge_values, sanitize


# ── Factories ────────────────────────────────────────────────────────


def _raw(**fields):
    return {k: v if isinstance(v, list) else [v] for k, v in fields.items()}


def _ris(record_url=None, **fields) -> str:
    return render("ris", _raw(**fields), record_url=record_url).body


@pytest.fixture(scope="module")
def config():
    return load_config()


# ── Record layout ────────────────────────────────────────────────────


def test_article_scenario():
    body = _ris(author="Doe, Jane", title="Paper", format="article")
    assert body == "TY  - JOUR\r\nAU  - Doe, Jane\r\nTI  - Paper\r\nER  - \r\n"


def test_tags_sorted_between_type_and_end():
    body = _ris(title="T", author="A", published_date="2020", volume="3", format="book")
    lines = body.split("\r\n")
    assert lines[0] == "TY  - BOOK"
    assert [line[:2] for line in lines[1:-2]] == ["AU", "PY", "TI", "VL"]
    assert lines[-2] == "ER  - "
    assert lines[-1] == ""


def test_unknown_format_is_generic():
    assert _ris(title="T", format="widget").startswith("TY  - GEN\r\n")
    assert _ris(title="T").startswith("TY  - GEN\r\n")


def test_explicit_citation_ignored():
    body = _ris(explicit="Cite me", title="T")
    assert "Cite me" not in body
    assert "TI  - T\r\n" in body


def test_output_metadata():
    result = render("ris", _raw(title="T"))
    assert result.content_type == "application/x-research-info-systems"
    assert result.label == "RIS"
    assert result.filename == "citation.ris"


def test_record_url_note_and_filename():
    url = "https://search.lib.virginia.edu/items/u123"
    result = render("ris", _raw(title="T"), record_url=url)
    assert "N1  - https://search.lib.virginia.edu/items/u123\r\n" in result.body
    assert result.filename == "u123.ris"


# ── Tag values ───────────────────────────────────────────────────────


def test_authors_repeat_and_advisor_suffix():
    body = _ris(author="Student, A", advisor="Prof, B", format="thesis")
    assert "TY  - THES\r\n" in body
    assert "AU  - Student, A\r\nAU  - Prof, B, advisor\r\n" in body


def test_editor_tag_has_no_suffix():
    assert "ED  - Doe, Jane\r\n" in _ris(editor="Doe, Jane")


def test_keywords_repeat():
    body = _ris(subject=["History", "Law"])
    assert "KW  - History\r\nKW  - Law\r\n" in body


def test_non_repeatable_values_merged():
    assert "PB  - Alpha, Beta\r\n" in _ris(publisher=["Alpha", "Beta"])


def test_urls_joined_with_semicolon():
    body = _ris(url=["http://a.example", "http://b.example"])
    assert "UR  - http://a.example ; http://b.example\r\n" in body


def test_library_keeps_first_value():
    body = _ris(data_source=["solr", "other"])
    assert "DP  - solr\r\n" in body
    assert "other" not in body


def test_merge_values_rules():
    assert merge_values("AU", ["a", "b"]) == ["a", "b"]
    assert merge_values("UR", ["a", "b"]) == ["a ; b"]
    assert merge_values("DP", ["a", "b"]) == ["a"]
    assert merge_values("TI", ["a", "b"]) == ["a, b"]


# ── Sanitisation ─────────────────────────────────────────────────────


def test_sanitize_markup_and_characters():
    assert sanitize("<b>Bold</b> &amp; “quoted” – text") == 'Bold & "quoted" - text'
    assert sanitize("A → B ≥ C © D") == "A -> B >= C (c) D"
    assert sanitize("  plain  ") == "plain"


def test_sanitize_drops_script_content():
    assert sanitize("Safe<script>alert(1)</script>") == "Safe"


def test_literal_newlines_split_lines():
    assert clean_value("AB", "Line one\\nLine two") == "Line one\r\nLine two"
    assert clean_value("AB", "a\\n\\n  \\nb") == "a\r\nb"


def test_asterisks_replaced_in_bibliographic_tags():
    assert clean_value("TI", "Star*Wars") == "Star#Wars"
    assert clean_value("AU", "Star*Author") == "Star*Author"


def test_author_values_truncated():
    body = _ris(author="x" * 300)
    assert f"AU  - {'x' * 255}\r\n" in body
    assert "x" * 256 not in body


def test_abstract_not_truncated():
    assert "y" * 300 in _ris(abstract="y" * 300)


# ── Configuration ────────────────────────────────────────────────────


def test_invalid_tag_skipped_with_warning(config, caplog):
    custom = config.model_copy(
        update={"ris": RisConfig(field_tags={"title": ["TOO", "ti"]})}
    )
    with caplog.at_level(logging.WARNING, logger="citekit.styles.ris"):
        body = RisRenderer(custom).render(_raw(title="T")).body
    assert "TOO" not in body
    assert "TI  - T\r\n" in body
    assert "invalid RIS tag" in caplog.text


def test_custom_type_codes(config):
    custom = config.model_copy(
        update={"ris": config.ris.model_copy(update={"type_codes": {"book": "EBOOK"}})}
    )
    body = RisRenderer(custom).render(_raw(title="T", format="book")).body
    assert body.startswith("TY  - EBOOK\r\n")
