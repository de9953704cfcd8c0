"""Tests for the style registry, explicit citations and error handling."""

import logging
from http import HTTPStatus

import pytest

from citekit.core.config import FormatConfig, load_config
from citekit.core.errors import (
    CitationBuildError,
    CitationError,
    NoExplicitCitationError,
    StyleNotImplementedError,
)
from citekit.styles import get_renderer, list_styles, render, render_all
from citekit.styles.apa import ApaRenderer
from citekit.styles.base import CitationRenderer, StyleRenderer
from citekit.styles.ris import RisRenderer


# ── Factories ────────────────────────────────────────────────────────


def _raw(**fields):
    return {k: v if isinstance(v, list) else [v] for k, v in fields.items()}


BOOK = _raw(title="The Thing", author="Smith, John", published_date="2020", format="book")


# ── Registry ─────────────────────────────────────────────────────────


def test_list_styles():
    assert list_styles() == ["apa", "citeas", "cms", "lbb", "mla", "ris"]


def test_get_renderer_case_insensitive():
    assert isinstance(get_renderer("APA"), ApaRenderer)


def test_prose_styles_render_from_citation():
    for style in ("apa", "mla", "cms", "lbb", "citeas"):
        assert isinstance(get_renderer(style), CitationRenderer)


def test_ris_renders_from_raw_fields():
    renderer = get_renderer("ris")
    assert isinstance(renderer, RisRenderer)
    assert isinstance(renderer, StyleRenderer)
    assert not isinstance(renderer, CitationRenderer)
    assert not hasattr(renderer, "format_citation")


def test_unknown_style():
    with pytest.raises(StyleNotImplementedError) as exc_info:
        get_renderer("harvard")
    assert exc_info.value.status == HTTPStatus.NOT_IMPLEMENTED
    assert "harvard" in str(exc_info.value)


def test_render_metadata():
    result = render("cms", BOOK)
    assert result.style == "cms"
    assert result.label == "Chicago"
    assert result.content_type == "text/html"
    assert result.filename is None


def test_custom_config_label():
    config = load_config()
    formats = dict(config.formats)
    formats["apa"] = FormatConfig(label="APA 6th")
    custom = config.model_copy(update={"formats": formats})
    assert render("apa", BOOK, config=custom).label == "APA 6th"


# ── Explicit citations ───────────────────────────────────────────────


@pytest.mark.parametrize("style", ["apa", "mla", "cms", "lbb", "citeas"])
def test_explicit_text_returned_verbatim(style):
    raw = dict(BOOK, explicit=["First line.", "  Second <i>line</i>  "])
    assert render(style, raw).body == "First line.\n  Second <i>line</i>  "


def test_cite_as():
    result = render("citeas", _raw(explicit="Smith, John. The Thing. 2020."))
    assert result.body == "Smith, John. The Thing. 2020."
    assert result.label == "Cite As"
    assert result.content_type == "text/plain"


def test_cite_as_without_explicit_citation():
    with pytest.raises(NoExplicitCitationError) as exc_info:
        render("citeas", BOOK)
    assert exc_info.value.status == HTTPStatus.BAD_REQUEST
    assert str(exc_info.value) == "no explicit citation for this item"


# ── Errors ───────────────────────────────────────────────────────────


def test_build_error_for_bad_input():
    with pytest.raises(CitationBuildError) as exc_info:
        render("apa", ["not", "a", "mapping"])
    assert exc_info.value.status == HTTPStatus.BAD_REQUEST


def test_error_hierarchy():
    assert issubclass(StyleNotImplementedError, CitationError)
    assert issubclass(NoExplicitCitationError, CitationError)
    assert issubclass(CitationBuildError, CitationError)
    assert CitationError("boom").status == HTTPStatus.INTERNAL_SERVER_ERROR


def test_malformed_fields_degrade_silently():
    raw = _raw(title="", author="", published_date="someday", pages="n/a", format="book")
    assert render("apa", raw).body == ""


# ── Render all ───────────────────────────────────────────────────────


def test_render_all_styles_in_order():
    results = render_all(BOOK)
    assert [r.label for r in results] == ["MLA", "APA", "Chicago", "Bluebook"]
    assert results[1].body == "Smith, J. (2020). <em>The thing</em>."


def test_render_all_skips_failures(caplog):
    with caplog.at_level(logging.WARNING, logger="citekit.styles"):
        results = render_all(["bad"])
    assert results == []
    assert "Failed to generate MLA citation" in caplog.text
