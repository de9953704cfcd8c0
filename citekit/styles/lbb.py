"""Bluebook (legal) citations.

The citation shape depends on the item: theses, books and government
documents, sound and video recordings, and articles. Articles in law
reviews get the "volume JOURNAL page (year)" form; other periodicals use a
dated "at page" form. Unknown formats fall back to the book shape since it
only needs the most common fields.
"""

import logging

from citekit.core.models import BuildOptions, Citation
from citekit.legal.tables import (
    abbreviate_month,
    abbreviate_name,
    abbreviate_periodical_title,
    is_law_journal,
)
from citekit.styles.base import CitationRenderer
from citekit.text.names import reading_order
from citekit.text.titles import italicize, month_name, small_caps, title_case

logger = logging.getLogger(__name__)

BOOK_FORMATS = ("book", "government_document")
MEDIA_FORMATS = ("sound", "video")
LAW_REVIEW_TYPES = ("academic journal", "review")


# ── Names ────────────────────────────────────────────────────────────


def build_name(name: str) -> str:
    return abbreviate_name(reading_order(name))


def build_names(names) -> str:
    """"A", "A & B", or "A et al."."""
    if not names:
        return ""
    if len(names) == 1:
        return build_name(names[0])
    if len(names) == 2:
        return f"{build_name(names[0])} & {build_name(names[1])}"
    return f"{build_name(names[0])} et al."


def build_editors(names) -> str:
    if not names:
        return ""
    return build_names(names) + (" ed." if len(names) == 1 else " eds.")


def build_translators(names) -> str:
    if not names:
        return ""
    return build_names(names) + " trans."


# ── Dates ────────────────────────────────────────────────────────────


def law_review_date(citation: Citation) -> str:
    # Law reviews cite the year only, whatever else is known.
    return str(citation.year) if citation.year else ""


def newspaper_date(citation: Citation) -> str:
    """"Mon. d, yyyy", degrading to "Mon. yyyy" or "yyyy"."""
    if not citation.year:
        return ""
    month = abbreviate_month(month_name(citation.month))
    if month and citation.day:
        return f"{month} {citation.day}, {citation.year}"
    if month:
        return f"{month} {citation.year}"
    return str(citation.year)


def magazine_date(citation: Citation) -> str:
    if not citation.year:
        return ""
    month = abbreviate_month(month_name(citation.month))
    if month:
        return f"{month} {citation.year}"
    return str(citation.year)


# ── Renderer ─────────────────────────────────────────────────────────


class LbbRenderer(CitationRenderer):
    style = "lbb"
    build_options = BuildOptions(strip_protocol=True)

    def format_citation(self, citation: Citation) -> str:
        c = citation
        thesis_sources = self.config.legal.thesis_sources

        if c.data_source in thesis_sources or c.format == "thesis":
            shape, render = "thesis", self.thesis_citation
        elif c.format in BOOK_FORMATS:
            shape, render = "book", self.book_citation
        elif c.format in MEDIA_FORMATS:
            shape, render = "media", self.media_citation
        elif c.format == "article":
            shape, render = "article", self.article_citation
        else:
            shape, render = "book (fallback)", self.book_citation

        logger.debug("Bluebook shape for format=%r source=%r: %s",
                     c.format, c.data_source, shape)
        return render(c)

    def book_citation(self, c: Citation) -> str:
        result = ""
        authors = build_names(c.authors)
        if authors:
            result = small_caps(authors) + ", "
        result += small_caps(c.title)

        year_part = [p for p in (c.edition, str(c.year) if c.year else "") if p]
        parenthetical = [
            p for p in (build_editors(c.editors), build_translators(c.translators)) if p
        ]
        if year_part:
            parenthetical.append(" ".join(year_part))
        if parenthetical:
            result += " (" + ", ".join(parenthetical) + ")"

        return result + "."

    def article_citation(self, c: Citation) -> str:
        parts = []

        authors = build_names(c.authors)
        if authors:
            parts.append(authors)
        if c.title:
            parts.append(italicize(title_case(c.title)))

        law_review = c.publication_type in LAW_REVIEW_TYPES and is_law_journal(c.journal)

        if law_review:
            words = [c.volume]
            if c.journal:
                words.append(small_caps(abbreviate_periodical_title(c.journal)))
            words.append(c.page_from)
            year = law_review_date(c)
            if year:
                words.append(f"({year})")
            parts.append(" ".join(w for w in words if w))
        else:
            if c.journal:
                journal = abbreviate_periodical_title(c.journal)
                if c.volume:
                    journal = f"{c.volume} {journal}"
                parts.append(small_caps(journal))

            if c.publication_type == "news":
                date = newspaper_date(c)
            else:
                date = magazine_date(c)
            if date:
                parts.append(date)

            if c.page_from:
                parts.append(f"at {c.page_from}")

        return ", ".join(p for p in parts if p) + "."

    def media_citation(self, c: Citation) -> str:
        result = ""
        if c.format == "sound":
            authors = build_names(c.authors)
            if authors:
                result = small_caps(authors) + ", "
        result += small_caps(c.title)

        words = [p for p in (c.publisher, str(c.year) if c.year else "") if p]
        if words:
            result += " (" + " ".join(words) + ")"

        return result + "."

    def thesis_citation(self, c: Citation) -> str:
        result = ""
        if c.authors:
            result = build_names(c.authors[:1]) + ", "
        result += c.title

        date = newspaper_date(c)
        if date:
            result += f" ({date})"
        if c.publisher:
            result += f" ({c.publisher})"

        return result + "."
