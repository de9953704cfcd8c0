"""MLA (language and literature) citations."""

from citekit.core.models import BuildOptions, Citation
from citekit.styles.base import CitationRenderer, truncated_name_list, without
from citekit.text.cleaning import capitalize_first, clean_end_punctuation
from citekit.text.names import reading_order
from citekit.text.punctuation import append_fragment, ensure_period, ensure_space
from citekit.text.titles import (
    italicize,
    quote_title,
    short_month_name,
    strip_single_period,
    title_case,
)

CONJUNCTION = ", and "


def citation_title(citation: Citation) -> str:
    """Quoted title for contained works, italic title for the rest.

    Both end with a period; the quoted form keeps it inside the quotes.
    """
    if citation.is_article:
        return quote_title(citation.title, ".")
    return italicize(strip_single_period(title_case(citation.title))) + "."


def citation_date(citation: Citation) -> str:
    """"YYYY" for books; "[Day] Mon. YYYY" for articles."""
    if not citation.year:
        return ""
    if citation.is_article and citation.month:
        month = short_month_name(citation.month)
        if citation.day:
            return f"{citation.day} {month} {citation.year}"
        return f"{month} {citation.year}"
    return str(citation.year)


class MlaRenderer(CitationRenderer):
    style = "mla"
    build_options = BuildOptions(
        strip_protocol=True,
        volume_prefix=True,
        issue_prefix=True,
        pages_prefix=True,
    )

    def format_citation(self, citation: Citation) -> str:
        c = citation
        result = ""

        # First creator surname-first, the rest in reading order.
        creators = without(c.authors, c.publisher)
        as_editors = False
        if not creators and c.editors:
            creators, as_editors = list(c.editors), True
        elif creators and c.editors and not without(creators, c.editors):
            as_editors = True

        if creators:
            names = [capitalize_first(creators[0])]
            names += [reading_order(n) for n in creators[1:]]
            result = clean_end_punctuation(truncated_name_list(names, CONJUNCTION))
            if as_editors:
                result += ", editors" if len(creators) > 1 else ", editor"
            result = ensure_period(result)

        if c.title:
            result = ensure_space(result) + citation_title(c)

        if c.journal:
            result = ensure_space(result) + italicize(title_case(c.journal))

        result = append_fragment(result, c.edition)

        if c.editors and not as_editors:
            names = [reading_order(n) for n in c.editors]
            result = append_fragment(
                result, "edited by " + truncated_name_list(names, CONJUNCTION)
            )

        result = append_fragment(result, c.publisher)
        result = append_fragment(result, c.volume)
        result = append_fragment(result, c.issue)
        result = append_fragment(result, citation_date(c))
        result = append_fragment(result, c.pages)
        result = append_fragment(result, c.link)

        return ensure_period(result)
