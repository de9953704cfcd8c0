"""APA (author-date) citations."""

from citekit.core.models import BuildOptions, Citation, RawFields
from citekit.styles.base import CitationRenderer, truncated_name_list, without
from citekit.text.cleaning import clean_end_punctuation, first_value
from citekit.text.names import abbreviate
from citekit.text.punctuation import append_fragment, ensure_period, ensure_space
from citekit.text.titles import italicize, month_name, sentence_case, title_case

AMPERSAND = ", &amp; "


class ApaRenderer(CitationRenderer):
    style = "apa"
    build_options = BuildOptions(publisher_place=True)

    def options_for(self, fields: RawFields) -> BuildOptions:
        # Newspaper articles keep "p."/"pp." on their pages.
        is_news = first_value(fields.get("format")) == "news"
        return self.build_options.model_copy(update={"pages_prefix": is_news})

    def format_citation(self, citation: Citation) -> str:
        c = citation
        result = ""

        # Authors, or editors standing in for them.
        creators = without(c.authors, c.publisher)
        as_editors = False
        if not creators and c.editors:
            creators, as_editors = list(c.editors), True
        elif creators and c.editors and not without(creators, c.editors):
            as_editors = True

        if creators:
            result = truncated_name_list([abbreviate(n) for n in creators], AMPERSAND)
            if as_editors:
                result += " (Eds.)." if len(creators) > 1 else " (Ed.)."

        # "(YYYY)." for a book, "(YYYY, Month Day)." for an article.
        if c.year:
            date = str(c.year)
            if c.is_article and c.month:
                date += ", " + month_name(c.month)
                if c.day:
                    date += f" {c.day}"
            result = ensure_space(result) + f"({date})."
        else:
            result = ensure_period(result)

        if c.title:
            title = sentence_case(clean_end_punctuation(c.title))
            result = ensure_space(result) + (title if c.is_article else italicize(title))

        if c.is_article and c.editors and not as_editors:
            names = truncated_name_list([abbreviate(n) for n in c.editors], AMPERSAND)
            suffix = " (Eds.)" if len(c.editors) > 1 else " (Ed.)"
            result = ensure_space(ensure_period(result)) + names + suffix

        if c.journal:
            result = append_fragment(result, italicize(title_case(c.journal)), ".")

        if c.edition:
            result = ensure_space(result) + f"({c.edition})."
        elif not c.journal:
            result = ensure_period(result)

        result = append_fragment(result, c.volume)

        if c.issue:
            if not c.volume:
                result = ensure_space(result)
            result += f"({c.issue})"

        result = append_fragment(result, c.pages)

        result = ensure_period(append_fragment(result, c.publisher))

        if c.link:
            result = ensure_space(result) + "Retrieved from " + c.link

        return result
