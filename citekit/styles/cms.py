"""Chicago (footnote/bibliography) citations."""

import re

from citekit.core.models import BuildOptions, Citation
from citekit.styles.base import CitationRenderer, leading_name_list, without
from citekit.styles.mla import citation_date, citation_title
from citekit.text.cleaning import clean_end_punctuation
from citekit.text.names import reading_order
from citekit.text.punctuation import append_fragment, ensure_period, ensure_space
from citekit.text.titles import italicize, title_case

_ENDS_WITH_DIGIT_RE = re.compile(r"\d$")

# Role -> (singular, plural) suffix after the leading creator list.
ROLE_SUFFIXES = {
    "editor": (", ed", ", eds"),
    "compiler": (", comp", ", comps"),
    "translator": (", trans", ", trans"),
}


def joined_names(names: list[str]) -> str:
    """Reading-order names: "A", "A and B", "A, B, and C"."""
    names = [reading_order(n) for n in names]
    if len(names) < 3:
        return " and ".join(names)
    return ", ".join(names[:-1]) + ", and " + names[-1]


def place_first_publisher(citation: Citation) -> str:
    """"Place: Name" when both parts are distinct, else the builder's value."""
    name, place = citation.publisher_name, citation.publisher_place
    if name and place and name not in place and place not in name:
        return f"{place}: {name}"
    return citation.publisher


class CmsRenderer(CitationRenderer):
    style = "cms"
    build_options = BuildOptions(
        strip_protocol=True,
        volume_prefix=True,
        issue_prefix=True,
        pages_prefix=True,
        publisher_place=True,
    )

    def format_citation(self, citation: Citation) -> str:
        c = citation
        result = ""

        contributors = {
            "editor": list(c.editors),
            "compiler": list(c.compilers),
            "translator": list(c.translators),
        }

        # Leading creators: authors, else the first non-empty contributor
        # role. The role used here is not repeated in "<Role>ed by".
        creators = without(c.authors, c.publisher, c.compilers, c.translators)
        role = ""
        if creators:
            for name, people in contributors.items():
                if people and not without(creators, people):
                    role = name
                    break
        else:
            for name, people in contributors.items():
                if people:
                    creators, role = people, name
                    break

        if creators:
            result = leading_name_list(creators)
            if role:
                singular, plural = ROLE_SUFFIXES[role]
                result += plural if len(creators) > 1 else singular
                contributors[role] = []
            result = ensure_period(clean_end_punctuation(result))

        if c.title:
            result = ensure_space(result) + citation_title(c)

        for action, role_name in (
            ("Edited", "editor"),
            ("Compiled", "compiler"),
            ("Translated", "translator"),
        ):
            people = contributors[role_name]
            if people:
                result = ensure_space(result) + f"{action} by {joined_names(people)}."

        if c.journal:
            result = ensure_space(result) + italicize(title_case(c.journal))

        result = append_fragment(result, c.edition)
        result = append_fragment(result, c.volume)
        result = append_fragment(result, c.issue)
        result = append_fragment(result, place_first_publisher(c), ".")
        result = append_fragment(result, citation_date(c))

        if c.pages:
            if result:
                if _ENDS_WITH_DIGIT_RE.search(result):
                    result += ","
                if not result.endswith((" ", ".", ",", ":")):
                    result += ":"
                result = ensure_space(result)
            result += c.pages

        result = append_fragment(result, c.link)

        return ensure_period(result)
