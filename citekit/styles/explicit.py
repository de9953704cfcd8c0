"""Cite As: the item's own explicit citation, passed through unchanged."""

from citekit.core.errors import NoExplicitCitationError
from citekit.core.models import Citation
from citekit.styles.base import CitationRenderer


class ExplicitRenderer(CitationRenderer):
    style = "citeas"

    def format_citation(self, citation: Citation) -> str:
        # Only reached when the item carries no explicit citation.
        raise NoExplicitCitationError()
