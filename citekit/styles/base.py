"""Base renderer interface and the creator-list rules shared by styles."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from citekit.core.builder import build_citation, normalize_raw_fields
from citekit.core.config import FormatConfig, ServiceConfig
from citekit.core.models import BuildOptions, Citation, RawFields, RenderedCitation
from citekit.text.cleaning import capitalize_first
from citekit.text.names import reading_order

logger = logging.getLogger(__name__)


class StyleRenderer(ABC):
    """One output style.

    Subclasses set ``style`` and implement ``contents``, which turns the
    normalized raw fields into the response body.
    """

    style: str = ""

    def __init__(self, config: ServiceConfig):
        self.config = config
        self.format: FormatConfig = config.format_for(self.style)

    @property
    def label(self) -> str:
        return self.format.label

    @property
    def content_type(self) -> str:
        return self.format.content_type

    def filename(self, record_url: Optional[str] = None) -> Optional[str]:
        """Suggested download filename, or None for inline styles."""
        return None

    def render(self, raw, record_url: Optional[str] = None) -> RenderedCitation:
        fields = normalize_raw_fields(raw)
        body = self.contents(fields, record_url)
        logger.debug("Rendered %s citation (%d chars)", self.style, len(body))
        return RenderedCitation(
            style=self.style,
            label=self.label,
            content_type=self.content_type,
            filename=self.filename(record_url),
            body=body,
        )

    @abstractmethod
    def contents(self, fields: RawFields, record_url: Optional[str] = None) -> str:
        """Response body for the item."""
        ...


class CitationRenderer(StyleRenderer):
    """A style rendered from the built ``Citation``.

    Subclasses set ``build_options`` and implement ``format_citation``. An
    explicit citation on the item always wins over the formatted one.
    """

    build_options: BuildOptions = BuildOptions()

    def options_for(self, fields: RawFields) -> BuildOptions:
        """Build options for this item; most styles use fixed options."""
        return self.build_options

    def contents(self, fields: RawFields, record_url: Optional[str] = None) -> str:
        citation = build_citation(fields, self.options_for(fields))
        if citation.explicit_text:
            return "\n".join(citation.explicit_text)
        return self.format_citation(citation)

    @abstractmethod
    def format_citation(self, citation: Citation) -> str:
        """Citation text for an item without an explicit citation."""
        ...


# ── Creator lists ────────────────────────────────────────────────────


def truncated_name_list(names: list[str], conjunction: str) -> str:
    """One name alone; up to seven joined with ``conjunction`` before the
    last; more than seven shows the first six, an ellipsis and the last."""
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    last = names[-1]
    if len(names) <= 7:
        return ", ".join(names[:-1]) + conjunction + last
    return ", ".join(names[:6]) + ", ... " + last


def leading_name_list(names: list[str]) -> str:
    """First name as given, then ", et al" (3+) or ", and <second>" (2)."""
    if not names:
        return ""
    result = capitalize_first(names[0])
    if len(names) > 2:
        result += ", et al"
    elif len(names) == 2:
        result += ", and " + reading_order(names[1])
    return result


def without(names: tuple[str, ...], *excluded) -> list[str]:
    """Names not equal to any excluded value or member of an excluded
    sequence."""
    drop = set()
    for item in excluded:
        if isinstance(item, str):
            drop.add(item)
        else:
            drop.update(item)
    return [n for n in names if n not in drop]
