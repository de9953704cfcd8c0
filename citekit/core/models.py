"""Shared data models: raw catalog fields, the built Citation, rendered output."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

# Field name -> ordered list of values, as delivered by the catalog.
RawFields = dict[str, list[str]]

FIELD_NAMES = (
    "explicit",
    "author",
    "editor",
    "advisor",
    "compiler",
    "translator",
    "title",
    "subtitle",
    "format",
    "journal",
    "volume",
    "issue",
    "pages",
    "edition",
    "publisher",
    "published_location",
    "publication_type",
    "data_source",
    "published_date",
    "url",
    "doi",
    "serial_number",
    "is_online_only",
    "is_virgo_url",
)


class BuildOptions(BaseModel):
    """Per-style switches for the field setup routines."""

    model_config = ConfigDict(frozen=True)

    strip_protocol: bool = False
    volume_prefix: bool = False
    issue_prefix: bool = False
    pages_prefix: bool = False
    publisher_place: bool = False


class Citation(BaseModel):
    """Style-agnostic representation of one catalog item.

    When ``explicit_text`` is non-empty it is the whole citation and every
    prose renderer returns it verbatim. ``year == 0`` means no usable date
    was found; ``month`` and ``day`` are 0 when unknown.
    """

    model_config = ConfigDict(frozen=True)

    explicit_text: tuple[str, ...] = ()
    is_article: bool = False

    authors: tuple[str, ...] = ()
    editors: tuple[str, ...] = ()
    advisors: tuple[str, ...] = ()
    compilers: tuple[str, ...] = ()
    translators: tuple[str, ...] = ()

    title: str = ""
    journal: str = ""
    volume: str = ""
    issue: str = ""
    pages: str = ""
    page_from: str = ""
    page_to: str = ""
    edition: str = ""
    publisher: str = ""
    publisher_name: str = ""
    publisher_place: str = ""

    format: str = ""
    publication_type: str = ""
    data_source: str = ""

    date: str = ""
    year: int = 0
    month: int = 0
    day: int = 0

    link: str = ""


class RenderedCitation(BaseModel):
    """Output of a style renderer."""

    style: str
    label: str
    content_type: str
    filename: Optional[str] = None
    body: str
