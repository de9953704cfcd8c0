"""Citation builder: raw catalog fields -> normalized Citation.

Every field routine degrades to an empty value on bad input; the only
failure is a raw mapping that is not field name -> list of strings.
"""

import datetime
import html
import logging
import re
from collections.abc import Mapping

from citekit.core.errors import CitationBuildError
from citekit.core.models import BuildOptions, Citation, RawFields
from citekit.text.cleaning import (
    clean_end_punctuation,
    clean_field,
    first_value,
    strip_trailing_periods,
)

logger = logging.getLogger(__name__)

TRUTHY = frozenset({"true", "1", "yes", "y", "t"})


# ── Patterns ─────────────────────────────────────────────────────────


_VOLUME_PREFIX_RE = re.compile(r"^(?:vol(?:ume)?|v\.)", re.IGNORECASE)
_ISSUE_PREFIX_RE = re.compile(r"^(?:no|num(?:ber)?|iss(?:ue)?)\b", re.IGNORECASE)

_PAGE_MARKER_RE = re.compile(r"\bpp?\.\s*", re.IGNORECASE)
_PAGE_SPLIT_RE = re.compile(r"\s*[-–—]+\s*")
_DIGIT_RE = re.compile(r"\d")

_FIRST_EDITION_RE = re.compile(r"^(?:1st|first)\b", re.IGNORECASE)
_EDITION_OK_RE = re.compile(r"\seds?\.$")
_EDITION_NEAR_RE = re.compile(
    r"(?:^|\s)(editions|edition|edn|eds|ed)\.?$", re.IGNORECASE
)

_YEAR_RE = re.compile(r"^\d{4}$")
_FULL_DATE_RE = re.compile(r"^(\d{4})[-/](\d{1,2})[-/](\d{1,2})(?:[T ].*)?$")
_YEAR_MONTH_RE = re.compile(r"^(\d{4})[-/](\d{1,2})$")
_LEADING_RUN_RE = re.compile(r"^\D*(\d{1,4})")
_TRAILING_RUN_RE = re.compile(r"(\d{1,4})\D*$")

_DOI_PREFIX_RE = re.compile(
    r"^(?:doi:\s*|https?://(?:dx\.)?doi\.org/)", re.IGNORECASE
)
_DOI_URL_RE = re.compile(r"^https?://(?:dx\.)?doi\.org/", re.IGNORECASE)
_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*://", re.IGNORECASE)
_SERIAL_RE = re.compile(r"^(?:\d{7}|\d{9}|\d{12})[\dX]$", re.IGNORECASE)


# ── Raw field normalization ──────────────────────────────────────────


def normalize_raw_fields(raw) -> RawFields:
    """Return a fresh field -> list-of-strings dict.

    A bare string value is treated as a one-element list and ``None``
    values are dropped. Anything else that is not a string raises
    CitationBuildError.
    """
    if not isinstance(raw, Mapping):
        raise CitationBuildError(
            f"raw fields must be a mapping, got {type(raw).__name__}"
        )

    fields: RawFields = {}
    for key, values in raw.items():
        if not isinstance(key, str):
            raise CitationBuildError(f"field names must be strings, got {key!r}")
        if values is None:
            continue
        if isinstance(values, str):
            values = [values]
        if not isinstance(values, (list, tuple)):
            raise CitationBuildError(
                f"field {key!r} must be a list of strings, got {type(values).__name__}"
            )
        for value in values:
            if not isinstance(value, str):
                raise CitationBuildError(
                    f"field {key!r} contains a non-string value: {value!r}"
                )
        fields[key] = list(values)
    return fields


# ── Field setup routines ─────────────────────────────────────────────


def build_title(title: str, subtitle: str) -> str:
    title = clean_end_punctuation(title)
    subtitle = clean_end_punctuation(subtitle)
    if title and subtitle:
        title = f"{title}: {subtitle}"
    else:
        title = title or subtitle
    return strip_trailing_periods(title)


def prefix_number(value: str, prefix: str, pattern: re.Pattern, enabled: bool) -> str:
    """Clean a volume/issue value and prepend ``prefix`` when requested."""
    value = clean_field(value)
    if value and enabled and not pattern.match(value):
        value = f"{prefix} {value}"
    return value


def format_pages(value: str, prefix: bool = False) -> tuple[str, str, str]:
    """Return (pages, page_from, page_to) from a raw page value.

    Parts without a digit are discarded, so "pp. xi-" yields nothing.
    """
    text = _PAGE_MARKER_RE.sub(" ", value or "")
    parts = [clean_field(p) for p in _PAGE_SPLIT_RE.split(text.strip())]
    parts = [p for p in parts if _DIGIT_RE.search(p)]

    if len(parts) >= 2:
        page_from, page_to = parts[0], parts[1]
        pages = f"{page_from} - {page_to}"
        if prefix:
            pages = "pp. " + pages
        return pages, page_from, page_to

    if len(parts) == 1:
        pages = parts[0]
        if prefix:
            pages = "p. " + pages
        return pages, parts[0], ""

    return "", "", ""


def normalize_edition(value: str) -> str:
    """Normalize an edition statement to "... ed."/"... eds." form.

    First editions are never shown.
    """
    raw = (value or "").strip()
    cleaned = clean_field(raw)
    if not cleaned or _FIRST_EDITION_RE.match(cleaned):
        return ""
    if _EDITION_OK_RE.search(raw):
        return raw

    match = _EDITION_NEAR_RE.search(cleaned)
    if match:
        stem = cleaned[: match.start()].strip()
        if not stem:
            return ""
        plural = match.group(1).lower() in ("editions", "eds")
        return stem + (" eds." if plural else " ed.")

    return cleaned + " ed."


def combine_publisher(name: str, place: str, with_place: bool) -> str:
    """Combine publisher name and place, preferring the more specific one."""
    if name and place:
        if with_place and name not in place and place not in name:
            return f"{name}: {place}"
        if name in place:
            return place
        return name
    return name or place


def parse_date(value: str) -> tuple[str, int, int, int]:
    """Return (date, year, month, day); zeros and "" when nothing usable.

    Year 0 never counts as a usable date.
    """
    value = (value or "").strip()
    if not value:
        return "", 0, 0, 0

    if _YEAR_RE.match(value) and int(value):
        return value, int(value), 0, 0

    match = _FULL_DATE_RE.match(value)
    if match:
        year, month, day = (int(g) for g in match.groups())
        try:
            datetime.date(year, month, day)
        except ValueError:
            pass
        else:
            return value, year, month, day

    match = _YEAR_MONTH_RE.match(value)
    if match:
        year, month = (int(g) for g in match.groups())
        if year and 1 <= month <= 12:
            return value, year, month, 0

    leading = _LEADING_RUN_RE.match(value)
    if not leading:
        return "", 0, 0, 0
    trailing = _TRAILING_RUN_RE.search(value)

    # Leading run wins ties.
    run = leading.group(1)
    if len(trailing.group(1)) > len(run):
        run = trailing.group(1)
    if not int(run):
        return "", 0, 0, 0
    return run, int(run), 0, 0


def is_born_digital(fields: RawFields) -> bool:
    """Online-only items with no ISBN/ISSN-shaped serial number."""
    online = first_value(fields.get("is_online_only")).lower() in TRUTHY
    if not online:
        return False
    return not any(_looks_like_serial(s) for s in fields.get("serial_number", []))


def build_link(fields: RawFields, strip_protocol: bool = False) -> str:
    """Anchor markup for the item's DOI or online URL, or ""."""
    url = ""

    doi = first_value(fields.get("doi"))
    if doi:
        doi = _DOI_PREFIX_RE.sub("", doi).strip()
        if doi:
            url = "https://doi.org/" + doi
            logger.debug("Link from DOI: %s", url)
    elif is_born_digital(fields):
        urls = [u.strip() for u in fields.get("url", []) if u.strip()]
        resolver = [u for u in urls if _DOI_URL_RE.match(u)]
        if resolver:
            url = resolver[0]
            logger.debug("Link from resolver URL: %s", url)
        elif urls and first_value(fields.get("is_virgo_url")).lower() in TRUTHY:
            url = urls[0]
            logger.debug("Link from catalog URL: %s", url)

    if not url:
        return ""

    text = _SCHEME_RE.sub("", url) if strip_protocol else url
    return f'<a href="{html.escape(url)}">{html.escape(text)}</a>'


def _looks_like_serial(value: str) -> bool:
    tokens = (value or "").split()
    if not tokens:
        return False
    return bool(_SERIAL_RE.match(tokens[0].replace("-", "")))


def _names(fields: RawFields, key: str) -> tuple[str, ...]:
    return tuple(v.strip() for v in fields.get(key, []) if v.strip())


# ── Builder ──────────────────────────────────────────────────────────


def build_citation(raw, opts: BuildOptions | None = None) -> Citation:
    """Build a Citation from raw catalog fields.

    The input mapping is never modified. When an ``explicit`` citation is
    supplied it is carried alone, since renderers ignore everything else.
    """
    fields = normalize_raw_fields(raw)
    opts = opts or BuildOptions()

    def first(key: str) -> str:
        return first_value(fields.get(key))

    explicit = tuple(fields.get("explicit", ()))
    is_article = first("format") == "article"
    if explicit:
        return Citation(explicit_text=explicit, is_article=is_article)

    pages, page_from, page_to = format_pages(first("pages"), opts.pages_prefix)
    publisher_name = clean_field(first("publisher"))
    publisher_place = clean_field(first("published_location"))
    date, year, month, day = parse_date(first("published_date"))

    return Citation(
        is_article=is_article,
        authors=_names(fields, "author"),
        editors=_names(fields, "editor"),
        advisors=_names(fields, "advisor"),
        compilers=_names(fields, "compiler"),
        translators=_names(fields, "translator"),
        title=build_title(first("title"), first("subtitle")),
        journal=clean_field(first("journal")),
        volume=prefix_number(
            first("volume"), "vol.", _VOLUME_PREFIX_RE, opts.volume_prefix
        ),
        issue=prefix_number(first("issue"), "no.", _ISSUE_PREFIX_RE, opts.issue_prefix),
        pages=pages,
        page_from=page_from,
        page_to=page_to,
        edition=normalize_edition(first("edition")),
        publisher=combine_publisher(
            publisher_name, publisher_place, opts.publisher_place
        ),
        publisher_name=publisher_name,
        publisher_place=publisher_place,
        format=first("format"),
        publication_type=first("publication_type"),
        data_source=first("data_source"),
        date=date,
        year=year,
        month=month,
        day=day,
        link=build_link(fields, opts.strip_protocol),
    )
