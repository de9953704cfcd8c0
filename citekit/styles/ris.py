"""RIS tagged export.

Unlike the prose styles this works straight from the raw catalog fields,
using the field -> tag and format -> type tables from the service config.
Each record opens with a TY line, lists the remaining tags in sorted order
and closes with ER. Lines end in CR-LF.
"""

import logging
import re
import warnings
from pathlib import PurePosixPath
from typing import Optional
from urllib.parse import urlparse

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

from citekit.core.config import ServiceConfig
from citekit.core.models import RawFields
from citekit.styles.base import StyleRenderer
from citekit.text.cleaning import first_value

logger = logging.getLogger(__name__)

TAG_TYPE = "TY"
TAG_END = "ER"
TAG_NOTE = "N1"
TAG_URL = "UR"
TAG_LIBRARY = "DP"
TYPE_GENERIC = "GEN"

AUTHOR_TAGS = frozenset({"AU", "A1"})
REPEATABLE_TAGS = frozenset({"AU", "A1", "A2", "A3", "A4", "ED", "KW", "N1"})
NO_ASTERISK_TAGS = frozenset(
    {"TI", "T1", "T2", "T3", "BT", "JO", "JF", "JA", "ST",
     "PB", "CY", "ET", "SE", "VL", "IS"}
)
TRUNCATED_TAGS = frozenset({"AU", "A1", "A2", "A3", "A4", "ED", "KW"})
MAX_VALUE_LENGTH = 255

LINE_ENDING = "\r\n"
LINE_FORMAT = "{tag}  - {value}" + LINE_ENDING

_TAG_RE = re.compile(r"^[A-Z0-9]{2}$")

# Typographic characters that reference managers mangle.
CHARACTER_MAP = (
    ("►", ">"),
    ("▶", ">"),
    ("•", "*"),
    ("·", "*"),
    ("–", "-"),
    ("—", "--"),
    ("→", "->"),
    ("←", "<-"),
    ("↔", "<->"),
    ("⇒", "=>"),
    ("⇐", "<="),
    ("⇔", "<=>"),
    ("≤", "<="),
    ("≦", "<="),
    ("≥", ">="),
    ("≧", ">="),
    ("©", "(c)"),
    ("®", "(R)"),
    ("’", "'"),
    ("‘", "'"),
    ("‹", "'"),
    ("›", "'"),
    ("«", '"'),
    ("»", '"'),
    ("“", '"'),
    ("”", '"'),
)


# ── Value cleanup ────────────────────────────────────────────────────


def sanitize(text: str) -> str:
    """Replace typographic characters and reduce markup to plain text."""
    for char, replacement in CHARACTER_MAP:
        text = text.replace(char, replacement)

    if "<" in text or "&" in text:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
            soup = BeautifulSoup(text, "html.parser")
        for element in soup(["script", "style"]):
            element.decompose()
        text = soup.get_text()

    return text.strip()


def clean_value(tag: str, value: str) -> str:
    """Sanitize each line of a value; literal "\\n" sequences split lines."""
    lines = []
    for line in value.replace("\\n", "\n").split("\n"):
        line = sanitize(line)
        if not line:
            continue
        if tag in NO_ASTERISK_TAGS:
            line = line.replace("*", "#")
        if tag in TRUNCATED_TAGS:
            line = line[:MAX_VALUE_LENGTH]
        lines.append(line)
    return LINE_ENDING.join(lines)


def merge_values(tag: str, values: list[str]) -> list[str]:
    if tag in REPEATABLE_TAGS:
        return list(values)
    if tag == TAG_URL:
        # A comma would read as part of the URL.
        return [" ; ".join(values)]
    if tag == TAG_LIBRARY:
        return values[:1]
    return [", ".join(values)]


# ── Renderer ─────────────────────────────────────────────────────────


class RisRenderer(StyleRenderer):
    style = "ris"

    def __init__(self, config: ServiceConfig):
        super().__init__(config)
        self.tables = config.ris

    def filename(self, record_url: Optional[str] = None) -> Optional[str]:
        """Last path segment of the record URL plus the extension."""
        name = ""
        if record_url:
            name = PurePosixPath(urlparse(record_url).path).name
        extension = self.format.extension or "ris"
        return f"{name or 'citation'}.{extension}"

    def contents(self, fields: RawFields, record_url: Optional[str] = None) -> str:
        return self.format_record(self.tag_values(fields, record_url))

    def tag_values(
        self, fields: RawFields, record_url: Optional[str] = None
    ) -> dict[str, list[str]]:
        """Collect tag -> values from the raw fields, in config order."""
        values: dict[str, list[str]] = {}

        def add(tag: str, value: str) -> None:
            tag = tag.upper()
            if not _TAG_RE.match(tag):
                logger.warning("Skipping invalid RIS tag: %r", tag)
                return
            values.setdefault(tag, []).append(value)

        item_format = first_value(fields.get("format"))
        add(TAG_TYPE, self.tables.type_codes.get(item_format, self.tables.default_type))

        for field, tags in self.tables.field_tags.items():
            for tag in tags:
                suffix = ""
                if tag in AUTHOR_TAGS:
                    suffix = self.tables.role_suffixes.get(field, "")
                for value in fields.get(field, []):
                    if value.strip():
                        add(tag, value.strip() + suffix)

        if record_url:
            add(TAG_NOTE, record_url)

        return values

    def format_record(self, values: dict[str, list[str]]) -> str:
        record_type = values.get(TAG_TYPE, [TYPE_GENERIC])[0]
        lines = [LINE_FORMAT.format(tag=TAG_TYPE, value=record_type)]

        for tag in sorted(t for t in values if t not in (TAG_TYPE, TAG_END)):
            for value in merge_values(tag, values[tag]):
                lines.append(LINE_FORMAT.format(tag=tag, value=clean_value(tag, value)))

        lines.append(LINE_FORMAT.format(tag=TAG_END, value=""))
        return "".join(lines)
