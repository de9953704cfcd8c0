"""Title casing, quoting and inline markup shared by the style renderers."""

import calendar
import re

SMALL_WORDS = frozenset(
    {"a", "an", "and", "but", "by", "for", "it", "of", "the", "to", "with"}
)

# Straight double quotes plus the Unicode initial/final quote punctuation.
_QUOTES_RE = re.compile("[\"‘’‚‛“”„‟«»‹›]")
_SPACE_RE = re.compile(r"\s+")


# ── Casing ───────────────────────────────────────────────────────────


def title_case(title: str) -> str:
    """Capitalize each word except small connectors; the first word and the
    first word after a colon are always capitalized."""
    words = _SPACE_RE.split((title or "").strip())
    result = []
    capitalize_next = True
    for word in words:
        if not word:
            continue
        if capitalize_next or word.lower() not in SMALL_WORDS:
            result.append(_upper_first(word))
        else:
            result.append(word.lower())
        capitalize_next = word.endswith(":")
    return " ".join(result)


def sentence_case(title: str) -> str:
    """Lower-case capitalized words except the first word of the title and of
    any subtitle. Acronyms and mixed-case words are left alone."""
    words = _SPACE_RE.split((title or "").strip())
    result = []
    capitalize_next = True
    for word in words:
        if not word:
            continue
        if capitalize_next:
            result.append(_upper_first(word))
        elif _is_plain_capitalized(word):
            result.append(word.lower())
        else:
            result.append(word)
        capitalize_next = word.endswith(":")
    return " ".join(result)


def strip_single_period(text: str) -> str:
    """Drop one trailing period, keeping an ellipsis intact."""
    if text.endswith(".") and not text.endswith("..."):
        return text[:-1]
    return text


def quote_title(title: str, closing: str = "") -> str:
    """Wrap a contained-work title in double quotes.

    Embedded double and smart quotes become single quotes; ``closing`` is
    placed inside the closing quote (e.g. "." for MLA and Chicago).
    """
    inner = _QUOTES_RE.sub("'", strip_single_period(title_case(title)))
    return f'"{inner}{closing}"'


# ── Markup ───────────────────────────────────────────────────────────


def italicize(text: str) -> str:
    return f"<em>{text}</em>" if text else ""


def small_caps(text: str) -> str:
    return f'<span style="font-variant: small-caps;">{text}</span>' if text else ""


# ── Dates ────────────────────────────────────────────────────────────


def month_name(month: int) -> str:
    """Full English month name for 1-12, otherwise ""."""
    if 1 <= month <= 12:
        return calendar.month_name[month]
    return ""


def short_month_name(month: int) -> str:
    """Month names longer than three letters cut to three plus a period."""
    name = month_name(month)
    if len(name) > 3:
        return name[:3] + "."
    return name


# ── Helpers ──────────────────────────────────────────────────────────


def _upper_first(word: str) -> str:
    for i, ch in enumerate(word):
        if ch.isalpha():
            return word[:i] + ch.upper() + word[i + 1:]
    return word


def _is_plain_capitalized(word: str) -> bool:
    letters = [ch for ch in word if ch.isalpha()]
    if len(letters) < 2:
        return False
    return letters[0].isupper() and all(ch.islower() for ch in letters[1:])
