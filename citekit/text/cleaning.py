"""Field cleanup: trailing punctuation, bracket wrapping, leading capitals."""

import re


# ── Patterns ─────────────────────────────────────────────────────────


_TRAILING_RE = re.compile(r"[\s,;:/=]+$")
_INITIAL_RE = re.compile(r"(?:^|[\s.])[A-Z]\.$")
_WRAPPERS = {"(": ")", "[": "]", "{": "}"}


# ── Public API ───────────────────────────────────────────────────────


def clean_end_punctuation(value: str) -> str:
    """Strip trailing separators, whitespace and a dangling period.

    A period is kept when it ends an ellipsis or a single-letter initial
    ("Smith, J."). Applying this twice gives the same result as once.
    """
    result = (value or "").strip()
    while True:
        previous = result
        result = _TRAILING_RE.sub("", result)
        if (
            result.endswith(".")
            and not result.endswith("...")
            and not _INITIAL_RE.search(result)
        ):
            result = result[:-1]
        result = result.rstrip()
        if result == previous:
            return result


def strip_brackets(value: str) -> str:
    """Remove one level of balanced (), [] or {} wrapping around the whole value."""
    text = (value or "").strip()
    if len(text) < 2 or _WRAPPERS.get(text[0]) != text[-1]:
        return text

    # The opening bracket must close at the very end, not earlier.
    opener, closer = text[0], text[-1]
    depth = 0
    for i, ch in enumerate(text):
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
            if depth == 0 and i != len(text) - 1:
                return text
    return text[1:-1].strip()


def clean_field(value: str) -> str:
    """Trailing-punctuation cleanup followed by bracket unwrapping."""
    return clean_end_punctuation(strip_brackets(clean_end_punctuation(value)))


def capitalize_first(text: str) -> str:
    """Upper-case the first character of a phrase that starts lower-case."""
    if text and text[0].islower():
        return text[0].upper() + text[1:]
    return text


def strip_trailing_periods(text: str) -> str:
    """Remove trailing periods unless they form an ellipsis."""
    text = (text or "").rstrip()
    if text.endswith("..."):
        return text
    return text.rstrip(".").rstrip()


def first_value(values: list[str] | None) -> str:
    """First element of a field's value list, stripped, or ""."""
    if not values:
        return ""
    return (values[0] or "").strip()
