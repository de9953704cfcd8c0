"""Personal and corporate name handling.

Names arrive in bibliographic order ("Surname, Given, Suffix"). Renderers
need them in reading order ("Given Surname, Suffix") or abbreviated to
initials ("Surname, G."). A name containing a parenthesis is treated as a
corporate or qualified heading and passed through untouched.
"""

import re

from citekit.text.cleaning import capitalize_first

SUFFIXES = frozenset(
    {"Jr", "Jr.", "Sr", "Sr.", "II", "III", "IV", "V",
     "Esq", "Esq.", "Ph.D.", "PhD", "M.D.", "MD"}
)

STOPWORDS = frozenset(
    {"van", "von", "der", "den", "de", "del", "della", "di", "da", "du",
     "la", "le", "of", "the", "and", "y"}
)

_DATES_RE = re.compile(r"^\d{4}(\s*-\s*(\d{4})?)?\.?$")
_ROMAN_RE = re.compile(r"^[IVXLCDM]+$")


def is_corporate(name: str) -> bool:
    return "(" in name or ")" in name


def split_name(name: str) -> tuple[str, str]:
    """Split a reading-order name into (given names, surname).

    Lower-case particles in front of the final token stay with the surname,
    so "Jean de la Croix" yields ("Jean", "de la Croix").
    """
    tokens = name.split()
    if not tokens:
        return "", ""
    cut = len(tokens) - 1
    while cut > 1 and tokens[cut - 1].islower():
        cut -= 1
    return " ".join(tokens[:cut]), " ".join(tokens[cut:])


def reading_order(name: str) -> str:
    """Convert "Surname, Given[, Suffix]" to "Given Surname[, Suffix]"."""
    name = (name or "").strip()
    if not name or is_corporate(name):
        return name

    parts = [p.strip() for p in name.split(",") if p.strip()]

    # Suffixes are only peeled from the end, never from the surname slot.
    end = len(parts)
    while end > 1 and parts[end - 1] in SUFFIXES:
        end -= 1
    core, suffixes = parts[:end], parts[end:]

    if len(core) > 1:
        given, surname = ", ".join(core[1:]), core[0]
    else:
        given, surname = split_name(core[0])

    result = f"{given} {surname}".strip()
    if suffixes:
        result += ", " + ", ".join(suffixes)
    return result


def abbreviate(name: str) -> str:
    """Reduce given names to initials: "Smith, John Paul" -> "Smith, J. P."."""
    name = (name or "").strip()
    if not name or is_corporate(name):
        return name

    parts = [p.strip() for p in name.split(",") if p.strip()]
    if len(parts) > 1 and _DATES_RE.match(parts[-1]):
        parts = parts[:-1]

    reduced = [parts[0]]
    for part in parts[1:]:
        reduced.append(" ".join(_initial(token) for token in part.split()))

    return capitalize_first(", ".join(reduced))


def _initial(token: str) -> str:
    if (
        token in STOPWORDS
        or "." in token
        or _ROMAN_RE.match(token)
        or token in SUFFIXES
    ):
        return token
    return token[0].upper() + "."
