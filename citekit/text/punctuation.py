"""Left-to-right citation assembly helpers."""

DEFAULT_TERMINATORS = (" ", ".", ",")


def append_fragment(
    result: str,
    fragment: str,
    separator: str = ",",
    terminators: tuple[str, ...] = DEFAULT_TERMINATORS,
) -> str:
    """Append ``fragment`` to ``result`` with separator and space as needed.

    The separator is skipped when ``result`` already ends with one of
    ``terminators``; a space is added unless ``result`` ends with one.
    Empty fragments leave ``result`` unchanged and an empty ``result`` takes
    the fragment as is.
    """
    if not fragment:
        return result
    if not result:
        return fragment
    if separator and not result.endswith(terminators):
        result += separator
    if not result.endswith(" "):
        result += " "
    return result + fragment


def ensure_period(result: str) -> str:
    # A quoted title already closes with a period inside the quotes.
    if result and not result.endswith((".", '."')):
        return result + "."
    return result


def ensure_space(result: str) -> str:
    if result and not result.endswith(" "):
        return result + " "
    return result
