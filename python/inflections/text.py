"""
Stateless text helpers: ordinal suffixes, ASCII folding and URL-safe params.
"""

import re

from .constants import ASCII_LOOKALIKES

_ASCII_TABLE = str.maketrans(
    {char: ascii_form for ascii_form, chars in ASCII_LOOKALIKES.items() for char in chars}
)

_INTEGER = re.compile(r"[+-]?[0-9]+")
_NOT_URL_SAFE = re.compile(r"[^\w\-_ ]", re.ASCII)


def ordinalize(number: str) -> str:
    """
    Append the English ordinal suffix to an integer string.

    Non-integer input is returned unchanged.

    Examples:
        >>> ordinalize("1")
        '1st'

        >>> ordinalize("113")
        '113th'

        >>> ordinalize("-22")
        '-22nd'

        >>> ordinalize("first")
        'first'
    """
    if not _INTEGER.fullmatch(number):
        return number

    value = int(number)
    magnitude = abs(value)

    if magnitude % 100 in (11, 12, 13):
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(magnitude % 10, "th")

    return f"{value}{suffix}"


def asciify(word: str) -> str:
    """Fold accented Latin letters to ASCII: "café" -> "cafe"."""
    return word.translate(_ASCII_TABLE)


def parameterize_join(word: str, sep: str) -> str:
    """
    Build a URL-safe parameter, joining words with ``sep``.

    Examples:
        >>> parameterize_join("Donald E. Knuth", "_")
        'donald_e_knuth'
    """
    word = asciify(word.lower())
    word = _NOT_URL_SAFE.sub("", word)
    word = word.replace(" ", sep)
    if sep:
        word = re.sub(f"(?:{re.escape(sep)})+", sep, word)
    return word.strip(sep + " ")


def parameterize(word: str) -> str:
    """Dash-separated URL-safe parameter: "Hello World!" -> "hello-world"."""
    return parameterize_join(word, "-")
