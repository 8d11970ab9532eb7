"""
Identifier segmentation.

Splits compound identifiers into words at case changes and separator
characters. Both modes share one scanner and differ only in how characters
are cased as they are appended to the current word. Casing is per character
and never changes length, so "ß" stays "ß" when title-cased.
"""

from .constants import SPACER_CHARS


def upper_char(char: str) -> str:
    """
    Uppercase a character without changing its length.

    Characters whose uppercase form is longer ("ß" -> "SS") are kept as is.
    """
    upper = char.upper()
    return upper if len(upper) == len(char) else char


def lower_char(char: str) -> str:
    """Lowercase a character without changing its length ("İ" is kept)."""
    lower = char.lower()
    return lower if len(lower) == len(char) else char


def is_spacer(char: str) -> bool:
    """True for word separators: underscore, space, colon and dash."""
    return char in SPACER_CHARS


def _split(text: str, titled: bool) -> list[str]:
    words = []
    current: list[str] = []

    for char in text:
        spacer = is_spacer(char)

        # Uppercase letters and separators close the word in progress
        if current and (char.isupper() or spacer):
            words.append("".join(current))
            current = []

        if spacer:
            continue

        if titled and not current:
            current.append(upper_char(char))
        else:
            current.append(lower_char(char))

    # Always flush, so even "" yields one (empty) word
    words.append("".join(current))
    return words


def split_at_case_change(text: str) -> list[str]:
    """
    Split an identifier into lowercase words.

    Examples:
        >>> split_at_case_change("BigBen")
        ['big', 'ben']

        >>> split_at_case_change("dino_party")
        ['dino', 'party']

        >>> split_at_case_change("")
        ['']
    """
    return _split(text, titled=False)


def split_at_case_change_titled(text: str) -> list[str]:
    """
    Split an identifier into capitalized words.

    Examples:
        >>> split_at_case_change_titled("dino_party")
        ['Dino', 'Party']

        >>> split_at_case_change_titled("USA")
        ['U', 'S', 'A']
    """
    return _split(text, titled=True)
