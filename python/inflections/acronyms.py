"""
Acronym folding and reconciliation.

Folding rewrites registered acronyms ("HTML") to their title-cased form
("Html") before lowercase segmentation, so "HTMLParser" splits into two
words instead of five. Reconciliation runs after title-mode segmentation
and turns acronym words back into their registered casing.
"""

from typing import Iterable, Optional

from .rules import Rule


def fold_acronyms(word: str, acronyms: Iterable[Rule]) -> str:
    """
    Replace every literal occurrence of each acronym with its replacement.

    Examples:
        >>> fold_acronyms("HTMLParser", [Rule("HTML", "Html")])
        'HtmlParser'
    """
    for rule in acronyms:
        if rule.suffix in word:
            word = word.replace(rule.suffix, rule.replacement)
    return word


def _longest_acronym_run(letters: list[str], start: int, known: set[str]) -> int:
    """Length of the longest run from ``start`` spelling an acronym, or 0."""
    for end in range(len(letters), start + 1, -1):
        if "".join(letters[start:end]) in known:
            return end - start
    return 0


def _merge_letter_run(letters: list[str], known: set[str]) -> list[str]:
    merged = []
    i = 0
    while i < len(letters):
        size = _longest_acronym_run(letters, i, known)
        if size:
            merged.append("".join(letters[i : i + size]))
            i += size
        else:
            merged.append(letters[i])
            i += 1
    return merged


def reconcile_acronyms(
    words: list[str],
    acronyms: Iterable[Rule],
    whole_words: Optional[Iterable[str]] = None,
) -> list[str]:
    """
    Restore acronyms in a title-mode word list.

    - Runs of single-letter words are merged where they spell a registered
      acronym exactly: ["U", "S", "A"] -> ["USA"]. The longest match from
      each position wins; letters that spell nothing stay separate.
    - Longer words matching an acronym case-insensitively take the
      acronym's registered casing: "Html" -> "HTML", "Wifi" -> "WiFi".
      Only acronyms listed in ``whole_words`` do this (all of them when it
      is None), so "CAT" can merge "C A T" without turning "Cat" into "CAT".

    Args:
        words: Output of split_at_case_change_titled
        acronyms: Acronym rules in registration order
        whole_words: Acronyms that may re-case a whole word

    Returns:
        New word list; the input is not modified

    Examples:
        >>> reconcile_acronyms(["H", "T", "M", "L", "Parser"], [Rule("HTML", "Html")])
        ['HTML', 'Parser']
    """
    if whole_words is not None:
        whole_words = set(whole_words)

    known = set()
    casing: dict[str, str] = {}
    for rule in acronyms:
        known.add(rule.suffix)
        if whole_words is None or rule.suffix in whole_words:
            casing.setdefault(rule.suffix.lower(), rule.suffix)

    result: list[str] = []
    letters: list[str] = []

    for word in words:
        if len(word) == 1:
            letters.append(word)
            continue
        if letters:
            result.extend(_merge_letter_run(letters, known))
            letters = []
        result.append(casing.get(word.lower(), word))

    if letters:
        result.extend(_merge_letter_run(letters, known))

    return result
