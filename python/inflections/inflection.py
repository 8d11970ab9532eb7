"""
Suffix-matching engine shared by pluralize and singularize.
"""

from typing import Callable, Iterable, Optional

from .rules import Rule


def replace_last(word: str, match: str, replacement: str) -> str:
    """
    Replace the last occurrence of ``match`` in ``word``.

    Examples:
        >>> replace_last("status_status", "status", "x")
        'status_x'
    """
    head, found, tail = word.rpartition(match)
    if not found:
        return word
    return head + replacement + tail


def apply_rules(
    word: str,
    rules: Iterable[Rule],
    capitalize: Callable[[str], str],
) -> Optional[str]:
    """
    Transform ``word`` with the first applicable rule.

    Rules are evaluated in order. For each one:

    - exact rules only match the whole lowercased word. A word that differs
      from its lowercase form only in its first letter ("Ox") gets a
      capitalized replacement ("Oxen"). Exact rules never suffix-match.
    - other rules first record their replacement as a fallback candidate
      when the whole word matches case-insensitively, then return at once
      on a case-sensitive suffix match, keeping the prefix as given.

    Args:
        word: Word to transform
        rules: Ordered rules, highest precedence first
        capitalize: Used to re-capitalize exact replacements

    Returns:
        Transformed word, the last whole-word candidate seen, or None when
        no rule applies (callers supply their own fallback)

    Examples:
        >>> apply_rules("box", [Rule("x", "xes")], str.capitalize)
        'boxes'

        >>> apply_rules("Ox", [Rule("ox", "oxen", exact=True)], str.capitalize)
        'Oxen'
    """
    lowered = word.lower()
    candidate = None

    for rule in rules:
        if rule.exact:
            if lowered == rule.suffix:
                if lowered[:1] != word[:1] and lowered[1:] == word[1:]:
                    return capitalize(rule.replacement)
                return rule.replacement
            continue

        if lowered == rule.suffix.lower():
            candidate = rule.replacement

        if word.endswith(rule.suffix):
            return word[: len(word) - len(rule.suffix)] + rule.replacement

    # An empty candidate counts as no match
    return candidate or None
