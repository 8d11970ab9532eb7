"""
Module-level functions operating on the process-wide default ruleset.

    >>> from inflections import pluralize, underscore
    >>> pluralize("person")
    'people'
    >>> underscore("BigBen")
    'big_ben'
"""

from pathlib import Path
from typing import IO, Union

from .defaults import get_default_ruleset


def uncountables() -> frozenset:
    return get_default_ruleset().uncountables


def add_plural(suffix: str, replacement: str) -> None:
    get_default_ruleset().add_plural(suffix, replacement)


def add_plural_exact(suffix: str, replacement: str, exact: bool) -> None:
    get_default_ruleset().add_plural_exact(suffix, replacement, exact)


def add_singular(suffix: str, replacement: str) -> None:
    get_default_ruleset().add_singular(suffix, replacement)


def add_singular_exact(suffix: str, replacement: str, exact: bool) -> None:
    get_default_ruleset().add_singular_exact(suffix, replacement, exact)


def add_human(suffix: str, replacement: str) -> None:
    get_default_ruleset().add_human(suffix, replacement)


def add_irregular(singular: str, plural: str) -> None:
    get_default_ruleset().add_irregular(singular, plural)


def add_acronym(word: str, whole_word: bool = True) -> None:
    get_default_ruleset().add_acronym(word, whole_word)


def add_uncountable(word: str) -> None:
    get_default_ruleset().add_uncountable(word)


def load_reader(source: Union[str, bytes, IO], fmt: str = "json") -> int:
    """Register the irregular words of a document on the default ruleset."""
    return get_default_ruleset().load_reader(source, fmt)


def load_file(path: Union[str, Path]) -> int:
    return get_default_ruleset().load_file(path)


def pluralize(word: str) -> str:
    return get_default_ruleset().pluralize(word)


def pluralize_with_size(word: str, size: int) -> str:
    return get_default_ruleset().pluralize_with_size(word, size)


def singularize(word: str) -> str:
    return get_default_ruleset().singularize(word)


def capitalize(word: str) -> str:
    return get_default_ruleset().capitalize(word)


def camelize(word: str) -> str:
    return get_default_ruleset().camelize(word)


def camelize_down_first(word: str) -> str:
    return get_default_ruleset().camelize_down_first(word)


def titleize(word: str) -> str:
    return get_default_ruleset().titleize(word)


def underscore(word: str) -> str:
    return get_default_ruleset().underscore(word)


def dasherize(word: str) -> str:
    return get_default_ruleset().dasherize(word)


def humanize(word: str) -> str:
    return get_default_ruleset().humanize(word)


def foreign_key(word: str) -> str:
    return get_default_ruleset().foreign_key(word)


def foreign_key_condensed(word: str) -> str:
    return get_default_ruleset().foreign_key_condensed(word)


def foreign_key_to_attribute(word: str) -> str:
    return get_default_ruleset().foreign_key_to_attribute(word)


def tableize(word: str) -> str:
    return get_default_ruleset().tableize(word)


def typeify(word: str) -> str:
    return get_default_ruleset().typeify(word)


def parameterize(word: str) -> str:
    return get_default_ruleset().parameterize(word)


def parameterize_join(word: str, sep: str) -> str:
    return get_default_ruleset().parameterize_join(word, sep)


def asciify(word: str) -> str:
    return get_default_ruleset().asciify(word)


def ordinalize(number: str) -> str:
    return get_default_ruleset().ordinalize(number)
