"""
Ruleset - the rule store behind every transformation.

A Ruleset owns four ordered rule lists (plurals, singulars, humans,
acronyms) and a set of uncountable words. All transformations are pure
functions of the ruleset and their input.

THREAD SAFETY:
All rules live in one immutable snapshot. Mutators build a replacement
snapshot under a lock and swap it in with a single assignment, so add_*
methods are safe to call concurrently with each other and with
transformations. add_irregular registers its three rules in one swap.
Each transformation step (pluralize, titleize, underscore, ...) reads the
snapshot once and sees the state from before or after a concurrent
mutation, never a partial one. Composed transformations such as tableize
run several steps and may straddle a mutation.
"""

import logging
import re
import threading
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import IO, Union

from . import text
from .acronyms import fold_acronyms, reconcile_acronyms
from .constants import (
    DEFAULT_ACRONYMS,
    DEFAULT_IRREGULARS,
    DEFAULT_PLURALS,
    DEFAULT_SINGULARS,
    DEFAULT_UNCOUNTABLES,
    TABLE_PREFIX_PATTERN,
)
from .inflection import apply_rules
from .loader import decode_irregulars, format_for_path
from .parsers import lower_char, split_at_case_change, split_at_case_change_titled, upper_char
from .rules import Rule, RuleList

logger = logging.getLogger("inflections.ruleset")

_TABLE_PREFIX = re.compile(TABLE_PREFIX_PATTERN)


@dataclass(frozen=True)
class _Snapshot:
    plurals: RuleList = field(default_factory=RuleList)
    singulars: RuleList = field(default_factory=RuleList)
    humans: RuleList = field(default_factory=RuleList)
    acronyms: RuleList = field(default_factory=RuleList)
    # Acronyms that also re-case whole words in titleize ("Html" -> "HTML")
    whole_word_acronyms: frozenset = frozenset()
    uncountables: frozenset = frozenset()


def _is_uncountable(word: str, uncountables: frozenset) -> bool:
    return word.split(" ")[-1].lower() in uncountables


def _separated_words(word: str, sep: str, acronyms: RuleList) -> str:
    word = fold_acronyms(word, acronyms)
    return sep.join(split_at_case_change(word))


def _is_mixed_case(word: str) -> bool:
    return not word.isupper() and not word.islower()


class Ruleset:
    """
    Pluralization, singularization and case conversion rules.

    Start from ``Ruleset.default()`` for common English rules, or from
    ``Ruleset()`` to build a rule set from scratch, then extend it with the
    add_* methods. Rules added later take precedence over earlier ones.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._rules = _Snapshot()

    @classmethod
    def default(cls) -> "Ruleset":
        """Create a ruleset loaded with the built-in English rules and acronyms."""
        rs = cls()
        # Trailing True marks an exact rule
        for suffix, replacement, *exact in DEFAULT_PLURALS:
            rs.add_plural_exact(suffix, replacement, bool(exact))
        for suffix, replacement, *exact in DEFAULT_SINGULARS:
            rs.add_singular_exact(suffix, replacement, bool(exact))
        for singular, plural in DEFAULT_IRREGULARS:
            rs.add_irregular(singular, plural)
        for word in DEFAULT_UNCOUNTABLES:
            rs.add_uncountable(word)
        # All-caps defaults such as CAT, POST and MAN are also English words;
        # only mixed-case ones (WiFi, Mbps) re-case whole words
        for acronym in DEFAULT_ACRONYMS:
            rs.add_acronym(acronym, whole_word=_is_mixed_case(acronym))
        return rs

    def __repr__(self) -> str:
        rules = self._rules
        return (
            f"<Ruleset plurals={len(rules.plurals)} singulars={len(rules.singulars)} "
            f"humans={len(rules.humans)} acronyms={len(rules.acronyms)} "
            f"uncountables={len(rules.uncountables)}>"
        )

    # ------------------------------------------------------------------
    # Rule store
    # ------------------------------------------------------------------

    @property
    def plurals(self) -> RuleList:
        return self._rules.plurals

    @property
    def singulars(self) -> RuleList:
        return self._rules.singulars

    @property
    def humans(self) -> RuleList:
        return self._rules.humans

    @property
    def acronyms(self) -> RuleList:
        return self._rules.acronyms

    @property
    def uncountables(self) -> frozenset:
        """Snapshot of the uncountable words (lowercase)."""
        return self._rules.uncountables

    def add_plural(self, suffix: str, replacement: str) -> None:
        """Add a pluralization rule matching on ``suffix``."""
        self.add_plural_exact(suffix, replacement, False)

    def add_plural_exact(self, suffix: str, replacement: str, exact: bool) -> None:
        """Add a pluralization rule; ``exact`` restricts it to whole words."""
        rule = Rule(suffix, replacement, exact)
        with self._lock:
            rules = self._rules
            self._rules = replace(
                rules,
                plurals=rules.plurals.prepend(rule),
                uncountables=rules.uncountables - {suffix},
            )

    def add_singular(self, suffix: str, replacement: str) -> None:
        """Add a singularization rule matching on ``suffix``."""
        self.add_singular_exact(suffix, replacement, False)

    def add_singular_exact(self, suffix: str, replacement: str, exact: bool) -> None:
        """Add a singularization rule; ``exact`` restricts it to whole words."""
        rule = Rule(suffix, replacement, exact)
        with self._lock:
            rules = self._rules
            self._rules = replace(
                rules,
                singulars=rules.singulars.prepend(rule),
                uncountables=rules.uncountables - {suffix},
            )

    def add_human(self, suffix: str, replacement: str) -> None:
        """Add a humanize replacement ("_cnt" -> "_count")."""
        rule = Rule(suffix, replacement)
        with self._lock:
            self._rules = replace(self._rules, humans=self._rules.humans.prepend(rule))

    def add_irregular(self, singular: str, plural: str) -> None:
        """
        Register an irregular singular/plural pair.

        Afterwards pluralize(singular) == plural, pluralize(plural) == plural
        and singularize(plural) == singular.
        """
        to_plural = Rule(singular, plural)
        keep_plural = Rule(plural, plural)
        to_singular = Rule(plural, singular)
        with self._lock:
            rules = self._rules
            self._rules = replace(
                rules,
                plurals=rules.plurals.prepend(to_plural).prepend(keep_plural),
                singulars=rules.singulars.prepend(to_singular),
                uncountables=rules.uncountables - {singular, plural},
            )

    def add_acronym(self, word: str, whole_word: bool = True) -> None:
        """
        Register an acronym so case converters keep it together.

        Without this "HTMLParser" underscores to "h_t_m_l_parser".
        Acronyms fold in registration order, so "HTTP" registered before
        "HTTPS" keeps "HTTPServer" as "http_server".

        Args:
            word: Acronym in its canonical casing ("HTML", "WiFi")
            whole_word: Also let titleize re-case a whole word that matches
                case-insensitively ("html parser" -> "HTML Parser"). With
                False only runs of single capitals are merged ("H T M L").
        """
        if not word:
            raise ValueError("acronym must be a non-empty string")
        rule = Rule(word, " ".join(split_at_case_change_titled(word.lower())))
        with self._lock:
            rules = self._rules
            whole_words = rules.whole_word_acronyms
            if whole_word:
                whole_words = whole_words | {word}
            self._rules = replace(
                rules,
                acronyms=rules.acronyms.append(rule),
                whole_word_acronyms=whole_words,
            )

    def add_uncountable(self, word: str) -> None:
        """Register a word whose singular and plural forms are identical."""
        with self._lock:
            rules = self._rules
            self._rules = replace(rules, uncountables=rules.uncountables | {word.lower()})

    def is_uncountable(self, word: str) -> bool:
        """Check the last word of ``word`` against the uncountables ("bag of rice")."""
        return _is_uncountable(word, self._rules.uncountables)

    def is_acronym(self, word: str) -> bool:
        """Exact, case-sensitive acronym lookup."""
        return any(rule.suffix == word for rule in self._rules.acronyms)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_reader(self, source: Union[str, bytes, IO], fmt: str = "json") -> int:
        """
        Register every singular -> plural pair of an irregular-word document.

        The document is decoded completely before any rule is added, so a
        decode failure leaves the ruleset unchanged.

        Returns:
            Number of irregular pairs registered

        Raises:
            InflectionDecodeError: Malformed document
        """
        pairs = decode_irregulars(source, fmt)
        for singular, plural in pairs.items():
            self.add_irregular(singular, plural)
        logger.debug(f"Registered {len(pairs)} irregular word(s)")
        return len(pairs)

    def load_file(self, path: Union[str, Path]) -> int:
        """Load an irregular-word document from disk (.yaml/.yml or JSON)."""
        path = Path(path)
        with path.open("rb") as f:
            return self.load_reader(f, format_for_path(path))

    # ------------------------------------------------------------------
    # Pluralization
    # ------------------------------------------------------------------

    def pluralize(self, word: str) -> str:
        """
        Plural form of a singular word.

        Examples:
            >>> rs = Ruleset.default()
            >>> rs.pluralize("category")
            'categories'
            >>> rs.pluralize("Status")
            'Statuses'
        """
        rules = self._rules
        if not word or _is_uncountable(word, rules.uncountables):
            return word
        result = apply_rules(word, rules.plurals, self.capitalize)
        return result if result is not None else word + "s"

    def singularize(self, word: str) -> str:
        """
        Singular form of a plural word.

        Examples:
            >>> rs = Ruleset.default()
            >>> rs.singularize("people")
            'person'
        """
        rules = self._rules
        if len(word) <= 1 or _is_uncountable(word, rules.uncountables):
            return word
        result = apply_rules(word, rules.singulars, self.capitalize)
        return result if result is not None else word

    def pluralize_with_size(self, word: str, size: int) -> str:
        """Singular for a size of exactly one, plural otherwise."""
        if size == 1:
            return self.singularize(word)
        return self.pluralize(word)

    # ------------------------------------------------------------------
    # Case conversion
    # ------------------------------------------------------------------

    def capitalize(self, word: str) -> str:
        """Uppercase the first character; "id" becomes "ID"."""
        if word.lower() == "id":
            return "ID"
        return upper_char(word[:1]) + word[1:]

    def camelize(self, word: str) -> str:
        """PascalCase from words: "dino_party" -> "DinoParty"."""
        if word.lower() == "id":
            return "ID"
        return "".join(split_at_case_change_titled(word))

    def camelize_down_first(self, word: str) -> str:
        """camelCase from words: "dino_party" -> "dinoParty"."""
        word = self.camelize(word)
        return lower_char(word[:1]) + word[1:]

    def titleize(self, word: str) -> str:
        """
        Capitalize every word: "hello there" -> "Hello There".

        Registered acronyms keep their casing: "html parser" -> "HTML Parser"
        once "HTML" is an acronym. Runs of single capitals merge for every
        acronym ("USA" stays "USA"), but whole words are only re-cased for
        acronyms registered with whole_word=True. The all-caps defaults are
        not, so "the post man" stays "The Post Man".
        """
        rules = self._rules
        words = split_at_case_change_titled(word)
        return " ".join(
            reconcile_acronyms(words, rules.acronyms, rules.whole_word_acronyms)
        )

    def underscore(self, word: str) -> str:
        """Lowercase words joined by underscores: "BigBen" -> "big_ben"."""
        return _separated_words(word, "_", self._rules.acronyms)

    def dasherize(self, word: str) -> str:
        """Lowercase words joined by dashes: "SomeText" -> "some-text"."""
        return _separated_words(word, "-", self._rules.acronyms)

    def humanize(self, word: str) -> str:
        """
        Sentence with only its first letter capitalized.

        Strips a trailing foreign key "_id" and applies add_human()
        replacements first: "author_id" -> "Author".
        """
        rules = self._rules
        if word.endswith("_id"):
            word = word[:-3]
        for rule in rules.humans:
            word = word.replace(rule.suffix, rule.replacement)
        sentence = _separated_words(word, " ", rules.acronyms)
        return upper_char(sentence[:1]) + sentence[1:]

    # ------------------------------------------------------------------
    # ORM naming
    # ------------------------------------------------------------------

    def foreign_key(self, word: str) -> str:
        """Foreign key column: "Person" -> "person_id"."""
        return self.underscore(self.singularize(word)) + "_id"

    def foreign_key_condensed(self, word: str) -> str:
        """Foreign key without separator: "Person" -> "personid"."""
        return self.underscore(word) + "id"

    def foreign_key_to_attribute(self, word: str) -> str:
        """Attribute name for a foreign key: "person_id" -> "PersonID"."""
        word = self.camelize(word)
        if word.endswith("Id"):
            return word[:-2] + "ID"
        return word

    def tableize(self, word: str) -> str:
        """Rails style table names: "SuperPerson" -> "super_people"."""
        return self.pluralize(self.underscore(self.typeify(word)))

    def typeify(self, word: str) -> str:
        """Type name for a table: "schema.blog_posts" -> "BlogPost"."""
        word = _TABLE_PREFIX.sub("", word, count=1)
        return self.camelize(self.singularize(word))

    # ------------------------------------------------------------------
    # Text helpers
    # ------------------------------------------------------------------

    def ordinalize(self, number: str) -> str:
        return text.ordinalize(number)

    def asciify(self, word: str) -> str:
        return text.asciify(word)

    def parameterize(self, word: str) -> str:
        return text.parameterize(word)

    def parameterize_join(self, word: str, sep: str) -> str:
        return text.parameterize_join(word, sep)


def new_ruleset() -> Ruleset:
    """Create an empty ruleset."""
    return Ruleset()


def new_default_ruleset() -> Ruleset:
    """Create a ruleset loaded with the built-in English rules."""
    return Ruleset.default()
