"""
Inflections - rule-driven word inflection and identifier case conversion.

Derives plural, singular, camelized, underscored, dasherized, titleized and
humanized forms of words and identifiers from an extensible table of suffix
rules, with overrides for irregular words, uncountable words and acronyms.

The module-level functions use a process-wide default ruleset. Build your
own with ``Ruleset.default()`` (or ``Ruleset()`` for an empty one) to keep
custom rules local.
"""

__version__ = "0.1.0"

from .api import (
    add_acronym,
    add_human,
    add_irregular,
    add_plural,
    add_plural_exact,
    add_singular,
    add_singular_exact,
    add_uncountable,
    asciify,
    camelize,
    camelize_down_first,
    capitalize,
    dasherize,
    foreign_key,
    foreign_key_condensed,
    foreign_key_to_attribute,
    humanize,
    load_file,
    load_reader,
    ordinalize,
    parameterize,
    parameterize_join,
    pluralize,
    pluralize_with_size,
    singularize,
    tableize,
    titleize,
    typeify,
    uncountables,
    underscore,
)
from .defaults import get_default_ruleset, reset_default_ruleset, set_default_ruleset
from .errors import InflectionDecodeError, InflectionError
from .rules import Rule, RuleList
from .ruleset import Ruleset, new_default_ruleset, new_ruleset

__all__ = [
    "Rule",
    "RuleList",
    "Ruleset",
    "new_ruleset",
    "new_default_ruleset",
    "get_default_ruleset",
    "set_default_ruleset",
    "reset_default_ruleset",
    "InflectionError",
    "InflectionDecodeError",
    "uncountables",
    "add_plural",
    "add_plural_exact",
    "add_singular",
    "add_singular_exact",
    "add_human",
    "add_irregular",
    "add_acronym",
    "add_uncountable",
    "load_reader",
    "load_file",
    "pluralize",
    "pluralize_with_size",
    "singularize",
    "capitalize",
    "camelize",
    "camelize_down_first",
    "titleize",
    "underscore",
    "dasherize",
    "humanize",
    "foreign_key",
    "foreign_key_condensed",
    "foreign_key_to_attribute",
    "tableize",
    "typeify",
    "parameterize",
    "parameterize_join",
    "asciify",
    "ordinalize",
]
