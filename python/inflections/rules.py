"""
Rule value type and the ordered rule list.

Precedence is positional: a RuleList is searched front to back. Plural,
singular and human rules are prepended, so the most recently registered
rule wins; acronyms are appended and apply in registration order.
"""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Rule:
    """A suffix rewrite: ``suffix`` -> ``replacement``."""

    suffix: str
    replacement: str
    exact: bool = False  # Whole-word match only

    def __post_init__(self):
        if not self.suffix:
            raise ValueError("rule suffix must be a non-empty string")


class RuleList:
    """
    Immutable ordered sequence of rules.

    Mutators return a new RuleList instead of changing this one, so a
    reader holding a reference always iterates a consistent snapshot.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: tuple[Rule, ...] = ()):
        self._rules = tuple(rules)

    def prepend(self, rule: Rule) -> "RuleList":
        return RuleList((rule,) + self._rules)

    def append(self, rule: Rule) -> "RuleList":
        return RuleList(self._rules + (rule,))

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __getitem__(self, index: int) -> Rule:
        return self._rules[index]

    def __repr__(self) -> str:
        return f"RuleList({len(self._rules)} rules)"
