# linum/core/policy.py
# Numbering policies: which lines show a number & which advance the counter

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

LinePredicate = Callable[[str], bool]


# * Line has at least one character (whitespace-only lines count as non-empty)
def is_not_empty(line: str) -> bool:
    return line != ""


def always_true(_: str) -> bool:
    return True


# * Strategy object carrying the two classifier predicates
@dataclass(frozen=True)
class NumberingPolicy:
    """Pair of predicates consulted for every line.

    ``should_increment`` is checked first: a match shows the current counter
    and advances it. Otherwise ``should_number`` decides whether the line shows
    the current counter without consuming it, or stays unnumbered.
    """

    name: str
    should_increment: LinePredicate
    should_number: LinePredicate


NUMBER_ALL = NumberingPolicy("all", always_true, always_true)
NUMBER_NON_EMPTY = NumberingPolicy("non-empty", is_not_empty, is_not_empty)


# * Pick the built-in policy for the --skip-empty flag
def policy_for(skip_empty: bool) -> NumberingPolicy:
    return NUMBER_NON_EMPTY if skip_empty else NUMBER_ALL
