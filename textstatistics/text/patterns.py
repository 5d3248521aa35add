"""Heuristic rule tables used by the syllable estimator.

All tables are ordered tuples of patterns compiled once at import time and
shared read-only between callers. The estimator walks them in the order
written here, so the order is part of the behaviour.
"""

import re
from typing import Dict, NamedTuple, Pattern, Tuple


class WeightedPattern(NamedTuple):
    """A compiled pattern with the weight recorded for it in the rule table.

    The weight documents how strongly the rule was believed to apply. It is
    not used as a multiplier: every matching rule adjusts the count by one.
    """

    pattern: Pattern[str]
    weight: int


def _weighted(rules: Tuple[Tuple[str, int], ...]) -> Tuple[WeightedPattern, ...]:
    return tuple(WeightedPattern(re.compile(source), weight) for source, weight in rules)


# Common words that don't follow the rules below
EXCEPTION_WORDS: Dict[str, int] = {
    "simile": 3,
    "forever": 3,
    "shoreline": 2,
}

# Vowel groups counted as two syllables that should be one
SUBTRACTIVE_PATTERNS: Tuple[WeightedPattern, ...] = _weighted(
    (
        ("cial", 1),
        ("tia", 1),
        ("cius", 1),
        ("cious", 1),
        ("giu", 1),
        ("ion", 1),
        ("iou", 1),
        ("sia$", 1),
        ("[^aeiuoyt]{2,}ed$", 1),
        (".ely$", 1),
        ("[cg]h?e[rsd]?$", 1),
        ("rved?$", 1),
        ("[aeiouy][dt]es?$", 1),
        ("[aeiouy][^aeiouydt]e[rsd]?$", 1),
        ("[aeiouy]rse$", 1),
    )
)

# Vowel groups counted as one syllable that should be two
ADDITIVE_PATTERNS: Tuple[WeightedPattern, ...] = _weighted(
    (
        ("ia", 2),
        ("riet", 2),
        ("dien", 2),
        ("iu", 2),
        ("io", 2),
        ("ii", 2),
        ("[aeiouym]bl$", 2),
        ("[aeiou]{3}", 2),
        ("^mc", 2),
        ("ism$", 2),
        (r"([^aeiouy])\1l$", 2),
        ("[^l]lien", 2),
        ("^coa[dglx].", 2),
        ("[^gq]ua[^auieo]", 2),
        ("dnt$", 2),
        ("uity$", 2),
        ("ie(r|st)$", 2),
    )
)

# Single syllable prefixes and suffixes
AFFIX_PATTERNS: Tuple[Pattern[str], ...] = tuple(
    re.compile(source)
    for source in (
        "^un",
        "^fore",
        "ly$",
        "less$",
        "ful$",
        "ers?$",
        "ings?$",
    )
)

NON_LETTERS: Pattern[str] = re.compile(r"[^a-zA-Z]")
CONSONANT_RUN: Pattern[str] = re.compile(r"[^aeiouy]+")
