"""Rule-based English syllable estimation.

There is no dictionary behind this: a word is split into vowel groups and the
rule tables in :mod:`textstatistics.text.patterns` nudge the count up or down.
"""

from typing import Tuple

from textstatistics.text.patterns import (
    ADDITIVE_PATTERNS,
    AFFIX_PATTERNS,
    CONSONANT_RUN,
    EXCEPTION_WORDS,
    NON_LETTERS,
    SUBTRACTIVE_PATTERNS,
)


def strip_affixes(word: str) -> Tuple[str, int]:
    """Remove single-syllable prefixes and suffixes from a cleaned word.

    Patterns are applied in table order, each against the word left over by
    the previous one. Every match removes all occurrences of the matched text
    and counts as one syllable.

    Args:
        word: Lower-cased, letters-only word

    Returns:
        Tuple of (remaining word, number of affixes removed)
    """
    affix_count = 0
    for pattern in AFFIX_PATTERNS:
        for match in list(pattern.finditer(word)):
            word = word.replace(match.group(), "")
            affix_count += 1
    return word, affix_count


def count_vowel_groups(word: str) -> int:
    """Count the maximal runs of a, e, i, o, u, y in a word."""
    return sum(1 for part in CONSONANT_RUN.split(word) if part)


def count_syllables(word: str) -> int:
    """Estimate the number of syllables in a single word.

    Args:
        word: The word to count syllables for; punctuation is ignored

    Returns:
        Estimated number of syllables (minimum 1)
    """
    word = NON_LETTERS.sub("", word).lower()

    if word in EXCEPTION_WORDS:
        return EXCEPTION_WORDS[word]

    word, affix_count = strip_affixes(word)
    word = NON_LETTERS.sub("", word)

    syllable_count = count_vowel_groups(word) + affix_count

    # Each matching rule moves the count by exactly one, whatever its weight
    syllable_count -= sum(1 for rule in SUBTRACTIVE_PATTERNS if rule.pattern.search(word))
    syllable_count += sum(1 for rule in ADDITIVE_PATTERNS if rule.pattern.search(word))

    return max(1, syllable_count)
