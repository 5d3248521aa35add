"""TextStatistics: readability and lexical statistics for English text."""

from typing import Optional

from textstatistics.text.analyzer import ErrorReporter, TextStatistics, log_error
from textstatistics.text.normalize import normalize
from textstatistics.text.scoring import (
    OUT_OF_RANGE_EXPLANATION,
    ReadabilityReport,
    ReadabilityScorer,
    translate_reading_ease,
)
from textstatistics.text.syllables import count_syllables

__version__ = "0.1.0"

_statistics = TextStatistics()
_scorer = ReadabilityScorer(_statistics)

word_count = _statistics.word_count
sentence_count = _statistics.sentence_count
letter_count = _statistics.letter_count
syllable_count = _statistics.syllable_count
total_syllables = _statistics.total_syllables
average_syllables_per_word = _statistics.average_syllables_per_word
average_words_per_sentence = _statistics.average_words_per_sentence
words_with_three_syllables = _statistics.words_with_three_syllables
percentage_words_with_three_syllables = _statistics.percentage_words_with_three_syllables

flesch_kincaid_reading_ease = _scorer.flesch_kincaid_reading_ease
flesch_kincaid_grade_level = _scorer.flesch_kincaid_grade_level
gunning_fog_score = _scorer.gunning_fog_score
coleman_liau_index = _scorer.coleman_liau_index
smog_index = _scorer.smog_index
automated_readability_index = _scorer.automated_readability_index
average_grade_level = _scorer.average_grade_level


def analyze(text: Optional[str], error_reporter: Optional[ErrorReporter] = None) -> ReadabilityReport:
    """Canonical entry point for readability analysis.

    Normalizes the text once, then computes every count and readability
    score over it. Empty text gives zero counts and NaN ratios.

    Args:
        text: Raw text, possibly containing HTML tags
        error_reporter: Optional callable receiving (message, exception)
            when the long-word scan has to recover from an error

    Returns:
        ReadabilityReport with counts, scores and the reading ease band
    """
    if error_reporter is None:
        return _scorer.report(text)
    return ReadabilityScorer(TextStatistics(error_reporter)).report(text)


__all__ = [
    "OUT_OF_RANGE_EXPLANATION",
    "ErrorReporter",
    "ReadabilityReport",
    "ReadabilityScorer",
    "TextStatistics",
    "analyze",
    "automated_readability_index",
    "average_grade_level",
    "average_syllables_per_word",
    "average_words_per_sentence",
    "coleman_liau_index",
    "count_syllables",
    "flesch_kincaid_grade_level",
    "flesch_kincaid_reading_ease",
    "gunning_fog_score",
    "letter_count",
    "log_error",
    "normalize",
    "percentage_words_with_three_syllables",
    "sentence_count",
    "smog_index",
    "syllable_count",
    "total_syllables",
    "translate_reading_ease",
    "word_count",
    "words_with_three_syllables",
]
