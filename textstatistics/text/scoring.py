"""Readability formulas composed over text statistics.

Every score is rounded to one decimal. Scores that divide by the word count
come out as NaN for empty text rather than raising.
"""

import math
from dataclasses import asdict, dataclass
from typing import Dict, Optional, Tuple, Union

from textstatistics.text.analyzer import TextStatistics, safe_divide
from textstatistics.text.normalize import normalize

OUT_OF_RANGE_EXPLANATION = "Reading ease score is out of range"

# (upper bound, inclusive?, explanation), checked in order over [0, 100]
READING_EASE_BANDS: Tuple[Tuple[float, bool, str], ...] = (
    (30.0, True, "Best understood by university graduates"),
    (50.0, True, "Best understood by university undergraduates"),
    (60.0, False, "Best understood by A'Level students"),
    (70.0, True, "Easily understood by an average 13 to 15 year old students"),
    (90.0, False, "Easily understood by an average 12 year old student"),
    (100.0, True, "Easily understood by an average 11 year old student"),
)


def translate_reading_ease(score: float) -> str:
    """Describe a Flesch reading ease score in plain words.

    Args:
        score: Flesch-Kincaid reading ease score

    Returns:
        Explanation of the band the score falls in, or
        OUT_OF_RANGE_EXPLANATION when the score is outside [0, 100] or NaN
    """
    if not 0.0 <= score <= 100.0:
        return OUT_OF_RANGE_EXPLANATION

    for upper, inclusive, explanation in READING_EASE_BANDS:
        if score < upper or (inclusive and score == upper):
            return explanation
    return OUT_OF_RANGE_EXPLANATION


@dataclass
class ReadabilityReport:
    """Counts and readability scores for one text."""

    word_count: int
    sentence_count: int
    letter_count: int
    syllable_count: int
    long_word_count: int
    average_words_per_sentence: float
    average_syllables_per_word: float
    percentage_long_words: float
    flesch_kincaid_reading_ease: float
    flesch_kincaid_grade_level: float
    gunning_fog_score: float
    coleman_liau_index: float
    smog_index: float
    automated_readability_index: float
    average_grade_level: float
    reading_ease_band: str

    def to_dict(self) -> Dict[str, Union[int, float, str]]:
        """Convert the report to a dictionary."""
        return asdict(self)

    def to_json_dict(self) -> Dict[str, Union[int, float, str, None]]:
        """Convert the report to a JSON-safe dictionary, NaN and infinities as None."""
        return {
            key: None if isinstance(value, float) and not math.isfinite(value) else value
            for key, value in self.to_dict().items()
        }

    def summary(self) -> str:
        """Generate human-readable summary of the report.

        Returns:
            Multi-line string listing counts and scores
        """
        lines = ["Readability Summary", "=" * 50]
        lines.append(f"Words: {self.word_count}")
        lines.append(f"Sentences: {self.sentence_count}")
        lines.append(f"Letters: {self.letter_count}")
        lines.append(f"Syllables: {self.syllable_count}")
        lines.append(f"Words with 3+ syllables: {self.long_word_count}")
        lines.append(f"Flesch-Kincaid Reading Ease: {self.flesch_kincaid_reading_ease}")
        lines.append(f"  {self.reading_ease_band}")
        lines.append(f"Flesch-Kincaid Grade Level: {self.flesch_kincaid_grade_level}")
        lines.append(f"Gunning Fog Score: {self.gunning_fog_score}")
        lines.append(f"Coleman-Liau Index: {self.coleman_liau_index}")
        lines.append(f"SMOG Index: {self.smog_index}")
        lines.append(f"Automated Readability Index: {self.automated_readability_index}")
        lines.append(f"Average Grade Level: {self.average_grade_level}")

        return "\n".join(lines)


class ReadabilityScorer:
    """Computes readability indices from a TextStatistics instance.

    Each method re-normalizes its input, which is a no-op for text that is
    already normalized.
    """

    def __init__(self, statistics: Optional[TextStatistics] = None):
        """Initialize with a TextStatistics instance.

        Args:
            statistics: Counter providing word, sentence and syllable metrics
        """
        self.statistics = statistics or TextStatistics()

    def flesch_kincaid_reading_ease(self, text: Optional[str]) -> float:
        """Flesch reading ease: 206.835 - 1.015 * ASL - 84.6 * ASW."""
        text = normalize(text)
        return round(
            206.835
            - 1.015 * self.statistics.average_words_per_sentence(text)
            - 84.6 * self.statistics.average_syllables_per_word(text),
            1,
        )

    def flesch_kincaid_grade_level(self, text: Optional[str]) -> float:
        """Flesch-Kincaid grade: 0.39 * ASL + 11.8 * ASW - 15.59."""
        text = normalize(text)
        return round(
            0.39 * self.statistics.average_words_per_sentence(text)
            + 11.8 * self.statistics.average_syllables_per_word(text)
            - 15.59,
            1,
        )

    def gunning_fog_score(self, text: Optional[str]) -> float:
        """Gunning fog: 0.4 * (ASL + percentage of long common words).

        Capitalised words are left out of the long-word percentage.
        """
        text = normalize(text)
        return round(
            (
                self.statistics.average_words_per_sentence(text)
                + self.statistics.percentage_words_with_three_syllables(text, False)
            )
            * 0.4,
            1,
        )

    def coleman_liau_index(self, text: Optional[str]) -> float:
        text = normalize(text)
        words = self.statistics.word_count(text)
        return round(
            safe_divide(5.89 * self.statistics.letter_count(text), words)
            - 0.3 * safe_divide(self.statistics.sentence_count(text), words)
            - 15.8,
            1,
        )

    def smog_index(self, text: Optional[str]) -> float:
        """SMOG: 1.043 * sqrt(long words * (30 / sentences) + 3.1291).

        The 30 / sentences factor uses whole-number division.
        """
        text = normalize(text)
        sentences_factor = 30 // self.statistics.sentence_count(text)
        long_words = self.statistics.words_with_three_syllables(text)
        return round(1.043 * math.sqrt(long_words * sentences_factor + 3.1291), 1)

    def automated_readability_index(self, text: Optional[str]) -> float:
        text = normalize(text)
        words = self.statistics.word_count(text)
        return round(
            4.71 * safe_divide(self.statistics.letter_count(text), words)
            + 0.5 * safe_divide(words, self.statistics.sentence_count(text))
            - 21.43,
            1,
        )

    def average_grade_level(self, text: Optional[str]) -> float:
        """Mean of the five grade-level scores, each already rounded."""
        text = normalize(text)
        grades = (
            self.flesch_kincaid_grade_level(text),
            self.gunning_fog_score(text),
            self.smog_index(text),
            self.coleman_liau_index(text),
            self.automated_readability_index(text),
        )
        return round(sum(grades) / len(grades), 1)

    def report(self, text: Optional[str]) -> ReadabilityReport:
        """Compute every count and score for the text.

        Args:
            text: Raw or normalized text

        Returns:
            ReadabilityReport for the text
        """
        text = normalize(text)
        stats = self.statistics
        reading_ease = self.flesch_kincaid_reading_ease(text)

        return ReadabilityReport(
            word_count=stats.word_count(text),
            sentence_count=stats.sentence_count(text),
            letter_count=stats.letter_count(text),
            syllable_count=stats.total_syllables(text),
            long_word_count=stats.words_with_three_syllables(text),
            average_words_per_sentence=stats.average_words_per_sentence(text),
            average_syllables_per_word=stats.average_syllables_per_word(text),
            percentage_long_words=stats.percentage_words_with_three_syllables(text),
            flesch_kincaid_reading_ease=reading_ease,
            flesch_kincaid_grade_level=self.flesch_kincaid_grade_level(text),
            gunning_fog_score=self.gunning_fog_score(text),
            coleman_liau_index=self.coleman_liau_index(text),
            smog_index=self.smog_index(text),
            automated_readability_index=self.automated_readability_index(text),
            average_grade_level=self.average_grade_level(text),
            reading_ease_band=translate_reading_ease(reading_ease),
        )
