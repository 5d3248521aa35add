"""Word, sentence, letter and syllable counts over normalized text."""

import logging
import math
import re
from typing import Callable, List, Optional

from textstatistics.text.normalize import normalize
from textstatistics.text.syllables import count_syllables

logger = logging.getLogger(__name__)

# Receives (message, exception) when a count has to recover from an error
ErrorReporter = Callable[[str, BaseException], None]

_NON_TERMINATORS = re.compile(r"[^.!?]")
_NON_LETTERS = re.compile(r"[^A-Za-z]+")


def log_error(message: str, error: BaseException) -> None:
    """Default error reporter: log the message with the exception attached."""
    logger.error(message, exc_info=error)


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide the way IEEE floats do instead of raising on a zero denominator.

    Returns NaN for 0/0 and a signed infinity for x/0. Every ratio over the
    word count goes through here, so empty text yields NaN scores.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


class TextStatistics:
    """Counts words, sentences, letters and syllables in text.

    Every public method normalizes its input first, so callers may pass raw
    or already-normalized text.
    """

    def __init__(self, error_reporter: Optional[ErrorReporter] = None):
        """Initialize the counter.

        Args:
            error_reporter: Callable receiving (message, exception) when the
                long-word scan fails; defaults to logging the error
        """
        self.error_reporter = error_reporter or log_error

    def words(self, text: Optional[str]) -> List[str]:
        """Whitespace-delimited tokens of the normalized text."""
        text = normalize(text)
        return text.split() if text else []

    def word_count(self, text: Optional[str]) -> int:
        """Number of words in the text; 0 for empty text."""
        return len(self.words(text))

    def sentence_count(self, text: Optional[str]) -> int:
        """Number of sentence terminators in the normalized text, at least 1."""
        text = normalize(text) or ""
        return max(1, len(_NON_TERMINATORS.sub("", text)))

    def letter_count(self, text: Optional[str]) -> int:
        """Number of ASCII letters in the normalized text."""
        text = normalize(text) or ""
        return len(_NON_LETTERS.sub("", text))

    def syllable_count(self, word: str) -> int:
        """Estimated syllables in a single word."""
        return count_syllables(word)

    def total_syllables(self, text: Optional[str]) -> int:
        """Sum of the estimated syllables of every word in the text."""
        return sum(count_syllables(word) for word in self.words(text))

    def average_syllables_per_word(self, text: Optional[str]) -> float:
        text = normalize(text)
        return safe_divide(self.total_syllables(text), self.word_count(text))

    def average_words_per_sentence(self, text: Optional[str]) -> float:
        text = normalize(text)
        return safe_divide(self.word_count(text), self.sentence_count(text))

    def words_with_three_syllables(
        self, text: Optional[str], count_proper_nouns: bool = True
    ) -> int:
        """Count words with more than two syllables.

        When proper nouns are excluded, a word is skipped if the character at
        the first occurrence of that token in the text is upper-case. Tokens
        that also appear inside an earlier word are located there instead.

        A failure to locate a token is reported through the error reporter and
        the count accumulated so far is returned.

        Args:
            text: Text to scan
            count_proper_nouns: Whether capitalised words count as long words

        Returns:
            Number of long words found
        """
        text = normalize(text)
        long_word_count = 0

        try:
            for word in self.words(text):
                if count_syllables(word) <= 2:
                    continue
                if count_proper_nouns or not self._first_letter(text, word).isupper():
                    long_word_count += 1
        except (ValueError, IndexError) as e:
            self._report(
                f"Error thrown when computing words with 3 syllables for the text - {text}",
                e,
            )

        return long_word_count

    def percentage_words_with_three_syllables(
        self, text: Optional[str], count_proper_nouns: bool = True
    ) -> float:
        """Share of long words as a percentage rounded to one decimal."""
        text = normalize(text)
        long_word_count = self.words_with_three_syllables(text, count_proper_nouns)
        return round(safe_divide(long_word_count, self.word_count(text)) * 100, 1)

    def _first_letter(self, text: str, word: str) -> str:
        return text[text.index(word)]

    def _report(self, message: str, error: BaseException) -> None:
        try:
            self.error_reporter(message, error)
        except Exception:
            logger.exception("Error reporter failed while reporting: %s", message)
