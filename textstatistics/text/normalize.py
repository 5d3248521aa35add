"""Text normalization for word and sentence counting.

Turns raw, possibly HTML-tagged text into a single line of plain text where
every sentence ends with ". " and only letters, spaces and terminators carry
meaning. The rewrites run in a fixed order; later steps assume the earlier
ones have already run.
"""

import re
from typing import Optional

# Closing tags of these elements end a sentence
FULL_STOP_TAGS = ("li", "p", "h1", "h2", "h3", "h4", "h5", "h6", "dd")

_TAG = re.compile(r"<[^>]+>")
_STRAY_BRACKETS = re.compile(r"[<>]")
_SOFT_PUNCTUATION = re.compile(r'[",:;()-]')
_TERMINATOR = re.compile(r"[.!?]")
_WHITESPACE = re.compile(r"\s+")
_REPEATED_TERMINATORS = re.compile(r"\.[. ]+")
_TERMINATOR_PADDING = re.compile(r" *\.")
_DIGITS = re.compile(r"[0-9]+")
_SPACES = re.compile(r" +")


def _clean_terminators(text: str) -> str:
    """Merge runs of terminators and pad each one with a single space."""
    text = _REPEATED_TERMINATORS.sub(".", text)
    return _TERMINATOR_PADDING.sub(". ", text).strip()


def normalize(text: Optional[str]) -> Optional[str]:
    """Normalize text into canonical sentence-delimited plain text.

    Steps, in order:
    1. Replace closing block tags (``</p>``, ``</li>``, ...) with a full stop
    2. Strip all remaining tags, then replace stray ``<`` and ``>`` with spaces
    3. Replace ``" , : ; ( ) -`` with spaces
    4. Unify ``. ! ?`` into ``.``
    5. Trim and append a final full stop
    6. Collapse whitespace runs into a single space
    7. Collapse runs of full stops into one
    8. Pad every full stop with a following space and trim
    9. Remove digit runs
    10. Collapse spaces, re-merging any full stops left orphaned by step 9

    A closing block tag always becomes a full stop, even when the element
    already ended with punctuation; step 7 absorbs the duplicate. Digit
    removal also destroys dates and other numeric expressions.

    Empty or None input is returned unchanged.

    Args:
        text: Raw text, optionally containing HTML tags

    Returns:
        Normalized text ending with a single full stop
    """
    if not text:
        return text

    for tag in FULL_STOP_TAGS:
        text = text.replace(f"</{tag}>", ".")

    text = _TAG.sub("", text)
    text = _STRAY_BRACKETS.sub(" ", text)
    text = _SOFT_PUNCTUATION.sub(" ", text)
    text = _TERMINATOR.sub(".", text)

    # Add final terminator, just in case it's missing
    text = text.strip() + "."

    text = _WHITESPACE.sub(" ", text)
    text = _clean_terminators(text)

    text = _DIGITS.sub(" ", text)
    text = _clean_terminators(text)
    return _SPACES.sub(" ", text).strip()
