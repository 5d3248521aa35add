import pytest

SIMPLE_TEXT = "This is a simple test. It has two sentences."

# 9 words, 2 sentences, 28 syllables, 72 letters, 6 long words (5 without "Jennifer")
GOLDEN_TEXT = (
    "The committee investigated unusual activities. "
    "Jennifer remained optimistic today."
)


@pytest.fixture
def simple_text():
    return SIMPLE_TEXT


@pytest.fixture
def golden_text():
    return GOLDEN_TEXT
