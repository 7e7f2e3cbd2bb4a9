"""Tests for text feature extractors."""

import math

import pytest
from prompt_studio.analysis.features import (
    contains_any,
    count_syllables,
    proper_nouns,
    readability,
    sentiment,
    topic_relevance,
)


class TestSentiment:
    """Test suite for sentiment scoring."""

    def test_positive_words(self):
        """Test positive word counting."""
        assert sentiment("This is a good and clear example") == 2

    def test_negative_words(self):
        """Test negative word counting."""
        assert sentiment("bad terrible awful day") == -3

    def test_case_insensitive(self):
        """Test that matching ignores case."""
        assert sentiment("GOOD Great") == 2

    def test_punctuation_attached_tokens_do_not_match(self):
        """Tokens are whitespace-delimited, so 'good.' is not 'good'."""
        assert sentiment("Good. great") == 1

    def test_empty(self):
        """Test empty text."""
        assert sentiment("") == 0


class TestReadability:
    """Test suite for reading ease."""

    def test_empty_is_zero(self):
        """Test empty text."""
        assert readability("") == 0

    def test_punctuation_only_is_zero(self):
        """Test text with no words."""
        assert readability("...!?") == 0

    def test_simple_sentence(self):
        """Test the formula on one short sentence."""
        # 1 sentence, 3 words, 3 syllables
        assert readability("The cat sat.") == pytest.approx(206.835 - 1.015 * 3 - 84.6)

    def test_emoji_only_is_finite(self):
        """Test text with no vowels."""
        result = readability("\U0001F600\U0001F600 \U0001F600")
        assert math.isfinite(result)

    def test_syllables_floor_at_one(self):
        """Test the one-syllable floor."""
        assert count_syllables("rhythm") == 1
        assert count_syllables("banana") == 3

    def test_long_input_terminates(self):
        """Test a long input."""
        text = "Cells divide to make new cells. " * 200
        assert math.isfinite(readability(text))


class TestProperNouns:
    """Test suite for proper noun detection."""

    def test_detects_capitalized_words(self):
        """Test capitalized word detection."""
        assert proper_nouns("Alice met Bob in Paris") == ["Alice", "Bob", "Paris"]

    def test_skips_stopwords_and_short_words(self):
        """Test that stopwords and short words are skipped."""
        assert proper_nouns("The cat and An owl") == []
        assert proper_nouns("Al is here") == []

    def test_all_caps_not_counted(self):
        """Test that acronyms are not counted."""
        assert proper_nouns("NASA Launches rockets") == ["Launches"]

    def test_non_letter_initial_not_counted(self):
        """Test that tokens starting with digits or punctuation are skipped."""
        assert proper_nouns("A 4-second pan over (paris") == []

    def test_sentence_initial_words_are_counted(self):
        """Known false positive: sentence-initial common words."""
        assert proper_nouns("Today we learn") == ["Today"]


class TestTopicRelevance:
    """Test suite for topic relevance."""

    def test_empty(self):
        """Test empty text."""
        assert topic_relevance("") == 0

    def test_ten_points_per_keyword(self):
        """Test ten points per keyword."""
        assert topic_relevance("learn and explain") == 20

    def test_repeated_keyword_counts_once(self):
        """Test that repeats do not add points."""
        assert topic_relevance("learn learn learn") == 10

    def test_substring_match(self):
        """Test substring containment."""
        # "transitions" contains "transition", "zooming" contains "zoom"
        assert topic_relevance("zooming transitions") == 20

    def test_clamped_to_100(self):
        """Test the 100 point cap."""
        text = (
            "learn explain understand concept theory principle definition "
            "visualize illustrate display show demonstrate present reveal"
        )
        assert topic_relevance(text) == 100

    def test_long_input(self):
        """Test a long input."""
        assert topic_relevance("learn " * 1000) == 10


def test_contains_any_case_insensitive():
    """Test case-insensitive keyword containment."""
    assert contains_any("Vibrant COLOR palette", ["color"])
    assert not contains_any("plain text", ["color", "style"])
