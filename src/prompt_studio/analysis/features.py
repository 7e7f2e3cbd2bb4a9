"""Primitive text signals used by the dimension scorers.

All functions are pure and defined for any string, including the empty
string and text with no ASCII letters.
"""

import re
from typing import Iterable, List, Optional

from ..config import Config, Lexicon

SENTENCE_SPLIT = re.compile(r"[.!?]+")
NON_VOWEL = re.compile(r"[^aeiouAEIOU]")

TOPIC_POINTS_PER_KEYWORD = 10
TOPIC_MAX = 100


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring check against a keyword list."""
    lower = text.lower()
    return any(keyword.lower() in lower for keyword in keywords)


def sentiment(text: str, lexicon: Optional[Lexicon] = None) -> int:
    """Bag-of-words polarity: +1 per positive token, -1 per negative token."""
    lexicon = lexicon or Config.lexicon()
    score = 0
    for token in text.lower().split():
        if token in lexicon.positive_words:
            score += 1
        if token in lexicon.negative_words:
            score -= 1
    return score


def count_syllables(word: str) -> int:
    """Vowel count with a floor of one. Not phonetic."""
    return max(1, len(NON_VOWEL.sub("", word)))


def readability(text: str) -> float:
    """Flesch reading-ease score, 0 when there are no sentences or words."""
    sentences = [s for s in SENTENCE_SPLIT.split(text) if s.strip()]
    words = text.split()
    if not sentences or not words:
        return 0.0

    syllables = sum(count_syllables(word) for word in words)
    return (
        206.835
        - 1.015 * (len(words) / len(sentences))
        - 84.6 * (syllables / len(words))
    )


def proper_nouns(text: str, lexicon: Optional[Lexicon] = None) -> List[str]:
    """Capitalized tokens longer than two characters.

    Sentence-initial common words are counted too; the heuristic accepts
    those false positives.
    """
    lexicon = lexicon or Config.lexicon()
    found = []
    for word in text.split():
        if len(word) <= 2 or word in lexicon.proper_noun_stopwords:
            continue
        rest = word[1:]
        if word[0].isupper() and rest == rest.lower():
            found.append(word)
    return found


def topic_relevance(text: str, lexicon: Optional[Lexicon] = None) -> int:
    """10 points per topic keyword present anywhere in the text, capped at 100.

    Each keyword counts once no matter how often it occurs.
    """
    lexicon = lexicon or Config.lexicon()
    lower = text.lower()
    score = 0
    for keywords in lexicon.topic_clusters.values():
        for keyword in keywords:
            if keyword.lower() in lower:
                score += TOPIC_POINTS_PER_KEYWORD
    return min(TOPIC_MAX, score)
