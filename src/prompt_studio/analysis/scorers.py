"""Dimension scorers for image, video and voice generation suitability.

Each scorer starts at BASE_SCORE, applies its rules in a fixed order and
clamps the result into [0, 100]. Rule order only affects the order of
issues and suggestions; the numeric adjustments are additive.
"""

from typing import List, Optional

from ..config import Config, Lexicon
from ..core.models import AnalysisBlock, clamp_score
from .features import contains_any, proper_nouns, readability, sentiment, topic_relevance

BASE_SCORE = 50


class _Tally:
    """Accumulates a score with its issues and suggestions."""

    def __init__(self, score: float = BASE_SCORE):
        self.score = score
        self.issues: List[str] = []
        self.suggestions: List[str] = []

    def penalize(self, points: float, issue: str, suggestion: str):
        self.score -= points
        self.issues.append(issue)
        self.suggestions.append(suggestion)

    def block(self) -> AnalysisBlock:
        return AnalysisBlock(
            score=clamp_score(self.score),
            issues=tuple(self.issues),
            suggestions=tuple(self.suggestions),
        )


def score_image(prompt: str, lexicon: Optional[Lexicon] = None) -> AnalysisBlock:
    """Score an image prompt for still-image synthesis."""
    lexicon = lexicon or Config.lexicon()
    tally = _Tally()

    if len(prompt) < 50:
        tally.penalize(20, "Image prompt too short", "Add more visual descriptors and details")
    elif len(prompt) > 200:
        tally.score += 10

    if contains_any(prompt, lexicon.image_style_keywords):
        tally.score += 15
    else:
        tally.penalize(15, "Missing visual style descriptors", "Specify art style, colors, or lighting")

    tally.score += topic_relevance(prompt, lexicon) * 0.2

    if len(proper_nouns(prompt, lexicon)) > 3:
        tally.penalize(
            10,
            "Many proper nouns may need pronunciation guide",
            "Consider simplifying technical terms",
        )

    return tally.block()


def score_video(prompt: str, lexicon: Optional[Lexicon] = None) -> AnalysisBlock:
    """Score an image prompt for its suitability as a motion sequence."""
    lexicon = lexicon or Config.lexicon()
    tally = _Tally()

    if contains_any(prompt, lexicon.motion_verbs):
        tally.score += 20
    else:
        tally.penalize(25, "No motion described", 'Add motion verbs like "flows", "transitions", "zooms"')

    if contains_any(prompt, lexicon.duration_keywords):
        tally.score += 15
    else:
        tally.penalize(15, "Duration unclear", 'Specify timing like "smooth 4-second transition"')

    # Engagement only rewards; absence is not an issue
    if contains_any(prompt, lexicon.topic_clusters.get("engagement", ())):
        tally.score += 10

    if len(prompt) < 30:
        tally.penalize(15, "Video description too brief", "Describe the visual sequence in more detail")

    return tally.block()


def score_voice(script: str, lexicon: Optional[Lexicon] = None) -> AnalysisBlock:
    """Score a narration script for voice synthesis."""
    lexicon = lexicon or Config.lexicon()
    tally = _Tally()

    if len(script) < 50:
        tally.penalize(25, "Narration too short", "Expand explanation for better understanding")
    elif len(script) > 500:
        tally.penalize(
            10,
            "Narration might be too long for video segment",
            "Consider breaking into shorter segments",
        )
    else:
        tally.score += 15

    ease = readability(script)
    if ease < 60:
        tally.penalize(20, "Complex language detected", "Simplify vocabulary and sentence structure")
    elif ease > 80:
        tally.score += 15

    polarity = sentiment(script, lexicon)
    if polarity < -2:
        tally.penalize(15, "Negative tone detected", "Use more positive, encouraging language")
    elif polarity > 2:
        tally.score += 10

    tally.score += topic_relevance(script, lexicon) * 0.15

    if len(proper_nouns(script, lexicon)) > 5:
        tally.penalize(
            10,
            "Many technical terms may need pronunciation guide",
            "Add phonetic spelling for complex terms",
        )

    return tally.block()
