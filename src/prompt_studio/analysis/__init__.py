"""Prompt analysis for image, video and voice generators."""

from .analyzer import PromptAnalyzer, aggregate, analyze
from .features import proper_nouns, readability, sentiment, topic_relevance
from .scorers import score_image, score_video, score_voice

__all__ = [
    "PromptAnalyzer", "aggregate", "analyze",
    "sentiment", "readability", "proper_nouns", "topic_relevance",
    "score_image", "score_video", "score_voice",
]
