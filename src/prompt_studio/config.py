"""Configuration for Prompt Studio."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

import yaml
from dotenv import load_dotenv

load_dotenv()

DEFAULT_LEXICON_PATH = Path(__file__).parent / "data" / "lexicon.yaml"


class LexiconError(ValueError):
    """Raised when a lexicon file is missing required keyword data."""


@dataclass(frozen=True)
class Lexicon:
    """Keyword data consumed by the extractors, scorers and optimizer."""
    topic_clusters: Dict[str, Tuple[str, ...]]
    motion_verbs: Tuple[str, ...]
    duration_keywords: Tuple[str, ...]
    image_style_keywords: Tuple[str, ...]
    positive_words: frozenset
    negative_words: frozenset
    proper_noun_stopwords: frozenset
    optimizer: Dict[str, Tuple[str, ...]]

    @classmethod
    def from_dict(cls, data: Dict) -> "Lexicon":
        required = [
            "topic_clusters", "motion_verbs", "duration_keywords",
            "image_style_keywords", "sentiment", "proper_noun_stopwords",
            "optimizer",
        ]
        for key in required:
            if key not in (data or {}):
                raise LexiconError(f"Lexicon is missing required key: {key}")
        for key in ("topic_clusters", "optimizer"):
            if not isinstance(data[key], dict):
                raise LexiconError(f"Lexicon key must be a mapping: {key}")

        sentiment = data["sentiment"] or {}
        return cls(
            topic_clusters={
                name: tuple(words or [])
                for name, words in data["topic_clusters"].items()
            },
            motion_verbs=tuple(data["motion_verbs"]),
            duration_keywords=tuple(data["duration_keywords"]),
            image_style_keywords=tuple(data["image_style_keywords"]),
            positive_words=frozenset(w.lower() for w in sentiment.get("positive", [])),
            negative_words=frozenset(w.lower() for w in sentiment.get("negative", [])),
            proper_noun_stopwords=frozenset(data["proper_noun_stopwords"]),
            optimizer={
                name: tuple(words or [])
                for name, words in data["optimizer"].items()
            },
        )

    def optimizer_words(self, name: str) -> Tuple[str, ...]:
        return self.optimizer.get(name, ())


class Config:
    """Global configuration."""

    # Paths
    LEXICON_PATH = Path(os.getenv("PROMPT_STUDIO_LEXICON", str(DEFAULT_LEXICON_PATH)))
    OUTPUT_DIR = Path(os.getenv("PROMPT_STUDIO_OUTPUT_DIR", "output"))

    # Record interchange
    CSV_HEADER = ("scene_order", "image_prompt", "narration_script")

    # Inclusive lower bounds, highest first
    READINESS_THRESHOLDS = (
        (80, "Production Ready"),
        (60, "Good"),
        (40, "Needs Work"),
    )
    READINESS_FLOOR = "Poor"

    _lexicon_cache: Dict[Path, Lexicon] = {}

    @classmethod
    def lexicon(cls, path: Optional[Path] = None) -> Lexicon:
        """Load the keyword lexicon, parsing each file only once."""
        path = Path(path) if path else cls.LEXICON_PATH
        if path not in cls._lexicon_cache:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
            cls._lexicon_cache[path] = Lexicon.from_dict(data)
        return cls._lexicon_cache[path]

    @classmethod
    def ensure_dirs(cls):
        """Create output directory."""
        cls.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
        return cls.OUTPUT_DIR
