"""Data models for scene analysis and the scene collection."""

import math
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..config import Config


class Readiness(Enum):
    PRODUCTION_READY = "Production Ready"
    GOOD = "Good"
    NEEDS_WORK = "Needs Work"
    POOR = "Poor"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Clamp a raw score into [0, 100] and round it."""
    return round_half_up(max(0.0, min(100.0, value)))


def readiness_for_score(score: int) -> Readiness:
    """Map an overall score to its readiness tier.

    Every overall score in the project (single scene and project-wide)
    goes through this function.
    """
    for lower_bound, label in Config.READINESS_THRESHOLDS:
        if score >= lower_bound:
            return Readiness(label)
    return Readiness(Config.READINESS_FLOOR)


@dataclass(frozen=True)
class AnalysisBlock:
    """One dimension's evaluation."""
    score: int
    issues: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True)
class OverallScore:
    score: int
    readiness: Readiness

    def to_dict(self) -> Dict[str, Any]:
        return {"score": self.score, "readiness": self.readiness.value}


@dataclass(frozen=True)
class PromptAnalysis:
    """Complete analysis of one scene's image prompt and narration."""
    image: AnalysisBlock
    video: AnalysisBlock
    voice: AnalysisBlock
    overall: OverallScore

    @property
    def blocks(self) -> Dict[str, AnalysisBlock]:
        return {"image": self.image, "video": self.video, "voice": self.voice}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "image": self.image.to_dict(),
            "video": self.video.to_dict(),
            "voice": self.voice.to_dict(),
            "overall": self.overall.to_dict(),
        }


TEXT_FIELDS = ("image_prompt", "narration_script")


def new_scene_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass(frozen=True)
class Scene:
    """One unit of video content.

    Scenes are immutable; every edit produces a new value and an edit to
    either text field drops the analysis computed from the old text.
    """
    id: str = field(default_factory=new_scene_id)
    order: int = 1
    image_prompt: str = ""
    narration_script: str = ""
    analysis: Optional[PromptAnalysis] = None

    @property
    def has_content(self) -> bool:
        return bool(self.image_prompt or self.narration_script)

    def with_text(self, field_name: str, value: str) -> "Scene":
        if field_name not in TEXT_FIELDS:
            raise ValueError(
                f"Unknown text field '{field_name}'. Expected one of: {', '.join(TEXT_FIELDS)}"
            )
        return replace(self, **{field_name: value}, analysis=None)

    def with_order(self, order: int) -> "Scene":
        return replace(self, order=order)

    def with_analysis(self, analysis: Optional[PromptAnalysis]) -> "Scene":
        return replace(self, analysis=analysis)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "order": self.order,
            "image_prompt": self.image_prompt,
            "narration_script": self.narration_script,
            "analysis": self.analysis.to_dict() if self.analysis else None,
        }


@dataclass(frozen=True)
class SceneRecord:
    """Interchange tuple used for bulk import and export."""
    order: int
    image_prompt: str
    narration_script: str

    def as_row(self) -> List[Any]:
        return [self.order, self.image_prompt, self.narration_script]


@dataclass(frozen=True)
class ProjectSummary:
    """Project-level readiness across analyzed scenes."""
    score: int
    readiness: Readiness
    analyzed_count: int
    scene_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "readiness": self.readiness.value,
            "analyzed_count": self.analyzed_count,
            "scene_count": self.scene_count,
        }
