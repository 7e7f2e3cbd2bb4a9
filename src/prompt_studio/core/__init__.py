from .models import (
    AnalysisBlock, OverallScore, PromptAnalysis, ProjectSummary,
    Readiness, Scene, SceneRecord, readiness_for_score,
)

__all__ = [
    "AnalysisBlock", "OverallScore", "PromptAnalysis", "ProjectSummary",
    "Readiness", "Scene", "SceneRecord", "readiness_for_score",
]
