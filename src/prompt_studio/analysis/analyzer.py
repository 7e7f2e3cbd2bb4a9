"""Prompt analysis entry point and score aggregation."""

from typing import Optional

from ..config import Config, Lexicon
from ..core.models import OverallScore, PromptAnalysis, readiness_for_score, round_half_up
from .scorers import score_image, score_video, score_voice


def aggregate(image, video, voice) -> OverallScore:
    """Combine three dimension blocks into the overall score and readiness."""
    score = round_half_up((image.score + video.score + voice.score) / 3)
    return OverallScore(score=score, readiness=readiness_for_score(score))


class PromptAnalyzer:
    """Scores a scene's image prompt and narration for all three generators."""

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or Config.lexicon()

    def analyze(self, image_prompt: str, narration_script: str) -> PromptAnalysis:
        """Analyze one scene.

        Args:
            image_prompt: Text for image synthesis; also scored for video
            narration_script: Text for voice narration

        Returns:
            A complete PromptAnalysis. Never raises for string input; empty
            text simply scores low.
        """
        image = score_image(image_prompt, self.lexicon)
        video = score_video(image_prompt, self.lexicon)
        voice = score_voice(narration_script, self.lexicon)
        return PromptAnalysis(
            image=image,
            video=video,
            voice=voice,
            overall=aggregate(image, video, voice),
        )


def analyze(image_text: str, narration_text: str) -> PromptAnalysis:
    return PromptAnalyzer().analyze(image_text, narration_text)
