"""Rewrite prompts so they carry the signals the analyzers look for."""

from typing import List, Optional, Sequence

from jinja2 import Environment

from ..config import Config, Lexicon
from ..analysis.features import contains_any

_templates = Environment(autoescape=False, keep_trailing_newline=False)

FULL_PROMPT_TEMPLATE = _templates.from_string(
    "IMAGE PROMPT:\n{{ image }}\n\n"
    "VIDEO PROMPT:\n{{ video }}\n\n"
    "VOICE SCRIPT:\n{{ voice }}"
)

SCENE_LIST_TEMPLATE = _templates.from_string(
    "{% for scene in scenes %}"
    "Scene {{ scene.order }}:\n"
    "Image: {{ scene.image }}\n"
    "Narration: {{ scene.voice }}\n"
    "{% if not loop.last %}\n{% endif %}"
    "{% endfor %}"
)


class PromptOptimizer:
    """Append fixed remediation clauses for missing prompt signals.

    Every rule checks for its signal before adding its clause, so a clause
    is never added to text that already satisfies the rule.
    """

    EDUCATIONAL_PREFIX = "Educational content: "
    VISUAL_CLAUSE = ". Visualize this with clear, professional imagery."
    STYLE_CLAUSE = " Use detailed, professional style with clean modern design."
    STRUCTURE_CLAUSE = " Structure as engaging scenes with smooth transitions."
    MOTION_CLAUSE = " Include smooth transitions and dynamic movement."
    DURATION_CLAUSE = " Keep scenes brief for optimal video generation (4-5 seconds each)."
    EXPAND_CLAUSE = " Provide a clear, detailed explanation of the key ideas and concepts."
    TONE_CLAUSE = " This helps you understand and learn the concept better."

    MIN_NARRATION_LENGTH = 50

    def __init__(self, lexicon: Optional[Lexicon] = None):
        self.lexicon = lexicon or Config.lexicon()

    def _words(self, name: str):
        return self.lexicon.optimizer_words(name)

    def optimize_image_prompt(self, prompt: str) -> str:
        """Add educational framing, a visual verb and a style descriptor."""
        if not prompt.strip():
            return ""

        optimized = prompt
        if not contains_any(optimized, self._words("educational_marker")):
            optimized = self.EDUCATIONAL_PREFIX + optimized

        if not contains_any(optimized, self._words("image_visual_words")):
            if optimized.endswith("."):
                optimized = optimized[:-1]
            optimized += self.VISUAL_CLAUSE

        if not contains_any(optimized, self._words("image_style_words")):
            optimized += self.STYLE_CLAUSE

        return optimized.strip()

    def optimize_video_prompt(self, prompt: str) -> str:
        """Add scene structure, motion and a duration cue."""
        if not prompt.strip():
            return ""

        optimized = prompt
        if not contains_any(optimized, self._words("video_structure_words")):
            optimized += self.STRUCTURE_CLAUSE

        # The structure clause mentions transitions, which satisfies this rule
        if not contains_any(optimized, self._words("video_motion_words")):
            optimized += self.MOTION_CLAUSE

        if not contains_any(optimized, self._words("video_duration_words")):
            optimized += self.DURATION_CLAUSE

        return optimized.strip()

    def optimize_voice_script(self, script: str) -> str:
        """Expand short narration and add an educational tone."""
        if not script.strip():
            return ""

        optimized = script
        if len(script) < self.MIN_NARRATION_LENGTH:
            optimized += self.EXPAND_CLAUSE

        if not contains_any(optimized, self._words("voice_tone_words")):
            optimized += self.TONE_CLAUSE

        return optimized.strip()

    def optimize_full_prompt(self, image_prompt: str, narration_script: str) -> str:
        """Labeled image, video and voice sections for one scene."""
        return FULL_PROMPT_TEMPLATE.render(
            image=self.optimize_image_prompt(image_prompt),
            video=self.optimize_video_prompt(image_prompt),
            voice=self.optimize_voice_script(narration_script),
        )

    def format_optimized_scenes(self, scenes: Sequence) -> str:
        """Optimized image and narration text for every scene, in order."""
        return SCENE_LIST_TEMPLATE.render(scenes=[
            {
                "order": scene.order,
                "image": self.optimize_image_prompt(scene.image_prompt),
                "voice": self.optimize_voice_script(scene.narration_script),
            }
            for scene in scenes
        ])

    def get_changes_report(self, original: str, optimized: str) -> List[str]:
        """List the clauses present in the optimized text but not the original."""
        clauses = [
            self.EDUCATIONAL_PREFIX, self.VISUAL_CLAUSE, self.STYLE_CLAUSE,
            self.STRUCTURE_CLAUSE, self.MOTION_CLAUSE, self.DURATION_CLAUSE,
            self.EXPAND_CLAUSE, self.TONE_CLAUSE,
        ]
        return [
            clause.strip(" .")
            for clause in clauses
            if clause.strip() in optimized and clause.strip() not in original
        ]


def optimize_image_prompt(text: str) -> str:
    return PromptOptimizer().optimize_image_prompt(text)


def optimize_video_prompt(text: str) -> str:
    return PromptOptimizer().optimize_video_prompt(text)


def optimize_voice_script(text: str) -> str:
    return PromptOptimizer().optimize_voice_script(text)


def optimize_full_prompt(image_text: str, narration_text: str) -> str:
    return PromptOptimizer().optimize_full_prompt(image_text, narration_text)
