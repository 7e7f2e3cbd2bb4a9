"""Tests for dimension scorers and prompt analysis."""

import pytest
from prompt_studio.analysis.analyzer import PromptAnalyzer, aggregate, analyze
from prompt_studio.analysis.scorers import score_image, score_video, score_voice
from prompt_studio.core.models import AnalysisBlock, Readiness


# ---------------------------------------------------------------------------
# Sample prompts
# ---------------------------------------------------------------------------

CELL_IMAGE = (
    "A detailed, realistic illustration of a cell dividing, with vibrant "
    "colors and smooth zoom transitions taking 4 seconds."
)
CELL_NARRATION = (
    "Today we will learn how cells divide. "
    "This process helps you understand the basics of biology."
)


class TestImageScorer:
    """Test suite for the image scorer."""

    def test_empty_prompt(self):
        """Test that an empty prompt gets both penalties."""
        block = score_image("")
        assert block.score == 15
        assert block.issues == ("Image prompt too short", "Missing visual style descriptors")
        assert len(block.suggestions) == len(block.issues)

    def test_long_prompt_with_style(self):
        """Test the long-prompt and style bonuses."""
        block = score_image("detailed " * 30)
        assert block.score == 75
        assert block.issues == ()

    def test_many_proper_nouns(self):
        """Test the proper-noun penalty."""
        block = score_image("Alice Bob Carol Dave standing together in a realistic style portrait")
        assert block.score == 55
        assert "Many proper nouns may need pronunciation guide" in block.issues
        assert "Consider simplifying technical terms" in block.suggestions

    def test_cell_prompt(self):
        """Test the cell-division image prompt."""
        # 50 + 15 (style) + 0.2 * 30 (transition, zoom, vibrant)
        assert score_image(CELL_IMAGE).score == 71


class TestVideoScorer:
    """Test suite for the video scorer."""

    def test_empty_prompt_clamps_to_zero(self):
        """Test that penalties below zero clamp to zero."""
        block = score_video("")
        assert block.score == 0
        assert block.issues == (
            "No motion described",
            "Duration unclear",
            "Video description too brief",
        )

    def test_short_prompt_with_motion_and_duration(self):
        """Test a brief prompt that still has motion and timing."""
        block = score_video("Camera zooms in slowly")
        assert block.score == 70
        assert block.issues == ("Video description too brief",)

    def test_cell_prompt(self):
        """Test the cell-division prompt as a motion sequence."""
        # 50 + 20 (transitions) + 15 (seconds) + 10 (vibrant)
        block = score_video(CELL_IMAGE)
        assert block.score == 95
        assert block.issues == ()


class TestVoiceScorer:
    """Test suite for the voice scorer."""

    def test_empty_script(self):
        """Test that an empty script is too short and unreadable."""
        block = score_voice("")
        assert block.score == 5
        assert block.issues == ("Narration too short", "Complex language detected")

    def test_too_long(self):
        """Test the long-narration penalty."""
        block = score_voice("We learn. " * 60)
        # 50 - 10 (length) + 0.15 * 10 (learn) = 41.5, rounds half up
        assert block.score == 42
        assert block.issues == ("Narration might be too long for video segment",)
        assert block.suggestions == ("Consider breaking into shorter segments",)

    def test_negative_tone(self):
        """Test the negative-tone penalty."""
        block = score_voice(
            "It was bad and terrible and awful and confusing for the whole class today."
        )
        assert block.score == 50
        assert block.issues == ("Negative tone detected",)

    def test_easy_reading_bonus(self):
        """Test the bonus for reading ease above 80."""
        # 63 chars, ease ~114: 50 + 15 (length) + 15 (readability)
        block = score_voice("The cat sat. It ran to me. We had fun. Dogs ran too. So did he.")
        assert block.score == 80
        assert block.issues == ()

    def test_positive_tone_bonus(self):
        """Test the bonus for more than two positive words."""
        # 60 chars, ease ~90, good/great/easy: 50 + 15 + 15 + 10
        block = score_voice("It is a good day and a great day and an easy day for us all.")
        assert block.score == 90
        assert block.issues == ()

    def test_cell_narration(self):
        """Test the cell-division narration."""
        # 50 + 15 (length) - 20 (readability ~56) + 0.15 * 20
        block = score_voice(CELL_NARRATION)
        assert block.score == 48
        assert block.issues == ("Complex language detected",)

    def test_many_proper_nouns(self):
        """Test the pronunciation-guide penalty for many proper nouns."""
        text = "Alice and Bob visit Paris, London, Berlin and Madrid to meet Carol today."
        block = score_voice(text)
        # 50 + 15 (length) - 20 (readability ~44) - 10 (seven proper nouns)
        assert block.score == 35
        assert "Many technical terms may need pronunciation guide" in block.issues
        assert "Add phonetic spelling for complex terms" in block.suggestions


class TestAggregate:
    """Test suite for the overall score."""

    @pytest.mark.parametrize("score, expected", [
        (100, Readiness.PRODUCTION_READY),
        (80, Readiness.PRODUCTION_READY),
        (79, Readiness.GOOD),
        (60, Readiness.GOOD),
        (59, Readiness.NEEDS_WORK),
        (40, Readiness.NEEDS_WORK),
        (39, Readiness.POOR),
        (0, Readiness.POOR),
    ])
    def test_readiness_boundaries(self, score, expected):
        """Test readiness thresholds at their boundaries."""
        block = AnalysisBlock(score=score)
        overall = aggregate(block, block, block)
        assert overall.score == score
        assert overall.readiness == expected

    def test_mean_is_rounded(self):
        """Test that the mean of the three scores is rounded."""
        overall = aggregate(AnalysisBlock(71), AnalysisBlock(95), AnalysisBlock(48))
        assert overall.score == 71


class TestAnalyze:
    """Test suite for full prompt analysis."""

    def test_cell_scenario(self):
        """Favorable image, motion and narration signals reach Good."""
        analysis = analyze(CELL_IMAGE, CELL_NARRATION)
        assert analysis.image.score == 71
        assert analysis.video.score == 95
        assert analysis.voice.score == 48
        assert analysis.overall.score == 71
        assert analysis.overall.readiness == Readiness.GOOD

    def test_empty_inputs_still_scored(self):
        """Test that empty inputs produce a complete analysis."""
        analysis = analyze("", "")
        assert analysis.overall.score == 7
        assert analysis.overall.readiness == Readiness.POOR
        assert "Image prompt too short" in analysis.image.issues
        assert "Narration too short" in analysis.voice.issues

    def test_emoji_only(self):
        """Test text with no ASCII letters."""
        analysis = analyze("\U0001F3A8" * 20, "\U0001F600" * 30)
        for block in analysis.blocks.values():
            assert 0 <= block.score <= 100
        assert isinstance(analysis.overall.readiness, Readiness)

    def test_thousand_word_input(self):
        """Test a long input."""
        text = " ".join(["Students learn to visualize smooth transitions"] * 200)
        analysis = analyze(text, text)
        assert 0 <= analysis.overall.score <= 100

    def test_scores_always_bounded(self):
        """Test that every score stays within 0-100."""
        texts = [
            "",
            "x",
            "bad " * 200,
            "good great amazing learn explain " * 50,
            "Alice Bob Carol Dave Eve Frank Grace Heidi",
        ]
        analyzer = PromptAnalyzer()
        for image in texts:
            for narration in texts:
                analysis = analyzer.analyze(image, narration)
                for block in analysis.blocks.values():
                    assert 0 <= block.score <= 100
                assert 0 <= analysis.overall.score <= 100

    def test_to_dict(self):
        """Test dictionary serialization."""
        data = analyze(CELL_IMAGE, CELL_NARRATION).to_dict()
        assert data["overall"] == {"score": 71, "readiness": "Good"}
        assert set(data) == {"image", "video", "voice", "overall"}
        assert isinstance(data["voice"]["issues"], list)
