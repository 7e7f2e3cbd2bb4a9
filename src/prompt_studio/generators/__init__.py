"""Generator modules for Prompt Studio."""

from .prompt_optimizer import PromptOptimizer
from .report_generator import ReportGenerator

__all__ = ["PromptOptimizer", "ReportGenerator"]
