"""Generate a Markdown readiness report for a scene collection."""

from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from jinja2 import Environment

from ..core.models import Scene
from ..core.scenes import project_summary

REPORT_TEMPLATE = """# Prompt Readiness Report: {{ title }}

**Generated:** {{ generated }}
{% if summary %}
**Project score:** {{ summary.score }}/100 ({{ summary.readiness.value }})
**Analyzed scenes:** {{ summary.analyzed_count }} of {{ summary.scene_count }}
{% else %}
**Project score:** not analyzed
{% endif %}
## Scores

| Scene | Image | Video | Voice | Overall | Readiness |
|-------|-------|-------|-------|---------|-----------|
{% for scene in scenes -%}
{% if scene.analysis -%}
| {{ scene.order }} | {{ scene.analysis.image.score }} | {{ scene.analysis.video.score }} | {{ scene.analysis.voice.score }} | {{ scene.analysis.overall.score }} | {{ scene.analysis.overall.readiness.value }} |
{% else -%}
| {{ scene.order }} | - | - | - | - | not analyzed |
{% endif -%}
{% endfor %}
{% for scene in scenes %}
## Scene {{ scene.order }}

**Image prompt:** {{ scene.image_prompt or "(empty)" }}

**Narration:** {{ scene.narration_script or "(empty)" }}
{% if scene.analysis %}
{% for name, block in scene.analysis.blocks.items() %}
### {{ name | capitalize }} ({{ block.score }}/100)
{% if block.issues %}
{% for issue in block.issues %}
- {{ issue }}: {{ block.suggestions[loop.index0] }}
{% endfor %}
{% else %}
No issues found.
{% endif %}
{% endfor %}
{% else %}
_Not analyzed._
{% endif %}
{% endfor %}
"""


class ReportGenerator:
    """Render per-scene scores, issues and the project summary."""

    def __init__(self):
        env = Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True)
        self.template = env.from_string(REPORT_TEMPLATE)

    def generate(self, scenes: Sequence[Scene], title: str = "Untitled Project") -> str:
        return self.template.render(
            title=title,
            generated=datetime.now().strftime("%Y-%m-%d %H:%M"),
            summary=project_summary(scenes),
            scenes=scenes,
        )

    def write(
        self,
        scenes: Sequence[Scene],
        output_path: Path,
        title: Optional[str] = None,
    ) -> Path:
        """Write the report and return its path."""
        output_path = Path(output_path)
        content = self.generate(scenes, title or output_path.stem)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        return output_path
