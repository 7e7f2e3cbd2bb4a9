"""Pure operations over an ordered scene collection.

The caller owns the collection. Every function takes a sequence of Scene
values and returns a new list; inputs are never mutated.
"""

import logging
import re
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from ..analysis.analyzer import PromptAnalyzer
from .models import (
    ProjectSummary,
    Scene,
    SceneRecord,
    readiness_for_score,
    round_half_up,
)

logger = logging.getLogger(__name__)

# "3", " 3", "3.0" and "3rd" all read as 3
LEADING_INT = re.compile(r"\s*[+-]?\d+")

RecordLike = Union[SceneRecord, Mapping[str, Any], Sequence[Any]]


class SceneOperationRefused(ValueError):
    """Raised when an operation would leave the collection invalid."""


class SceneNotFoundError(LookupError):
    """Raised when a scene id is not in the collection."""


def new_collection() -> List[Scene]:
    """A collection always starts with one blank scene."""
    return [Scene(order=1)]


def renumber(scenes: Iterable[Scene]) -> List[Scene]:
    """Assign dense 1-based order numbers in sequence order."""
    return [
        scene if scene.order == index else scene.with_order(index)
        for index, scene in enumerate(scenes, start=1)
    ]


def _index_of(scenes: Sequence[Scene], scene_id: str) -> int:
    for index, scene in enumerate(scenes):
        if scene.id == scene_id:
            return index
    raise SceneNotFoundError(f"Scene not found: {scene_id}")


def get_scene(scenes: Sequence[Scene], scene_id: str) -> Scene:
    return scenes[_index_of(scenes, scene_id)]


def add_scene(scenes: Sequence[Scene]) -> List[Scene]:
    """Append a blank scene with the next order number."""
    scene = Scene(order=len(scenes) + 1)
    logger.debug("Added scene %s at position %d", scene.id, scene.order)
    return [*scenes, scene]


def remove_scene(scenes: Sequence[Scene], scene_id: str) -> List[Scene]:
    """Remove a scene and renumber the rest.

    Raises:
        SceneOperationRefused: if the collection has only one scene
        SceneNotFoundError: if no scene has that id
    """
    if len(scenes) <= 1:
        raise SceneOperationRefused("At least one scene is required")
    index = _index_of(scenes, scene_id)
    logger.debug("Removed scene %s", scene_id)
    return renumber([*scenes[:index], *scenes[index + 1:]])


def move_scene(scenes: Sequence[Scene], scene_id: str, new_position: int) -> List[Scene]:
    """Move a scene to a 1-based position and renumber."""
    index = _index_of(scenes, scene_id)
    remaining = [*scenes[:index], *scenes[index + 1:]]
    target = max(0, min(len(remaining), new_position - 1))
    remaining.insert(target, scenes[index])
    return renumber(remaining)


def update_scene_text(
    scenes: Sequence[Scene], scene_id: str, field_name: str, value: str
) -> List[Scene]:
    """Replace one text field of a scene, dropping its analysis."""
    index = _index_of(scenes, scene_id)
    updated = list(scenes)
    updated[index] = scenes[index].with_text(field_name, value)
    return updated


def _analyzed(scene: Scene, analyzer: PromptAnalyzer) -> Scene:
    if not scene.has_content:
        return scene.with_analysis(None)
    return scene.with_analysis(analyzer.analyze(scene.image_prompt, scene.narration_script))


def analyze_scene(
    scenes: Sequence[Scene], scene_id: str, analyzer: Optional[PromptAnalyzer] = None
) -> List[Scene]:
    """Recompute the analysis of one scene from its current text."""
    analyzer = analyzer or PromptAnalyzer()
    index = _index_of(scenes, scene_id)
    updated = list(scenes)
    updated[index] = _analyzed(scenes[index], analyzer)
    return updated


def iter_analyze_all(
    scenes: Sequence[Scene], analyzer: Optional[PromptAnalyzer] = None
) -> Iterator[Tuple[int, Scene]]:
    """Analyze scenes one at a time, yielding (index, analyzed scene).

    Each scene is analyzed from its own text only, so callers may do other
    work between yields without affecting later results.
    """
    analyzer = analyzer or PromptAnalyzer()
    for index, scene in enumerate(list(scenes)):
        yield index, _analyzed(scene, analyzer)


def analyze_all(
    scenes: Sequence[Scene], analyzer: Optional[PromptAnalyzer] = None
) -> List[Scene]:
    """Analyze every scene that has text; blank scenes stay unanalyzed."""
    return [scene for _, scene in iter_analyze_all(scenes, analyzer)]


def has_content(scenes: Iterable[Scene]) -> bool:
    return any(scene.has_content for scene in scenes)


def project_summary(scenes: Sequence[Scene]) -> Optional[ProjectSummary]:
    """Mean overall score across analyzed scenes, or None if none are analyzed.

    Scenes without analysis are left out of the mean.
    """
    analyzed = [scene.analysis for scene in scenes if scene.analysis is not None]
    if not analyzed:
        return None

    score = round_half_up(sum(a.overall.score for a in analyzed) / len(analyzed))
    return ProjectSummary(
        score=score,
        readiness=readiness_for_score(score),
        analyzed_count=len(analyzed),
        scene_count=len(scenes),
    )


# ----------------------------------------------------------------------
# Record interchange
# ----------------------------------------------------------------------

def _parse_order(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    match = LEADING_INT.match(str(value)) if value is not None else None
    if not match:
        return None
    order = int(match.group(0))
    return order if order > 0 else None


def _record_fields(record: RecordLike) -> Tuple[Any, str, str]:
    if isinstance(record, SceneRecord):
        return record.order, record.image_prompt, record.narration_script
    if isinstance(record, Mapping):
        return (
            record.get("scene_order", record.get("order")),
            record.get("image_prompt") or "",
            record.get("narration_script") or "",
        )
    values = list(record) + [None] * 3
    return values[0], values[1] or "", values[2] or ""


def import_from_records(records: Iterable[RecordLike]) -> List[Scene]:
    """Build a fresh, unanalyzed collection from interchange records.

    Records may be SceneRecord values, mappings keyed by the CSV column
    names, or (order, image_prompt, narration_script) sequences. An order
    that is missing, unparsable or not positive falls back to the record's
    position. Records with both text fields empty are skipped. Scenes are
    sorted by order (stable) and renumbered densely, so a fallback order
    can move a record ahead of earlier records with larger orders:
    ``[("5", "a"), ("x", "b")]`` imports as ``b, a``. An import that yields
    no scenes returns a single blank scene.
    """
    parsed = []
    skipped = 0
    for position, record in enumerate(records, start=1):
        raw_order, image_prompt, narration_script = _record_fields(record)
        image_prompt, narration_script = str(image_prompt), str(narration_script)
        if not image_prompt and not narration_script:
            skipped += 1
            continue

        order = _parse_order(raw_order)
        if order is None:
            logger.warning(
                "Record %d has invalid scene_order %r; using %d", position, raw_order, position
            )
            order = position
        parsed.append(Scene(order=order, image_prompt=image_prompt, narration_script=narration_script))

    if skipped:
        logger.warning("Skipped %d record(s) with no prompt or narration text", skipped)
    if not parsed:
        return new_collection()

    parsed.sort(key=lambda scene: scene.order)
    logger.debug("Imported %d scene(s)", len(parsed))
    return renumber(parsed)


def export_to_records(scenes: Sequence[Scene]) -> List[SceneRecord]:
    """Serialize the collection to interchange records, preserving order."""
    return [
        SceneRecord(
            order=scene.order,
            image_prompt=scene.image_prompt,
            narration_script=scene.narration_script,
        )
        for scene in scenes
    ]
