"""Helpers connecting scene suggestions to a scene's NPC selection."""

from collections.abc import Iterable, Sequence

import structlog

from campaign_scenes.models import Suggestion
from campaign_scenes.suggestions import SceneSuggestionEngine

logger = structlog.get_logger()


def handle_location_change(
    engine: SceneSuggestionEngine,
    location_id: str | None,
    selected_ids: Sequence[str],
) -> list[Suggestion]:
    """Fetch suggestions after a scene's location changes.

    People already selected for the scene are excluded. A cleared location
    returns no suggestions without querying, and a failed lookup is shown as
    "no suggestions" rather than breaking the form.
    """
    if not location_id:
        return []

    try:
        suggestions = engine.get_scene_suggestions(location_id, exclude_ids=list(selected_ids))
    except Exception as e:
        logger.warning("Scene suggestion lookup failed", location_id=location_id, error=str(e))
        return []

    return list(suggestions or [])


def add_suggested_npc(current_ids: Sequence[str], new_id: str) -> list[str]:
    """Return a new selection with ``new_id`` appended, unless already present."""
    if new_id in current_ids:
        return list(current_ids)
    return [*current_ids, new_id]


def add_all_suggested_npcs(current_ids: Sequence[str], suggestions: Iterable[Suggestion]) -> list[str]:
    """Return a new selection merging every suggested entity, without duplicates."""
    merged = list(dict.fromkeys(current_ids))
    seen = set(merged)
    for suggestion in suggestions:
        entity_id = suggestion.entity.id
        if entity_id not in seen:
            seen.add(entity_id)
            merged.append(entity_id)
    return merged
