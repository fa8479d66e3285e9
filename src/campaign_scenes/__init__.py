"""Scene suggestions for tabletop campaign graphs."""

from campaign_scenes.models import Confidence, Entity, EntityType, Link, Relationship, Suggestion
from campaign_scenes.suggestions import SceneSuggestionEngine, get_scene_suggestions

__all__ = [
    "Confidence",
    "Entity",
    "EntityType",
    "Link",
    "Relationship",
    "SceneSuggestionEngine",
    "Suggestion",
    "get_scene_suggestions",
]
