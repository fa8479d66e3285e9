"""Scene suggestions: which characters and NPCs plausibly appear at a location.

Suggestions are found in three passes over the campaign graph, each with its
own confidence tier:

1. Direct (high): the entity is ``located_at`` the location, or the location
   ``contains`` it.
2. Indirect (medium): the entity ``serves``, ``works_for``, ``knows`` or is a
   ``member_of`` a person found directly. Only one hop is taken, and only from
   people; a faction at the location never pulls in its members.
3. Sub-location (low): the entity is ``located_at`` a location that is
   ``part_of`` the queried one. Grandchild locations are not visited.

An entity reachable several ways is reported once, with its best confidence.
"""

from collections.abc import Iterable

import structlog

from campaign_scenes.backend import EntityGraph
from campaign_scenes.models import (
    INDIRECT_RELATIONSHIPS,
    Confidence,
    Entity,
    EntityType,
    Relationship,
    Suggestion,
)
from campaign_scenes.ranking import ConfidenceResolver

logger = structlog.get_logger()


class _SuggestionCollector:
    """Applies exclusion and the person-type filter before ranking."""

    def __init__(self, exclude_ids: set[str]) -> None:
        self.exclude_ids = exclude_ids
        self.resolver: ConfidenceResolver[Suggestion] = ConfidenceResolver()

    def record(self, entity: Entity, confidence: Confidence, reason: str, source_relationship: str) -> None:
        if entity.id in self.exclude_ids or not entity.is_person:
            return
        suggestion = Suggestion(
            entity=entity,
            reason=reason,
            confidence=confidence,
            source_relationship=source_relationship,
        )
        if self.resolver.offer(entity.id, confidence, suggestion):
            logger.debug(
                "Suggestion recorded",
                entity_id=entity.id,
                confidence=confidence.value,
                source_relationship=source_relationship,
            )


class SceneSuggestionEngine:
    """Suggests people for a scene from a read-only entity graph."""

    def __init__(self, graph: EntityGraph) -> None:
        self.graph = graph

    def get_scene_suggestions(self, location_id: str, exclude_ids: Iterable[str] | None = None) -> list[Suggestion]:
        """Return suggested characters and NPCs for a location, best first.

        Args:
            location_id: ID of a location entity
            exclude_ids: Entity IDs to leave out, e.g. people already in the scene

        Returns:
            Suggestions ordered high, then medium, then low. Empty when the
            location does not exist.
        """
        logger.info("Computing scene suggestions", location_id=location_id)

        location = self.graph.get_by_id(location_id)
        if location is None:
            logger.info("Location not found", location_id=location_id)
            return []

        collector = _SuggestionCollector(set(exclude_ids or ()))

        direct_people = self._collect_direct(location, collector)
        direct_person_ids = {entity.id for entity in direct_people}

        all_entities = self.graph.get_all()
        entity_by_id = {entity.id: entity for entity in all_entities}

        self._collect_indirect(location, all_entities, entity_by_id, direct_person_ids, collector)
        self._collect_sub_locations(location, all_entities, collector)

        suggestions = collector.resolver.ranked()
        logger.info("Scene suggestions computed", location_id=location_id, count=len(suggestions))
        return suggestions

    def _collect_direct(self, location: Entity, collector: _SuggestionCollector) -> list[Entity]:
        """Record people at the location and return every direct person found.

        The returned list ignores exclusions so that excluded people still
        seed the indirect pass.
        """
        reason = f"Located at {location.name}"
        direct_people: list[Entity] = []

        for entity in self.graph.get_entities_linking_to(location.id):
            if entity.links_to(location.id, Relationship.LOCATED_AT.value):
                collector.record(entity, Confidence.HIGH, reason, Relationship.LOCATED_AT.value)
                if entity.is_person:
                    direct_people.append(entity)

        contained_ids = [
            link.target_id for link in location.links if Relationship.parse(link.relationship) is Relationship.CONTAINS
        ]
        if contained_ids:
            for entity in self.graph.get_by_ids(contained_ids):
                collector.record(entity, Confidence.HIGH, reason, Relationship.CONTAINS.value)
                if entity.is_person:
                    direct_people.append(entity)

        logger.debug("Direct pass complete", location_id=location.id, people=len(direct_people))
        return direct_people

    def _collect_indirect(
        self,
        location: Entity,
        all_entities: list[Entity],
        entity_by_id: dict[str, Entity],
        direct_person_ids: set[str],
        collector: _SuggestionCollector,
    ) -> None:
        if not direct_person_ids:
            return

        for entity in all_entities:
            if not entity.is_person or entity.id == location.id:
                continue

            for link in entity.links:
                relationship = Relationship.parse(link.relationship)
                if relationship not in INDIRECT_RELATIONSHIPS or link.target_id not in direct_person_ids:
                    continue

                direct_entity = entity_by_id.get(link.target_id)
                direct_name = direct_entity.name if direct_entity else link.target_id
                collector.record(
                    entity,
                    Confidence.MEDIUM,
                    f"{relationship.humanize()} {direct_name}",
                    relationship.value,
                )
                # one qualifying link is enough
                break

    def _collect_sub_locations(
        self,
        location: Entity,
        all_entities: list[Entity],
        collector: _SuggestionCollector,
    ) -> None:
        sub_locations = {
            entity.id: entity
            for entity in all_entities
            if entity.id != location.id
            and EntityType.parse(entity.type) is EntityType.LOCATION
            and entity.links_to(location.id, Relationship.PART_OF.value)
        }
        if not sub_locations:
            return
        logger.debug("Sub-locations found", location_id=location.id, count=len(sub_locations))

        for entity in all_entities:
            if not entity.is_person:
                continue

            for link in entity.links:
                if Relationship.parse(link.relationship) is not Relationship.LOCATED_AT:
                    continue
                sub_location = sub_locations.get(link.target_id)
                if sub_location is None:
                    continue

                collector.record(
                    entity,
                    Confidence.LOW,
                    f"Located at {sub_location.name} (sub-location)",
                    Relationship.PART_OF.value,
                )
                break


def get_scene_suggestions(
    graph: EntityGraph, location_id: str, exclude_ids: Iterable[str] | None = None
) -> list[Suggestion]:
    """Return suggested characters and NPCs for a location, best first."""
    return SceneSuggestionEngine(graph).get_scene_suggestions(location_id, exclude_ids)
