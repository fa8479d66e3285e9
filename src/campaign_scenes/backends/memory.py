"""In-memory campaign graph backend."""

from collections.abc import Iterable
from uuid import uuid4

import structlog

from campaign_scenes.backend import Backend
from campaign_scenes.models import Entity, Link

logger = structlog.get_logger()


class MemoryBackend(Backend):
    """Dict-backed entity graph, kept in insertion order."""

    def __init__(self, entities: Iterable[Entity] | None = None) -> None:
        """Initialize memory backend.

        Args:
            entities: Entities to preload. Later duplicates of an ID replace earlier ones.
        """
        self.entities: dict[str, Entity] = {}
        for entity in entities or []:
            self.entities[entity.id] = entity
        logger.debug("Memory backend initialized", count=len(self.entities))

    def _new_id(self, entity_type: str) -> str:
        while True:
            entity_id = f"{entity_type}-{uuid4().hex[:8]}"
            if entity_id not in self.entities:
                return entity_id

    def _changed(self) -> None:
        """Hook called after every mutation."""

    def get_by_id(self, entity_id: str) -> Entity | None:
        return self.entities.get(entity_id)

    def get_by_ids(self, entity_ids: Iterable[str]) -> list[Entity]:
        return [self.entities[eid] for eid in entity_ids if eid in self.entities]

    def get_entities_linking_to(self, entity_id: str) -> list[Entity]:
        return [e for e in self.entities.values() if any(link.target_id == entity_id for link in e.links)]

    def get_all(self) -> list[Entity]:
        return list(self.entities.values())

    def create(
        self,
        entity_type: str,
        name: str,
        description: str = "",
        entity_id: str | None = None,
    ) -> Entity:
        """Create a new entity, generating an ID when none is given."""
        if entity_id is not None and entity_id in self.entities:
            raise ValueError(f"Entity already exists: {entity_id}")

        entity = Entity(
            id=entity_id or self._new_id(entity_type),
            type=entity_type,
            name=name,
            description=description,
        )
        self.entities[entity.id] = entity
        logger.info("Entity created", entity_id=entity.id, entity_type=entity_type)
        self._changed()
        return entity

    def list_entities(self, entity_type: str | None = None, limit: int | None = None) -> list[Entity]:
        entities = list(self.entities.values())
        if entity_type:
            entities = [e for e in entities if e.type == entity_type]
        if limit:
            entities = entities[:limit]
        return entities

    def add_link(self, source_id: str, target_ids: list[str], relationship: str, bidirectional: bool = False) -> None:
        """Add links from source entity to target entities.

        Targets that do not exist yet are accepted; their type is left blank.
        """
        source = self.entities.get(source_id)
        if source is None:
            raise ValueError(f"Unknown entity: {source_id}")

        added = 0
        for target_id in target_ids:
            if source.links_to(target_id, relationship):
                logger.debug("Link already present", source_id=source_id, target_id=target_id)
                continue
            target = self.entities.get(target_id)
            source.links.append(
                Link(
                    target_id=target_id,
                    target_type=target.type if target else "",
                    relationship=relationship,
                    bidirectional=bidirectional,
                )
            )
            added += 1

        logger.info("Links added", source_id=source_id, relationship=relationship, count=added)
        self._changed()

    def remove_link(self, source_id: str, target_ids: list[str], relationship: str) -> None:
        source = self.entities.get(source_id)
        if source is None:
            raise ValueError(f"Unknown entity: {source_id}")

        before = len(source.links)
        source.links = [
            link
            for link in source.links
            if not (link.target_id in target_ids and link.relationship == relationship)
        ]
        logger.info(
            "Links removed", source_id=source_id, relationship=relationship, count=before - len(source.links)
        )
        self._changed()
