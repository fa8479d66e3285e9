"""Backend interfaces for campaign entity graphs."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from campaign_scenes.models import Entity, Link


class EntityGraph(ABC):
    """Read-only access to a campaign's entities and their outbound links.

    Implementations are not required to return entities in any particular order.
    """

    @abstractmethod
    def get_by_id(self, entity_id: str) -> Entity | None:
        """Fetch one entity, or None if it does not exist."""
        pass

    @abstractmethod
    def get_by_ids(self, entity_ids: Iterable[str]) -> list[Entity]:
        """Fetch several entities. Unknown IDs are silently omitted."""
        pass

    @abstractmethod
    def get_entities_linking_to(self, entity_id: str) -> list[Entity]:
        """Return every entity holding at least one link that targets ``entity_id``."""
        pass

    @abstractmethod
    def get_all(self) -> list[Entity]:
        """Return a snapshot of every entity in the campaign."""
        pass


class Backend(EntityGraph):
    """Entity graph that can also be edited."""

    @abstractmethod
    def create(
        self,
        entity_type: str,
        name: str,
        description: str = "",
        entity_id: str | None = None,
    ) -> Entity:
        """Create a new entity."""
        pass

    @abstractmethod
    def list_entities(self, entity_type: str | None = None, limit: int | None = None) -> list[Entity]:
        """List entities, optionally filtered by type."""
        pass

    @abstractmethod
    def add_link(self, source_id: str, target_ids: list[str], relationship: str, bidirectional: bool = False) -> None:
        """Add links from source entity to target entities."""
        pass

    @abstractmethod
    def remove_link(self, source_id: str, target_ids: list[str], relationship: str) -> None:
        """Remove links from source entity to target entities."""
        pass

    def list_links(self, entity_id: str, relationship: str | None = None) -> list[Link]:
        """List the outbound links of an entity."""
        entity = self.get_by_id(entity_id)
        if entity is None:
            return []
        if relationship is None:
            return list(entity.links)
        return [link for link in entity.links if link.relationship == relationship]
