"""Data models for campaign scenes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class EntityType(str, Enum):
    """Built-in campaign entity types."""

    CHARACTER = "character"
    NPC = "npc"
    LOCATION = "location"
    FACTION = "faction"
    ITEM = "item"
    SESSION = "session"
    SCENE = "scene"

    @classmethod
    def parse(cls, label: str) -> "EntityType | None":
        """Return the matching type, or None for a custom type label."""
        try:
            return cls(label)
        except ValueError:
            return None


PERSON_TYPES = frozenset({EntityType.CHARACTER, EntityType.NPC})


def is_person_type(label: str) -> bool:
    """Return True if an entity type label can be suggested for a scene."""
    return EntityType.parse(label) in PERSON_TYPES


class Relationship(str, Enum):
    """Relationship labels the suggestion engine understands.

    Links store their relationship as a plain string; labels outside this set
    are valid campaign data and are simply ignored by the engine.
    """

    LOCATED_AT = "located_at"
    CONTAINS = "contains"
    PART_OF = "part_of"
    SERVES = "serves"
    WORKS_FOR = "works_for"
    KNOWS = "knows"
    MEMBER_OF = "member_of"

    @classmethod
    def parse(cls, label: str) -> "Relationship | None":
        """Return the matching relationship, or None for a custom label."""
        try:
            return cls(label)
        except ValueError:
            return None

    def humanize(self) -> str:
        """Render the label for display, e.g. ``works_for`` -> ``works for``."""
        return self.value.replace("_", " ")


INDIRECT_RELATIONSHIPS = frozenset(
    {Relationship.SERVES, Relationship.WORKS_FOR, Relationship.KNOWS, Relationship.MEMBER_OF}
)


class Confidence(str, Enum):
    """How strongly a suggestion is believed to belong at a location."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank; lower is better."""
        return _CONFIDENCE_RANK[self]

    def is_better_than(self, other: "Confidence") -> bool:
        """Return True if this confidence strictly outranks ``other``."""
        return self.rank < other.rank


_CONFIDENCE_RANK = {Confidence.HIGH: 0, Confidence.MEDIUM: 1, Confidence.LOW: 2}


@dataclass
class Link:
    """A directed, labelled edge from its owning entity to a target entity."""

    target_id: str
    target_type: str = ""
    relationship: str = "knows"
    bidirectional: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "target_id": self.target_id,
            "target_type": self.target_type,
            "relationship": self.relationship,
            "bidirectional": self.bidirectional,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Link":
        return cls(
            target_id=str(data["target_id"]),
            target_type=str(data.get("target_type") or ""),
            relationship=str(data.get("relationship", "knows")),
            bidirectional=bool(data.get("bidirectional", False)),
        )


@dataclass
class Entity:
    """A campaign record and node in the relationship graph."""

    id: str
    type: str
    name: str
    description: str = ""
    links: list[Link] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def is_person(self) -> bool:
        return is_person_type(self.type)

    def links_to(self, target_id: str, relationship: str) -> bool:
        """Return True if any outbound link targets ``target_id`` with ``relationship``."""
        return any(link.target_id == target_id and link.relationship == relationship for link in self.links)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "name": self.name,
            "description": self.description,
            "links": [link.to_dict() for link in self.links],
        }
        if self.metadata:
            data["metadata"] = dict(self.metadata)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Entity":
        return cls(
            id=str(data["id"]),
            type=str(data["type"]),
            name=str(data.get("name", "")),
            description=str(data.get("description") or ""),
            links=[Link.from_dict(link) for link in data.get("links") or []],
            metadata=dict(data.get("metadata") or {}),
        )


@dataclass(frozen=True)
class Suggestion:
    """An entity suggested for a scene, with the reason it was found."""

    entity: Entity
    reason: str
    confidence: Confidence
    source_relationship: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "entity": self.entity.to_dict(),
            "reason": self.reason,
            "confidence": self.confidence.value,
            "sourceRelationship": self.source_relationship,
        }
