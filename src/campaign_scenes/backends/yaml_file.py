"""Campaign backend stored in a single YAML file."""

from pathlib import Path
from typing import Any

import structlog
import yaml

from campaign_scenes.backends.memory import MemoryBackend
from campaign_scenes.models import Entity

logger = structlog.get_logger()


class YamlFileBackend(MemoryBackend):
    """Entity graph loaded from, and saved back to, a YAML campaign file.

    The file holds a single ``entities`` list. A missing file is treated as an
    empty campaign and is created on the first mutation.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize YAML file backend.

        Args:
            path: Path to the campaign file
        """
        self.path = Path(path)
        logger.debug("Initializing YAML file backend", path=str(self.path))
        super().__init__(self._load())
        logger.info("YAML file backend initialized", path=str(self.path), count=len(self.entities))

    def _load(self) -> list[Entity]:
        if not self.path.exists():
            logger.debug("Campaign file does not exist, starting empty", path=str(self.path))
            return []

        try:
            with open(self.path, "r") as f:
                document: dict[str, Any] = yaml.safe_load(f) or {}
            return [Entity.from_dict(item) for item in document.get("entities") or []]
        except (OSError, yaml.YAMLError, KeyError, TypeError, AttributeError) as e:
            logger.error("Failed to load campaign", path=str(self.path), error=str(e))
            raise ValueError(f"Failed to load campaign from {self.path}: {e}") from e

    def _save(self) -> None:
        document = {"entities": [entity.to_dict() for entity in self.entities.values()]}
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                yaml.safe_dump(document, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
            logger.debug("Campaign saved", path=str(self.path), count=len(self.entities))
        except OSError as e:
            logger.error("Failed to save campaign", path=str(self.path), error=str(e))
            raise ValueError(f"Failed to save campaign to {self.path}: {e}") from e

    def _changed(self) -> None:
        self._save()

    def reload(self) -> None:
        """Discard in-memory state and re-read the campaign file."""
        self.entities = {entity.id: entity for entity in self._load()}
