"""CLI for campaign scenes."""

import json
from typing import Annotated, Literal

import structlog
from cyclopts import App, Parameter

from campaign_scenes.backend import Backend
from campaign_scenes.backends import YamlFileBackend
from campaign_scenes.config import get_config
from campaign_scenes.config_commands import config_app
from campaign_scenes.link_commands import link_app
from campaign_scenes.models import Confidence
from campaign_scenes.suggestions import SceneSuggestionEngine

logger = structlog.get_logger()

app = App(
    name="scenes",
    help="Campaign Scenes - suggest who is present when a scene is set at a location",
)

app.command(link_app)
app.command(config_app)


def configure_logging(log_level: str) -> None:
    """Configure structlog with the specified log level."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(min_level=log_level.lower()))


def get_backend() -> Backend:
    """Get the configured backend."""
    config = get_config()
    backend_type = config.get("backend")

    if backend_type == "yaml":
        return YamlFileBackend(config.campaign_path)
    raise ValueError(f"Unknown backend: {backend_type}")


def _split_ids(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


@app.command
def suggest(location_id: str, exclude: str = "", json_: Annotated[bool, Parameter(name="--json")] = False) -> None:
    """Suggest characters and NPCs for a scene at a location.

    Args:
        location_id: ID of the location entity
        exclude: Comma-separated entity IDs already in the scene
        json_: Print suggestions as JSON
    """
    engine = SceneSuggestionEngine(get_backend())
    suggestions = engine.get_scene_suggestions(location_id, exclude_ids=_split_ids(exclude))

    if json_:
        print(json.dumps([s.to_dict() for s in suggestions], indent=2))
        return

    if not suggestions:
        print(f"No suggestions for location {location_id}")
        return

    print(f"Found {len(suggestions)} suggestion(s):\n")
    for confidence in Confidence:
        tier = [s for s in suggestions if s.confidence is confidence]
        if not tier:
            continue
        print(f"{confidence.value.title()}:")
        for s in tier:
            print(f"  - {s.entity.id} {s.entity.name} ({s.reason})")
        print()


@app.command
def create(entity_type: str, name: str, description: str = "", id: str | None = None) -> None:
    """Create a new entity."""
    backend = get_backend()
    entity = backend.create(entity_type, name, description=description, entity_id=id)
    print(f"Created {entity.type} {entity.id}: {entity.name}")


@app.command
def show(entity_id: str) -> None:
    """Show an entity and its links."""
    backend = get_backend()
    entity = backend.get_by_id(entity_id)
    if entity is None:
        print(f"Entity {entity_id} not found")
        return

    print(f"Entity: {entity.id}")
    print(f"Type: {entity.type}")
    print(f"Name: {entity.name}")
    if entity.description:
        print(f"Description: {entity.description}")
    for link in entity.links:
        print(f"  --[{link.relationship}]--> {link.target_id}")


@app.command(name="list")
def list_entities(type: str | None = None, limit: int | None = None) -> None:
    """List entities, optionally filtered by type."""
    backend = get_backend()
    entities = backend.list_entities(entity_type=type, limit=limit)

    print(f"Found {len(entities)} entity(ies):\n")
    for entity in entities:
        print(f"{entity.id}: {entity.name} [{entity.type}]")


@app.meta.default
def main(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    log_level: Literal["debug", "info", "warning", "error", "critical"] = "critical",
) -> None:
    """Main entry point with global options."""
    configure_logging(log_level)
    app(tokens)


if __name__ == "__main__":
    app.meta()
