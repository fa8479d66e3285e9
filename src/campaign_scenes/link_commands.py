"""Link management commands for the campaign scenes CLI."""

from cyclopts import App

link_app = App(name="link", help="Manage relationships between entities")


@link_app.command
def add(
    source_id: str,
    *target_ids: str,
    type: str = "knows",
    bidirectional: bool = False,
) -> None:
    """Add links from source entity to target entities."""
    from campaign_scenes.cli import get_backend

    backend = get_backend()
    backend.add_link(source_id, list(target_ids), type, bidirectional=bidirectional)
    print(f"Added {len(target_ids)} {type} link(s) from {source_id}")


@link_app.command
def remove(
    source_id: str,
    *target_ids: str,
    type: str = "knows",
) -> None:
    """Remove links from source entity to target entities."""
    from campaign_scenes.cli import get_backend

    backend = get_backend()
    backend.remove_link(source_id, list(target_ids), type)
    print(f"Removed {type} link(s) from {source_id}")


@link_app.command(name="list")
def list_links(
    entity_id: str,
    type: str | None = None,
) -> None:
    """List all outbound links for an entity."""
    from campaign_scenes.cli import get_backend

    backend = get_backend()
    links = backend.list_links(entity_id, type)

    if not links:
        print(f"No links found for entity {entity_id}")
        return

    print(f"Links for entity {entity_id}:\n")
    for link in links:
        print(f"  {entity_id} --[{link.relationship}]--> {link.target_id}")


@link_app.command
def incoming(entity_id: str) -> None:
    """List entities that link to an entity."""
    from campaign_scenes.cli import get_backend

    backend = get_backend()
    sources = backend.get_entities_linking_to(entity_id)

    if not sources:
        print(f"No entities link to {entity_id}")
        return

    print(f"Entities linking to {entity_id}:\n")
    for source in sources:
        for link in source.links:
            if link.target_id == entity_id:
                print(f"  {source.id} --[{link.relationship}]--> {entity_id}")
