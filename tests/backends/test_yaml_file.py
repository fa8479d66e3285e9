"""Tests for the YAML file backend."""

from pathlib import Path

import pytest
import yaml

from campaign_scenes.backends.yaml_file import YamlFileBackend
from campaign_scenes.models import Confidence
from campaign_scenes.suggestions import get_scene_suggestions

CAMPAIGN = """\
entities:
  - id: loc-bar
    type: location
    name: Joe's Bar
  - id: npc-joe
    type: npc
    name: Joe the Barkeep
    links:
      - target_id: loc-bar
        target_type: location
        relationship: located_at
  - id: npc-brutus
    type: npc
    name: Brutus the Bouncer
    links:
      - target_id: npc-joe
        relationship: serves
"""


@pytest.fixture
def campaign_file(tmp_path: Path) -> Path:
    path = tmp_path / "campaign.yaml"
    path.write_text(CAMPAIGN)
    return path


def test_missing_file_is_empty_campaign(tmp_path: Path) -> None:
    """Test that a missing file loads as an empty campaign."""
    backend = YamlFileBackend(tmp_path / "nothing.yaml")
    assert backend.get_all() == []
    assert not (tmp_path / "nothing.yaml").exists()


def test_load_campaign(campaign_file: Path) -> None:
    """Test loading entities and links."""
    backend = YamlFileBackend(campaign_file)

    joe = backend.get_by_id("npc-joe")
    assert joe is not None
    assert joe.links[0].relationship == "located_at"
    assert joe.links[0].bidirectional is False
    assert backend.get_by_id("npc-brutus").links[0].target_type == ""


def test_suggestions_from_file(campaign_file: Path) -> None:
    """Test running the engine against a campaign file."""
    result = get_scene_suggestions(YamlFileBackend(campaign_file), "loc-bar")
    assert [(s.entity.id, s.confidence) for s in result] == [
        ("npc-joe", Confidence.HIGH),
        ("npc-brutus", Confidence.MEDIUM),
    ]


def test_mutations_are_saved(tmp_path: Path) -> None:
    """Test that creating and linking write the file."""
    path = tmp_path / "sub" / "campaign.yaml"
    backend = YamlFileBackend(path)
    backend.create("location", "Back Room", entity_id="loc-back-room")
    backend.create("npc", "Shadowy Figure", entity_id="npc-shadowy")
    backend.add_link("npc-shadowy", ["loc-back-room"], "located_at")

    document = yaml.safe_load(path.read_text())
    assert [e["id"] for e in document["entities"]] == ["loc-back-room", "npc-shadowy"]
    assert document["entities"][1]["links"][0]["target_type"] == "location"

    reloaded = YamlFileBackend(path)
    assert reloaded.get_by_id("npc-shadowy").links[0].target_id == "loc-back-room"


def test_reload(campaign_file: Path) -> None:
    """Test picking up external edits."""
    backend = YamlFileBackend(campaign_file)
    campaign_file.write_text("entities: []\n")
    backend.reload()
    assert backend.get_all() == []


def test_malformed_file(tmp_path: Path) -> None:
    """Test that unreadable campaign data raises ValueError."""
    path = tmp_path / "campaign.yaml"
    path.write_text("entities:\n  - name: no id here\n")

    with pytest.raises(ValueError, match="Failed to load campaign"):
        YamlFileBackend(path)


def test_invalid_yaml(tmp_path: Path) -> None:
    """Test that invalid YAML raises ValueError."""
    path = tmp_path / "campaign.yaml"
    path.write_text("entities: [unclosed\n")

    with pytest.raises(ValueError, match="Failed to load campaign"):
        YamlFileBackend(path)
