"""Backend implementations."""

from campaign_scenes.backends.memory import MemoryBackend
from campaign_scenes.backends.yaml_file import YamlFileBackend

__all__ = ["MemoryBackend", "YamlFileBackend"]
