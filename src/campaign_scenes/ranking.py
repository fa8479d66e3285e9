"""Keep the best-confidence record per key."""

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

from campaign_scenes.models import Confidence

T = TypeVar("T")


class ConfidenceResolver(Generic[T]):
    """Keyed map that only ever upgrades a stored payload to a strictly better confidence.

    Insertion order is kept, so ties within a confidence tier rank in the
    order their keys were first seen.
    """

    def __init__(self) -> None:
        self._best: dict[Hashable, tuple[Confidence, T]] = {}

    def offer(self, key: Hashable, confidence: Confidence, payload: T) -> bool:
        """Store ``payload`` if ``key`` is new or ``confidence`` beats the stored one.

        Returns:
            True if the payload was stored
        """
        existing = self._best.get(key)
        if existing is not None and not confidence.is_better_than(existing[0]):
            return False
        self._best[key] = (confidence, payload)
        return True

    def get(self, key: Hashable) -> T | None:
        entry = self._best.get(key)
        return entry[1] if entry is not None else None

    def confidence_of(self, key: Hashable) -> Confidence | None:
        entry = self._best.get(key)
        return entry[0] if entry is not None else None

    def __contains__(self, key: object) -> bool:
        return key in self._best

    def __len__(self) -> int:
        return len(self._best)

    def ranked(self) -> list[T]:
        """Return payloads ordered high, medium, low. The sort is stable."""
        entries = sorted(self._best.values(), key=lambda entry: entry[0].rank)
        return [payload for _, payload in entries]


def resolve_best(items: Iterable[tuple[Hashable, Confidence, T]]) -> list[T]:
    """Collapse (key, confidence, payload) triples to one best payload per key, ranked."""
    resolver: ConfidenceResolver[T] = ConfidenceResolver()
    for key, confidence, payload in items:
        resolver.offer(key, confidence, payload)
    return resolver.ranked()
