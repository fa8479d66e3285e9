"""Tests for confidence resolution."""

from campaign_scenes.models import Confidence
from campaign_scenes.ranking import ConfidenceResolver, resolve_best


def test_new_key_is_stored() -> None:
    """Test that the first offer for a key is kept."""
    resolver: ConfidenceResolver[str] = ConfidenceResolver()
    assert resolver.offer("a", Confidence.LOW, "a-low")
    assert "a" in resolver
    assert resolver.get("a") == "a-low"
    assert resolver.confidence_of("a") is Confidence.LOW


def test_better_confidence_replaces() -> None:
    """Test upgrading a stored payload."""
    resolver: ConfidenceResolver[str] = ConfidenceResolver()
    resolver.offer("a", Confidence.LOW, "a-low")
    assert resolver.offer("a", Confidence.HIGH, "a-high")
    assert resolver.get("a") == "a-high"
    assert len(resolver) == 1


def test_ties_and_worse_are_dropped() -> None:
    """Test that equal or worse offers never replace the stored payload."""
    resolver: ConfidenceResolver[str] = ConfidenceResolver()
    resolver.offer("a", Confidence.MEDIUM, "first")
    assert not resolver.offer("a", Confidence.MEDIUM, "second")
    assert not resolver.offer("a", Confidence.LOW, "third")
    assert resolver.get("a") == "first"


def test_missing_key() -> None:
    """Test lookups for keys never offered."""
    resolver: ConfidenceResolver[str] = ConfidenceResolver()
    assert resolver.get("nope") is None
    assert resolver.confidence_of("nope") is None
    assert resolver.ranked() == []


def test_ranked_is_stable_within_tier() -> None:
    """Test ordering by tier, then by first insertion."""
    result = resolve_best(
        [
            ("c", Confidence.LOW, "c"),
            ("a", Confidence.HIGH, "a"),
            ("b", Confidence.MEDIUM, "b"),
            ("d", Confidence.HIGH, "d"),
            ("c", Confidence.MEDIUM, "c-upgraded"),
        ]
    )
    assert result == ["a", "d", "c-upgraded", "b"]
