"""
Connection Sampling.

Bounds the work done on large connection lists:
- If the list fits in max_connections: return all
- Otherwise: take 50% most recent + 50% most active, deduplicated
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Literal, Optional, Sequence, Set, Union

from warmpath.common.config import Config
from warmpath.common.types import Profile


@dataclass
class ConnectionSample:
    """Sampled connections and how they were chosen."""

    sampled: List[Profile]
    strategy: Literal["all", "mixed"]
    original_count: int
    sampled_count: int


def _recency_key(profile: Profile) -> float:
    connected_at: Optional[datetime] = profile.metadata.connected_at
    if connected_at is None:
        return float("-inf")
    if connected_at.tzinfo is None:
        connected_at = connected_at.replace(tzinfo=timezone.utc)
    return connected_at.timestamp()


def _activity_key(profile: Profile) -> float:
    score = profile.metadata.activity_score
    return float("-inf") if score is None else score


def sample_connections(
    connections: Sequence[Profile],
    max_connections: Optional[int] = None,
) -> ConnectionSample:
    """
    Sample connections for performance.

    Profiles without a connection date or activity score sort last; ties keep
    their input order.

    Args:
        connections: Full list of connections
        max_connections: Maximum connections to keep (default: Config.MAX_SAMPLED_CONNECTIONS)

    Returns:
        ConnectionSample with the sampled connections and counts
    """
    if max_connections is None:
        max_connections = Config.MAX_SAMPLED_CONNECTIONS

    connections = list(connections)
    if len(connections) <= max_connections:
        return ConnectionSample(
            sampled=connections,
            strategy="all",
            original_count=len(connections),
            sampled_count=len(connections),
        )

    half_size = max_connections // 2
    indexed = list(enumerate(connections))
    by_recent = sorted(indexed, key=lambda item: _recency_key(item[1]), reverse=True)[:half_size]
    by_active = sorted(indexed, key=lambda item: _activity_key(item[1]), reverse=True)[:half_size]

    # Unidentified profiles are only deduplicated by list position
    sampled: List[Profile] = []
    seen: Set[Union[str, int]] = set()
    for position, profile in by_recent + by_active:
        dedup_key = profile.identity or position
        if dedup_key in seen:
            continue
        seen.add(dedup_key)
        sampled.append(profile)

    return ConnectionSample(
        sampled=sampled,
        strategy="mixed",
        original_count=len(connections),
        sampled_count=len(sampled),
    )
