"""
Intermediary Scorer.

Find and score the best bridge people when no mutual path exists.

Two directions:
1. Outbound: your connections who are SIMILAR to the target (you ask them)
2. Inbound: the target's connections who are SIMILAR to you (you reach them first)

Path strength is the geometric mean of both similarity links, so both links
must be strong:
- Path (0.9, 0.6) gets sqrt(0.54) = 0.73
- Path (0.75, 0.75) gets sqrt(0.56) = 0.75 (better!)
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, Sequence

from warmpath.common.config import Config
from warmpath.common.types import Profile
from warmpath.intermediary.cache import SimilarityCache
from warmpath.intermediary.sampler import sample_connections
from warmpath.similarity.acceptance_estimator import estimate_acceptance_rate
from warmpath.similarity.scorer import calculate_profile_similarity
from warmpath.similarity.types import AcceptanceEstimate, SimilarityBreakdown, SimilarityConfig

logger = logging.getLogger(__name__)

Direction = Literal["outbound", "inbound"]

# Outbound paths are easier: you control the first outreach
DIRECTION_MULTIPLIERS: Dict[str, float] = {"outbound": 0.8, "inbound": 0.6}

# Inbound candidates have to be reached before they can introduce you
INBOUND_ACCEPTANCE_FACTOR = 0.75

# Reserved for betweenness-centrality input; constant pass-through for now
BRIDGE_QUALITY = 1.0


@dataclass(frozen=True)
class IntermediaryCandidate:
    """A scored bridge person between source and target."""

    person: Profile
    source_to_intermediary: float
    intermediary_to_target: float
    path_strength: float
    bridge_quality: float
    score: float
    direction: Direction
    estimated_acceptance: float
    acceptance: AcceptanceEstimate
    reasoning: str

    @property
    def bridging_similarity(self) -> float:
        """The link the candidate bridges: to the target (outbound) or to you (inbound)."""
        if self.direction == "outbound":
            return self.intermediary_to_target
        return self.source_to_intermediary

    def to_dict(self) -> Dict[str, Any]:
        return {
            "person": self.person.model_dump(mode="json"),
            "source_to_intermediary": self.source_to_intermediary,
            "intermediary_to_target": self.intermediary_to_target,
            "path_strength": self.path_strength,
            "bridge_quality": self.bridge_quality,
            "score": self.score,
            "direction": self.direction,
            "estimated_acceptance": self.estimated_acceptance,
            "acceptance": self.acceptance.to_dict(),
            "reasoning": self.reasoning,
        }


def score_intermediary(
    source: Profile,
    intermediary: Profile,
    target: Profile,
    direction: Direction,
    sim_from_source: Optional[float] = None,
    sim_to_target: Optional[float] = None,
    config: Optional[SimilarityConfig] = None,
) -> IntermediaryCandidate:
    """
    Score a single intermediary candidate.

    Args:
        source: Source user
        intermediary: Intermediary candidate
        target: Target user
        direction: 'outbound' (your connection) or 'inbound' (target's connection)
        sim_from_source: Precomputed similarity source → intermediary
        sim_to_target: Precomputed similarity intermediary → target
        config: Similarity configuration used when a link must be computed

    Returns:
        IntermediaryCandidate with score and metadata
    """
    if sim_from_source is None:
        sim_from_source = calculate_profile_similarity(source, intermediary, config).overall
    if sim_to_target is None:
        sim_to_target = calculate_profile_similarity(intermediary, target, config).overall

    path_strength = math.sqrt(sim_from_source * sim_to_target)
    score = path_strength * DIRECTION_MULTIPLIERS[direction] * BRIDGE_QUALITY

    acceptance = estimate_acceptance_rate(path_strength)
    estimated_acceptance = acceptance.acceptance_rate
    if direction == "inbound":
        estimated_acceptance *= INBOUND_ACCEPTANCE_FACTOR

    if direction == "outbound":
        reasoning = (
            f"{intermediary.name} is similar to {target.name} "
            f"({sim_to_target:.0%} match). You can introduce them!"
        )
    else:
        reasoning = (
            f"{intermediary.name} is similar to you ({sim_from_source:.0%} match) "
            f"and connected to {target.name}. Connect with them first!"
        )

    return IntermediaryCandidate(
        person=intermediary,
        source_to_intermediary=sim_from_source,
        intermediary_to_target=sim_to_target,
        path_strength=path_strength,
        bridge_quality=BRIDGE_QUALITY,
        score=score,
        direction=direction,
        estimated_acceptance=estimated_acceptance,
        acceptance=acceptance,
        reasoning=reasoning,
    )


def _similarity(
    p1: Profile,
    p2: Profile,
    config: Optional[SimilarityConfig],
    cache: Optional[SimilarityCache],
) -> SimilarityBreakdown:
    # Profiles without a stable identifier are never cached
    if cache is None or p1.identity is None or p2.identity is None:
        return calculate_profile_similarity(p1, p2, config)

    cached = cache.get(p1.identity, p2.identity)
    if cached is not None:
        return cached
    similarity = calculate_profile_similarity(p1, p2, config)
    cache.set(p1.identity, p2.identity, similarity)
    return similarity


def rank_candidates(candidates: List[IntermediaryCandidate]) -> List[IntermediaryCandidate]:
    """Sort by score descending, ties broken by higher path strength."""
    return sorted(candidates, key=lambda c: (c.score, c.path_strength), reverse=True)


def score_all_intermediaries(
    source: Profile,
    target: Profile,
    source_connections: Sequence[Profile],
    target_connections: Sequence[Profile] = (),
    config: Optional[SimilarityConfig] = None,
    cache: Optional[SimilarityCache] = None,
    max_connections: Optional[int] = None,
) -> List[IntermediaryCandidate]:
    """Score every sampled outbound and inbound candidate, ranked best first."""
    all_candidates: List[IntermediaryCandidate] = []

    # Outbound: your connections who are similar to the target
    for connection in sample_connections(source_connections, max_connections).sampled:
        if connection.is_same_person(target) or connection.is_same_person(source):
            continue
        sim_from_you = _similarity(source, connection, config, cache).overall
        sim_to_target = _similarity(connection, target, config, cache).overall
        all_candidates.append(
            score_intermediary(source, connection, target, "outbound", sim_from_you, sim_to_target)
        )

    # Inbound: target's connections who are similar to you
    for connection in sample_connections(target_connections, max_connections).sampled:
        if connection.is_same_person(source) or connection.is_same_person(target):
            continue
        sim_to_you = _similarity(connection, source, config, cache).overall
        sim_to_target = _similarity(connection, target, config, cache).overall
        all_candidates.append(
            score_intermediary(source, connection, target, "inbound", sim_to_you, sim_to_target)
        )

    return rank_candidates(all_candidates)


def find_best_intermediaries(
    source: Profile,
    target: Profile,
    source_connections: Sequence[Profile],
    target_connections: Sequence[Profile] = (),
    config: Optional[SimilarityConfig] = None,
    cache: Optional[SimilarityCache] = None,
    max_connections: Optional[int] = None,
    max_results: Optional[int] = None,
    good_threshold: Optional[float] = None,
) -> List[IntermediaryCandidate]:
    """
    Find the best intermediaries between source and target.

    Returns the top candidates whose bridging link clears the good threshold.
    When none does, returns the single best candidate (low confidence); when
    there are no connections at all, returns an empty list.

    Args:
        source: Your profile
        target: Target person's profile
        source_connections: Your 1st-degree connections
        target_connections: Target's 1st-degree connections
        config: Similarity configuration
        cache: Optional similarity cache shared across calls
        max_connections: Sample size per connection list
        max_results: Maximum candidates returned (default: Config.MAX_INTERMEDIARIES)
        good_threshold: Bridging similarity a candidate must exceed to count as good

    Returns:
        Candidates sorted by score
    """
    if max_results is None:
        max_results = Config.MAX_INTERMEDIARIES
    if good_threshold is None:
        good_threshold = Config.INTERMEDIARY_GOOD_THRESHOLD

    ranked = score_all_intermediaries(
        source, target, source_connections, target_connections, config, cache, max_connections
    )
    good = [c for c in ranked if c.bridging_similarity > good_threshold]

    if good:
        return good[:max_results]

    if ranked:
        logger.info(
            "No strong intermediaries among %d candidates, returning best available (low confidence)",
            len(ranked),
        )
        return ranked[:1]

    return []
