"""
Strategy builders and next-step generators.

One builder per strategy type. Builders are pure: the engine decides which
stage fires and hands the builder everything it needs.
"""

from dataclasses import replace
from typing import List, Optional, Sequence

from warmpath.common.types import Profile
from warmpath.intermediary.scorer import IntermediaryCandidate
from warmpath.pathfinder.types import (
    ConnectionPath,
    ConnectionStrategy,
    PathNode,
    PathSearchResult,
    StrategyType,
    node_name,
)
from warmpath.similarity.acceptance_estimator import (
    estimate_acceptance_rate,
    estimate_path_acceptance,
)
from warmpath.similarity.scorer import shared_signals, top_similarities
from warmpath.similarity.types import DetailedSimilarity, SimilarityBreakdown


def _signals_text(similarity: DetailedSimilarity) -> str:
    signals = shared_signals(similarity)
    if signals:
        return ", ".join(signals)
    return f"shared {top_similarities(similarity.breakdown)}"


def append_notes(strategy: ConnectionStrategy, notes: Sequence[str]) -> ConnectionStrategy:
    """Return a copy of the strategy with lookup notes appended to its reasoning."""
    if not notes:
        return strategy
    return replace(strategy, reasoning=f"{strategy.reasoning} ({'; '.join(notes)})")


# ===== NEXT STEPS =====

def generate_mutual_next_steps(path: Sequence[PathNode], target: Profile) -> List[str]:
    if len(path) <= 2:
        return [
            f"Message {target.name} directly (you are already connected)",
            "Reference your shared history in the message",
        ]

    first_intermediary = node_name(path[1])
    steps = [
        f"Message {first_intermediary} (mutual connection)",
        f"Ask for introduction to {target.name}",
        "Mention shared connections in your outreach",
    ]
    if len(path) > 3:
        steps.append("Consider multiple paths to increase success probability")
    return steps


def generate_direct_similarity_next_steps(
    target: Profile, similarity: SimilarityBreakdown
) -> List[str]:
    return [
        f"Direct message {target.name}",
        f"Mention shared {top_similarities(similarity)} in your message",
        "Reference specific recent posts or achievements",
        "Keep message concise (200-250 characters)",
        "Include clear value proposition",
    ]


def generate_intermediary_next_steps(
    candidate: IntermediaryCandidate, target: Profile
) -> List[str]:
    name = candidate.person.name
    if candidate.direction == "outbound":
        return [
            f"Connect with {name} first (if not already connected)",
            "Build relationship by engaging with their posts",
            f"Ask {name} to introduce you to {target.name}",
            f"Alternative: Message {target.name} mentioning {name} as a mutual connection",
        ]

    return [
        f"Reach out to {name} first",
        f"Mention similarities with {name} ({candidate.source_to_intermediary:.0%} match)",
        "Build relationship before asking for introduction",
        f"After connection is established, ask for introduction to {target.name}",
    ]


def generate_cold_similarity_next_steps(
    target: Profile, similarity: SimilarityBreakdown
) -> List[str]:
    return [
        f"Research {target.name}'s recent posts and articles",
        "Craft highly personalized message (200-250 characters)",
        f"Mention specific shared interests: {top_similarities(similarity)}",
        "Include clear value proposition",
        "Follow up with engagement on their content",
    ]


def generate_cold_outreach_next_steps(
    target: Profile, similarity: SimilarityBreakdown
) -> List[str]:
    return [
        f"Build your profile first (add relevant skills matching {target.name}'s domain)",
        f"Engage with {target.name}'s content regularly (comment thoughtfully, share)",
        "Look for alternative paths via events, webinars, or mutual groups",
        f"Consider joining professional organizations in {target.name}'s industry",
        "Build credibility through content creation in shared interest areas",
        "Highlight any technical overlaps in connection message"
        if similarity.skills > 0.2
        else "Focus on value proposition rather than commonalities",
    ]


# ===== STRATEGY BUILDERS =====

def build_mutual_strategy(result: PathSearchResult, target: Profile) -> ConnectionStrategy:
    """Wrap a found path; confidence is the path's success probability."""
    path = ConnectionPath(
        nodes=result.path,
        success_probability=result.probability,
        mutual_connections=result.mutual_connections or 0,
    )
    intermediaries = max(len(path.nodes) - 2, 0)
    label = "intermediary" if intermediaries == 1 else "intermediaries"

    acceptance = estimate_path_acceptance(path.hop_count, result.probability)

    return ConnectionStrategy(
        type=StrategyType.MUTUAL,
        confidence=result.probability,
        estimated_acceptance_rate=acceptance.acceptance_rate,
        acceptance=acceptance,
        reasoning=(
            f"Found path via {intermediaries} {label} "
            f"with {path.mutual_connections} mutual connections"
        ),
        next_steps=tuple(generate_mutual_next_steps(path.nodes, target)),
        path=path,
    )


def build_direct_similarity_strategy(
    target: Profile, similarity: DetailedSimilarity, reasoning_prefix: str = ""
) -> ConnectionStrategy:
    overall = similarity.overall
    acceptance = estimate_acceptance_rate(overall)
    return ConnectionStrategy(
        type=StrategyType.DIRECT_SIMILARITY,
        confidence=overall,
        estimated_acceptance_rate=acceptance.acceptance_rate,
        acceptance=acceptance,
        reasoning=(
            f"{reasoning_prefix}Very high profile similarity ({overall:.1%}): "
            f"{_signals_text(similarity)}"
        ),
        next_steps=tuple(generate_direct_similarity_next_steps(target, similarity.breakdown)),
        direct_similarity=similarity.breakdown,
    )


def build_intermediary_strategy(
    candidate: IntermediaryCandidate,
    target: Profile,
    low_confidence: bool = False,
    reasoning_prefix: str = "",
) -> ConnectionStrategy:
    reasoning = f"{reasoning_prefix}{candidate.reasoning}"
    if low_confidence:
        reasoning += " (Note: Limited similarity - consider building relationship first)"

    return ConnectionStrategy(
        type=StrategyType.INTERMEDIARY,
        confidence=candidate.score,
        estimated_acceptance_rate=candidate.estimated_acceptance,
        acceptance=candidate.acceptance,
        reasoning=reasoning,
        next_steps=tuple(generate_intermediary_next_steps(candidate, target)),
        intermediary=candidate,
        low_confidence=low_confidence,
    )


def build_cold_similarity_strategy(
    target: Profile, similarity: DetailedSimilarity, reasoning_prefix: str = ""
) -> ConnectionStrategy:
    overall = similarity.overall
    acceptance = estimate_acceptance_rate(overall)
    return ConnectionStrategy(
        type=StrategyType.COLD_SIMILARITY,
        confidence=overall,
        estimated_acceptance_rate=acceptance.acceptance_rate,
        acceptance=acceptance,
        reasoning=(
            f"{reasoning_prefix}Moderate profile similarity ({overall:.1%}): "
            f"{_signals_text(similarity)}. Cold outreach with personalization recommended."
        ),
        next_steps=tuple(generate_cold_similarity_next_steps(target, similarity.breakdown)),
        direct_similarity=similarity.breakdown,
    )


def build_none_strategy(
    target: Profile, similarity: Optional[DetailedSimilarity] = None
) -> ConnectionStrategy:
    """Last resort: lowest acceptance tier with generic cold-outreach steps."""
    breakdown = similarity.breakdown if similarity else SimilarityBreakdown()
    acceptance = estimate_acceptance_rate(0.0)
    reasoning = (
        f"Limited profile overlap ({breakdown.overall:.1%}). "
        "Recommended approach: value-first cold outreach with strong personalization."
    )

    return ConnectionStrategy(
        type=StrategyType.NONE,
        confidence=breakdown.overall,
        estimated_acceptance_rate=acceptance.acceptance_rate,
        acceptance=acceptance,
        reasoning=reasoning,
        next_steps=tuple(generate_cold_outreach_next_steps(target, breakdown)),
        direct_similarity=breakdown,
        low_confidence=True,
    )
